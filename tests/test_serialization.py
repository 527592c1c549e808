"""Tests for the structured form and the HTML export."""

import json

import pytest
from bs4 import BeautifulSoup

from page_builder.canvas.serialization import (
    deserialize_elements, from_json, serialize_elements, to_json
)
from page_builder.models.errors import DocumentFormatError
from page_builder.services.html_exporter import HtmlExporter


@pytest.fixture
def populated(document):
    for kind in ("heading", "paragraph", "button", "image", "divider", "card", "section", "badge"):
        document.insert(kind)
    document.update_properties(document.ids[0], {"text": "Hello", "level": "h2"})
    return document


def test_structured_form_shape(document):
    heading = document.insert("heading")
    data = serialize_elements(document)
    assert data == [{
        "id": heading,
        "type": "heading",
        "props": {
            "text": "Your Heading Here", "level": "h1", "color": "#e8edf5",
            "fontSize": 36, "fontWeight": "bold", "textAlign": "left",
        },
    }]


def test_round_trip_reproduces_document(populated):
    restored = from_json(to_json(populated))
    assert restored == list(populated)
    assert [element.id for element in restored] == populated.ids
    assert serialize_elements(restored) == serialize_elements(populated)


def test_json_is_human_readable(populated):
    text = to_json(populated)
    assert text.startswith("[\n  {")
    assert json.loads(text)[0]["props"]["text"] == "Hello"


def test_deserialize_rejects_non_lists():
    with pytest.raises(DocumentFormatError):
        deserialize_elements({"id": "el_1"})


def test_deserialize_rejects_unknown_kinds():
    with pytest.raises(DocumentFormatError):
        deserialize_elements([{"id": "el_1", "type": "carousel", "props": {}}])


def test_deserialize_rejects_duplicate_ids():
    data = [
        {"id": "el_1", "type": "heading", "props": {}},
        {"id": "el_1", "type": "divider", "props": {}},
    ]
    with pytest.raises(DocumentFormatError):
        deserialize_elements(data)


def test_from_json_rejects_garbage():
    with pytest.raises(DocumentFormatError):
        from_json("{not json")


def test_button_markup_carries_text_href_and_background(document):
    document.insert("button")
    html = HtmlExporter().export(document)

    soup = BeautifulSoup(html, "html.parser")
    link = soup.find("a")
    assert link is not None
    assert link.get_text() == "Click Me"
    assert link["href"] == "#"
    assert "background:#3b82f6" in link["style"]


def test_export_is_standalone_page_in_document_order(populated):
    html = HtmlExporter().export(populated, title="Portfolio")
    assert html.startswith("<!DOCTYPE html>")

    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.get_text() == "Portfolio"
    assert soup.style is not None
    page = soup.find("div", class_="page")
    tags = [child.name for child in page.find_all(recursive=False)]
    assert tags == ["h2", "p", "a", "img", "hr", "div", "div", "span"]


def test_export_reflects_live_properties(document):
    exporter = HtmlExporter()
    heading = document.insert("heading")
    assert "Your Heading Here" in exporter.export(document)

    document.update_properties(heading, {"text": "Updated", "color": "#abcdef"})
    html = exporter.export(document)
    assert "Updated" in html
    assert "color:#abcdef" in html


def test_section_renders_only_its_container(document):
    document.insert("section")
    fragment = HtmlExporter().render_element(document.elements[0])
    soup = BeautifulSoup(fragment, "html.parser")
    container = soup.find("div")
    assert list(container.children) == []
    assert "background:#0d1420" in container["style"]
    assert "padding:40px" in container["style"]


def test_divider_becomes_horizontal_rule(document):
    document.insert("divider")
    fragment = HtmlExporter().render_element(document.elements[0])
    assert fragment.startswith("<hr ")
    assert "border-top-width:1px" in fragment
    assert "margin:16px 0" in fragment
