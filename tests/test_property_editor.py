"""Tests for the property editor contract."""

import pytest

from page_builder.canvas.property_editor import EMPTY_SELECTION_MESSAGE, PropertyEditor
from page_builder.models.element_models import ElementKind, FieldType
from page_builder.models.errors import InvalidPropertyValueError, UnknownPropertyError


@pytest.fixture
def editor(catalog):
    return PropertyEditor(catalog)


def test_nothing_selected_is_an_empty_state(document, editor):
    panel = editor.panel(document)
    assert panel.empty is True
    assert panel.message == EMPTY_SELECTION_MESSAGE
    assert panel.fields == []
    assert editor.edit(document, "text", "ignored") is False


def test_panel_binds_fields_to_current_values(document, editor):
    document.insert("heading")
    panel = editor.panel(document)

    assert panel.empty is False
    assert panel.kind == ElementKind.HEADING
    bound = {item.field.key: item for item in panel.fields}
    assert list(bound) == ["text", "level", "fontSize", "color", "textAlign"]
    assert bound["fontSize"].value == 36
    assert bound["fontSize"].field.min == 12
    assert bound["fontSize"].field.max == 96
    assert bound["level"].field.options == ("h1", "h2", "h3", "h4")
    assert "fontWeight" not in bound


def test_paragraph_text_is_multiline(document, editor):
    document.insert("paragraph")
    bound = {item.field.key: item.field for item in editor.panel(document).fields}
    assert bound["text"].field_type == FieldType.TEXTAREA


def test_edit_updates_single_key(document, editor):
    heading = document.insert("heading")
    assert editor.edit(document, "color", "#123456") is True

    props = document.get(heading).properties
    assert props["color"] == "#123456"
    assert props["fontSize"] == 36


def test_number_edits_coerce_and_clamp(document, editor):
    heading = document.insert("heading")

    editor.edit(document, "fontSize", "48")
    assert document.get(heading).properties["fontSize"] == 48

    editor.edit(document, "fontSize", 500)
    assert document.get(heading).properties["fontSize"] == 96

    editor.edit(document, "fontSize", 2)
    assert document.get(heading).properties["fontSize"] == 12


def test_fractional_numbers_stay_fractional(document, editor):
    paragraph = document.insert("paragraph")
    editor.edit(document, "lineHeight", "1.5")
    assert document.get(paragraph).properties["lineHeight"] == 1.5


def test_bad_number_is_rejected(document, editor):
    document.insert("divider")
    with pytest.raises(InvalidPropertyValueError):
        editor.edit(document, "thickness", "thick")


def test_select_rejects_unknown_option(document, editor):
    heading = document.insert("heading")
    with pytest.raises(InvalidPropertyValueError):
        editor.edit(document, "textAlign", "justify")
    editor.edit(document, "textAlign", "center")
    assert document.get(heading).properties["textAlign"] == "center"


def test_undeclared_property_has_no_field(document, editor):
    document.insert("divider")
    with pytest.raises(UnknownPropertyError):
        editor.edit(document, "text", "dividers have no text")
