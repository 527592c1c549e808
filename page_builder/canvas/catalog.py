"""
Element Catalog
===============

Read-only registry of the element kinds the palette offers: display label,
icon, default property bag and property editor fields for each kind.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Union

from ..models.element_models import CatalogEntry, ElementKind, FieldType, PropertyField
from ..models.errors import UnknownElementKindError

logger = logging.getLogger(__name__)


ALIGN_OPTIONS = ("left", "center", "right")
HEADING_LEVELS = ("h1", "h2", "h3", "h4")
OBJECT_FIT_OPTIONS = ("cover", "contain", "fill", "none")


def copy_properties(value: Any) -> Any:
    """
    Structural deep copy of a property bag.

    Property values are strings, numbers, booleans, or lists/dicts of
    those; no cyclic references are expected.
    """
    if isinstance(value, dict):
        return {key: copy_properties(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [copy_properties(item) for item in value]
    return value


def _text(key: str, label: str) -> PropertyField:
    return PropertyField(key=key, label=label, field_type=FieldType.TEXT)


def _textarea(key: str, label: str) -> PropertyField:
    return PropertyField(key=key, label=label, field_type=FieldType.TEXTAREA)


def _number(key: str, label: str, low: float, high: float) -> PropertyField:
    return PropertyField(key=key, label=label, field_type=FieldType.NUMBER, min=low, max=high)


def _color(key: str, label: str) -> PropertyField:
    return PropertyField(key=key, label=label, field_type=FieldType.COLOR)


def _select(key: str, label: str, options: Iterable[str]) -> PropertyField:
    return PropertyField(key=key, label=label, field_type=FieldType.SELECT, options=tuple(options))


def default_entries() -> List[CatalogEntry]:
    """Build the standard entries; each call returns new objects."""
    return [
        CatalogEntry(
            kind=ElementKind.HEADING,
            label="Heading",
            icon="H1",
            default_properties={
                "text": "Your Heading Here",
                "level": "h1",
                "color": "#e8edf5",
                "fontSize": 36,
                "fontWeight": "bold",
                "textAlign": "left",
            },
            fields=(
                _text("text", "Text"),
                _select("level", "Tag", HEADING_LEVELS),
                _number("fontSize", "Font Size", 12, 96),
                _color("color", "Color"),
                _select("textAlign", "Align", ALIGN_OPTIONS),
            ),
        ),
        CatalogEntry(
            kind=ElementKind.PARAGRAPH,
            label="Paragraph",
            icon="¶",
            default_properties={
                "text": "Add your paragraph text here. Click to edit this content.",
                "color": "#8a9bb5",
                "fontSize": 16,
                "textAlign": "left",
                "lineHeight": 1.7,
            },
            fields=(
                _textarea("text", "Text"),
                _number("fontSize", "Font Size", 10, 48),
                _color("color", "Color"),
                _select("textAlign", "Align", ALIGN_OPTIONS),
                _number("lineHeight", "Line Height", 1, 3),
            ),
        ),
        CatalogEntry(
            kind=ElementKind.BUTTON,
            label="Button",
            icon="BTN",
            default_properties={
                "text": "Click Me",
                "bg": "#3b82f6",
                "color": "#ffffff",
                "fontSize": 14,
                "borderRadius": 8,
                "padding": "12px 24px",
                "href": "#",
            },
            fields=(
                _text("text", "Label"),
                _color("bg", "Background"),
                _color("color", "Text Color"),
                _number("borderRadius", "Border Radius", 0, 50),
                _number("fontSize", "Font Size", 10, 32),
                _text("href", "Link (href)"),
            ),
        ),
        CatalogEntry(
            kind=ElementKind.IMAGE,
            label="Image",
            icon="IMG",
            default_properties={
                "src": "https://picsum.photos/seed/portfolio/600/300",
                "alt": "Image",
                "width": "100%",
                "height": 200,
                "borderRadius": 8,
                "objectFit": "cover",
            },
            fields=(
                _text("src", "URL"),
                _text("alt", "Alt Text"),
                _number("height", "Height (px)", 50, 800),
                _number("borderRadius", "Border Radius", 0, 50),
                _select("objectFit", "Object Fit", OBJECT_FIT_OPTIONS),
            ),
        ),
        CatalogEntry(
            kind=ElementKind.DIVIDER,
            label="Divider",
            icon="—",
            default_properties={"color": "#1f2d40", "thickness": 1, "margin": 16},
            fields=(
                _color("color", "Color"),
                _number("thickness", "Thickness (px)", 1, 10),
                _number("margin", "Margin (px)", 0, 80),
            ),
        ),
        CatalogEntry(
            kind=ElementKind.CARD,
            label="Card",
            icon="□",
            default_properties={
                "title": "Card Title",
                "body": "Card content goes here.",
                "bg": "#111827",
                "borderColor": "#1f2d40",
                "borderRadius": 12,
                "padding": 24,
                "titleColor": "#e8edf5",
                "bodyColor": "#8a9bb5",
            },
            fields=(
                _text("title", "Title"),
                _textarea("body", "Body"),
                _color("bg", "Background"),
                _color("borderColor", "Border Color"),
                _number("borderRadius", "Border Radius", 0, 40),
                _number("padding", "Padding", 8, 80),
            ),
        ),
        CatalogEntry(
            kind=ElementKind.SECTION,
            label="Section",
            icon="[ ]",
            default_properties={"bg": "#0d1420", "padding": 40, "borderRadius": 12},
            fields=(
                _color("bg", "Background"),
                _number("padding", "Padding", 0, 120),
                _number("borderRadius", "Border Radius", 0, 40),
            ),
        ),
        CatalogEntry(
            kind=ElementKind.BADGE,
            label="Badge",
            icon="⬭",
            default_properties={
                "text": "New",
                "bg": "rgba(59,130,246,0.15)",
                "color": "#60a5fa",
                "borderColor": "#3b82f6",
                "fontSize": 12,
                "borderRadius": 999,
            },
            fields=(
                _text("text", "Text"),
                # rgba values do not fit a color picker
                _text("bg", "Background"),
                _color("color", "Text Color"),
                _color("borderColor", "Border Color"),
                _number("borderRadius", "Border Radius", 0, 999),
            ),
        ),
    ]


class ElementCatalog:
    """
    Registry of element kinds, keyed by kind, in palette order.

    Entries are copied in and copied out, so neither the caller that built
    the catalog nor one that looks an entry up can change its defaults.
    """

    def __init__(self, entries: Iterable[CatalogEntry]):
        self._entries: Dict[ElementKind, CatalogEntry] = {}
        for entry in entries:
            self._entries[entry.kind] = entry.model_copy(deep=True)

    def _lookup(self, kind: Union[ElementKind, str]) -> CatalogEntry:
        try:
            return self._entries[ElementKind(kind)]
        except (KeyError, ValueError):
            raise UnknownElementKindError(kind) from None

    def get(self, kind: Union[ElementKind, str]) -> CatalogEntry:
        """Look up a kind; raises UnknownElementKindError if absent."""
        return self._lookup(kind).model_copy(deep=True)

    def default_properties(self, kind: Union[ElementKind, str]) -> Dict[str, Any]:
        """Fresh copy of a kind's default property bag."""
        return copy_properties(self._lookup(kind).default_properties)

    def entries(self) -> List[CatalogEntry]:
        return [entry.model_copy(deep=True) for entry in self._entries.values()]

    def __contains__(self, kind) -> bool:
        try:
            return ElementKind(kind) in self._entries
        except ValueError:
            return False

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)


def build_default_catalog() -> ElementCatalog:
    """Create the standard eight-kind catalog."""
    catalog = ElementCatalog(default_entries())
    logger.debug(f"[CATALOG] Built catalog with {len(catalog)} kinds")
    return catalog
