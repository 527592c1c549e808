"""
Element Models for Page Builder
===============================

Models for page elements, element kinds, property editor fields,
drag state and saved layouts.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ElementKind(str, Enum):
    """Closed set of element kinds offered by the palette."""
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BUTTON = "button"
    IMAGE = "image"
    DIVIDER = "divider"
    CARD = "card"
    SECTION = "section"
    BADGE = "badge"


class FieldType(str, Enum):
    """Input type used by the property editor for a property."""
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    COLOR = "color"
    SELECT = "select"


class MoveDirection(str, Enum):
    """Direction for adjacent swaps."""
    UP = "up"
    DOWN = "down"


class DragIntent(str, Enum):
    """What an in-progress drag will do on drop."""
    NEW = "new"    # Dragged from the palette, carries a kind
    MOVE = "move"  # Dragged from the canvas, carries an element id


class PropertyField(BaseModel):
    """One editable property of an element kind."""
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    field_type: FieldType
    min: Optional[float] = None
    max: Optional[float] = None
    options: Optional[Tuple[str, ...]] = None


class CatalogEntry(BaseModel):
    """Palette entry: how a kind is displayed and instantiated."""
    model_config = ConfigDict(frozen=True)

    kind: ElementKind
    label: str
    icon: str
    default_properties: Dict[str, Any]
    fields: Tuple[PropertyField, ...] = ()


class Element(BaseModel):
    """
    A positioned, typed content unit of a page.

    Serialized as ``{"id", "type", "props"}`` so exported layouts keep the
    shape the editor front end reads.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str
    kind: ElementKind = Field(alias="type")
    properties: Dict[str, Any] = Field(default_factory=dict, alias="props")
    # Only sections carry children; reserved for nesting, never populated
    children: Optional[List["Element"]] = None


class DragState(BaseModel):
    """An in-progress drag operation."""
    intent: DragIntent
    kind: Optional[ElementKind] = None
    element_id: Optional[str] = None


class BoundField(BaseModel):
    """A property field bound to the selected element's current value."""
    field: PropertyField
    value: Any = None


class EditorPanel(BaseModel):
    """What the property panel shows for the current selection."""
    empty: bool
    message: Optional[str] = None
    element_id: Optional[str] = None
    kind: Optional[ElementKind] = None
    fields: List[BoundField] = Field(default_factory=list)


class SavedLayout(BaseModel):
    """A named, timestamped snapshot of a document."""
    id: str
    name: str
    elements: List[Element] = Field(default_factory=list)
    saved_at: datetime = Field(default_factory=datetime.now)
