"""
Property Editor
===============

Field set for the selected element, derived from its kind, and single-key
edits routed through the document's property merge.
"""

import logging
from typing import Any, List, Optional, Union

from ..models.element_models import BoundField, EditorPanel, Element, FieldType, PropertyField
from ..models.errors import InvalidPropertyValueError, UnknownPropertyError
from .catalog import ElementCatalog
from .document import PageDocument

logger = logging.getLogger(__name__)

EMPTY_SELECTION_MESSAGE = "Select an element on the canvas to edit its properties."


def coerce_number(field: PropertyField, value: Any) -> Union[int, float]:
    """Convert raw input to a number within the field's bounds."""
    if isinstance(value, bool):
        raise InvalidPropertyValueError(f"'{field.key}' expects a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidPropertyValueError(f"'{field.key}' expects a number, got {value!r}") from None
    if number != number:  # NaN
        raise InvalidPropertyValueError(f"'{field.key}' expects a number, got {value!r}")

    if field.min is not None:
        number = max(number, field.min)
    if field.max is not None:
        number = min(number, field.max)
    return int(number) if number.is_integer() else number


class PropertyEditor:
    """Property panel contract over a document's selection."""

    def __init__(self, catalog: ElementCatalog):
        self.catalog = catalog

    def fields_for(self, element: Element) -> List[PropertyField]:
        return list(self.catalog.get(element.kind).fields)

    def field(self, element: Element, key: str) -> PropertyField:
        for field in self.fields_for(element):
            if field.key == key:
                return field
        raise UnknownPropertyError(element.kind.value, key)

    def panel(self, document: PageDocument) -> EditorPanel:
        element = document.selected_element
        if element is None:
            return EditorPanel(empty=True, message=EMPTY_SELECTION_MESSAGE)
        return EditorPanel(
            empty=False,
            element_id=element.id,
            kind=element.kind,
            fields=[
                BoundField(field=field, value=element.properties.get(field.key))
                for field in self.fields_for(element)
            ],
        )

    def coerce(self, field: PropertyField, value: Any) -> Any:
        if field.field_type == FieldType.NUMBER:
            return coerce_number(field, value)
        if field.field_type == FieldType.SELECT:
            if value not in (field.options or ()):
                raise InvalidPropertyValueError(
                    f"'{field.key}' must be one of {list(field.options or ())}, got {value!r}"
                )
            return value
        if not isinstance(value, str):
            raise InvalidPropertyValueError(f"'{field.key}' expects text, got {value!r}")
        return value

    def edit(self, document: PageDocument, key: str, value: Any) -> bool:
        """
        Set one property on the selected element.

        Returns False when nothing is selected.

        Raises:
            UnknownPropertyError: the kind has no field for ``key``
            InvalidPropertyValueError: value does not fit the field type
        """
        element: Optional[Element] = document.selected_element
        if element is None:
            return False
        field = self.field(element, key)
        coerced = self.coerce(field, value)
        logger.debug(f"[EDITOR] {element.id}.{key} = {coerced!r}")
        return document.update_properties(element.id, {key: coerced})
