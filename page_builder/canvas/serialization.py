"""
Structured Form
===============

Lossless JSON encoding of a document's element list for save and reload.
"""

import json
import logging
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from ..models.element_models import Element
from ..models.errors import DocumentFormatError

logger = logging.getLogger(__name__)


def serialize_elements(elements: Iterable[Element]) -> List[Dict[str, Any]]:
    """Order-preserving ``[{"id", "type", "props"}]`` encoding."""
    return [
        element.model_dump(mode="json", by_alias=True, exclude_none=True)
        for element in elements
    ]


def to_json(elements: Iterable[Element], indent: int = 2) -> str:
    return json.dumps(serialize_elements(elements), indent=indent, ensure_ascii=False)


def deserialize_elements(data: Any) -> List[Element]:
    """
    Rebuild elements from their structured form.

    Raises:
        DocumentFormatError: not a list of elements, or ids repeat
    """
    if not isinstance(data, list):
        raise DocumentFormatError("Structured form must be a list of elements")
    try:
        elements = [Element.model_validate(item) for item in data]
    except ValidationError as e:
        raise DocumentFormatError(f"Invalid element in structured form: {e}") from e

    seen = set()
    for element in elements:
        if element.id in seen:
            raise DocumentFormatError(f"Duplicate element id: {element.id}")
        seen.add(element.id)
    return elements


def from_json(text: str) -> List[Element]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentFormatError(f"Structured form is not valid JSON: {e}") from e
    return deserialize_elements(data)
