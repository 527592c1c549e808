"""
Page Document Model
===================

Ordered sequence of typed, uniquely identified elements plus the current
selection. List order is the render and publish order.
"""

import logging
import re
import uuid
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from ..models.element_models import Element, ElementKind, MoveDirection
from ..models.errors import DocumentFormatError
from .catalog import ElementCatalog, copy_properties

logger = logging.getLogger(__name__)

IdGenerator = Callable[[], str]


class CounterIdGenerator:
    """Monotonic ``el_<n>`` ids scoped to one editing session."""

    def __init__(self, prefix: str = "el_", start: int = 1000):
        self.prefix = prefix
        self.counter = start
        self._pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")

    def __call__(self) -> str:
        self.counter += 1
        return f"{self.prefix}{self.counter}"

    def advance_past(self, ids: Iterable[str]) -> None:
        """Skip the counter beyond any numbered id already in use."""
        for element_id in ids:
            match = self._pattern.match(element_id)
            if match:
                self.counter = max(self.counter, int(match.group(1)))


def uuid_id_generator() -> str:
    """Random opaque element id."""
    return f"el_{uuid.uuid4().hex[:12]}"


def copy_element(element: Element, new_id: Optional[str] = None) -> Element:
    """Deep copy of an element, optionally under a new id."""
    children = None
    if element.children is not None:
        children = [copy_element(child) for child in element.children]
    return Element(
        id=new_id or element.id,
        kind=element.kind,
        properties=copy_properties(element.properties),
        children=children,
    )


class PageDocument:
    """
    The page being edited.

    Operations keyed by an element id that is not present are no-ops;
    the editor only issues ids it obtained from the document itself.
    """

    def __init__(
        self,
        catalog: ElementCatalog,
        id_generator: Optional[IdGenerator] = None,
        elements: Optional[Iterable[Element]] = None
    ):
        self.catalog = catalog
        self.id_generator = id_generator or CounterIdGenerator()
        self.elements: List[Element] = []
        self.selected_id: Optional[str] = None
        if elements is not None:
            self.replace_elements(elements)

    # -- lookup --------------------------------------------------------

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    @property
    def ids(self) -> List[str]:
        return [element.id for element in self.elements]

    def index_of(self, element_id: str) -> int:
        """Position of an element, -1 when absent."""
        for index, element in enumerate(self.elements):
            if element.id == element_id:
                return index
        return -1

    def get(self, element_id: str) -> Optional[Element]:
        index = self.index_of(element_id)
        return self.elements[index] if index != -1 else None

    @property
    def selected_element(self) -> Optional[Element]:
        if self.selected_id is None:
            return None
        return self.get(self.selected_id)

    # -- selection -----------------------------------------------------

    def select(self, element_id: str) -> bool:
        if self.index_of(element_id) == -1:
            return False
        self.selected_id = element_id
        return True

    def deselect(self) -> None:
        self.selected_id = None

    # -- mutation ------------------------------------------------------

    def _new_id(self) -> str:
        existing = set(self.ids)
        new_id = self.id_generator()
        while new_id in existing:
            new_id = self.id_generator()
        return new_id

    def _clamp(self, index: Optional[int]) -> int:
        if index is None:
            return len(self.elements)
        return max(0, min(index, len(self.elements)))

    def insert(self, kind: Union[ElementKind, str], at_index: Optional[int] = None) -> str:
        """
        Instantiate a new element of ``kind`` at ``at_index``.

        The index is clamped to ``[0, len]``; ``None`` appends. The new
        element becomes the selection.

        Raises:
            UnknownElementKindError: kind is not in the catalog
        """
        entry = self.catalog.get(kind)
        element = Element(
            id=self._new_id(),
            kind=entry.kind,
            properties=self.catalog.default_properties(entry.kind),
            children=[] if entry.kind == ElementKind.SECTION else None,
        )
        index = self._clamp(at_index)
        self.elements.insert(index, element)
        self.selected_id = element.id
        logger.debug(f"[DOCUMENT] Inserted {entry.kind.value} {element.id} at {index}")
        return element.id

    def remove(self, element_id: str) -> bool:
        index = self.index_of(element_id)
        if index == -1:
            return False
        del self.elements[index]
        if self.selected_id == element_id:
            self.selected_id = None
        logger.debug(f"[DOCUMENT] Removed {element_id}")
        return True

    def duplicate(self, element_id: str) -> Optional[str]:
        """Copy an element under a fresh id, right after the original."""
        index = self.index_of(element_id)
        if index == -1:
            return None
        duplicate = copy_element(self.elements[index], new_id=self._new_id())
        self.elements.insert(index + 1, duplicate)
        self.selected_id = duplicate.id
        logger.debug(f"[DOCUMENT] Duplicated {element_id} as {duplicate.id}")
        return duplicate.id

    def move_adjacent(self, element_id: str, direction: Union[MoveDirection, str]) -> bool:
        index = self.index_of(element_id)
        if index == -1:
            return False
        target = index - 1 if MoveDirection(direction) == MoveDirection.UP else index + 1
        if target < 0 or target >= len(self.elements):
            return False
        self.elements[index], self.elements[target] = self.elements[target], self.elements[index]
        return True

    def move_to_index(self, element_id: str, target_index: Optional[int]) -> bool:
        """
        Move an element to ``target_index``.

        The target is resolved against the list after the element has been
        taken out, which is what a drop between two rendered elements means.
        ``None`` moves to the end.
        """
        index = self.index_of(element_id)
        if index == -1:
            return False
        moved = self.elements.pop(index)
        self.elements.insert(self._clamp(target_index), moved)
        return True

    def update_properties(self, element_id: str, partial: Dict[str, Any]) -> bool:
        """Shallow-merge ``partial`` into an element's properties."""
        element = self.get(element_id)
        if element is None:
            return False
        for key, value in partial.items():
            element.properties[key] = copy_properties(value)
        return True

    def clear(self) -> None:
        self.elements = []
        self.selected_id = None

    def replace_elements(self, elements: Iterable[Element]) -> None:
        """
        Swap in a whole element list (layout load, import).

        The incoming elements are copied so the caller keeps sole ownership
        of its own storage. Selection is cleared.

        Raises:
            DocumentFormatError: two elements share an id
        """
        copies = [copy_element(element) for element in elements]
        seen = set()
        for element in copies:
            if element.id in seen:
                raise DocumentFormatError(f"Duplicate element id: {element.id}")
            seen.add(element.id)
        self.elements = copies
        self.selected_id = None
        if isinstance(self.id_generator, CounterIdGenerator):
            self.id_generator.advance_past(seen)
