"""
Saved Layout Store
==================

Bounded, most-recent-first list of document snapshots.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..models.element_models import Element, SavedLayout
from ..models.errors import LayoutNotFoundError
from .document import copy_element

logger = logging.getLogger(__name__)

LAYOUT_CAPACITY = 10


def _layout_id() -> str:
    return uuid.uuid4().hex


class SavedLayoutStore:
    """
    In-memory persistence sink for layout snapshots.

    Snapshots are deep copies on the way in and on the way out, so later
    edits to the live document never reach a stored layout.
    """

    def __init__(
        self,
        capacity: int = LAYOUT_CAPACITY,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _layout_id
    ):
        self.capacity = capacity
        self.clock = clock
        self.id_factory = id_factory
        self._layouts: List[SavedLayout] = []
        self._save_count = 0

    def __len__(self) -> int:
        return len(self._layouts)

    def save(self, elements: Iterable[Element], name: Optional[str] = None) -> SavedLayout:
        """Snapshot ``elements``; the oldest layout drops off beyond capacity."""
        self._save_count += 1
        layout = SavedLayout(
            id=self.id_factory(),
            name=name or f"Layout {self._save_count}",
            elements=[copy_element(element) for element in elements],
            saved_at=self.clock(),
        )
        self._layouts.insert(0, layout)
        evicted = self._layouts[self.capacity:]
        del self._layouts[self.capacity:]
        if evicted:
            logger.info(f"[LAYOUTS] Evicted {len(evicted)} layout(s) beyond capacity {self.capacity}")
        return layout

    def list(self) -> List[SavedLayout]:
        return list(self._layouts)

    def get(self, layout_id: str) -> SavedLayout:
        for layout in self._layouts:
            if layout.id == layout_id:
                return layout
        raise LayoutNotFoundError(layout_id)

    def load(self, layout_id: str) -> List[Element]:
        """Fresh copy of a stored layout's elements."""
        return [copy_element(element) for element in self.get(layout_id).elements]

    def snapshot(self) -> Dict[str, Any]:
        """JSON-ready state of the store."""
        return {
            "save_count": self._save_count,
            "layouts": [
                layout.model_dump(mode="json", by_alias=True, exclude_none=True)
                for layout in self._layouts
            ],
        }

    def restore(self, data: Dict[str, Any]) -> None:
        layouts = [SavedLayout.model_validate(item) for item in data.get("layouts", [])]
        self._layouts = layouts[:self.capacity]
        self._save_count = data.get("save_count", len(layouts))
