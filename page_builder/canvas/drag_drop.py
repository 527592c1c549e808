"""
Drag and Drop Controller
========================

Tracks an in-progress drag (palette insert or canvas move) and the
candidate drop index, and applies the drop to the document.
"""

import logging
from typing import Optional, Union

from ..models.element_models import DragIntent, DragState, ElementKind
from .document import PageDocument

logger = logging.getLogger(__name__)


class DragController:
    """Drag state for one document. Never persisted."""

    def __init__(self, document: PageDocument):
        self.document = document
        self.state: Optional[DragState] = None
        self.over_index: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.state is not None

    @property
    def drop_effect(self) -> Optional[str]:
        if self.state is None:
            return None
        return "copy" if self.state.intent == DragIntent.NEW else "move"

    def begin_new(self, kind: Union[ElementKind, str]) -> DragState:
        """Start dragging a new element from the palette."""
        entry = self.document.catalog.get(kind)
        self.state = DragState(intent=DragIntent.NEW, kind=entry.kind)
        self.over_index = None
        return self.state

    def begin_move(self, element_id: str) -> DragState:
        """Start dragging an existing element."""
        self.state = DragState(intent=DragIntent.MOVE, element_id=element_id)
        self.over_index = None
        return self.state

    def drag_over(self, index: int) -> None:
        """Record the gap the pointer is currently over."""
        if self.state is not None:
            self.over_index = index

    def drop(self, index: Optional[int] = None) -> Optional[str]:
        """
        Apply the drag at ``index`` (``None`` means the end of the page).

        Returns the inserted or moved element id, or None when there was
        nothing to apply. Drag state is cleared whatever happens.
        """
        state = self.state
        try:
            if state is None:
                return None
            if state.intent == DragIntent.NEW:
                return self.document.insert(state.kind, index)
            if self.document.move_to_index(state.element_id, index):
                return state.element_id
            logger.debug(f"[DRAG] Dropped element {state.element_id} no longer exists")
            return None
        finally:
            self.cancel()

    def cancel(self) -> None:
        self.state = None
        self.over_index = None
