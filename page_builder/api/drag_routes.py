"""
Drag Routes
===========

API routes mirroring the editor's drag-and-drop gestures.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..canvas.state_manager import EditorSession, StateManager
from ..models.element_models import DragIntent, DragState, ElementKind
from .dependencies import get_editor_session, get_state_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/drag", tags=["drag"])


class DragStartRequest(BaseModel):
    """Start a palette drag (kind) or a canvas drag (element_id)."""
    intent: DragIntent
    kind: Optional[ElementKind] = None
    element_id: Optional[str] = None


class DragOverRequest(BaseModel):
    index: int


class DropRequest(BaseModel):
    index: Optional[int] = None


class DragStatusResponse(BaseModel):
    """Current drag state and highlighted gap."""
    state: Optional[DragState] = None
    over_index: Optional[int] = None
    drop_effect: Optional[str] = None


def drag_status(session: EditorSession) -> DragStatusResponse:
    return DragStatusResponse(
        state=session.drag.state,
        over_index=session.drag.over_index,
        drop_effect=session.drag.drop_effect
    )


@router.post("/{session_id}/start")
async def start_drag(
    request: DragStartRequest,
    session: EditorSession = Depends(get_editor_session)
) -> DragStatusResponse:
    """Begin a drag."""
    if request.intent == DragIntent.NEW:
        if request.kind is None:
            raise HTTPException(status_code=400, detail="A palette drag needs a kind")
        session.drag.begin_new(request.kind)
    else:
        if request.element_id is None:
            raise HTTPException(status_code=400, detail="A move drag needs an element_id")
        session.drag.begin_move(request.element_id)
    return drag_status(session)


@router.get("/{session_id}")
async def get_drag(session: EditorSession = Depends(get_editor_session)) -> DragStatusResponse:
    return drag_status(session)


@router.post("/{session_id}/over")
async def drag_over(
    request: DragOverRequest,
    session: EditorSession = Depends(get_editor_session)
) -> DragStatusResponse:
    """Update the highlighted drop gap."""
    session.drag.drag_over(request.index)
    return drag_status(session)


@router.post("/{session_id}/drop")
async def drop(
    request: DropRequest,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
):
    """Apply the drag at the given index."""
    element_id = session.drag.drop(request.index)
    if element_id is not None:
        sm.touch(session.id)
    return {
        "element_id": element_id,
        "changed": element_id is not None,
        "index": session.document.index_of(element_id) if element_id else None,
        "selected_id": session.document.selected_id
    }


@router.post("/{session_id}/cancel")
async def cancel_drag(session: EditorSession = Depends(get_editor_session)) -> DragStatusResponse:
    session.drag.cancel()
    return drag_status(session)
