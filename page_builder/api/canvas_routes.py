"""
Canvas Routes
==============

API routes for editing sessions, whole-document operations and selection.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import BaseModel

from ..canvas.serialization import deserialize_elements, serialize_elements
from ..canvas.state_manager import EditorSession, StateManager
from ..models.errors import DocumentFormatError
from .dependencies import get_editor_session, get_state_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/canvas", tags=["canvas"])


class CanvasStateResponse(BaseModel):
    """Response for canvas state."""
    session_id: str
    elements: List[Dict[str, Any]]
    selected_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SelectRequest(BaseModel):
    """Request to select an element."""
    element_id: str


def state_response(session: EditorSession) -> CanvasStateResponse:
    return CanvasStateResponse(
        session_id=session.id,
        elements=serialize_elements(session.document),
        selected_id=session.document.selected_id,
        created_at=session.created_at.isoformat(),
        updated_at=session.updated_at.isoformat() if session.updated_at else None
    )


@router.post("/session")
async def create_session(
    starter: bool = False,
    sm: StateManager = Depends(get_state_manager)
):
    """Create a new canvas session, optionally seeded with the demo page."""
    session_id = sm.create_session(starter=starter)
    return {"session_id": session_id, "message": "Session created"}


@router.get("/sessions")
async def list_sessions(sm: StateManager = Depends(get_state_manager)):
    """List known session ids."""
    return {"sessions": sm.list_sessions()}


@router.get("/state/{session_id}")
async def get_state(session: EditorSession = Depends(get_editor_session)) -> CanvasStateResponse:
    """Get canvas state for session."""
    return state_response(session)


@router.delete("/state/{session_id}")
async def clear_canvas(
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
):
    """Clear all elements from canvas."""
    session.document.clear()
    session.drag.cancel()
    sm.touch(session.id)
    return {"message": "Canvas cleared", "session_id": session.id}


@router.post("/state/{session_id}/import")
async def import_state(
    elements: List[Dict[str, Any]] = Body(...),
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
) -> CanvasStateResponse:
    """Replace the document with a structured-form layout (e.g. a layout.json export)."""
    try:
        session.document.replace_elements(deserialize_elements(elements))
    except DocumentFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    sm.touch(session.id)
    logger.info(f"[CANVAS] Imported {len(elements)} elements into session {session.id}")
    return state_response(session)


@router.delete("/session/{session_id}")
async def delete_session(session_id: str, sm: StateManager = Depends(get_state_manager)):
    """Delete a session and its saved file."""
    if not sm.delete_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return {"message": "Session deleted", "session_id": session_id}


@router.post("/select/{session_id}")
async def select_element(
    request: SelectRequest,
    session: EditorSession = Depends(get_editor_session)
):
    """Select an element."""
    if not session.document.select(request.element_id):
        raise HTTPException(status_code=404, detail=f"Element not found: {request.element_id}")
    return {"session_id": session.id, "selected_id": session.document.selected_id}


@router.delete("/select/{session_id}")
async def deselect_element(session: EditorSession = Depends(get_editor_session)):
    """Clear the selection."""
    session.document.deselect()
    return {"session_id": session.id, "selected_id": None}
