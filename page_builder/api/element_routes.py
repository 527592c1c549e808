"""
Element Routes
===============

API routes for element management and the property editor.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..canvas.property_editor import PropertyEditor
from ..canvas.state_manager import EditorSession, StateManager
from ..models.element_models import EditorPanel, ElementKind, MoveDirection
from ..models.errors import InvalidPropertyValueError, UnknownPropertyError
from .dependencies import get_editor_session, get_state_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/element", tags=["elements"])


class InsertRequest(BaseModel):
    """Request to add an element from the palette."""
    kind: ElementKind
    index: Optional[int] = None


class MoveRequest(BaseModel):
    """Request to swap an element with its neighbour."""
    direction: MoveDirection


class PositionRequest(BaseModel):
    """Request to move an element to an index."""
    index: Optional[int] = None


class EditRequest(BaseModel):
    """Single-field edit from the property panel."""
    key: str
    value: Any


class ElementResponse(BaseModel):
    """Response for element operations."""
    element_id: str
    changed: bool
    index: int
    selected_id: Optional[str] = None
    message: str


def element_response(session: EditorSession, element_id: str, changed: bool, message: str) -> ElementResponse:
    return ElementResponse(
        element_id=element_id,
        changed=changed,
        index=session.document.index_of(element_id),
        selected_id=session.document.selected_id,
        message=message
    )


def get_property_editor(session: EditorSession = Depends(get_editor_session)) -> PropertyEditor:
    return PropertyEditor(session.document.catalog)


@router.post("/{session_id}")
async def add_element(
    request: InsertRequest,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
) -> ElementResponse:
    """Add element to canvas."""
    element_id = session.document.insert(request.kind, request.index)
    sm.touch(session.id)
    return element_response(session, element_id, True, "Element added")


@router.get("/{session_id}/editor")
async def get_editor(
    session: EditorSession = Depends(get_editor_session),
    editor: PropertyEditor = Depends(get_property_editor)
) -> EditorPanel:
    """Property panel for the selected element."""
    return editor.panel(session.document)


@router.put("/{session_id}/editor")
async def edit_selected(
    request: EditRequest,
    session: EditorSession = Depends(get_editor_session),
    editor: PropertyEditor = Depends(get_property_editor),
    sm: StateManager = Depends(get_state_manager)
) -> EditorPanel:
    """Edit one property of the selected element."""
    try:
        changed = editor.edit(session.document, request.key, request.value)
    except (UnknownPropertyError, InvalidPropertyValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not changed:
        raise HTTPException(status_code=409, detail="No element selected")

    sm.touch(session.id)
    return editor.panel(session.document)


@router.delete("/{session_id}/{element_id}")
async def remove_element(
    element_id: str,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
):
    """Remove element from canvas."""
    if not session.document.remove(element_id):
        raise HTTPException(status_code=404, detail=f"Element not found: {element_id}")

    sm.touch(session.id)
    return {"message": "Element removed", "element_id": element_id,
            "selected_id": session.document.selected_id}


@router.post("/{session_id}/{element_id}/duplicate")
async def duplicate_element(
    element_id: str,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
) -> ElementResponse:
    """Duplicate an element right after itself."""
    new_id = session.document.duplicate(element_id)
    if new_id is None:
        raise HTTPException(status_code=404, detail=f"Element not found: {element_id}")

    sm.touch(session.id)
    return element_response(session, new_id, True, "Element duplicated")


@router.post("/{session_id}/{element_id}/move")
async def move_element(
    element_id: str,
    request: MoveRequest,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
) -> ElementResponse:
    """Swap an element with its neighbour; a no-op at the page edges."""
    if session.document.get(element_id) is None:
        raise HTTPException(status_code=404, detail=f"Element not found: {element_id}")

    changed = session.document.move_adjacent(element_id, request.direction)
    if changed:
        sm.touch(session.id)
    return element_response(session, element_id, changed, f"Move {request.direction.value}")


@router.post("/{session_id}/{element_id}/position")
async def position_element(
    element_id: str,
    request: PositionRequest,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
) -> ElementResponse:
    """Move an element to an index (resolved after removal)."""
    if not session.document.move_to_index(element_id, request.index):
        raise HTTPException(status_code=404, detail=f"Element not found: {element_id}")

    sm.touch(session.id)
    return element_response(session, element_id, True, "Element moved")


@router.patch("/{session_id}/{element_id}")
async def update_element(
    element_id: str,
    properties: Dict[str, Any],
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
) -> ElementResponse:
    """Merge properties into an element."""
    if not session.document.update_properties(element_id, properties):
        raise HTTPException(status_code=404, detail=f"Element not found: {element_id}")

    sm.touch(session.id)
    return element_response(session, element_id, True, "Element updated")
