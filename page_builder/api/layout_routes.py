"""
Layout Routes
=============

API routes for saving and restoring layout snapshots.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..canvas.state_manager import EditorSession, StateManager
from ..models.errors import LayoutNotFoundError
from .dependencies import get_editor_session, get_state_manager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/layouts", tags=["layouts"])


class SaveLayoutRequest(BaseModel):
    name: Optional[str] = None


class LayoutInfo(BaseModel):
    """Saved layout listing entry."""
    id: str
    name: str
    saved_at: str
    element_count: int


def layout_info(layout) -> LayoutInfo:
    return LayoutInfo(
        id=layout.id,
        name=layout.name,
        saved_at=layout.saved_at.isoformat(),
        element_count=len(layout.elements)
    )


@router.post("/{session_id}")
async def save_layout(
    request: Optional[SaveLayoutRequest] = None,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
) -> LayoutInfo:
    """Snapshot the current document."""
    layout = session.layouts.save(session.document, name=request.name if request else None)
    sm.touch(session.id)
    logger.info(f"[LAYOUTS] Saved {layout.name} for session {session.id}")
    return layout_info(layout)


@router.get("/{session_id}")
async def list_layouts(session: EditorSession = Depends(get_editor_session)) -> List[LayoutInfo]:
    """Saved layouts, most recent first."""
    return [layout_info(layout) for layout in session.layouts.list()]


@router.post("/{session_id}/{layout_id}/load")
async def load_layout(
    layout_id: str,
    session: EditorSession = Depends(get_editor_session),
    sm: StateManager = Depends(get_state_manager)
):
    """Restore a saved layout into the live document."""
    try:
        elements = session.layouts.load(layout_id)
    except LayoutNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    session.document.replace_elements(elements)
    session.drag.cancel()
    sm.touch(session.id)
    logger.info(f"[LAYOUTS] Loaded {layout_id} into session {session.id}")
    return {"message": "Layout loaded", "layout_id": layout_id, "element_count": len(elements)}
