"""
Route Dependencies
==================

Shared service instances (injected by server.py) and the FastAPI
dependencies that hand them to routes.
"""

import logging
import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException

from ..canvas.catalog import ElementCatalog
from ..canvas.state_manager import EditorSession, StateManager
from ..models.errors import DocumentFormatError
from ..services.html_exporter import HtmlExporter
from ..services.post_store import PostStore

logger = logging.getLogger(__name__)

# Injected by server
catalog: Optional[ElementCatalog] = None
state_manager: Optional[StateManager] = None
post_store: Optional[PostStore] = None
html_exporter: Optional[HtmlExporter] = None
admin_token: Optional[str] = None


def get_catalog() -> ElementCatalog:
    """Dependency to get the element catalog sessions are built on."""
    if catalog is None:
        raise HTTPException(status_code=500, detail="Element catalog not initialized")
    return catalog


def get_state_manager() -> StateManager:
    """Dependency to get state manager."""
    if state_manager is None:
        raise HTTPException(status_code=500, detail="State manager not initialized")
    return state_manager


def get_post_store() -> PostStore:
    """Dependency to get post store."""
    if post_store is None:
        raise HTTPException(status_code=500, detail="Post store not initialized")
    return post_store


def get_html_exporter() -> HtmlExporter:
    """Dependency to get HTML exporter."""
    if html_exporter is None:
        raise HTTPException(status_code=500, detail="HTML exporter not initialized")
    return html_exporter


def get_editor_session(
    session_id: str,
    sm: StateManager = Depends(get_state_manager)
) -> EditorSession:
    """Dependency resolving the ``session_id`` path parameter to a session."""
    try:
        session = sm.get_session(session_id)
    except DocumentFormatError as e:
        raise HTTPException(status_code=500, detail=f"Session {session_id} could not be loaded: {e}")
    if not session:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return session


def require_admin(authorization: Optional[str] = Header(default=None)) -> None:
    """Check the ``Authorization: Bearer <token>`` header against the admin token."""
    if not admin_token:
        raise HTTPException(status_code=401, detail="Admin access is not configured")
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not secrets.compare_digest(token, admin_token):
        logger.warning("[AUTH] Rejected admin request")
        raise HTTPException(status_code=401, detail="Not authorized")
