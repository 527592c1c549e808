"""
Export Routes
=============

Downloads of the structured (JSON) and publishable (HTML) forms.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from ..canvas.serialization import to_json
from ..canvas.state_manager import EditorSession
from ..services.html_exporter import HtmlExporter
from .dependencies import get_editor_session, get_html_exporter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/export", tags=["export"])


@router.get("/{session_id}/json")
async def export_json(session: EditorSession = Depends(get_editor_session)):
    """Structured form as a layout.json download."""
    logger.info(f"[EXPORT] JSON export for session {session.id}")
    return Response(
        content=to_json(session.document),
        media_type="application/json",
        headers={"Content-Disposition": 'attachment; filename="layout.json"'}
    )


@router.get("/{session_id}/html")
async def export_html(
    title: str = "Exported Page",
    session: EditorSession = Depends(get_editor_session),
    exporter: HtmlExporter = Depends(get_html_exporter)
):
    """Publishable page as a page.html download."""
    return Response(
        content=exporter.export(session.document, title=title),
        media_type="text/html",
        headers={"Content-Disposition": 'attachment; filename="page.html"'}
    )
