"""
Editor State Manager
====================

Manages page editing sessions with JSON persistence.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.errors import DocumentFormatError
from .catalog import ElementCatalog
from .document import CounterIdGenerator, PageDocument
from .drag_drop import DragController
from .layout_store import SavedLayoutStore
from .serialization import deserialize_elements, serialize_elements

logger = logging.getLogger(__name__)


STARTER_PAGE: List[Dict[str, Any]] = [
    {"id": "el_001", "type": "heading", "props": {
        "text": "My Portfolio Page", "level": "h1", "color": "#e8edf5",
        "fontSize": 42, "fontWeight": "bold", "textAlign": "left"}},
    {"id": "el_002", "type": "paragraph", "props": {
        "text": "Welcome to my page built with the drag-and-drop builder. Edit any element by clicking it.",
        "color": "#8a9bb5", "fontSize": 16, "textAlign": "left", "lineHeight": 1.7}},
    {"id": "el_003", "type": "divider", "props": {"color": "#1f2d40", "thickness": 1, "margin": 16}},
    {"id": "el_004", "type": "card", "props": {
        "title": "Featured Project", "body": "A full-stack MERN application with real-time features.",
        "bg": "#111827", "borderColor": "#1f2d40", "borderRadius": 12, "padding": 24,
        "titleColor": "#e8edf5", "bodyColor": "#8a9bb5"}},
    {"id": "el_005", "type": "button", "props": {
        "text": "View Projects →", "bg": "#3b82f6", "color": "#ffffff", "fontSize": 14,
        "borderRadius": 8, "padding": "12px 24px", "href": "#"}},
]


class EditorSession:
    """One editing session: the live document, its saved layouts and drag state."""

    def __init__(
        self,
        session_id: str,
        catalog: ElementCatalog,
        created_at: Optional[datetime] = None
    ):
        self.id = session_id
        self.created_at = created_at or datetime.now()
        self.updated_at: Optional[datetime] = None
        self.document = PageDocument(catalog, id_generator=CounterIdGenerator())
        self.layouts = SavedLayoutStore()
        self.drag = DragController(self.document)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "elements": serialize_elements(self.document),
            "layouts": self.layouts.snapshot(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], catalog: ElementCatalog) -> "EditorSession":
        session = cls(
            data["id"],
            catalog,
            created_at=datetime.fromisoformat(data["created_at"]),
        )
        if data.get("updated_at"):
            session.updated_at = datetime.fromisoformat(data["updated_at"])
        session.document.replace_elements(deserialize_elements(data.get("elements", [])))
        session.layouts.restore(data.get("layouts", {}))
        return session


class StateManager:
    """Manages editing sessions."""

    def __init__(self, catalog: ElementCatalog, sessions_dir: Optional[Path] = None):
        self.catalog = catalog
        self.sessions_dir = sessions_dir or Path("sessions")
        self.sessions_dir.mkdir(parents=True, exist_ok=True)
        self._cache: Dict[str, EditorSession] = {}
        logger.info(f"[STATE-MANAGER] Initialized with sessions_dir={self.sessions_dir}")

    def _session_path(self, session_id: str) -> Path:
        return self.sessions_dir / f"{session_id}.json"

    def create_session(self, session_id: Optional[str] = None, starter: bool = False) -> str:
        """Create a new session with optional ID, optionally seeded with the demo page."""
        if session_id is None:
            session_id = str(uuid.uuid4())

        if self.get_session(session_id) is None:
            session = EditorSession(session_id, self.catalog)
            if starter:
                session.document.replace_elements(deserialize_elements(STARTER_PAGE))
            self._cache[session_id] = session
            self._save_session(session_id)
            logger.info(f"[STATE-MANAGER] Created session {session_id} (starter={starter})")
        return session_id

    def get_session(self, session_id: str) -> Optional[EditorSession]:
        """Get session state."""
        if session_id in self._cache:
            return self._cache[session_id]

        session_path = self._session_path(session_id)
        if session_path.exists():
            try:
                with open(session_path) as f:
                    data = json.load(f)
                session = EditorSession.from_dict(data, self.catalog)
            except DocumentFormatError as e:
                logger.error(f"[STATE-MANAGER] Error loading session {session_id}: {e}")
                raise
            except (KeyError, TypeError, ValueError) as e:
                logger.error(f"[STATE-MANAGER] Error loading session {session_id}: {e}")
                raise DocumentFormatError(f"Unreadable session file: {e}") from e
            self._cache[session_id] = session
            return session
        return None

    def list_sessions(self) -> List[str]:
        on_disk = {path.stem for path in self.sessions_dir.glob("*.json")}
        return sorted(on_disk | set(self._cache))

    def touch(self, session_id: str) -> bool:
        """Mark a session as modified and save it to disk."""
        session = self.get_session(session_id)
        if not session:
            return False

        session.updated_at = datetime.now()
        self._save_session(session_id)
        return True

    def delete_session(self, session_id: str) -> bool:
        existed = self._cache.pop(session_id, None) is not None
        session_path = self._session_path(session_id)
        if session_path.exists():
            session_path.unlink()
            existed = True
        return existed

    def _save_session(self, session_id: str):
        """Save session to disk."""
        if session_id in self._cache:
            with open(self._session_path(session_id), "w") as f:
                json.dump(self._cache[session_id].to_dict(), f, indent=2)

    def save_session(self, session_id: str) -> bool:
        """Explicitly save session to disk."""
        if session_id in self._cache:
            self._save_session(session_id)
            return True
        return False
