"""
Page Builder Settings
=====================

Server configuration read from environment variables.
"""

import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

DEFAULT_SESSIONS_DIR = Path(__file__).parent.parent / "sessions"


class Settings(BaseModel):
    """Configuration for the page builder server."""
    sessions_dir: Path = DEFAULT_SESSIONS_DIR
    posts_file: Optional[Path] = None     # None keeps posts in memory only
    admin_token: Optional[str] = None     # None disables the admin post routes
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``PAGE_BUILDER_*`` environment variables."""
        values = {}
        if os.getenv("PAGE_BUILDER_SESSIONS_DIR"):
            values["sessions_dir"] = Path(os.environ["PAGE_BUILDER_SESSIONS_DIR"])
        if os.getenv("PAGE_BUILDER_POSTS_FILE"):
            values["posts_file"] = Path(os.environ["PAGE_BUILDER_POSTS_FILE"])
        if os.getenv("PAGE_BUILDER_ADMIN_TOKEN"):
            values["admin_token"] = os.environ["PAGE_BUILDER_ADMIN_TOKEN"]
        if os.getenv("PAGE_BUILDER_LOG_LEVEL"):
            values["log_level"] = os.environ["PAGE_BUILDER_LOG_LEVEL"].upper()
        if os.getenv("PAGE_BUILDER_CORS_ORIGINS"):
            values["cors_origins"] = [
                origin.strip()
                for origin in os.environ["PAGE_BUILDER_CORS_ORIGINS"].split(",")
                if origin.strip()
            ]
        return cls(**values)
