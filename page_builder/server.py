"""
Page Builder Server
===================

FastAPI server for the portfolio drag-and-drop page builder.

Features:
- Editing sessions with an ordered element model and JSON persistence
- Palette insert, drag-and-drop reorder, duplicate and property editing
- Saved layouts (last 10 per session)
- JSON and standalone HTML export
- Blog post resource for the portfolio site
"""

import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings

settings = Settings.from_env()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Import catalog and state manager
from .canvas.catalog import ElementCatalog, build_default_catalog
from .canvas.layout_store import LAYOUT_CAPACITY
from .canvas.state_manager import StateManager

# Import services
from .services.html_exporter import HtmlExporter
from .services.post_store import PostStore

# Import API routers
from .api import (
    canvas_routes, dependencies, drag_routes, element_routes,
    export_routes, layout_routes, post_routes
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("[PAGE-BUILDER] Starting up...")

    # Re-read so tests and process managers can set the environment late
    current = Settings.from_env()
    catalog = build_default_catalog()

    # Inject into route dependencies
    dependencies.catalog = catalog
    dependencies.state_manager = StateManager(catalog, sessions_dir=current.sessions_dir)
    dependencies.post_store = PostStore(path=current.posts_file)
    dependencies.html_exporter = HtmlExporter()
    dependencies.admin_token = current.admin_token

    if not current.admin_token:
        logger.warning("[PAGE-BUILDER] PAGE_BUILDER_ADMIN_TOKEN not set, post admin routes disabled")
    logger.info("[PAGE-BUILDER] Services initialized")

    yield

    # Cleanup
    logger.info("[PAGE-BUILDER] Shutting down...")
    dependencies.catalog = None
    dependencies.state_manager = None
    dependencies.post_store = None
    dependencies.html_exporter = None
    dependencies.admin_token = None


# Create FastAPI app
app = FastAPI(
    title="Page Builder",
    description="Drag-and-drop page builder and blog API for a portfolio site",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(canvas_routes.router)
app.include_router(element_routes.router)
app.include_router(drag_routes.router)
app.include_router(layout_routes.router)
app.include_router(export_routes.router)
app.include_router(post_routes.router)


@app.get("/")
async def root():
    """Return service info."""
    return {
        "service": "Page Builder",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "canvas": "/api/canvas/state/{session_id}",
            "elements": "/api/element/{session_id}/{element_id}",
            "layouts": "/api/layouts/{session_id}",
            "export": "/api/export/{session_id}/html",
            "posts": "/api/posts/"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "page-builder",
        "sessions_dir": str(dependencies.state_manager.sessions_dir) if dependencies.state_manager else None
    }


@app.get("/api/info")
async def api_info(catalog: ElementCatalog = Depends(dependencies.get_catalog)):
    """Get API information and the element palette."""
    return {
        "service": "Page Builder",
        "version": "1.0.0",
        "element_kinds": [
            {
                "type": entry.kind.value,
                "label": entry.label,
                "icon": entry.icon,
                "default_props": catalog.default_properties(entry.kind),
                "fields": [field.model_dump(mode="json", exclude_none=True) for field in entry.fields]
            }
            for entry in catalog
        ],
        "layout_capacity": LAYOUT_CAPACITY
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "page_builder.server:app",
        host="0.0.0.0",
        port=8080,
        reload=True
    )
