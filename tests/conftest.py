"""Shared fixtures for the page builder test suite."""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from page_builder.canvas.catalog import ElementCatalog, build_default_catalog
from page_builder.canvas.document import CounterIdGenerator, PageDocument

ADMIN_TOKEN = "test-admin-token"


@pytest.fixture
def catalog() -> ElementCatalog:
    return build_default_catalog()


@pytest.fixture
def document(catalog: ElementCatalog) -> PageDocument:
    """Empty document with deterministic ``el_1001``-style ids."""
    return PageDocument(catalog, id_generator=CounterIdGenerator())


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """API client backed by a temporary sessions directory."""
    monkeypatch.setenv("PAGE_BUILDER_SESSIONS_DIR", str(tmp_path / "sessions"))
    monkeypatch.setenv("PAGE_BUILDER_ADMIN_TOKEN", ADMIN_TOKEN)
    monkeypatch.delenv("PAGE_BUILDER_POSTS_FILE", raising=False)

    from page_builder.server import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers() -> dict:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def session_id(client: TestClient) -> str:
    response = client.post("/api/canvas/session")
    assert response.status_code == 200
    return response.json()["session_id"]
