"""
Notebox - Test Configuration (conftest.py)
==========================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own store file under pytest's tmp_path, so tests
       never share state and never touch a real store.

Fixture Hierarchy (all function-scoped):
    store_path ── store ── note_service
        └── settings ── app ── test_client
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notebox.config import Settings
from notebox.main import create_app
from notebox.services.note_service import NoteService
from notebox.services.store_service import NoteStore


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep NOTEBOX_* variables from the developer's shell out of the tests."""
    for var in ("NOTEBOX_HOST", "NOTEBOX_PORT", "NOTEBOX_CACHE", "NOTEBOX_LOG_LEVEL",
                "NOTEBOX_UPLOAD_FORM", "NOTEBOX_DOCS_ENABLED", "NOTEBOX_CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def store_path(tmp_path):
    """Path of a store file that does not exist yet."""
    return tmp_path / "notes.json"


@pytest_asyncio.fixture
async def store(store_path):
    """A bootstrapped, empty NoteStore."""
    note_store = NoteStore(store_path)
    await note_store.ensure_exists()
    return note_store


@pytest.fixture
def note_service(store):
    return NoteService(store)


@pytest.fixture
def settings(store_path):
    return Settings(host="127.0.0.1", port=8000, cache=store_path, log_level="WARNING")


@pytest_asyncio.fixture
async def app(settings):
    """
    Application with its store already bootstrapped.

    ASGITransport does not run the lifespan, so the bootstrap the lifespan
    would perform is done here.
    """
    application = create_app(settings)
    await application.state.note_service.store.ensure_exists()
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the app (no server needed).

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
