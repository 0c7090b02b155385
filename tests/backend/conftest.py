"""
Backend-specific test fixtures and configuration.

These fixtures wire the FastAPI app to the in-memory MongoDB and Redis from
the global conftest through ``app.dependency_overrides``.
"""

import asyncio
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(monkeypatch, mock_async_mongo_client, mock_async_redis):
    """
    The FastAPI app with MongoDB and Redis replaced by in-memory fakes.

    Startup database initialization is switched off so the lifespan never
    reaches for a real MongoDB.
    """
    from voter_registry.config import get_settings
    from voter_registry.dependencies.services import get_mongo, get_redis

    monkeypatch.setenv("INIT_DATABASE_ON_STARTUP", "false")
    get_settings.cache_clear()

    from voter_registry.main import app

    app.dependency_overrides[get_mongo] = lambda: mock_async_mongo_client
    app.dependency_overrides[get_redis] = lambda: mock_async_redis
    yield app
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def client(app):
    """TestClient sharing one event loop for the whole test."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def revalidating_app(app):
    """App whose session gate reloads registrants on every request."""
    from voter_registry.config import Settings, get_settings

    settings = Settings(init_database_on_startup=False, session_revalidate=True)
    app.dependency_overrides[get_settings] = lambda: settings
    return app


# =============================================================================
# Flow Helpers
# =============================================================================

@pytest.fixture
def signup(client):
    """POST /api/signup and return the response."""
    def _signup(body: dict):
        return client.post("/api/signup", json=body)
    return _signup


@pytest.fixture
def login(client):
    """POST /api/login and return the response."""
    def _login(username: str, password: str):
        return client.post("/api/login", json={"username": username, "password": password})
    return _login


@pytest.fixture
def set_user_status(mock_async_mongo_client):
    """
    Change a registrant's status behind the API's back, e.g. to show that
    sessions keep their login-time snapshot.
    """
    from voter_registry.database.databases import auth_db

    def _set(username: str, status: str):
        users = mock_async_mongo_client[auth_db.DB_NAME][auth_db.Collections.USERS]
        asyncio.run(users.update_one({"username": username}, {"$set": {"status": status}}))
    return _set


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
    return _assert
