"""
Global test fixtures for the voter registry.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Mock Redis (fakeredis)
- Registrant and voter payload factories
"""

import sys
from pathlib import Path

import fakeredis.aioredis
import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    In-memory async MongoDB client.

    Plain (sync) fixture so the same client can be handed to both async
    service tests and the TestClient's event loop.
    """
    return AsyncMongoMockClient()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database with the production indexes."""
    from voter_registry.database.databases import auth_db

    db = mock_async_mongo_client[auth_db.DB_NAME]
    await db[auth_db.Collections.USERS].create_index("username", unique=True)
    yield db


@pytest.fixture
def mock_voters_db(mock_async_mongo_client):
    """Provide mock voters_db database."""
    from voter_registry.database.databases import voters_db

    return mock_async_mongo_client[voters_db.DB_NAME]


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest.fixture
def mock_async_redis():
    """
    Async fake Redis for the session store.

    Each test gets its own FakeServer so sessions never leak between tests.
    """
    server = fakeredis.FakeServer()
    return fakeredis.aioredis.FakeRedis(server=server, decode_responses=True)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def partition_service(mock_voters_db):
    from voter_registry.services.partition_service import PartitionService

    return PartitionService(mock_voters_db)


@pytest_asyncio.fixture
async def registrant_service(mock_auth_db, partition_service):
    from voter_registry.services.registrant_service import RegistrantService

    return RegistrantService(mock_auth_db, partition_service)


@pytest.fixture
def voter_service(partition_service):
    from voter_registry.services.voter_service import VoterService

    return VoterService(partition_service)


@pytest.fixture
def session_service(mock_async_redis):
    from voter_registry.config import Settings
    from voter_registry.services.session_service import SessionService

    return SessionService(mock_async_redis, Settings(session_ttl_minutes=30))


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def admin_signup() -> dict:
    """Admin signup body."""
    return {
        "username": "adminA",
        "password": "AdminPassword123!",
        "role": "admin",
        "constituency": "Pune",
    }


@pytest.fixture
def user_signup() -> dict:
    """Regular user signup body in the admin's constituency."""
    return {
        "username": "bob",
        "password": "BobPassword123!",
        "role": "user",
        "constituency": "Pune",
    }


@pytest.fixture
def authority_signup() -> dict:
    return {
        "username": "officer",
        "password": "OfficerPassword123!",
        "role": "authority",
        "constituency": "Pune",
    }


@pytest.fixture
def voter_payload() -> dict:
    """A complete voter body using the stored field names."""
    return {
        "Name": "Sunita Patil",
        "Constituency": "Pune",
        "Ward_No": 12,
        "Votting_Boothe_Name": "Zilla Parishad School, Room 3",
        "Epic_No": "MH/12/345/678901",
        "Middle_Name": "Ramesh",
        "Gender": "F",
        "age": 42,
        "English_Name": "Sunita Ramesh Patil",
        "Marathi_Name": "सुनीता रमेश पाटील",
    }
