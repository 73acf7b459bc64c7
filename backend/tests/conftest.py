"""
HR API Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── test_settings:   Settings pointing at an in-memory SQLite database
    ├── database:        Database handle with tables created
    ├── db_session:      AsyncSession on that database
    ├── document_store:  DocumentStore over db_session (real SQL)
    ├── mock_store:      AsyncMock-backed DocumentStore (no database)
    ├── app:             FastAPI app from create_app(test_settings), tables created
    ├── test_client:     HTTPX AsyncClient talking to `app`
    └── sample_branch / sample_employee: request bodies
"""

import os

# Override settings for testing BEFORE any hrapi imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_AUTO_CREATE"] = "false"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from hrapi.config import Settings  # noqa: E402
from hrapi.database import Database  # noqa: E402
from hrapi.repositories.document_store import DocumentStore  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings():
    """Settings for an isolated in-memory database."""
    return Settings(database_url=TEST_DATABASE_URL, log_level="WARNING")


@pytest_asyncio.fixture
async def database(test_settings):
    """A Database with the documents table created; disposed after the test."""
    db = Database(test_settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """An AsyncSession on the test database."""
    async with database.session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def document_store(db_session):
    """A DocumentStore backed by real SQL on the in-memory database."""
    return DocumentStore(db_session)


@pytest.fixture
def mock_store():
    """
    Provides a DocumentStore stand-in with every operation as an AsyncMock.

    Usage:
        mock_store.get_document_by_id.return_value = StoredDocument("abc", {...})
        service = BranchService(mock_store)
    """
    store = MagicMock(spec=DocumentStore)
    store.get_documents = AsyncMock(return_value=[])
    store.get_document_by_id = AsyncMock(return_value=None)
    store.create_document = AsyncMock()
    store.update_document = AsyncMock(return_value=None)
    store.delete_document = AsyncMock(return_value=None)
    store.get_documents_by_field_values = AsyncMock(return_value=[])
    return store


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def app(test_settings):
    """
    A fresh FastAPI app on its own in-memory database.

    ASGITransport does not run the lifespan, so tables are created here.
    """
    from hrapi.main import create_app

    application = create_app(test_settings)
    await application.state.database.create_all()
    yield application
    application.dependency_overrides.clear()
    await application.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/v1/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def sample_branch():
    return {
        "name": "Downtown Branch",
        "address": "123 Main St",
        "phone": "204-555-5555",
    }


@pytest.fixture
def sample_employee():
    return {
        "name": "John Doe",
        "position": "Developer",
        "department": "IT",
        "email": "john@test.com",
        "phone": "204-123-4567",
        "branchId": 1,
    }
