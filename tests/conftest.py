"""
Fitness API — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── fake_db: In-memory stand-in for the AsyncDatabase handle
    ├── failing_db: Database whose every collection call raises a driver error
    ├── sample_blog / sample_user: Documents already stored in fake_db
    └── test_client: HTTPX AsyncClient bound to a fresh app using fake_db
"""

import copy
import os
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any app imports
os.environ["DB"] = "mongodb://127.0.0.1:27017/fitness_test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo import ReturnDocument
from pymongo.errors import ServerSelectionTimeoutError


# ══════════════════════════════════════════════════════════════════════════
# In-memory database double
# ══════════════════════════════════════════════════════════════════════════

def _matches(document: Dict[str, Any], query: Optional[Dict[str, Any]]) -> bool:
    return all(document.get(key) == value for key, value in (query or {}).items())


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self._documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        return self._documents if length is None else self._documents[:length]


class FakeCollection:
    """
    Implements the handful of AsyncCollection methods the services call,
    with the same return shapes (InsertOneResult.inserted_id,
    DeleteResult.deleted_count, ReturnDocument handling).
    """

    def __init__(self):
        self.documents: List[Dict[str, Any]] = []

    def find(self, query: Optional[Dict[str, Any]] = None) -> FakeCursor:
        return FakeCursor([copy.deepcopy(d) for d in self.documents if _matches(d, query)])

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if _matches(document, query):
                return copy.deepcopy(document)
        return None

    async def insert_one(self, document: Dict[str, Any]):
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"], acknowledged=True)

    async def find_one_and_update(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        return_document: bool = ReturnDocument.BEFORE,
    ) -> Optional[Dict[str, Any]]:
        for document in self.documents:
            if _matches(document, query):
                before = copy.deepcopy(document)
                document.update(update.get("$set", {}))
                return copy.deepcopy(document) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, query: Dict[str, Any]):
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1, acknowledged=True)
        return SimpleNamespace(deleted_count=0, acknowledged=True)


class FakeDatabase:
    name = "fitness_test"

    def __init__(self):
        self._collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        return self._collections.setdefault(name, FakeCollection())

    async def command(self, name: str) -> Dict[str, Any]:
        return {"ok": 1.0}


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def failing_db():
    """
    A MagicMock database whose collections raise ServerSelectionTimeoutError,
    the error the driver raises when MongoDB is unreachable.
    """
    error = ServerSelectionTimeoutError("127.0.0.1:27017: connection refused")
    collection = MagicMock()
    collection.find.return_value.to_list = AsyncMock(side_effect=error)
    collection.find_one = AsyncMock(side_effect=error)
    collection.insert_one = AsyncMock(side_effect=error)
    collection.find_one_and_update = AsyncMock(side_effect=error)
    collection.delete_one = AsyncMock(side_effect=error)

    database = MagicMock()
    database.__getitem__.return_value = collection
    database.command = AsyncMock(side_effect=error)
    return database


@pytest.fixture
def sample_blog(fake_db):
    document = {
        "_id": ObjectId(),
        "title": "Leg day",
        "image": "https://cdn.example.com/legs.jpg",
        "description": "Squats, lunges and more",
        "content": "Start with a five minute warm-up.",
    }
    fake_db["blogs"].documents.append(copy.deepcopy(document))
    return document


@pytest.fixture
def sample_user(fake_db):
    document = {
        "_id": ObjectId(),
        "name": "Asha",
        "age": 29,
        "email": "asha@example.com",
        "number": "+15550100",
        "plan": "monthly",
        "isAdmin": False,
    }
    fake_db["users"].documents.append(copy.deepcopy(document))
    return document


def _build_app(database):
    from fitness_api.main import create_app

    app = create_app()
    app.state.database = database
    return app


@pytest_asyncio.fixture
async def test_client(fake_db):
    """
    HTTPX AsyncClient talking to a fresh app through ASGITransport.

    The lifespan does not run under ASGITransport, so no MongoDB connection
    is attempted; the app uses fake_db instead.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=_build_app(fake_db))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def failing_client(failing_db):
    """Same as test_client, but MongoDB is unreachable."""
    transport = ASGITransport(app=_build_app(failing_db))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def unconnected_client():
    """An app whose startup never produced a database handle."""
    transport = ASGITransport(app=_build_app(None))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
