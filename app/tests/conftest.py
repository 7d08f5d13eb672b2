"""
Shared pytest fixtures for the API test suite
"""
import os

# Keep test runs off the filesystem and the real database
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.dependencies import get_db
from app.main import app


@pytest.fixture
def sample_property():
    """A fully populated property document"""
    return {
        "id": "101",
        "address": "12 Elm Street",
        "city": "Austin",
        "state": "TX",
        "zip": 73301,
        "propertyValue": 320000,
        "monthlyRentalIncome": 2100,
        "squareFeet": 1800,
        "bedrooms": 3,
        "bathrooms": 2,
        "availability": "Available",
        "image": "https://example.com/elm.jpg",
        "amenities": ["Pool", "Garage"],
        "notes": "Corner lot."
    }


@pytest.fixture
def mock_db():
    """In-memory Motor database standing in for MongoDB"""
    return AsyncMongoMockClient()[settings.database_name]


@pytest.fixture
def seed(mock_db):
    """Insert documents straight into a collection of the mock database"""
    def _seed(collection_name, *documents):
        asyncio.run(mock_db[collection_name].insert_many([dict(doc) for doc in documents]))
    return _seed


@pytest.fixture
def client(mock_db):
    """Test client whose routes talk to the in-memory database"""
    app.dependency_overrides[get_db] = lambda: mock_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    """Test client whose every collection call raises a driver error"""
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=PyMongoError("connection refused"))
    collection.insert_one = AsyncMock(side_effect=PyMongoError("connection refused"))
    collection.update_one = AsyncMock(side_effect=PyMongoError("connection refused"))
    collection.delete_one = AsyncMock(side_effect=PyMongoError("connection refused"))
    collection.find.return_value.to_list = AsyncMock(side_effect=PyMongoError("connection refused"))

    db = MagicMock()
    db.__getitem__.return_value = collection

    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()
