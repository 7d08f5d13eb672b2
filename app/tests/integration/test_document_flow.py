"""
Integration tests for the document lifecycle and the per-request connection
"""
from unittest.mock import MagicMock, patch

import pytest
from mongomock_motor import AsyncMongoMockClient

from app.api.services import property_service, serialize_document
from app.core.config import settings
from app.core.dependencies import get_db


def test_property_lifecycle(client, sample_property):
    """Create, read, update and delete one property through the API"""
    assert client.post("/api/properties", json=sample_property).status_code == 201
    assert client.get("/api/properties/101").json()["monthlyRentalIncome"] == 2100

    assert client.put("/api/properties/101", json={"monthlyRentalIncome": 2300}).status_code == 200
    assert client.get("/api/properties/101").json()["monthlyRentalIncome"] == 2300
    assert len(client.get("/api/properties").json()) == 1

    assert client.delete("/api/properties/101").status_code == 200
    assert client.get("/api/properties").json() == []


def test_toggle_state_round_trip(client):
    client.post("/api/viewPropertiesToggleState", json={"id": "1", "viewMode": "list"})
    client.put("/api/viewPropertiesToggleState/1", json={"viewMode": "grid"})

    states = client.get("/api/viewPropertiesToggleState").json()

    assert [(s["id"], s["viewMode"]) for s in states] == [("1", "grid")]


@pytest.mark.asyncio
async def test_get_db_closes_client_after_request():
    fake_client = MagicMock()
    with patch("app.core.database.create_client", return_value=fake_client):
        dependency = get_db()
        database = await dependency.__anext__()

        assert database is fake_client.__getitem__.return_value
        fake_client.__getitem__.assert_called_once_with(settings.database_name)
        fake_client.close.assert_not_called()

        with pytest.raises(StopAsyncIteration):
            await dependency.__anext__()

    fake_client.close.assert_called_once()


@pytest.mark.asyncio
async def test_get_db_closes_client_when_handler_fails():
    fake_client = MagicMock()
    with patch("app.core.database.create_client", return_value=fake_client):
        dependency = get_db()
        await dependency.__anext__()

        with pytest.raises(RuntimeError):
            await dependency.athrow(RuntimeError("handler failed"))

    fake_client.close.assert_called_once()


@pytest.mark.asyncio
async def test_service_create_rejects_duplicate_ids():
    db = AsyncMongoMockClient()[settings.database_name]

    assert await property_service.create_document(db, {"id": "1"}) is True
    assert await property_service.create_document(db, {"id": "1", "city": "Austin"}) is False
    assert len(await property_service.list_documents(db)) == 1


@pytest.mark.asyncio
async def test_service_update_reports_match():
    db = AsyncMongoMockClient()[settings.database_name]
    await db.properties.insert_one({"id": "1", "city": "Austin"})

    assert await property_service.update_document(db, "1", {"city": "Austin"}) is True
    assert await property_service.update_document(db, "2", {"city": "Austin"}) is False


def test_serialize_document_converts_nested_object_ids():
    from bson import ObjectId

    oid = ObjectId()
    doc = {"_id": oid, "refs": [oid], "owner": {"_id": oid}, "zip": 12345}

    assert serialize_document(doc) == {
        "_id": str(oid),
        "refs": [str(oid)],
        "owner": {"_id": str(oid)},
        "zip": 12345,
    }
