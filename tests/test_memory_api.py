# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-18
# Description: test_memory_api.py
# -----------------------------------------------------------------------------
from unittest.mock import MagicMock

import pytest
from starlette.testclient import TestClient

from api.dependencies import get_health_service, get_memory_service
from api.main import app
from api.schemas.health import DeepHealthResponse, SmokeTestSummary
from demo.SampleData import README_KEY
from memory.MemoryQueryResult import MemoryQueryResult
from memory.MemoryRecord import MemoryRecord
from memory.RecordIdCodec import encode_id
from memory.exceptions import DecodingError, ServiceError
from services.SemanticMemoryService import SemanticMemoryService

README_URL = "https://github.com/microsoft/semantic-kernel/blob/main/README.md"


@pytest.fixture
def memory_service() -> MagicMock:
    return MagicMock(spec=SemanticMemoryService)


@pytest.fixture
def client(memory_service):
    app.dependency_overrides[get_memory_service] = lambda: memory_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_deep_health(client):
    health = MagicMock()
    health.deep_health.return_value = DeepHealthResponse(
        status="ok",
        results={"search_health": True},
        summary=SmokeTestSummary(total=1, passed=1, failed=0),
    )
    app.dependency_overrides[get_health_service] = lambda: health

    resp = client.get("/health/deep")

    assert resp.status_code == 200
    assert resp.json()["summary"]["passed"] == 1


def test_get_record(client, memory_service):
    memory_service.get.return_value = MemoryRecord(
        id=README_URL,
        text="README: Installation, getting started, and how to contribute",
        external_source_name="GitHub",
    )

    resp = client.get(f"/memory/records/{README_KEY}")

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["key"] == README_KEY
    assert body["record"]["id"] == README_URL
    assert body["record"]["embedding"] == []
    memory_service.get.assert_called_once_with(README_KEY, include_vectors=False)


def test_get_record_not_found(client, memory_service):
    memory_service.get.return_value = None
    assert client.get("/memory/records/bWlzc2luZw==").status_code == 404


def test_get_record_corrupt_stored_key_is_502(client, memory_service):
    memory_service.get.side_effect = DecodingError("Invalid encoded record id")
    resp = client.get(f"/memory/records/{README_KEY}")
    assert resp.status_code == 502
    assert "stored record key is invalid" in resp.json()["detail"]


def test_get_record_service_error(client, memory_service):
    memory_service.get.side_effect = ServiceError("forbidden", service="search")
    assert client.get(f"/memory/records/{README_KEY}").status_code == 502


def test_lookup_by_natural_id(client, memory_service):
    memory_service.get_by_id.return_value = MemoryRecord(id=README_URL)

    resp = client.get("/memory/lookup", params={"id": README_URL})

    assert resp.status_code == 200, resp.text
    assert resp.json()["key"] == README_KEY
    memory_service.get_by_id.assert_called_once_with(README_URL, include_vectors=False)


def test_save_information(client, memory_service):
    memory_service.save_information.return_value = encode_id("doc-1")

    resp = client.post("/memory/records", json={"id": "doc-1", "text": "hello", "description": "greeting"})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"key": encode_id("doc-1")}
    memory_service.save_information.assert_called_once_with(
        "doc-1", "hello", description="greeting", additional_metadata=None
    )


def test_store_batch(client, memory_service):
    memory_service.store_data.return_value = [encode_id("id_1"), encode_id("id_2")]

    resp = client.post("/memory/batch", json={"data": {"id_1": "This is test 1", "id_2": "This is test 2"}})

    assert resp.status_code == 200, resp.text
    assert resp.json() == {"requested": 2, "keys": [encode_id("id_1"), encode_id("id_2")]}


def test_store_batch_fail_fast_is_502(client, memory_service):
    memory_service.store_data.side_effect = ServiceError("quota exceeded", service="embedding")
    resp = client.post("/memory/batch", json={"data": {"id_1": "This is test 1"}})
    assert resp.status_code == 502


def test_delete_record(client, memory_service):
    resp = client.delete("/memory/records/aWRfMQ==")
    assert resp.status_code == 200
    assert resp.json() == {"key": "aWRfMQ==", "deleted": True}
    memory_service.remove.assert_called_once_with("aWRfMQ==")


def test_search(client, memory_service):
    memory_service.search.return_value = [
        MemoryQueryResult(record=MemoryRecord(id="id_1", description="This is test 1"), relevance=0.9)
    ]

    resp = client.post("/memory/search", json={"query": "test", "limit": 2})

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["results"][0]["record"]["id"] == "id_1"
    assert body["results"][0]["relevance"] == 0.9
    memory_service.search.assert_called_once_with("test", limit=2, include_vectors=False)
