from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from _fakes import FakeEnhancer
from clearspeak.engine import IntentEngine
from clearspeak.main import create_app


@pytest.fixture
def engine() -> IntentEngine:
    return IntentEngine(enhancer=FakeEnhancer())


@pytest.fixture
def client(engine: IntentEngine) -> TestClient:
    return TestClient(create_app(engine=engine))


def _ids(resp) -> list:
    return [s["id"] for s in resp.json()["suggestions"]]


def test_health_ok(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    data: Dict[str, Any] = resp.json()
    assert data["status"] == "ok"
    assert "version" in data
    assert isinstance(data.get("uptime_seconds"), int)


def test_suggestions_for_query(client: TestClient) -> None:
    resp = client.get("/api/suggestions", params={"q": "water", "limit": 2})
    assert resp.status_code == 200
    data = resp.json()
    assert data["query"] == "water"
    assert data["suggestions"][0]["id"] == "water-1"
    assert data["suggestions"][0]["enhanced"].startswith("Could I please have some water?")
    assert data["suggestions"][0]["icon"] == "Droplets"
    assert len(data["suggestions"]) <= 2


def test_empty_query_returns_popular(client: TestClient) -> None:
    resp = client.get("/api/suggestions", params={"q": ""})
    assert _ids(resp) == ["help-1", "thanks-1", "restroom-1", "hello-1", "water-1"]


def test_limit_is_validated(client: TestClient) -> None:
    assert client.get("/api/suggestions", params={"q": "x", "limit": -1}).status_code == 422
    assert client.get("/api/suggestions/popular", params={"limit": 500}).status_code == 422


def test_popular_and_emergency(client: TestClient) -> None:
    assert _ids(client.get("/api/suggestions/popular", params={"limit": 2})) == ["help-1", "thanks-1"]
    assert len(_ids(client.get("/api/suggestions/emergency"))) == 4


def test_category_endpoint(client: TestClient) -> None:
    resp = client.get("/api/suggestions/category/Medical", params={"limit": 2})
    assert resp.status_code == 200
    assert _ids(resp) == ["pain-1", "doctor-1"]
    assert client.get("/api/suggestions/category/weather").status_code == 404


def test_selection_records_usage(client: TestClient, engine: IntentEngine) -> None:
    resp = client.post("/api/selections", json={"id": "water-1"})
    assert resp.status_code == 204
    assert engine.state.count("I need water") == 1
    assert client.post("/api/selections", json={"id": "nope"}).status_code == 404
    assert client.post("/api/selections", json={}).status_code == 422


def test_enhance_reports_tier(client: TestClient) -> None:
    first = client.post("/api/enhance", json={"text": "bring me a blanket"}).json()
    assert first == {
        "original": "bring me a blanket",
        "enhanced": "Enhanced: bring me a blanket",
        "tier": "remote",
        "confidence": None,
        "entry_id": None,
    }
    second = client.post("/api/enhance", json={"text": "bring me a blanket"}).json()
    assert second["tier"] == "cache"
    assert second["enhanced"] == first["enhanced"]


def test_enhance_empty_text(client: TestClient) -> None:
    data = client.post("/api/enhance", json={"text": ""}).json()
    assert data["enhanced"] == ""
    assert data["tier"] == "heuristic"


def test_enhance_direct_match_after_selection(client: TestClient) -> None:
    client.post("/api/selections", json={"id": "help-1"})
    data = client.post("/api/enhance", json={"text": "I need help"}).json()
    assert data["tier"] == "direct"
    assert data["entry_id"] == "help-1"
    assert data["confidence"] > 0.7


def test_enhance_rejects_oversized_text(client: TestClient) -> None:
    assert client.post("/api/enhance", json={"text": "a" * 2001}).status_code == 422


def test_unhandled_error_is_sanitized(engine: IntentEngine, monkeypatch) -> None:
    def boom(*_args, **_kwargs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(engine, "popular", boom)
    client = TestClient(create_app(engine=engine), raise_server_exceptions=False)
    resp = client.get("/api/suggestions/popular")
    assert resp.status_code == 500
    assert resp.json() == {"status": "error", "detail": "sanitized failure"}
    assert "secret internals" not in resp.text
