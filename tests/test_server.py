"""Tests for the FastAPI server."""
import pytest
from fastapi.testclient import TestClient

from src.api import server


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create a test client with no parser config file."""
    monkeypatch.setattr(server, "config_path", str(tmp_path / "missing.yaml"))
    server.get_parser.cache_clear()
    yield TestClient(server.app)
    server.get_parser.cache_clear()


def test_parse_entry(client):
    """Test a successful parse."""
    response = client.post("/api/parse", json={"text": "1 1/2 cups flour"})
    assert response.status_code == 200
    assert response.json() == {"quantity": 1.5, "unit": "cup", "food": "flour"}


def test_parse_entry_no_match(client):
    """Test a miss returns 422 with the error details."""
    response = client.post("/api/parse", json={"text": "a banana"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["error_code"] == "NO_UNIT_FOUND"
    assert detail["context"]["text"] == "a banana"


def test_parse_entry_strict(client):
    """Test strict mode per request."""
    lenient = client.post("/api/parse", json={"text": "some cup rice"})
    assert lenient.json()["quantity"] == 1

    strict = client.post("/api/parse", json={"text": "some cup rice", "strict": True})
    assert strict.status_code == 422
    assert strict.json()["detail"]["error_code"] == "UNKNOWN_QUANTITY_WORD"


def test_parse_batch(client):
    """Test batch parsing keeps order and reports each outcome."""
    response = client.post(
        "/api/parse/batch",
        json={"texts": ["half cup of blueberries", "1/0 cup rice"]},
    )
    assert response.status_code == 200
    entries = response.json()
    assert entries[0]["result"] == {"quantity": 0.5, "unit": "cup", "food": "blueberries"}
    assert entries[0]["error"] is None
    assert entries[1]["result"] is None
    assert entries[1]["error"]["error_code"] == "ZERO_DENOMINATOR"


def test_list_units(client):
    """Test units are listed with their spellings."""
    response = client.get("/api/units")
    assert response.status_code == 200
    units = response.json()
    assert units["cup"] == ["c", "cup", "cups"]
    assert "fluid ounce" in units["fl oz"]


def test_config_file_extends_units(tmp_path, monkeypatch):
    """Test the configured file is used by the endpoints."""
    config = tmp_path / "parser_config.yaml"
    config.write_text("parser:\n  unit_synonyms:\n    mug: cup\n")
    monkeypatch.setattr(server, "config_path", str(config))
    server.get_parser.cache_clear()
    try:
        client = TestClient(server.app)
        response = client.post("/api/parse", json={"text": "1 mug cocoa"})
        assert response.json() == {"quantity": 1.0, "unit": "cup", "food": "cocoa"}
        assert "mug" in client.get("/api/units").json()["cup"]
    finally:
        server.get_parser.cache_clear()
