# ============================================================================
# FILE: tests/unit/test_api.py
# ============================================================================
"""
Unit tests for the HTTP API
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_health(client):
    assert client.get("/api/health").json() == {"status": "healthy"}


def test_list_parameters(client):
    data = client.get("/api/parameters").json()

    assert len(data) == 23
    assert data[0] == {
        "name": "Hemoglobin",
        "unit": "g/dL",
        "normal_range": "12.0-15.5",
        "category": "Blood Count",
        "aliases": ["hgb", "hb"],
    }


def test_analyze_dictionary_text(client):
    response = client.post("/api/analyze", json={"text": "Glucose: 128 mg/dL", "filename": "scan.png"})
    data = response.json()

    assert response.status_code == 200
    assert data["filename"] == "scan.png"
    assert data["source"] == "dictionary"
    assert data["parameters"][0]["name"] == "Glucose"
    assert data["parameters"][0]["status"] == "high"
    assert data["insights"][0].startswith("📈 Elevated Values")


def test_analyze_empty_text_is_synthetic(client):
    data = client.post("/api/analyze", json={"text": "", "seed": 500}).json()

    assert data["source"] == "synthetic"
    assert [p["value"] for p in data["parameters"]] == ["13.2", "95", "200"]
    assert data["notes"]


def test_analyze_rejects_bad_seed(client):
    response = client.post("/api/analyze", json={"text": "", "seed": 1000})

    assert response.status_code == 422


@pytest.mark.parametrize("payload,status,range_valid", [
    ({"value": 301, "range_spec": "<200"}, "critical", True),
    ({"value": 35, "range_spec": ">40"}, "low", True),
    ({"value": 0.9, "range_spec": "0.6-1.2"}, "normal", True),
    ({"value": 9999, "range_spec": "Varies"}, "normal", False),
])
def test_classify(client, payload, status, range_valid):
    data = client.post("/api/classify", json=payload).json()

    assert data == {"status": status, "range_valid": range_valid}


def test_classify_rejects_zero(client):
    response = client.post("/api/classify", json={"value": 0, "range_spec": "<200"})

    assert response.status_code == 422
