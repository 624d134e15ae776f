import pytest
from fastapi.testclient import TestClient

from facematch.api.routes import get_dataset
from facematch.core import compute_ratios
from facematch.main import app

DATASET = {
    "alice.jpg": compute_ratios([23.0, 15.0, 11.0, 6.5, 5.0, 4.5]),
    "bob.jpg": compute_ratios([25.5, 16.2, 12.1, 6.8, 5.6, 5.2]),
    "broken.jpg": compute_ratios([1.0, 0.0, 1.0, 1.0, 1.0, 1.0]),
}


@pytest.fixture
def client():
    app.dependency_overrides[get_dataset] = lambda: DATASET
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_match_returns_best_face(client):
    response = client.post("/api/match", json={"measurements": [23, 15, 11, 6.5, 5, 4.5]})

    assert response.status_code == 200
    assert response.json() == {"label": "alice.jpg", "score": 0.0}


def test_match_diagnostics_and_top(client):
    response = client.post(
        "/api/match",
        json={"measurements": [25.5, 16.2, 12.1, 6.8, 5.6, 5.2], "diagnostics": True, "top": 2},
    )
    body = response.json()

    assert response.status_code == 200
    assert body["label"] == "bob.jpg"
    assert [entry["label"] for entry in body["scores"]] == ["alice.jpg", "bob.jpg", "broken.jpg"]
    assert body["scores"][2]["score"] is None
    assert [entry["label"] for entry in body["top"]] == ["bob.jpg", "alice.jpg"]


def test_match_rejects_wrong_length(client):
    response = client.post("/api/match", json={"measurements": [1, 2, 3]})
    assert response.status_code == 400


def test_match_rejects_negative_top(client):
    response = client.post("/api/match", json={"measurements": [1, 2, 3, 4, 5, 6], "top": -1})
    assert response.status_code == 400


def test_match_empty_dataset(client):
    app.dependency_overrides[get_dataset] = lambda: {}
    response = client.post("/api/match", json={"measurements": [1, 2, 3, 4, 5, 6]})
    assert response.status_code == 404


def test_ratios_endpoint(client):
    response = client.post("/api/ratios", json={"measurements": [1, 0, 2, 4, 8, 16]})
    ratios = response.json()["ratios"]

    assert response.status_code == 200
    assert len(ratios) == 15
    assert ratios[0] is None
    assert ratios[1] == 0.5


def test_faces_endpoint(client):
    response = client.get("/api/faces")
    assert response.json() == {"count": 3, "labels": ["alice.jpg", "bob.jpg", "broken.jpg"]}


def test_dataset_load_failure(tmp_path, monkeypatch):
    monkeypatch.setenv("FACEMATCH_DATASET", str(tmp_path / "missing.txt"))
    get_dataset.cache_clear()
    try:
        response = TestClient(app).get("/api/faces")
    finally:
        get_dataset.cache_clear()

    assert response.status_code == 500
    assert "Failed to load dataset" in response.json()["detail"]["error"]


def test_dataset_invalid_utf8(tmp_path, monkeypatch):
    path = tmp_path / "faces.txt"
    path.write_bytes(b"FACE a\xff\n1 2 3 4 5 6\n")
    monkeypatch.setenv("FACEMATCH_DATASET", str(path))
    get_dataset.cache_clear()
    try:
        response = TestClient(app).get("/api/faces")
    finally:
        get_dataset.cache_clear()

    assert response.status_code == 500
    assert "not valid UTF-8" in response.json()["detail"]["error"]


def test_unexpected_error_returns_traceback(client, monkeypatch):
    def fail(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("facematch.api.routes.match_measurements", fail)
    response = client.post("/api/match", json={"measurements": [1, 2, 3, 4, 5, 6]})
    detail = response.json()["detail"]

    assert response.status_code == 500
    assert detail["error"] == "boom"
    assert "RuntimeError: boom" in detail["traceback"]
