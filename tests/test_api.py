from __future__ import annotations

import importlib

import pytest

from attendance_qa.main import create_app


@pytest.fixture
def client():
    app = create_app(importlib.import_module("config.testing"))
    return app.test_client()


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_validate_returns_result(client):
    body = {
        "naturalLanguageAnswer": "Emma Johnson (S1052) was absent.",
        "structuredData": {"students": []},
    }

    resp = client.post("/api/answers/validate", json=body)
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["success"] is True
    assert data["wellFormed"] is False
    assert data["result"]["valid"] is False
    assert data["result"]["autoFixes"] is None


def test_validate_with_auto_fix(client):
    body = {
        "naturalLanguageAnswer": "Bob Lee (S9) was absent.",
        "structuredData": {"students": [{"firstName": "Bob", "lastName": "Lee"}]},
    }

    data = client.post("/api/answers/validate?autoFix=1", json=body).get_json()

    assert data["result"]["autoFixes"]["fixedStructuredData"]["students"][0]["studentId"] == "S9"


def test_review_merges_validation_block(client):
    body = {
        "naturalLanguageAnswer": "Bob Lee (S9) was absent.",
        "structuredData": {"students": [{"firstName": "Bob", "lastName": "Lee"}]},
        "suggestedActions": [],
        "confidence": 0,
    }

    data = client.post("/api/answers/review", json=body).get_json()

    assert data["success"] is True
    assert data["answer"]["confidence"] == 0.8
    assert data["answer"]["_validation"] == {"applied": True, "valid": True, "issues": 1, "fixes": 1}


def test_non_object_body_is_rejected(client):
    resp = client.post("/api/answers/review", json=["not", "an", "object"])

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_rejected_answer_returns_422():
    from types import SimpleNamespace

    settings = SimpleNamespace(SECRET_KEY="x", LOG_LEVEL="WARNING", VALIDATION_THROW_ON_ERROR=True)
    client = create_app(settings).test_client()
    body = {"naturalLanguageAnswer": "Emma Johnson (S1052) was absent.", "structuredData": {"students": [{"firstName": "N/A"}]}}

    resp = client.post("/api/answers/review", json=body)

    assert resp.status_code == 422
    assert resp.get_json()["result"]["summary"]["placeholdersFound"] == 1
