"""
API Integration Tests — Endpoint Verification

Tests every public API endpoint using FastAPI's TestClient.

These tests catch:
  - Schema mismatches (response model vs actual data)
  - Route registration issues
  - Middleware regressions
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


# --- Fixtures ---

@pytest.fixture(scope="module")
def client():
    """Create a test client for the calmsense API."""
    from api.main import app
    with TestClient(app) as c:
        yield c


# ============================================================
# HEALTH & META
# ============================================================

class TestHealth:

    def test_health_returns_200(self, client):
        r = client.get("/health")
        assert r.status_code == 200

    def test_health_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["categories"] == 7
        assert data["patterns"] == 49
        assert data["core_version"]

    def test_version_headers(self, client):
        r = client.get("/health")
        assert "X-Core-Version" in r.headers
        assert r.headers["X-Content-Type-Options"] == "nosniff"


class TestPatterns:

    def test_catalog(self, client):
        data = client.get("/patterns").json()
        assert data["total_patterns"] == 49
        assert data["categories"]["ocd"]["threshold"] == 5
        assert data["categories"]["crisis"]["patterns"][1] == {
            "description": "Explicit suicide intent", "weight": 5,
        }


# ============================================================
# ANALYZE
# ============================================================

class TestAnalyze:

    def test_panic_message(self, client):
        r = client.post("/analyze", json={
            "text": "I think I'm having a panic attack—my heart is racing and I can't breathe.",
        })
        assert r.status_code == 200
        data = r.json()
        assert data["context"]["panic"]["thresholdMet"] is True
        assert data["context"]["panic"]["confidence"] == "high"
        assert data["anxiety_level"] == 8
        assert data["requires_crisis_response"] is False

    def test_psychosis_message(self, client):
        data = client.post("/analyze", json={
            "text": "The CIA is following me everywhere I go.",
        }).json()
        assert data["psychosis"]["hasIndicators"] is True
        assert "agency+surveillance" in data["psychosis"]["matches"]

    def test_empty_text_rejected(self, client):
        r = client.post("/analyze", json={"text": ""})
        assert r.status_code == 422

    def test_missing_text_rejected(self, client):
        r = client.post("/analyze", json={})
        assert r.status_code == 422

    def test_oversized_body_rejected(self, client):
        r = client.post("/analyze", json={"text": "a" * 1_100_000})
        assert r.status_code == 413


class TestAnalyzeBatch:

    def test_batch(self, client):
        r = client.post("/analyze/batch", json={"items": [
            {"text": "I am anxious about my exam"},
            {"text": "Feeling calm today"},
        ]})
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 2
        assert data["scanned"] == 2
        assert data["results"][0]["triggers"] == ["performance"]

    def test_empty_batch_rejected(self, client):
        r = client.post("/analyze/batch", json={"items": []})
        assert r.status_code == 422


# ============================================================
# SCREENING
# ============================================================

class TestScreening:

    def test_first_question(self, client):
        data = client.post("/screening/next", json={"responses": []}).json()
        assert data["question_number"] == 1
        assert data["complete"] is False
        assert data["question"].endswith("(Please answer yes or no)")

    def test_complete(self, client):
        responses = [{"question_number": n, "answer": "no"} for n in range(1, 7)]
        data = client.post("/screening/next", json={"responses": responses}).json()
        assert data["complete"] is True
        assert data["question"] is None

    def test_assess_imminent(self, client):
        data = client.post("/screening/assess", json={"responses": [
            {"question_number": 5, "answer": "yes"},
        ]}).json()
        assert data["finalRiskLevel"] == "imminent"
        assert data["shouldAlert"] is True
        assert data["recommendation"] in data["message"]

    def test_assess_low(self, client):
        data = client.post("/screening/assess", json={"responses": []}).json()
        assert data["finalRiskLevel"] == "low"
        assert data["shouldAlert"] is False
        assert "988" in data["message"]

    def test_invalid_answer_rejected(self, client):
        r = client.post("/screening/assess", json={"responses": [
            {"question_number": 1, "answer": "maybe"},
        ]})
        assert r.status_code == 422
