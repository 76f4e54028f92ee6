"""
Tests for the LienPilot HTTP API.

Tests cover:
- POST /evaluate (success, validation failure, partial answers)
- POST /deadlines
- POST /report
- GET /rules and GET /health
"""

import pytest

from tests.conftest import make_answers


class TestLienPilotAPI:
    """Tests for API endpoints via TestClient."""

    @pytest.fixture(scope="class")
    def client(self):
        from fastapi.testclient import TestClient
        from api.main import app
        with TestClient(app) as c:
            yield c

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["rules_loaded"] is True

    def test_rules(self, client):
        resp = client.get("/rules")
        assert resp.status_code == 200
        data = resp.json()
        assert data["id"] == "US-TX-PROPERTY-CODE-53"
        assert data["rules"]["subcontractor_months"] == 2

    def test_evaluate(self, client):
        resp = client.post("/evaluate", json={"answers": make_answers(), "today": "2024-02-01"})
        assert resp.status_code == 200
        data = resp.json()

        assert data["deadline"]["deadline_date"] == "2024-03-15"
        assert data["deadline"]["days_remaining"] == 43
        assert data["validity"]["level"] == "strong"
        assert data["role_tier"] == "subcontractorTier"
        assert data["kit_track"]["primary"] == "commercial"
        assert data["rules_version"] == "1.0.0"
        assert resp.headers["X-Request-ID"] == data["request_id"]

    def test_evaluate_questionnaire_labels(self, client):
        answers = {
            "contractParty": "Property owner directly",
            "lastWorkDate": "2024-10-31",
            "writtenContract": "Yes, signed written contract",
        }
        resp = client.post("/evaluate", json={"answers": answers, "today": "2024-11-01"})
        assert resp.status_code == 200
        assert resp.json()["deadline"]["deadline_date"] == "2025-01-15"

    def test_evaluate_invalid_answers(self, client):
        answers = make_answers(contract_party="landlord", amount_owed="-10")
        resp = client.post("/evaluate", json={"answers": answers, "today": "2024-02-01"})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "LP_VALIDATION_ERROR"
        assert {e["field"] for e in data["errors"]} == {"contract_party", "amount_owed"}

    def test_evaluate_partial(self, client):
        resp = client.post(
            "/evaluate",
            json={"answers": {"contract_party": "owner"}, "partial": True},
        )
        assert resp.status_code == 200
        assert resp.json()["deadline"]["deadline_date"] is None
        assert resp.json()["validity"] == {"level": "unknown"}
        assert resp.json()["recommendations"] == []

    def test_evaluate_missing_body(self, client):
        resp = client.post("/evaluate", json={"today": "2024-02-01"})
        assert resp.status_code == 422

    def test_deadlines(self, client):
        answers = make_answers(project_type="residential-single", retainage_amount="5000")
        resp = client.post("/deadlines", json={"answers": answers, "today": "2024-02-01"})
        assert resp.status_code == 200
        data = resp.json()

        titles = [d["title"] for d in data["deadlines"]]
        assert "File Retainage Notice" in titles
        lien = next(d for d in data["deadlines"] if d["title"] == "File Mechanics Lien")
        assert lien["due_date"] == "2024-03-15"
        assert lien["label"] == "Mar 15, 2024"

    def test_report(self, client):
        body = {
            "answers": make_answers(),
            "today": "2024-02-01",
            "contact": {
                "first_name": "Dana",
                "last_name": "Reyes",
                "email": "dana@example.com",
            },
        }
        resp = client.post("/report", json=body)
        assert resp.status_code == 200
        report = resp.json()["report"]

        assert report["results"]["validity_label"] == "Lien Claim Validity: STRONG"
        assert report["results"]["deadline_line"] == (
            "Filing Deadline: 3/15/2024 (43 days remaining)"
        )
        assert report["filename"] == "LienProfessor_Assessment_Dana_Reyes_2024-02-01.pdf"
        assert report["action_plan"][0].startswith("1. ")
