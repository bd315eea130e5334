"""Tests for the dashboard and view endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from zcv.api.main import app
from zcv.models import Portfolio


@pytest.fixture
def client(api_db: None) -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


def test_default_view(client: TestClient) -> None:
    assert client.get("/api/view").json() == {"view": "dashboard", "selectedResumeId": None}


def test_set_view(client: TestClient) -> None:
    response = client.put("/api/view", json={"view": "resume-generator"})
    assert response.status_code == 200
    assert response.json()["view"] == "resume-generator"


def test_set_unknown_view(client: TestClient) -> None:
    response = client.put("/api/view", json={"view": "settings"})
    assert response.status_code == 400
    assert client.get("/api/view").json()["view"] == "dashboard"


def test_empty_dashboard(client: TestClient) -> None:
    data = client.get("/api/dashboard").json()
    assert data["stats"][0] == {"label": "Profile Completeness", "value": "0%"}
    assert data["nextStep"]["view"] == "chat"
    assert [i["title"] for i in data["insights"]] == ["Start with AI Discovery"]
    assert data["recentResumes"] == []


def test_dashboard_with_portfolio(client: TestClient, portfolio: Portfolio) -> None:
    client.post("/api/portfolio/import", json=portfolio.model_dump(mode="json", by_alias=True))
    client.post(
        "/api/resumes/generate",
        json={"role": "Data Scientist", "selection": {"projects": ["proj-1"]}},
    )

    data = client.get("/api/dashboard").json()
    assert data["stats"][0]["value"] == "85%"
    assert data["stats"][3] == {"label": "Generated Resumes", "value": "1"}
    assert data["nextStep"]["view"] == "resume-generator"
    assert data["recentResumes"][0]["targetRole"] == "Data Scientist"
