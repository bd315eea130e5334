"""Tests for portfolio API endpoints."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from zcv import __version__
from zcv.api.main import app
from zcv.models import Portfolio


@pytest.fixture
def client(api_db: None) -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_empty_portfolio(client: TestClient) -> None:
    response = client.get("/api/portfolio")
    assert response.status_code == 200
    data = response.json()
    assert data["personalInfo"]["name"] == ""
    assert data["completeness"] == 0
    assert data["experiences"] == []


def test_update_personal_info(client: TestClient) -> None:
    response = client.patch(
        "/api/portfolio/personal-info", json={"name": "Jane", "linkedin": "in/jane"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["personalInfo"]["name"] == "Jane"
    assert data["personalInfo"]["linkedin"] == "in/jane"
    assert data["completeness"] == 5


def test_update_personal_info_unknown_field(client: TestClient) -> None:
    response = client.patch("/api/portfolio/personal-info", json={"age": 30})
    assert response.status_code == 400
    assert "age" in response.json()["detail"]


def test_update_summary(client: TestClient) -> None:
    response = client.patch("/api/portfolio/summary", json={"elevator_pitch": "I ship."})
    assert response.status_code == 200
    assert response.json()["professionalSummary"]["elevator_pitch"] == "I ship."


def test_import_and_completeness(client: TestClient, portfolio: Portfolio) -> None:
    payload = portfolio.model_dump(mode="json", by_alias=True)
    payload["completeness"] = 3

    response = client.post("/api/portfolio/import", json=payload)
    assert response.status_code == 200
    assert response.json()["completeness"] == 85

    response = client.get("/api/portfolio/completeness")
    assert response.status_code == 200
    data = response.json()
    assert data["completeness"] == 85
    assert data["breakdown"]["experiences"] == 15
    assert data["breakdown"]["elevator_pitch"] == 0


def test_import_invalid(client: TestClient) -> None:
    response = client.post("/api/portfolio/import", json={"experiences": "many"})
    assert response.status_code == 422


def test_import_duplicate_skills(client: TestClient) -> None:
    payload = {"skills": [{"name": "Python"}, {"name": "Python"}]}
    assert client.post("/api/portfolio/import", json=payload).status_code == 422
    assert client.get("/api/portfolio/skills").json() == []


def test_export(client: TestClient, tmp_path: Path) -> None:
    client.patch("/api/portfolio/personal-info", json={"name": "Jane"})

    response = client.post("/api/portfolio/export", json={"directory": str(tmp_path)})
    assert response.status_code == 200
    path = Path(response.json()["path"])
    assert path.parent == tmp_path
    assert path.name.startswith("Jane_")
    assert json.loads(path.read_text(encoding="utf-8"))["personalInfo"]["name"] == "Jane"


def test_export_default_directory(client: TestClient, zcv_env: Path) -> None:
    response = client.post("/api/portfolio/export")
    assert response.status_code == 200
    assert Path(response.json()["path"]).parent == zcv_env


def test_analysis(client: TestClient, portfolio: Portfolio) -> None:
    client.post("/api/portfolio/import", json=portfolio.model_dump(mode="json", by_alias=True))
    response = client.get("/api/portfolio/analysis")
    assert response.status_code == 200
    data = response.json()
    assert data["completeness"] == 85
    assert "Career objective" in data["gaps"]


def test_changes_survive_a_new_store(client: TestClient) -> None:
    from zcv.api.dependencies import reset_state

    client.patch("/api/portfolio/personal-info", json={"name": "Jane"})
    reset_state()
    assert client.get("/api/portfolio").json()["personalInfo"]["name"] == "Jane"
