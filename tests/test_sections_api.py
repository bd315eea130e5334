"""Tests for the portfolio section CRUD endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from zcv.api.main import app


@pytest.fixture
def client(api_db: None) -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


def _add(client: TestClient, section: str, payload: dict) -> dict:
    response = client.post(f"/api/portfolio/{section}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_list_experience(client: TestClient) -> None:
    created = _add(
        client,
        "experiences",
        {"title": "Engineer", "company": "Acme", "achievements": ["Shipped v2", ""]},
    )
    assert created["id"]
    assert created["achievements"] == ["Shipped v2"]

    listed = client.get("/api/portfolio/experiences").json()
    assert [e["id"] for e in listed] == [created["id"]]
    assert client.get("/api/portfolio").json()["completeness"] == 25


def test_get_update_delete(client: TestClient) -> None:
    created = _add(client, "projects", {"name": "Tracker", "type": "hackathon"})
    url = f"/api/portfolio/projects/{created['id']}"

    assert client.get(url).json()["type"] == "hackathon"

    response = client.put(url, json={"name": "Tracker Pro", "githubUrl": "https://gh/x"})
    assert response.status_code == 200
    assert response.json()["name"] == "Tracker Pro"
    assert response.json()["githubUrl"] == "https://gh/x"

    assert client.delete(url).status_code == 204
    assert client.get(url).status_code == 404
    assert client.delete(url).status_code == 404


def test_update_missing_record(client: TestClient) -> None:
    response = client.put("/api/portfolio/education/nope", json={"school": "UBC"})
    assert response.status_code == 404


def test_unknown_section(client: TestClient) -> None:
    assert client.get("/api/portfolio/hobbies").status_code == 422


def test_unknown_field(client: TestClient) -> None:
    response = client.post("/api/portfolio/achievements", json={"title": "x", "prize": 1})
    assert response.status_code == 400


def test_skills_by_name(client: TestClient) -> None:
    _add(client, "skills", {"name": "Python", "category": "programming"})
    _add(client, "skills", {"name": "React", "category": "framework"})

    response = client.post("/api/portfolio/skills", json={"name": "Python"})
    assert response.status_code == 409

    response = client.put("/api/portfolio/skills/Python", json={"yearsOfExperience": 4})
    assert response.status_code == 200
    assert response.json()["yearsOfExperience"] == 4

    assert client.delete("/api/portfolio/skills/React").status_code == 204
    assert [s["name"] for s in client.get("/api/portfolio/skills").json()] == ["Python"]


def test_filter_and_counts(client: TestClient) -> None:
    _add(client, "achievements", {"title": "AWS SAA", "type": "certification"})
    _add(client, "achievements", {"title": "Winner", "type": "competition"})

    filtered = client.get("/api/portfolio/achievements", params={"filter": "certification"})
    assert [a["title"] for a in filtered.json()] == ["AWS SAA"]

    counts = client.get("/api/portfolio/achievements/counts").json()
    assert counts["certification"] == 1
    assert counts["competition"] == 1
    assert counts["patent"] == 0

    assert client.get("/api/portfolio/achievements", params={"filter": "x"}).status_code == 400
    assert client.get("/api/portfolio/experiences/counts").status_code == 400


def test_empty_form(client: TestClient) -> None:
    form = client.get("/api/portfolio/education/empty-form").json()
    assert form["relevant_coursework"] == [""]
    assert form["thesis"]["title"] == ""
    assert "id" not in form
