"""Tests for resume API endpoints."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from zcv.api.main import app
from zcv.models import Portfolio

JD = """Senior Frontend Engineer at Globex

We are looking for someone fluent in React and TypeScript.
"""


@pytest.fixture
def client(api_db: None, portfolio: Portfolio) -> TestClient:
    """Create a test client with the sample portfolio imported."""
    client = TestClient(app)
    payload = portfolio.model_dump(mode="json", by_alias=True)
    assert client.post("/api/portfolio/import", json=payload).status_code == 200
    return client


def _generate(client: TestClient, template: str = "tech") -> dict:
    response = client.post(
        "/api/resumes/generate",
        json={
            "role": "Software Engineer",
            "template": template,
            "selection": {"experiences": ["exp-1"], "skills": ["Python"]},
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_roles(client: TestClient) -> None:
    roles = client.get("/api/resumes/roles").json()
    assert len(roles) == 6
    assert roles[0]["keySkills"]


def test_templates_flag_recommended(client: TestClient) -> None:
    templates = client.get("/api/resumes/templates", params={"role": "Software Engineer"}).json()
    assert {t["id"] for t in templates} == {"tech", "modern", "classic", "executive"}
    assert {t["id"] for t in templates if t["recommended"]} == {"tech", "modern"}


def test_generate(client: TestClient) -> None:
    resume = _generate(client)
    assert resume["type"] == "role-based"
    assert resume["targetRole"] == "Software Engineer"
    assert resume["selectedExperiences"] == ["exp-1"]
    assert "Acme" in resume["latex"]

    assert client.get("/api/view").json()["view"] == "resume-manager"
    assert [r["id"] for r in client.get("/api/resumes").json()] == [resume["id"]]


def test_generate_without_content(client: TestClient) -> None:
    response = client.post(
        "/api/resumes/generate",
        json={"role": "Software Engineer", "selection": {"skills": ["Python"]}},
    )
    assert response.status_code == 400
    assert client.get("/api/resumes").json() == []


def test_generate_unknown_template(client: TestClient) -> None:
    response = client.post(
        "/api/resumes/generate",
        json={"role": "SWE", "template": "fancy", "selection": {"projects": ["proj-1"]}},
    )
    assert response.status_code == 400


def test_analyze(client: TestClient) -> None:
    response = client.post("/api/resumes/analyze", json={"jobDescription": JD})
    assert response.status_code == 200
    data = response.json()
    assert data["company"] == "Globex"
    assert data["position"] == "Senior Frontend Engineer"
    assert data["keywords"]
    assert data["suggestions"]


def test_analyze_blank(client: TestClient) -> None:
    assert client.post("/api/resumes/analyze", json={"jobDescription": " "}).status_code == 400


def test_tailor(client: TestClient) -> None:
    response = client.post("/api/resumes/tailor", json={"jobDescription": JD, "template": "modern"})
    assert response.status_code == 201
    data = response.json()
    assert data["resume"]["type"] == "jd-tailored"
    assert data["resume"]["targetCompany"] == "Globex"
    assert data["analysis"]["company"] == "Globex"


def test_get_and_latex(client: TestClient) -> None:
    resume = _generate(client)
    assert client.get(f"/api/resumes/{resume['id']}").json()["name"] == resume["name"]

    response = client.get(f"/api/resumes/{resume['id']}/latex")
    assert response.status_code == 200
    assert response.text == resume["latex"]
    assert response.headers["content-type"].startswith("text/plain")


def test_missing_resume(client: TestClient) -> None:
    assert client.get("/api/resumes/nope").status_code == 404
    assert client.get("/api/resumes/nope/latex").status_code == 404
    assert client.post("/api/resumes/nope/duplicate").status_code == 404
    assert client.delete("/api/resumes/nope").status_code == 404


def test_download_counts(client: TestClient, tmp_path: Path) -> None:
    resume = _generate(client)
    url = f"/api/resumes/{resume['id']}/download"

    first = client.post(url, json={"directory": str(tmp_path)}).json()
    second = client.post(url, json={"directory": str(tmp_path)}).json()

    path = Path(second["path"])
    assert path.parent == tmp_path
    assert path.suffix == ".tex"
    assert path.read_text(encoding="utf-8") == resume["latex"]
    assert (first["downloadCount"], second["downloadCount"]) == (1, 2)


def test_duplicate_and_delete(client: TestClient) -> None:
    resume = _generate(client)

    response = client.post(f"/api/resumes/{resume['id']}/duplicate")
    assert response.status_code == 201
    copy = response.json()
    assert copy["id"] != resume["id"]
    assert copy["latex"] == resume["latex"]

    assert client.delete(f"/api/resumes/{resume['id']}").status_code == 204
    assert [r["id"] for r in client.get("/api/resumes").json()] == [copy["id"]]


def test_list_filters(client: TestClient) -> None:
    _generate(client)
    client.post("/api/resumes/tailor", json={"jobDescription": JD})

    tailored = client.get("/api/resumes", params={"type": "jd-tailored"}).json()
    assert [r["targetCompany"] for r in tailored] == ["Globex"]

    found = client.get("/api/resumes", params={"search": "globex"}).json()
    assert len(found) == 1

    assert client.get("/api/resumes", params={"sortBy": "sideways"}).status_code == 422


def test_select(client: TestClient) -> None:
    resume = _generate(client)

    response = client.put("/api/resumes/selected", json={"resumeId": resume["id"]})
    assert response.json() == {"selectedResumeId": resume["id"]}
    assert client.get("/api/view").json()["selectedResumeId"] == resume["id"]

    assert client.put("/api/resumes/selected", json={"resumeId": "nope"}).status_code == 404
    assert client.put("/api/resumes/selected", json={}).json() == {"selectedResumeId": None}
