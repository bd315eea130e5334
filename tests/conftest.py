from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

import zcv.data.db as app_db
from zcv.config import get_settings
from zcv.models import (
    Achievement,
    Education,
    Experience,
    PersonalInfo,
    Portfolio,
    ProfessionalSummary,
    Project,
    Skill,
)
from zcv.state import ZcvStore


@pytest.fixture(autouse=True)
def zcv_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point the local cache and exports at a temp dir and disable simulated delays."""
    db_path = tmp_path / "cache.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    export_dir = tmp_path / "exports"
    monkeypatch.setenv("ZCV_EXPORT_DIR", export_dir.as_posix())
    for name in ("ZCV_CHAT_DELAY", "ZCV_PHASE_DELAY", "ZCV_GENERATE_DELAY", "ZCV_ANALYZE_DELAY"):
        monkeypatch.setenv(name, "0")
    get_settings.cache_clear()
    app_db.reset_engine()
    yield export_dir
    app_db.reset_engine()
    get_settings.cache_clear()


@pytest.fixture
def api_db() -> Iterator[None]:
    """Give API tests a fresh shared store on the temporary cache."""
    from zcv.api.dependencies import reset_state

    reset_state()
    app_db.init_db()
    yield
    reset_state()


@pytest.fixture
def store() -> ZcvStore:
    return ZcvStore()


@pytest.fixture
def portfolio() -> Portfolio:
    """A portfolio with one record in every section."""
    return Portfolio(
        personal_info=PersonalInfo(
            name="Jane Doe",
            email="jane@example.com",
            phone="555-0100",
            location="Vancouver, BC",
            linkedin="https://linkedin.com/in/janedoe",
            github="https://github.com/janedoe",
        ),
        professional_summary=ProfessionalSummary(headline="Backend engineer"),
        experiences=[
            Experience(
                id="exp-1",
                title="Software Engineer",
                company="Acme",
                location="Remote",
                start_date="2021-03",
                is_current_role=True,
                achievements=["Cut p99 latency by 40%", "Led migration to Postgres"],
                technologies=["Python", "PostgreSQL"],
            )
        ],
        projects=[
            Project(
                id="proj-1",
                name="Tracker",
                start_date="2020-01",
                end_date="2020-06",
                description="Expense tracker for students",
                outcomes=["200 active users", "Featured on campus blog", "Open sourced"],
                technologies=["React", "FastAPI"],
                github_url="https://github.com/janedoe/tracker",
            )
        ],
        education=[
            Education(
                id="edu-1",
                degree="B.Sc.",
                major="Computer Science",
                school="UBC",
                start_date="2016-09",
                end_date="2020-05",
                gpa="3.8",
                academic_awards=["Dean's List"],
            )
        ],
        skills=[
            Skill(name="Python", category="programming"),
            Skill(name="React", category="framework"),
            Skill(name="Docker", category="tool"),
            Skill(name="Mentoring", category="soft-skill"),
        ],
        achievements=[
            Achievement(id="ach-1", title="Hackathon Winner", organization="nwHacks", date="2019-01")
        ],
    )


@pytest.fixture
def loaded_store(portfolio: Portfolio) -> ZcvStore:
    from zcv.state import Action, ActionType

    store = ZcvStore()
    store.dispatch(Action(ActionType.LOAD_PORTFOLIO, portfolio))
    return store
