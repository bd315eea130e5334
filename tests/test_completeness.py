from __future__ import annotations

from zcv.models import Experience, PersonalInfo, Portfolio, Project
from zcv.state import calculate_completeness
from zcv.state.completeness import completeness_breakdown


def test_empty_portfolio_scores_zero() -> None:
    assert calculate_completeness(Portfolio()) == 0


def test_full_fixture_score(portfolio: Portfolio) -> None:
    # Three professional-summary fields are blank.
    assert calculate_completeness(portfolio) == 85


def test_personal_info_points() -> None:
    portfolio = Portfolio(personal_info=PersonalInfo(name="A", email="a@b.c"))
    assert calculate_completeness(portfolio) == 10


def test_experience_without_achievements() -> None:
    portfolio = Portfolio(experiences=[Experience(title="Dev")])
    breakdown = completeness_breakdown(portfolio)
    assert breakdown["experiences"] == 15
    assert breakdown["experience_achievements"] == 0


def test_project_github_bonus() -> None:
    without = Portfolio(projects=[Project(name="X")])
    with_link = Portfolio(projects=[Project(name="X", github_url="https://github.com/x/x")])
    assert calculate_completeness(without) == 10
    assert calculate_completeness(with_link) == 15


def test_breakdown_caps_at_one_hundred(portfolio: Portfolio) -> None:
    summary = portfolio.professional_summary.model_copy(
        update={
            "elevator_pitch": "pitch",
            "career_objective": "objective",
            "value_proposition": "value",
        }
    )
    complete = portfolio.model_copy(update={"professional_summary": summary})
    assert sum(completeness_breakdown(complete).values()) == 100
    assert calculate_completeness(complete) == 100
