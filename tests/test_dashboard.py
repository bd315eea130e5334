"""Tests for the dashboard summary and portfolio analysis."""

from __future__ import annotations

from zcv.models import GeneratedResume, Portfolio, View
from zcv.services.dashboard import (
    InsightKind,
    Priority,
    analyze_portfolio,
    build_dashboard,
    next_step,
    portfolio_insights,
    recent_resumes,
)


def _with_completeness(portfolio: Portfolio, value: int) -> Portfolio:
    return portfolio.model_copy(update={"completeness": value})


def test_stats(portfolio: Portfolio) -> None:
    summary = build_dashboard(_with_completeness(portfolio, 85), [])
    assert [(s.label, s.value) for s in summary.stats] == [
        ("Profile Completeness", "85%"),
        ("Work Experience", "1"),
        ("Projects", "1"),
        ("Generated Resumes", "0"),
    ]


def test_recent_resumes_newest_first() -> None:
    resumes = [GeneratedResume(name=f"r{i}", template="tech") for i in range(5)]
    assert [r.name for r in recent_resumes(resumes)] == ["r4", "r3", "r2"]


def test_next_step_thresholds() -> None:
    assert next_step(Portfolio(completeness=10)).view is View.CHAT
    assert next_step(Portfolio(completeness=30)).view is View.PORTFOLIO_BUILDER
    assert next_step(Portfolio(completeness=70)).view is View.RESUME_GENERATOR


def test_new_user_insight() -> None:
    insights = portfolio_insights(Portfolio(), [])
    assert [i.title for i in insights] == ["Start with AI Discovery"]
    assert insights[0].priority is Priority.HIGH


def test_midway_insights_are_capped() -> None:
    portfolio = Portfolio(completeness=50)
    insights = portfolio_insights(portfolio, [])
    assert [i.title for i in insights] == [
        "Add Work Experience",
        "Add Projects",
        "Expand Skills List",
    ]
    assert insights[0].kind is InsightKind.MISSING


def test_ready_insights(portfolio: Portfolio) -> None:
    ready = _with_completeness(portfolio, 85)
    titles = [i.title for i in portfolio_insights(ready, [])]
    assert titles == ["Ready to Generate!", "Generate First Resume"]

    resume = GeneratedResume(name="r", template="tech")
    assert [i.title for i in portfolio_insights(ready, [resume])] == ["Ready to Generate!"]


def test_quantify_impact(portfolio: Portfolio) -> None:
    exp = portfolio.experiences[0].model_copy(update={"achievements": ["Led the migration"]})
    vague = portfolio.model_copy(update={"experiences": [exp], "completeness": 85})
    insights = portfolio_insights(vague, [GeneratedResume(name="r", template="tech")])
    assert insights[-1].title == "Quantify Your Impact"
    assert insights[-1].priority is Priority.LOW


def test_analyze_portfolio(portfolio: Portfolio) -> None:
    analysis = analyze_portfolio(portfolio)
    assert analysis.completeness == 85
    assert "Project GitHub links" in analysis.strengths
    assert analysis.gaps == ["Elevator pitch", "Career objective", "Value proposition"]
    assert analysis.suggestions
