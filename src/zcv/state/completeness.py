"""Weighted completeness score of a portfolio."""

from __future__ import annotations

from zcv.models import Portfolio

__all__ = ["MAX_SCORE", "calculate_completeness", "completeness_breakdown"]

MAX_SCORE = 100


def completeness_breakdown(portfolio: Portfolio) -> dict[str, int]:
    """Return the points earned per scoring criterion.

    Personal info and professional summary are worth 20 each, experience 25,
    projects 15, education 10 and skills 10.
    """
    info = portfolio.personal_info
    summary = portfolio.professional_summary

    return {
        "name": 5 if info.name else 0,
        "email": 5 if info.email else 0,
        "phone": 5 if info.phone else 0,
        "location": 5 if info.location else 0,
        "headline": 5 if summary.headline else 0,
        "elevator_pitch": 5 if summary.elevator_pitch else 0,
        "career_objective": 5 if summary.career_objective else 0,
        "value_proposition": 5 if summary.value_proposition else 0,
        "experiences": 15 if portfolio.experiences else 0,
        "experience_achievements": (
            10 if any(exp.achievements for exp in portfolio.experiences) else 0
        ),
        "projects": 10 if portfolio.projects else 0,
        "project_github": 5 if any(proj.github_url for proj in portfolio.projects) else 0,
        "education": 10 if portfolio.education else 0,
        "skills": 10 if portfolio.skills else 0,
    }


def calculate_completeness(portfolio: Portfolio) -> int:
    """Return the completeness percentage (0-100) of *portfolio*."""
    score = sum(completeness_breakdown(portfolio).values())
    return round(score / MAX_SCORE * 100)
