"""Dashboard summary: stats, next step, insights and portfolio analysis."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from zcv.models import GeneratedResume, Portfolio, PortfolioAnalysis, View
from zcv.state.completeness import calculate_completeness, completeness_breakdown

__all__ = [
    "DashboardSummary",
    "Insight",
    "InsightKind",
    "NextStep",
    "Priority",
    "Stat",
    "analyze_portfolio",
    "build_dashboard",
    "next_step",
    "portfolio_insights",
    "recent_resumes",
]

MAX_INSIGHTS = 3
RECENT_RESUMES = 3
MIN_SKILLS = 5
STARTER_THRESHOLD = 30
READY_THRESHOLD = 70

_HAS_NUMBER = re.compile(r"\d")

# Human-readable names of the completeness criteria.
_CRITERIA = {
    "name": "Name",
    "email": "Email",
    "phone": "Phone",
    "location": "Location",
    "headline": "Headline",
    "elevator_pitch": "Elevator pitch",
    "career_objective": "Career objective",
    "value_proposition": "Value proposition",
    "experiences": "Work experience",
    "experience_achievements": "Experience achievements",
    "projects": "Projects",
    "project_github": "Project GitHub links",
    "education": "Education",
    "skills": "Skills",
}


class InsightKind(StrEnum):
    ACTION = "action"
    MISSING = "missing"
    IMPROVE = "improve"
    SUCCESS = "success"


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Stat:
    label: str
    value: str


@dataclass(frozen=True)
class NextStep:
    title: str
    description: str
    view: View


@dataclass(frozen=True)
class Insight:
    kind: InsightKind
    title: str
    description: str
    view: View
    priority: Priority


@dataclass(frozen=True)
class DashboardSummary:
    stats: list[Stat]
    next_step: NextStep
    insights: list[Insight]
    recent_resumes: list[GeneratedResume]


def portfolio_stats(portfolio: Portfolio, resumes: list[GeneratedResume]) -> list[Stat]:
    return [
        Stat("Profile Completeness", f"{portfolio.completeness}%"),
        Stat("Work Experience", str(len(portfolio.experiences))),
        Stat("Projects", str(len(portfolio.projects))),
        Stat("Generated Resumes", str(len(resumes))),
    ]


def recent_resumes(resumes: list[GeneratedResume]) -> list[GeneratedResume]:
    """The last three resumes added, newest first."""
    return list(reversed(resumes[-RECENT_RESUMES:]))


def next_step(portfolio: Portfolio) -> NextStep:
    if portfolio.completeness < STARTER_THRESHOLD:
        return NextStep(
            "Start Your Journey",
            "Let our AI help you discover your professional story",
            View.CHAT,
        )
    if portfolio.completeness < READY_THRESHOLD:
        return NextStep(
            "Complete Your Profile",
            "Add more details to unlock better resume generation",
            View.PORTFOLIO_BUILDER,
        )
    return NextStep(
        "Generate Your Resume",
        "Your profile is ready! Create a targeted resume",
        View.RESUME_GENERATOR,
    )


def portfolio_insights(portfolio: Portfolio, resumes: list[GeneratedResume]) -> list[Insight]:
    """Up to three suggestions, most important first."""
    insights: list[Insight] = []

    if portfolio.completeness < STARTER_THRESHOLD:
        insights.append(
            Insight(
                InsightKind.ACTION,
                "Start with AI Discovery",
                "Let our AI guide you through building your profile",
                View.CHAT,
                Priority.HIGH,
            )
        )
    elif portfolio.completeness < READY_THRESHOLD:
        if not portfolio.experiences:
            insights.append(
                Insight(
                    InsightKind.MISSING,
                    "Add Work Experience",
                    "Share your professional background",
                    View.PORTFOLIO_BUILDER,
                    Priority.HIGH,
                )
            )
        if not portfolio.projects:
            insights.append(
                Insight(
                    InsightKind.MISSING,
                    "Add Projects",
                    "Showcase your technical work",
                    View.PORTFOLIO_BUILDER,
                    Priority.MEDIUM,
                )
            )
        if len(portfolio.skills) < MIN_SKILLS:
            insights.append(
                Insight(
                    InsightKind.IMPROVE,
                    "Expand Skills List",
                    "Add more skills to strengthen your profile",
                    View.PORTFOLIO_BUILDER,
                    Priority.MEDIUM,
                )
            )
    else:
        insights.append(
            Insight(
                InsightKind.SUCCESS,
                "Ready to Generate!",
                "Your profile is complete. Create targeted resumes",
                View.RESUME_GENERATOR,
                Priority.HIGH,
            )
        )
        if not resumes:
            insights.append(
                Insight(
                    InsightKind.ACTION,
                    "Generate First Resume",
                    "Create your first professional resume",
                    View.RESUME_GENERATOR,
                    Priority.MEDIUM,
                )
            )

    if portfolio.experiences:
        quantified = any(
            _HAS_NUMBER.search(a) for exp in portfolio.experiences for a in exp.achievements
        )
        if not quantified:
            insights.append(
                Insight(
                    InsightKind.IMPROVE,
                    "Quantify Your Impact",
                    "Add numbers and metrics to your achievements",
                    View.PORTFOLIO_BUILDER,
                    Priority.LOW,
                )
            )

    return insights[:MAX_INSIGHTS]


def build_dashboard(portfolio: Portfolio, resumes: list[GeneratedResume]) -> DashboardSummary:
    return DashboardSummary(
        stats=portfolio_stats(portfolio, resumes),
        next_step=next_step(portfolio),
        insights=portfolio_insights(portfolio, resumes),
        recent_resumes=recent_resumes(resumes),
    )


def analyze_portfolio(portfolio: Portfolio) -> PortfolioAnalysis:
    """Split the completeness criteria into strengths and gaps."""
    breakdown = completeness_breakdown(portfolio)
    return PortfolioAnalysis(
        completeness=calculate_completeness(portfolio),
        strengths=[_CRITERIA[key] for key, points in breakdown.items() if points],
        gaps=[_CRITERIA[key] for key, points in breakdown.items() if not points],
        suggestions=[i.description for i in portfolio_insights(portfolio, [])],
    )
