"""Top-level application state held by the store."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from zcv.models.chat import ChatMessage
from zcv.models.portfolio import Portfolio, ZcvModel
from zcv.models.resume import GeneratedResume

__all__ = ["PortfolioAnalysis", "View", "ZcvState"]


class View(StrEnum):
    """Screens selectable through the view router."""

    DASHBOARD = "dashboard"
    PORTFOLIO_BUILDER = "portfolio-builder"
    CHAT = "chat"
    RESUME_GENERATOR = "resume-generator"
    RESUME_MANAGER = "resume-manager"


class PortfolioAnalysis(ZcvModel):
    completeness: int = 0
    strengths: list[str] = Field(default_factory=list)
    gaps: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ZcvState(ZcvModel):
    portfolio: Portfolio = Field(default_factory=Portfolio)
    resumes: list[GeneratedResume] = Field(default_factory=list)

    chat_messages: list[ChatMessage] = Field(default_factory=list)
    current_focus: str | None = None

    current_view: View = View.DASHBOARD
    selected_resume_id: str | None = None

    is_generating: bool = False
    is_tailoring: bool = False

    portfolio_analysis: PortfolioAnalysis = Field(default_factory=PortfolioAnalysis)
