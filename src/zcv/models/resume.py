"""Generated resume snapshots."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from zcv.models.portfolio import ZcvModel, new_id, utc_now

__all__ = ["GeneratedResume", "ResumeType"]


class ResumeType(StrEnum):
    ROLE_BASED = "role-based"
    JD_TAILORED = "jd-tailored"


class GeneratedResume(ZcvModel):
    """A point-in-time export artifact derived from a portfolio subset.

    Immutable after creation except for ``download_count``.
    """

    id: str = Field(default_factory=new_id)
    name: str
    kind: ResumeType = Field(ResumeType.ROLE_BASED, alias="type")
    target_role: str | None = None
    target_company: str | None = None
    job_description: str | None = None

    template: str
    sections: list[str] = Field(default_factory=list)
    emphasis: list[str] = Field(default_factory=list)

    latex: str = ""
    bullets: list[str] = Field(default_factory=list)
    selected_experiences: list[str] = Field(default_factory=list)
    selected_projects: list[str] = Field(default_factory=list)
    selected_skills: list[str] = Field(default_factory=list)
    selected_achievements: list[str] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    download_count: int = 0

    version: int = 1
    parent_resume_id: str | None = None
