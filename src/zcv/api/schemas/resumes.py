"""Pydantic schemas for resume endpoints."""

from __future__ import annotations

from pydantic import Field

from zcv.api.schemas.common import ApiModel
from zcv.models import GeneratedResume


class ContentSelectionSchema(ApiModel):
    experiences: list[str] = Field(default_factory=list, description="Experience ids")
    projects: list[str] = Field(default_factory=list, description="Project ids")
    skills: list[str] = Field(default_factory=list, description="Skill names")
    achievements: list[str] = Field(default_factory=list, description="Achievement ids")


class GenerateResumeRequest(ApiModel):
    role: str = Field(..., description="Target role id or title")
    template: str = Field("tech", description="Template identifier")
    selection: ContentSelectionSchema


class TailorResumeRequest(ApiModel):
    job_description: str
    template: str = Field("tech", description="Template identifier")
    company: str | None = None
    position: str | None = None
    selection: ContentSelectionSchema | None = None


class AnalyzeRequest(ApiModel):
    job_description: str


class JDAnalysisResponse(ApiModel):
    keywords: list[str]
    requirements: list[str]
    suggestions: list[str]
    company: str | None = None
    position: str | None = None


class TailorResponse(ApiModel):
    resume: GeneratedResume
    analysis: JDAnalysisResponse


class DownloadResponse(ApiModel):
    path: str
    download_count: int


class SelectResumeRequest(ApiModel):
    resume_id: str | None = None


class RoleResponse(ApiModel):
    id: str
    title: str
    description: str
    key_skills: list[str]


class TemplateResponse(ApiModel):
    id: str
    name: str
    description: str
    best_for: list[str]
    features: list[str]
    recommended: bool = False
