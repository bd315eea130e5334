"""Pydantic schemas for the dashboard and view endpoints."""

from __future__ import annotations

from zcv.api.schemas.common import ApiModel
from zcv.models import GeneratedResume, View
from zcv.services.dashboard import InsightKind, Priority


class StatResponse(ApiModel):
    label: str
    value: str


class NextStepResponse(ApiModel):
    title: str
    description: str
    view: View


class InsightResponse(ApiModel):
    kind: InsightKind
    title: str
    description: str
    view: View
    priority: Priority


class DashboardResponse(ApiModel):
    stats: list[StatResponse]
    next_step: NextStepResponse
    insights: list[InsightResponse]
    recent_resumes: list[GeneratedResume]


class ViewRequest(ApiModel):
    view: str


class ViewResponse(ApiModel):
    view: View
    selected_resume_id: str | None = None
