"""Pydantic schemas for portfolio endpoints."""

from __future__ import annotations

from zcv.api.schemas.common import ApiModel


class CompletenessResponse(ApiModel):
    """Completeness score with the points earned per criterion."""

    completeness: int
    breakdown: dict[str, int]
