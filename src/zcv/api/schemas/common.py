"""Shared Pydantic schemas for API requests and responses."""

from __future__ import annotations

from pydantic import Field

from zcv.models.portfolio import ZcvModel


class ApiModel(ZcvModel):
    """Base for API schemas: camelCase on the wire, snake_case accepted too."""


class DirectoryRequest(ApiModel):
    """Optional target directory for files written by the server."""

    directory: str | None = Field(
        None, description="Directory to write to (defaults to ZCV_EXPORT_DIR)"
    )


class PathResponse(ApiModel):
    path: str
