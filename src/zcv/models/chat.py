"""Chat log entries for the discovery wizard."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field

from zcv.models.portfolio import ZcvModel, new_id, utc_now

__all__ = ["ChatMessage", "ChatPhase", "MessageRole"]


class MessageRole(StrEnum):
    USER = "user"
    AGENT = "agent"
    SYSTEM = "system"


class ChatPhase(StrEnum):
    """Linear phases of the discovery session, in order."""

    INTRO = "intro"
    BACKGROUND = "background"
    EXPERIENCES = "experiences"
    PROJECTS = "projects"
    SKILLS = "skills"
    COMPLETE = "complete"


class ChatMessage(ZcvModel):
    id: str = Field(default_factory=new_id)
    role: MessageRole = Field(MessageRole.USER, alias="type")
    content: str
    timestamp: datetime = Field(default_factory=utc_now)

    extracted_data: dict[str, Any] | None = None
    suggested_actions: list[str] = Field(default_factory=list)
    follow_up_questions: list[str] = Field(default_factory=list)
