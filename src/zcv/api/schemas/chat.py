"""Pydantic schemas for chat endpoints."""

from __future__ import annotations

from pydantic import Field

from zcv.api.schemas.common import ApiModel
from zcv.models import ChatMessage, ChatPhase


class ChatMessageRequest(ApiModel):
    content: str = Field(..., description="The user's message")


class ChatStateResponse(ApiModel):
    """Progress of the discovery session and its message log."""

    phase: ChatPhase
    progress: float
    phase_message: str
    can_continue: bool
    discovered_items: list[str]
    messages: list[ChatMessage]


class ChatReplyResponse(ChatStateResponse):
    reply: ChatMessage | None = None
