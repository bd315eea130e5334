"""Routes for the scripted discovery chat."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from zcv.api.dependencies import get_chat_wizard
from zcv.api.schemas.chat import ChatMessageRequest, ChatReplyResponse, ChatStateResponse
from zcv.services.chat_wizard import ChatWizard

router = APIRouter(prefix="/chat", tags=["chat"])

WizardDep = Annotated[ChatWizard, Depends(get_chat_wizard)]


def _state(wizard: ChatWizard) -> dict:
    return {
        "phase": wizard.phase,
        "progress": wizard.progress(),
        "phase_message": wizard.phase_message(),
        "can_continue": wizard.can_continue(),
        "discovered_items": list(wizard.discovered_items),
        "messages": wizard.messages,
    }


@router.get("", response_model=ChatStateResponse, summary="Get the chat session")
def get_chat(wizard: WizardDep) -> ChatStateResponse:
    return ChatStateResponse(**_state(wizard))


@router.post("/start", response_model=ChatStateResponse, summary="Post the welcome message")
def start_chat(wizard: WizardDep) -> ChatStateResponse:
    wizard.start()
    return ChatStateResponse(**_state(wizard))


@router.post("/messages", response_model=ChatReplyResponse, summary="Send a message")
def send_message(wizard: WizardDep, request: ChatMessageRequest) -> ChatReplyResponse:
    """Append the user's message and the agent's canned reply.

    Blank messages are ignored and return no reply.
    """
    reply = wizard.send_message(request.content)
    return ChatReplyResponse(reply=reply, **_state(wizard))


@router.post("/continue", summary="Switch to the portfolio editor")
def continue_to_editor(wizard: WizardDep) -> dict[str, str]:
    wizard.continue_to_editor()
    return {"view": "portfolio-builder"}


@router.delete("", response_model=ChatStateResponse, summary="Restart the session")
def reset_chat(wizard: WizardDep) -> ChatStateResponse:
    wizard.reset()
    return ChatStateResponse(**_state(wizard))
