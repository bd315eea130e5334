"""Scripted discovery chat.

The wizard walks a fixed sequence of phases.  Every user message earns a
canned agent reply picked from the current phase's response table and moves
the conversation one phase forward.  There is no language understanding:
replies depend only on the phase and the random source.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

from zcv.config import get_settings
from zcv.constants.chat_script import (
    CONTINUE_THRESHOLD,
    PHASE_MESSAGES,
    PHASE_ORDER,
    PHASE_RESPONSES,
    WELCOME_MESSAGE,
)
from zcv.models import ChatMessage, ChatPhase, MessageRole, View
from zcv.state import Action, ActionType, ZcvStore

logger = logging.getLogger(__name__)

__all__ = ["ChatWizard", "response_for_phase"]


def response_for_phase(phase: ChatPhase, rng: random.Random) -> str:
    """Pick a canned reply for *phase*; phases without a table use the intro one."""
    responses = PHASE_RESPONSES.get(phase, PHASE_RESPONSES[ChatPhase.INTRO])
    return rng.choice(responses)


class ChatWizard:
    """Drives one discovery session against the store's chat log.

    Args:
        store: The application store; messages are appended to its chat log.
        rng: Random source for picking replies (seed it for reproducible runs).
        response_delay: Seconds to "think" before replying.  Defaults to
            the configured ``chat_response_delay``.
        phase_delay: Seconds between the reply and the phase change.
            Defaults to the configured ``phase_advance_delay``.
        sleep: Blocking sleep function, replaceable in tests.
    """

    def __init__(
        self,
        store: ZcvStore,
        *,
        rng: random.Random | None = None,
        response_delay: float | None = None,
        phase_delay: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        settings = get_settings()
        self._store = store
        self._rng = rng or random.Random()
        self._response_delay = (
            settings.chat_response_delay if response_delay is None else response_delay
        )
        self._phase_delay = settings.phase_advance_delay if phase_delay is None else phase_delay
        self._sleep = sleep
        self.phase = ChatPhase.INTRO
        self.discovered_items: list[str] = []
        self.is_typing = False

    @property
    def messages(self) -> list[ChatMessage]:
        return self._store.state.chat_messages

    def start(self) -> ChatMessage | None:
        """Post the welcome message if the conversation has not started yet."""
        if self.messages:
            return None
        welcome = ChatMessage(role=MessageRole.AGENT, content=WELCOME_MESSAGE)
        self._store.dispatch(Action(ActionType.ADD_CHAT_MESSAGE, welcome))
        return welcome

    def send_message(self, text: str) -> ChatMessage | None:
        """Handle one user turn.

        Args:
            text: The user's message.  Blank input is ignored.

        Returns:
            The agent's reply, or None if the input was blank.
        """
        if not text.strip():
            return None

        self._store.dispatch(
            Action(ActionType.ADD_CHAT_MESSAGE, ChatMessage(role=MessageRole.USER, content=text))
        )
        self.discovered_items.append(f"Insight {len(self.discovered_items) + 1}")

        self.is_typing = True
        try:
            self._pause(self._response_delay)
            reply = ChatMessage(
                role=MessageRole.AGENT, content=response_for_phase(self.phase, self._rng)
            )
            self._store.dispatch(Action(ActionType.ADD_CHAT_MESSAGE, reply))
        finally:
            self.is_typing = False

        self._advance_phase()
        return reply

    def progress(self) -> float:
        """Percentage of the phase sequence reached (intro counts as one step)."""
        return (PHASE_ORDER.index(self.phase) + 1) / len(PHASE_ORDER) * 100

    def phase_message(self, phase: ChatPhase | None = None) -> str:
        return PHASE_MESSAGES.get(phase or self.phase, "")

    def can_continue(self) -> bool:
        return len(self.messages) > CONTINUE_THRESHOLD

    def continue_to_editor(self) -> None:
        self._store.dispatch(Action(ActionType.SET_VIEW, View.PORTFOLIO_BUILDER))

    def reset(self) -> None:
        """Clear the chat log and return to the first phase."""
        self._store.dispatch(Action(ActionType.CLEAR_CHAT))
        self.phase = ChatPhase.INTRO
        self.discovered_items = []

    def _advance_phase(self) -> None:
        index = PHASE_ORDER.index(self.phase)
        if index >= len(PHASE_ORDER) - 1:
            return
        self._pause(self._phase_delay)
        self.phase = PHASE_ORDER[index + 1]
        logger.debug("Chat advanced to phase %s", self.phase)

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)
