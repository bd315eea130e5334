"""Shared dependencies for API routes."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from zcv.models import (
    DuplicateSkillError,
    InvalidPortfolioError,
    InvalidRecordError,
    RecordNotFoundError,
    ResumeGenerationError,
    ZcvError,
)
from zcv.services.chat_wizard import ChatWizard
from zcv.state import ZcvStore

logger = logging.getLogger(__name__)

_store: ZcvStore | None = None
_wizard: ChatWizard | None = None

_STATUS_BY_ERROR: list[tuple[type[ZcvError], int]] = [
    (RecordNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateSkillError, status.HTTP_409_CONFLICT),
    (InvalidPortfolioError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InvalidRecordError, status.HTTP_400_BAD_REQUEST),
    (ResumeGenerationError, status.HTTP_400_BAD_REQUEST),
]


def get_store() -> ZcvStore:
    """Return the process-wide store, restoring the local cache on first use.

    The API serves a single user, so one store backs every request.
    """
    global _store
    if _store is None:
        _store = ZcvStore()
        _store.hydrate()
    return _store


def get_chat_wizard() -> ChatWizard:
    """Return the chat session bound to the shared store."""
    global _wizard
    if _wizard is None:
        _wizard = ChatWizard(get_store())
    return _wizard


def reset_state() -> None:
    """Forget the shared store and chat session (used between tests)."""
    global _store, _wizard
    _store = None
    _wizard = None


def to_http_exception(exc: ZcvError) -> HTTPException:
    """Map a domain error onto the matching HTTP status."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=code, detail=str(exc))
    logger.error("Unhandled ZCV error: %s", exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
