"""Serialize the store's durable state to and from the local cache.

Only the portfolio and the generated resumes are persisted; chat history,
the current view and generation flags are session-only.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from zcv.models import GeneratedResume, Portfolio, ZcvState
from zcv.services import local_storage

logger = logging.getLogger(__name__)

__all__ = ["STORAGE_KEY", "SavedData", "clear_saved_data", "load_saved_data", "save_state"]

STORAGE_KEY = "zcv-data"


@dataclass(slots=True)
class SavedData:
    """Decoded contents of the persistence mirror."""

    portfolio: Portfolio | None = None
    resumes: list[GeneratedResume] = field(default_factory=list)


def serialize_state(state: ZcvState) -> str:
    payload = {
        "portfolio": state.portfolio.model_dump(mode="json", by_alias=True),
        "resumes": [r.model_dump(mode="json", by_alias=True) for r in state.resumes],
    }
    return json.dumps(payload)


def save_state(state: ZcvState) -> bool:
    """Write the portfolio and resumes of *state* to the cache."""
    return local_storage.set_item(STORAGE_KEY, serialize_state(state))


def load_saved_data() -> SavedData | None:
    """Read the mirror back.

    Returns:
        The decoded data, or None when nothing is saved or the blob is not
        valid JSON.  Individual resumes that fail validation are skipped.
    """
    raw = local_storage.get_item(STORAGE_KEY)
    if raw is None:
        return None

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.exception("Failed to load saved data")
        return None
    if not isinstance(parsed, dict):
        logger.warning("Ignoring saved data of type %s", type(parsed).__name__)
        return None

    saved = SavedData()
    raw_portfolio = parsed.get("portfolio")
    if raw_portfolio:
        try:
            saved.portfolio = Portfolio.model_validate(raw_portfolio)
        except ValidationError:
            logger.exception("Saved portfolio is invalid; ignoring it")

    for raw_resume in parsed.get("resumes") or []:
        try:
            saved.resumes.append(GeneratedResume.model_validate(raw_resume))
        except ValidationError:
            logger.warning("Skipping invalid saved resume: %r", raw_resume)

    return saved


def clear_saved_data() -> bool:
    return local_storage.remove_item(STORAGE_KEY)
