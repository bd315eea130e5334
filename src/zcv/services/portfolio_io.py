"""Export the portfolio to a JSON file and import it back."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from zcv.config import get_settings
from zcv.models import InvalidPortfolioError, Portfolio, ZcvError
from zcv.state import Action, ActionType, ZcvStore
from zcv.state.reducer import checked_skill_names
from zcv.utils import safe_filename

logger = logging.getLogger(__name__)

__all__ = ["export_filename", "export_portfolio", "import_portfolio", "parse_portfolio"]


def export_filename(portfolio: Portfolio, today: date | None = None) -> str:
    """``{name or "portfolio"}_{YYYY-MM-DD}.json``."""
    day = (today or date.today()).isoformat()
    return safe_filename(f"{portfolio.personal_info.name or 'portfolio'}_{day}") + ".json"


def export_portfolio(
    portfolio: Portfolio,
    directory: Path | None = None,
    *,
    store: ZcvStore | None = None,
) -> Path:
    """Write *portfolio* as pretty-printed camelCase JSON.

    Returns:
        Path of the written file.
    """
    target_dir = Path(directory) if directory is not None else get_settings().export_dir
    path = target_dir / export_filename(portfolio)
    payload = portfolio.model_dump(mode="json", by_alias=True)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        logger.exception("Failed to export portfolio to %s", path)
        raise ZcvError(f"Could not write {path}: {exc}") from exc

    if store is not None:
        store.dispatch(Action(ActionType.EXPORT_PORTFOLIO))
    logger.info("Exported portfolio to %s", path)
    return path


def parse_portfolio(raw: str | bytes | dict[str, Any]) -> Portfolio:
    """Validate exported portfolio JSON.

    Raises:
        InvalidPortfolioError: If *raw* is not JSON or not a portfolio.
    """
    if isinstance(raw, dict):
        data = raw
    else:
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidPortfolioError(f"Not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidPortfolioError("Portfolio JSON must be an object")

    try:
        portfolio = Portfolio.model_validate(data)
    except ValidationError as exc:
        raise InvalidPortfolioError(f"Not a valid portfolio: {exc.error_count()} error(s)") from exc
    try:
        skills = checked_skill_names(portfolio.skills)
    except ZcvError as exc:
        raise InvalidPortfolioError(f"Not a valid portfolio: {exc}") from exc
    return portfolio.model_copy(update={"skills": skills})


def import_portfolio(store: ZcvStore, path: Path | str) -> Portfolio:
    """Replace the store's portfolio with the one saved at *path*."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise InvalidPortfolioError(f"Could not read {path}: {exc}") from exc

    portfolio = parse_portfolio(raw)
    store.dispatch(Action(ActionType.IMPORT_PORTFOLIO, portfolio))
    logger.info("Imported portfolio from %s", path)
    return store.state.portfolio
