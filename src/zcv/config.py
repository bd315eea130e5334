"""Runtime settings for the ZCV portfolio builder.

Values are read from environment variables (a ``.env`` file in the working
directory is honoured via python-dotenv).  The simulated "AI" delays are
configurable so tests and scripted runs can set them to zero.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

__all__ = ["Settings", "configure_logging", "get_settings"]

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring non-numeric %s=%r", name, raw)
        return default
    return max(value, 0.0)


def _default_db_url() -> str:
    db_path = Path(__file__).resolve().parents[2] / "zcv_cache.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


@dataclass(frozen=True)
class Settings:
    """Resolved configuration.

    Attributes:
        chat_response_delay: Seconds the chat wizard "thinks" before replying.
        phase_advance_delay: Seconds between a reply and the next chat phase.
        generate_delay: Seconds a resume generation takes.
        analyze_delay: Seconds a job-description analysis takes.
        export_dir: Default directory for exported portfolios and resumes.
        log_level: Root logging level name.
        db_url: SQLAlchemy URL of the local cache database.
    """

    chat_response_delay: float = 2.0
    phase_advance_delay: float = 1.0
    generate_delay: float = 3.0
    analyze_delay: float = 2.0
    export_dir: Path = field(default_factory=Path.cwd)
    log_level: str = "INFO"
    db_url: str = ""

    @classmethod
    def from_env(cls) -> Settings:
        export_dir = os.getenv("ZCV_EXPORT_DIR")
        return cls(
            chat_response_delay=_float_env("ZCV_CHAT_DELAY", 2.0),
            phase_advance_delay=_float_env("ZCV_PHASE_DELAY", 1.0),
            generate_delay=_float_env("ZCV_GENERATE_DELAY", 3.0),
            analyze_delay=_float_env("ZCV_ANALYZE_DELAY", 2.0),
            export_dir=Path(export_dir) if export_dir else Path.cwd(),
            log_level=(os.getenv("ZCV_LOG_LEVEL") or "INFO").upper(),
            db_url=os.getenv("DB_URL") or _default_db_url(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings (cached; call ``cache_clear`` to reload)."""
    return Settings.from_env()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point."""
    resolved = level or get_settings().log_level
    logging.basicConfig(level=getattr(logging, resolved, logging.INFO), format=_LOG_FORMAT)
