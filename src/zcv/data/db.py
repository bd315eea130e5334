"""SQLAlchemy engine and sessions for the local cache database.

The engine is built lazily from ``Settings.db_url`` (``DB_URL`` in the
environment) and creates the cache tables the first time it is used.
``reset_engine`` drops it so a changed URL is picked up on the next access.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from zcv.config import get_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base of the cache tables."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def engine() -> Engine:
    """Return the cache engine, creating it (and its tables) on first call."""
    global _engine
    if _engine is None:
        url = get_settings().db_url
        _engine = create_engine(url, echo=False, future=True)
        # Importing the models registers their tables on Base.metadata.
        from zcv.data.models import cache_entry  # noqa: F401

        Base.metadata.create_all(bind=_engine)
        logger.debug("Opened cache database %s", url)
    return _engine


def init_db() -> None:
    """Create the cache tables now instead of on first access."""
    engine()


def reset_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=engine(), autoflush=False, expire_on_commit=False)
    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
