"""Flat key/value storage over the local cache database.

Mirrors the browser ``localStorage`` contract: string keys, string values,
``None`` for missing keys.  Storage failures are logged and reported through
the return value so callers (the store's persistence mirror) never crash on
a broken cache.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from zcv.data.db import get_session
from zcv.data.models import CacheEntry

logger = logging.getLogger(__name__)

__all__ = ["clear", "get_item", "remove_item", "set_item"]


def get_item(key: str) -> str | None:
    """Return the value stored under *key*, or None if absent or unreadable."""
    try:
        with get_session() as session:
            entry = session.get(CacheEntry, key)
            return entry.value if entry else None
    except SQLAlchemyError:
        logger.exception("Failed to read cache key %s", key)
        return None


def set_item(key: str, value: str) -> bool:
    """Store *value* under *key*, replacing any previous value.

    Returns:
        True if the value was written, False otherwise.
    """
    try:
        with get_session() as session:
            entry = session.get(CacheEntry, key)
            if entry is None:
                session.add(CacheEntry(key=key, value=value))
            else:
                entry.value = value
        return True
    except SQLAlchemyError:
        logger.exception("Failed to write cache key %s", key)
        return False


def remove_item(key: str) -> bool:
    """Delete *key*. Returns True if a value was removed."""
    try:
        with get_session() as session:
            entry = session.get(CacheEntry, key)
            if entry is None:
                return False
            session.delete(entry)
        return True
    except SQLAlchemyError:
        logger.exception("Failed to remove cache key %s", key)
        return False


def clear() -> int:
    """Remove every cached value and return how many were removed."""
    try:
        with get_session() as session:
            return session.query(CacheEntry).delete(synchronize_session=False)
    except SQLAlchemyError:
        logger.exception("Failed to clear cache")
        return 0
