"""Key/value cache table backing the local persistence mirror.

Each row holds one serialized blob (JSON text) under a string key, the way a
browser's local storage holds strings.
"""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from zcv.data.db import Base


class CacheEntry(Base):
    """A single cached value.

    Attributes:
        key: Unique storage key (e.g. ``zcv-data``).
        value: Serialized value.
        updated_at: UTC timestamp of the last write.
    """

    __tablename__ = "cache_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )
