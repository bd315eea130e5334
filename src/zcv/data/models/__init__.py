"""ORM models package for the local cache database.

All models inherit from the shared Base declarative class defined in data.db.
"""

from zcv.data.db import Base
from zcv.data.models.cache_entry import CacheEntry

__all__ = ["Base", "CacheEntry"]
