"""Liveness probe."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from zcv import __version__
from zcv.data.db import get_session

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report the API version and whether the local cache answers."""
    try:
        with get_session() as session:
            session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Cache database is unreachable")
        return {"status": "degraded", "version": __version__}
    return {"status": "healthy", "version": __version__}
