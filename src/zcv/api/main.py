"""ASGI application exposing the portfolio, chat and resume services."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zcv import __version__
from zcv.api.routes import chat, dashboard, health, portfolio, resumes, sections, view
from zcv.data.db import init_db

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)

# portfolio before sections: /portfolio/{section} would shadow its static paths
_API_ROUTERS = (
    portfolio.router,
    sections.router,
    chat.router,
    resumes.router,
    view.router,
    dashboard.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_db()
    logger.info("ZCV API %s ready", __version__)
    yield


app = FastAPI(
    title="ZCV API",
    description="Portfolio builder, scripted discovery chat and LaTeX resume generation",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
for api_router in _API_ROUTERS:
    app.include_router(api_router, prefix="/api")


def main() -> None:
    """Run the API under uvicorn with auto-reload (``zcv-api``)."""
    import uvicorn

    from zcv.config import configure_logging

    configure_logging()
    uvicorn.run("zcv.api.main:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    main()
