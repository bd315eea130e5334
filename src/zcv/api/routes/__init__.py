"""Route handlers for the API."""

from zcv.api.routes import chat, dashboard, health, portfolio, resumes, sections, view

__all__ = [
    "chat",
    "dashboard",
    "health",
    "portfolio",
    "resumes",
    "sections",
    "view",
]
