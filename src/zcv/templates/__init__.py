"""Template registry for resume generation."""

from __future__ import annotations

from dataclasses import dataclass

from zcv.constants.roles import get_role
from zcv.templates.base import ResumeTemplate
from zcv.templates.classic import ClassicResumeTemplate
from zcv.templates.executive import ExecutiveResumeTemplate
from zcv.templates.modern import ModernResumeTemplate
from zcv.templates.tech import TechResumeTemplate

__all__ = [
    "TEMPLATE_CATALOG",
    "ResumeTemplate",
    "TemplateInfo",
    "get_template",
    "list_templates",
    "recommend_templates",
]


@dataclass(frozen=True)
class TemplateInfo:
    """What the template picker shows for a template."""

    id: str
    name: str
    description: str
    best_for: tuple[str, ...]
    features: tuple[str, ...]


_REGISTRY: dict[str, ResumeTemplate] = {
    "modern": ModernResumeTemplate(),
    "classic": ClassicResumeTemplate(),
    "tech": TechResumeTemplate(),
    "executive": ExecutiveResumeTemplate(),
}

TEMPLATE_CATALOG: dict[str, TemplateInfo] = {
    "modern": TemplateInfo(
        id="modern",
        name="Modern Professional",
        description="Clean, contemporary design with subtle colors",
        best_for=("Software Engineer", "Product Manager", "Data Scientist"),
        features=("Two-column layout", "Color accents", "Modern typography"),
    ),
    "classic": TemplateInfo(
        id="classic",
        name="Classic Academic",
        description="Traditional format perfect for academic positions",
        best_for=("Applied Scientist", "Research Engineer", "PhD positions"),
        features=("Single-column", "Conservative design", "Publication-friendly"),
    ),
    "tech": TemplateInfo(
        id="tech",
        name="Tech Focused",
        description="Optimized for technical roles with project emphasis",
        best_for=("Software Engineer", "DevOps Engineer", "Machine Learning Engineer"),
        features=("Project highlights", "Technical skills emphasis", "GitHub integration"),
    ),
    "executive": TemplateInfo(
        id="executive",
        name="Executive",
        description="Professional design for senior positions",
        best_for=("Senior Engineer", "Engineering Manager", "Director"),
        features=("Leadership focus", "Achievement emphasis", "Premium layout"),
    ),
}


def get_template(name: str) -> ResumeTemplate:
    """Return the template registered under *name*.

    Raises:
        ValueError: If no template with that name exists.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown template {name!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[TemplateInfo]:
    """Return the catalog entries in display order."""
    return list(TEMPLATE_CATALOG.values())


def recommend_templates(role: str) -> list[TemplateInfo]:
    """Templates whose ``best_for`` list matches *role*.

    *role* may be a role id (``"data-scientist"``) or a free-text title; a
    match is a case-insensitive substring in either direction.
    """
    config = get_role(role)
    wanted = (config.title if config else role).strip().lower()
    if not wanted:
        return []
    return [
        info
        for info in TEMPLATE_CATALOG.values()
        if any(wanted in fit.lower() or fit.lower() in wanted for fit in info.best_for)
    ]
