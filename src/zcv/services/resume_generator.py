"""Resume generation service.

Maps a selection of portfolio records into a ResumeData dict, renders it
with a pluggable LaTeX template and stores the result as a
GeneratedResume snapshot.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import TYPE_CHECKING

from zcv.config import get_settings
from zcv.models import (
    GeneratedResume,
    Portfolio,
    ResumeGenerationError,
    ResumeType,
    SkillCategory,
    View,
)
from zcv.state import Action, ActionType, ZcvStore
from zcv.templates import get_template

if TYPE_CHECKING:
    from zcv.services.resume_data import (
        ResumeAchievementEntry,
        ResumeContactInfo,
        ResumeData,
        ResumeEducationEntry,
        ResumeProjectEntry,
        ResumeSkills,
        ResumeWorkEntry,
    )

logger = logging.getLogger(__name__)

__all__ = [
    "ContentSelection",
    "GeneratorStep",
    "ResumeRequest",
    "build_resume_data",
    "can_proceed",
    "generate_bullets",
    "generate_resume",
    "render_latex",
]

RESUME_SECTIONS = ["experience", "projects", "skills"]
MAX_EXPERIENCE_BULLETS = 3
MAX_PROJECT_OUTCOMES = 2

_SKILL_GROUPS = {
    SkillCategory.PROGRAMMING: "languages",
    SkillCategory.FRAMEWORK: "frameworks",
    SkillCategory.TOOL: "tools",
}


# -----------------------------------------------------------------------
# Wizard state


class GeneratorStep(StrEnum):
    ROLE = "role"
    TEMPLATE = "template"
    CONTENT = "content"
    GENERATE = "generate"


STEP_ORDER = tuple(GeneratorStep)


@dataclass
class ContentSelection:
    """Records picked for a resume: ids, or names for skills, in pick order."""

    experiences: list[str] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    achievements: list[str] = field(default_factory=list)

    def _bucket(self, kind: str) -> list[str]:
        if kind not in ("experiences", "projects", "skills", "achievements"):
            raise ValueError(f"Unknown content kind {kind!r}")
        return getattr(self, kind)

    def toggle(self, kind: str, key: str) -> bool:
        """Flip the selection of *key*; returns True if it is now selected."""
        bucket = self._bucket(kind)
        if key in bucket:
            bucket.remove(key)
            return False
        bucket.append(key)
        return True

    def select_all(self, portfolio: Portfolio, kind: str | None = None) -> None:
        kinds = [kind] if kind else ["experiences", "projects", "skills", "achievements"]
        for k in kinds:
            bucket = self._bucket(k)
            records = getattr(portfolio, k)
            bucket[:] = [r.name if k == "skills" else r.id for r in records]

    def clear(self, kind: str | None = None) -> None:
        kinds = [kind] if kind else ["experiences", "projects", "skills", "achievements"]
        for k in kinds:
            self._bucket(k).clear()

    @property
    def has_content(self) -> bool:
        return bool(self.experiences or self.projects)


def can_proceed(
    step: GeneratorStep | str,
    *,
    role: str | None = None,
    template: str | None = None,
    selection: ContentSelection | None = None,
) -> bool:
    """Whether the wizard may leave *step*."""
    step = GeneratorStep(step)
    if step is GeneratorStep.ROLE:
        return bool(role)
    if step is GeneratorStep.TEMPLATE:
        return bool(template)
    if step is GeneratorStep.CONTENT:
        return selection is not None and selection.has_content
    return True


def next_step(step: GeneratorStep | str) -> GeneratorStep:
    index = STEP_ORDER.index(GeneratorStep(step))
    return STEP_ORDER[min(index + 1, len(STEP_ORDER) - 1)]


def previous_step(step: GeneratorStep | str) -> GeneratorStep:
    index = STEP_ORDER.index(GeneratorStep(step))
    return STEP_ORDER[max(index - 1, 0)]


@dataclass
class ResumeRequest:
    """Everything needed to generate one resume.

    ``emphasis`` defaults to the selected skill names.
    """

    role: str
    template: str
    selection: ContentSelection
    kind: ResumeType = ResumeType.ROLE_BASED
    target_company: str | None = None
    job_description: str | None = None
    emphasis: list[str] | None = None


# -----------------------------------------------------------------------
# Internal builders


def _pick(records: Iterable, keys: list[str], attr: str = "id") -> list:
    """Records whose *attr* is in *keys*, in portfolio order."""
    wanted = set(keys)
    return [r for r in records if getattr(r, attr) in wanted]


def _build_contact(portfolio: Portfolio) -> ResumeContactInfo:
    info = portfolio.personal_info
    contact: ResumeContactInfo = {"name": info.name}
    for key in ("email", "phone", "location"):
        value = getattr(info, key)
        if value:
            contact[key] = value
    if info.linkedin:
        contact["linkedin_url"] = info.linkedin
    if info.github:
        contact["github_url"] = info.github
    website = info.website or info.portfolio
    if website:
        contact["website_url"] = website
    return contact


def _build_education_list(portfolio: Portfolio) -> list[ResumeEducationEntry]:
    result: list[ResumeEducationEntry] = []
    for edu in portfolio.education:
        entry: ResumeEducationEntry = {"institution": edu.school, "degree": edu.degree}
        if edu.major:
            entry["field_of_study"] = edu.major
        if edu.location:
            entry["location"] = edu.location
        if edu.start_date:
            entry["start_date"] = edu.start_date
        if edu.end_date:
            entry["end_date"] = edu.end_date
        if edu.gpa:
            entry["gpa"] = edu.gpa
        if edu.academic_awards:
            entry["achievements"] = list(edu.academic_awards)
        result.append(entry)
    return result


def _build_work_list(portfolio: Portfolio, selection: ContentSelection) -> list[ResumeWorkEntry]:
    result: list[ResumeWorkEntry] = []
    for exp in _pick(portfolio.experiences, selection.experiences):
        entry: ResumeWorkEntry = {
            "company": exp.company,
            "title": exp.title,
            "bullets": exp.achievements[:MAX_EXPERIENCE_BULLETS],
        }
        if exp.location:
            entry["location"] = exp.location
        if exp.start_date:
            entry["start_date"] = exp.start_date
        if exp.end_date:
            entry["end_date"] = exp.end_date
        if exp.is_current_role:
            entry["is_current"] = True
        result.append(entry)
    return result


def _project_bullets(project) -> list[str]:
    bullets = [project.description] if project.description else []
    return bullets + project.outcomes[:MAX_PROJECT_OUTCOMES]


def _build_project_list(
    portfolio: Portfolio, selection: ContentSelection
) -> list[ResumeProjectEntry]:
    result: list[ResumeProjectEntry] = []
    for proj in _pick(portfolio.projects, selection.projects):
        entry: ResumeProjectEntry = {
            "name": proj.name,
            "bullets": _project_bullets(proj),
            "technologies": list(proj.technologies),
        }
        if proj.description:
            entry["description"] = proj.description
        url = proj.github_url or proj.live_url
        if url:
            entry["url"] = url
        if proj.start_date:
            entry["start_date"] = proj.start_date
        if proj.end_date and not proj.is_ongoing:
            entry["end_date"] = proj.end_date
        result.append(entry)
    return result


def _build_skills(portfolio: Portfolio, selection: ContentSelection) -> ResumeSkills:
    by_name = {s.name: s for s in portfolio.skills}
    skills: ResumeSkills = {}
    for name in selection.skills:
        skill = by_name.get(name)
        if skill is None:
            continue
        group = _SKILL_GROUPS.get(skill.category)
        if group:
            skills.setdefault(group, []).append(skill.name)
    return skills


def _build_achievement_list(
    portfolio: Portfolio, selection: ContentSelection
) -> list[ResumeAchievementEntry]:
    result: list[ResumeAchievementEntry] = []
    for ach in _pick(portfolio.achievements, selection.achievements):
        entry: ResumeAchievementEntry = {"title": ach.title}
        if ach.organization:
            entry["organization"] = ach.organization
        if ach.date:
            entry["date"] = ach.date
        if ach.description:
            entry["description"] = ach.description
        result.append(entry)
    return result


# -----------------------------------------------------------------------
# Public API


def build_resume_data(
    portfolio: Portfolio,
    selection: ContentSelection,
    *,
    target_role: str | None = None,
) -> ResumeData:
    """Collect the selected portfolio content into a :class:`ResumeData` dict."""
    data: ResumeData = {
        "contact": _build_contact(portfolio),
        "education": _build_education_list(portfolio),
        "work_experience": _build_work_list(portfolio, selection),
        "projects": _build_project_list(portfolio, selection),
        "skills": _build_skills(portfolio, selection),
        "achievements": _build_achievement_list(portfolio, selection),
    }
    if portfolio.professional_summary.headline:
        data["headline"] = portfolio.professional_summary.headline
    if target_role:
        data["target_role"] = target_role
    return data


def generate_bullets(portfolio: Portfolio, selection: ContentSelection) -> list[str]:
    """Flat list of the experience and project bullets of a selection."""
    bullets: list[str] = []
    for exp in _pick(portfolio.experiences, selection.experiences):
        bullets.extend(exp.achievements[:MAX_EXPERIENCE_BULLETS])
    for proj in _pick(portfolio.projects, selection.projects):
        bullets.extend(_project_bullets(proj))
    return bullets


def render_latex(data: ResumeData, template: str = "tech") -> str:
    """Render *data* with the named template and return the LaTeX source.

    Raises:
        ResumeGenerationError: If the template is unknown or rendering fails.
    """
    try:
        tmpl = get_template(template)
    except ValueError as exc:
        raise ResumeGenerationError(str(exc)) from exc
    try:
        return tmpl.render(data)
    except Exception as exc:
        logger.exception("Template %s failed to render", template)
        raise ResumeGenerationError(f"Failed to render template {template!r}") from exc


def resume_name(portfolio: Portfolio, role: str, today: date | None = None) -> str:
    """``{name}_{role}_{YYYY-MM-DD}``."""
    day = (today or date.today()).isoformat()
    return f"{portfolio.personal_info.name or 'resume'}_{role}_{day}"


def _validate_request(request: ResumeRequest) -> None:
    if not can_proceed(GeneratorStep.ROLE, role=request.role.strip()):
        raise ResumeGenerationError("A target role is required")
    if not can_proceed(GeneratorStep.TEMPLATE, template=request.template):
        raise ResumeGenerationError("A template is required")
    try:
        get_template(request.template)
    except ValueError as exc:
        raise ResumeGenerationError(str(exc)) from exc
    if not can_proceed(GeneratorStep.CONTENT, selection=request.selection):
        raise ResumeGenerationError("Select at least one experience or project")


def generate_resume(
    store: ZcvStore,
    request: ResumeRequest,
    *,
    delay: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> GeneratedResume:
    """Generate a resume from the current portfolio and add it to the store.

    The store's ``is_generating`` flag is set for the duration of the call
    and reset even when generation fails.  On success the view switches to
    the resume manager.

    Raises:
        ResumeGenerationError: If the request is incomplete or rendering fails.
    """
    _validate_request(request)
    wait = get_settings().generate_delay if delay is None else delay

    store.dispatch(Action(ActionType.SET_GENERATING, True))
    try:
        if wait > 0:
            sleep(wait)
        portfolio = store.state.portfolio
        data = build_resume_data(portfolio, request.selection, target_role=request.role)
        latex = render_latex(data, request.template)

        resume = GeneratedResume(
            name=resume_name(portfolio, request.role),
            kind=request.kind,
            target_role=request.role,
            target_company=request.target_company,
            job_description=request.job_description,
            template=request.template,
            sections=list(RESUME_SECTIONS),
            emphasis=list(
                request.selection.skills if request.emphasis is None else request.emphasis
            ),
            latex=latex,
            bullets=generate_bullets(portfolio, request.selection),
            selected_experiences=list(request.selection.experiences),
            selected_projects=list(request.selection.projects),
            selected_skills=list(request.selection.skills),
            selected_achievements=list(request.selection.achievements),
        )
        store.dispatch(Action(ActionType.ADD_RESUME, resume))
    finally:
        store.dispatch(Action(ActionType.SET_GENERATING, False))

    store.dispatch(Action(ActionType.SET_VIEW, View.RESUME_MANAGER))
    logger.info("Generated resume %s with template %s", resume.name, resume.template)
    return resume
