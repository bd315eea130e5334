"""Job-description tailoring.

The "analysis" is simulated: after a delay it returns the same canned
keywords, requirements and suggestions for every job description.  The
tailored resume emphasises whichever of those keywords the portfolio
already lists as skills.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from zcv.config import get_settings
from zcv.constants.roles import list_roles
from zcv.constants.tailoring import (
    DEFAULT_COMPANY,
    DEFAULT_POSITION,
    JD_KEYWORDS,
    JD_REQUIREMENTS,
    JD_SUGGESTIONS,
)
from zcv.models import GeneratedResume, InvalidRecordError, Portfolio, ResumeType
from zcv.services.resume_generator import ContentSelection, ResumeRequest, generate_resume
from zcv.state import Action, ActionType, ZcvStore

logger = logging.getLogger(__name__)

__all__ = [
    "JDAnalysis",
    "analyze_job_description",
    "extract_company_and_position",
    "matching_keywords",
    "tailor_resume",
]


@dataclass
class JDAnalysis:
    keywords: list[str] = field(default_factory=list)
    requirements: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


def extract_company_and_position(text: str) -> tuple[str | None, str | None]:
    """Guess ``(company, position)`` from the first non-blank line.

    ``"<position> at <company>"`` yields both; otherwise a known role title
    contained in the line is taken as the position.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return None, None
    first = lines[0]

    head, sep, tail = first.partition(" at ")
    if sep and head.strip() and tail.strip():
        return tail.strip().rstrip(".,"), head.strip()

    lowered = first.lower()
    for role in list_roles():
        if role.title.lower() in lowered:
            return None, role.title
    return None, None


def analyze_job_description(
    text: str,
    store: ZcvStore | None = None,
    *,
    delay: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> JDAnalysis:
    """Run the simulated analysis of *text*.

    When *store* is given its ``is_tailoring`` flag is raised for the
    duration of the analysis.

    Raises:
        InvalidRecordError: If *text* is blank.
    """
    if not text.strip():
        raise InvalidRecordError("Job description must not be empty")

    wait = get_settings().analyze_delay if delay is None else delay
    if store is not None:
        store.dispatch(Action(ActionType.SET_TAILORING, True))
    try:
        if wait > 0:
            sleep(wait)
        analysis = JDAnalysis(
            keywords=list(JD_KEYWORDS),
            requirements=list(JD_REQUIREMENTS),
            suggestions=list(JD_SUGGESTIONS),
        )
    finally:
        if store is not None:
            store.dispatch(Action(ActionType.SET_TAILORING, False))

    logger.debug("Analyzed job description of %d characters", len(text))
    return analysis


def matching_keywords(portfolio: Portfolio, keywords: list[str]) -> list[str]:
    """Portfolio skill names that equal one of *keywords* (case-insensitive)."""
    wanted = {k.lower() for k in keywords}
    return [s.name for s in portfolio.skills if s.name.lower() in wanted]


def tailor_resume(
    store: ZcvStore,
    job_description: str,
    *,
    template: str = "tech",
    company: str | None = None,
    position: str | None = None,
    selection: ContentSelection | None = None,
    analyze_delay: float | None = None,
    generate_delay: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> tuple[GeneratedResume, JDAnalysis]:
    """Analyze *job_description* and generate a ``jd-tailored`` resume.

    Without an explicit *selection* every experience and project is used,
    with the skills that match the analysis keywords.

    Returns:
        The new resume and the analysis it was tailored to.
    """
    analysis = analyze_job_description(job_description, store, delay=analyze_delay, sleep=sleep)

    guessed_company, guessed_position = extract_company_and_position(job_description)
    company = company or guessed_company or DEFAULT_COMPANY
    position = position or guessed_position or DEFAULT_POSITION

    portfolio = store.state.portfolio
    matched = matching_keywords(portfolio, analysis.keywords)
    if selection is None:
        selection = ContentSelection()
        selection.select_all(portfolio, "experiences")
        selection.select_all(portfolio, "projects")
        selection.skills = list(matched)

    request = ResumeRequest(
        role=position,
        template=template,
        selection=selection,
        kind=ResumeType.JD_TAILORED,
        target_company=company,
        job_description=job_description,
        emphasis=matched,
    )
    resume = generate_resume(store, request, delay=generate_delay, sleep=sleep)
    logger.info("Tailored resume %s for %s at %s", resume.id, position, company)
    return resume, analysis
