"""Browse, download, duplicate and delete generated resumes."""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path

from zcv.config import get_settings
from zcv.models import GeneratedResume, RecordNotFoundError, ZcvError
from zcv.models.portfolio import new_id, utc_now
from zcv.state import Action, ActionType, ZcvStore
from zcv.utils import safe_filename

logger = logging.getLogger(__name__)

__all__ = [
    "ResumeFilter",
    "ResumeSort",
    "delete_resume",
    "download_resume",
    "duplicate_resume",
    "filter_resumes",
    "get_resume",
    "select_resume",
]


class ResumeFilter(StrEnum):
    ALL = "all"
    ROLE_BASED = "role-based"
    JD_TAILORED = "jd-tailored"


class ResumeSort(StrEnum):
    DATE = "date"
    NAME = "name"
    DOWNLOADS = "downloads"


def filter_resumes(
    resumes: list[GeneratedResume],
    search: str = "",
    kind: ResumeFilter | str = ResumeFilter.ALL,
    sort_by: ResumeSort | str = ResumeSort.DATE,
) -> list[GeneratedResume]:
    """Search, filter and sort *resumes*.

    Args:
        resumes: Resumes to consider.
        search: Case-insensitive text matched against name, target role and
            target company.
        kind: ``all``, ``role-based`` or ``jd-tailored``.
        sort_by: ``date`` (newest first), ``name`` or ``downloads`` (most first).
    """
    kind = ResumeFilter(kind)
    sort_by = ResumeSort(sort_by)
    needle = search.strip().lower()

    def matches(resume: GeneratedResume) -> bool:
        if kind is not ResumeFilter.ALL and resume.kind != kind.value:
            return False
        if not needle:
            return True
        haystack = (resume.name, resume.target_role or "", resume.target_company or "")
        return any(needle in field.lower() for field in haystack)

    selected = [r for r in resumes if matches(r)]
    if sort_by is ResumeSort.NAME:
        return sorted(selected, key=lambda r: r.name)
    if sort_by is ResumeSort.DOWNLOADS:
        return sorted(selected, key=lambda r: r.download_count, reverse=True)
    return sorted(selected, key=lambda r: r.created_at, reverse=True)


def get_resume(store: ZcvStore, resume_id: str) -> GeneratedResume:
    for resume in store.state.resumes:
        if resume.id == resume_id:
            return resume
    raise RecordNotFoundError(f"No resume {resume_id!r}")


def download_resume(store: ZcvStore, resume_id: str, directory: Path | None = None) -> Path:
    """Write the resume's LaTeX to ``{name}.tex`` and count the download.

    Returns:
        Path of the written file.
    """
    resume = get_resume(store, resume_id)
    target_dir = Path(directory) if directory is not None else get_settings().export_dir
    path = target_dir / f"{safe_filename(resume.name)}.tex"
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(resume.latex, encoding="utf-8")
    except OSError as exc:
        logger.exception("Failed to write %s", path)
        raise ZcvError(f"Could not write {path}: {exc}") from exc

    store.dispatch(
        Action(
            ActionType.UPDATE_RESUME,
            {"id": resume.id, "data": {"download_count": resume.download_count + 1}},
        )
    )
    logger.info("Downloaded resume %s to %s", resume.id, path)
    return path


def duplicate_resume(store: ZcvStore, resume_id: str) -> GeneratedResume:
    """Add a copy named ``{name}_copy`` that records its source resume."""
    source = get_resume(store, resume_id)
    now = utc_now()
    copy = source.model_copy(
        update={
            "id": new_id(),
            "name": f"{source.name}_copy",
            "created_at": now,
            "updated_at": now,
            "download_count": 0,
            "version": 1,
            "parent_resume_id": source.id,
        }
    )
    store.dispatch(Action(ActionType.ADD_RESUME, copy))
    return copy


def delete_resume(store: ZcvStore, resume_id: str) -> None:
    get_resume(store, resume_id)
    store.dispatch(Action(ActionType.DELETE_RESUME, resume_id))
    logger.info("Deleted resume %s", resume_id)


def select_resume(store: ZcvStore, resume_id: str | None) -> None:
    if resume_id is not None:
        get_resume(store, resume_id)
    store.dispatch(Action(ActionType.SELECT_RESUME, resume_id))
