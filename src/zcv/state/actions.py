"""Actions understood by the state reducer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from zcv.models import Achievement, Education, Experience, Project, Skill

__all__ = ["Action", "ActionType", "SECTIONS", "Section", "SectionActions"]


class ActionType(StrEnum):
    LOAD_PORTFOLIO = "LOAD_PORTFOLIO"
    UPDATE_PORTFOLIO = "UPDATE_PORTFOLIO"
    ADD_EXPERIENCE = "ADD_EXPERIENCE"
    UPDATE_EXPERIENCE = "UPDATE_EXPERIENCE"
    DELETE_EXPERIENCE = "DELETE_EXPERIENCE"
    ADD_PROJECT = "ADD_PROJECT"
    UPDATE_PROJECT = "UPDATE_PROJECT"
    DELETE_PROJECT = "DELETE_PROJECT"
    ADD_EDUCATION = "ADD_EDUCATION"
    UPDATE_EDUCATION = "UPDATE_EDUCATION"
    DELETE_EDUCATION = "DELETE_EDUCATION"
    ADD_SKILL = "ADD_SKILL"
    UPDATE_SKILL = "UPDATE_SKILL"
    DELETE_SKILL = "DELETE_SKILL"
    ADD_ACHIEVEMENT = "ADD_ACHIEVEMENT"
    UPDATE_ACHIEVEMENT = "UPDATE_ACHIEVEMENT"
    DELETE_ACHIEVEMENT = "DELETE_ACHIEVEMENT"
    ADD_RESUME = "ADD_RESUME"
    UPDATE_RESUME = "UPDATE_RESUME"
    DELETE_RESUME = "DELETE_RESUME"
    SELECT_RESUME = "SELECT_RESUME"
    ADD_CHAT_MESSAGE = "ADD_CHAT_MESSAGE"
    CLEAR_CHAT = "CLEAR_CHAT"
    SET_VIEW = "SET_VIEW"
    SET_FOCUS = "SET_FOCUS"
    SET_GENERATING = "SET_GENERATING"
    SET_TAILORING = "SET_TAILORING"
    UPDATE_ANALYSIS = "UPDATE_ANALYSIS"
    EXPORT_PORTFOLIO = "EXPORT_PORTFOLIO"
    IMPORT_PORTFOLIO = "IMPORT_PORTFOLIO"


@dataclass(frozen=True, slots=True)
class Action:
    """A state transition request.

    ``UPDATE_*`` payloads are ``{"id": key, "data": {...partial fields}}``;
    ``DELETE_*`` payloads are the record key; ``ADD_*`` payloads are a record
    model or a mapping of its fields.
    """

    type: ActionType
    payload: Any = None


class Section(StrEnum):
    """Keyed collections of the portfolio, named after their attribute."""

    EXPERIENCES = "experiences"
    PROJECTS = "projects"
    EDUCATION = "education"
    SKILLS = "skills"
    ACHIEVEMENTS = "achievements"


@dataclass(frozen=True, slots=True)
class SectionActions:
    """How a portfolio collection is keyed and which actions mutate it."""

    model: type[BaseModel]
    key: str
    add: ActionType
    update: ActionType
    delete: ActionType


SECTIONS: dict[Section, SectionActions] = {
    Section.EXPERIENCES: SectionActions(
        Experience,
        "id",
        ActionType.ADD_EXPERIENCE,
        ActionType.UPDATE_EXPERIENCE,
        ActionType.DELETE_EXPERIENCE,
    ),
    Section.PROJECTS: SectionActions(
        Project,
        "id",
        ActionType.ADD_PROJECT,
        ActionType.UPDATE_PROJECT,
        ActionType.DELETE_PROJECT,
    ),
    Section.EDUCATION: SectionActions(
        Education,
        "id",
        ActionType.ADD_EDUCATION,
        ActionType.UPDATE_EDUCATION,
        ActionType.DELETE_EDUCATION,
    ),
    Section.SKILLS: SectionActions(
        Skill,
        "name",
        ActionType.ADD_SKILL,
        ActionType.UPDATE_SKILL,
        ActionType.DELETE_SKILL,
    ),
    Section.ACHIEVEMENTS: SectionActions(
        Achievement,
        "id",
        ActionType.ADD_ACHIEVEMENT,
        ActionType.UPDATE_ACHIEVEMENT,
        ActionType.DELETE_ACHIEVEMENT,
    ),
}
