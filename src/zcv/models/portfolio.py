"""Portfolio record schema.

The portfolio is the user's aggregated career data.  Records serialize with
camelCase keys (``startDate``, ``isCurrentRole``...) so exported JSON stays
interchangeable with the browser version of ZCV; the professional summary
keeps its historical snake_case keys.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "Achievement",
    "AchievementType",
    "Education",
    "Experience",
    "PersonalInfo",
    "Portfolio",
    "ProfessionalSummary",
    "Project",
    "ProjectType",
    "Proficiency",
    "Skill",
    "SkillCategory",
    "Thesis",
    "ZcvModel",
    "new_id",
    "utc_now",
]

PORTFOLIO_VERSION = "1.0.0"


def new_id() -> str:
    """Return a fresh record identifier."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(UTC)


class ZcvModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
    )


class ProjectType(StrEnum):
    PERSONAL = "personal"
    ACADEMIC = "academic"
    WORK = "work"
    HACKATHON = "hackathon"
    OPEN_SOURCE = "open-source"


class SkillCategory(StrEnum):
    PROGRAMMING = "programming"
    FRAMEWORK = "framework"
    TOOL = "tool"
    LANGUAGE = "language"
    SOFT_SKILL = "soft-skill"
    DOMAIN = "domain"


class Proficiency(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class AchievementType(StrEnum):
    AWARD = "award"
    CERTIFICATION = "certification"
    PUBLICATION = "publication"
    PATENT = "patent"
    COMPETITION = "competition"
    RECOGNITION = "recognition"


class PersonalInfo(ZcvModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    github: str | None = None
    website: str | None = None
    portfolio: str | None = None


class ProfessionalSummary(BaseModel):
    """One-line headline plus longer pitch texts."""

    headline: str = ""
    elevator_pitch: str = ""
    career_objective: str = ""
    value_proposition: str = ""


class Experience(ZcvModel):
    """A work experience with the "deep discovery" fields."""

    id: str = Field(default_factory=new_id)
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str | None = None
    is_current_role: bool = False

    context: str = ""
    responsibilities: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    solutions: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    metrics: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    team_size: int | None = None
    budget: str | None = None

    takeaways: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)

    github_repos: list[str] = Field(default_factory=list)
    articles: list[str] = Field(default_factory=list)
    presentations: list[str] = Field(default_factory=list)
    awards: list[str] = Field(default_factory=list)


class Project(ZcvModel):
    id: str = Field(default_factory=new_id)
    name: str = ""
    kind: ProjectType = Field(ProjectType.PERSONAL, alias="type")
    start_date: str = ""
    end_date: str | None = None
    is_ongoing: bool = False

    motivation: str = ""
    description: str = ""
    objectives: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)
    approach: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    architecture: str | None = None

    outcomes: list[str] = Field(default_factory=list)
    metrics: list[str] = Field(default_factory=list)
    impact: str = ""

    learnings: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)

    github_url: str | None = None
    live_url: str | None = None
    demo_url: str | None = None
    documentation: str | None = None

    team_size: int | None = None
    role: str = ""
    collaborators: list[str] = Field(default_factory=list)


class Thesis(ZcvModel):
    title: str = ""
    advisor: str = ""
    abstract: str = ""
    keywords: list[str] = Field(default_factory=list)
    url: str | None = None


class Education(ZcvModel):
    id: str = Field(default_factory=new_id)
    degree: str = ""
    major: str = ""
    school: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str | None = None

    relevant_coursework: list[str] = Field(default_factory=list)
    thesis: Thesis | None = None

    research_projects: list[str] = Field(default_factory=list)
    publications: list[str] = Field(default_factory=list)
    conferences: list[str] = Field(default_factory=list)
    academic_awards: list[str] = Field(default_factory=list)

    clubs: list[str] = Field(default_factory=list)
    leadership: list[str] = Field(default_factory=list)
    volunteering: list[str] = Field(default_factory=list)

    skills_developed: list[str] = Field(default_factory=list)
    key_learnings: list[str] = Field(default_factory=list)


class Skill(ZcvModel):
    """A skill; ``name`` doubles as its identifier within a portfolio."""

    name: str = ""
    category: SkillCategory = SkillCategory.PROGRAMMING
    proficiency: Proficiency = Proficiency.INTERMEDIATE
    years_of_experience: float = 1
    last_used: str = ""

    acquired_from: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)

    github_repos: list[str] = Field(default_factory=list)
    portfolio_items: list[str] = Field(default_factory=list)


class Achievement(ZcvModel):
    id: str = Field(default_factory=new_id)
    title: str = ""
    kind: AchievementType = Field(AchievementType.AWARD, alias="type")
    organization: str = ""
    date: str = ""
    description: str = ""
    significance: str = ""
    skills: list[str] = Field(default_factory=list)
    url: str | None = None
    credential_id: str | None = None


class Portfolio(ZcvModel):
    """The aggregated career record owned by the state container.

    ``completeness`` is derived; the reducer recomputes it on every mutation.
    """

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    professional_summary: ProfessionalSummary = Field(default_factory=ProfessionalSummary)

    experiences: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    achievements: list[Achievement] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    version: str = PORTFOLIO_VERSION
    completeness: int = 0
