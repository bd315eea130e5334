"""Template-agnostic data contracts for resume generation.

``build_resume_data`` fills these from the selected portfolio records and
every template reads only them, never the pydantic portfolio models.
"""

from __future__ import annotations

from typing import TypedDict

__all__ = [
    "ResumeAchievementEntry",
    "ResumeContactInfo",
    "ResumeData",
    "ResumeEducationEntry",
    "ResumeProjectEntry",
    "ResumeSkills",
    "ResumeWorkEntry",
]


class ResumeContactInfo(TypedDict, total=False):
    """User name and contact links shown in the resume header."""

    name: str
    email: str
    phone: str
    location: str
    linkedin_url: str
    github_url: str
    website_url: str


class ResumeEducationEntry(TypedDict, total=False):
    institution: str
    degree: str
    field_of_study: str
    location: str
    start_date: str  # "YYYY-MM", "YYYY-MM-DD" or free text
    end_date: str
    gpa: str
    achievements: list[str]


class ResumeWorkEntry(TypedDict, total=False):
    company: str
    title: str
    location: str
    start_date: str
    end_date: str
    is_current: bool
    bullets: list[str]


class ResumeProjectEntry(TypedDict, total=False):
    name: str
    description: str
    bullets: list[str]
    technologies: list[str]
    url: str
    start_date: str
    end_date: str


class ResumeSkills(TypedDict, total=False):
    """Skill names split by portfolio category."""

    languages: list[str]
    frameworks: list[str]
    tools: list[str]


class ResumeAchievementEntry(TypedDict, total=False):
    title: str
    organization: str
    date: str
    description: str


class ResumeData(TypedDict, total=False):
    """Top-level bundle passed to every template's ``build()`` method."""

    contact: ResumeContactInfo
    headline: str
    target_role: str
    education: list[ResumeEducationEntry]
    work_experience: list[ResumeWorkEntry]
    projects: list[ResumeProjectEntry]
    skills: ResumeSkills
    achievements: list[ResumeAchievementEntry]
