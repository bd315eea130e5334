"""Data models and type definitions"""

from zcv.models.chat import ChatMessage, ChatPhase, MessageRole
from zcv.models.errors import (
    DuplicateSkillError,
    InvalidPortfolioError,
    InvalidRecordError,
    RecordNotFoundError,
    ResumeGenerationError,
    ZcvError,
)
from zcv.models.portfolio import (
    Achievement,
    AchievementType,
    Education,
    Experience,
    PersonalInfo,
    Portfolio,
    ProfessionalSummary,
    Project,
    ProjectType,
    Proficiency,
    Skill,
    SkillCategory,
    Thesis,
)
from zcv.models.resume import GeneratedResume, ResumeType
from zcv.models.state import PortfolioAnalysis, View, ZcvState

__all__ = [
    "Achievement",
    "AchievementType",
    "ChatMessage",
    "ChatPhase",
    "DuplicateSkillError",
    "Education",
    "Experience",
    "GeneratedResume",
    "InvalidPortfolioError",
    "InvalidRecordError",
    "MessageRole",
    "PersonalInfo",
    "Portfolio",
    "PortfolioAnalysis",
    "ProfessionalSummary",
    "Proficiency",
    "Project",
    "ProjectType",
    "RecordNotFoundError",
    "ResumeGenerationError",
    "ResumeType",
    "Skill",
    "SkillCategory",
    "Thesis",
    "View",
    "ZcvError",
    "ZcvState",
]
