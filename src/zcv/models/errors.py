"""Exceptions raised by the portfolio services."""

from __future__ import annotations


class ZcvError(Exception):
    """Base class for all portfolio-builder errors."""


class RecordNotFoundError(ZcvError):
    """Raised when a portfolio record or resume id does not exist."""


class DuplicateSkillError(ZcvError):
    """Raised when a skill name is already used in the portfolio."""


class InvalidRecordError(ZcvError):
    """Raised when a record or field update fails validation."""


class InvalidPortfolioError(ZcvError):
    """Raised when an imported portfolio file cannot be parsed."""


class ResumeGenerationError(ZcvError):
    """Raised when a resume generation request is incomplete."""
