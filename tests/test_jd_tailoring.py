"""Tests for job-description analysis and tailored resumes."""

from __future__ import annotations

import pytest

from zcv.constants.tailoring import JD_KEYWORDS, JD_REQUIREMENTS, JD_SUGGESTIONS
from zcv.models import InvalidRecordError, Portfolio, ResumeType
from zcv.services.jd_tailoring import (
    analyze_job_description,
    extract_company_and_position,
    matching_keywords,
    tailor_resume,
)
from zcv.services.resume_generator import ContentSelection
from zcv.state import ZcvStore

JD = """Senior Frontend Engineer at Globex

We are looking for someone fluent in React and TypeScript.
"""


class TestExtractCompanyAndPosition:
    def test_position_at_company(self) -> None:
        assert extract_company_and_position(JD) == ("Globex", "Senior Frontend Engineer")

    def test_known_role_title(self) -> None:
        text = "\n\nWe need a Data Scientist to join our growth team."
        assert extract_company_and_position(text) == (None, "Data Scientist")

    def test_nothing_recognised(self) -> None:
        assert extract_company_and_position("Join our team!") == (None, None)
        assert extract_company_and_position("   ") == (None, None)


class TestAnalyze:
    def test_canned_analysis(self) -> None:
        analysis = analyze_job_description(JD)
        assert analysis.keywords == list(JD_KEYWORDS)
        assert analysis.requirements == list(JD_REQUIREMENTS)
        assert analysis.suggestions == list(JD_SUGGESTIONS)

    def test_blank_text(self) -> None:
        with pytest.raises(InvalidRecordError):
            analyze_job_description("  \n ")

    def test_tailoring_flag_is_raised_then_cleared(self, store: ZcvStore) -> None:
        seen: list[bool] = []
        store.subscribe(lambda state, action: seen.append(state.is_tailoring))
        analyze_job_description(JD, store)
        assert seen == [True, False]
        assert store.state.is_tailoring is False

    def test_delay(self) -> None:
        pauses: list[float] = []
        analyze_job_description(JD, delay=2.0, sleep=pauses.append)
        assert pauses == [2.0]


def test_matching_keywords(portfolio: Portfolio) -> None:
    assert matching_keywords(portfolio, ["react", "AWS", "docker"]) == ["React", "Docker"]


class TestTailorResume:
    def test_defaults(self, loaded_store: ZcvStore) -> None:
        resume, analysis = tailor_resume(loaded_store, JD, template="modern")

        assert analysis.keywords == list(JD_KEYWORDS)
        assert resume.kind is ResumeType.JD_TAILORED
        assert resume.target_company == "Globex"
        assert resume.target_role == "Senior Frontend Engineer"
        assert resume.job_description == JD
        assert resume.template == "modern"
        assert resume.emphasis == ["React"]
        assert resume.selected_experiences == ["exp-1"]
        assert resume.selected_projects == ["proj-1"]
        assert resume.selected_skills == ["React"]
        assert loaded_store.state.resumes == [resume]
        assert loaded_store.state.is_tailoring is False

    def test_fallback_names(self, loaded_store: ZcvStore) -> None:
        resume, _ = tailor_resume(loaded_store, "Join our team and build things.")
        assert resume.target_company == "Target Company"
        assert resume.target_role == "Target Position"

    def test_explicit_names_and_selection(self, loaded_store: ZcvStore) -> None:
        selection = ContentSelection(projects=["proj-1"])
        resume, _ = tailor_resume(
            loaded_store, JD, company="Initech", position="SRE", selection=selection
        )
        assert resume.target_company == "Initech"
        assert resume.target_role == "SRE"
        assert resume.selected_experiences == []

    def test_empty_portfolio_cannot_be_tailored(self, store: ZcvStore) -> None:
        from zcv.models import ResumeGenerationError

        with pytest.raises(ResumeGenerationError):
            tailor_resume(store, JD)
        assert store.state.is_generating is False
