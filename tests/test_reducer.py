"""Tests for the pure state reducer."""

from __future__ import annotations

import pytest

from zcv.models import (
    ChatMessage,
    DuplicateSkillError,
    GeneratedResume,
    InvalidRecordError,
    Portfolio,
    View,
    ZcvState,
)
from zcv.state import Action, ActionType, zcv_reducer


@pytest.fixture
def state(portfolio: Portfolio) -> ZcvState:
    return zcv_reducer(ZcvState(), Action(ActionType.LOAD_PORTFOLIO, portfolio))


def _resume(**overrides) -> GeneratedResume:
    fields = {"name": "jane_swe", "template": "tech", "latex": "\\documentclass{article}"}
    fields.update(overrides)
    return GeneratedResume(**fields)


class TestPortfolio:
    def test_load_recomputes_completeness(self, portfolio: Portfolio) -> None:
        stale = portfolio.model_copy(update={"completeness": 3})
        state = zcv_reducer(ZcvState(), Action(ActionType.LOAD_PORTFOLIO, stale))
        assert state.portfolio.completeness == 85

    def test_load_accepts_camel_case_mapping(self) -> None:
        raw = {"personalInfo": {"name": "Sam"}, "experiences": []}
        state = zcv_reducer(ZcvState(), Action(ActionType.LOAD_PORTFOLIO, raw))
        assert state.portfolio.personal_info.name == "Sam"

    def test_update_merges_and_touches(self, state: ZcvState) -> None:
        before = state.portfolio.updated_at
        info = state.portfolio.personal_info.model_dump()
        info["name"] = "Janet Doe"
        new = zcv_reducer(state, Action(ActionType.UPDATE_PORTFOLIO, {"personal_info": info}))

        assert new.portfolio.personal_info.name == "Janet Doe"
        assert new.portfolio.updated_at >= before
        assert new.portfolio.experiences == state.portfolio.experiences

    def test_update_ignores_completeness_override(self, state: ZcvState) -> None:
        new = zcv_reducer(state, Action(ActionType.UPDATE_PORTFOLIO, {"completeness": 1}))
        assert new.portfolio.completeness == 85

    def test_update_rejects_unknown_field(self, state: ZcvState) -> None:
        with pytest.raises(InvalidRecordError):
            zcv_reducer(state, Action(ActionType.UPDATE_PORTFOLIO, {"nickname": "JD"}))

    def test_does_not_mutate_input(self, state: ZcvState) -> None:
        zcv_reducer(state, Action(ActionType.DELETE_EXPERIENCE, "exp-1"))
        assert len(state.portfolio.experiences) == 1


    def test_load_rejects_duplicate_skill_names(self) -> None:
        raw = {"skills": [{"name": "Python"}, {"name": "Python"}]}
        with pytest.raises(DuplicateSkillError):
            zcv_reducer(ZcvState(), Action(ActionType.IMPORT_PORTFOLIO, raw))

    def test_load_strips_skill_names(self) -> None:
        raw = {"skills": [{"name": " Go "}]}
        state = zcv_reducer(ZcvState(), Action(ActionType.LOAD_PORTFOLIO, raw))
        assert state.portfolio.skills[0].name == "Go"

    def test_load_rejects_blank_skill_name(self) -> None:
        raw = {"skills": [{"name": "Go"}, {"name": ""}]}
        with pytest.raises(InvalidRecordError):
            zcv_reducer(ZcvState(), Action(ActionType.LOAD_PORTFOLIO, raw))

    def test_update_rejects_duplicate_skill_names(self, state: ZcvState) -> None:
        skills = [{"name": "Go"}, {"name": "Go"}]
        with pytest.raises(DuplicateSkillError):
            zcv_reducer(state, Action(ActionType.UPDATE_PORTFOLIO, {"skills": skills}))


class TestRecords:
    def test_add_assigns_fresh_id(self, state: ZcvState) -> None:
        new = zcv_reducer(
            state, Action(ActionType.ADD_EXPERIENCE, {"id": "exp-1", "title": "Intern"})
        )
        added = new.portfolio.experiences[-1]
        assert added.title == "Intern"
        assert added.id != "exp-1"

    def test_update_keeps_id(self, state: ZcvState) -> None:
        new = zcv_reducer(
            state,
            Action(
                ActionType.UPDATE_PROJECT,
                {"id": "proj-1", "data": {"id": "other", "name": "Tracker 2"}},
            ),
        )
        assert new.portfolio.projects[0].id == "proj-1"
        assert new.portfolio.projects[0].name == "Tracker 2"

    def test_update_unknown_key_is_noop(self, state: ZcvState) -> None:
        new = zcv_reducer(
            state, Action(ActionType.UPDATE_EDUCATION, {"id": "missing", "data": {"gpa": "4.0"}})
        )
        assert new is state

    def test_update_requires_id_and_data(self, state: ZcvState) -> None:
        with pytest.raises(InvalidRecordError):
            zcv_reducer(state, Action(ActionType.UPDATE_ACHIEVEMENT, {"title": "x"}))

    def test_delete_recomputes_completeness(self, state: ZcvState) -> None:
        new = zcv_reducer(state, Action(ActionType.DELETE_EDUCATION, "edu-1"))
        assert new.portfolio.education == []
        assert new.portfolio.completeness == 75

    def test_delete_unknown_key_is_noop(self, state: ZcvState) -> None:
        assert zcv_reducer(state, Action(ActionType.DELETE_ACHIEVEMENT, "nope")) is state

    def test_invalid_field_type(self, state: ZcvState) -> None:
        with pytest.raises(InvalidRecordError):
            zcv_reducer(state, Action(ActionType.ADD_PROJECT, {"name": "X", "type": "secret"}))


class TestSkills:
    def test_keyed_by_name(self, state: ZcvState) -> None:
        new = zcv_reducer(
            state,
            Action(ActionType.UPDATE_SKILL, {"id": "Python", "data": {"proficiency": "expert"}}),
        )
        python = next(s for s in new.portfolio.skills if s.name == "Python")
        assert python.proficiency == "expert"

    def test_name_is_stripped(self, state: ZcvState) -> None:
        new = zcv_reducer(state, Action(ActionType.ADD_SKILL, {"name": "  Go  "}))
        assert new.portfolio.skills[-1].name == "Go"

    def test_duplicate_name_rejected(self, state: ZcvState) -> None:
        with pytest.raises(DuplicateSkillError):
            zcv_reducer(state, Action(ActionType.ADD_SKILL, {"name": "Python "}))

    def test_rename_onto_existing_rejected(self, state: ZcvState) -> None:
        with pytest.raises(DuplicateSkillError):
            zcv_reducer(
                state, Action(ActionType.UPDATE_SKILL, {"id": "React", "data": {"name": "Docker"}})
            )

    def test_blank_name_rejected(self, state: ZcvState) -> None:
        with pytest.raises(InvalidRecordError):
            zcv_reducer(state, Action(ActionType.ADD_SKILL, {"name": "   "}))

    def test_delete_by_name(self, state: ZcvState) -> None:
        new = zcv_reducer(state, Action(ActionType.DELETE_SKILL, "Docker"))
        assert [s.name for s in new.portfolio.skills] == ["Python", "React", "Mentoring"]


class TestResumes:
    def test_add_and_ignore_duplicate_id(self) -> None:
        resume = _resume()
        state = zcv_reducer(ZcvState(), Action(ActionType.ADD_RESUME, resume))
        again = zcv_reducer(state, Action(ActionType.ADD_RESUME, resume))
        assert again is state
        assert len(again.resumes) == 1

    def test_only_download_count_is_mutable(self) -> None:
        resume = _resume()
        state = zcv_reducer(ZcvState(), Action(ActionType.ADD_RESUME, resume))

        bumped = zcv_reducer(
            state,
            Action(ActionType.UPDATE_RESUME, {"id": resume.id, "data": {"downloadCount": 2}}),
        )
        assert bumped.resumes[0].download_count == 2

        with pytest.raises(InvalidRecordError, match="immutable"):
            zcv_reducer(
                state, Action(ActionType.UPDATE_RESUME, {"id": resume.id, "data": {"latex": ""}})
            )

    def test_delete_clears_selection(self) -> None:
        resume = _resume()
        state = zcv_reducer(ZcvState(), Action(ActionType.ADD_RESUME, resume))
        state = zcv_reducer(state, Action(ActionType.SELECT_RESUME, resume.id))
        assert state.selected_resume_id == resume.id

        state = zcv_reducer(state, Action(ActionType.DELETE_RESUME, resume.id))
        assert state.resumes == []
        assert state.selected_resume_id is None

    def test_resume_changes_keep_portfolio_identity(self, state: ZcvState) -> None:
        new = zcv_reducer(state, Action(ActionType.ADD_RESUME, _resume()))
        assert new.portfolio is state.portfolio


class TestSession:
    def test_chat_messages(self) -> None:
        state = zcv_reducer(
            ZcvState(), Action(ActionType.ADD_CHAT_MESSAGE, ChatMessage(content="hi"))
        )
        assert [m.content for m in state.chat_messages] == ["hi"]
        state = zcv_reducer(state, Action(ActionType.CLEAR_CHAT))
        assert state.chat_messages == []

    def test_set_view(self) -> None:
        state = zcv_reducer(ZcvState(), Action(ActionType.SET_VIEW, "resume-manager"))
        assert state.current_view is View.RESUME_MANAGER

    def test_set_unknown_view(self) -> None:
        with pytest.raises(InvalidRecordError):
            zcv_reducer(ZcvState(), Action(ActionType.SET_VIEW, "settings"))

    def test_flags_and_focus(self) -> None:
        state = zcv_reducer(ZcvState(), Action(ActionType.SET_GENERATING, True))
        state = zcv_reducer(state, Action(ActionType.SET_TAILORING, 1))
        state = zcv_reducer(state, Action(ActionType.SET_FOCUS, "projects"))
        assert state.is_generating is True
        assert state.is_tailoring is True
        assert state.current_focus == "projects"

    def test_export_leaves_state_unchanged(self) -> None:
        state = ZcvState()
        assert zcv_reducer(state, Action(ActionType.EXPORT_PORTFOLIO)) is state
