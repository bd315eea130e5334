"""Tests for the store and its local-cache mirror."""

from __future__ import annotations

import json
import threading
from unittest.mock import patch

import pytest

from zcv.models import DuplicateSkillError, GeneratedResume, Portfolio, ZcvState
from zcv.services import persistence
from zcv.state import Action, ActionType, ZcvStore


def test_dispatch_returns_new_state(store: ZcvStore) -> None:
    state = store.dispatch(Action(ActionType.ADD_SKILL, {"name": "Go"}))
    assert state is store.state
    assert [s.name for s in state.portfolio.skills] == ["Go"]


def test_subscribers_receive_state_and_action(store: ZcvStore) -> None:
    seen: list[tuple[ZcvState, Action]] = []
    unsubscribe = store.subscribe(lambda state, action: seen.append((state, action)))

    action = Action(ActionType.SET_VIEW, "chat")
    store.dispatch(action)
    assert seen == [(store.state, action)]

    unsubscribe()
    store.dispatch(Action(ActionType.SET_VIEW, "dashboard"))
    assert len(seen) == 1


def test_reducer_error_leaves_state(store: ZcvStore) -> None:
    store.dispatch(Action(ActionType.ADD_SKILL, {"name": "Go"}))
    before = store.state
    with pytest.raises(DuplicateSkillError):
        store.dispatch(Action(ActionType.ADD_SKILL, {"name": "Go"}))
    assert store.state is before


def test_portfolio_change_is_mirrored(store: ZcvStore) -> None:
    store.dispatch(Action(ActionType.ADD_SKILL, {"name": "Go"}))
    saved = persistence.load_saved_data()
    assert saved is not None
    assert [s.name for s in saved.portfolio.skills] == ["Go"]


def test_session_changes_are_not_mirrored(store: ZcvStore) -> None:
    with patch.object(persistence, "save_state") as save:
        store.dispatch(Action(ActionType.SET_VIEW, "chat"))
        store.dispatch(Action(ActionType.SET_GENERATING, True))
    save.assert_not_called()


def test_persist_disabled() -> None:
    store = ZcvStore(persist=False)
    with patch.object(persistence, "save_state") as save:
        store.dispatch(Action(ActionType.ADD_SKILL, {"name": "Go"}))
    save.assert_not_called()


def test_failed_mirror_keeps_memory_state(store: ZcvStore) -> None:
    with patch.object(persistence, "save_state", return_value=False):
        store.dispatch(Action(ActionType.ADD_SKILL, {"name": "Go"}))
    assert store.state.portfolio.skills[0].name == "Go"


def test_hydrate_restores_portfolio_and_resumes(portfolio: Portfolio) -> None:
    first = ZcvStore()
    first.dispatch(Action(ActionType.LOAD_PORTFOLIO, portfolio))
    first.dispatch(Action(ActionType.ADD_RESUME, GeneratedResume(name="r", template="tech")))

    second = ZcvStore()
    assert second.hydrate() is True
    assert second.state.portfolio.personal_info.name == "Jane Doe"
    assert second.state.portfolio.completeness == 85
    assert [r.name for r in second.state.resumes] == ["r"]


def test_hydrate_does_not_rewrite_cache(portfolio: Portfolio) -> None:
    ZcvStore().dispatch(Action(ActionType.LOAD_PORTFOLIO, portfolio))
    store = ZcvStore()
    with patch.object(persistence, "save_state") as save:
        store.hydrate()
    save.assert_not_called()


def test_hydrate_without_saved_data(store: ZcvStore) -> None:
    assert store.hydrate() is False
    assert store.state.portfolio.skills == []
    assert store.state.resumes == []


def test_refresh_analysis(loaded_store: ZcvStore) -> None:
    state = loaded_store.refresh_analysis()
    analysis = state.portfolio_analysis
    assert analysis.completeness == 85
    assert "Name" in analysis.strengths
    assert "Elevator pitch" in analysis.gaps


def test_hydrate_skips_portfolio_with_duplicate_skills() -> None:
    from zcv.services import local_storage

    resume = GeneratedResume(name="r", template="tech")
    blob = {
        "portfolio": {
            "personalInfo": {"name": "Jane"},
            "skills": [{"name": "Go"}, {"name": "Go"}],
        },
        "resumes": [resume.model_dump(mode="json", by_alias=True)],
    }
    local_storage.set_item(persistence.STORAGE_KEY, json.dumps(blob))

    store = ZcvStore()
    assert store.hydrate() is True
    assert store.state.portfolio.skills == []
    assert store.state.portfolio.personal_info.name == ""
    assert [r.name for r in store.state.resumes] == ["r"]


def test_cache_holds_latest_state_after_concurrent_dispatches(store: ZcvStore) -> None:
    names = [f"skill-{i}" for i in range(20)]
    threads = [
        threading.Thread(target=store.dispatch, args=(Action(ActionType.ADD_SKILL, {"name": n}),))
        for n in names
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    saved = persistence.load_saved_data()
    assert saved is not None
    assert [s.name for s in saved.portfolio.skills] == [
        s.name for s in store.state.portfolio.skills
    ]
    assert sorted(s.name for s in saved.portfolio.skills) == sorted(names)
