"""Pure reducer producing a new :class:`ZcvState` for each :class:`Action`.

The reducer never mutates its input.  Untouched parts of the state keep
their identity, which lets the store detect whether the portfolio or the
resume list changed without comparing contents.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import cache, partial
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from zcv.models import (
    ChatMessage,
    DuplicateSkillError,
    GeneratedResume,
    InvalidRecordError,
    Portfolio,
    PortfolioAnalysis,
    Skill,
    View,
    ZcvState,
)
from zcv.models.portfolio import new_id, utc_now
from zcv.state.actions import SECTIONS, Action, ActionType, Section
from zcv.state.completeness import calculate_completeness

logger = logging.getLogger(__name__)

__all__ = ["checked_skill_names", "normalize_fields", "zcv_reducer"]

Handler = Callable[[ZcvState, Any], ZcvState]
M = TypeVar("M", bound=BaseModel)

# Resumes are snapshots; only the download counter may change afterwards.
_RESUME_MUTABLE_FIELDS = frozenset({"download_count"})


# -----------------------------------------------------------------------
# Field helpers


@cache
def _accepted_keys(model: type[BaseModel]) -> dict[str, str]:
    """Map every accepted key (field name or JSON alias) to its field name."""
    keys: dict[str, str] = {}
    for name, info in model.model_fields.items():
        keys[name] = name
        if info.alias:
            keys[info.alias] = name
    return keys


def normalize_fields(model: type[BaseModel], data: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Return *data* keyed by *model*'s field names.

    Raises:
        InvalidRecordError: If *data* is not a mapping or names unknown fields.
    """
    if isinstance(data, BaseModel):
        return data.model_dump()
    if not isinstance(data, Mapping):
        msg = f"Expected {model.__name__} fields, got {type(data).__name__}"
        raise InvalidRecordError(msg)

    keys = _accepted_keys(model)
    unknown = sorted(str(k) for k in data if k not in keys)
    if unknown:
        msg = f"Unknown {model.__name__} field(s): {', '.join(unknown)}"
        raise InvalidRecordError(msg)
    return {keys[k]: v for k, v in data.items()}


def _validate(model: type[M], data: dict[str, Any]) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise InvalidRecordError(f"Invalid {model.__name__}: {details}") from exc


def _coerce(model: type[M], payload: Any) -> M:
    if isinstance(payload, model):
        return payload
    return _validate(model, normalize_fields(model, payload))


def _unpack_update(payload: Any) -> tuple[str, Any]:
    if not isinstance(payload, Mapping) or "id" not in payload or "data" not in payload:
        raise InvalidRecordError("Update payload must contain 'id' and 'data'")
    return payload["id"], payload["data"]


def _checked_skill(skill: Skill, skills: list[Skill], current: str | None) -> Skill:
    """Enforce non-blank, unique skill names (*current* is the name being edited)."""
    name = skill.name.strip()
    if not name:
        raise InvalidRecordError("Skill name must not be blank")
    if any(s.name == name and s.name != current for s in skills):
        raise DuplicateSkillError(f"Skill {name!r} already exists")
    return skill.model_copy(update={"name": name})


def checked_skill_names(skills: list[Skill]) -> list[Skill]:
    """Strip skill names and enforce that they are non-blank and unique.

    Raises:
        InvalidRecordError: If a name is blank.
        DuplicateSkillError: If two skills share a name.
    """
    seen: set[str] = set()
    checked = []
    for skill in skills:
        name = skill.name.strip()
        if not name:
            raise InvalidRecordError("Skill name must not be blank")
        if name in seen:
            raise DuplicateSkillError(f"Skill {name!r} appears more than once")
        seen.add(name)
        checked.append(skill if skill.name == name else skill.model_copy(update={"name": name}))
    return checked


def _commit_portfolio(state: ZcvState, portfolio: Portfolio, *, touch: bool = True) -> ZcvState:
    if touch:
        portfolio = portfolio.model_copy(update={"updated_at": utc_now()})
    portfolio = portfolio.model_copy(update={"completeness": calculate_completeness(portfolio)})
    return state.model_copy(update={"portfolio": portfolio})


# -----------------------------------------------------------------------
# Portfolio


def _load_portfolio(state: ZcvState, payload: Any) -> ZcvState:
    if isinstance(payload, Portfolio):
        portfolio = payload
    elif isinstance(payload, Mapping):
        portfolio = _validate(Portfolio, dict(payload))
    else:
        raise InvalidRecordError(f"Cannot load a portfolio from {type(payload).__name__}")
    portfolio = portfolio.model_copy(update={"skills": checked_skill_names(portfolio.skills)})
    return _commit_portfolio(state, portfolio, touch=False)


def _update_portfolio(state: ZcvState, payload: Any) -> ZcvState:
    updates = normalize_fields(Portfolio, payload)
    updates.pop("completeness", None)
    merged = _validate(Portfolio, {**state.portfolio.model_dump(), **updates})
    if "skills" in updates:
        merged = merged.model_copy(update={"skills": checked_skill_names(merged.skills)})
    return _commit_portfolio(state, merged)


def _add_record(section: Section, state: ZcvState, payload: Any) -> ZcvState:
    meta = SECTIONS[section]
    items = getattr(state.portfolio, section.value)
    record = _coerce(meta.model, payload)
    if isinstance(record, Skill):
        record = _checked_skill(record, items, current=None)
    else:
        record = record.model_copy(update={"id": new_id()})
    portfolio = state.portfolio.model_copy(update={section.value: [*items, record]})
    return _commit_portfolio(state, portfolio)


def _update_record(section: Section, state: ZcvState, payload: Any) -> ZcvState:
    meta = SECTIONS[section]
    key, data = _unpack_update(payload)
    updates = normalize_fields(meta.model, data)
    items = getattr(state.portfolio, section.value)

    if not any(getattr(item, meta.key) == key for item in items):
        return state

    new_items = []
    for item in items:
        if getattr(item, meta.key) != key:
            new_items.append(item)
            continue
        merged = _validate(meta.model, {**item.model_dump(), **updates})
        if isinstance(merged, Skill):
            merged = _checked_skill(merged, items, current=item.name)
        else:
            merged = merged.model_copy(update={"id": item.id})
        new_items.append(merged)

    portfolio = state.portfolio.model_copy(update={section.value: new_items})
    return _commit_portfolio(state, portfolio)


def _delete_record(section: Section, state: ZcvState, payload: Any) -> ZcvState:
    meta = SECTIONS[section]
    items = getattr(state.portfolio, section.value)
    remaining = [item for item in items if getattr(item, meta.key) != payload]
    if len(remaining) == len(items):
        return state
    portfolio = state.portfolio.model_copy(update={section.value: remaining})
    return _commit_portfolio(state, portfolio)


# -----------------------------------------------------------------------
# Resumes


def _add_resume(state: ZcvState, payload: Any) -> ZcvState:
    resume = _coerce(GeneratedResume, payload)
    if any(r.id == resume.id for r in state.resumes):
        logger.warning("Resume %s already present; ignoring duplicate", resume.id)
        return state
    return state.model_copy(update={"resumes": [*state.resumes, resume]})


def _update_resume(state: ZcvState, payload: Any) -> ZcvState:
    key, data = _unpack_update(payload)
    updates = normalize_fields(GeneratedResume, data)
    frozen = sorted(set(updates) - _RESUME_MUTABLE_FIELDS)
    if frozen:
        msg = f"Generated resumes are immutable; cannot change {', '.join(frozen)}"
        raise InvalidRecordError(msg)

    resumes = [
        _validate(GeneratedResume, {**r.model_dump(), **updates}) if r.id == key else r
        for r in state.resumes
    ]
    return state.model_copy(update={"resumes": resumes})


def _delete_resume(state: ZcvState, payload: Any) -> ZcvState:
    update: dict[str, Any] = {"resumes": [r for r in state.resumes if r.id != payload]}
    if state.selected_resume_id == payload:
        update["selected_resume_id"] = None
    return state.model_copy(update=update)


def _select_resume(state: ZcvState, payload: Any) -> ZcvState:
    return state.model_copy(update={"selected_resume_id": payload})


# -----------------------------------------------------------------------
# Session / UI


def _add_chat_message(state: ZcvState, payload: Any) -> ZcvState:
    message = _coerce(ChatMessage, payload)
    return state.model_copy(update={"chat_messages": [*state.chat_messages, message]})


def _clear_chat(state: ZcvState, payload: Any) -> ZcvState:
    return state.model_copy(update={"chat_messages": []})


def _set_view(state: ZcvState, payload: Any) -> ZcvState:
    try:
        view = View(payload)
    except ValueError:
        raise InvalidRecordError(f"Unknown view {payload!r}") from None
    return state.model_copy(update={"current_view": view})


def _set_flag(flag: str, state: ZcvState, payload: Any) -> ZcvState:
    return state.model_copy(update={flag: bool(payload)})


def _set_focus(state: ZcvState, payload: Any) -> ZcvState:
    return state.model_copy(update={"current_focus": payload})


def _update_analysis(state: ZcvState, payload: Any) -> ZcvState:
    return state.model_copy(update={"portfolio_analysis": _coerce(PortfolioAnalysis, payload)})


def _unchanged(state: ZcvState, payload: Any) -> ZcvState:
    return state


_HANDLERS: dict[ActionType, Handler] = {
    ActionType.LOAD_PORTFOLIO: _load_portfolio,
    ActionType.IMPORT_PORTFOLIO: _load_portfolio,
    ActionType.UPDATE_PORTFOLIO: _update_portfolio,
    ActionType.EXPORT_PORTFOLIO: _unchanged,
    ActionType.ADD_RESUME: _add_resume,
    ActionType.UPDATE_RESUME: _update_resume,
    ActionType.DELETE_RESUME: _delete_resume,
    ActionType.SELECT_RESUME: _select_resume,
    ActionType.ADD_CHAT_MESSAGE: _add_chat_message,
    ActionType.CLEAR_CHAT: _clear_chat,
    ActionType.SET_VIEW: _set_view,
    ActionType.SET_FOCUS: _set_focus,
    ActionType.SET_GENERATING: partial(_set_flag, "is_generating"),
    ActionType.SET_TAILORING: partial(_set_flag, "is_tailoring"),
    ActionType.UPDATE_ANALYSIS: _update_analysis,
}

for _section, _actions in SECTIONS.items():
    _HANDLERS[_actions.add] = partial(_add_record, _section)
    _HANDLERS[_actions.update] = partial(_update_record, _section)
    _HANDLERS[_actions.delete] = partial(_delete_record, _section)


def zcv_reducer(state: ZcvState, action: Action) -> ZcvState:
    """Return the state that results from applying *action* to *state*.

    Raises:
        InvalidRecordError: If the payload does not fit the action.
        DuplicateSkillError: If a skill name would no longer be unique.
    """
    handler = _HANDLERS.get(action.type)
    if handler is None:
        return state
    return handler(state, action.payload)
