"""Form editors for the portfolio sections.

Editors work on plain form dictionaries (field name -> value) the way the
portfolio builder screens do: list fields start with a single blank entry,
blank entries are stripped on save, and every change goes through the
store as an action.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, get_origin

from pydantic import BaseModel

from zcv.models import (
    AchievementType,
    InvalidRecordError,
    PersonalInfo,
    ProfessionalSummary,
    ProjectType,
    RecordNotFoundError,
    SkillCategory,
    Thesis,
)
from zcv.state import SECTIONS, Action, ActionType, Section, ZcvStore
from zcv.state.reducer import normalize_fields

logger = logging.getLogger(__name__)

__all__ = [
    "PersonalInfoEditor",
    "RecordEditor",
    "add_array_item",
    "remove_array_item",
    "update_array_item",
]

Form = dict[str, Any]

# Field each filterable section is filtered and counted by, with its choices.
_FILTERS: dict[Section, tuple[str, tuple[str, ...]]] = {
    Section.SKILLS: ("category", tuple(c.value for c in SkillCategory)),
    Section.ACHIEVEMENTS: ("kind", tuple(t.value for t in AchievementType)),
    Section.PROJECTS: ("kind", tuple(t.value for t in ProjectType)),
}

ALL = "all"


def _is_list_field(model: type[BaseModel], name: str) -> bool:
    return get_origin(model.model_fields[name].annotation) is list


def _blank_form(model: type[BaseModel]) -> Form:
    form: Form = {}
    for name, info in model.model_fields.items():
        if name == "id":
            continue
        if _is_list_field(model, name):
            form[name] = [""]
        elif info.default is None:
            form[name] = ""
        else:
            form[name] = model().model_dump()[name]
    return form


def _clean_form(model: type[BaseModel], form: Mapping[str, Any]) -> Form:
    """Strip blank list entries and turn empty optional strings into None."""
    cleaned: Form = {}
    for name, value in form.items():
        if name == "id":
            continue
        info = model.model_fields[name]
        if _is_list_field(model, name) and isinstance(value, list):
            value = [v.strip() if isinstance(v, str) else v for v in value]
            value = [v for v in value if v != ""]
        elif name == "thesis" and isinstance(value, Mapping):
            value = _clean_thesis(value)
        elif info.default is None and value == "":
            value = None
        cleaned[name] = value
    return cleaned


def _clean_thesis(thesis: Mapping[str, Any]) -> Form | None:
    cleaned = _clean_form(Thesis, normalize_fields(Thesis, thesis))
    if not any(cleaned.values()):
        return None
    return cleaned


# -----------------------------------------------------------------------
# Array-field helpers


def add_array_item(form: Mapping[str, Any], field: str) -> Form:
    """Return a copy of *form* with a blank entry appended to *field*."""
    return {**form, field: [*form.get(field, []), ""]}


def update_array_item(form: Mapping[str, Any], field: str, index: int, value: str) -> Form:
    """Return a copy of *form* with entry *index* of *field* replaced."""
    items = list(form.get(field, []))
    if not 0 <= index < len(items):
        raise IndexError(f"{field} has no entry {index}")
    items[index] = value
    return {**form, field: items}


def remove_array_item(form: Mapping[str, Any], field: str, index: int) -> Form:
    """Return a copy of *form* without entry *index* of *field*.

    The last remaining entry is never removed.
    """
    items = list(form.get(field, []))
    if len(items) <= 1:
        return dict(form)
    if not 0 <= index < len(items):
        raise IndexError(f"{field} has no entry {index}")
    del items[index]
    return {**form, field: items}


# -----------------------------------------------------------------------
# Editors


class PersonalInfoEditor:
    """Edits the contact details and the professional summary."""

    def __init__(self, store: ZcvStore) -> None:
        self._store = store

    def update_personal_info(self, field: str, value: Any) -> PersonalInfo:
        current = self._store.state.portfolio.personal_info
        updates = normalize_fields(PersonalInfo, {field: value})
        merged = {**current.model_dump(), **updates}
        self._store.dispatch(Action(ActionType.UPDATE_PORTFOLIO, {"personal_info": merged}))
        return self._store.state.portfolio.personal_info

    def update_professional_summary(self, field: str, value: str) -> ProfessionalSummary:
        current = self._store.state.portfolio.professional_summary
        updates = normalize_fields(ProfessionalSummary, {field: value})
        self._store.dispatch(
            Action(
                ActionType.UPDATE_PORTFOLIO,
                {"professional_summary": {**current.model_dump(), **updates}},
            )
        )
        return self._store.state.portfolio.professional_summary


class RecordEditor:
    """Add, edit, delete and filter the records of one portfolio section.

    Args:
        store: The application store.
        section: Section to edit, e.g. ``Section.SKILLS`` or ``"skills"``.
    """

    def __init__(self, store: ZcvStore, section: Section | str) -> None:
        try:
            self.section = Section(section)
        except ValueError:
            raise InvalidRecordError(f"Unknown portfolio section {section!r}") from None
        self._store = store
        self._meta = SECTIONS[self.section]

    @property
    def key_field(self) -> str:
        return self._meta.key

    def items(self) -> list[Any]:
        return list(getattr(self._store.state.portfolio, self.section.value))

    def get(self, key: str) -> Any:
        for item in self.items():
            if getattr(item, self._meta.key) == key:
                return item
        raise RecordNotFoundError(f"No {self.section.value} record {key!r}")

    def empty_form(self) -> Form:
        """Return a blank form with the default values of a new record."""
        form = _blank_form(self._meta.model)
        if self.section is Section.SKILLS:
            form["last_used"] = date.today().isoformat()
        elif self.section is Section.EDUCATION:
            form["thesis"] = _blank_form(Thesis)
        return form

    def edit_form(self, key: str) -> Form:
        """Return the form for an existing record, list fields padded to one entry."""
        form = self.get(key).model_dump()
        form.pop("id", None)
        for name, value in form.items():
            if _is_list_field(self._meta.model, name) and not value:
                form[name] = [""]
        return form

    def save(self, form: Mapping[str, Any], editing_key: str | None = None) -> Any:
        """Add a new record, or update the one identified by *editing_key*.

        Returns:
            The saved record.

        Raises:
            RecordNotFoundError: If *editing_key* does not exist.
            InvalidRecordError: If the form does not validate.
            DuplicateSkillError: If a skill name is already taken.
        """
        data = _clean_form(self._meta.model, normalize_fields(self._meta.model, form))

        if editing_key is None:
            self._store.dispatch(Action(self._meta.add, data))
            saved = self.items()[-1]
            logger.info("Added %s record %s", self.section.value, getattr(saved, self._meta.key))
            return saved

        self.get(editing_key)
        self._store.dispatch(Action(self._meta.update, {"id": editing_key, "data": data}))
        new_key = editing_key
        if self.section is Section.SKILLS and "name" in data:
            new_key = str(data["name"]).strip()
        return self.get(new_key)

    def delete(self, key: str) -> None:
        self.get(key)
        self._store.dispatch(Action(self._meta.delete, key))
        logger.info("Deleted %s record %s", self.section.value, key)

    def filter(self, value: str | None = ALL) -> list[Any]:
        """Return the records whose category/type equals *value* (``"all"`` for every record)."""
        if value in (None, ALL):
            return self.items()
        field, choices = self._filter_field()
        if value not in choices:
            raise InvalidRecordError(f"Unknown {self.section.value} filter {value!r}")
        return [item for item in self.items() if getattr(item, field) == value]

    def counts(self) -> dict[str, int]:
        """Number of records per category/type, every choice included."""
        field, choices = self._filter_field()
        counts = dict.fromkeys(choices, 0)
        for item in self.items():
            counts[getattr(item, field)] += 1
        return counts

    def _filter_field(self) -> tuple[str, tuple[str, ...]]:
        try:
            return _FILTERS[self.section]
        except KeyError:
            raise InvalidRecordError(f"{self.section.value} records cannot be filtered") from None
