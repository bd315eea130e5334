"""CRUD routes for the keyed portfolio sections.

One set of routes serves every section; ``{section}`` is one of
``experiences``, ``projects``, ``education``, ``skills`` or ``achievements``.
Skills are addressed by name, every other record by id.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi import Path as PathParam

from zcv.api.dependencies import get_store, to_http_exception
from zcv.models import ZcvError
from zcv.services.editors import RecordEditor
from zcv.state import Section, ZcvStore

router = APIRouter(prefix="/portfolio", tags=["sections"])

StoreDep = Annotated[ZcvStore, Depends(get_store)]
SectionParam = Annotated[Section, PathParam(description="Portfolio section")]


def _dump(record: Any) -> dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True)


@router.get("/{section}", summary="List records of a section")
def list_records(
    store: StoreDep,
    section: SectionParam,
    filter_by: Annotated[
        str, Query(alias="filter", description="Category or type to keep, or 'all'")
    ] = "all",
) -> list[dict[str, Any]]:
    try:
        records = RecordEditor(store, section).filter(filter_by)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return [_dump(r) for r in records]


@router.get("/{section}/counts", summary="Records per category or type")
def count_records(store: StoreDep, section: SectionParam) -> dict[str, int]:
    try:
        return RecordEditor(store, section).counts()
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.get("/{section}/empty-form", summary="Blank form with default values")
def empty_form(store: StoreDep, section: SectionParam) -> dict[str, Any]:
    return RecordEditor(store, section).empty_form()


@router.get("/{section}/{key}", summary="Get one record")
def get_record(store: StoreDep, section: SectionParam, key: str) -> dict[str, Any]:
    try:
        return _dump(RecordEditor(store, section).get(key))
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.post("/{section}", status_code=status.HTTP_201_CREATED, summary="Add a record")
def create_record(
    store: StoreDep,
    section: SectionParam,
    form: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    try:
        return _dump(RecordEditor(store, section).save(form))
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.put("/{section}/{key}", summary="Update a record")
def update_record(
    store: StoreDep,
    section: SectionParam,
    key: str,
    form: Annotated[dict[str, Any], Body()],
) -> dict[str, Any]:
    try:
        return _dump(RecordEditor(store, section).save(form, editing_key=key))
    except ZcvError as exc:
        raise to_http_exception(exc) from exc


@router.delete(
    "/{section}/{key}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a record",
)
def delete_record(store: StoreDep, section: SectionParam, key: str) -> Response:
    try:
        RecordEditor(store, section).delete(key)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
