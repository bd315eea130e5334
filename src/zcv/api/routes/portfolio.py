"""Portfolio routes: whole-portfolio reads, contact/summary edits, import and export."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from zcv.api.dependencies import get_store, to_http_exception
from zcv.api.schemas.common import DirectoryRequest, PathResponse
from zcv.api.schemas.portfolio import CompletenessResponse
from zcv.models import Portfolio, PortfolioAnalysis, ZcvError
from zcv.services.editors import PersonalInfoEditor
from zcv.services.portfolio_io import export_portfolio, parse_portfolio
from zcv.state import Action, ActionType, ZcvStore
from zcv.state.completeness import completeness_breakdown

router = APIRouter(prefix="/portfolio", tags=["portfolio"])

StoreDep = Annotated[ZcvStore, Depends(get_store)]


@router.get("", response_model=Portfolio, summary="Get the portfolio")
def get_portfolio(store: StoreDep) -> Portfolio:
    return store.state.portfolio


@router.patch("/personal-info", response_model=Portfolio, summary="Update contact details")
def update_personal_info(store: StoreDep, fields: Annotated[dict[str, Any], Body()]) -> Portfolio:
    """Apply each given field of the personal-info block in turn."""
    editor = PersonalInfoEditor(store)
    try:
        for field, value in fields.items():
            editor.update_personal_info(field, value)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return store.state.portfolio


@router.patch("/summary", response_model=Portfolio, summary="Update the professional summary")
def update_summary(store: StoreDep, fields: Annotated[dict[str, str], Body()]) -> Portfolio:
    editor = PersonalInfoEditor(store)
    try:
        for field, value in fields.items():
            editor.update_professional_summary(field, value)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return store.state.portfolio


@router.post("/import", response_model=Portfolio, summary="Replace the portfolio")
def import_portfolio(store: StoreDep, payload: Annotated[dict[str, Any], Body()]) -> Portfolio:
    """Load an exported portfolio JSON document; completeness is recomputed."""
    try:
        portfolio = parse_portfolio(payload)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    store.dispatch(Action(ActionType.IMPORT_PORTFOLIO, portfolio))
    return store.state.portfolio


@router.post("/export", response_model=PathResponse, summary="Export the portfolio to a file")
def export(store: StoreDep, request: DirectoryRequest | None = None) -> PathResponse:
    directory = Path(request.directory) if request and request.directory else None
    try:
        path = export_portfolio(store.state.portfolio, directory, store=store)
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return PathResponse(path=str(path))


@router.get("/completeness", response_model=CompletenessResponse)
def get_completeness(store: StoreDep) -> CompletenessResponse:
    portfolio = store.state.portfolio
    return CompletenessResponse(
        completeness=portfolio.completeness,
        breakdown=completeness_breakdown(portfolio),
    )


@router.get("/analysis", response_model=PortfolioAnalysis)
def get_analysis(store: StoreDep) -> PortfolioAnalysis:
    """Recompute and return the portfolio analysis."""
    return store.refresh_analysis().portfolio_analysis
