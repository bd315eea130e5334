"""Dashboard route."""

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends

from zcv.api.dependencies import get_store
from zcv.api.schemas.dashboard import DashboardResponse
from zcv.services.dashboard import build_dashboard
from zcv.state import ZcvStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse, summary="Dashboard summary")
def get_dashboard(store: Annotated[ZcvStore, Depends(get_store)]) -> DashboardResponse:
    state = store.state
    summary = build_dashboard(state.portfolio, state.resumes)
    return DashboardResponse(
        stats=[asdict(s) for s in summary.stats],
        next_step=asdict(summary.next_step),
        insights=[asdict(i) for i in summary.insights],
        recent_resumes=summary.recent_resumes,
    )
