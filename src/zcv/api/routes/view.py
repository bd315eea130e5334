"""View router: read and switch the active screen."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from zcv.api.dependencies import get_store, to_http_exception
from zcv.api.schemas.dashboard import ViewRequest, ViewResponse
from zcv.models import ZcvError
from zcv.state import Action, ActionType, ZcvStore

router = APIRouter(prefix="/view", tags=["view"])

StoreDep = Annotated[ZcvStore, Depends(get_store)]


@router.get("", response_model=ViewResponse)
def get_view(store: StoreDep) -> ViewResponse:
    return ViewResponse(
        view=store.state.current_view, selected_resume_id=store.state.selected_resume_id
    )


@router.put("", response_model=ViewResponse)
def set_view(store: StoreDep, request: ViewRequest) -> ViewResponse:
    try:
        store.dispatch(Action(ActionType.SET_VIEW, request.view))
    except ZcvError as exc:
        raise to_http_exception(exc) from exc
    return get_view(store)
