"""Reducer-driven state container."""

from zcv.state.actions import SECTIONS, Action, ActionType, Section
from zcv.state.completeness import calculate_completeness
from zcv.state.reducer import zcv_reducer
from zcv.state.store import ZcvStore

__all__ = [
    "SECTIONS",
    "Action",
    "ActionType",
    "Section",
    "ZcvStore",
    "calculate_completeness",
    "zcv_reducer",
]
