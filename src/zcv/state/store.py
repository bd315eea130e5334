"""State container: holds the current state and dispatches actions.

Every dispatch runs the reducer, notifies subscribers and, when the
portfolio or resume list changed, mirrors them into the local cache.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from zcv.models import ZcvError, ZcvState
from zcv.services import persistence
from zcv.state.actions import Action, ActionType
from zcv.state.reducer import zcv_reducer

logger = logging.getLogger(__name__)

__all__ = ["Listener", "ZcvStore"]

Listener = Callable[[ZcvState, Action], None]


class ZcvStore:
    """Single owner of the application state.

    Args:
        state: Initial state (a fresh empty portfolio by default).
        persist: Mirror portfolio and resumes to the local cache on change.
    """

    def __init__(self, state: ZcvState | None = None, *, persist: bool = True) -> None:
        self._state = state or ZcvState()
        self._persist = persist
        self._mirror_suspended = False
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> ZcvState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> ZcvState:
        """Apply *action* and return the new state.

        Reducer errors propagate and leave the state untouched.
        """
        with self._lock:
            previous = self._state
            current = zcv_reducer(previous, action)
            if current is previous:
                return current
            self._state = current
            # Cache writes happen in dispatch order.
            durable_changed = (
                current.portfolio is not previous.portfolio
                or current.resumes is not previous.resumes
            )
            if durable_changed and self._persist and not self._mirror_suspended:
                self._mirror(current)

        for listener in list(self._listeners):
            listener(current, action)
        return current

    def hydrate(self) -> bool:
        """Load the mirrored portfolio and resumes from the local cache.

        Returns:
            True if saved data was found and applied.
        """
        saved = persistence.load_saved_data()
        if saved is None:
            return False

        with self._suspended_mirror():
            if saved.portfolio is not None:
                try:
                    self.dispatch(Action(ActionType.LOAD_PORTFOLIO, saved.portfolio))
                except ZcvError:
                    logger.exception("Saved portfolio is invalid; ignoring it")
            for resume in saved.resumes:
                self.dispatch(Action(ActionType.ADD_RESUME, resume))
        logger.info(
            "Restored portfolio (%d%% complete) and %d resume(s)",
            self._state.portfolio.completeness,
            len(self._state.resumes),
        )
        return True

    def refresh_analysis(self) -> ZcvState:
        """Recompute the portfolio analysis and store it."""
        from zcv.services.dashboard import analyze_portfolio

        analysis = analyze_portfolio(self._state.portfolio)
        return self.dispatch(Action(ActionType.UPDATE_ANALYSIS, analysis))

    @contextmanager
    def _suspended_mirror(self) -> Iterator[None]:
        self._mirror_suspended = True
        try:
            yield
        finally:
            self._mirror_suspended = False

    def _mirror(self, state: ZcvState) -> None:
        if not persistence.save_state(state):
            logger.warning("Local cache write failed; changes are kept in memory only")
