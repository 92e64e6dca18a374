"""Observable state shared between the chat, analysis and map views."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from portus_agent.agent.schema import AnalysisResult
from portus_agent.logger import LOGGER
from portus_agent.state.extractor import EntityExtractor
from portus_agent.types import MapFocus


@dataclass(frozen=True, slots=True)
class SharedState:
    current_analysis: AnalysisResult | None = None
    selected_vessel: str | None = None
    selected_event: str | None = None
    map_focus: MapFocus = field(default_factory=MapFocus)


Subscriber = Callable[[SharedState], None]


class SharedStateStore:
    """Single-owner state object with setters as its only mutation surface.

    Every setter swaps in a new frozen ``SharedState`` and then synchronously
    calls each subscriber with that snapshot. ``commit`` is a sequence of
    setter calls, not a transaction: subscribers see the analysis change
    first, then the vessel, then the event, then the focus. A subscriber that
    raises is logged and skipped so one broken view cannot stall the others.
    """

    def __init__(self, extractor: EntityExtractor | None = None) -> None:
        self.extractor = extractor or EntityExtractor()
        self._state = SharedState()
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()

    @property
    def state(self) -> SharedState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and return a function that removes it."""
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    def commit(self, result: AnalysisResult | None) -> None:
        self.set_current_analysis(result)
        if result is None:
            return

        extraction = self.extractor.extract(result)
        LOGGER.debug(
            "Extracted vessel=%s event=%s focus=%s",
            extraction.vessel_id,
            extraction.event_keyword,
            extraction.focus,
        )
        if extraction.vessel_id is not None:
            self.select_vessel(extraction.vessel_id)
        if extraction.event_keyword is not None:
            self.select_event(extraction.event_keyword)
        if extraction.focus is not None:
            self.set_focus(extraction.focus)

    def set_current_analysis(self, result: AnalysisResult | None) -> None:
        self._update(current_analysis=result)

    def select_vessel(self, vessel_id: str | None) -> None:
        self._update(selected_vessel=vessel_id)

    def select_event(self, keyword: str | None) -> None:
        self._update(selected_event=keyword)

    def set_focus(self, focus: MapFocus) -> None:
        self._update(map_focus=focus)

    def _update(self, **changes: object) -> None:
        with self._lock:
            self._state = replace(self._state, **changes)
            snapshot = self._state
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(snapshot)
            except Exception:
                LOGGER.exception("State subscriber %r failed", callback)
