"""
Application state: the single UIState instance and the mutators that replace its fields.
"""
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional

from .logger import get_logger
from ..models.schema import Record, ResultEnvelope, empty_envelope

SetBusy = Callable[[bool], None]
SetResults = Callable[[ResultEnvelope], None]
SetFeatured = Callable[[Optional[Record]], None]
Listener = Callable[["UIState", str], None]

logger = get_logger()


@dataclass(frozen=True)
class UIState:
    busy: bool = False
    results: ResultEnvelope = field(default_factory=empty_envelope)
    featured: Optional[Record] = None

    def to_dict(self) -> dict:
        return {"busy": self.busy, "results": self.results, "featured": self.featured}


class StateStore:
    """
    Owner of the UIState.

    Every mutation replaces one whole field and produces a new UIState; nested
    structures handed in are stored as given, never edited in place. Listeners
    are called after each mutation with the new state and the name of the
    field that changed. Views do not subscribe; each request renders the
    current state.
    """

    def __init__(self, initial: Optional[UIState] = None) -> None:
        self._state = initial or UIState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> UIState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_busy(self, busy: bool) -> None:
        self._apply("busy", bool(busy))

    def set_results(self, results: ResultEnvelope) -> None:
        self._apply("results", results)

    def set_featured(self, featured: Optional[Record]) -> None:
        self._apply("featured", featured)

    def _apply(self, name: str, value) -> None:
        self._state = replace(self._state, **{name: value})
        logger.debug(f"state.{name} replaced")
        for listener in list(self._listeners):
            listener(self._state, name)
