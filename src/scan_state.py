"""
Per-card scan state.
Each dashboard card owns a CardState; the ScanCoordinator is the only writer.
Completions carry the generation token issued when the request started and are
dropped when a newer request for the same card has been issued since.
"""
from dataclasses import dataclass, replace
from typing import Any, Iterable, Literal, MutableMapping, Optional

from src.constants import GLOBAL_SCAN_ORDER

Phase = Literal["idle", "loading", "success", "error"]
EventKind = Literal["start", "success", "failure"]

STATE_KEY_PREFIX = "card_state:"
GLOBAL_LOADING_KEY = "global_loading"
GLOBAL_ERROR_KEY = "global_error"


@dataclass(frozen=True)
class CardState:
    phase: Phase = "idle"
    data: Any = None  # last successful result; kept across failures
    error: Optional[str] = None
    generation: int = 0

    @property
    def loading(self) -> bool:
        return self.phase == "loading"

    @property
    def has_data(self) -> bool:
        return self.data is not None


@dataclass(frozen=True)
class ScanEvent:
    kind: EventKind
    generation: int
    data: Any = None
    error: Optional[str] = None


def transition(state: CardState, event: ScanEvent) -> CardState:
    """
    idle → loading → success(data) | error(fault).
    A completion whose generation is not the latest issued is ignored.
    """
    if event.kind == "start":
        return replace(state, phase="loading", error=None, generation=event.generation)
    if event.generation != state.generation:
        return state
    if event.kind == "success":
        return replace(state, phase="success", data=event.data, error=None)
    return replace(state, phase="error", error=event.error)


class ScanCoordinator:
    """
    Owns every card's state inside a mapping (st.session_state in the app,
    a plain dict in tests).
    """

    def __init__(self, store: Optional[MutableMapping] = None):
        self._store = store if store is not None else {}

    def state(self, card: str) -> CardState:
        return self._store.get(STATE_KEY_PREFIX + card) or CardState()

    def _apply(self, card: str, event: ScanEvent) -> CardState:
        new_state = transition(self.state(card), event)
        self._store[STATE_KEY_PREFIX + card] = new_state
        return new_state

    def begin(self, card: str) -> int:
        """Mark the card loading and return the generation token for this request."""
        token = self.state(card).generation + 1
        self._apply(card, ScanEvent("start", token))
        return token

    def succeed(self, card: str, token: int, data: Any) -> bool:
        """Store the result. Returns False when the token is stale."""
        return self._apply(card, ScanEvent("success", token, data=data)).generation == token

    def fail(self, card: str, token: int, error: str) -> bool:
        """Record the failure, keeping the previous data. Returns False when stale."""
        return self._apply(card, ScanEvent("failure", token, error=error)).generation == token

    def data(self, card: str) -> Any:
        return self.state(card).data

    def is_any_loading(self, cards: Iterable[str] = GLOBAL_SCAN_ORDER) -> bool:
        return any(self.state(card).loading for card in cards)

    # --- global scan flags ---

    @property
    def global_loading(self) -> bool:
        return bool(self._store.get(GLOBAL_LOADING_KEY, False))

    @global_loading.setter
    def global_loading(self, value: bool):
        self._store[GLOBAL_LOADING_KEY] = value

    @property
    def global_error(self) -> Optional[str]:
        return self._store.get(GLOBAL_ERROR_KEY)

    @global_error.setter
    def global_error(self, message: Optional[str]):
        self._store[GLOBAL_ERROR_KEY] = message
