"""Browsing session state model and reducer.

Every operation is a plain function over `SessionState`, so the state machine
runs without a terminal. `reduce_state` maps intents onto those functions; mode
validity and side effects (clipboard, clock) belong to the controller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict, cast

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    """Which input stream the session consumes."""

    BROWSING = "browsing"
    SEARCHING = "searching"


@dataclass(frozen=True)
class StatusMessage:
    """Transient feedback text with its expiry timestamp."""

    text: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass
class SessionState:
    """Full state of one browsing session."""

    entries: tuple[str, ...] = ()
    filtered: tuple[str, ...] = ()
    cursor: int = 0
    mode: Mode = Mode.BROWSING
    query: str = ""
    status: StatusMessage | None = None
    quit_requested: bool = False
    # Cursor at the moment searching began; restored when the search is cancelled.
    search_origin_cursor: int = 0

    @classmethod
    def from_entries(cls, entries: Sequence[str]) -> SessionState:
        """Initial state: browsing the unfiltered entry set."""
        frozen = tuple(entries)
        return cls(entries=frozen, filtered=frozen)

    @property
    def selected(self) -> str | None:
        """Entry under the cursor, or None when the view is empty."""
        if not self.filtered:
            return None
        return self.filtered[self.cursor]


class IntentType(str, Enum):
    """Intent identifiers for reducer-driven state updates."""

    ENTER_SEARCH = "enter_search"
    UPDATE_SEARCH_QUERY = "update_search_query"
    CONFIRM_SEARCH = "confirm_search"
    CANCEL_SEARCH = "cancel_search"
    MOVE_CURSOR = "move_cursor"
    SET_STATUS = "set_status"
    TICK_STATUS = "tick_status"
    QUIT = "quit"


class IntentPayload(TypedDict, total=False):
    text: str
    delta: int
    expires_at: float
    now: float


@dataclass(frozen=True)
class Intent:
    """State transition request."""

    type: IntentType
    payload: IntentPayload = field(default_factory=lambda: cast(IntentPayload, {}))


def filter_entries(entries: tuple[str, ...], query: str) -> tuple[str, ...]:
    """Case-insensitive substring filter that keeps source order.

    An empty query means no filtering and returns `entries` itself.
    """
    if not query:
        return entries
    needle = query.lower()
    return tuple(entry for entry in entries if needle in entry.lower())


def recompute_cursor(state: SessionState) -> None:
    """Clamp the cursor into the filtered view (0 when the view is empty)."""
    last = len(state.filtered) - 1
    state.cursor = max(0, min(state.cursor, last))


def _reset_view(state: SessionState) -> None:
    state.query = ""
    state.filtered = state.entries
    recompute_cursor(state)


def enter_search(state: SessionState) -> None:
    """Switch to searching with an empty query over the full entry set."""
    state.search_origin_cursor = state.cursor
    state.mode = Mode.SEARCHING
    _reset_view(state)


def update_search_query(state: SessionState, text: str) -> None:
    state.query = text
    state.filtered = filter_entries(state.entries, text)
    recompute_cursor(state)


def confirm_search(state: SessionState) -> None:
    """Back to browsing, keeping the filtered view and cursor."""
    state.mode = Mode.BROWSING


def cancel_search(state: SessionState) -> None:
    """Drop the query and return to browsing the full entry set at the pre-search cursor."""
    state.cursor = state.search_origin_cursor
    _reset_view(state)
    state.mode = Mode.BROWSING


def move_cursor(state: SessionState, delta: int) -> None:
    """Move the cursor by delta without wrapping; no-op on an empty view."""
    if not state.filtered:
        return
    state.cursor += delta
    recompute_cursor(state)


def set_status(state: SessionState, text: str, expires_at: float) -> None:
    state.status = StatusMessage(text=text, expires_at=expires_at)


def tick_status_expiry(state: SessionState, now: float) -> None:
    """Clear the status message once `now` has reached its expiry."""
    if state.status is not None and state.status.is_expired(now):
        state.status = None


def request_quit(state: SessionState) -> None:
    state.quit_requested = True


def reduce_state(state: SessionState, intent: Intent) -> None:
    """Apply intent to state (pure state mutation only)."""
    t = intent.type
    p = intent.payload

    if t is IntentType.ENTER_SEARCH:
        enter_search(state)
        return

    if t is IntentType.UPDATE_SEARCH_QUERY:
        update_search_query(state, p.get("text", ""))
        return

    if t is IntentType.CONFIRM_SEARCH:
        confirm_search(state)
        return

    if t is IntentType.CANCEL_SEARCH:
        cancel_search(state)
        return

    if t is IntentType.MOVE_CURSOR:
        delta = p.get("delta")
        if delta in (-1, 1):
            move_cursor(state, delta)
        else:
            logger.debug("MOVE_CURSOR ignored: unsupported delta %r", delta)
        return

    if t is IntentType.SET_STATUS:
        text = p.get("text")
        expires_at = p.get("expires_at")
        if isinstance(text, str) and isinstance(expires_at, (int, float)):
            set_status(state, text, float(expires_at))
        return

    if t is IntentType.TICK_STATUS:
        now = p.get("now")
        if isinstance(now, (int, float)):
            tick_status_expiry(state, float(now))
        return

    if t is IntentType.QUIT:
        request_quit(state)
        return
