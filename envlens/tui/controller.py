"""Session controller: mode rules and side effects around the reducer."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from envlens.clipboard import ClipboardError, ClipboardSink
from envlens.config import BrowserConfig
from envlens.config import config as default_config
from envlens.tui.state import Intent, IntentType, Mode, SessionState, reduce_state

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

# Intents only accepted in one mode; anything not listed is valid in both.
MODE_INTENTS: dict[IntentType, Mode] = {
    IntentType.ENTER_SEARCH: Mode.BROWSING,
    IntentType.MOVE_CURSOR: Mode.BROWSING,
    IntentType.UPDATE_SEARCH_QUERY: Mode.SEARCHING,
    IntentType.CONFIRM_SEARCH: Mode.SEARCHING,
    IntentType.CANCEL_SEARCH: Mode.SEARCHING,
}


class SessionController:
    """Central controller for a browsing session.

    Holds the single `SessionState`, rejects operations that are not valid in
    the current mode, and turns clipboard outcomes into status messages.
    Nothing here raises once the session is constructed.
    """

    def __init__(
        self,
        entries: Sequence[str],
        clipboard: ClipboardSink,
        *,
        config: BrowserConfig | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.state = SessionState.from_entries(entries)
        self.clipboard = clipboard
        self.config = config or default_config
        self._clock = clock

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def allows(self, intent_type: IntentType) -> bool:
        """Whether the intent is valid in the current mode."""
        required = MODE_INTENTS.get(intent_type)
        return required is None or required is self.state.mode

    def dispatch(self, intent: Intent) -> bool:
        """Apply intent if the current mode allows it. Returns True when applied."""
        if not self.allows(intent.type):
            logger.debug("%s ignored in %s mode", intent.type.value, self.state.mode.value)
            return False
        before = self.state.mode
        reduce_state(self.state, intent)
        if self.state.mode is not before:
            logger.debug("mode %s -> %s", before.value, self.state.mode.value)
        return True

    def enter_search(self) -> bool:
        return self.dispatch(Intent(IntentType.ENTER_SEARCH))

    def update_search_query(self, text: str) -> bool:
        return self.dispatch(Intent(IntentType.UPDATE_SEARCH_QUERY, {"text": text}))

    def confirm_search(self) -> bool:
        return self.dispatch(Intent(IntentType.CONFIRM_SEARCH))

    def cancel_search(self) -> bool:
        return self.dispatch(Intent(IntentType.CANCEL_SEARCH))

    def move_cursor(self, delta: int) -> bool:
        return self.dispatch(Intent(IntentType.MOVE_CURSOR, {"delta": delta}))

    def quit(self) -> bool:
        return self.dispatch(Intent(IntentType.QUIT))

    def tick(self, now: float | None = None) -> None:
        """Sample status expiry; called once per input event."""
        stamp = self._clock() if now is None else now
        self.dispatch(Intent(IntentType.TICK_STATUS, {"now": stamp}))

    def copy_selection(self) -> bool:
        """Copy the entry under the cursor and report the outcome in the status line.

        Returns True only when the clipboard accepted the text. Outside browsing
        mode, or with nothing selected, this is a no-op returning False.
        """
        if self.state.mode is not Mode.BROWSING:
            logger.debug("copy ignored in %s mode", self.state.mode.value)
            return False
        entry = self.state.selected
        if entry is None:
            return False

        try:
            self.clipboard.copy(entry)
        except ClipboardError as e:
            logger.warning("Clipboard write failed: %s", e)
            text, copied = self.config.copy_failed_text, False
        else:
            text, copied = self.config.copied_text, True

        expires_at = self._clock() + self.config.status_duration_s
        self.dispatch(Intent(IntentType.SET_STATUS, {"text": text, "expires_at": expires_at}))
        return copied
