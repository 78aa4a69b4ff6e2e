"""Main envlens application.

Layout, top to bottom: the search bar (visible only while searching), the
entry list, and a footer holding the status line and key hints. Every key
event first samples status expiry, then flows into a `SessionController`
operation; widgets are re-synced from the resulting state.
"""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Input, Label, OptionList

from envlens.constants import APP_NAME
from envlens.tui.controller import SessionController
from envlens.tui.state import Mode
from envlens.tui.widgets import EntryList, HintsFooter, StatusLine

logger = logging.getLogger(__name__)

BROWSING_ACTIONS = frozenset({"enter_search", "copy_selection", "cursor_down", "cursor_up", "close"})
SEARCHING_ACTIONS = frozenset({"confirm_search", "cancel_search"})


class EnvlensApp(App[None]):
    """Interactive browser over a fixed set of `KEY=VALUE` entries."""

    TITLE = APP_NAME

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("y", "copy_selection", "Yank"),
        Binding("s", "enter_search", "Search"),
        Binding("q", "close", "Quit"),
        Binding("j,down", "cursor_down", "Down", key_display="↓", show=False),
        Binding("k,up", "cursor_up", "Up", key_display="↑", show=False),
        Binding("enter", "confirm_search", "Accept", key_display="↵"),
        Binding("escape", "cancel_search", "Cancel", key_display="Esc"),
    ]

    CSS = """
    #search-bar {
        height: 1;
        display: none;
    }
    #search-bar.-active {
        display: block;
    }
    #search-label {
        width: auto;
    }
    #search-input {
        height: 1;
        width: 1fr;
        border: none;
        padding: 0;
    }
    #footer {
        height: 1;
    }
    """

    def __init__(self, controller: SessionController, *, source_label: str = "", **kwargs: object) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self._source_label = source_label

    def compose(self) -> ComposeResult:
        with Horizontal(id="search-bar"):
            yield Label("Search: ", id="search-label")
            yield Input(id="search-input")
        yield EntryList(id="entries")
        with Horizontal(id="footer"):
            yield StatusLine(id="status")
            yield HintsFooter(id="hints")

    def on_mount(self) -> None:
        self.sub_title = self._source_label
        self._sync_view()

    async def on_event(self, event: events.Event) -> None:
        # Status expiry is sampled lazily, once per key press.
        if isinstance(event, events.Key):
            self.controller.tick()
            self._sync_status()
        await super().on_event(event)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        searching = self.controller.mode is Mode.SEARCHING
        if action in BROWSING_ACTIONS:
            return not searching
        if action in SEARCHING_ACTIONS:
            return searching
        return True

    # --- widget sync ---

    def _sync_list(self) -> None:
        state = self.controller.state
        self.query_one(EntryList).show_entries(state.filtered, state.cursor)

    def _sync_status(self) -> None:
        self.query_one(StatusLine).show_status(self.controller.state.status)

    def _sync_mode(self) -> None:
        searching = self.controller.mode is Mode.SEARCHING
        self.query_one("#search-bar").set_class(searching, "-active")
        if searching:
            self.query_one("#search-input", Input).focus()
        else:
            self.query_one(EntryList).focus()
        self.refresh_bindings()

    def _sync_view(self) -> None:
        self._sync_list()
        self._sync_status()
        self._sync_mode()

    # --- browsing actions ---

    def action_cursor_down(self) -> None:
        if self.controller.move_cursor(1):
            self._sync_list()

    def action_cursor_up(self) -> None:
        if self.controller.move_cursor(-1):
            self._sync_list()

    def action_copy_selection(self) -> None:
        self.controller.copy_selection()
        self._sync_status()

    def action_enter_search(self) -> None:
        if not self.controller.enter_search():
            return
        self.query_one("#search-input", Input).value = ""
        self._sync_view()

    # --- searching actions ---

    def on_input_changed(self, event: Input.Changed) -> None:
        if self.controller.update_search_query(event.value):
            self._sync_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_confirm_search()

    def action_confirm_search(self) -> None:
        if self.controller.confirm_search():
            self._sync_view()

    def action_cancel_search(self) -> None:
        if not self.controller.cancel_search():
            return
        self.query_one("#search-input", Input).value = ""
        self._sync_view()

    # --- any mode ---

    async def action_quit(self) -> None:
        self.controller.quit()
        self.exit()

    async def action_close(self) -> None:
        await self.action_quit()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        """Keep mouse-driven highlight changes from drifting off the session cursor."""
        cursor = self.controller.state.cursor
        if event.option_index != cursor and self.controller.state.filtered:
            event.option_list.highlighted = cursor
