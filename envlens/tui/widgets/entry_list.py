"""Scrollable single-column list of entries."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from envlens.tui.base import EnvlensMixin


class EntryList(EnvlensMixin, OptionList, inherit_bindings=False):
    """Entry list whose highlight mirrors the session cursor.

    Navigation bindings are dropped so the session state stays the only owner
    of the cursor; the app moves the highlight after each transition.
    """

    DEFAULT_CSS = """
    EntryList {
        height: 1fr;
        border: none;
        padding: 0;
    }
    """

    def __init__(self, **kwargs: object) -> None:
        super().__init__(**kwargs)
        self._shown: tuple[str, ...] | None = None

    def show_entries(self, entries: tuple[str, ...], cursor: int) -> None:
        """Display entries with the cursor row highlighted.

        Options are rebuilt only when a different view is passed in.
        """
        if entries is not self._shown:
            self.clear_options()
            self.add_options([Option(Text(entry, no_wrap=True, overflow="ellipsis")) for entry in entries])
            self._shown = entries
        self.highlighted = cursor if entries else None
