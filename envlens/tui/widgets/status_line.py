"""One-line status area for transient messages."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from envlens.tui.base import EnvlensMixin
from envlens.tui.state import StatusMessage

STATUS_STYLE = Style(color="yellow")


class StatusLine(EnvlensMixin, Widget):
    """Left side of the footer; shows the current status message, if any."""

    DEFAULT_CSS = """
    StatusLine {
        width: 1fr;
        height: 1;
    }
    """

    message = reactive("")

    def show_status(self, status: StatusMessage | None) -> None:
        self.message = status.text if status is not None else ""

    def render(self) -> Text:
        return Text(self.message, style=STATUS_STYLE, no_wrap=True, overflow="ellipsis")
