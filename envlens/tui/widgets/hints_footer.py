"""Footer hints widget listing the bindings usable in the current mode."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.binding import Binding
from textual.events import MouseEvent
from textual.widget import Widget


class HintsFooter(Widget):
    """Render enabled, visible bindings on one row: `y Yank  s Search  q Quit`.

    Bindings disabled by `check_action` drop out, so the row follows the
    browsing/searching mode.
    """

    DEFAULT_CSS = """
    HintsFooter {
        width: auto;
        height: 1;
        padding: 0 1;
    }
    """

    def on_mount(self) -> None:
        self.screen.bindings_updated_signal.subscribe(self, self._on_bindings_changed)

    def on_unmount(self) -> None:
        self.screen.bindings_updated_signal.unsubscribe(self)

    def _on_bindings_changed(self, _screen: object) -> None:
        if self.app.app_focus:
            self.refresh(layout=True)

    def _format_item(self, binding: Binding, tooltip: str) -> Text:
        key = self.app.get_key_display(binding)
        label = tooltip or binding.description

        text = Text()
        text.append(str(key), style=Style(bold=True))
        if label:
            text.append(" ")
            text.append(label, style=Style(dim=True))
        return text

    def _collect(self) -> list[tuple[Binding, str]]:
        items: list[tuple[Binding, str]] = []
        seen_actions: set[str] = set()
        for _node, binding, enabled, tooltip in self.screen.active_bindings.values():
            if not binding.show or not enabled:
                continue
            if binding.action in seen_actions:
                continue
            seen_actions.add(binding.action)
            items.append((binding, tooltip))
        return items

    def render(self) -> Text:
        line = Text(no_wrap=True)
        for idx, (binding, tooltip) in enumerate(self._collect()):
            if idx:
                line.append("  ")
            line.append_text(self._format_item(binding, tooltip))
        return line

    def on_mouse_down(self, _event: MouseEvent) -> None:
        """Display only."""
        return
