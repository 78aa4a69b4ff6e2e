"""Widgets for the envlens browser."""

from envlens.tui.widgets.entry_list import EntryList
from envlens.tui.widgets.hints_footer import HintsFooter
from envlens.tui.widgets.status_line import StatusLine

__all__ = ["EntryList", "HintsFooter", "StatusLine"]
