"""System clipboard access."""

from __future__ import annotations

import logging
from typing import Protocol

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """Writing to the clipboard failed."""


class ClipboardSink(Protocol):
    """Accepts text for the system clipboard; raises ClipboardError on failure."""

    def copy(self, text: str) -> None: ...


class PyperclipSink:
    """Clipboard sink backed by pyperclip's platform mechanisms."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(str(e)) from e
        logger.debug("Copied %d characters to clipboard", len(text))
