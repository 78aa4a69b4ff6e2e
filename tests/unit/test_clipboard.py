"""Unit tests for the pyperclip clipboard sink."""

import pyperclip
import pytest

from envlens.clipboard import ClipboardError, PyperclipSink


@pytest.mark.unit
def test_copy_passes_text_to_pyperclip(monkeypatch: pytest.MonkeyPatch) -> None:
    """The sink forwards the entry text unchanged."""
    copied: list[str] = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    PyperclipSink().copy("HOME=/root")

    assert copied == ["HOME=/root"]


@pytest.mark.unit
def test_copy_failure_raises_clipboard_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """pyperclip failures surface as ClipboardError."""

    def _fail(_text: str) -> None:
        raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

    monkeypatch.setattr(pyperclip, "copy", _fail)

    with pytest.raises(ClipboardError, match="copy/paste mechanism"):
        PyperclipSink().copy("HOME=/root")
