"""Entry sources: the process environment or a dotenv-style file.

Each source produces the ordered `KEY=VALUE` display strings a browsing
session starts from. Loading happens once at startup; a failure here is fatal
for the program and is reported as `StartupLoadError`.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from envlens.constants import ENVIRONMENT_LABEL

logger = logging.getLogger(__name__)


class StartupLoadError(Exception):
    """Entries could not be loaded; the browser cannot start."""


class EnvironmentSource(Protocol):
    """Supplies the initial ordered entries."""

    @property
    def label(self) -> str: ...

    def load(self) -> list[str]: ...


def format_entry(key: str, value: str | None) -> str:
    """Render a key/value pair as a display entry."""
    return f"{key}={value if value is not None else ''}"


class ProcessEnvironmentSource:
    """All variables of the process environment, in mapping order."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    @property
    def label(self) -> str:
        return ENVIRONMENT_LABEL

    def load(self) -> list[str]:
        entries = [format_entry(key, value) for key, value in self._environ.items()]
        logger.info("Loaded %d entries from the process environment", len(entries))
        return entries


class DotenvFileSource:
    """Key/value pairs parsed from a dotenv-style file, in file order.

    Interpolation of `${VAR}` references follows python-dotenv. A key declared
    without `=` is shown with an empty value. For a repeated key, the first
    position and the last value win.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    @property
    def label(self) -> str:
        return str(self.path)

    def _read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StartupLoadError(f"cannot read {self.path}: {e}") from e

    def _check_syntax(self, text: str) -> None:
        for binding in parse_stream(io.StringIO(text)):
            if binding.error:
                raise StartupLoadError(f"cannot parse {self.path} at line {binding.original.line}")

    def load(self) -> list[str]:
        text = self._read_text()
        self._check_syntax(text)
        values = dotenv_values(stream=io.StringIO(text))
        entries = [format_entry(key, value) for key, value in values.items()]
        logger.info("Loaded %d entries from %s", len(entries), self.path)
        return entries


def source_for_path(path: str | os.PathLike[str] | None) -> EnvironmentSource:
    """Pick the file source when a path is given, else the process environment."""
    if path is None:
        return ProcessEnvironmentSource()
    return DotenvFileSource(path)
