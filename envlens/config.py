"""Runtime configuration for envlens.

envlens has no configuration file and reads no settings from the environment:
the process environment is the data being browsed. Defaults live in
`envlens.constants` and are bundled here so callers can inject overrides.
"""

from __future__ import annotations

from dataclasses import dataclass

from envlens.constants import DEFAULT_LOG_LEVEL, STATUS_COPIED, STATUS_COPY_FAILED, STATUS_DURATION_S


@dataclass(frozen=True)
class BrowserConfig:
    """Tunables for a browsing session."""

    status_duration_s: float = STATUS_DURATION_S
    copied_text: str = STATUS_COPIED
    copy_failed_text: str = STATUS_COPY_FAILED
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if self.status_duration_s < 0:
            raise ValueError(f"status_duration_s must be >= 0, got {self.status_duration_s}")


config = BrowserConfig()
