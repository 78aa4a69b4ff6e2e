"""Constants used across envlens.

None of these are user-configurable; `envlens.config.BrowserConfig` carries the
values that tests and embedders may override.
"""

APP_NAME = "envlens"

# Status line
STATUS_DURATION_S = 2.0
STATUS_COPIED = "Copied to clipboard"
STATUS_COPY_FAILED = "Error copying to clipboard"

# Subtitle shown when entries come from the process environment
ENVIRONMENT_LABEL = "environment"

DEFAULT_LOG_LEVEL = "WARNING"

# Exit codes
EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_INTERRUPTED = 130
