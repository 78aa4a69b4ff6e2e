"""envlens command-line interface.

Usage: envlens [FILE]

Without FILE the process environment is browsed; with FILE, the entries of
that dotenv-style file. A file that cannot be read or parsed aborts startup.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from envlens import __version__
from envlens.clipboard import ClipboardSink, PyperclipSink
from envlens.config import BrowserConfig
from envlens.config import config as default_config
from envlens.constants import APP_NAME, EXIT_INTERRUPTED, EXIT_LOAD_FAILED, EXIT_OK
from envlens.logging_config import setup_logging
from envlens.sources import StartupLoadError, source_for_path
from envlens.tui.app import EnvlensApp
from envlens.tui.controller import SessionController

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Browse environment variables or a dotenv file; search with s, copy with y.",
        epilog=f"{APP_NAME} {__version__}",
    )
    parser.add_argument("file", nargs="?", help="dotenv-style file to browse instead of the process environment")
    return parser


def build_app(
    file: str | None,
    *,
    clipboard: ClipboardSink | None = None,
    config: BrowserConfig | None = None,
) -> EnvlensApp:
    """Load entries and assemble the app; raises StartupLoadError on a bad file."""
    source = source_for_path(file)
    entries = source.load()
    controller = SessionController(entries, clipboard or PyperclipSink(), config=config)
    return EnvlensApp(controller, source_label=source.label)


def run(argv: Sequence[str] | None = None, *, config: BrowserConfig | None = None) -> int:
    """Parse arguments, load entries and run the browser. Returns the exit code."""
    args = build_parser().parse_args(argv)
    cfg = config or default_config
    setup_logging(cfg.log_level)

    try:
        app = build_app(args.file, config=cfg)
    except StartupLoadError as e:
        logger.info("Startup load failed: %s", e)
        sys.stderr.write(f"{APP_NAME}: error: {e}\n")
        return EXIT_LOAD_FAILED

    app.run()
    return EXIT_OK


def main() -> None:
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
