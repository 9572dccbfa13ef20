"""Logger for the icon component generator.

Usage from any module::

    from .log import log

    log.info("Found %d icons", len(records))

Enable via environment variable::

    SVELTE_ICONS_LOG=DEBUG svelte-icons-generate   # all messages
    SVELTE_ICONS_LOG=1     svelte-icons-generate   # alias for DEBUG

The CLI calls :func:`configure_logging` to print progress on stdout.
"""

from __future__ import annotations

import logging
import os
import sys

log = logging.getLogger("svelte_icons")

_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[31m\033[1m",
}
_RESET = "\033[0m"

_ALIASES = {"1": "DEBUG", "0": "WARNING", "TRUE": "DEBUG", "FALSE": "WARNING"}


class ColoredFormatter(logging.Formatter):
    """Color the level name when the handler writes to a terminal."""

    def __init__(self, fmt: str, *, stream=None):
        super().__init__(fmt)
        self.stream = stream

    def format(self, record):
        isatty = getattr(self.stream, "isatty", None)
        if not (isatty and isatty()):
            return super().format(record)
        color = _COLORS.get(record.levelname, "")
        original = record.levelname
        record.levelname = f"{color}{original}{_RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def level_from_env(default: int = logging.INFO) -> int:
    raw = os.environ.get("SVELTE_ICONS_LOG", "").strip().upper()
    if not raw:
        return default
    level = getattr(logging, _ALIASES.get(raw, raw), None)
    return level if isinstance(level, int) else default


def configure_logging(level: int | str | None = None, *, stream=None) -> logging.Logger:
    if level is None:
        level = level_from_env()
    elif isinstance(level, str):
        level = getattr(logging, level.strip().upper(), logging.INFO)
    log.setLevel(level)
    if not log.handlers:
        out = stream or sys.stdout
        handler = logging.StreamHandler(out)
        handler.setFormatter(ColoredFormatter("[svelte-icons %(levelname)s] %(message)s", stream=out))
        log.addHandler(handler)
    return log


# Configure from SVELTE_ICONS_LOG when imported outside the CLI.
if os.environ.get("SVELTE_ICONS_LOG", "").strip():
    configure_logging()
