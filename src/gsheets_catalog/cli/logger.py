"""Logging helpers for the gsheets-catalog CLI."""

from __future__ import annotations

import logging
import os
import sys

import colorlog

LOG_COLORS = {
    "DEBUG": "bold_cyan",
    "INFO": "bold_green",
    "WARNING": "bold_yellow",
    "ERROR": "bold_red",
    "CRITICAL": "bold_red,bg_white",
}

_DATEFMT = "%Y-%m-%d %H:%M:%S"

# The Google client libraries log each request; keep them quiet unless verbose.
_NOISY_LOGGERS = ("googleapiclient", "google.auth", "urllib3")


def _use_color() -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    return sys.stderr.isatty()


def _message_format(verbose: bool) -> str:
    # Loads run on the caller's thread, so the thread name tells concurrent reads apart.
    thread = " [%(threadName)s]" if verbose else ""
    return f"[%(asctime)s] <%(name)s>{thread} %(levelname)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Configure the root logger for the CLI, using colors on a TTY."""
    level = logging.DEBUG if verbose else logging.INFO
    fmt = _message_format(verbose)
    if _use_color():
        handler = logging.StreamHandler()
        handler.setFormatter(
            colorlog.ColoredFormatter(
                fmt="%(log_color)s" + fmt.replace(" %(levelname)s:", " %(levelname)s:%(reset)s"),
                log_colors=LOG_COLORS,
                datefmt=_DATEFMT,
            )
        )
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(level=level, format=fmt, datefmt=_DATEFMT, force=True)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
