"""
Logging configuration for the crawler.

Provides:
* ``colorlog`` level colours plus ANSI highlights for ``[CATEGORY]`` tags
* GitHub Actions CI support (``::warning::`` / ``::error::`` annotations)
* An optional DEBUG-level log file
"""

import logging
import os
from pathlib import Path

import colorlog

log = logging.getLogger("graph-crawler")

_FILE_LOG_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# True when running inside GitHub Actions
_CI: bool = os.environ.get("GITHUB_ACTIONS") == "true"

# ── Category colours ───────────────────────────────────────────────
_ANSI_RESET = "\033[0m"
_CATEGORY_STYLES: dict[str, str] = {
    "[PAGE]":  "\033[1;32m",
    "[IMG]":   "\033[1;35m",
    "[LINK]":  "\033[37m",
    "[DEPTH]": "\033[90m",
    "[DUP]":   "\033[90m",
    "[EDGE]":  "\033[34m",
    "[URL]":   "\033[33m",
    "[ERR]":   "\033[1;31m",
}


def _apply_category_styles(msg: str) -> str:
    """Inject ANSI colours for known ``[CATEGORY]`` tags in *msg*."""
    for tag, style in _CATEGORY_STYLES.items():
        if tag in msg:
            msg = msg.replace(tag, f"{style}{tag}{_ANSI_RESET}")
    return msg


# ── Formatters ─────────────────────────────────────────────────────

_CONSOLE_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_CONSOLE_DATEFMT = "%H:%M:%S"
_LEVEL_COLOURS = {
    "DEBUG":   "cyan",
    "INFO":    "green",
    "WARNING": "yellow",
    "ERROR":   "red",
}


class _ColorlogCategoryFormatter(colorlog.ColoredFormatter):
    """Level colours from ``colorlog``, plus inline ``[CATEGORY]`` highlights."""

    def format(self, record: logging.LogRecord) -> str:
        return _apply_category_styles(super().format(record))


class _CIFormatter(logging.Formatter):
    """Prefix warnings and errors with GitHub Actions workflow commands
    so they show up as annotations on the run."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = _apply_category_styles(super().format(record))
        if record.levelno >= logging.ERROR:
            return "::error::" + formatted
        if record.levelno == logging.WARNING:
            return "::warning::" + formatted
        return formatted


def _console_handler() -> logging.Handler:
    if _CI:
        handler = logging.StreamHandler()
        handler.setFormatter(_CIFormatter(_CONSOLE_FMT, datefmt=_CONSOLE_DATEFMT))
        return handler
    handler = colorlog.StreamHandler()
    handler.setFormatter(_ColorlogCategoryFormatter(
        "%(log_color)s" + _CONSOLE_FMT.replace("%(message)s", "%(reset)s%(message)s"),
        datefmt=_CONSOLE_DATEFMT,
        log_colors=_LEVEL_COLOURS,
    ))
    return handler


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Attach a console handler (INFO, or DEBUG with *debug*) and, when
    *log_file* is given, a file handler that always records DEBUG."""
    log.handlers.clear()

    console = _console_handler()
    console.setLevel(logging.DEBUG if debug else logging.INFO)
    log.addHandler(console)
    log.setLevel(logging.DEBUG if debug or log_file else logging.INFO)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_LOG_FMT, datefmt=_FILE_LOG_DATEFMT))
        log.addHandler(fh)
        log.info("Logging to file: %s", log_path.resolve())
