"""Utility helpers for URL handling and logging."""

from graph_crawler.utils.url import local_filename, resolve_url, strip_fragment
from graph_crawler.utils.log import setup_logging, log

__all__ = [
    "local_filename",
    "resolve_url",
    "strip_fragment",
    "setup_logging",
    "log",
]
