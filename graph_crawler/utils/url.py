"""
URL resolution, fragment stripping and URL-to-filename mapping.
"""

import hashlib
import urllib.parse

from graph_crawler.config import MAX_FILENAME_LENGTH, SUPPORTED_SCHEMES
from graph_crawler.errors import MalformedURLError


def strip_fragment(url: str) -> str:
    """Truncate *url* at its first ``#``; return it unchanged if there is none."""
    return url.split("#", 1)[0]


def resolve_url(raw: str, page_url: str) -> str:
    """
    Resolve *raw* (absolute or relative) against *page_url* and return the
    absolute URL, fragment included.

    Raises :class:`MalformedURLError` when the result has no supported
    scheme or no host, or when :mod:`urllib.parse` rejects it.
    """
    raw = raw.strip()
    try:
        joined = urllib.parse.urljoin(page_url, raw)
        parsed = urllib.parse.urlparse(joined)
        # .port validates the netloc (raises ValueError on garbage ports)
        parsed.port
    except ValueError as exc:
        raise MalformedURLError(raw, str(exc)) from exc

    if parsed.scheme.lower() not in SUPPORTED_SCHEMES:
        raise MalformedURLError(
            raw, f"unsupported scheme {parsed.scheme!r}" if parsed.scheme
            else "no scheme"
        )
    if not parsed.hostname:
        raise MalformedURLError(raw, "no host")
    return joined


def local_filename(url: str, max_length: int = MAX_FILENAME_LENGTH) -> str:
    """
    Map an absolute URL to a flat, filesystem-safe file name.

    The URL is percent-encoded with no safe characters, so ``/`` and
    ``:`` never survive.  Names longer than *max_length* are cut and
    suffixed with a short SHA-256 digest of the full URL so that
    distinct URLs sharing a long prefix still map to distinct names.
    """
    encoded = urllib.parse.quote(url, safe="")
    if len(encoded) <= max_length:
        return encoded
    digest = hashlib.sha256(url.encode("utf-8")).hexdigest()[:16]
    return f"{encoded[:max_length - len(digest) - 1]}_{digest}"
