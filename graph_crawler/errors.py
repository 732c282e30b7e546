"""
Exception types raised by the crawler's collaborators.

None of these abort a crawl: the crawler catches them per task and
degrades the affected page or image.
"""


class CrawlError(Exception):
    """Base class for crawler errors."""


class MalformedURLError(CrawlError, ValueError):
    """A URL string cannot be parsed or resolved to a crawlable absolute URL."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        msg = f"{url!r} is not a valid URL"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class FetchError(CrawlError):
    """The downloader could not produce the bytes for *url*."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not download {url}: {reason}" if reason
                         else f"Could not download {url}")
