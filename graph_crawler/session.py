"""
Downloaders: the byte-stream source the crawler fetches pages and
images through.

``HttpDownloader`` wraps a ``requests.Session`` with:
* Automatic retry logic on 5xx errors
* A fixed User-Agent and keep-alive
* Streamed bodies, so large images are never buffered whole
"""

import abc
from typing import Iterator

import requests
import urllib3
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from graph_crawler.config import (
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RETRY_STATUS_CODES,
    STREAM_CHUNK_SIZE,
    USER_AGENT,
)
from graph_crawler.errors import FetchError

# urllib3 raises LocationParseError (a ValueError) for unparseable hosts
# without requests wrapping it.
_FETCH_ERRORS = (requests.RequestException, urllib3.exceptions.HTTPError, ValueError)


def build_session(verify_ssl: bool = True, user_agent: str = USER_AGENT) -> requests.Session:
    """Return a ``requests.Session`` with retry logic and keep-alive."""
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=list(RETRY_STATUS_CODES),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": user_agent,
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "image/avif,image/webp,image/apng,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
    })
    return session


class Downloader(abc.ABC):
    """Source of raw bytes for a URL."""

    @abc.abstractmethod
    def download(self, url: str) -> Iterator[bytes]:
        """Return the body of *url* as an iterator of byte chunks.

        Any failure – before or during iteration – is raised as
        :class:`~graph_crawler.errors.FetchError`.  Streams that hold a
        connection should expose ``close()``; the crawler calls it once it
        is done with the stream, whether or not it was read to the end.
        """


class HttpDownloader(Downloader):
    """Fetches ``http``/``https`` URLs through a shared ``requests`` session."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
        verify_ssl: bool = True,
        user_agent: str = USER_AGENT,
        chunk_size: int = STREAM_CHUNK_SIZE,
    ) -> None:
        self.session = session or build_session(verify_ssl=verify_ssl, user_agent=user_agent)
        self.timeout = timeout
        self.chunk_size = chunk_size

    def download(self, url: str) -> Iterator[bytes]:
        try:
            resp = self.session.get(
                url, timeout=self.timeout, allow_redirects=True, stream=True
            )
        except _FETCH_ERRORS as exc:
            raise FetchError(url, str(exc)) from exc
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            resp.close()
            raise FetchError(url, str(exc)) from exc
        return _BodyStream(url, resp, self.chunk_size)

    def close(self) -> None:
        self.session.close()


class _BodyStream:
    """Iterator over a streamed response body.

    The response is closed when the body is exhausted, when reading it
    fails, or when :meth:`close` is called, including before the first
    chunk has been read.
    """

    def __init__(self, url: str, resp: requests.Response, chunk_size: int) -> None:
        self._url = url
        self._resp = resp
        self._chunk_size = chunk_size
        self._chunks: Iterator[bytes] | None = None

    def __iter__(self) -> "_BodyStream":
        return self

    def __next__(self) -> bytes:
        try:
            if self._chunks is None:
                self._chunks = iter(self._resp.iter_content(chunk_size=self._chunk_size))
            return next(self._chunks)
        except StopIteration:
            self.close()
            raise
        except _FETCH_ERRORS as exc:
            self.close()
            raise FetchError(self._url, str(exc)) from exc

    def close(self) -> None:
        self._resp.close()
