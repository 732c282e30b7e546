"""
Crawl graph nodes and work items.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Image:
    """An image persisted to local storage; one instance per image URL per crawl."""

    url: str
    filename: str


@dataclass(frozen=True)
class Task:
    """Pending crawl work: visit *url* with *depth* link hops remaining."""

    url: str
    depth: int


class Page:
    """
    A node of the crawl graph, identified by its absolute URL.

    ``url`` and ``title`` are fixed at construction.  Images are added
    while the page is parsed and links once the whole crawl has finished;
    both behave as ordered sets keyed by object identity, so re-adding
    an image or page that is already present is a no-op.

    Links may form cycles, so ``repr()`` only lists link URLs.
    """

    __slots__ = ("_url", "_title", "_images", "_links")

    def __init__(self, url: str, title: str = "") -> None:
        self._url = url
        self._title = title
        self._images: list[Image] = []
        self._links: list[Page] = []

    @property
    def url(self) -> str:
        return self._url

    @property
    def title(self) -> str:
        return self._title

    @property
    def images(self) -> tuple[Image, ...]:
        return tuple(self._images)

    @property
    def links(self) -> tuple[Page, ...]:
        return tuple(self._links)

    def add_image(self, image: Image) -> None:
        if not any(existing is image for existing in self._images):
            self._images.append(image)

    def add_link(self, page: Page) -> None:
        if not any(existing is page for existing in self._links):
            self._links.append(page)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self._url == other._url

    def __hash__(self) -> int:
        return hash(self._url)

    def __repr__(self) -> str:
        return (
            f"Page(url={self._url!r}, title={self._title!r}, "
            f"images={[img.url for img in self._images]!r}, "
            f"links={[page.url for page in self._links]!r})"
        )
