"""
Breadth-first crawler that builds a graph of pages and their images.

Crawls outward from a start URL up to a fixed link depth.  Each page is
fetched at most once; its title and ``<img>`` sources are extracted, new
images are saved under the output directory, and its ``<a>`` targets
are queued one level deeper.

Graph edges are not attached while crawling.  Child URLs are collected
per page, and only once the queue has drained is every page's link list
filled in, walking the visit history backwards.  By then every linked
URL already has its ``Page``, so cycles and back-links need no
recursion.

Because the queue is strictly FIFO across the whole run, the first time
a URL is dequeued is always along a shortest path from the start URL,
so the depth it is processed with is the largest one it could get.

Pages are keyed by their URL string as resolved, minus the fragment;
no further normalisation is applied, so ``http://example.com`` and
``http://example.com/`` are distinct pages.
"""

import codecs
import logging
import types
from collections import deque
from pathlib import Path
from typing import Iterator

from tqdm import tqdm

from graph_crawler.config import PAGE_ENCODING
from graph_crawler.core.models import Image, Page, Task
from graph_crawler.core.storage import discard_partial, stream_to_file
from graph_crawler.errors import FetchError, MalformedURLError
from graph_crawler.extraction.html_parser import parse_page
from graph_crawler.session import Downloader
from graph_crawler.utils.url import local_filename, resolve_url, strip_fragment

log = logging.getLogger("graph-crawler")


class Crawler:
    """
    Sequential BFS crawler producing a linked :class:`Page` graph.

    A ``Crawler`` may run several crawls; all traversal state is reset
    at the start of :meth:`crawl`.
    """

    def __init__(
        self,
        downloader: Downloader,
        output_dir: Path,
        encoding: str = PAGE_ENCODING,
        progress: bool = False,
    ) -> None:
        self.downloader = downloader
        self.output_dir = Path(output_dir)
        self.encoding = encoding
        self.progress = progress
        self._reset()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def pages(self) -> types.MappingProxyType:
        """Read-only view of the last crawl's visited URLs → pages."""
        return types.MappingProxyType(self._visited)

    @property
    def images(self) -> types.MappingProxyType:
        """Read-only view of the last crawl's image URLs → images."""
        return types.MappingProxyType(self._images)

    def crawl(self, start_url: str, max_depth: int) -> Page | None:
        """
        Crawl from *start_url*, following links at most *max_depth* hops.

        Returns the start page, or ``None`` when *start_url* itself is
        not a valid URL.  Every other failure is confined to the page
        or image it affects.
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self._reset()

        try:
            start_url = strip_fragment(resolve_url(start_url, start_url))
        except MalformedURLError as exc:
            log.error("[URL] %s", exc)
            self._stats["malformed"] += 1
            return None

        log.info("Start URL        : %s", start_url)
        log.info("Max depth        : %d", max_depth)
        log.info("Image directory  : %s", self.output_dir.resolve())

        self._queue.append(Task(start_url, max_depth))
        if self.progress:
            self._run_with_progress()
        else:
            while self._queue:
                self._process(self._queue.popleft())

        self._link_pages()

        log.info(
            "Crawl complete. pages=%d  processed=%d  depth_exhausted=%d  "
            "failed=%d  dup=%d  malformed=%d  images=%d  shared=%d  img_err=%d",
            len(self._visited),
            self._stats["processed"],
            self._stats["exhausted"],
            self._stats["failed"],
            self._stats["dup"],
            self._stats["malformed"],
            self._stats["images"],
            self._stats["shared"],
            self._stats["img_err"],
        )
        return self._visited.get(start_url)

    @property
    def stats(self) -> dict[str, int]:
        return dict(self._stats)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._queue: deque[Task] = deque()
        self._visited: dict[str, Page] = {}
        self._images: dict[str, Image] = {}
        self._failed_images: set[str] = set()
        self._children: dict[str, list[str]] = {}
        self._history: list[str] = []
        self._stats = {"processed": 0, "exhausted": 0, "failed": 0, "dup": 0,
                       "malformed": 0, "images": 0, "shared": 0, "img_err": 0}

    def _run_with_progress(self) -> None:
        """BFS loop with a tqdm progress bar."""
        bar = tqdm(desc="Crawling", unit="page", total=len(self._queue),
                   dynamic_ncols=True)
        while self._queue:
            prev_q = len(self._queue)
            self._process(self._queue.popleft())
            new_items = len(self._queue) - prev_q + 1
            if new_items > 0:
                bar.total += new_items
            bar.update(1)
            bar.set_postfix(queued=len(self._queue), pages=len(self._visited))
        bar.close()

    def _process(self, task: Task) -> None:
        url = task.url
        if url in self._visited:
            log.debug("[DUP] %s already visited", url)
            self._stats["dup"] += 1
            return
        self._history.append(url)

        if task.depth == 0:
            log.debug("[DEPTH] %s recorded without fetching", url)
            self._visited[url] = Page(url)
            self._stats["exhausted"] += 1
            return

        log.info("[PAGE] [%d queued] GET %s (depth %d)", len(self._queue), url, task.depth)
        text = self._read_page(url)
        if text is None:
            self._visited[url] = Page(url)
            self._stats["failed"] += 1
            return

        parsed = parse_page(text)
        page = Page(url, parsed.title)

        for src in parsed.image_sources:
            image = self._image_for(src, url)
            if image is not None:
                page.add_image(image)

        children = self._children.setdefault(url, [])
        for href in parsed.link_targets:
            try:
                child = strip_fragment(resolve_url(href, url))
            except MalformedURLError as exc:
                log.warning("[URL] %s on %s", exc, url)
                self._stats["malformed"] += 1
                continue
            log.debug("[LINK] %s → %s", url, child)
            children.append(child)
            self._queue.append(Task(child, task.depth - 1))

        self._visited[url] = page
        self._stats["processed"] += 1

    def _read_page(self, url: str) -> str | None:
        """Download *url* and decode it, or return ``None`` on failure."""
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            log.warning("[ERR] Encoding %s is not supported; skipping %s",
                        self.encoding, url)
            return None
        try:
            chunks = self.downloader.download(url)
            try:
                content = b"".join(chunks)
            finally:
                _close_stream(chunks)
        except FetchError as exc:
            log.warning("[ERR] Page read failed: %s", exc)
            return None
        return content.decode(self.encoding, errors="replace")

    def _image_for(self, src: str, page_url: str) -> Image | None:
        """Return the shared :class:`Image` for *src*, downloading it once."""
        try:
            img_url = resolve_url(src, page_url)
        except MalformedURLError as exc:
            log.warning("[URL] %s on %s", exc, page_url)
            self._stats["malformed"] += 1
            return None

        image = self._images.get(img_url)
        if image is not None:
            log.debug("[IMG] Reusing %s", img_url)
            self._stats["shared"] += 1
            return image
        if img_url in self._failed_images:
            return None

        filename = local_filename(img_url)
        local = self.output_dir / filename
        try:
            chunks = self.downloader.download(img_url)
            try:
                size = stream_to_file(local, chunks)
            finally:
                _close_stream(chunks)
        except FetchError as exc:
            log.warning("[ERR] Could not download image: %s", exc)
        except OSError as exc:
            log.warning("[ERR] Could not create %s: %s", local, exc)
        else:
            image = Image(img_url, filename)
            self._images[img_url] = image
            self._stats["images"] += 1
            log.info("[IMG] Saved %s (%d bytes)", filename, size)
            return image

        discard_partial(local)
        self._failed_images.add(img_url)
        self._stats["img_err"] += 1
        return None

    # ------------------------------------------------------------------
    # Graph assembly
    # ------------------------------------------------------------------

    def _link_pages(self) -> None:
        """Attach child pages to their parents, newest visit first."""
        for url in reversed(self._history):
            child_urls = self._children.get(url)
            if not child_urls:
                continue
            page = self._visited[url]
            for child_url in child_urls:
                child = self._visited.get(child_url)
                if child is None:
                    log.warning("[EDGE] No page recorded for %s (linked from %s)",
                                child_url, url)
                    continue
                page.add_link(child)


def _close_stream(chunks: Iterator[bytes]) -> None:
    """Release a download stream that may not have been fully consumed."""
    close = getattr(chunks, "close", None)
    if close is not None:
        close()
