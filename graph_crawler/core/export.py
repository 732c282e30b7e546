"""
Flatten a crawl graph into JSON-serialisable data.
"""

from collections import deque
from typing import Any, Iterator

from graph_crawler.core.models import Page


def iter_pages(root: Page) -> Iterator[Page]:
    """Yield every page reachable from *root* once, in breadth-first order."""
    seen = {id(root)}
    queue = deque([root])
    while queue:
        page = queue.popleft()
        yield page
        for child in page.links:
            if id(child) not in seen:
                seen.add(id(child))
                queue.append(child)


def graph_to_dict(root: Page) -> dict[str, Any]:
    """Return ``{"root": url, "pages": [...]}`` with links given as URLs."""
    return {
        "root": root.url,
        "pages": [
            {
                "url": page.url,
                "title": page.title,
                "images": [
                    {"url": img.url, "filename": img.filename}
                    for img in page.images
                ],
                "links": [child.url for child in page.links],
            }
            for page in iter_pages(root)
        ],
    }
