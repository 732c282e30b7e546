"""Core crawler logic – BFS traversal, graph model, export and file storage."""

from graph_crawler.core.crawler import Crawler
from graph_crawler.core.export import graph_to_dict, iter_pages
from graph_crawler.core.models import Image, Page, Task
from graph_crawler.core.storage import discard_partial, stream_to_file

__all__ = [
    "Crawler",
    "Image",
    "Page",
    "Task",
    "discard_partial",
    "graph_to_dict",
    "iter_pages",
    "stream_to_file",
]
