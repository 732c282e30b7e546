"""
Bounded breadth-first web crawler that maps a site's link structure into
a graph of pages, saving every embedded image along the way.
"""

from graph_crawler.core import Crawler, Image, Page, graph_to_dict
from graph_crawler.errors import CrawlError, FetchError, MalformedURLError
from graph_crawler.session import Downloader, HttpDownloader

__version__ = "1.0.0"
__all__ = [
    "Crawler",
    "CrawlError",
    "Downloader",
    "FetchError",
    "HttpDownloader",
    "Image",
    "MalformedURLError",
    "Page",
    "graph_to_dict",
]
