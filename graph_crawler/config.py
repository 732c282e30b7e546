"""
Configuration constants for the graph crawler.
"""

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_OUTPUT = "images"
DEFAULT_MAX_DEPTH = 2
DEFAULT_GRAPH_FILE = "graph.json"

# ---------------------------------------------------------------------------
# HTTP tuning
# ---------------------------------------------------------------------------
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
RETRY_STATUS_CODES = (500, 502, 503, 504)
USER_AGENT = "GraphCrawler/1.0 (+https://pypi.org/project/graph-crawler/)"

# Chunk size for streaming response bodies (64 KiB)
STREAM_CHUNK_SIZE = 65536

# ---------------------------------------------------------------------------
# Parsing / storage
# ---------------------------------------------------------------------------
PAGE_ENCODING = "utf-8"

# Only these schemes produce crawlable absolute URLs.
SUPPORTED_SCHEMES = ("http", "https")

# Upper bound for generated image filenames (most filesystems allow 255).
MAX_FILENAME_LENGTH = 200
