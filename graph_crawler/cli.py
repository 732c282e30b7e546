"""
Command-line interface for the graph crawler.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from graph_crawler.config import (
    DEFAULT_GRAPH_FILE, DEFAULT_MAX_DEPTH, DEFAULT_OUTPUT, REQUEST_TIMEOUT,
)
from graph_crawler.core.crawler import Crawler
from graph_crawler.core.export import graph_to_dict
from graph_crawler.session import HttpDownloader
from graph_crawler.utils.log import setup_logging, log


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Crawl a website breadth-first up to a fixed link depth, "
                    "save every embedded image, and write the page graph as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m graph_crawler https://example.com\n"
            "  python -m graph_crawler https://example.com --depth 3\n"
            "  python -m graph_crawler https://example.com --output imgs --graph -\n"
        ),
    )
    parser.add_argument(
        "url",
        help="Start URL (e.g. https://example.com)",
    )
    parser.add_argument(
        "--depth", type=int, default=DEFAULT_MAX_DEPTH,
        help=f"Maximum number of links to follow from the start page "
             f"(default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--output", default=DEFAULT_OUTPUT,
        help=f"Directory for downloaded images (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--graph",
        help=f"Where to write the JSON graph, or '-' for stdout "
             f"(default: <output>/{DEFAULT_GRAPH_FILE})",
    )
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT,
        help=f"Request timeout in seconds (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--progress", action="store_true",
        help="Show a progress bar",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    args = parser.parse_args(argv)
    if args.depth < 0:
        parser.error("--depth must be >= 0")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.verify_ssl:
        import urllib3
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    start_url = args.url
    if "://" not in start_url:
        start_url = "https://" + start_url

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    downloader = HttpDownloader(timeout=args.timeout, verify_ssl=args.verify_ssl)
    crawler = Crawler(downloader, output_dir, progress=args.progress)

    t0 = time.monotonic()
    try:
        root = crawler.crawl(start_url, args.depth)
    finally:
        downloader.close()
    log.info("Total elapsed time: %.1f s", time.monotonic() - t0)

    if root is None:
        log.error("Nothing crawled: %s is not a valid start URL", args.url)
        return 1

    json_text = json.dumps(graph_to_dict(root), ensure_ascii=False, indent=2)
    if args.graph == "-":
        sys.stdout.write(json_text + "\n")
    else:
        graph_path = Path(args.graph) if args.graph else output_dir / DEFAULT_GRAPH_FILE
        graph_path.parent.mkdir(parents=True, exist_ok=True)
        graph_path.write_text(json_text, encoding="utf-8")
        log.info("Graph written to: %s", graph_path.resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
