"""
Main entry point for the graph_crawler package.

Allows running the crawler as: python -m graph_crawler
"""

from graph_crawler.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
