"""Text extraction from raw HTML pages."""

from graph_crawler.extraction.html_parser import (
    ParsedPage,
    decode_entities,
    extract_attribute,
    extract_image_sources,
    extract_link_targets,
    extract_tag,
    extract_title,
    parse_page,
    remove_comments,
)

__all__ = [
    "ParsedPage",
    "decode_entities",
    "extract_attribute",
    "extract_image_sources",
    "extract_link_targets",
    "extract_tag",
    "extract_title",
    "parse_page",
    "remove_comments",
]
