"""
Regex-based HTML extraction: comments, opening tags, attributes, the
page title, and a fixed set of HTML entities.

Every function here is pure and total – unmatched input produces an
empty result or ``None``, never an exception.
"""

import re
from dataclasses import dataclass, field

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)

# Decoding order matters: ``&amp;`` goes after ``&lt;``/``&gt;`` so that
# ``&amp;lt;`` becomes ``&lt;`` rather than ``<``.
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&mdash;", "\u2014"),
    ("&nbsp;", "\u00a0"),
)

_TITLE_OPEN = "<title>"
_TITLE_CLOSE = "</title>"


@dataclass
class ParsedPage:
    """Everything the crawler needs from one page's text."""

    title: str = ""
    image_sources: list[str] = field(default_factory=list)
    link_targets: list[str] = field(default_factory=list)


def remove_comments(text: str) -> str:
    """Strip every ``<!-- ... -->`` span (non-greedy, may span lines)."""
    return _COMMENT_RE.sub("", text)


def extract_tag(text: str, tag_name: str) -> list[str]:
    """
    Return every opening tag ``<tag_name ...>`` in *text*, in document order.

    Matching is case-sensitive and stops at the first ``>``.  The tag
    name must be followed by whitespace, ``/`` or ``>`` so that ``a``
    does not match ``<abbr>``.
    """
    pattern = re.compile("<" + re.escape(tag_name) + r"(?=[\s/>])[^>]*>")
    return pattern.findall(text)


def extract_attribute(tag_text: str, attr_name: str) -> str | None:
    """Return the double-quoted value of *attr_name* in *tag_text*, or ``None``."""
    pattern = re.compile(
        r"(?<![\w-])" + re.escape(attr_name) + r'\s*=\s*"([^"]*)"'
    )
    m = pattern.search(tag_text)
    return m.group(1) if m else None


def extract_title(text: str) -> str:
    """Return the raw text between the first ``<title>`` and the next
    ``</title>``, or ``""`` when there is no complete title element."""
    start = text.find(_TITLE_OPEN)
    if start < 0:
        return ""
    start += len(_TITLE_OPEN)
    end = text.find(_TITLE_CLOSE, start)
    if end < 0:
        return ""
    return text[start:end]


def decode_entities(text: str) -> str:
    """Replace ``&lt; &gt; &amp; &mdash; &nbsp;`` with literal characters."""
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def _attribute_values(text: str, tag_name: str, attr_name: str) -> list[str]:
    values = []
    for tag in extract_tag(text, tag_name):
        value = extract_attribute(tag, attr_name)
        if value is not None:
            values.append(value)
    return values


def extract_image_sources(text: str) -> list[str]:
    """``src`` of every ``<img>`` tag; tags without one are skipped."""
    return _attribute_values(text, "img", "src")


def extract_link_targets(text: str) -> list[str]:
    """``href`` of every ``<a>`` tag; tags without one are skipped."""
    return _attribute_values(text, "a", "href")


def parse_page(text: str) -> ParsedPage:
    """Strip comments from *text* and pull out title, images and links."""
    text = remove_comments(text)
    return ParsedPage(
        title=decode_entities(extract_title(text)),
        image_sources=extract_image_sources(text),
        link_targets=extract_link_targets(text),
    )
