# -*- coding: utf-8 -*-
"""
Step 1: Tree sanitization.

Strips presentational attributes and comments, turns "H1:".."H4:" paragraphs
into headings and converts styled <span> wrappers into <strong>/<em> or
unwraps them.
"""
import logging
import re

from bs4 import BeautifulSoup, Comment, Tag

from .dom import PARAGRAPH_TAGS, post_order, remove, replace, unwrap

logger = logging.getLogger(__name__)

# Attributes removed from every element
STRIPPED_ATTRIBUTES = ("class", "style", "dir", "aria-level")

# Heading markers, checked in this order
HEADING_MARKERS = (
    ("H1:", "h1"),
    ("H2:", "h2"),
    ("H3:", "h3"),
    ("H4:", "h4"),
)

BOLD_STYLE = re.compile(r"font-weight:\s*(bold|700|800|900)", re.IGNORECASE)
ITALIC_STYLE = re.compile(r"font-style:\s*italic", re.IGNORECASE)


def sanitize_tree(soup: BeautifulSoup, root: Tag) -> int:
    """
    Run the sanitizer over every element below root, children first.

    Returns:
        Number of heading markers converted
    """
    comments = root.find_all(string=lambda text: isinstance(text, Comment))
    for comment in comments:
        remove(comment)

    converted = 0
    for tag in post_order(root):
        style = _strip_attributes(tag)
        if _convert_heading_marker(soup, tag):
            converted += 1
            continue
        if tag.name == "span":
            _convert_span(soup, tag, style)

    logger.debug(
        "Sanitizing done",
        extra={"stage": "sanitize", "comments": len(comments), "headings": converted},
    )
    return converted


def _strip_attributes(tag: Tag) -> str:
    """
    Remove presentational and empty attributes from tag.

    Returns the original style value so span conversion can still inspect it.
    """
    style = tag.attrs.get("style") or ""

    for name in STRIPPED_ATTRIBUTES:
        tag.attrs.pop(name, None)

    if tag.attrs.get("role") == "presentation":
        del tag.attrs["role"]

    for name, value in list(tag.attrs.items()):
        if not str(value).strip():
            del tag.attrs[name]

    return style


def _convert_heading_marker(soup: BeautifulSoup, tag: Tag) -> bool:
    """Replace a "H2: Title" paragraph with <h2>Title</h2>."""
    if tag.name not in PARAGRAPH_TAGS:
        return False

    text = tag.get_text().strip()
    for prefix, heading_name in HEADING_MARKERS:
        if text.startswith(prefix):
            heading = soup.new_tag(heading_name)
            heading.string = text[len(prefix):].strip()
            return replace(tag, heading)

    return False


def _convert_span(soup: BeautifulSoup, span: Tag, style: str) -> None:
    """Turn a styled span into <strong>/<em>, or unwrap it."""
    is_bold = BOLD_STYLE.search(style) is not None
    is_italic = ITALIC_STYLE.search(style) is not None

    if not is_bold and not is_italic:
        unwrap(span)
        return

    if span.parent is None:
        return

    # Reuse the span node itself so its children stay in place
    span.name = "strong" if is_bold else "em"
    span.attrs = {}

    if is_bold and is_italic:
        em = soup.new_tag("em")
        em.extend(list(span.contents))
        span.append(em)
