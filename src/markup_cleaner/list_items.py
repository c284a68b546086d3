# -*- coding: utf-8 -*-
"""
Step 2: List item normalization.

Unwraps paragraphs inside <li> and emphasizes a leading "Label:" segment,
so "<li>Name: Jane</li>" becomes "<li><strong>Name:</strong> Jane</li>".
"""
import logging

from bs4 import BeautifulSoup, NavigableString, Tag

from .dom import BOLD_TAGS, unwrap

logger = logging.getLogger(__name__)

# A label colon must sit strictly inside (0, LABEL_MAX_OFFSET)
LABEL_MAX_OFFSET = 80


def normalize_list_items(soup: BeautifulSoup, root: Tag) -> int:
    """Normalize every <li> below root, in document order. Returns the number labeled."""
    labeled = 0
    items = root.find_all("li")
    for item in items:
        for paragraph in item.find_all("p"):
            unwrap(paragraph)

        if _starts_with_bold(item):
            continue

        colon = item.get_text().find(":")
        if 0 < colon < LABEL_MAX_OFFSET and emphasize_label(soup, item):
            labeled += 1

    logger.debug(
        "List items done",
        extra={"stage": "list_items", "items": len(items), "labeled": labeled},
    )
    return labeled


def _starts_with_bold(item: Tag) -> bool:
    first = next(iter(item.contents), None)
    return isinstance(first, Tag) and first.name in BOLD_TAGS


def emphasize_label(soup: BeautifulSoup, item: Tag) -> bool:
    """
    Wrap everything up to and including the first colon in <strong>.

    The children are scanned before anything moves, so an item that already
    contains a bold element before its colon, or has no colon in its direct
    children, is left exactly as it was. Returns True when the item changed.
    """
    label_nodes = []
    split_text = None
    split_at = -1

    for child in item.contents:
        if isinstance(child, Tag):
            if child.name in BOLD_TAGS:
                return False
            label_nodes.append(child)
            if ":" in child.get_text():
                break
        elif isinstance(child, NavigableString):
            split_at = child.find(":")
            if split_at != -1:
                split_text = child
                break
            label_nodes.append(child)
    else:
        return False

    label = soup.new_tag("strong")
    item.insert(0, label)
    for node in label_nodes:
        label.append(node)

    if split_text is not None:
        text = str(split_text)
        label.append(NavigableString(text[:split_at + 1]))
        rest = text[split_at + 1:]
        if rest:
            split_text.replace_with(NavigableString(rest))
        else:
            split_text.extract()

    return True
