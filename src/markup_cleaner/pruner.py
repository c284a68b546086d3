# -*- coding: utf-8 -*-
"""
Step 3: Empty element pruning.
"""
import logging

from bs4 import Tag

from .dom import (
    PARAGRAPH_TAGS,
    VOID_TAGS,
    has_useful_attributes,
    is_blank,
    is_blank_text,
    post_order,
    remove,
)

logger = logging.getLogger(__name__)


def prune_empty_elements(root: Tag) -> int:
    """
    Remove elements that carry neither content nor a useful attribute.

    Runs children first so that a parent emptied by the removal of its
    children is removed too. Void elements are always kept and root is
    never removed. Each element is judged from its direct children, so
    the pass stays linear in the size of the tree.

    Returns:
        Number of elements removed
    """
    removed = 0
    for tag in post_order(root):
        if tag.name in PARAGRAPH_TAGS and _is_blank_paragraph(tag):
            removed += remove(tag)
            continue

        if tag.name in VOID_TAGS:
            continue

        if is_blank(tag) and not has_useful_attributes(tag):
            removed += remove(tag)

    logger.debug("Pruning done", extra={"stage": "prune_empty", "removed": removed})
    return removed


def _is_blank_paragraph(paragraph: Tag) -> bool:
    """True for <p></p>, <p> </p> and <p><br></p>."""
    content = [child for child in paragraph.contents if not is_blank_text(child)]
    if not content:
        return True
    return len(content) == 1 and isinstance(content[0], Tag) and content[0].name == "br"
