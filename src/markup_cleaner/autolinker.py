# -*- coding: utf-8 -*-
"""
Step 4: Contact auto-linking.

Wraps Australian phone numbers and email addresses found in text nodes in
tel:/mailto: hyperlinks.
"""
import logging
import re
from dataclasses import dataclass
from typing import Iterator, Literal

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .dom import replace

logger = logging.getLogger(__name__)

# Australian phone formats, tried in this order at each position:
# +61 X XXXX XXXX, (0X) XXXX XXXX, 0X XXXX XXXX, 04XX XXX XXX, 1300/1800 XXX XXX
PHONE_PATTERNS = [
    r"\+61\s?\d[\s-]?\d{4}[\s-]?\d{4}",
    r"\(0\d\)\s?\d{4}[\s-]?\d{4}",
    r"0[2-478]\s?\d{4}[\s-]?\d{4}",
    r"04\d{2}[\s-]?\d{3}[\s-]?\d{3}",
    r"1[38]00[\s-]?\d{3}[\s-]?\d{3}",
]
EMAIL_PATTERN = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"

CONTACT_PATTERN = re.compile(
    "(?P<phone>{})|(?P<email>{})".format(
        "|".join(f"(?:{pattern})" for pattern in PHONE_PATTERNS), EMAIL_PATTERN
    )
)

# Characters dropped from a phone number to build its tel: target
PHONE_SEPARATORS = re.compile(r"[\s()-]")

# Elements whose text is not prose
RAW_TEXT_TAGS = frozenset({"script", "style", "textarea"})


@dataclass(frozen=True)
class ContactMatch:
    """One recognized contact span inside a text node."""

    start: int
    end: int
    text: str
    kind: Literal["phone", "email"]

    @property
    def href(self) -> str:
        if self.kind == "phone":
            return "tel:" + PHONE_SEPARATORS.sub("", self.text)
        return "mailto:" + self.text


def find_contacts(text: str) -> Iterator[ContactMatch]:
    """Yield non-overlapping contact matches in text, left to right."""
    for match in CONTACT_PATTERN.finditer(text):
        yield ContactMatch(
            start=match.start(),
            end=match.end(),
            text=match.group(),
            kind="phone" if match.group("phone") else "email",
        )


def auto_link(soup: BeautifulSoup, root: Tag) -> int:
    """Replace contact details in every eligible text node with links. Returns the link count."""
    linked = 0
    # Snapshot first: replacing nodes while iterating descendants is unsafe
    for text_node in list(root.find_all(string=True)):
        if not _is_linkable(text_node):
            continue
        nodes = _link_nodes(soup, str(text_node))
        if nodes is None:
            continue
        if replace(text_node, *nodes):
            linked += sum(isinstance(node, Tag) for node in nodes)

    logger.debug("Auto-linking done", extra={"stage": "auto_link", "links": linked})
    return linked


def _is_linkable(text_node: NavigableString) -> bool:
    if isinstance(text_node, PreformattedString):
        return False
    parent = text_node.parent
    if parent is None or parent.name in RAW_TEXT_TAGS:
        return False
    return text_node.find_parent("a") is None


def _link_nodes(soup: BeautifulSoup, text: str) -> list[NavigableString | Tag] | None:
    """Split text into plain strings and links, or None when nothing matches."""
    nodes: list[NavigableString | Tag] = []
    position = 0

    for contact in find_contacts(text):
        if contact.start > position:
            nodes.append(NavigableString(text[position:contact.start]))
        anchor = soup.new_tag("a", href=contact.href)
        anchor.string = contact.text
        nodes.append(anchor)
        position = contact.end

    if not nodes:
        return None

    if position < len(text):
        nodes.append(NavigableString(text[position:]))
    return nodes
