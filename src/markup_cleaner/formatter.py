# -*- coding: utf-8 -*-
"""
Stateless re-serialization of cleaned markup for display.

These helpers work on the serialized string, never on the tree.
"""
import re
from typing import Literal

from bs4 import BeautifulSoup

FormatMode = Literal["beautify", "minify"]

INDENT = "  "

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

_INTER_TAG_WHITESPACE = re.compile(r">\s+<")
_NEWLINE_INDENT = re.compile(r"\n\s*")
_TAG_NAME = re.compile(r"</?([\w-]+)")
_LINE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)


def tokenize(markup: str) -> list[str]:
    """
    Split markup into tag tokens and text tokens.

    Whitespace-only text is dropped. A trailing "<" without a closing ">"
    becomes the last token as-is.
    """
    tokens = []
    position = 0
    length = len(markup)

    while position < length:
        if markup[position] == "<":
            end = markup.find(">", position)
            if end == -1:
                tokens.append(markup[position:])
                break
            tokens.append(markup[position:end + 1])
            position = end + 1
        else:
            end = markup.find("<", position)
            if end == -1:
                end = length
            text = markup[position:end]
            if text.strip():
                tokens.append(text)
            position = end

    return tokens


def _opens_block(token: str) -> bool:
    if token.startswith("<!") or token.endswith("/>"):
        return False
    match = _TAG_NAME.match(token)
    return not (match and match.group(1).lower() in VOID_ELEMENTS)


def beautify(markup: str) -> str:
    """Put every tag and text run on its own line, indented by nesting depth."""
    lines = []
    depth = 0

    for token in tokenize(_INTER_TAG_WHITESPACE.sub("><", markup)):
        if token.startswith("</"):
            depth = max(0, depth - 1)
            lines.append(INDENT * depth + token)
        elif token.startswith("<"):
            lines.append(INDENT * depth + token)
            if _opens_block(token):
                depth += 1
        else:
            lines.append(INDENT * depth + token)

    return "\n".join(lines)


def minify(markup: str) -> str:
    """Collapse markup onto a single line."""
    compact = _NEWLINE_INDENT.sub("", markup)
    compact = _INTER_TAG_WHITESPACE.sub("><", compact)
    return compact.strip()


def format_markup(markup: str, mode: FormatMode) -> str:
    """Render markup in the requested display mode."""
    if mode == "beautify":
        return beautify(markup)
    if mode == "minify":
        return minify(markup)
    raise ValueError(f"Unknown format mode: {mode!r}")


def remove_line_breaks(markup: str) -> str:
    """Drop every <br>, <br/> and <br /> from serialized markup."""
    return _LINE_BREAK.sub("", markup)


def to_plain_text(markup: str) -> str:
    """Plain-text rendition of a cleaned fragment, one block per line."""
    soup = BeautifulSoup(markup, "lxml")
    return soup.get_text("\n", strip=True)
