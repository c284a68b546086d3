# -*- coding: utf-8 -*-
"""
Document tree helpers shared by the pipeline steps.

All structural helpers return a boolean outcome: ``False`` means the node was
detached from the tree and nothing happened.
"""
from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.element import PageElement, PreformattedString
from bs4.formatter import HTMLFormatter

# Elements that carry no content and are never pruned for being empty
VOID_TAGS = frozenset({"img", "br", "hr", "input", "meta", "link"})

# Attribute name prefixes that justify keeping an otherwise empty element
# ("src" also covers srcset, "name" covers names, ...)
USEFUL_ATTRIBUTE_PREFIXES = (
    "href", "src", "alt", "title", "id", "name", "data-", "aria-", "role",
)

# Elements treated as paragraphs by the heading and pruning steps
PARAGRAPH_TAGS = frozenset({"p"})

# Elements carrying bold semantics
BOLD_TAGS = frozenset({"strong", "b"})

# Whitespace that serializes as itself; a non-breaking space is content
MARKUP_WHITESPACE = " \t\n\r\f\v"


def _substitute_entities(value: str) -> str:
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


# Minimal escaping, plus &nbsp; so non-breaking spaces stay visible
OUTPUT_FORMATTER = HTMLFormatter(entity_substitution=_substitute_entities)


def parse(markup: str) -> tuple[BeautifulSoup, Tag]:
    """
    Parse markup and return the soup together with its <body>.

    Head content (meta, style, title, ...) never reaches the body. When the
    parse produced no body at all, an empty detached one is returned.
    """
    # Keep every attribute value a plain string (class, rel, headers, ...)
    soup = BeautifulSoup(markup, "lxml", multi_valued_attributes=None)
    body = soup.body
    if body is None:
        body = soup.new_tag("body")
    return soup, body


def serialize(root: Tag) -> str:
    """Serialize the children of root, trimmed."""
    return root.decode_contents(formatter=OUTPUT_FORMATTER).strip(MARKUP_WHITESPACE)


def post_order(root: Tag) -> list[Tag]:
    """
    Return every element below root, children before their parent.

    The list is a snapshot: mutating the tree while walking it is safe as long
    as nodes are only moved upwards or replaced.
    """
    ordered: list[Tag] = []
    stack = [child for child in root.children if isinstance(child, Tag)]
    while stack:
        node = stack.pop()
        ordered.append(node)
        stack.extend(child for child in node.children if isinstance(child, Tag))
    ordered.reverse()
    return ordered


def unwrap(tag: Tag) -> bool:
    """Splice the children of tag into its parent and drop tag."""
    if tag.parent is None:
        return False
    tag.unwrap()
    return True


def replace(old: PageElement, *new: PageElement | str) -> bool:
    """Replace old with one or more nodes, keeping sibling order."""
    if old.parent is None:
        return False
    old.replace_with(*new)
    return True


def remove(node: PageElement) -> bool:
    """Remove node (and its subtree) from the tree."""
    if node.parent is None:
        return False
    if isinstance(node, Tag):
        node.decompose()
    else:
        node.extract()
    return True


def has_useful_attributes(tag: Tag) -> bool:
    """Check whether tag carries at least one attribute worth keeping."""
    return any(name.startswith(USEFUL_ATTRIBUTE_PREFIXES) for name in tag.attrs)


def is_blank_text(node: PageElement) -> bool:
    """True for a plain text node that serializes to whitespace only."""
    return (
        isinstance(node, NavigableString)
        and not isinstance(node, PreformattedString)
        and not node.strip(MARKUP_WHITESPACE)
    )


def is_blank(tag: Tag) -> bool:
    """
    True when the serialized content of tag, trimmed, would be empty.

    Decided from the direct children only: any child element serializes
    to at least its own tags.
    """
    return all(is_blank_text(child) for child in tag.contents)
