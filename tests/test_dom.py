# -*- coding: utf-8 -*-
"""
Tests for the document tree helpers.
"""
from bs4 import BeautifulSoup

from markup_cleaner.dom import (
    has_useful_attributes,
    is_blank,
    parse,
    post_order,
    remove,
    replace,
    serialize,
    unwrap,
)


class TestParse:
    """Tests for parsing and serialization."""

    def test_fragment_root_is_body(self):
        """Bare fragments are rooted at the implied <body>."""
        _soup, root = parse("<p>a</p>")
        assert root.name == "body"
        assert serialize(root) == "<p>a</p>"

    def test_head_content_is_excluded(self):
        """Metadata and style sheets never reach the body."""
        _soup, root = parse('<meta charset="utf-8"><style>p{margin:0}</style><p>a</p>')
        assert serialize(root) == "<p>a</p>"

    def test_head_only_markup_has_empty_body(self):
        """Markup without body content yields an empty fragment."""
        _soup, root = parse('<meta charset="utf-8">')
        assert root.name == "body"
        assert serialize(root) == ""

    def test_document_root_is_body(self):
        """Documents are rooted at <body>."""
        _soup, root = parse("<html><body><p>a</p></body></html>")
        assert root.name == "body"

    def test_attribute_values_are_strings(self):
        """Multi-valued attributes are not split."""
        _soup, root = parse('<p class="a b">x</p>')
        assert root.p["class"] == "a b"

    def test_serialize_trims(self):
        """Serialization strips surrounding whitespace."""
        _soup, root = parse("\n  <p>a</p>\n")
        assert serialize(root) == "<p>a</p>"


class TestPostOrder:
    """Tests for the traversal order."""

    def test_children_before_parent(self):
        """Descendants come first, siblings left to right."""
        _soup, root = parse("<div><p><b>x</b></p><i>y</i></div>")

        names = [tag.name for tag in post_order(root)]

        assert names == ["b", "p", "i", "div"]


class TestDetachedNodes:
    """Structural helpers are no-ops on detached nodes."""

    def test_unwrap_detached(self):
        """Unwrapping a node without parent does nothing."""
        tag = BeautifulSoup("", "lxml").new_tag("span")
        assert unwrap(tag) is False

    def test_replace_detached(self):
        """Replacing a node without parent does nothing."""
        soup = BeautifulSoup("", "lxml")
        assert replace(soup.new_tag("p"), soup.new_tag("h1")) is False

    def test_remove_detached(self):
        """Removing a node without parent does nothing."""
        tag = BeautifulSoup("", "lxml").new_tag("p")
        assert remove(tag) is False

    def test_attached_operations(self):
        """Attached nodes are rewritten."""
        soup, root = parse("<div><span>a</span><em>b</em></div>")

        assert unwrap(root.span) is True
        assert remove(root.em) is True
        assert serialize(root) == "<div>a</div>"


class TestUsefulAttributes:
    """Tests for the useful attribute check."""

    def test_useful_names_and_prefixes(self):
        """Named and prefixed attributes count."""
        _soup, root = parse('<i id="x"></i><i data-a="1"></i><i aria-hidden="true"></i>')
        assert all(has_useful_attributes(tag) for tag in root.find_all("i"))

    def test_prefix_matches(self):
        """Names starting with a useful prefix count (srcset, name-like, ...)."""
        _soup, root = parse('<picture><source srcset="a.webp"/></picture>')
        assert has_useful_attributes(root.source) is True

    def test_other_attributes(self):
        """Other attributes do not count."""
        _soup, root = parse('<i lang="en" tabindex="0"></i>')
        assert has_useful_attributes(root.i) is False


class TestSerialization:
    """Tests for the output formatter."""

    def test_non_breaking_space_is_an_entity(self):
        """Non-breaking spaces are written as &nbsp;."""
        _soup, root = parse("<p>a&nbsp;b</p>")
        assert serialize(root) == "<p>a&nbsp;b</p>"

    def test_markup_characters_are_escaped(self):
        """Text is escaped minimally."""
        _soup, root = parse("<p>a &lt; b &amp; c</p>")
        assert serialize(root) == "<p>a &lt; b &amp; c</p>"

    def test_non_breaking_space_is_not_trimmed(self):
        """Trimming only removes ordinary whitespace."""
        _soup, root = parse("<p>x</p>&nbsp;")
        assert serialize(root).endswith("&nbsp;")


class TestBlank:
    """Tests for the direct-children emptiness check."""

    def test_whitespace_only(self):
        """Whitespace text is blank."""
        _soup, root = parse("<div> \n\t</div>")
        assert is_blank(root.div) is True

    def test_non_breaking_space_is_content(self):
        """A non-breaking space is content."""
        _soup, root = parse("<div>&nbsp;</div>")
        assert is_blank(root.div) is False

    def test_child_element_is_content(self):
        """Any child element, even an empty one, is content."""
        _soup, root = parse("<div><i></i></div>")
        assert is_blank(root.div) is False
