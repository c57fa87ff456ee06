"""Tests for the element and document model."""

import pytest

from rss_channel.tree import Document, Element, tag


class TestElement:
    """Test Element functionality and navigation methods."""

    def test_element_creation_with_valid_data(self) -> None:
        """Test creating Element with name, attributes and content."""
        element = Element("category", {"domain": "http://example.com"}, ["Tech"])

        assert element.name == "category"
        assert element.attributes == {"domain": "http://example.com"}
        assert element.content == ["Tech"]
        assert not element.is_self_closing

    def test_element_with_empty_name_raises_error(self) -> None:
        """Test that empty name raises ValueError."""
        with pytest.raises(ValueError, match="Element name cannot be empty"):
            Element("")

    def test_element_without_content_is_self_closing(self) -> None:
        """Test absent content marks a self-closing tag."""
        assert Element("atom:link", {"rel": "self"}).is_self_closing
        assert not Element("enclosure", {"url": "u"}, []).is_self_closing

    def test_namespace_helpers(self) -> None:
        """Test namespace prefix and local name extraction."""
        element = Element("atom:link")

        assert element.namespace_prefix == "atom"
        assert element.local_name == "link"
        assert Element("title").namespace_prefix is None
        assert Element("title").local_name == "title"

    def test_text_joins_direct_text_nodes(self) -> None:
        """Test text skips child elements and renders scalars."""
        element = Element("x", None, ["a", Element("b", None, ["ignored"]), 1, True])

        assert element.text == "a1true"

    def test_children_and_find(self) -> None:
        """Test child lookup and descendant search."""
        title = Element("title", None, ["T"])
        item_title = Element("title", None, ["E1"])
        item = Element("item", None, [item_title])
        channel = Element("channel", None, [title, item])

        assert channel.children == [title, item]
        assert channel.find_child("title") is title
        assert channel.find_children("item") == [item]
        assert channel.find("item") is item
        assert channel.find_all("title") == [title, item_title]
        assert channel.find("missing") is None

    def test_iter_is_pre_order(self) -> None:
        """Test element iteration visits parents before children."""
        leaf = Element("c", None, ["x"])
        middle = Element("b", None, [leaf])
        root = Element("a", None, [middle])

        assert [e.name for e in root.iter()] == ["a", "b", "c"]

    def test_attribute_access(self) -> None:
        """Test attribute helpers on elements with and without attributes."""
        element = Element("enclosure", {"url": "u", "length": 10})

        assert element.get_attribute("url") == "u"
        assert element.get_attribute("type", "none") == "none"
        assert element.has_attribute("length")
        assert not Element("title").has_attribute("url")
        assert Element("title").get_attribute("url") is None

    def test_to_dict(self) -> None:
        """Test dictionary conversion keeps absent parts absent."""
        element = Element("item", None, [Element("title", None, ["E1"])])

        assert element.to_dict() == {
            "name": "item",
            "content": [{"name": "title", "content": ["E1"]}],
        }


class TestTagConstructor:
    """Test the plain element constructor."""

    def test_tag_copies_inputs(self) -> None:
        """Test tag() does not share the caller's containers."""
        attributes = {"domain": "d"}
        content = ["Tech"]

        element = tag("category", attributes, content)
        attributes["domain"] = "changed"
        content.append("more")

        assert element.attributes == {"domain": "d"}
        assert element.content == ["Tech"]

    def test_tag_without_content(self) -> None:
        """Test tag() without content creates a self-closing element."""
        element = tag("atom:link", {"href": "http://x"})

        assert element.is_self_closing


class TestDocument:
    """Test Document navigation."""

    def _document(self) -> Document:
        items = [Element("item", None, [Element("title", None, [f"E{i}"])]) for i in (1, 2)]
        channel = Element("channel", None, [Element("title", None, ["T"]), *items])
        return Document(root=Element("rss", {"version": "2.0"}, [channel]))

    def test_channel_and_items(self) -> None:
        """Test shortcut properties for channel and items."""
        document = self._document()

        assert document.channel.name == "channel"
        assert [item.find_child("title").text for item in document.items] == ["E1", "E2"]

    def test_items_without_channel(self) -> None:
        """Test items is empty when there is no channel."""
        document = Document(root=Element("rss", None, []))

        assert document.channel is None
        assert document.items == []

    def test_find_includes_root(self) -> None:
        """Test document-level search covers the root element."""
        document = self._document()

        assert document.find("rss") is document.root
        assert len(document.find_all("title")) == 3
        assert document.total_elements == 7

    def test_to_dict_and_str(self) -> None:
        """Test dictionary and text conversion."""
        document = Document(root=Element("rss", None, []))

        assert document.to_dict()["root"] == {"name": "rss", "content": []}
        assert str(document) == "<?xml version='1.0' encoding='UTF-8'?><rss></rss>"
