"""Tests for field classification and tree building."""

import logging
from datetime import datetime, timezone

from rss_channel.tree import (
    Attributed,
    Element,
    Nested,
    Omitted,
    Repeated,
    Scalar,
    TreeBuilder,
    build_elements,
    build_field,
    classify_value,
    drop_none,
)


class TestClassifyValue:
    """Test one-time classification of description values."""

    def test_none_is_omitted(self):
        """Test None classifies as Omitted."""
        assert classify_value(None) == Omitted()

    def test_scalars(self):
        """Test strings, numbers, booleans, dates and elements are scalars."""
        moment = datetime(2020, 1, 1)
        element = Element("x")

        for value in ("text", 60, 1.5, True, moment, element):
            assert classify_value(value) == Scalar(value)

    def test_list_with_leading_mapping_is_attributed(self):
        """Test a leading mapping becomes the attribute set."""
        shape = classify_value([{"domain": "http://example.com"}, "Tech"])

        assert shape == Attributed({"domain": "http://example.com"}, ("Tech",))

    def test_attribute_only_list(self):
        """Test a lone mapping in a list is attributed with no content."""
        shape = classify_value([{"url": "u", "length": "1", "type": "audio/mpeg"}])

        assert isinstance(shape, Attributed)
        assert shape.content == ()

    def test_plain_sequences_are_repeated(self):
        """Test lists and tuples without a leading mapping repeat."""
        assert classify_value(["a", "b"]) == Repeated(("a", "b"))
        assert classify_value(("a",)) == Repeated(("a",))
        assert classify_value([]) == Repeated(())

    def test_mapping_is_nested(self):
        """Test a mapping value becomes a nested element."""
        assert classify_value({"url": "u"}) == Nested({"url": "u"})


class TestDropNone:
    """Test None-field filtering."""

    def test_removes_only_none_values(self):
        """Test falsy non-None values are kept."""
        assert drop_none({"a": None, "b": "", "c": 0, "d": False}) == {
            "b": "",
            "c": 0,
            "d": False,
        }

    def test_none_description(self):
        """Test a missing description becomes an empty mapping."""
        assert drop_none(None) == {}


class TestBuildElements:
    """Test expansion of descriptions into element lists."""

    def test_scalar_field(self):
        """Test a scalar becomes one element with formatted content."""
        assert build_elements({"title": "A & B"}) == [Element("title", None, ["A &amp; B"])]

    def test_date_field(self):
        """Test date fields are rendered as text."""
        moment = datetime(2008, 6, 3, 11, 5, 30, tzinfo=timezone.utc)

        assert build_elements({"pubDate": moment}) == [
            Element("pubDate", None, ["Tue, 03 Jun 2008 11:05:30 +0000"])
        ]

    def test_attributed_field(self):
        """Test attributes and content values are kept together."""
        elements = build_elements({"category": [{"domain": "http://example.com"}, "Tech"]})

        assert elements == [Element("category", {"domain": "http://example.com"}, ["Tech"])]

    def test_attributed_content_is_formatted(self):
        """Test attributed content values are formatted like scalars."""
        elements = build_elements({"title": [{"lang": "en"}, "<b>", None, "&"]})

        assert elements == [Element("title", {"lang": "en"}, ["&lt;b&gt;", "&amp;"])]

    def test_attribute_only_field_has_empty_content(self):
        """Test enclosure-style values keep an empty content list."""
        elements = build_elements({"enclosure": [{"url": "http://x/a.mp3"}]})

        assert elements[0].content == []
        assert not elements[0].is_self_closing

    def test_repeated_field_yields_siblings_in_order(self):
        """Test each list item becomes its own sibling element."""
        elements = build_elements({"category": ["a", "b", "c"]})

        assert [e.name for e in elements] == ["category"] * 3
        assert [e.content for e in elements] == [["a"], ["b"], ["c"]]

    def test_repeated_items_are_classified_individually(self):
        """Test repeated items may themselves be attributed values."""
        elements = build_elements({
            "category": ["plain", [{"domain": "d"}, "rich"]],
        })

        assert elements == [
            Element("category", None, ["plain"]),
            Element("category", {"domain": "d"}, ["rich"]),
        ]

    def test_repeated_none_items_are_skipped(self):
        """Test None inside a repeated value produces nothing."""
        assert build_elements({"category": ["a", None]}) == [Element("category", None, ["a"])]

    def test_nested_field(self):
        """Test a mapping value becomes child elements."""
        elements = build_elements({"image": {"url": "http://x/i.png", "title": "T & U"}})

        assert elements == [
            Element("image", None, [
                Element("url", None, ["http://x/i.png"]),
                Element("title", None, ["T &amp; U"]),
            ])
        ]

    def test_none_field_is_omitted(self):
        """Test None values produce no element."""
        assert build_elements({"title": None, "link": "http://x"}) == [
            Element("link", None, ["http://x"])
        ]

    def test_insertion_order_is_preserved(self):
        """Test output order follows the description."""
        elements = build_elements({"ttl": 5, "title": "T", "link": "L"})

        assert [e.name for e in elements] == ["ttl", "title", "link"]

    def test_build_field_for_empty_list(self):
        """Test an empty list produces no elements."""
        assert build_field("category", []) == []


class TestTreeBuilder:
    """Test the logging tree builder wrapper."""

    def test_build_matches_function(self):
        """Test TreeBuilder.build delegates to build_elements."""
        description = {"title": "T", "category": ["a", "b"]}

        assert TreeBuilder().build(description) == build_elements(description)

    def test_build_logs_debug_summary(self, caplog):
        """Test a debug record with element counts is emitted."""
        builder = TreeBuilder(correlation_id="req-1")

        with caplog.at_level(logging.DEBUG, logger="rss_channel.tree.builder"):
            builder.build({"category": ["a", "b"]})

        record = caplog.records[-1]
        assert record.element_count == 2
        assert record.correlation_id == "req-1"
