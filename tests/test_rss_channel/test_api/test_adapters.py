"""Tests for conversion of generated documents to third-party XML trees."""

import xml.etree.ElementTree as ET

import pytest

from rss_channel import cdata, channel
from rss_channel.api.adapters import to_element_tree, to_lxml

etree = pytest.importorskip("lxml.etree")

ATOM = "{http://www.w3.org/2005/Atom}"
FEED = {"title": "T & U", "link": "http://x", "description": "D"}


class TestLxmlAdapter:
    """Test lxml conversion."""

    def test_output_is_well_formed(self):
        """Test a full document parses as XML."""
        document = channel(
            FEED,
            {"title": "E1", "category": [{"domain": "http://example.com"}, "Tech"]},
            {"description": cdata("<p>raw & ready</p>")},
        )

        root = to_lxml(document)

        assert root.tag == "rss"
        assert root.get("version") == "2.0"
        assert len(root.findall("channel/item")) == 2

    def test_escaped_text_round_trips(self):
        """Test escaped entities decode back to the original text."""
        root = to_lxml(channel(FEED))

        assert root.findtext("channel/title") == "T & U"

    def test_cdata_content_is_text(self):
        """Test CDATA bodies arrive as literal text."""
        root = to_lxml(channel(FEED, {"description": cdata("<b>x</b>")}))

        assert root.findtext("channel/item/description") == "<b>x</b>"

    def test_atom_link_is_namespaced(self):
        """Test the self-link resolves to the Atom namespace."""
        root = to_lxml(channel(FEED))
        link = root.find(f"channel/{ATOM}link")

        assert link is not None
        assert link.get("href") == "http://x"
        assert link.get("rel") == "self"

    def test_malformed_raw_content_is_reported(self):
        """Test broken raw content surfaces as a syntax error."""
        document = channel(FEED, {"description": "<![CDATA[x]]><broken]]>"})

        with pytest.raises(etree.XMLSyntaxError):
            to_lxml(document)


class TestElementTreeAdapter:
    """Test standard library conversion."""

    def test_structure(self):
        """Test channel fields and items are available."""
        root = to_element_tree(channel(FEED, {"title": "E1"}))

        assert isinstance(root, ET.Element)
        assert root.findtext("channel/generator") == "rss-channel"
        assert root.findtext("channel/item/title") == "E1"
