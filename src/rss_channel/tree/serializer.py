"""Markup serialization of generated document trees.

The serializer renders exactly the tree it is given, in a single pre-order
pass and on a single line. It never escapes: text content has been escaped
while the tree was built, and attribute values are emitted as supplied.
"""

from typing import List, Optional

from rss_channel.shared import get_logger
from rss_channel.tree.element import Document, Element, node_text

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8'?>"


def _write_element(element: Element, parts: List[str]) -> None:
    parts.append(f"<{element.name}")

    if element.attributes:
        for name, value in element.attributes.items():
            parts.append(f" {name}='{node_text(value)}'")

    if element.content is None:
        parts.append("/>")
        return

    parts.append(">")
    for node in element.content:
        if isinstance(node, Element):
            _write_element(node, parts)
        else:
            parts.append(node_text(node))
    parts.append(f"</{element.name}>")


def serialize_element(element: Element) -> str:
    """Render an element subtree without the XML declaration.

    Examples:
        >>> serialize_element(Element("category", {"domain": "d"}, ["Tech"]))
        "<category domain='d'>Tech</category>"
        >>> serialize_element(Element("enclosure", {"url": "u"}, []))
        "<enclosure url='u'></enclosure>"
    """
    parts: List[str] = []
    _write_element(element, parts)
    return "".join(parts)


def serialize(document: Document) -> str:
    """Render a document to markup text, prefixed with the XML declaration."""
    return XML_DECLARATION + serialize_element(document.root)


class ChannelSerializer:
    """Serializer for generated documents with correlation logging."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize serializer.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "channel_serializer")

    def serialize(self, document: Document) -> str:
        """Render ``document`` to markup text."""
        output = serialize(document)

        self.logger.debug(
            "Serialized document",
            extra={
                "output_length": len(output),
                "item_count": len(document.items),
            }
        )

        return output
