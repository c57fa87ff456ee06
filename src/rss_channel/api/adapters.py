"""Adapters converting generated documents to third-party XML trees.

Both adapters go through the serialized text, so CDATA sections and
escaped entities arrive in the target tree exactly as an RSS reader would
see them, and a successful conversion doubles as a well-formedness check.
"""

import xml.etree.ElementTree as ET
from typing import Any

from rss_channel.shared import get_logger
from rss_channel.tree import Document, serialize

logger = get_logger(__name__, component="adapters")


def to_lxml(document: Document) -> Any:
    """Convert a document to an ``lxml.etree`` root element.

    Requires the ``lxml`` extra.

    Raises:
        lxml.etree.XMLSyntaxError: If the document is not well-formed, which
            can only happen when validation was skipped or raw content was
            malformed
    """
    from lxml import etree

    root = etree.fromstring(serialize(document).encode(document.encoding))
    logger.debug(
        "Converted document to lxml",
        extra={"lxml_version": etree.LXML_VERSION}
    )
    return root


def to_element_tree(document: Document) -> ET.Element:
    """Convert a document to an ``xml.etree.ElementTree`` root element."""
    return ET.fromstring(serialize(document).encode(document.encoding))
