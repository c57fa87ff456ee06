"""Tree construction for RSS channel documents.

Key Components:
    Element: A markup node with a name, optional attributes and optional content
    Document: Root container holding the ``rss`` element
    TreeBuilder: Expands field descriptions into element lists
    FieldValidator: Checks descriptions against the RSS 2.0 field sets
    ChannelSerializer: Renders documents to markup text
"""

from .builder import (
    Attributed,
    FieldValue,
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
from .element import Document, Element, tag
from .formatting import DATE_FIELDS, TEXT_FIELDS, format_date, format_field
from .serializer import (
    XML_DECLARATION,
    ChannelSerializer,
    serialize,
    serialize_element,
)
from .validation import (
    CHANNEL_FIELDS,
    ITEM_FIELDS,
    REQUIRED_CHANNEL_FIELDS,
    FieldValidator,
    unrecognized_fields,
    validate_entry,
    validate_feed,
)

__all__ = [
    "Attributed",
    "FieldValue",
    "Nested",
    "Omitted",
    "Repeated",
    "Scalar",
    "TreeBuilder",
    "build_elements",
    "build_field",
    "classify_value",
    "drop_none",
    "Document",
    "Element",
    "tag",
    "DATE_FIELDS",
    "TEXT_FIELDS",
    "format_date",
    "format_field",
    "XML_DECLARATION",
    "ChannelSerializer",
    "serialize",
    "serialize_element",
    "CHANNEL_FIELDS",
    "ITEM_FIELDS",
    "REQUIRED_CHANNEL_FIELDS",
    "FieldValidator",
    "unrecognized_fields",
    "validate_entry",
    "validate_feed",
]
