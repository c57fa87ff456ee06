"""Channel assembly API with progressive disclosure.

This module composes validation, tree building and serialization into the
public entry points: the module-level ``channel()`` and ``channel_xml()``
functions, and the configurable, reusable ``ChannelBuilder`` class.
"""

import time
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from rss_channel.shared import ChannelConfig, FeedValidationError, get_logger
from rss_channel.tree import (
    ChannelSerializer,
    Document,
    Element,
    FieldValidator,
    TreeBuilder,
    drop_none,
)

GENERATOR = "rss-channel"
RSS_VERSION = "2.0"
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"
SELF_LINK_TYPE = "application/rss+xml"

MS_PER_SECOND = 1000


def flatten_entries(entries: Iterable[Any]) -> Iterator[Mapping[str, Any]]:
    """Yield item descriptions from arbitrarily nested lists/tuples, skipping None."""
    for entry in entries:
        if entry is None:
            continue
        if isinstance(entry, Mapping):
            yield entry
        elif isinstance(entry, (list, tuple)):
            yield from flatten_entries(entry)
        else:
            raise TypeError(
                f"Item description must be a mapping or a sequence of mappings, "
                f"not {type(entry).__name__}"
            )


def is_empty_input(feed: Optional[Mapping[str, Any]], entries: Iterable[Any]) -> bool:
    """Check whether the feed and every entry argument are None or empty."""
    return not feed and all(not entry for entry in entries)


def assemble(
    validate: bool,
    feed: Optional[Mapping[str, Any]],
    entries: Iterable[Any] = (),
    correlation_id: Optional[str] = None
) -> Document:
    """Assemble the complete RSS document tree.

    Args:
        validate: Whether to validate the feed and each item
        feed: Channel-level field description
        entries: Item-level descriptions, possibly nested in lists/tuples
        correlation_id: Optional correlation ID for request tracking

    Returns:
        Document whose root is the ``rss`` element

    Raises:
        FeedValidationError: If validation is enabled and a description is invalid
    """
    validator = FieldValidator(correlation_id)
    builder = TreeBuilder(correlation_id)

    fields = drop_none(feed)
    if validate:
        validator.validate_feed(fields)

    self_link = Element(
        "atom:link",
        {
            "href": fields.get("link", ""),
            "rel": "self",
            "type": SELF_LINK_TYPE,
        },
    )

    items: List[Element] = []
    for index, entry in enumerate(flatten_entries(entries)):
        entry_fields = drop_none(entry)
        if validate:
            validator.validate_entry(entry_fields, index)
        items.append(Element("item", None, builder.build(entry_fields)))

    channel_content: List[Any] = [self_link]
    channel_content.extend(builder.build({**fields, "generator": GENERATOR}))
    channel_content.extend(items)

    root = Element(
        "rss",
        {"version": RSS_VERSION, "xmlns:atom": ATOM_NAMESPACE},
        [Element("channel", None, channel_content)],
    )
    return Document(root=root, correlation_id=correlation_id)


def channel(
    feed: Optional[Mapping[str, Any]] = None,
    *entries: Any,
    validate: Optional[bool] = None,
    config: Optional[ChannelConfig] = None
) -> Document:
    """Build an RSS 2.0 document tree from a feed and zero or more items.

    Validation follows ``validate`` when given, otherwise ``config.validate``
    (on by default). It is always skipped when the feed and every entry are
    None or empty, which produces an empty placeholder channel.

    Args:
        feed: Channel fields; requires title, link and description
        *entries: Item descriptions or nested lists of them; each needs a
            title or a description
        validate: Optional explicit validation toggle
        config: Optional channel configuration

    Returns:
        Document holding the ``rss`` element tree

    Examples:
        >>> doc = channel({"title": "T", "link": "http://x", "description": "D"},
        ...               {"title": "E1"})
        >>> [item.find_child("title").text for item in doc.items]
        ['E1']
    """
    return ChannelBuilder(config=config).build(feed, *entries, validate=validate)


def channel_xml(
    feed: Optional[Mapping[str, Any]] = None,
    *entries: Any,
    validate: Optional[bool] = None,
    config: Optional[ChannelConfig] = None
) -> str:
    """Build an RSS 2.0 document and serialize it to markup text.

    Accepts the same arguments as ``channel()``. The result starts with
    ``<?xml version='1.0' encoding='UTF-8'?>`` and holds no line breaks
    other than those present in field values.
    """
    return ChannelBuilder(config=config).build_xml(feed, *entries, validate=validate)


class ChannelBuilder:
    """Configurable channel builder that can be reused across calls.

    Instances hold only configuration and call statistics; every build
    allocates its own tree.

    Examples:
        >>> builder = ChannelBuilder(ChannelConfig.permissive())
        >>> builder.build({"title": "T", "unknown": "x"}).channel.find_child("unknown").text
        'x'
    """

    def __init__(
        self,
        config: Optional[ChannelConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize channel builder.

        Args:
            config: Channel configuration (defaults to ``ChannelConfig()``)
            correlation_id: Optional correlation ID overriding the config's
        """
        self.config = config or ChannelConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, "channel_builder")
        self._serializer = ChannelSerializer(self.correlation_id)

        self._build_count = 0
        self._failed_builds = 0
        self._total_processing_time = 0.0

    def build(
        self,
        feed: Optional[Mapping[str, Any]] = None,
        *entries: Any,
        validate: Optional[bool] = None
    ) -> Document:
        """Build the document tree for ``feed`` and ``entries``."""
        start_time = time.time()

        effective_validate = self.config.validate if validate is None else validate
        if is_empty_input(feed, entries):
            effective_validate = False

        self.logger.info(
            "Starting channel build",
            extra={
                "validate": effective_validate,
                "feed_field_count": len(feed) if feed else 0,
                "entry_argument_count": len(entries),
            }
        )

        try:
            document = assemble(effective_validate, feed, entries, self.correlation_id)
        except FeedValidationError:
            self._failed_builds += 1
            self.logger.warning(
                "Channel build aborted by validation",
                extra={"build_count": self._build_count}
            )
            raise
        finally:
            self._build_count += 1
            self._total_processing_time += (time.time() - start_time) * MS_PER_SECOND

        self.logger.info(
            "Channel build completed",
            extra={
                "item_count": len(document.items),
                "element_count": document.total_elements,
            }
        )

        return document

    def build_xml(
        self,
        feed: Optional[Mapping[str, Any]] = None,
        *entries: Any,
        validate: Optional[bool] = None
    ) -> str:
        """Build the document and serialize it to markup text."""
        return self._serializer.serialize(self.build(feed, *entries, validate=validate))

    @property
    def build_count(self) -> int:
        """Get number of builds attempted by this instance."""
        return self._build_count

    @property
    def statistics(self) -> dict:
        """Get build statistics for this instance."""
        return {
            "build_count": self._build_count,
            "failed_builds": self._failed_builds,
            "successful_builds": self._build_count - self._failed_builds,
            "total_processing_time_ms": self._total_processing_time,
        }
