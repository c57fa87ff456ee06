"""Field validation for channel and item descriptions.

Descriptions are checked against the fixed RSS 2.0 field sets. Validation
fails fast with a typed exception; there is no partial result.
"""

from typing import Any, FrozenSet, Iterable, Mapping, Optional, Tuple

from rss_channel.shared import (
    MissingRequiredContent,
    MissingRequiredField,
    UnrecognizedField,
    get_logger,
)

CHANNEL_FIELDS: FrozenSet[str] = frozenset({
    "title",
    "link",
    "description",
    "category",
    "cloud",
    "copyright",
    "docs",
    "image",
    "language",
    "lastBuildDate",
    "managingEditor",
    "pubDate",
    "rating",
    "skipDays",
    "skipHours",
    "ttl",
    "webMaster",
})

ITEM_FIELDS: FrozenSet[str] = frozenset({
    "title",
    "link",
    "description",
    "author",
    "category",
    "comments",
    "enclosure",
    "guid",
    "pubDate",
    "source",
})

REQUIRED_CHANNEL_FIELDS: Tuple[str, ...] = ("title", "link", "description")
ITEM_CONTENT_FIELDS: Tuple[str, ...] = ("title", "description")


def unrecognized_fields(
    description: Mapping[str, Any],
    allowed: FrozenSet[str]
) -> FrozenSet[str]:
    """Return every field name in ``description`` outside ``allowed``."""
    return frozenset(name for name in description if name not in allowed)


def validate_feed(
    description: Mapping[str, Any],
    required: Iterable[str] = REQUIRED_CHANNEL_FIELDS
) -> None:
    """Validate a channel-level description.

    Args:
        description: Channel fields with None values already removed
        required: Field names that must be present, checked in order

    Raises:
        MissingRequiredField: For the first required field that is absent
        UnrecognizedField: Naming every field outside ``CHANNEL_FIELDS``
    """
    for name in required:
        if name not in description:
            raise MissingRequiredField(name)

    offenders = unrecognized_fields(description, CHANNEL_FIELDS)
    if offenders:
        raise UnrecognizedField(offenders, scope="channel")


def validate_entry(description: Mapping[str, Any]) -> None:
    """Validate an item-level description.

    Raises:
        MissingRequiredContent: If neither title nor description is present
        UnrecognizedField: Naming every field outside ``ITEM_FIELDS``
    """
    if not any(name in description for name in ITEM_CONTENT_FIELDS):
        raise MissingRequiredContent(description)

    offenders = unrecognized_fields(description, ITEM_FIELDS)
    if offenders:
        raise UnrecognizedField(offenders, scope="item")


class FieldValidator:
    """Validates descriptions and logs rejections with correlation info."""

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize field validator.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "field_validator")

    def validate_feed(
        self,
        description: Mapping[str, Any],
        required: Iterable[str] = REQUIRED_CHANNEL_FIELDS
    ) -> None:
        """Validate channel fields, logging the failure before re-raising."""
        try:
            validate_feed(description, required)
        except (MissingRequiredField, UnrecognizedField) as e:
            self.logger.warning(
                "Channel description rejected",
                extra={"error_type": type(e).__name__, "reason": str(e)}
            )
            raise

    def validate_entry(self, description: Mapping[str, Any], index: int = 0) -> None:
        """Validate item fields, logging the failure before re-raising."""
        try:
            validate_entry(description)
        except (MissingRequiredContent, UnrecognizedField) as e:
            self.logger.warning(
                "Item description rejected",
                extra={
                    "error_type": type(e).__name__,
                    "reason": str(e),
                    "item_index": index,
                }
            )
            raise
