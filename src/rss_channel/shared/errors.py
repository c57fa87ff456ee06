"""Exception hierarchy for RSS channel construction.

Validation failures abort construction immediately; none of them is
recovered internally.
"""

from typing import Any, Iterable, Mapping, Optional


class ChannelError(Exception):
    """Base exception for all rss_channel errors."""


class FeedValidationError(ChannelError, ValueError):
    """Base exception for a feed or item description that fails validation."""


class MissingRequiredField(FeedValidationError):
    """A required channel field (title, link or description) is absent."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} is a required element")
        self.field_name = field_name


class UnrecognizedField(FeedValidationError):
    """One or more field names are not allowed in the current scope.

    Attributes:
        fields: Every offending field name
        scope: ``"channel"`` or ``"item"``
    """

    def __init__(self, fields: Iterable[str], scope: str = "channel") -> None:
        self.fields = frozenset(fields)
        self.scope = scope
        names = ", ".join(sorted(str(name) for name in self.fields))
        super().__init__(f"unrecognized tags in {scope}: {names}")


class MissingRequiredContent(FeedValidationError):
    """An item carries neither a title nor a description."""

    def __init__(self, entry: Optional[Mapping[str, Any]] = None) -> None:
        self.entry = dict(entry or {})
        super().__init__(
            f"item {self.entry} must contain one of title or description"
        )


class ConfigError(ChannelError):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name
