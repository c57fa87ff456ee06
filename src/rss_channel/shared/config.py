"""Configuration for RSS channel construction.

This module provides the immutable configuration object that controls how a
channel is assembled, together with presets and dict/JSON/file loading.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from rss_channel.shared.errors import ConfigValidationError


@dataclass(frozen=True)
class ChannelConfig:
    """Configuration for channel assembly.

    Thread-safe due to frozen dataclass implementation, so a single instance
    can be shared by concurrent builders.

    Attributes:
        validate: Run field validation on the feed and every item
        correlation_id: Optional correlation ID attached to log records
        name: Optional preset name
        description: Optional human-readable description
    """

    validate: bool = True
    correlation_id: Optional[str] = None

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate channel configuration."""
        if not isinstance(self.validate, bool):
            raise ConfigValidationError(
                "validate must be a boolean", field_name="validate"
            )
        if self.correlation_id is not None and not isinstance(self.correlation_id, str):
            raise ConfigValidationError(
                "correlation_id must be a string or None",
                field_name="correlation_id"
            )

    def override(self, **kwargs: Any) -> "ChannelConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ChannelConfig.strict()
            >>> config.override(correlation_id="req-42").validate
            True
        """
        try:
            return replace(self, **kwargs)
        except TypeError as e:
            raise ConfigValidationError(f"Invalid configuration override: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChannelConfig":
        """Create configuration from dictionary.

        Raises:
            ConfigValidationError: If the dictionary holds unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                field_name=unknown[0]
            )
        return cls(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ChannelConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ChannelConfig":
        """Load configuration from a JSON file, falling back to defaults if absent."""
        path = Path(config_path)
        if not path.exists():
            return cls()
        return cls.from_json(path.read_text(encoding="utf-8"))

    # Preset factory methods
    @classmethod
    def strict(cls) -> "ChannelConfig":
        """Create configuration preset that validates every description."""
        return cls(
            validate=True,
            name="strict",
            description="Reject descriptions that do not conform to RSS 2.0"
        )

    @classmethod
    def permissive(cls) -> "ChannelConfig":
        """Create configuration preset that skips validation entirely."""
        return cls(
            validate=False,
            name="permissive",
            description="Render descriptions verbatim without field validation"
        )
