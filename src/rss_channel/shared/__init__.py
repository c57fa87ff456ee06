"""Shared utilities for RSS channel construction.

This module provides the configuration object, exception hierarchy and
logging helpers used across all layers.
"""

from .config import ChannelConfig
from .errors import (
    ChannelError,
    ConfigError,
    ConfigValidationError,
    FeedValidationError,
    MissingRequiredContent,
    MissingRequiredField,
    UnrecognizedField,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ChannelConfig",
    "ChannelError",
    "ConfigError",
    "ConfigValidationError",
    "FeedValidationError",
    "MissingRequiredContent",
    "MissingRequiredField",
    "UnrecognizedField",
    "CorrelationLogger",
    "get_logger",
]
