"""RSS Channel.

Builds validated RSS 2.0 documents from plain field descriptions and
serializes them to markup text, with a CDATA escape hatch for
pre-formatted content.

Progressive API Disclosure:
- Level 1: Simple functions - channel(), channel_xml()
- Level 2: Configured builder - ChannelBuilder class
"""

__version__ = "0.1.0"
__author__ = "RSS Channel Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured builder
from .api import ChannelBuilder, channel, channel_xml
from .character import cdata, escape

# Configuration and error types
from .shared import (
    ChannelConfig,
    ChannelError,
    FeedValidationError,
    MissingRequiredContent,
    MissingRequiredField,
    UnrecognizedField,
)

# Core tree objects
from .tree import Document, Element, serialize, tag

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple building functions
    "channel",
    "channel_xml",

    # Level 2: Configured builder class
    "ChannelBuilder",

    # Tree objects and helpers
    "Document",
    "Element",
    "tag",
    "serialize",
    "cdata",
    "escape",

    # Configuration and errors
    "ChannelConfig",
    "ChannelError",
    "FeedValidationError",
    "MissingRequiredContent",
    "MissingRequiredField",
    "UnrecognizedField",
]
