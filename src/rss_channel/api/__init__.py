"""Public API for RSS channel construction."""

from .adapters import to_element_tree, to_lxml
from .channel import (
    ATOM_NAMESPACE,
    GENERATOR,
    ChannelBuilder,
    assemble,
    channel,
    channel_xml,
    flatten_entries,
    is_empty_input,
)

__all__ = [
    "to_element_tree",
    "to_lxml",
    "ATOM_NAMESPACE",
    "GENERATOR",
    "ChannelBuilder",
    "assemble",
    "channel",
    "channel_xml",
    "flatten_entries",
    "is_empty_input",
]
