"""Command-line interface module for RSS Channel.

This module provides the ``rss-channel`` tool for rendering and validating
JSON feed descriptions.
"""

from .main import main

__all__ = ["main"]
