"""Character-level processing for element text content."""

from .escaping import CDATA_CLOSE, CDATA_OPEN, cdata, escape, is_raw

__all__ = [
    "CDATA_CLOSE",
    "CDATA_OPEN",
    "cdata",
    "escape",
    "is_raw",
]
