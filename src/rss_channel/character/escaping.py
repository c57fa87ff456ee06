"""Markup escaping for element text content.

Text bound for an element body is escaped here unless the caller wrapped it
in a CDATA section, which is the explicit opt-out for pre-formatted or
already-escaped content.
"""

from typing import Dict, Optional

CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"

# Only these four characters are replaced; whitespace and Unicode are untouched
ESCAPE_TABLE: Dict[int, str] = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
})


def is_raw(text: str) -> bool:
    """Check whether ``text`` is wrapped as a CDATA section."""
    return text.startswith(CDATA_OPEN) and text.endswith(CDATA_CLOSE)


def escape(text: Optional[str]) -> Optional[str]:
    """Return ``text`` made safe for inclusion as element content.

    Args:
        text: Text to escape, or None

    Returns:
        None for None input, the unchanged text for a CDATA-wrapped value,
        otherwise the text with ``& < > "`` replaced by entity references

    Examples:
        >>> escape('Fish & "Chips"')
        'Fish &amp; &quot;Chips&quot;'
        >>> escape("<![CDATA[<b>bold</b>]]>")
        '<![CDATA[<b>bold</b>]]>'
    """
    if text is None:
        return None
    if is_raw(text):
        return text
    return text.translate(ESCAPE_TABLE)


def cdata(text: str) -> str:
    """Wrap ``text`` so that it bypasses escaping."""
    return f"{CDATA_OPEN}{text}{CDATA_CLOSE}"
