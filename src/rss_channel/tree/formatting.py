"""Per-field formatting applied before a value becomes element content."""

from datetime import date, datetime, timedelta, timezone
from typing import Any, FrozenSet, Optional

from rss_channel.character import escape

DATE_FIELDS: FrozenSet[str] = frozenset({"pubDate", "lastBuildDate"})
TEXT_FIELDS: FrozenSet[str] = frozenset({"title", "link", "description", "author"})

# RFC 822 names are fixed English regardless of the process locale
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_date(value: Any) -> Optional[str]:
    """Render a date/time as ``Tue, 03 Jun 2008 11:05:30 +0000``.

    Naive datetimes and plain dates are taken as UTC. Aware datetimes keep
    their own offset. Strings are assumed to be formatted already and are
    returned unchanged.
    """
    if value is None or isinstance(value, str):
        return value

    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    else:
        raise TypeError(
            f"Date field value must be a datetime, date or string, "
            f"not {type(value).__name__}"
        )

    return "{day}, {dd:02d} {mon} {yyyy:04d} {time} {offset}".format(
        day=_DAY_NAMES[moment.weekday()],
        dd=moment.day,
        mon=_MONTH_NAMES[moment.month - 1],
        yyyy=moment.year,
        time=moment.strftime("%H:%M:%S"),
        offset=_format_offset(moment.utcoffset()),
    )


def _format_offset(offset: Optional[timedelta]) -> str:
    """Render a UTC offset as ``+HHMM``, dropping any seconds component."""
    if offset is None:
        return "+0000"
    sign = "-" if offset < timedelta(0) else "+"
    hours, minutes = divmod(int(abs(offset).total_seconds()) // 60, 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_field(name: str, value: Any) -> Any:
    """Map a field value to its canonical element content.

    Args:
        name: Field name the value belongs to
        value: Raw value from the description

    Returns:
        Formatted date text for date fields, escaped text for free-text
        fields, otherwise the value unchanged
    """
    if name in DATE_FIELDS:
        return format_date(value)
    if name in TEXT_FIELDS and isinstance(value, str):
        return escape(value)
    return value
