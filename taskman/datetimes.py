"""Date-time helpers for the ``YYYY-MM-DD HH:MM:SS`` storage format."""

from __future__ import annotations

import re
from datetime import datetime

_PATTERN = re.compile(
    r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})(?:[.,](\d+))?",
    re.ASCII,
)


def now() -> datetime:
    """Return the current local time."""
    return datetime.now()


def format_datetime(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DD HH:MM:SS``, dropping sub-second parts."""
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def parse_datetime(text: str) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` string, optionally wrapped in double quotes.

    A fractional second directly after the seconds field is accepted.
    Raises ValueError when the text does not match the format.
    """
    stripped = text.strip('"')
    match = _PATTERN.fullmatch(stripped)
    if match is None:
        raise ValueError(f"cannot parse {stripped!r} as a date-time")
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    fraction = match.group(7) or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    return datetime(year, month, day, hour, minute, second, microsecond)