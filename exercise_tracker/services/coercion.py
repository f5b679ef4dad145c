"""
Exercise Tracker - Input Coercion Helpers
===========================================

What:  Best-effort conversion of form/query text into integers and dates,
       plus the fixed human-readable date rendering used in responses.
How:   Pure functions; `None` is the "not a number" / "invalid date" marker.
       Callers decide whether a marker is rejected (strict input) or handed
       to the store as-is.

Integer parsing is truncating and prefix-based:
    "30"    → 30        "30.9" → 30       "  12min" → 12
    "-5"    → -5        "0x1f" → 31       "abc"     → None

Dates are stored and compared in UTC:
    "2024-01-01"           → 2024-01-01 00:00 UTC
    "2024-01-01T10:30:00"  → 2024-01-01 10:30 UTC (no offset means UTC)
    "2024-01-01T10:30+02:00" → 2024-01-01 08:30 UTC
"""

import re
from datetime import datetime, timezone
from typing import Optional

_INT_PREFIX = re.compile(r"^\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")

# Formats accepted after ISO-8601 fails, including the rendered form itself
_FALLBACK_FORMATS = (
    "%a %b %d %Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
)

DATE_STRING_FORMAT = "%a %b %d %Y"


def parse_int(value: object) -> Optional[int]:
    """
    Parse the leading integer of `value`, ignoring anything after it.

    Returns None when no digits lead the string (after whitespace and sign).
    Already-numeric input is truncated toward zero.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)

    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    sign, digits = match.groups()
    number = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    return -number if sign == "-" else number


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a calendar date or date-time into an aware UTC datetime.

    Returns None for empty or unparseable input, and for values that fall
    outside the representable range once converted to UTC.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    parsed: Optional[datetime] = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in _FALLBACK_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None
    try:
        return as_utc(parsed)
    except OverflowError:
        # Shifting to UTC pushed it past year 1 or 9999
        return None


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive values (SQLite returns them naive); convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_date(value: datetime) -> str:
    """Render as e.g. "Mon Jan 01 2024" (no time-of-day component)."""
    return as_utc(value).strftime(DATE_STRING_FORMAT)
