"""Strict date parsing for travel history exports and trip spreadsheets."""

import re
from datetime import date
from typing import Optional

from dateutil.parser import isoparse

# (regex, group order) tried in order; the separator is part of each pattern
_PATTERNS = [
    (re.compile(r'(\d{2})/(\d{2})/(\d{4})', re.ASCII), ("day", "month", "year")),  # DD/MM/YYYY
    (re.compile(r'(\d{4})-(\d{2})-(\d{2})', re.ASCII), ("year", "month", "day")),  # YYYY-MM-DD
    (re.compile(r'(\d{2})-(\d{2})-(\d{4})', re.ASCII), ("day", "month", "year")),  # DD-MM-YYYY
]


class DateParseError(ValueError):
    """Raised by parse_date_unsafe when a string is not a valid date."""

    def __init__(self, raw: str):
        super().__init__(f"Invalid date: {raw!r}")
        self.raw = raw


def parse_date(raw: Optional[str]) -> Optional[str]:
    """Parse a date string to ISO format (YYYY-MM-DD), or None if invalid.

    Handles:
      - DD/MM/YYYY
      - YYYY-MM-DD
      - DD-MM-YYYY

    Impossible calendar dates (31/04, 29/02 outside leap years) return None
    rather than rolling over into the next month.
    """
    if not raw:
        return None

    raw = raw.strip()

    for regex, order in _PATTERNS:
        m = regex.fullmatch(raw)
        if not m:
            continue
        fields = dict(zip(order, (int(g) for g in m.groups())))
        try:
            return date(fields["year"], fields["month"], fields["day"]).isoformat()
        except ValueError:
            return None

    return None


def parse_date_unsafe(raw: str) -> str:
    """Like parse_date, but raises DateParseError for input it cannot parse."""
    result = parse_date(raw)
    if result is None:
        raise DateParseError(raw)
    return result


def format_display_date(iso: Optional[str]) -> str:
    """YYYY-MM-DD -> DD/MM/YYYY. Empty in, empty out."""
    if not iso:
        return ""
    year, month, day = iso.split("-")
    return f"{day}/{month}/{year}"


def days_between(start_iso: str, end_iso: str) -> int:
    """Whole days from start to end (negative if end is earlier)."""
    try:
        start = isoparse(start_iso).date()
        end = isoparse(end_iso).date()
    except ValueError:
        raise DateParseError(f"{start_iso} / {end_iso}") from None
    return (end - start).days
