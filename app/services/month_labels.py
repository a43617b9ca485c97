"""
Month-label parsing for planting schedule windows.

Schedules store each window boundary as a short "Month Day" label
("Mar 15", "March 15", "sept 1"). Labels carry no year; they are resolved
against a reference year at calendar-build time.

Never raises; an unparseable label yields None.
"""
import calendar
import re
from datetime import date
from typing import Optional

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_LEADING_DIGITS = re.compile(r"^(\d+)")

# Leap year used when validating labels without a concrete year, so "Feb 29" passes.
_VALIDATION_YEAR = 2024


def month_index(token: str) -> Optional[int]:
    """Return the 1-based month whose full name starts with token, or None."""
    token = token.strip().lower()
    if not token:
        return None
    for i, name in enumerate(MONTHS, start=1):
        if name.lower().startswith(token):
            return i
    return None


def parse_month_label(label: Optional[str], year: int) -> Optional[date]:
    """
    Parse a "Month Day" label into a date in the given year.

    The month token may be abbreviated to any prefix of the full name; the
    first matching month wins. The day token is read as its leading digits,
    so "15th" reads as 15. Returns None for a missing or unknown month, a
    missing day, or a day that does not exist in that month.
    """
    if not label or not isinstance(label, str):
        return None

    parts = label.split()
    if len(parts) < 2:
        return None

    month = month_index(parts[0])
    if month is None:
        return None

    match = _LEADING_DIGITS.match(parts[1])
    if not match:
        return None
    day = int(match.group(1))

    if day < 1 or day > calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)


def is_valid_month_label(label: str) -> bool:
    return parse_month_label(label, _VALIDATION_YEAR) is not None


def format_window(start: Optional[str], end: Optional[str]) -> str:
    if not start or not end:
        return "Not specified"
    return f"{start} - {end}"
