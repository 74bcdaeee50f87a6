"""
Date-of-birth parsing and elapsed-time helpers.
"""
from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Final, Optional

from healthquote import config


# Strict zero-padded calendar date; strptime alone accepts "1980-1-5"
_ISO_DATE_RE: Final = re.compile(r"^\d{4}-\d{2}-\d{2}$")

AGE_UNITS: Final[dict] = {
    "year": "years",
    "years": "years",
    "month": "months",
    "months": "months",
    "week": "weeks",
    "weeks": "weeks",
    "day": "days",
    "days": "days",
}


def parse_date_of_birth(value: object, fmt: Optional[str] = None) -> Optional[date]:
    """
    Strictly parse a stored date of birth.

    Returns:
        The parsed date, or None when the value is missing or malformed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    fmt = fmt or config.DOB_FORMAT
    text = value.strip()
    if fmt == "%Y-%m-%d" and not _ISO_DATE_RE.match(text):
        return None
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        return None


def add_months(start: date, months: int) -> date:
    """Shift `start` by whole months, clamping to the end of shorter months."""
    index = start.month - 1 + months
    year = start.year + index // 12
    month = index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def whole_months_between(start: date, end: date) -> int:
    """
    Number of whole months from `start` to `end`, floored.

    Negative when `end` is before `start`.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    while add_months(start, months) > end:
        months -= 1
    while add_months(start, months + 1) <= end:
        months += 1
    return months


def normalize_unit(unit: str) -> str:
    """
    Map a unit name (singular or plural, any case) to its plural form.

    Raises:
        ValueError: If `unit` is not one of years, months, weeks or days.
    """
    normalized = AGE_UNITS.get(unit.strip().lower()) if isinstance(unit, str) else None
    if normalized is None:
        raise ValueError(f"Unsupported age unit {unit!r}")
    return normalized


def elapsed(start: date, end: date, unit: str = "years") -> int:
    """
    Elapsed time from `start` to `end` in `unit`, floored toward negative infinity.

    Raises:
        ValueError: If `unit` is not supported.
    """
    normalized = normalize_unit(unit)

    if normalized == "years":
        return whole_months_between(start, end) // 12
    if normalized == "months":
        return whole_months_between(start, end)

    days = (end - start).days
    if normalized == "weeks":
        return days // 7
    return days


__all__ = [
    "AGE_UNITS",
    "normalize_unit",
    "parse_date_of_birth",
    "add_months",
    "whole_months_between",
    "elapsed",
]
