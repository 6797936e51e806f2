"""Date parsing utilities."""

import re
from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")
OVERALL = "overall"


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this month", etc.

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: Optional[str]) -> Optional[str]:
    """Normalize a month argument to YYYY-MM.

    Accepts "YYYY-MM", "overall" (no month filter, returns None) or anything
    parse_date understands, e.g. "this month" or "2024-03-15".

    Raises:
        ValueError: If the month cannot be parsed
    """
    if month_str is None:
        return None

    month_str = month_str.strip().lower()
    if month_str in ("", OVERALL):
        return None

    match = MONTH_PATTERN.match(month_str)
    if match:
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month '{month_str}'. Use YYYY-MM or 'overall'.")
        return f"{year:04d}-{month:02d}"

    try:
        return parse_date(month_str).strftime("%Y-%m")
    except ValueError:
        raise ValueError(f"Invalid month '{month_str}'. Use YYYY-MM or 'overall'.")
