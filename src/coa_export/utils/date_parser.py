"""Date parsing and formatting utilities."""

from datetime import date, datetime, timedelta
import re

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from coa_export.domain.errors import ValidationError, invalid_iso_date

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Used for the export date given on the command line. Supports:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this week", etc.

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
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e


def parse_iso_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` transaction date.

    Raises:
        ValidationError: If the value is not a real calendar date in that form
    """
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise ValidationError(invalid_iso_date(value))
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as e:
        raise ValidationError(invalid_iso_date(value)) from e


def format_us_date(value: str) -> str:
    """Reformat ``YYYY-MM-DD`` as ``MM/DD/YYYY``."""
    return parse_iso_date(value).strftime("%m/%d/%Y")


def format_day_first_date(value: str) -> str:
    """Reformat ``YYYY-MM-DD`` as ``DD/MM/YYYY``."""
    return parse_iso_date(value).strftime("%d/%m/%Y")
