"""Date utilities for kakeibo.

Pure functions for entry date parsing and month formatting.
"""

from datetime import date, datetime

from kakeibo.domain.errors import InputParseError
from kakeibo.domain.models import MonthKey

ENTRY_DATE_FORMAT = "%Y-%m-%d"


def parse_entry_date(text: str) -> date:
    """Parse an entry date.

    Args:
        text: Date in YYYY-MM-DD format. Surrounding whitespace is ignored.

    Returns:
        Parsed date.

    Raises:
        InputParseError: If the text is not a valid YYYY-MM-DD date.
    """
    value = text.strip()
    try:
        return datetime.strptime(value, ENTRY_DATE_FORMAT).date()
    except ValueError as e:
        raise InputParseError(f"日付はyyyy-mm-ddの形式で入力してください: {value!r}") from e


def format_entry_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime(ENTRY_DATE_FORMAT)


def parse_month(text: str) -> MonthKey:
    """Parse a month filter.

    Args:
        text: Month in YYYY-MM format.

    Returns:
        MonthKey for the month.

    Raises:
        InputParseError: If the text is not a valid YYYY-MM month.
    """
    try:
        dt = datetime.strptime(text.strip(), "%Y-%m")
    except ValueError as e:
        raise InputParseError(f"月はyyyy-mmの形式で入力してください: {text.strip()!r}") from e
    return MonthKey(dt.year, dt.month)


def format_month(key: MonthKey) -> str:
    """Format a month as "2022/1" (no zero padding)."""
    return f"{key.year}/{key.month}"
