"""Pure functions for the monthly balance summary.

This module contains the functional core for summarization:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations

All monetary amounts are in yen (Money type).
"""

from dataclasses import dataclass

import pandas as pd

from kakeibo.dates import format_month
from kakeibo.domain.entries import Entry, month_key, signed_amount
from kakeibo.domain.models import Money, MonthKey


@dataclass(frozen=True)
class MonthlyTotal:
    """Immutable net balance for one calendar month."""

    month: MonthKey
    total: Money


def month_groups(entries: list[Entry]) -> dict[MonthKey, list[Entry]]:
    """Bucket entries by calendar month.

    Entries are grouped by (year, month); the day is ignored.

    Args:
        entries: Ledger entries.

    Returns:
        Mapping of month to its entries, oldest month first, ledger order
        within each month.
    """
    if not entries:
        return {}

    frame = pd.DataFrame(
        {
            "year": [entry.date.year for entry in entries],
            "month": [entry.date.month for entry in entries],
        }
    )
    positions = frame.groupby(["year", "month"], sort=True).indices

    return {
        MonthKey(int(year), int(month)): [entries[i] for i in positions[(year, month)]]
        for year, month in sorted(positions)
    }


def distinct_month_keys(entries: list[Entry]) -> list[MonthKey]:
    """Get the months present in a ledger, oldest first."""
    return list(month_groups(entries))


def entries_in_month(entries: list[Entry], key: MonthKey) -> list[Entry]:
    """Filter entries to those dated in the given month, keeping ledger order."""
    return [entry for entry in entries if month_key(entry) == key]


def sum_signed_amounts(entries: list[Entry]) -> Money:
    """Sum signed amounts (income positive, expense negative)."""
    return Money(sum(signed_amount(entry) for entry in entries))


def monthly_totals(entries: list[Entry]) -> list[MonthlyTotal]:
    """Compute the net balance of each month present in the ledger.

    Months whose entries cancel out are still reported with a zero total.
    Totals are summed as Python ints.

    Args:
        entries: Ledger entries.

    Returns:
        One MonthlyTotal per month, in ascending calendar order.
    """
    return [
        MonthlyTotal(month=key, total=sum_signed_amounts(group))
        for key, group in month_groups(entries).items()
    ]


def format_total(total: Money) -> str:
    """Format a total with an explicit sign.

    Args:
        total: Net amount.

    Returns:
        "+N" for positive, "-N" for negative, "0" for zero.
    """
    if total > 0:
        return f"+{total}"
    return f"{total}"


def format_summary_line(monthly: MonthlyTotal) -> str:
    """Format one report line, e.g. "2022/1の収支は+195000円でした"."""
    return f"{format_month(monthly.month)}の収支は{format_total(monthly.total)}円でした"


def summary_lines(entries: list[Entry]) -> list[str]:
    """Build the full monthly report for a ledger.

    Args:
        entries: Ledger entries.

    Returns:
        One formatted line per month, oldest first.
    """
    return [format_summary_line(monthly) for monthly in monthly_totals(entries)]
