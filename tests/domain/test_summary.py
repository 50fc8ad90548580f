"""Tests for kakeibo.domain.summary pure functions."""

from datetime import date

from kakeibo.domain.entries import Entry, ExpenseCategory, IncomeCategory
from kakeibo.domain.models import MAX_AMOUNT, Money, MonthKey
from kakeibo.domain.summary import (
    MonthlyTotal,
    distinct_month_keys,
    entries_in_month,
    month_groups,
    format_summary_line,
    format_total,
    monthly_totals,
    sum_signed_amounts,
    summary_lines,
)


class TestDistinctMonthKeys:
    """Tests for distinct_month_keys."""

    def test_deduplicates_and_sorts(self, sample_entries: list[Entry]) -> None:
        """Should return each month once, oldest first."""
        assert distinct_month_keys(sample_entries) == [
            MonthKey(2022, 1),
            MonthKey(2022, 2),
            MonthKey(2022, 4),
        ]

    def test_sorts_across_years(self) -> None:
        """December of one year comes before January of the next."""
        entries = [
            Entry("a", ExpenseCategory.FOOD, Money(1), date(2023, 1, 1)),
            Entry("b", ExpenseCategory.FOOD, Money(1), date(2022, 12, 31)),
        ]
        assert distinct_month_keys(entries) == [MonthKey(2022, 12), MonthKey(2023, 1)]


class TestEntriesInMonth:
    """Tests for entries_in_month."""

    def test_filters_by_year_and_month(self, sample_entries: list[Entry]) -> None:
        """Should keep only entries from the requested month."""
        assert entries_in_month(sample_entries, MonthKey(2022, 4)) == [sample_entries[4]]

    def test_keeps_ledger_order(self, sample_entries: list[Entry]) -> None:
        """Should preserve insertion order."""
        assert entries_in_month(sample_entries, MonthKey(2022, 1)) == sample_entries[:3]

    def test_no_match(self, sample_entries: list[Entry]) -> None:
        """A month with no entries yields an empty list."""
        assert entries_in_month(sample_entries, MonthKey(2022, 3)) == []


class TestSumSignedAmounts:
    """Tests for sum_signed_amounts."""

    def test_january_total(self, sample_entries: list[Entry]) -> None:
        """-5000 + 300000 - 100000 = +195000."""
        assert sum_signed_amounts(sample_entries[:3]) == 195000

    def test_empty(self) -> None:
        """No entries sum to zero."""
        assert sum_signed_amounts([]) == 0


class TestMonthlyTotals:
    """Tests for monthly_totals."""

    def test_sample_ledger(self, sample_entries: list[Entry]) -> None:
        """Should produce the expected per-month totals in order."""
        assert monthly_totals(sample_entries) == [
            MonthlyTotal(MonthKey(2022, 1), Money(195000)),
            MonthlyTotal(MonthKey(2022, 2), Money(-3000)),
            MonthlyTotal(MonthKey(2022, 4), Money(-10000)),
        ]

    def test_totals_are_plain_ints(self, sample_entries: list[Entry]) -> None:
        """Totals should not leak numpy scalar types."""
        for monthly in monthly_totals(sample_entries):
            assert type(monthly.total) is int
            assert type(monthly.month.year) is int

    def test_matches_per_month_filtering(self, sample_entries: list[Entry]) -> None:
        """Grouped totals should agree with filter-then-sum."""
        expected = [
            MonthlyTotal(key, sum_signed_amounts(entries_in_month(sample_entries, key)))
            for key in distinct_month_keys(sample_entries)
        ]
        assert monthly_totals(sample_entries) == expected

    def test_zero_month_is_reported(self) -> None:
        """A month whose entries cancel out is still present."""
        entries = [
            Entry("給料", IncomeCategory.SALARY, Money(1000), date(2022, 5, 1)),
            Entry("外食", ExpenseCategory.FOOD, Money(1000), date(2022, 5, 2)),
        ]
        assert monthly_totals(entries) == [MonthlyTotal(MonthKey(2022, 5), Money(0))]

    def test_same_month_different_year(self) -> None:
        """January 2021 and January 2022 are separate buckets."""
        entries = [
            Entry("a", IncomeCategory.BONUS, Money(100), date(2022, 1, 5)),
            Entry("b", ExpenseCategory.HOBBY, Money(40), date(2021, 1, 5)),
        ]
        assert monthly_totals(entries) == [
            MonthlyTotal(MonthKey(2021, 1), Money(-40)),
            MonthlyTotal(MonthKey(2022, 1), Money(100)),
        ]

    def test_empty_ledger(self) -> None:
        """An empty ledger has no months."""
        assert monthly_totals([]) == []

    def test_large_totals_do_not_wrap(self) -> None:
        """Totals beyond the int64 range stay exact and positive."""
        entries = [
            Entry(f"賞与{i}", IncomeCategory.BONUS, MAX_AMOUNT, date(2022, 1, 1 + i % 28)) for i in range(3)
        ] + [Entry("big", IncomeCategory.OTHER, Money(2**62), date(2022, 1, 5)) for _ in range(2)]

        (monthly,) = monthly_totals(entries)

        assert monthly.total == 3 * MAX_AMOUNT + 2**63
        assert monthly.total == sum_signed_amounts(entries)
        assert format_total(monthly.total).startswith("+")


class TestMonthGroups:
    """Tests for month_groups."""

    def test_groups_in_month_order(self, sample_entries: list[Entry]) -> None:
        """Should bucket by month, oldest first, keeping ledger order."""
        groups = month_groups(sample_entries)

        assert list(groups) == [MonthKey(2022, 1), MonthKey(2022, 2), MonthKey(2022, 4)]
        assert groups[MonthKey(2022, 1)] == sample_entries[:3]
        assert groups[MonthKey(2022, 4)] == [sample_entries[4]]

    def test_keys_are_plain_ints(self, sample_entries: list[Entry]) -> None:
        """Month keys should not leak numpy scalar types."""
        for key in month_groups(sample_entries):
            assert type(key.year) is int
            assert type(key.month) is int

    def test_empty_ledger(self) -> None:
        """An empty ledger has no groups."""
        assert month_groups([]) == {}


class TestFormatting:
    """Tests for format_total and format_summary_line."""

    def test_positive_has_plus(self) -> None:
        """Positive totals get a leading '+'."""
        assert format_total(Money(1000)) == "+1000"

    def test_negative_has_minus(self) -> None:
        """Negative totals keep their '-'."""
        assert format_total(Money(-1000)) == "-1000"

    def test_zero_has_no_sign(self) -> None:
        """Zero is rendered bare."""
        assert format_total(Money(0)) == "0"

    def test_summary_line(self) -> None:
        """Should render the report line without spaces."""
        line = format_summary_line(MonthlyTotal(MonthKey(2022, 1), Money(195000)))
        assert line == "2022/1の収支は+195000円でした"


class TestSummaryLines:
    """Tests for summary_lines."""

    def test_end_to_end_report(self, sample_entries: list[Entry]) -> None:
        """Should produce one line per month, oldest first."""
        assert summary_lines(sample_entries) == [
            "2022/1の収支は+195000円でした",
            "2022/2の収支は-3000円でした",
            "2022/4の収支は-10000円でした",
        ]

    def test_idempotent(self, sample_entries: list[Entry]) -> None:
        """Summarizing twice gives the same report."""
        assert summary_lines(sample_entries) == summary_lines(sample_entries)
