"""Shared fixtures for kakeibo tests."""

from datetime import date

import pytest

from kakeibo.domain.entries import Entry, ExpenseCategory, IncomeCategory
from kakeibo.domain.models import Money


@pytest.fixture
def sample_entries() -> list[Entry]:
    """Five entries across January, February and April 2022."""
    return [
        Entry("新年会", ExpenseCategory.FOOD, Money(5000), date(2022, 1, 10)),
        Entry("給料", IncomeCategory.SALARY, Money(300000), date(2022, 1, 20)),
        Entry("旅行", ExpenseCategory.HOBBY, Money(100000), date(2022, 1, 30)),
        Entry("外食", ExpenseCategory.FOOD, Money(3000), date(2022, 2, 15)),
        Entry("歓迎会", ExpenseCategory.OTHER, Money(10000), date(2022, 4, 15)),
    ]
