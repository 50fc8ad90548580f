"""Pure functions for ledger entries and the category taxonomy.

This module contains the functional core for entry modeling:
- No I/O operations (no files, no console)
- No side effects
- Pure data transformations

All monetary amounts are in yen (Money type).
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from kakeibo.domain.errors import InvalidCategoryError, InvalidRegistrationKindError
from kakeibo.domain.models import Money, MonthKey, RegistrationKind


class IncomeCategory(Enum):
    """Income subtypes, in prompt code order."""

    SALARY = "Salary"
    BONUS = "Bonus"
    OTHER = "Other"


class ExpenseCategory(Enum):
    """Expense subtypes, in prompt code order."""

    FOOD = "Food"
    HOBBY = "Hobby"
    OTHER = "Other"


Category = IncomeCategory | ExpenseCategory

CATEGORY_LABELS: dict[Category, str] = {
    IncomeCategory.SALARY: "給与",
    IncomeCategory.BONUS: "ボーナス",
    IncomeCategory.OTHER: "その他",
    ExpenseCategory.FOOD: "食費",
    ExpenseCategory.HOBBY: "趣味",
    ExpenseCategory.OTHER: "その他",
}


@dataclass(frozen=True)
class Entry:
    """Immutable ledger entry.

    The amount is always a magnitude; use signed_amount() for the signed value.
    """

    name: str
    category: Category
    amount: Money
    date: date


def subtypes_for(kind: RegistrationKind | int) -> list[Category]:
    """Get the fixed subtype list for a registration kind.

    Args:
        kind: Income or expense.

    Returns:
        Subtypes indexed by category code.

    Raises:
        InvalidRegistrationKindError: If kind is not income or expense.
    """
    if kind == RegistrationKind.INCOME:
        return list(IncomeCategory)
    if kind == RegistrationKind.EXPENSE:
        return list(ExpenseCategory)
    raise InvalidRegistrationKindError("登録種別の入力値が不正です")


def classify(kind: RegistrationKind | int, category_code: int) -> Category:
    """Map a registration kind and category code to a category.

    Args:
        kind: 0 for income, 1 for expense.
        category_code: Index into the kind's subtype list (0, 1 or 2).

    Returns:
        The matching category.

    Raises:
        InvalidRegistrationKindError: If kind is out of range.
        InvalidCategoryError: If category_code is out of range.
    """
    subtypes = subtypes_for(kind)
    if not 0 <= category_code < len(subtypes):
        raise InvalidCategoryError(f"不正なカテゴリ種別です: {category_code}")
    return subtypes[category_code]


def is_income(category: Category) -> bool:
    """Check whether a category is an income variant."""
    return isinstance(category, IncomeCategory)


def kind_of(category: Category) -> RegistrationKind:
    """Get the registration kind a category belongs to."""
    return RegistrationKind.INCOME if is_income(category) else RegistrationKind.EXPENSE


def signed_amount(entry: Entry) -> Money:
    """Get the amount with its sign derived from the category.

    Args:
        entry: Ledger entry.

    Returns:
        Positive amount for income, negative for expense.
    """
    if is_income(entry.category):
        return Money(entry.amount)
    return Money(-entry.amount)


def month_key(entry: Entry) -> MonthKey:
    """Get the (year, month) bucket of an entry. The day is ignored."""
    return MonthKey(entry.date.year, entry.date.month)


def category_label(category: Category) -> str:
    """Get the display label for a category."""
    return CATEGORY_LABELS[category]


def category_choices(kind: RegistrationKind) -> list[tuple[int, str]]:
    """Get the (code, label) pairs offered by the category prompt.

    Args:
        kind: Income or expense.

    Returns:
        List of (code, label) tuples in code order.
    """
    return [(code, category_label(category)) for code, category in enumerate(subtypes_for(kind))]


def format_choices(choices: list[tuple[int, str]]) -> str:
    """Format prompt choices as "(0:給与, 1:ボーナス, 2:その他)"."""
    return "(" + ", ".join(f"{code}:{label}" for code, label in choices) + ")"


def build_entry(
    kind: RegistrationKind,
    name: str,
    category_code: int,
    amount: Money,
    entry_date: date,
) -> Entry:
    """Build a new entry from collected registration input.

    Args:
        kind: Validated registration kind.
        name: Item name; surrounding whitespace is trimmed, empty is allowed.
        category_code: Category code for the kind.
        amount: Non-negative amount in yen.
        entry_date: Transaction date.

    Returns:
        New Entry.

    Raises:
        InvalidCategoryError: If category_code is out of range.
    """
    return Entry(
        name=name.strip(),
        category=classify(kind, category_code),
        amount=amount,
        date=entry_date,
    )
