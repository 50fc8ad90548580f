"""JSON encoding of ledger entries.

Each entry is stored as::

    {
      "name": "給料",
      "category": {"Income": "Salary"},
      "price": 300000,
      "date": "2022-01-20"
    }

The category object has exactly one key naming the variant, whose value is
the subtype name.
"""

import json
from datetime import datetime
from typing import Any

from kakeibo.dates import ENTRY_DATE_FORMAT, format_entry_date
from kakeibo.domain.entries import Category, Entry, ExpenseCategory, IncomeCategory
from kakeibo.domain.errors import DeserializationError
from kakeibo.domain.models import MAX_AMOUNT, Money

ENTRY_FIELDS = {"name", "category", "price", "date"}

VARIANTS: dict[str, type[IncomeCategory] | type[ExpenseCategory]] = {
    "Income": IncomeCategory,
    "Expense": ExpenseCategory,
}


def category_to_dict(category: Category) -> dict[str, str]:
    """Encode a category as a single-key variant object."""
    variant = "Income" if isinstance(category, IncomeCategory) else "Expense"
    return {variant: category.value}


def category_from_dict(data: Any, index: int) -> Category:
    """Decode a variant object into a category.

    Args:
        data: Decoded JSON value of the "category" field.
        index: Entry position, used in error messages.

    Returns:
        Category.

    Raises:
        DeserializationError: If the value is not a known variant and subtype.
    """
    if not isinstance(data, dict) or len(data) != 1:
        raise DeserializationError(f"デシリアライズに失敗しました: entry {index}: category must be a single-key object")

    ((variant, subtype),) = data.items()
    enum_type = VARIANTS.get(variant)
    if enum_type is None:
        raise DeserializationError(f"デシリアライズに失敗しました: entry {index}: unknown category {variant!r}")

    try:
        return enum_type(subtype)
    except ValueError as e:
        raise DeserializationError(
            f"デシリアライズに失敗しました: entry {index}: unknown {variant} subtype {subtype!r}"
        ) from e


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    """Encode an entry for the store file."""
    return {
        "name": entry.name,
        "category": category_to_dict(entry.category),
        "price": int(entry.amount),
        "date": format_entry_date(entry.date),
    }


def entry_from_dict(data: Any, index: int = 0) -> Entry:
    """Decode one stored entry.

    Args:
        data: Decoded JSON object.
        index: Entry position, used in error messages.

    Returns:
        Entry.

    Raises:
        DeserializationError: If any field is missing, unexpected or malformed.
    """
    if not isinstance(data, dict):
        raise DeserializationError(f"デシリアライズに失敗しました: entry {index}: expected an object")

    keys = set(data)
    if keys != ENTRY_FIELDS:
        missing = sorted(ENTRY_FIELDS - keys)
        extra = sorted(keys - ENTRY_FIELDS)
        raise DeserializationError(
            f"デシリアライズに失敗しました: entry {index}: missing fields {missing}, unexpected fields {extra}"
        )

    name = data["name"]
    if not isinstance(name, str):
        raise DeserializationError(f"デシリアライズに失敗しました: entry {index}: name must be a string")

    price = data["price"]
    # bool is an int subclass in Python but never a valid price
    if isinstance(price, bool) or not isinstance(price, int) or not 0 <= price <= MAX_AMOUNT:
        raise DeserializationError(
            f"デシリアライズに失敗しました: entry {index}: price must be an integer between 0 and {MAX_AMOUNT}"
        )

    raw_date = data["date"]
    if not isinstance(raw_date, str):
        raise DeserializationError(f"デシリアライズに失敗しました: entry {index}: date must be a string")
    try:
        entry_date = datetime.strptime(raw_date, ENTRY_DATE_FORMAT).date()
    except ValueError as e:
        raise DeserializationError(
            f"デシリアライズに失敗しました: entry {index}: invalid date {raw_date!r}"
        ) from e

    return Entry(
        name=name,
        category=category_from_dict(data["category"], index),
        amount=Money(price),
        date=entry_date,
    )


def dumps(entries: list[Entry]) -> str:
    """Serialize a ledger as pretty-printed JSON with a trailing newline."""
    payload = [entry_to_dict(entry) for entry in entries]
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def loads(text: str) -> list[Entry]:
    """Deserialize a ledger.

    Args:
        text: Store file content.

    Returns:
        Entries in stored order.

    Raises:
        DeserializationError: If the content is not a valid ledger.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"デシリアライズに失敗しました: {e}") from e

    if not isinstance(payload, list):
        raise DeserializationError("デシリアライズに失敗しました: expected a list of entries")

    return [entry_from_dict(item, index) for index, item in enumerate(payload)]
