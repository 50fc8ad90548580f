"""Checked enumerations and parsers for interactive input.

Every function either returns a validated value or raises an InputError
subclass whose message names what was wrong. Nothing here retries.
"""

from kakeibo.domain.errors import (
    InputParseError,
    InvalidCategoryError,
    InvalidRegistrationKindError,
    InvalidServiceTypeError,
)
from kakeibo.domain.models import MAX_AMOUNT, Money, RegistrationKind, ServiceType

CATEGORY_CODES = (0, 1, 2)


def parse_code(text: str, field: str) -> int:
    """Parse a numeric menu code.

    Args:
        text: Raw input line.
        field: Field name used in the error message (e.g. "登録種別").

    Returns:
        Parsed non-negative integer.

    Raises:
        InputParseError: If the input is not a non-negative integer.
    """
    value = text.strip()
    if not value.isdecimal():
        raise InputParseError(f"{field}は数値で入力してください: {text.strip()!r}")
    return int(value)


def parse_amount(text: str) -> Money:
    """Parse an amount in yen.

    Args:
        text: Raw input line.

    Returns:
        Amount between 0 and MAX_AMOUNT.

    Raises:
        InputParseError: If the input is not a non-negative integer or is too large.
    """
    value = text.strip()
    if not value.isdecimal():
        raise InputParseError(f"金額は数値で入力してください: {value!r}")
    amount = int(value)
    if amount > MAX_AMOUNT:
        raise InputParseError(f"金額は{MAX_AMOUNT}円以下で入力してください: {value!r}")
    return Money(amount)


def validate_service_type(code: int) -> ServiceType:
    """Check the top-level mode selector (0: register, 1: summarize)."""
    if code not in (ServiceType.REGISTER, ServiceType.SUMMARIZE):
        raise InvalidServiceTypeError(f"入力値が不正です: {code}")
    return ServiceType(code)


def validate_registration_kind(code: int) -> RegistrationKind:
    """Check the registration kind (0: income, 1: expense)."""
    if code not in (RegistrationKind.INCOME, RegistrationKind.EXPENSE):
        raise InvalidRegistrationKindError(f"登録種別の入力値が不正です: {code}")
    return RegistrationKind(code)


def validate_category_code(kind: RegistrationKind, code: int) -> int:
    """Check a category code for the given registration kind.

    Both kinds accept the same codes; only the prompt labels differ.

    Args:
        kind: Validated registration kind.
        code: Category code.

    Returns:
        The code, unchanged.

    Raises:
        InvalidCategoryError: If code is not 0, 1 or 2.
    """
    if code not in CATEGORY_CODES:
        raise InvalidCategoryError(f"カテゴリ入力値が不正です: {code}")
    return code
