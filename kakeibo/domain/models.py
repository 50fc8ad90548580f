"""Domain type definitions for kakeibo.

These types provide semantic clarity and help with type checking:
- Money: Amount in yen (no minor unit)
- MonthKey: (year, month) pair used to bucket entries
- RegistrationKind: Whether an entry is income or expense
- ServiceType: Which workflow the user asked for
"""

from datetime import date
from enum import IntEnum
from typing import NamedTuple, NewType

# Yen has no minor unit, so amounts are plain integers
Money = NewType("Money", int)

# Largest amount a single entry may carry (unsigned 32-bit)
MAX_AMOUNT = Money(4_294_967_295)


class MonthKey(NamedTuple):
    """Calendar month used as a grouping key.

    Tuple ordering is chronological, so sorted keys are in calendar order.
    """

    year: int
    month: int

    def first_day(self) -> date:
        """Return the first day of this month."""
        return date(self.year, self.month, 1)


class RegistrationKind(IntEnum):
    """Numeric codes accepted by the registration kind prompt."""

    INCOME = 0
    EXPENSE = 1


class ServiceType(IntEnum):
    """Numeric codes accepted by the top-level mode prompt."""

    REGISTER = 0
    SUMMARIZE = 1
