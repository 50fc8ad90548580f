"""Domain models and types for kakeibo.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Business logic separated from the console and the store file
"""

from kakeibo.domain.models import Money, MonthKey, RegistrationKind, ServiceType

__all__ = ["Money", "MonthKey", "RegistrationKind", "ServiceType"]
