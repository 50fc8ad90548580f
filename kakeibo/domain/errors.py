"""Exception hierarchy for kakeibo.

The functional core raises these; only the command layer turns them into a
console message and a non-zero exit.
"""


class KakeiboError(Exception):
    """Base error carrying a message meant for the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputError(KakeiboError, ValueError):
    """Malformed or out-of-range user input."""


class InputParseError(InputError):
    """Input could not be parsed as the expected number or date."""


class InvalidServiceTypeError(InputError):
    """Mode selector outside {0, 1}."""


class InvalidRegistrationKindError(InputError):
    """Registration kind outside {0, 1}."""


class InvalidCategoryError(InputError):
    """Category code outside {0, 1, 2}."""


class StoreError(KakeiboError):
    """Failure reading or writing the ledger store."""


class StoreReadError(StoreError):
    """Store is missing or cannot be read where it is required."""


class DeserializationError(StoreError):
    """Store exists but its content is not a valid ledger."""


class StoreWriteError(StoreError):
    """Store could not be created or written."""


class NoDataError(StoreError):
    """Store holds no entries, so there is nothing to summarize."""
