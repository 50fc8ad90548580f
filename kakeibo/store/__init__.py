"""Ledger store layer - provides persistence for the application.

This module re-exports the public store functions for easy importing.
"""

from kakeibo.store.codec import dumps, entry_from_dict, entry_to_dict, loads
from kakeibo.store.ledger import (
    DEFAULT_STORE_PATH,
    append_entry,
    load_or_empty,
    load_or_fail,
    save,
)

__all__ = [
    # Codec
    "dumps",
    "entry_from_dict",
    "entry_to_dict",
    "loads",
    # File
    "DEFAULT_STORE_PATH",
    "append_entry",
    "load_or_empty",
    "load_or_fail",
    "save",
]
