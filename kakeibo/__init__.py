"""kakeibo - a small household ledger for income and expenses."""

__version__ = "0.1.0"
