from .transaction import Transaction, TransactionKind
from .category import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_SOURCES,
    CategoryEntry,
    default_categories,
    split_decoration,
    strip_decoration,
)
from .settings import Settings
from .settings_io import load_settings, save_settings

__all__ = [
    # models
    "Transaction",
    "TransactionKind",
    "CategoryEntry",
    "Settings",
    # category helpers
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_SOURCES",
    "default_categories",
    "split_decoration",
    "strip_decoration",
    # IO helpers
    "load_settings",
    "save_settings",
]
