"""
Category service - resolves the categories offered on entry forms.

Owners may define their own categories. When they have none, or the store
cannot be reached, the built-in default set for the transaction kind is used
so the form stays usable.
"""

from __future__ import annotations

import logging

from pocketledger.errors import EntryValidationError, StoreError
from pocketledger.model.category import CategoryEntry, default_categories, strip_decoration
from pocketledger.model.transaction import TransactionKind
from pocketledger.storage.base import CategoryStore

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for loading and adding per-owner categories."""

    def __init__(self, category_store: CategoryStore):
        self.category_store = category_store

    def defaults(self, kind: TransactionKind) -> list[CategoryEntry]:
        return default_categories(kind)

    def load(self, owner_id: str, kind: TransactionKind) -> list[CategoryEntry]:
        """Categories for an owner and kind, falling back to defaults.

        Args:
            owner_id: Owner whose categories to load
            kind: income or expense

        Returns:
            Stored categories if any exist, otherwise the default set
        """
        try:
            entries = list(self.category_store.fetch(owner_id, kind))
        except StoreError as e:
            logger.warning("Could not load %s categories, using defaults: %s", kind.value, e)
            return self.defaults(kind)

        if not entries:
            return self.defaults(kind)
        return entries

    def add(self, owner_id: str, kind: TransactionKind, name: str) -> CategoryEntry:
        """Add a category for an owner.

        Duplicates are detected on the undecorated label, case-insensitively,
        against the categories currently offered. The first add for an owner
        and kind stores the default set ahead of the new entry so the
        defaults stay available.

        Raises:
            EntryValidationError: if the name is blank or already exists
            StoreError: if the store fails
        """
        name = name.strip()
        label = strip_decoration(name).strip()
        if not label:
            raise EntryValidationError("Category name cannot be blank")

        existing = list(self.category_store.fetch(owner_id, kind))
        offered = existing or self.defaults(kind)
        if any(entry.label.casefold() == label.casefold() for entry in offered):
            raise EntryValidationError(f"Category '{label}' already exists")

        if not existing:
            for default in offered:
                self.category_store.add(owner_id, kind, default.name)
            logger.info("Stored %d default %s categories for owner %s", len(offered), kind.value, owner_id)

        entry = self.category_store.add(owner_id, kind, name)
        logger.info("Added %s category for owner %s", kind.value, owner_id)
        return entry


__all__ = ["CategoryService"]
