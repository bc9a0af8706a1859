"""
Store contracts consumed by the services.

The services only depend on these protocols, so any backend (the local
SQLite stores in this package, a hosted backend client, a test stub) can be
plugged in. Every operation takes the owner id explicitly; stores never read
ambient session state.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from pocketledger.model.category import CategoryEntry
from pocketledger.model.transaction import Transaction, TransactionKind


class TransactionStore(Protocol):
    def fetch(self, owner_id: str) -> list[Transaction]:
        """Owner's transactions, most recent date first.

        Raises:
            StoreError: on backend failure
        """
        ...

    def insert(self, transaction: Transaction) -> None:
        """Persist a new transaction.

        Raises:
            StoreError: on backend failure or duplicate id
        """
        ...


class CategoryStore(Protocol):
    def fetch(self, owner_id: str, kind: TransactionKind) -> Sequence[CategoryEntry]:
        """Owner's categories for a kind; empty means "use defaults"."""
        ...

    def add(self, owner_id: str, kind: TransactionKind, name: str) -> CategoryEntry:
        ...


class BlobStore(Protocol):
    def upload(self, data: bytes, content_type: str) -> str:
        """Store binary content and return a resolvable reference (URI)."""
        ...


__all__ = [
    "BlobStore",
    "CategoryStore",
    "TransactionStore",
]
