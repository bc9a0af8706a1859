"""
SQLite-backed transaction and category stores.

One database file holds both tables. Connections are opened per call and
closed in a finally block, so instances hold no open handles.

Privacy: local-only SQLite file. Descriptions are never logged.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from uuid import uuid4

from pydantic import ValidationError

from pocketledger.errors import StoreError
from pocketledger.model.category import CategoryEntry
from pocketledger.model.transaction import Transaction, TransactionKind

logger = logging.getLogger(__name__)


class _SQLiteStore:
    """Shared connection handling for the SQLite stores.

    Subclasses define `_init_schema`, which runs once on construction.
    """

    def __init__(self, db_path: Path | str):
        """Initialize the store, creating the database file and schema if needed.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn


class SQLiteTransactionStore(_SQLiteStore):
    """Transaction store on a local SQLite database.

    Amounts are stored as text so Decimal values round-trip exactly; dates
    are ISO strings so lexical order equals chronological order.
    """

    def _init_schema(self) -> None:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS transactions (
                    transaction_id TEXT PRIMARY KEY,
                    owner_id TEXT NOT NULL,
                    kind TEXT NOT NULL CHECK (kind IN ('income', 'expense')),
                    amount TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    category TEXT NOT NULL DEFAULT '',
                    date TEXT NOT NULL,
                    receipt_reference TEXT,
                    created_at TEXT DEFAULT (datetime('now'))
                )
            """)
            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_transactions_owner_date
                ON transactions(owner_id, date)
            """)
            conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to initialize transaction store at {self.db_path}: {e}") from e
        finally:
            conn.close()

    def fetch(self, owner_id: str) -> list[Transaction]:
        """Return the owner's transactions ordered by date, newest first.

        Transactions on the same date come back newest-inserted first.

        Raises:
            StoreError: if the query fails or a stored row is malformed
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT transaction_id, owner_id, kind, amount, description,
                       category, date, receipt_reference
                FROM transactions
                WHERE owner_id = ?
                ORDER BY date DESC, rowid DESC
            """,
                (owner_id,),
            )
            rows = [dict(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise StoreError(f"Failed to fetch transactions: {e}") from e
        finally:
            conn.close()

        try:
            return [Transaction.from_store_row(row) for row in rows]
        except ValidationError as e:
            raise StoreError(f"Malformed transaction row in {self.db_path}: {e}") from e

    def insert(self, transaction: Transaction) -> None:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO transactions (
                    transaction_id, owner_id, kind, amount, description,
                    category, date, receipt_reference
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    transaction.transaction_id,
                    transaction.owner_id,
                    transaction.kind.value,
                    str(transaction.amount),
                    transaction.description,
                    transaction.category,
                    transaction.date.isoformat(),
                    transaction.receipt_reference,
                ),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            raise StoreError(f"Transaction {transaction.transaction_id} already exists") from e
        except sqlite3.Error as e:
            raise StoreError(f"Failed to insert transaction: {e}") from e
        finally:
            conn.close()

        logger.debug("Inserted transaction %s", transaction.transaction_id)


class SQLiteCategoryStore(_SQLiteStore):
    """Per-owner category lists on a local SQLite database."""

    def _init_schema(self) -> None:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS categories (
                    category_id TEXT PRIMARY KEY,
                    owner_id TEXT NOT NULL,
                    kind TEXT NOT NULL CHECK (kind IN ('income', 'expense')),
                    name TEXT NOT NULL,
                    created_at TEXT DEFAULT (datetime('now')),
                    UNIQUE (owner_id, kind, name)
                )
            """)
            conn.commit()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to initialize category store at {self.db_path}: {e}") from e
        finally:
            conn.close()

    def fetch(self, owner_id: str, kind: TransactionKind) -> list[CategoryEntry]:
        """Return the owner's categories for a kind in insertion order."""
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT category_id, name, kind
                FROM categories
                WHERE owner_id = ? AND kind = ?
                ORDER BY rowid
            """,
                (owner_id, TransactionKind(kind).value),
            )
            rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to fetch categories: {e}") from e
        finally:
            conn.close()

        return [CategoryEntry(id=row["category_id"], name=row["name"], kind=row["kind"]) for row in rows]

    def add(self, owner_id: str, kind: TransactionKind, name: str) -> CategoryEntry:
        entry = CategoryEntry(id=uuid4().hex, name=name, kind=kind)
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO categories (category_id, owner_id, kind, name)
                VALUES (?, ?, ?, ?)
            """,
                (entry.id, owner_id, entry.kind.value, entry.name),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            raise StoreError(f"Category '{name}' already exists") from e
        except sqlite3.Error as e:
            raise StoreError(f"Failed to add category: {e}") from e
        finally:
            conn.close()
        return entry


__all__ = [
    "SQLiteCategoryStore",
    "SQLiteTransactionStore",
]
