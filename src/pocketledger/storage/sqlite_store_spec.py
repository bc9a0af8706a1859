"""
Tests for the SQLite transaction and category stores.
"""

from __future__ import annotations

import sqlite3
from datetime import date
from decimal import Decimal
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from pocketledger.errors import StoreError
from pocketledger.model.transaction import Transaction, TransactionKind
from pocketledger.storage import SQLiteCategoryStore, SQLiteTransactionStore


def _txn(tid: str, on: date, owner: str = "ana", **kw) -> Transaction:
    data = dict(
        transaction_id=tid,
        owner_id=owner,
        kind=TransactionKind.expense,
        amount=Decimal("10.00"),
        description="desc",
        category="Outros",
        date=on,
    )
    data.update(kw)
    return Transaction(**data)


class DescribeSQLiteTransactionStore:
    @pytest.fixture
    def db_path(self):
        with TemporaryDirectory() as tmpdir:
            yield Path(tmpdir) / "nested" / "ledger.db"

    def it_should_create_the_database_file(self, db_path):
        SQLiteTransactionStore(db_path)
        assert db_path.exists()

    def it_should_round_trip_exact_decimals_and_receipts(self, db_path):
        store = SQLiteTransactionStore(db_path)
        original = _txn("t1", date(2024, 3, 1), amount=Decimal("1234.50"), receipt_reference="file:///r.png")

        store.insert(original)

        assert store.fetch("ana") == [original]

    def it_should_return_newest_dates_first(self, db_path):
        store = SQLiteTransactionStore(db_path)
        store.insert(_txn("old", date(2023, 12, 31)))
        store.insert(_txn("new", date(2024, 2, 1)))
        store.insert(_txn("mid", date(2024, 1, 15)))

        assert [t.transaction_id for t in store.fetch("ana")] == ["new", "mid", "old"]

    def it_should_return_latest_insert_first_within_a_day(self, db_path):
        store = SQLiteTransactionStore(db_path)
        store.insert(_txn("first", date(2024, 1, 1)))
        store.insert(_txn("second", date(2024, 1, 1)))

        assert [t.transaction_id for t in store.fetch("ana")] == ["second", "first"]

    def it_should_scope_by_owner(self, db_path):
        store = SQLiteTransactionStore(db_path)
        store.insert(_txn("a", date(2024, 1, 1), owner="ana"))
        store.insert(_txn("b", date(2024, 1, 1), owner="bruno"))

        assert [t.transaction_id for t in store.fetch("bruno")] == ["b"]
        assert store.fetch("carla") == []

    def it_should_reject_duplicate_ids(self, db_path):
        store = SQLiteTransactionStore(db_path)
        store.insert(_txn("dup", date(2024, 1, 1)))

        with pytest.raises(StoreError, match="already exists"):
            store.insert(_txn("dup", date(2024, 1, 2)))

    def it_should_wrap_malformed_rows_in_store_error(self, db_path):
        store = SQLiteTransactionStore(db_path)
        conn = sqlite3.connect(db_path)
        try:
            conn.execute(
                "INSERT INTO transactions (transaction_id, owner_id, kind, amount, date) "
                "VALUES ('bad', 'ana', 'expense', 'not-a-number', '2024-01-01')"
            )
            conn.commit()
        finally:
            conn.close()

        with pytest.raises(StoreError, match="Malformed"):
            store.fetch("ana")

    def it_should_reject_stored_amounts_out_of_range(self, db_path):
        store = SQLiteTransactionStore(db_path)
        conn = sqlite3.connect(db_path)
        try:
            conn.execute(
                "INSERT INTO transactions (transaction_id, owner_id, kind, amount, date) "
                "VALUES ('huge', 'ana', 'expense', '1e1000000', '2024-01-01')"
            )
            conn.commit()
        finally:
            conn.close()

        with pytest.raises(StoreError, match="Malformed"):
            store.fetch("ana")


class DescribeSQLiteCategoryStore:
    @pytest.fixture
    def store(self):
        with TemporaryDirectory() as tmpdir:
            yield SQLiteCategoryStore(Path(tmpdir) / "ledger.db")

    def it_should_return_empty_list_when_owner_has_no_categories(self, store):
        assert store.fetch("ana", TransactionKind.expense) == []

    def it_should_return_categories_in_insertion_order(self, store):
        store.add("ana", TransactionKind.expense, "🐶 Pets")
        store.add("ana", TransactionKind.expense, "🎁 Gifts")

        names = [e.name for e in store.fetch("ana", TransactionKind.expense)]

        assert names == ["🐶 Pets", "🎁 Gifts"]

    def it_should_filter_by_kind(self, store):
        store.add("ana", TransactionKind.income, "💡 Consulting")

        assert store.fetch("ana", TransactionKind.expense) == []
        assert [e.kind for e in store.fetch("ana", TransactionKind.income)] == [TransactionKind.income]

    def it_should_reject_exact_duplicates(self, store):
        store.add("ana", TransactionKind.expense, "Pets")

        with pytest.raises(StoreError):
            store.add("ana", TransactionKind.expense, "Pets")

    def it_should_share_a_database_with_the_transaction_store(self, store):
        transactions = SQLiteTransactionStore(store.db_path)
        transactions.insert(_txn("t1", date(2024, 1, 1)))
        store.add("ana", TransactionKind.expense, "Pets")

        assert len(transactions.fetch("ana")) == 1
        assert len(store.fetch("ana", TransactionKind.expense)) == 1


class DescribeStoreSchemas:
    def it_should_create_each_store_table_on_construction(self):
        with TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "ledger.db"
            SQLiteTransactionStore(db_path)
            SQLiteCategoryStore(db_path)

            conn = sqlite3.connect(db_path)
            try:
                rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
            finally:
                conn.close()

            assert {"transactions", "categories"} <= {row[0] for row in rows}
