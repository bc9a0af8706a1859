from pocketledger.errors import StoreError
from .base import BlobStore, CategoryStore, TransactionStore
from .blob_store import FileBlobStore
from .sqlite_store import SQLiteCategoryStore, SQLiteTransactionStore

__all__ = [
    "BlobStore",
    "CategoryStore",
    "FileBlobStore",
    "SQLiteCategoryStore",
    "SQLiteTransactionStore",
    "StoreError",
    "TransactionStore",
]
