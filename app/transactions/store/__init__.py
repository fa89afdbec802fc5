"""Transaction store implementations."""

from app.transactions.store.base import (
    BaseTransactionStore,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from app.transactions.store.firebase_store import FirebaseTransactionStore
from app.transactions.store.memory_store import InMemoryTransactionStore

__all__ = [
    "BaseTransactionStore",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    "FirebaseTransactionStore",
    "InMemoryTransactionStore",
]
