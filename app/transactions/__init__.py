"""
Transaction ingestion module.

Records payment-like transaction events in an append-only store and
exposes them over the /api/transactions routes.
"""

from app.transactions.service import TransactionService, TransactionValidationError
from app.transactions.store.base import BaseTransactionStore
from app.transactions.store.memory_store import InMemoryTransactionStore

__all__ = [
    "TransactionService",
    "TransactionValidationError",
    "BaseTransactionStore",
    "InMemoryTransactionStore",
]
