"""
Firebase Realtime Database transaction store.

The Admin SDK client is blocking, so each call runs in a worker thread
to keep the event loop free while the database answers.
"""

import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

import firebase_admin
from firebase_admin import db

from app.transactions.store.base import (
    BaseTransactionStore,
    StorageReadError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)


class FirebaseTransactionStore(BaseTransactionStore):
    """Store backed by one path of a Firebase Realtime Database."""

    def __init__(self, reference: db.Reference):
        """
        Initialize the store.

        Args:
            reference: Database reference of the transactions collection
        """
        self.reference = reference

    @classmethod
    def from_app(
        cls, path: str, app: Optional[firebase_admin.App] = None
    ) -> "FirebaseTransactionStore":
        """Build a store for `path` on an initialized Firebase app."""
        return cls(db.reference(path, app=app))

    def get_backend_name(self) -> str:
        return "firebase"

    async def list_all(self) -> Dict[str, Dict[str, Any]]:
        try:
            snapshot = await asyncio.to_thread(self.reference.get)
        except Exception as e:
            logger.error(f"Failed to read transactions: {e}", exc_info=True)
            raise StorageReadError(str(e)) from e

        return snapshot or {}

    async def append(self, record: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        try:
            child = await asyncio.to_thread(self.reference.push, record)
        except Exception as e:
            logger.error(f"Failed to save transaction: {e}", exc_info=True)
            raise StorageWriteError(str(e)) from e

        logger.debug(f"Transaction stored under {child.key}")
        return child.key, record
