"""
Base transaction store interface.

Defines the contract every transaction store must implement. Stores are
append-only: records can be listed and added, never changed or removed.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple


class BaseTransactionStore(ABC):
    """
    Abstract base class for transaction stores.

    A store owns a single collection of transactions keyed by ids it
    generates itself.
    """

    @abstractmethod
    async def list_all(self) -> Dict[str, Dict[str, Any]]:
        """
        Fetch the whole collection.

        Returns:
            Mapping of generated id to stored record, empty when the
            collection does not exist yet

        Raises:
            StorageReadError: If the store cannot be read
        """
        pass

    @abstractmethod
    async def append(self, record: Dict[str, Any]) -> Tuple[str, Dict[str, Any]]:
        """
        Add a new record under a store-generated key.

        Args:
            record: Transaction fields, timestamp included

        Returns:
            Tuple of (generated id, stored record)

        Raises:
            StorageWriteError: If the record cannot be written
        """
        pass

    @abstractmethod
    def get_backend_name(self) -> str:
        """
        Get the name of this store backend.

        Returns:
            Backend identifier (e.g., 'firebase', 'memory')
        """
        pass


class StorageError(Exception):
    """Base exception for store failures."""

    pass


class StorageReadError(StorageError):
    """Raised when reading the collection fails."""

    pass


class StorageWriteError(StorageError):
    """Raised when appending a record fails."""

    pass
