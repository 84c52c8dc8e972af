"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for entry storage.
This allows us to:
1. Swap the JSON file for a real database later
2. Use in-memory storage for testing
3. Keep the reporting engine decoupled from storage

The contract is intentionally tiny: the engine only ever needs
"give me the whole collection", and edits are whole-record upserts.
"""

import asyncio
from abc import ABC, abstractmethod

from fincontrol.models.entry import Entry


class EntryStorageInterface(ABC):
    """
    Abstract interface for entry storage operations.

    Any storage implementation (JSON file, SQLite, etc.)
    must implement these methods.
    """

    def __init__(
        self,
        fetch_latency_ms: int = 0,
        save_latency_ms: int = 0,
        remove_latency_ms: int = 0,
    ):
        self._fetch_latency = fetch_latency_ms / 1000
        self._save_latency = save_latency_ms / 1000
        self._remove_latency = remove_latency_ms / 1000

    async def _simulate_latency(self, seconds: float) -> None:
        if seconds > 0:
            await asyncio.sleep(seconds)

    @abstractmethod
    async def fetch_all(self) -> list[Entry]:
        """
        Return the complete current collection.

        Returns:
            Every stored entry, each exactly once, in storage order

        Raises:
            StorageError: If the collection cannot be read
        """
        pass

    @abstractmethod
    async def save(self, entry: Entry) -> bool:
        """
        Upsert an entry by id.

        If an entry with the same id exists it is fully replaced in place,
        otherwise the entry is appended.

        Args:
            entry: The complete entry record

        Returns:
            True if an existing entry was replaced, False if appended

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def remove(self, entry_id: str) -> bool:
        """
        Remove an entry by id.

        Removing an id that does not exist is a no-op, not an error.

        Args:
            entry_id: The entry's id

        Returns:
            True if an entry was removed, False if nothing matched

        Raises:
            StorageError: If the write fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class ConnectionError(StorageError):
    """Could not reach the storage backend."""
    pass


class CorruptDataError(StorageError):
    """Stored data could not be decoded."""
    pass
