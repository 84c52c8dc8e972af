"""
Storage Services Package

Provides the abstract entry store interface and its implementations.
The JSON file store is the default backend; the in-memory store backs tests.
"""

from fincontrol.services.storage.interface import (
    ConnectionError,
    CorruptDataError,
    EntryStorageInterface,
    NotFoundError,
    StorageError,
)
from fincontrol.services.storage.memory import InMemoryEntryStorage
from fincontrol.services.storage.json_file import (
    JsonDocumentClient,
    JsonFileEntryStorage,
)
from fincontrol.services.storage.sample_data import sample_entries

__all__ = [
    # Interfaces
    "EntryStorageInterface",
    # Exceptions
    "ConnectionError",
    "CorruptDataError",
    "NotFoundError",
    "StorageError",
    # Implementations
    "InMemoryEntryStorage",
    "JsonDocumentClient",
    "JsonFileEntryStorage",
    "sample_entries",
]
