"""Services package."""

from fincontrol.services.storage import (
    ConnectionError,
    CorruptDataError,
    EntryStorageInterface,
    InMemoryEntryStorage,
    JsonDocumentClient,
    JsonFileEntryStorage,
    NotFoundError,
    StorageError,
)

__all__ = [
    "ConnectionError",
    "CorruptDataError",
    "EntryStorageInterface",
    "InMemoryEntryStorage",
    "JsonDocumentClient",
    "JsonFileEntryStorage",
    "NotFoundError",
    "StorageError",
]
