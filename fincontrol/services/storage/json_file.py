"""
JSON File Storage Implementation

DESIGN DECISION: A single JSON document acts as a key-value store.
The whole entry collection is serialized as one array under one
storage key, the same way a browser's local storage would hold it.

TRADEOFFS:
- Every write rewrites the whole collection (fine for a personal ledger)
- No concurrent writers (single user, single process)
- Filtering happens in Python, never in the store

Records that can no longer be parsed are kept untouched on disk and
skipped when reading, so one bad record never hides the rest.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from fincontrol.config import StorageSettings, get_settings
from fincontrol.models.entry import Entry, derive_entry_id
from fincontrol.services.storage.interface import (
    ConnectionError,
    CorruptDataError,
    EntryStorageInterface,
)
from fincontrol.services.storage.sample_data import sample_entries


logger = structlog.get_logger("fincontrol.storage")


def _stored_id(record: object) -> Optional[str]:
    """Id of a stored record, derived from its content when it has none."""
    if not isinstance(record, dict):
        return None
    return record.get("id") or derive_entry_id(record)


class JsonDocumentClient:
    """
    Low-level JSON document wrapper.

    Reads and writes the whole document, retrying transient OS errors.
    """

    def __init__(self, path: Path, retry_attempts: int = 3):
        self._path = Path(path)
        self._retry_attempts = retry_attempts

    @property
    def path(self) -> Path:
        return self._path

    def _retrying(self) -> Retrying:
        return Retrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=0.05, min=0.05, max=1),
            retry=retry_if_exception_type(OSError),
            reraise=True,
        )

    def read(self) -> dict:
        """
        Load the document. A missing file is an empty document.

        Raises:
            ConnectionError: If the file cannot be read
            CorruptDataError: If the file is not a JSON object
        """
        if not self._path.exists():
            return {}
        try:
            for attempt in self._retrying():
                with attempt:
                    text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConnectionError(f"Failed to read {self._path}: {e}")

        if not text.strip():
            return {}
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptDataError(f"{self._path} is not valid JSON: {e}")
        if not isinstance(document, dict):
            raise CorruptDataError(f"{self._path} must contain a JSON object")
        return document

    def write(self, document: dict) -> None:
        """
        Replace the document atomically.

        Raises:
            ConnectionError: If the file cannot be written
        """
        try:
            for attempt in self._retrying():
                with attempt:
                    self._write_once(document)
        except OSError as e:
            raise ConnectionError(f"Failed to write {self._path}: {e}")

    def _write_once(self, document: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class JsonFileEntryStorage(EntryStorageInterface):
    """
    JSON file implementation of entry storage.

    Entries are stored as records (see Entry.to_record) in an array
    under the configured storage key.
    """

    def __init__(
        self,
        client: Optional[JsonDocumentClient] = None,
        settings: Optional[StorageSettings] = None,
    ):
        settings = settings or get_settings().storage
        super().__init__(
            fetch_latency_ms=settings.fetch_latency_ms,
            save_latency_ms=settings.save_latency_ms,
            remove_latency_ms=settings.remove_latency_ms,
        )
        self._client = client or JsonDocumentClient(
            Path(settings.json_path),
            retry_attempts=settings.retry_attempts,
        )
        self._key = settings.storage_key
        self._seed = settings.seed_sample_data

    def _load_records(self, document: dict) -> list:
        records = document.get(self._key, [])
        if not isinstance(records, list):
            raise CorruptDataError(f"Value under {self._key!r} must be an array")
        return records

    def _record_to_entry(self, record: object) -> Optional[Entry]:
        """Parse one stored record, or None if it is unusable."""
        try:
            return Entry.from_record(record)
        except ValidationError as e:
            logger.warning(
                "record_skipped",
                storage_key=self._key,
                record_id=record.get("id") if isinstance(record, dict) else None,
                error_count=e.error_count(),
            )
            return None

    async def fetch_all(self) -> list[Entry]:
        await self._simulate_latency(self._fetch_latency)
        document = self._client.read()

        if self._key not in document and self._seed:
            # Initialize with sample data on first use
            seeded = sample_entries()
            document[self._key] = [entry.to_record() for entry in seeded]
            self._client.write(document)
            logger.info("storage_seeded", storage_key=self._key, count=len(seeded))
            return seeded

        entries = []
        for record in self._load_records(document):
            entry = self._record_to_entry(record)
            if entry is not None:
                entries.append(entry)
        return entries

    async def save(self, entry: Entry) -> bool:
        await self._simulate_latency(self._save_latency)
        document = self._client.read()
        records = self._load_records(document)

        record = entry.to_record()
        replaced = False
        for index, existing in enumerate(records):
            if _stored_id(existing) == entry.id:
                records[index] = record
                replaced = True
                break
        else:
            records.append(record)

        document[self._key] = records
        self._client.write(document)
        return replaced

    async def remove(self, entry_id: str) -> bool:
        await self._simulate_latency(self._remove_latency)
        document = self._client.read()
        if self._key not in document:
            return False

        records = self._load_records(document)
        remaining = [
            record for record in records if _stored_id(record) != entry_id
        ]
        if len(remaining) == len(records):
            return False

        document[self._key] = remaining
        self._client.write(document)
        return True
