"""In-memory entry storage, for tests and the `memory` backend."""

from collections.abc import Iterable
from typing import Optional

from fincontrol.models.entry import Entry
from fincontrol.services.storage.interface import EntryStorageInterface


class InMemoryEntryStorage(EntryStorageInterface):
    """List-backed store. Lost when the process exits."""

    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        fetch_latency_ms: int = 0,
        save_latency_ms: int = 0,
        remove_latency_ms: int = 0,
    ):
        super().__init__(fetch_latency_ms, save_latency_ms, remove_latency_ms)
        self._entries: list[Entry] = []
        for entry in entries or ():
            self._upsert(entry)

    def _upsert(self, entry: Entry) -> bool:
        for index, existing in enumerate(self._entries):
            if existing.id == entry.id:
                self._entries[index] = entry
                return True
        self._entries.append(entry)
        return False

    async def fetch_all(self) -> list[Entry]:
        await self._simulate_latency(self._fetch_latency)
        return list(self._entries)

    async def save(self, entry: Entry) -> bool:
        await self._simulate_latency(self._save_latency)
        return self._upsert(entry)

    async def remove(self, entry_id: str) -> bool:
        await self._simulate_latency(self._remove_latency)
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.id != entry_id]
        return len(self._entries) < before
