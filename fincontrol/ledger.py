"""
Ledger Service

This module ties the store and the reporting engine together and
defines the flows the presentation layer calls:
1. Load (store → snapshot)
2. Save / delete (validate → store)
3. Monthly view and annual report (store → snapshot → engine)

DESIGN DECISION: The service never keeps a living reference to the
collection. Every view fetches a fresh snapshot from the store and hands
it to the pure engine, so there is nothing to synchronize.

Store failures are logged and re-raised as StorageError. Retry policy
beyond the store's own transient-error retry belongs to the caller.
"""

from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel

from fincontrol.activity import ActivityLogger, configure_logging, create_correlation_id
from fincontrol.config import get_settings
from fincontrol.models.entry import Entry
from fincontrol.models.filters import FilterSet, MonthRef
from fincontrol.models.report import AnnualMatrix, FilteredView
from fincontrol.models.validation import ValidationResult
from fincontrol.reports import compute_annual_matrix, compute_filtered_and_stats
from fincontrol.services.storage import (
    EntryStorageInterface,
    InMemoryEntryStorage,
    JsonFileEntryStorage,
    NotFoundError,
    StorageError,
)
from fincontrol.validation import EntryValidator


class EntrySaveResult(BaseModel):
    """Outcome of saving an entry: the stored record plus any warnings."""

    entry: Entry
    validation: ValidationResult
    is_update: bool


class LedgerService:
    """
    Facade over the entry store and the reporting engine.

    Every method is a complete user action with its own correlation ID
    unless one is passed in.
    """

    def __init__(
        self,
        storage: EntryStorageInterface,
        validator: Optional[EntryValidator] = None,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        self._storage = storage
        self._validator = validator or EntryValidator()
        self._activity = activity_logger or ActivityLogger()

    async def _fetch_snapshot(self, correlation_id: UUID) -> list[Entry]:
        try:
            entries = await self._storage.fetch_all()
        except StorageError as e:
            self._activity.log_storage_failure("fetch_all", str(e), correlation_id)
            raise
        self._activity.log_entries_loaded(len(entries), correlation_id)
        return entries

    async def load_entries(self, correlation_id: Optional[UUID] = None) -> list[Entry]:
        """Fetch the full current collection."""
        correlation_id = correlation_id or create_correlation_id()
        return await self._fetch_snapshot(correlation_id)

    async def get_entry(self, entry_id: str, correlation_id: Optional[UUID] = None) -> Entry:
        """
        Find one entry by id (e.g., to prefill an edit form).

        Raises:
            NotFoundError: If no entry has this id
        """
        for entry in await self.load_entries(correlation_id):
            if entry.id == entry_id:
                return entry
        raise NotFoundError(f"Entry not found: {entry_id}")

    async def save_entry(
        self,
        entry: Entry,
        correlation_id: Optional[UUID] = None,
    ) -> EntrySaveResult:
        """
        Create or fully replace an entry.

        Validation warnings are logged and returned; they do not block the save.
        """
        correlation_id = correlation_id or create_correlation_id()

        validation = self._validator.validate(entry)
        if validation.warnings:
            self._activity.log_validation_warnings(entry.id, validation.warnings, correlation_id)

        try:
            is_update = await self._storage.save(entry)
        except StorageError as e:
            self._activity.log_storage_failure("save", str(e), correlation_id)
            raise

        self._activity.log_entry_saved(
            entry_id=entry.id,
            kind=entry.kind.value,
            amount=entry.amount,
            is_update=is_update,
            correlation_id=correlation_id,
        )
        return EntrySaveResult(entry=entry, validation=validation, is_update=is_update)

    async def delete_entry(
        self,
        entry_id: str,
        correlation_id: Optional[UUID] = None,
    ) -> bool:
        """Delete an entry by id. Unknown ids are a no-op (returns False)."""
        correlation_id = correlation_id or create_correlation_id()
        try:
            existed = await self._storage.remove(entry_id)
        except StorageError as e:
            self._activity.log_storage_failure("remove", str(e), correlation_id)
            raise
        self._activity.log_entry_deleted(entry_id, existed, correlation_id)
        return existed

    async def monthly_view(
        self,
        month: Union[MonthRef, str],
        filters: Optional[FilterSet] = None,
        correlation_id: Optional[UUID] = None,
    ) -> FilteredView:
        """Filtered entries and summary stats for one month."""
        correlation_id = correlation_id or create_correlation_id()
        filters = filters or FilterSet()
        snapshot = await self._fetch_snapshot(correlation_id)

        view = compute_filtered_and_stats(snapshot, month, filters)
        self._activity.log_monthly_view(
            month=view.month,
            result_count=view.count,
            filters_active=not filters.is_empty,
            correlation_id=correlation_id,
        )
        return view

    async def annual_report(
        self,
        year: int,
        correlation_id: Optional[UUID] = None,
    ) -> AnnualMatrix:
        """Category x month matrix for one year (pending entries included)."""
        correlation_id = correlation_id or create_correlation_id()
        snapshot = await self._fetch_snapshot(correlation_id)

        matrix = compute_annual_matrix(snapshot, year)
        self._activity.log_annual_report(
            year=year,
            income_rows=len(matrix.income_rows),
            expense_rows=len(matrix.expense_rows),
            correlation_id=correlation_id,
        )
        return matrix


def create_storage() -> EntryStorageInterface:
    """Build the store selected by configuration."""
    settings = get_settings().storage
    if settings.backend == "memory":
        return InMemoryEntryStorage(
            fetch_latency_ms=settings.fetch_latency_ms,
            save_latency_ms=settings.save_latency_ms,
            remove_latency_ms=settings.remove_latency_ms,
        )
    return JsonFileEntryStorage(settings=settings)


def create_ledger_service() -> LedgerService:
    """
    Factory function to create a fully wired ledger service.

    Use this at application startup.
    """
    configure_logging(get_settings().app.log_level)
    return LedgerService(storage=create_storage())
