"""
Activity Logger

DESIGN DECISION: Every ledger operation is logged locally as a
structured event. This provides:
1. Traceability while debugging
2. Visibility into storage failures
3. A record of which entries the engine had to skip

NOTE: This is local structured logging only. Nothing here is persisted,
and it is not an audit trail of entry history.

The activity logger:
- Never raises (logging must not break a ledger operation)
- Supports correlation IDs to trace the events of one user action
"""

import logging
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

import structlog


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=False,
)


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output through stdlib logging at the given level."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper(), logging.INFO))


def get_logger(name: Optional[str] = None) -> Any:
    """Get a structlog logger, optionally named."""
    return structlog.get_logger(name)


class ActivityLogger:
    """
    Central activity logging service for ledger operations.

    Each method maps one ledger operation to one structured event.
    """

    def __init__(self, logger: Optional[Any] = None):
        """
        Initialize activity logger.

        Args:
            logger: structlog logger to write to.
                    If None, a "fincontrol.activity" logger is used.
        """
        self._logger = logger or get_logger("fincontrol.activity")

    def _emit(self, level: str, event: str, correlation_id: Optional[UUID], **fields: Any) -> None:
        if correlation_id is not None:
            fields["correlation_id"] = str(correlation_id)
        try:
            getattr(self._logger, level)(event, **fields)
        except Exception:
            # Logging failures must never break the ledger
            pass

    def log_entries_loaded(
        self,
        count: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit("info", "entries_loaded", correlation_id, count=count)

    def log_entry_saved(
        self,
        entry_id: str,
        kind: str,
        amount: Decimal,
        is_update: bool,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log an entry create or replace."""
        self._emit(
            "info",
            "entry_saved",
            correlation_id,
            entry_id=entry_id,
            kind=kind,
            amount=str(amount),
            is_update=is_update,
        )

    def log_entry_deleted(
        self,
        entry_id: str,
        existed: bool,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit("info", "entry_deleted", correlation_id, entry_id=entry_id, existed=existed)

    def log_validation_warnings(
        self,
        entry_id: str,
        warnings: list[str],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log non-blocking validation warnings for an entry."""
        self._emit(
            "warning",
            "entry_validation_warning",
            correlation_id,
            entry_id=entry_id,
            warnings=warnings,
        )

    def log_monthly_view(
        self,
        month: str,
        result_count: int,
        filters_active: bool,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(
            "info",
            "monthly_view_computed",
            correlation_id,
            month=month,
            result_count=result_count,
            filters_active=filters_active,
        )

    def log_annual_report(
        self,
        year: int,
        income_rows: int,
        expense_rows: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(
            "info",
            "annual_report_computed",
            correlation_id,
            year=year,
            income_rows=income_rows,
            expense_rows=expense_rows,
        )

    def log_storage_failure(
        self,
        operation: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a store failure before it is surfaced to the caller."""
        self._emit(
            "error",
            "storage_failed",
            correlation_id,
            operation=operation,
            error=error_message,
        )


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new user action (e.g., saving an entry).
    Pass it through all subsequent operations.
    """
    return uuid4()
