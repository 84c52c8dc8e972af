"""Activity logging package."""

from fincontrol.activity.logger import (
    ActivityLogger,
    configure_logging,
    create_correlation_id,
    get_logger,
)

__all__ = ["ActivityLogger", "configure_logging", "create_correlation_id", "get_logger"]
