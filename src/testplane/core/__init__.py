"""Core module exports."""

from testplane.core.errors import (
    ConfigError,
    ErrorCode,
    TestplaneError,
    TestRunError,
)
from testplane.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from testplane.core.progress import console_for, pluralize

__all__ = [
    # Errors
    "TestplaneError",
    "ConfigError",
    "ErrorCode",
    "TestRunError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Console
    "console_for",
    "pluralize",
]
