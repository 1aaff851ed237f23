"""Core module exports."""

from gosubtest.core.errors import (
    ConfigError,
    ErrorCode,
    GoSubtestError,
    InternalError,
    LocateError,
)
from gosubtest.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "GoSubtestError",
    "InternalError",
    "LocateError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
