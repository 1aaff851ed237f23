"""gosubtest error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Locate
- 9xxx: Internal

The locator itself never raises for a missing test; it returns None.
These errors exist for the layers that turn "not found" into a message
for the user (command construction and the CLI).
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Locate (3xxx)
    NOT_A_TEST_FILE = 3001
    NO_TEST_AT_CURSOR = 3002
    LINE_OUT_OF_RANGE = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class GoSubtestError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'NO_TEST_AT_CURSOR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(GoSubtestError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class LocateError(GoSubtestError):
    """Failures to map a file position onto a test."""

    @classmethod
    def not_a_test_file(cls, path: str, suffix: str) -> "LocateError":
        return cls(
            code=ErrorCode.NOT_A_TEST_FILE,
            message=f"Not a Go test file (expected *{suffix}): {path}",
            details={"path": path, "suffix": suffix},
        )

    @classmethod
    def no_test_at_cursor(cls, path: str, line: int) -> "LocateError":
        return cls(
            code=ErrorCode.NO_TEST_AT_CURSOR,
            message=f"Could not detect test function at {path}:{line}",
            details={"path": path, "line": line},
        )

    @classmethod
    def line_out_of_range(cls, path: str, line: int, line_count: int) -> "LocateError":
        return cls(
            code=ErrorCode.LINE_OUT_OF_RANGE,
            message=f"Line {line} is outside {path} ({line_count} lines)",
            details={"path": path, "line": line, "line_count": line_count},
        )


class InternalError(GoSubtestError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
