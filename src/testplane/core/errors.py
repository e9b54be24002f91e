"""Testplane error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test run
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Test run (7xxx)
    TEST_INVALID_PATTERN = 7001
    TEST_PROCESSOR_NOT_FOUND = 7002


@dataclass(frozen=True, slots=True)
class TestplaneError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON reporting."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestplaneError):
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


class TestRunError(TestplaneError):
    """Errors raised while selecting or running tests."""

    __test__ = False

    @classmethod
    def invalid_pattern(cls, pattern: str, reason: str) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_INVALID_PATTERN,
            message=f"Invalid test path pattern {pattern!r}: {reason}",
            details={"pattern": pattern, "reason": reason},
        )

    @classmethod
    def processor_not_found(cls, reference: str, reason: str) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_PROCESSOR_NOT_FOUND,
            message=f"Could not load test results processor {reference!r}: {reason}",
            details={"reference": reference, "reason": reason},
        )

