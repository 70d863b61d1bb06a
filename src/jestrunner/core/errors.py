"""jestrunner error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test runner
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003

    # Test runner (7xxx)
    TEST_FILE_NOT_FOUND = 7001
    NO_PREVIOUS_COMMAND = 7002
    TERMINAL_UNAVAILABLE = 7003


@dataclass(frozen=True, slots=True)
class JestRunnerBaseError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
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


class ConfigError(JestRunnerBaseError):
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
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required config field: {field}",
            details={"field": field},
        )


class JestRunnerError(JestRunnerBaseError):
    """Errors raised while building or dispatching jest commands."""

    @classmethod
    def test_file_not_found(cls, path: str) -> "JestRunnerError":
        return cls(
            code=ErrorCode.TEST_FILE_NOT_FOUND,
            message=f"Test file not found: {path}",
            details={"path": path},
        )

    @classmethod
    def no_previous_command(cls) -> "JestRunnerError":
        return cls(
            code=ErrorCode.NO_PREVIOUS_COMMAND,
            message="No previous jest command to run",
        )

    @classmethod
    def terminal_unavailable(cls, executable: str, reason: str) -> "JestRunnerError":
        return cls(
            code=ErrorCode.TERMINAL_UNAVAILABLE,
            message=f"Cannot start terminal command '{executable}': {reason}",
            details={"executable": executable, "reason": reason},
        )
