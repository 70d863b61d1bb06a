"""Core module exports."""

from jestrunner.core.errors import (
    ConfigError,
    ErrorCode,
    JestRunnerBaseError,
    JestRunnerError,
)
from jestrunner.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)
from jestrunner.core.progress import status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "JestRunnerBaseError",
    "JestRunnerError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
    # Console
    "status",
]
