"""Config module exports."""

from jestrunner.config.loader import config_dir, load_config
from jestrunner.config.models import (
    JestRunnerConfig,
    LoggingConfig,
    LogOutputConfig,
    RunnerConfig,
    TerminalConfig,
)
from jestrunner.config.state import RuntimeState, load_runtime_state, write_runtime_state

__all__ = [
    "load_config",
    "config_dir",
    "JestRunnerConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "RunnerConfig",
    "TerminalConfig",
    "RuntimeState",
    "load_runtime_state",
    "write_runtime_state",
]
