"""Jest test targeting and dispatch."""

from jestrunner.testing.command import JestCommandBuilder
from jestrunner.testing.context import RunnerContext
from jestrunner.testing.locator import find_current_test_name, find_full_test_name
from jestrunner.testing.models import ActiveEditor, DebugCommand
from jestrunner.testing.runner import JestRunner
from jestrunner.testing.terminal import (
    DebugLauncher,
    DryRunTerminal,
    ExternalNativeTerminal,
    IntegratedTerminal,
    LaunchConfigWriter,
    Terminal,
)

__all__ = [
    "ActiveEditor",
    "DebugCommand",
    "DebugLauncher",
    "DryRunTerminal",
    "ExternalNativeTerminal",
    "IntegratedTerminal",
    "JestCommandBuilder",
    "JestRunner",
    "LaunchConfigWriter",
    "RunnerContext",
    "Terminal",
    "find_current_test_name",
    "find_full_test_name",
]
