"""Jest command line and debug launch configuration assembly."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jestrunner.testing.context import RunnerContext
from jestrunner.testing.shell import (
    escape_regexp_for_path,
    escape_single_quotes,
    normalize_path,
    quote,
)

DEBUG_CONFIG_NAME = "Debug Jest Tests"

_TEST_SUFFIX = re.compile(r"\.(test|spec)\.")


def _identity(s: str) -> str:
    return s


class JestCommandBuilder:
    """Builds jest argv/command strings for a resolved runner context."""

    def __init__(self, context: RunnerContext) -> None:
        self.context = context

    def build_args(
        self,
        file_path: str | Path,
        test_name: str | None = None,
        *,
        with_quotes: bool,
        options: Iterable[str] = (),
    ) -> list[str]:
        """Jest arguments for a file or directory, optionally filtered by test name.

        Args:
            file_path: Test file or directory, passed as jest's path pattern
            test_name: Regex for ``-t``; omitted when None
            with_quotes: Shell-quote values (command strings) or not (debug argv)
            options: Extra jest options; configured run options are appended
                and duplicates dropped
        """
        quoter = quote if with_quotes else _identity
        args = [quoter(escape_regexp_for_path(normalize_path(file_path)))]

        config_path = self.context.get_jest_config_path(Path(file_path))
        if config_path:
            args.extend(["-c", quoter(normalize_path(config_path))])

        if test_name:
            args.extend(["-t", quoter(escape_single_quotes(test_name))])

        workspace_path = str(self.context.workspace_root)
        if workspace_path:
            args.extend(["--roots", quoter(escape_single_quotes(workspace_path))])

        all_options = [*options, *(self.context.config.run_options or [])]
        args.extend(dict.fromkeys(all_options))
        return args

    def build_command(
        self,
        file_path: str | Path,
        test_name: str | None = None,
        options: Iterable[str] = (),
    ) -> str:
        args = self.build_args(file_path, test_name, with_quotes=True, options=options)
        return f"{self.context.jest_command} {' '.join(args)}"

    def debug_config(self, file_path: str | Path, test_name: str | None = None) -> dict[str, Any]:
        """Node debugger launch configuration running jest in band."""
        config: dict[str, Any] = {
            "console": "integratedTerminal",
            "internalConsoleOptions": "neverOpen",
            "name": DEBUG_CONFIG_NAME,
            "program": self.context.jest_bin_path,
            "request": "launch",
            "type": "node",
            "cwd": normalize_path(self.context.cwd),
            **self.context.config.debug_options,
        }
        config["args"] = list(config.get("args") or [])

        if self.context.config.enable_yarn_pnp_support:
            config["args"] = ["jest"]
            config["program"] = f".yarn/releases/{self.context.yarn_pnp_command}"

        config["args"].extend(self.build_args(file_path, test_name, with_quotes=False))
        config["args"].append("--runInBand")
        return config

    def coverage_options(self, file_path: Path) -> list[str]:
        """``--collectCoverageFrom`` for the source file a test file covers.

        ``src/sum.test.ts`` collects from ``**/sum.ts`` when that file sits
        next to the test, otherwise from everything under the test's directory.
        """
        source_name = _TEST_SUFFIX.sub(".", file_path.name, count=1)
        if (file_path.parent / source_name).exists():
            target = f"**/{source_name}"
        else:
            target = f"**/{file_path.parent.name}/**"
        return ["--collectCoverageFrom", quote(target)]
