"""CLI utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import click

from jestrunner.config.loader import config_dir, load_config
from jestrunner.config.models import JestRunnerConfig
from jestrunner.core.errors import JestRunnerBaseError
from jestrunner.core.logging import configure_logging, get_log_file_path
from jestrunner.testing.models import ActiveEditor
from jestrunner.testing.runner import JestRunner
from jestrunner.testing.terminal import DryRunTerminal, IntegratedTerminal, LaunchConfigWriter

WORKSPACE_MARKERS = (".git", "package.json")


@dataclass
class CliState:
    """Options of the root command, shared with subcommands via ctx.obj."""

    verbose: bool = False
    workspace: Path | None = None
    dry_run: bool = False


def find_workspace_root(start_path: Path | None = None) -> Path:
    """Find the workspace root for a path.

    Walks up looking for a .git directory; if there is none, the nearest
    directory with a package.json is used.

    Raises:
        click.ClickException: If neither marker is found
    """
    if start_path is None:
        start_path = Path.cwd()

    start = start_path.resolve()
    if start.is_file():
        start = start.parent

    for marker in WORKSPACE_MARKERS:
        current = start
        while True:
            if (current / marker).exists():
                return current
            if current == current.parent:
                break
            current = current.parent

    raise click.ClickException(
        f"No workspace found for {start_path}\n"
        "Run inside a git repository or a package.json project, or pass --workspace."
    )


def resolve_workspace(state: CliState, start_path: Path | None) -> Path:
    if state.workspace is not None:
        return state.workspace.resolve()
    return find_workspace_root(start_path)


def load_workspace_config(state: CliState, workspace_root: Path) -> JestRunnerConfig:
    """Load config for a workspace and configure logging from it."""
    config = load_config(workspace_root)
    logging_config = config.logging
    if state.verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return config


def make_runner(
    state: CliState,
    workspace_root: Path,
    *,
    launch_output: Path | None = None,
) -> JestRunner:
    config = load_workspace_config(state, workspace_root)
    terminal = DryRunTerminal() if state.dry_run else IntegratedTerminal()
    return JestRunner(
        config,
        terminal=terminal,
        debugger=LaunchConfigWriter(output=launch_output),
        state_path=config_dir(workspace_root) / "state.yaml",
    )


def make_editor(
    file_path: Path,
    workspace_root: Path,
    line: int | None = None,
    selection: str | None = None,
) -> ActiveEditor:
    return ActiveEditor(
        file_path=file_path.resolve(),
        workspace_root=workspace_root,
        line=line,
        selection=selection,
    )


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn jestrunner errors into clean click errors."""
    try:
        yield
    except JestRunnerBaseError as e:
        message = str(e)
        if log_path := get_log_file_path():
            message += f"\nSee log: {log_path}"
        raise click.ClickException(message) from e


def exit_with(ctx: click.Context, code: int | None) -> None:
    if code:
        ctx.exit(code)
