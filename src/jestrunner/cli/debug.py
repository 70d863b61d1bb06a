"""jestrunner debug/debug-path commands - emit a node debugger launch config."""

from pathlib import Path

import click
from rich.markup import escape

from jestrunner.cli.utils import (
    CliState,
    cli_errors,
    exit_with,
    make_editor,
    make_runner,
    resolve_workspace,
)
from jestrunner.core.progress import status

_output_option = click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the launch configuration here instead of stdout",
)


def _report_output(output: Path | None) -> None:
    if output is not None:
        status(f"Launch configuration written to {escape(str(output))}", style="success")


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-l", "--line", type=click.IntRange(min=1), help="1-based cursor line")
@click.option("-n", "--name", "test_name", help="Test name pattern, used as given")
@_output_option
@click.pass_obj
def debug_command(
    state: CliState,
    file: Path,
    line: int | None,
    test_name: str | None,
    output: Path | None,
) -> None:
    """Debug the test enclosing LINE in FILE (whole file if none)."""
    with cli_errors():
        workspace_root = resolve_workspace(state, file)
        runner = make_runner(state, workspace_root, launch_output=output)
        code = runner.debug_current_test(
            make_editor(file, workspace_root, line=line), test_name=test_name
        )
    _report_output(output)
    exit_with(click.get_current_context(), code)


@click.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@_output_option
@click.pass_obj
def debug_path_command(state: CliState, path: Path, output: Path | None) -> None:
    """Debug the tests under PATH (file or directory)."""
    with cli_errors():
        target = path.resolve()
        workspace_root = resolve_workspace(state, target)
        runner = make_runner(state, workspace_root, launch_output=output)
        code = runner.debug_tests_on_path(target, make_editor(target, workspace_root))
    _report_output(output)
    exit_with(click.get_current_context(), code)
