"""jestrunner test/file/path/previous commands - run jest in a terminal."""

from pathlib import Path

import click

from jestrunner.cli.utils import (
    CliState,
    cli_errors,
    exit_with,
    make_editor,
    make_runner,
    resolve_workspace,
)

_PASSTHROUGH = {"ignore_unknown_options": True}


@click.command(context_settings=_PASSTHROUGH)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-l", "--line", type=click.IntRange(min=1), help="1-based cursor line")
@click.option("-n", "--name", "test_name", help="Test name pattern, used as given")
@click.option("--selection", help="Selected text to use as the test name")
@click.option("--coverage", is_flag=True, help="Collect coverage from the file under test")
@click.argument("jest_options", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def test_command(
    state: CliState,
    file: Path,
    line: int | None,
    test_name: str | None,
    selection: str | None,
    coverage: bool,
    jest_options: tuple[str, ...],
) -> None:
    """Run the test enclosing LINE in FILE.

    Without --line, --name or --selection, or when LINE is outside every
    test, the whole file runs. Extra arguments are passed to jest.
    """
    with cli_errors():
        workspace_root = resolve_workspace(state, file)
        runner = make_runner(state, workspace_root)
        editor = make_editor(file, workspace_root, line=line, selection=selection)
        code = runner.run_current_test(
            editor,
            test_name=test_name,
            options=list(jest_options),
            collect_coverage=coverage,
        )
    exit_with(click.get_current_context(), code)


@click.command(context_settings=_PASSTHROUGH)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("jest_options", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def file_command(state: CliState, file: Path, jest_options: tuple[str, ...]) -> None:
    """Run every test in FILE. Extra arguments are passed to jest."""
    with cli_errors():
        workspace_root = resolve_workspace(state, file)
        runner = make_runner(state, workspace_root)
        code = runner.run_current_file(
            make_editor(file, workspace_root), options=list(jest_options)
        )
    exit_with(click.get_current_context(), code)


@click.command()
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.pass_obj
def path_command(state: CliState, path: Path) -> None:
    """Run the tests under PATH (file or directory)."""
    with cli_errors():
        target = path.resolve()
        workspace_root = resolve_workspace(state, target)
        runner = make_runner(state, workspace_root)
        code = runner.run_tests_on_path(target, make_editor(target, workspace_root))
    exit_with(click.get_current_context(), code)


@click.command()
@click.pass_obj
def previous_command(state: CliState) -> None:
    """Re-run the last command or debug launch in this workspace."""
    with cli_errors():
        workspace_root = resolve_workspace(state, None)
        runner = make_runner(state, workspace_root)
        editor = make_editor(workspace_root, workspace_root)
        code = runner.run_previous_test(editor)
    exit_with(click.get_current_context(), code)
