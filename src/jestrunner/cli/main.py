"""jestrunner CLI - run or debug jest tests from the shell."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click

from jestrunner.cli.debug import debug_command, debug_path_command
from jestrunner.cli.locate import blocks_command, locate_command
from jestrunner.cli.run import file_command, path_command, previous_command, test_command
from jestrunner.cli.utils import CliState
from jestrunner.core.logging import configure_logging, set_request_id


def _version() -> str:
    try:
        return version("jestrunner")
    except PackageNotFoundError:
        return "0.0.0"


@click.group()
@click.version_option(version=_version(), prog_name="jestrunner")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--workspace",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Workspace root (default: nearest .git or package.json directory)",
)
@click.option("--dry-run", is_flag=True, help="Print commands instead of running them")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, workspace: Path | None, dry_run: bool) -> None:
    """Run or debug the jest test at a line of a test file."""
    ctx.obj = CliState(verbose=verbose, workspace=workspace, dry_run=dry_run)
    set_request_id()
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(test_command, name="test")
cli.add_command(file_command, name="file")
cli.add_command(path_command, name="path")
cli.add_command(previous_command, name="previous")
cli.add_command(debug_command, name="debug")
cli.add_command(debug_path_command, name="debug-path")
cli.add_command(locate_command, name="locate")
cli.add_command(blocks_command, name="blocks")


if __name__ == "__main__":
    cli()
