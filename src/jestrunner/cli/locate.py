"""jestrunner locate/blocks commands - inspect a test file's block tree."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from jestrunner.core.progress import status
from jestrunner.parsing.blocks import Block, parse_test_file
from jestrunner.testing.locator import find_current_test_name
from jestrunner.testing.models import ActiveEditor
from jestrunner.testing.names import update_test_name_if_using_properties


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-l", "--line", type=click.IntRange(min=1), required=True, help="1-based line")
@click.pass_context
def locate_command(ctx: click.Context, file: Path, line: int) -> None:
    """Print the jest -t pattern for the test enclosing LINE in FILE.

    Exits with status 1 when no test encloses the line.
    """
    editor = ActiveEditor(file_path=file, workspace_root=file.parent, line=line)
    name = update_test_name_if_using_properties(find_current_test_name(editor))
    if name is None:
        status(f"No test encloses {escape(str(file))}:{line}", style="warning")
        ctx.exit(1)
    click.echo(name)


def _add_children(tree: Tree, block: Block) -> None:
    for child in block.children:
        label = (
            f"[bold]{child.kind}[/bold] {escape(child.name)} "
            f"[dim]{child.start_line}-{child.end_line}[/dim]"
        )
        _add_children(tree.add(label), child)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def blocks_command(file: Path) -> None:
    """Show the describe/test/it tree of FILE with line ranges."""
    test_file = parse_test_file(file)
    if not test_file.blocks:
        status(f"No tests found in {escape(str(file))}", style="warning")
        return
    tree = Tree(escape(str(file)))
    _add_children(tree, test_file.root)
    Console(highlight=False).print(tree)
