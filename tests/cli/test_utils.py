"""Tests for CLI utilities.

Covers:
- find_workspace_root() marker precedence
- cli_errors() translation of jestrunner errors
"""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from jestrunner.cli.utils import CliState, cli_errors, find_workspace_root, resolve_workspace
from jestrunner.core.errors import JestRunnerError


class TestFindWorkspaceRoot:
    """Tests for find_workspace_root function."""

    def test_finds_git_root_from_file(self, workspace: Path) -> None:
        """A file path resolves to the directory holding .git."""
        result = find_workspace_root(workspace / "src" / "sum.test.js")

        assert result == workspace

    def test_git_beats_nearer_package_json(self, workspace: Path) -> None:
        """.git is searched before package.json."""
        (workspace / "src" / "package.json").write_text("{}")

        result = find_workspace_root(workspace / "src")

        assert result == workspace

    def test_package_json_without_git(self, tmp_path: Path) -> None:
        project = tmp_path / "project"
        (project / "lib").mkdir(parents=True)
        (project / "package.json").write_text("{}")

        result = find_workspace_root(project / "lib")

        assert result == project

    def test_raises_when_no_marker(self, tmp_path: Path) -> None:
        """Raises ClickException naming the searched path."""
        with pytest.raises(click.ClickException) as exc_info:
            find_workspace_root(tmp_path)

        assert str(tmp_path) in exc_info.value.message

    def test_explicit_workspace_wins(self, workspace: Path, tmp_path: Path) -> None:
        state = CliState(workspace=tmp_path)

        assert resolve_workspace(state, workspace / "src") == tmp_path.resolve()


class TestCliErrors:
    """jestrunner errors surface as click errors."""

    def test_translates_jestrunner_error(self) -> None:
        with pytest.raises(click.ClickException) as exc_info, cli_errors():
            raise JestRunnerError.no_previous_command()

        assert "NO_PREVIOUS_COMMAND" in exc_info.value.message

    def test_other_errors_propagate(self) -> None:
        with pytest.raises(RuntimeError), cli_errors():
            raise RuntimeError("boom")
