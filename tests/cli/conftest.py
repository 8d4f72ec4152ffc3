# topmark:header:start
#
#   project      : LayoutFmt
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LayoutFmt in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so manifest discovery from the working directory
never reaches the repository.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from layoutfmt.cli.main import cli
from layoutfmt.core.exit_codes import ExitCode
from layoutfmt.syntax import dumps

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from layoutfmt.syntax.nodes import Node


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["format", "tree.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input to pass to the command.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["format", "tree.json"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files or manifests
    (e.g., ``--help`` / ``version``).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_tree(tmp_path: Path, tree: Node, name: str = "tree.json") -> Path:
    """Write ``tree`` as a JSON interchange document under ``tmp_path``.

    Returns:
        Path: The document path.
    """
    path: Path = tmp_path / name
    path.write_text(dumps(tree, indent=2), encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
