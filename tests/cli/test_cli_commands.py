# topmark:header:start
#
#   project      : LayoutFmt
#   file         : test_cli_commands.py
#   file_relpath : tests/cli/test_cli_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `layoutfmt` command-line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layoutfmt.constants import DUMP_BEGIN_MARKER, DUMP_END_MARKER, LAYOUTFMT_VERSION
from layoutfmt.core.exit_codes import ExitCode
from layoutfmt.syntax import dumps
from layoutfmt.syntax.nodes import Binary, Block, ExprStmt, Fn, Param, Path, Return, SourceFile
from tests.cli.conftest import (
    assert_SUCCESS,
    assert_WOULD_CHANGE,
    run_cli,
    run_cli_in,
    write_tree,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    import pathlib

    from click.testing import Result

ADD = SourceFile(
    (
        Fn(
            "add",
            params=(Param("a"), Param("b")),
            body=Block((ExprStmt(Return(Binary("+", Path("a"), Path("b"))), semi=False),)),
        ),
    )
)
FORMATTED: str = "fn add(a, b) {\n    return a + b\n}\n"
UNIX: list[str] = ["--config", "newline_style=Unix"]


def dumped_body(output: str) -> str:
    """Return the text between the dump markers."""
    return output.split(DUMP_BEGIN_MARKER + "\n", 1)[1].split(DUMP_END_MARKER, 1)[0]


# ------------------ version / group ------------------


@mark_cli
def test_version_prints_the_version() -> None:
    """It should print the bare version string."""
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == LAYOUTFMT_VERSION


@mark_cli
def test_group_without_command_prints_a_hint() -> None:
    """It should print a hint and the help text."""
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert result.output.startswith("Hint: use 'layoutfmt format TREE'")


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """It should refuse -v together with -q."""
    result: Result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


@mark_cli
def test_underscored_option_is_trapped(tmp_path: pathlib.Path) -> None:
    """It should suggest the hyphenated spelling of a long option."""
    write_tree(tmp_path, ADD)
    result: Result = run_cli_in(tmp_path, ["format", "--unstable_features", "tree.json"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "--unstable-features" in result.output


# ------------------ format ------------------


@mark_cli
def test_format_prints_the_formatted_text(tmp_path: pathlib.Path) -> None:
    """It should write the formatted tree to stdout."""
    write_tree(tmp_path, ADD)
    result: Result = run_cli_in(tmp_path, ["format", "tree.json", *UNIX])
    assert_SUCCESS(result)
    assert result.output == FORMATTED


@mark_cli
def test_format_reads_stdin(tmp_path: pathlib.Path) -> None:
    """It should accept ``-`` for a document on standard input."""
    result: Result = run_cli_in(tmp_path, ["format", "-", *UNIX], input_text=dumps(ADD))
    assert_SUCCESS(result)
    assert result.output == FORMATTED


@mark_cli
def test_format_writes_the_output_file(tmp_path: pathlib.Path) -> None:
    """It should write to --output instead of stdout."""
    write_tree(tmp_path, ADD)
    result: Result = run_cli_in(tmp_path, ["format", "tree.json", "-o", "add.rs", *UNIX])
    assert_SUCCESS(result)
    assert result.output == ""
    assert (tmp_path / "add.rs").read_text(encoding="utf-8") == FORMATTED


@mark_cli
def test_format_discovers_the_manifest_above_the_tree(tmp_path: pathlib.Path) -> None:
    """It should find rustfmt.toml in a parent directory of the tree."""
    (tmp_path / "rustfmt.toml").write_text(
        'unstable_features = true\nfn_single_line = true\nnewline_style = "Unix"\n',
        encoding="utf-8",
    )
    sub: pathlib.Path = tmp_path / "sub"
    sub.mkdir()
    write_tree(sub, ADD)
    result: Result = run_cli_in(tmp_path, ["format", "sub/tree.json"])
    assert_SUCCESS(result)
    assert result.output == "fn add(a, b) { return a + b }\n"


@mark_cli
def test_format_explicit_config_path(tmp_path: pathlib.Path) -> None:
    """It should use --config-path instead of discovery, and let --config win over it."""
    (tmp_path / "custom.toml").write_text("max_width = 12\n", encoding="utf-8")
    write_tree(tmp_path, ADD)
    argv: list[str] = ["format", "tree.json", "--config-path", "custom.toml", *UNIX]

    narrow: Result = run_cli_in(tmp_path, argv)
    assert_SUCCESS(narrow)
    assert narrow.output.startswith("fn add(\n")

    wide: Result = run_cli_in(tmp_path, [*argv, "--config", "max_width=100"])
    assert_SUCCESS(wide)
    assert wide.output == FORMATTED


@mark_cli
def test_format_unstable_option_needs_the_switch(tmp_path: pathlib.Path) -> None:
    """It should reject unstable options unless enabled or ignored."""
    write_tree(tmp_path, ADD)
    argv: list[str] = ["format", "tree.json", "--config", "fn_single_line=true", *UNIX]

    rejected: Result = run_cli_in(tmp_path, argv)
    assert rejected.exit_code == ExitCode.CONFIG_ERROR
    assert "`fn_single_line` is unstable" in rejected.output

    enabled: Result = run_cli_in(tmp_path, [*argv, "--unstable-features"])
    assert_SUCCESS(enabled)
    assert enabled.output == "fn add(a, b) { return a + b }\n"

    ignored: Result = run_cli_in(tmp_path, [*argv, "--ignore-unstable"])
    assert_SUCCESS(ignored)
    assert FORMATTED in ignored.output
    assert "Ignoring unstable option `fn_single_line`" in ignored.output


@mark_cli
def test_format_error_exit_codes(tmp_path: pathlib.Path) -> None:
    """It should map configuration, document and file errors to distinct exit codes."""
    write_tree(tmp_path, ADD)
    (tmp_path / "bad.json").write_text("{}", encoding="utf-8")

    unknown: Result = run_cli_in(tmp_path, ["format", "tree.json", "--config", "bogus=1"])
    assert unknown.exit_code == ExitCode.CONFIG_ERROR
    assert "bogus" in unknown.output

    malformed: Result = run_cli_in(tmp_path, ["format", "tree.json", "--config", "max_width"])
    assert malformed.exit_code == ExitCode.CONFIG_ERROR

    superscript: Result = run_cli_in(
        tmp_path, ["format", "tree.json", "--config", "max_width=\u00b2"]
    )
    assert superscript.exit_code == ExitCode.CONFIG_ERROR
    assert "`max_width`" in superscript.output

    bad: Result = run_cli_in(tmp_path, ["format", "bad.json"])
    assert bad.exit_code == ExitCode.DATA_ERROR
    assert "bad.json" in bad.output

    missing: Result = run_cli_in(tmp_path, ["format", "missing.json"])
    assert missing.exit_code == ExitCode.FILE_NOT_FOUND


@mark_cli
def test_quiet_hides_width_diagnostics(tmp_path: pathlib.Path) -> None:
    """It should print width diagnostics to stderr unless -q is given."""
    write_tree(tmp_path, ADD)
    argv: list[str] = ["format", "tree.json", "--config", "max_width=5", *UNIX]

    loud: Result = run_cli_in(tmp_path, argv)
    assert_SUCCESS(loud)
    assert "tree.json: line 1: [warning]" in loud.output

    verbose: Result = run_cli_in(tmp_path, ["-v", *argv])
    assert_SUCCESS(verbose)
    assert "warning(s), 0 info" in verbose.output

    quiet: Result = run_cli_in(tmp_path, ["-q", *argv])
    assert_SUCCESS(quiet)
    assert "[warning]" not in quiet.output


# ------------------ check ------------------


@mark_cli
def test_check_passes_for_formatted_source(tmp_path: pathlib.Path) -> None:
    """It should exit 0 when the source already matches."""
    write_tree(tmp_path, ADD)
    (tmp_path / "add.rs").write_text(FORMATTED, encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["check", "tree.json", "--source", "add.rs"])
    assert_SUCCESS(result)
    assert "would reformat" not in result.output


@mark_cli
def test_check_fails_for_unformatted_source(tmp_path: pathlib.Path) -> None:
    """It should exit 2 and optionally show a diff."""
    write_tree(tmp_path, ADD)
    (tmp_path / "add.rs").write_text("fn add(a,b){return a+b}\n", encoding="utf-8")

    plain: Result = run_cli_in(tmp_path, ["check", "tree.json", "--source", "add.rs"])
    assert_WOULD_CHANGE(plain)
    assert "would reformat add.rs" in plain.output
    assert "@@" not in plain.output

    diff: Result = run_cli_in(tmp_path, ["check", "tree.json", "--source", "add.rs", "--diff"])
    assert_WOULD_CHANGE(diff)
    assert "-fn add(a,b){return a+b}" in diff.output
    assert "+fn add(a, b) {" in diff.output


# ------------------ config ------------------


@mark_cli
def test_config_dump_includes_overrides(tmp_path: pathlib.Path) -> None:
    """It should dump every option between the markers, with overrides applied."""
    result: Result = run_cli_in(tmp_path, ["config", "dump", "--config", "max_width=80"])
    assert_SUCCESS(result)
    body: str = dumped_body(result.output)
    assert "max_width = 80\n" in body
    assert "tab_spaces = 4\n" in body


@mark_cli
def test_config_dump_changed_only(tmp_path: pathlib.Path) -> None:
    """It should omit options at their default value."""
    argv: list[str] = ["config", "dump", "--changed-only", "--config", "max_width=80"]
    result: Result = run_cli_in(tmp_path, argv)
    assert_SUCCESS(result)
    assert dumped_body(result.output) == "max_width = 80\n"


@mark_cli
def test_config_dump_annotated_and_gated(tmp_path: pathlib.Path) -> None:
    """It should annotate on request and apply the unstable gate like format does."""
    annotated: Result = run_cli_in(tmp_path, ["config", "dump", "--annotated"])
    assert_SUCCESS(annotated)
    assert "# Maximum width of each line\nmax_width = 100\n" in annotated.output

    gated: Result = run_cli_in(tmp_path, ["config", "dump", "--config", "fn_single_line=true"])
    assert gated.exit_code == ExitCode.CONFIG_ERROR


@mark_cli
def test_config_defaults() -> None:
    """It should list every default with descriptions and stability notes."""
    result: Result = run_cli(["config", "defaults"])
    assert_SUCCESS(result)
    body: str = dumped_body(result.output)
    assert "max_width = 100\n" in body
    assert "# Note: Unstable\nfn_single_line = false\n" in body
