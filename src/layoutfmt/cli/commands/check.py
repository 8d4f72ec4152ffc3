# topmark:header:start
#
#   project      : LayoutFmt
#   file         : check.py
#   file_relpath : src/layoutfmt/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LayoutFmt `check` command.

Formats a syntax tree and compares the result with the original source text.
Exits with `ExitCode.WOULD_CHANGE` when formatting would alter the source, so the
command can gate CI jobs. Nothing is written.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layoutfmt.api import format_tree
from layoutfmt.cli.cmd_common import (
    build_config,
    emit_diagnostics,
    get_effective_verbosity,
    load_tree,
    read_text,
    tree_directory,
)
from layoutfmt.cli.console import get_console
from layoutfmt.cli.diff import render_patch, unified_diff
from layoutfmt.cli.options import CONTEXT_SETTINGS, common_config_options
from layoutfmt.config.logging import get_logger
from layoutfmt.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from layoutfmt.cli.console import ConsoleLike
    from layoutfmt.config import Config
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.engine import FormatResult
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Check that a source file is already formatted (exit 2 if not).",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Fail when main.rs is not formatted
  layoutfmt check --source main.rs tree.json

  # Show what would change
  layoutfmt check --diff --source main.rs tree.json
""",
)
@click.argument("tree", type=click.Path(dir_okay=False, allow_dash=True))
@common_config_options
@click.option(
    "--source",
    "source_path",
    type=click.Path(dir_okay=False),
    required=True,
    help="Original source text to compare the formatted output against.",
)
@click.option("--diff", is_flag=True, help="Show a unified diff when the source would change.")
def check_command(
    *,
    tree: str,
    config_path: str | None,
    overrides: tuple[str, ...],
    unstable_features: bool | None,
    ignore_unstable: bool,
    source_path: str,
    diff: bool,
) -> None:
    """Compare the formatted tree with the source file.

    Args:
        tree (str): Path of the JSON syntax tree, or ``-`` for STDIN.
        config_path (str | None): Explicit manifest path.
        overrides (tuple[str, ...]): ``key=value`` overrides.
        unstable_features (bool | None): Force the unstable switch on.
        ignore_unstable (bool): Ignore gated options instead of failing.
        source_path (str): Original source file.
        diff (bool): Print a unified diff for changed sources.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        config_path=config_path,
        overrides=overrides,
        unstable_features=unstable_features,
        ignore_unstable=ignore_unstable,
        search_from=tree_directory(tree),
    )
    node: Node = load_tree(tree)
    source_text: str = read_text(source_path)

    result: FormatResult = format_tree(node, config, source_text=source_text)
    emit_diagnostics(console, result.diagnostics, verbosity=vlevel, label=source_path)

    if not result.changed:
        if vlevel > 0:
            console.print(f"{source_path} is formatted")
        return

    console.print(console.styled(f"would reformat {source_path}", bold=True))
    if diff:
        patch: str = unified_diff(source_text, result.text, name=source_path)
        console.print(render_patch(patch, color=console.enable_color))
    logger.info("Check failed for %s", source_path)
    ctx.exit(ExitCode.WOULD_CHANGE)
