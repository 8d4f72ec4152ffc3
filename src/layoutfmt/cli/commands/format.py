# topmark:header:start
#
#   project      : LayoutFmt
#   file         : format.py
#   file_relpath : src/layoutfmt/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LayoutFmt `format` command.

Formats one syntax tree document (JSON interchange format, or ``-`` for STDIN)
and writes the result to stdout or to ``--output``. Width diagnostics go to
stderr and never change the exit status.
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
    write_text,
)
from layoutfmt.cli.console import get_console
from layoutfmt.cli.options import CONTEXT_SETTINGS, common_config_options
from layoutfmt.config.logging import get_logger

if TYPE_CHECKING:
    from layoutfmt.cli.console import ConsoleLike
    from layoutfmt.config import Config
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.engine import FormatResult
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)


@click.command(
    name="format",
    help="Format a syntax tree document and print the result.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Format with the nearest rustfmt.toml
  layoutfmt format tree.json

  # Override options and keep the source's line endings
  layoutfmt format --config max_width=80 --source main.rs tree.json
""",
)
@click.argument("tree", type=click.Path(dir_okay=False, allow_dash=True))
@common_config_options
@click.option(
    "--source",
    "source_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Original source text (line-ending detection for newline_style=Auto).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the formatted text to this file instead of stdout.",
)
def format_command(
    *,
    tree: str,
    config_path: str | None,
    overrides: tuple[str, ...],
    unstable_features: bool | None,
    ignore_unstable: bool,
    source_path: str | None,
    output_path: str | None,
) -> None:
    """Format a syntax tree document.

    Args:
        tree (str): Path of the JSON syntax tree, or ``-`` for STDIN.
        config_path (str | None): Explicit manifest path.
        overrides (tuple[str, ...]): ``key=value`` overrides.
        unstable_features (bool | None): Force the unstable switch on.
        ignore_unstable (bool): Ignore gated options instead of failing.
        source_path (str | None): Original source file, if available.
        output_path (str | None): Destination file; stdout when None.
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
    source_text: str | None = read_text(source_path) if source_path else None

    result: FormatResult = format_tree(node, config, source_text=source_text)
    if output_path:
        write_text(output_path, result.text)
    else:
        console.print(result.text, nl=False)
    emit_diagnostics(console, result.diagnostics, verbosity=vlevel, label=tree)
