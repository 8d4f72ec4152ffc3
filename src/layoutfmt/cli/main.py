# topmark:header:start
#
#   project      : LayoutFmt
#   file         : main.py
#   file_relpath : src/layoutfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for LayoutFmt.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read them back through `layoutfmt.cli.cmd_common`.
"""

from __future__ import annotations

import sys

import click

from layoutfmt.cli.commands.check import check_command
from layoutfmt.cli.commands.config import config_command
from layoutfmt.cli.commands.format import format_command
from layoutfmt.cli.commands.version import version_command
from layoutfmt.cli.console import ClickConsole
from layoutfmt.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from layoutfmt.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int, no_color: bool) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed. Color is also off when
            stdout is not a terminal.
    """
    ctx.ensure_object(dict)

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = not no_color and sys.stdout.isatty()
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="LayoutFmt: configuration-driven pretty-printer.",
)
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, help="Disable ANSI colors in the output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the LayoutFmt CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'layoutfmt format TREE' to format a syntax tree.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(format_command)

cli.add_command(check_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
