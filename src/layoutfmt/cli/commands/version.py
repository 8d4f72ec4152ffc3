# topmark:header:start
#
#   project      : LayoutFmt
#   file         : version.py
#   file_relpath : src/layoutfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LayoutFmt `version` command.

Prints the current LayoutFmt version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layoutfmt.cli.cmd_common import get_effective_verbosity
from layoutfmt.cli.console import get_console
from layoutfmt.constants import LAYOUTFMT_VERSION

if TYPE_CHECKING:
    from layoutfmt.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LayoutFmt.",
)
def version_command() -> None:
    """Show the current version of LayoutFmt."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("LayoutFmt version:", bold=True, underline=True))
        console.print(f"    {console.styled(LAYOUTFMT_VERSION, bold=True)}")
    else:
        console.print(console.styled(LAYOUTFMT_VERSION, bold=True))
