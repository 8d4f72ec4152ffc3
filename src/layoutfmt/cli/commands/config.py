# topmark:header:start
#
#   project      : LayoutFmt
#   file         : config.py
#   file_relpath : src/layoutfmt/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LayoutFmt `config` command group.

Subcommands for inspecting configuration:

  * ``layoutfmt config dump``: show the effective merged configuration.
  * ``layoutfmt config defaults``: show every option at its default, annotated.

Output is TOML wrapped between ``# === BEGIN ===`` and ``# === END ===`` markers;
both markers are comments, so the output remains a valid manifest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from layoutfmt.cli.cmd_common import build_config, emit_diagnostics, get_effective_verbosity
from layoutfmt.cli.console import get_console
from layoutfmt.cli.options import CONTEXT_SETTINGS, common_config_options
from layoutfmt.config import MutableConfig
from layoutfmt.config.io import render_annotated_manifest, to_toml
from layoutfmt.config.logging import get_logger
from layoutfmt.constants import DUMP_BEGIN_MARKER, DUMP_END_MARKER

if TYPE_CHECKING:
    from layoutfmt.cli.console import ConsoleLike
    from layoutfmt.config import Config
    from layoutfmt.config.io import TomlTable
    from layoutfmt.config.logging import LayoutfmtLogger

logger: LayoutfmtLogger = get_logger(__name__)


def _emit_toml(console: ConsoleLike, title: str, body: str, *, verbosity: int) -> None:
    if verbosity > 0:
        console.print(console.styled(title, bold=True, underline=True))
    console.print(DUMP_BEGIN_MARKER)
    console.print(body.rstrip("\n"))
    console.print(DUMP_END_MARKER)


@click.group(
    name="config",
    help="Inspect LayoutFmt configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands.

    This group itself performs no action; use ``dump`` or ``defaults``.
    """


@click.command(
    name="dump",
    help="Dump the effective configuration (defaults, manifest, overrides) as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@click.option(
    "--changed-only",
    "changed_only",
    is_flag=True,
    help="Only show options that differ from their default.",
)
@click.option(
    "--annotated",
    is_flag=True,
    help="Add a descriptive comment above each option.",
)
def config_dump_command(
    *,
    config_path: str | None,
    overrides: tuple[str, ...],
    unstable_features: bool | None,
    ignore_unstable: bool,
    changed_only: bool,
    annotated: bool,
) -> None:
    """Dump the effective configuration as TOML.

    Args:
        config_path (str | None): Explicit manifest path; discovered from the
            working directory when None.
        overrides (tuple[str, ...]): ``key=value`` overrides.
        unstable_features (bool | None): Force the unstable switch on.
        ignore_unstable (bool): Ignore gated options instead of failing.
        changed_only (bool): Omit options at their default value.
        annotated (bool): Emit a comment per option.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config(
        config_path=config_path,
        overrides=overrides,
        unstable_features=unstable_features,
        ignore_unstable=ignore_unstable,
    )
    logger.trace("Config after merging: %s", config)

    table: TomlTable = config.to_toml_dict(only_changed=changed_only)
    body: str = render_annotated_manifest(table) if annotated else to_toml(table)
    title: str = "Effective configuration (sources: " + ", ".join(config.sources) + ")"
    _emit_toml(console, title, body, verbosity=vlevel)
    emit_diagnostics(console, config.diagnostics, verbosity=vlevel, label="config")


@click.command(
    name="defaults",
    help="Show every option at its default value, with a description.",
    context_settings=CONTEXT_SETTINGS,
)
def config_defaults_command() -> None:
    """Display the built-in defaults as an annotated manifest."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    defaults: Config = MutableConfig.from_defaults().freeze()
    body: str = render_annotated_manifest(defaults.to_toml_dict())
    _emit_toml(console, "Default configuration (TOML):", body, verbosity=vlevel)


config_command.add_command(config_dump_command)
config_command.add_command(config_defaults_command)
