# topmark:header:start
#
#   project      : LayoutFmt
#   file         : options.py
#   file_relpath : src/layoutfmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the LayoutFmt commands.

This module centralizes reusable options (verbosity, configuration sources) and
their resolution logic, so commands and groups can stay thin. The helpers here
are Click-aware.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from layoutfmt.cli.errors import LayoutfmtUsageError
from layoutfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from layoutfmt.config.logging import LayoutfmtLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: LayoutfmtLogger = get_logger(__name__)

#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Returns:
        int: ``0`` by default, the number of ``-v`` flags when verbose,
        ``-1`` when quiet (diagnostics are not printed).

    Raises:
        LayoutfmtUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LayoutfmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def trap_underscored_option(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Reject an underscored long option with a hint naming the hyphenated spelling."""
    if value:
        name: str = param.opts[0]
        raise LayoutfmtUsageError(f"Unknown option {name}; did you mean {name.replace('_', '-')}?")
    return value


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    The hidden option gets a unique destination name so Click's parameter source
    tracking never overlaps with the real option's destination.

    Args:
        *names: One or more underscored long option names to trap, e.g. "--config_path".

    Returns:
        A decorator compatible with Click's option stacking.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")
    dest: str = f"_trap_{names[0].lstrip('-').replace('-', '_')}"
    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress diagnostics output.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the configuration source options to a Click command.

    Adds ``--config-path``, ``--config``, ``--unstable-features`` and ``--ignore-unstable``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config-path",
        "config_path",
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        default=None,
        help="Manifest to use instead of discovering rustfmt.toml/.rustfmt.toml.",
    )(f)
    f = underscored_trap_option("--config_path")(f)
    f = click.option(
        "--config",
        "overrides",
        metavar="KEY=VALUE",
        multiple=True,
        help="Override one option (repeatable), e.g. --config max_width=80.",
    )(f)
    f = click.option(
        "--unstable-features",
        "unstable_features",
        is_flag=True,
        default=None,
        help="Enable unstable options regardless of the manifest.",
    )(f)
    f = underscored_trap_option("--unstable_features")(f)
    f = click.option(
        "--ignore-unstable",
        "ignore_unstable",
        is_flag=True,
        default=False,
        help="Ignore (with a warning) unstable options instead of failing.",
    )(f)
    f = underscored_trap_option("--ignore_unstable")(f)
    return f
