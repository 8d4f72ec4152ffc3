# topmark:header:start
#
#   project      : LayoutFmt
#   file         : cmd_common.py
#   file_relpath : src/layoutfmt/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for LayoutFmt commands.

Commands stay thin: they read inputs, build the configuration and call the API
through these helpers, which translate library exceptions into CLI errors with
the right exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from layoutfmt.api import load_config
from layoutfmt.cli.errors import (
    LayoutfmtConfigError,
    LayoutfmtDataError,
    LayoutfmtFileNotFoundError,
    LayoutfmtIOError,
)
from layoutfmt.config import ConfigError, UnstablePolicy
from layoutfmt.config.logging import get_logger
from layoutfmt.core.diagnostics import compute_diagnostic_stats
from layoutfmt.syntax import SyntaxTreeError, loads

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from layoutfmt.cli.console import ConsoleLike
    from layoutfmt.config import Config
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.core.diagnostics import Diagnostic, DiagnosticStats
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 when unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    *,
    config_path: str | None,
    overrides: Sequence[str],
    unstable_features: bool | None,
    ignore_unstable: bool,
    search_from: Path | None = None,
) -> Config:
    """Build the effective configuration from the command-line options.

    Args:
        config_path (str | None): Explicit manifest; disables discovery.
        overrides (Sequence[str]): ``key=value`` strings from ``--config``.
        unstable_features (bool | None): True when ``--unstable-features`` was given.
        ignore_unstable (bool): Selects the IGNORE policy for unstable options.
        search_from (Path | None): Start of manifest discovery; the working
            directory when None.

    Raises:
        LayoutfmtConfigError: For any configuration error.
    """
    manifest_path: Path | None = Path(config_path) if config_path else None
    try:
        config: Config = load_config(
            overrides=overrides,
            unstable_enabled=True if unstable_features else None,
            unstable_policy=UnstablePolicy.IGNORE if ignore_unstable else None,
            manifest_path=manifest_path,
            search_from=None if manifest_path else (search_from or Path.cwd()),
        )
    except ConfigError as exc:
        raise LayoutfmtConfigError(exc.message) from exc
    logger.debug("Effective configuration from %s", config.sources)
    return config


def read_text(path: str) -> str:
    """Read a UTF-8 text input, with ``-`` meaning standard input.

    Line endings are preserved.

    Raises:
        LayoutfmtFileNotFoundError: If ``path`` does not exist.
        LayoutfmtIOError: If ``path`` cannot be read.
    """
    if path == STDIN_MARKER:
        return click.get_text_stream("stdin").read()
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError as exc:
        raise LayoutfmtFileNotFoundError(f"No such file: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LayoutfmtIOError(f"Cannot read {path}: {exc}") from exc


def write_text(path: str, text: str) -> None:
    """Write ``text`` to ``path`` without translating line endings.

    Raises:
        LayoutfmtIOError: If ``path`` cannot be written.
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise LayoutfmtIOError(f"Cannot write {path}: {exc}") from exc
    logger.info("Wrote %d character(s) to %s", len(text), path)


def load_tree(path: str) -> Node:
    """Read and decode a syntax tree document.

    Raises:
        LayoutfmtDataError: If the document is not a valid syntax tree.
    """
    document: str = read_text(path)
    try:
        return loads(document)
    except SyntaxTreeError as exc:
        raise LayoutfmtDataError(f"{path}: {exc}") from exc


def tree_directory(path: str) -> Path | None:
    """Return the directory manifest discovery should start from for ``path``."""
    if path == STDIN_MARKER:
        return None
    return Path(path).resolve().parent


def emit_diagnostics(
    console: ConsoleLike,
    diagnostics: Iterable[Diagnostic],
    *,
    verbosity: int,
    label: str,
) -> None:
    """Print diagnostics to stderr, unless output is quiet.

    With ``-v`` a per-level summary line follows the diagnostics.
    """
    if verbosity < 0:
        return
    items: list[Diagnostic] = list(diagnostics)
    for diag in items:
        console.warn(f"{label}: {diag.render(color=False)}")
    if verbosity > 0:
        stats: DiagnosticStats = compute_diagnostic_stats(items)
        summary: str = f"{label}: {stats.n_warning} warning(s), {stats.n_info} info"
        console.warn(console.styled(summary, bold=True))
