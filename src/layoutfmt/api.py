# topmark:header:start
#
#   project      : LayoutFmt
#   file         : api.py
#   file_relpath : src/layoutfmt/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for LayoutFmt.

This module exposes the small, stable surface used by integrations and the CLI:

- `load_config`: build a `Config` snapshot from a manifest and/or raw options.
- `format_tree`: format a syntax tree (node objects) with a snapshot or raw options.
- `format_json`: same, starting from the JSON interchange document.

All three are pure with respect to their inputs, apart from the manifest read
performed by `load_config`. Configuration problems raise `ConfigError` before any
rendering happens; width problems never raise and are reported as diagnostics on
the returned `FormatResult`.

Examples:
    ```python
    from layoutfmt import api

    result = api.format_json(document, {"max_width": 80})
    print(result.text, end="")
    for diag in result.diagnostics:
        print(diag.render())
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layoutfmt.config import Config, MutableConfig, UnstablePolicy, resolve
from layoutfmt.config.logging import get_logger
from layoutfmt.engine import FormatResult, PrettyPrinter
from layoutfmt.syntax import loads

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from layoutfmt.config import RawOptions
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)

API_SOURCE: str = "<api>"


def load_config(
    raw_options: RawOptions | None = None,
    *,
    overrides: Iterable[str] = (),
    unstable_enabled: bool | None = None,
    unstable_policy: UnstablePolicy | None = None,
    manifest_path: Path | None = None,
    search_from: Path | None = None,
) -> Config:
    """Build a configuration snapshot from layered sources.

    Layers, lowest precedence first: defaults, the manifest (``manifest_path`` or the
    nearest one found from ``search_from``), ``raw_options``, then ``overrides``.

    Args:
        raw_options (RawOptions | None): In-memory option mapping.
        overrides (Iterable[str]): ``key=value`` strings, as accepted by ``--config``.
        unstable_enabled (bool | None): Forces the unstable switch when not None.
        unstable_policy (UnstablePolicy | None): Gate policy; REJECT when None.
        manifest_path (Path | None): Explicit manifest file.
        search_from (Path | None): Start directory for manifest discovery.

    Returns:
        Config: The resolved, immutable snapshot.

    Raises:
        ConfigError: If any layer is unreadable or any option fails resolution.
    """
    draft: MutableConfig = MutableConfig.load_merged(
        manifest_path=manifest_path,
        search_from=search_from,
        overrides=raw_options,
        unstable_enabled=unstable_enabled,
        unstable_policy=unstable_policy,
    ).apply_overrides(overrides)
    logger.debug("Resolving configuration from %s", draft.sources)
    return draft.freeze()


def _as_config(
    options: Config | RawOptions | None,
    unstable_enabled: bool | None,
    unstable_policy: UnstablePolicy | None,
) -> Config:
    if isinstance(options, Config):
        return options
    return resolve(
        options or {},
        unstable_enabled,
        policy=unstable_policy or UnstablePolicy.REJECT,
        sources=(API_SOURCE,),
    )


def format_tree(
    tree: Node,
    options: Config | RawOptions | None = None,
    *,
    unstable_enabled: bool | None = None,
    unstable_policy: UnstablePolicy | None = None,
    source_text: str | None = None,
) -> FormatResult:
    """Format a syntax tree.

    Args:
        tree (Node): Root node, usually a `SourceFile`.
        options (Config | RawOptions | None): A resolved snapshot (used as is), a raw
            option mapping (resolved here), or None for the defaults.
        unstable_enabled (bool | None): Unstable switch for raw options; ignored for a `Config`.
        unstable_policy (UnstablePolicy | None): Gate policy for raw options.
        source_text (str | None): Original source text, used by ``newline_style = Auto``
            and to fill `FormatResult.changed`.

    Returns:
        FormatResult: Formatted text plus diagnostics.

    Raises:
        ConfigError: If raw options fail resolution. Nothing is rendered in that case.
    """
    config: Config = _as_config(options, unstable_enabled, unstable_policy)
    return PrettyPrinter(config).format(tree, source_text=source_text)


def format_json(
    document: str,
    options: Config | RawOptions | None = None,
    *,
    unstable_enabled: bool | None = None,
    unstable_policy: UnstablePolicy | None = None,
    source_text: str | None = None,
) -> FormatResult:
    """Format a syntax tree given as a JSON interchange document.

    Options are resolved before the document is decoded, so a configuration error
    is reported even for a malformed document.

    Raises:
        ConfigError: If raw options fail resolution.
        SyntaxTreeError: If ``document`` is not a valid syntax tree.
    """
    config: Config = _as_config(options, unstable_enabled, unstable_policy)
    tree: Node = loads(document)
    return PrettyPrinter(config).format(tree, source_text=source_text)
