# topmark:header:start
#
#   project      : LayoutFmt
#   file         : model.py
#   file_relpath : src/layoutfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: the immutable snapshot shared read-only by every renderer.
    - `MutableConfig`: a mutable builder of *raw* option layers used during
      discovery/merge; it is frozen into `Config` through the resolver and can be
      thawed back for edits.

Layering (last wins per key):
    defaults (schema) -> manifest file -> explicit overrides (CLI/API)

Immutability:
    - `Config` is ``frozen=True`` and holds only scalars, enums and tuples, so one
      snapshot can be shared by engines formatting files in parallel without locking.
    - Use `Config.thaw` -> edit -> `MutableConfig.freeze` for safe updates.

Raw layers hold only explicitly requested options; defaults are filled in by the
resolver. This keeps an unstable option's *default* from counting as a request.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any

from layoutfmt.config.errors import ConfigError
from layoutfmt.config.logging import get_logger
from layoutfmt.config.options import OPTIONS
from layoutfmt.config.types import ImportsIndent, NewlineStyle, UnstablePolicy
from layoutfmt.core.diagnostics import FrozenDiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from layoutfmt.config.io.types import TomlTable
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.config.options import OptionValue
    from layoutfmt.config.types import RawOptions

logger: LayoutfmtLogger = get_logger(__name__)

DEFAULTS_SOURCE: str = "<defaults>"
OVERRIDES_SOURCE: str = "<overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration snapshot for one formatting run.

    Produced by `layoutfmt.config.resolver.resolve` (directly or through
    `MutableConfig.freeze`). Every option has exactly one resolved value.

    Attributes:
        max_width (int): Maximum width of each output line.
        tab_spaces (int): Columns per indentation level.
        newline_style (NewlineStyle): Line endings of the output.
        unstable_features (bool): Effective value of the unstable switch.
        fn_single_line (bool): Put single-statement functions on one line when they fit.
        force_multiline_blocks (bool): Wrap multi-line closure and match arm bodies in a block.
        imports_indent (ImportsIndent): Layout of wrapped import lists.
        inline_attribute_width (int): Fuse a single attribute with its item below this width
            (0 disables fusion).
        match_block_trailing_comma (bool): Put a comma after block-bodied match arms.
        overflow_delimited_expr (bool): Let a delimited last argument overflow the line.
        use_field_init_shorthand (bool): Render ``x: x`` struct literal fields as ``x``.
        sources (tuple[str, ...]): Provenance of the raw layers (manifest paths, labels).
        diagnostics (FrozenDiagnosticLog): Notices recorded while resolving
            (e.g. ignored unstable options).
    """

    max_width: int
    tab_spaces: int
    newline_style: NewlineStyle
    unstable_features: bool
    fn_single_line: bool
    force_multiline_blocks: bool
    imports_indent: ImportsIndent
    inline_attribute_width: int
    match_block_trailing_comma: bool
    overflow_delimited_expr: bool
    use_field_init_shorthand: bool

    sources: tuple[str, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def value_of(self, name: str) -> OptionValue:
        """Return the resolved value of option ``name``.

        Raises:
            KeyError: If ``name`` is not a recognized option.
        """
        if name not in OPTIONS:
            raise KeyError(name)
        return getattr(self, name)

    def to_toml_dict(self, *, only_changed: bool = False) -> TomlTable:
        """Convert this snapshot into a manifest-shaped dict.

        Args:
            only_changed (bool): If True, omit options that equal their default.

        Returns:
            TomlTable: Option name -> TOML scalar, in schema order.
        """
        out: TomlTable = {}
        for name, spec in OPTIONS.items():
            value: OptionValue = getattr(self, name)
            if only_changed and value == spec.default:
                continue
            out[name] = spec.to_toml_value(value)
        return out

    def thaw(self) -> MutableConfig:
        """Return a mutable builder seeded with this snapshot's non-default values.

        Symmetry:
            Mirrors `MutableConfig.freeze`. Prefer thaw->edit->freeze rather
            than rebuilding a snapshot by hand.
        """
        return MutableConfig(
            options=self.to_toml_dict(only_changed=True),
            sources=list(self.sources),
            unstable_enabled=self.unstable_features,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        options (dict[str, Any]): Raw, explicitly requested options (not yet validated).
        sources (list[str]): Provenance labels, in merge order.
        unstable_enabled (bool | None): Forced unstable switch; ``None`` = read from ``options``.
        unstable_policy (UnstablePolicy | None): Gate policy; ``None`` = inherit (REJECT).
    """

    options: dict[str, Any] = field(default_factory=lambda: {})
    sources: list[str] = field(default_factory=lambda: [])
    unstable_enabled: bool | None = None
    unstable_policy: UnstablePolicy | None = None

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Resolve the raw layers into an immutable `Config`.

        Raises:
            ConfigError: Any resolution failure; no partial snapshot is produced.
        """
        from layoutfmt.config.resolver import resolve

        return resolve(
            self.options,
            self.unstable_enabled,
            policy=self.unstable_policy or UnstablePolicy.REJECT,
            sources=self.sources,
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return an empty builder (every option at its schema default)."""
        return cls(sources=[DEFAULTS_SOURCE])

    @classmethod
    def from_mapping(cls, options: RawOptions, *, source: str = "<api>") -> MutableConfig:
        """Wrap an in-memory raw option mapping as one layer."""
        return cls(options=dict(options), sources=[source])

    @classmethod
    def from_manifest_file(cls, path: Path) -> MutableConfig:
        """Load one manifest file as a layer.

        Raises:
            ManifestError: If the file cannot be read or is not valid TOML.
        """
        from layoutfmt.config.io import load_manifest_dict

        data: TomlTable = load_manifest_dict(path)
        logger.info("Loaded %d option(s) from %s", len(data), path)
        return cls(options=data, sources=[str(path)])

    @classmethod
    def load_merged(
        cls,
        *,
        manifest_path: Path | None = None,
        search_from: Path | None = None,
        overrides: RawOptions | None = None,
        unstable_enabled: bool | None = None,
        unstable_policy: UnstablePolicy | None = None,
    ) -> MutableConfig:
        """Build the layered configuration: defaults -> manifest -> overrides.

        Args:
            manifest_path (Path | None): Explicit manifest; takes precedence over discovery.
            search_from (Path | None): Directory (or file) to start manifest discovery from.
            overrides (RawOptions | None): Highest-precedence raw options.
            unstable_enabled (bool | None): Forced unstable switch.
            unstable_policy (UnstablePolicy | None): Gate policy.

        Returns:
            MutableConfig: The merged builder, ready to `freeze`.
        """
        from layoutfmt.config.paths import find_manifest

        draft: MutableConfig = cls.from_defaults()

        path: Path | None = manifest_path
        if path is None and search_from is not None:
            path = find_manifest(search_from)
        if path is not None:
            draft = draft.merge_with(cls.from_manifest_file(path))

        if overrides:
            draft = draft.merge_with(cls.from_mapping(overrides, source=OVERRIDES_SOURCE))

        draft = draft.merge_with(
            cls(unstable_enabled=unstable_enabled, unstable_policy=unstable_policy)
        )
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder by applying ``other`` over ``self`` (last-wins per key).

        ``None`` switches in ``other`` do not override explicit values in ``self``.
        """
        return MutableConfig(
            options={**self.options, **other.options},
            sources=[*self.sources, *other.sources],
            unstable_enabled=(
                other.unstable_enabled
                if other.unstable_enabled is not None
                else self.unstable_enabled
            ),
            unstable_policy=other.unstable_policy or self.unstable_policy,
        )

    def apply_overrides(self, overrides: Iterable[str]) -> MutableConfig:
        """Apply ``key=value`` override strings (as given to ``--config``).

        Raises:
            ConfigError: If an override is not of the form ``key=value``.
        """
        parsed: dict[str, str] = dict(parse_override(text) for text in overrides)
        if not parsed:
            return self
        return self.merge_with(MutableConfig.from_mapping(parsed, source=OVERRIDES_SOURCE))


def parse_override(text: str) -> tuple[str, str]:
    """Split a ``key=value`` override into its parts.

    Surrounding quotes on the value are removed so ``newline_style="Unix"`` works.

    Raises:
        ConfigError: If ``text`` has no ``=`` or an empty key.
    """
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ConfigError(f"Malformed override {text!r}: expected key=value")
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key, value


def config_field_names() -> tuple[str, ...]:
    """Return the option-bearing field names of `Config`, in declaration order."""
    return tuple(f.name for f in fields(Config) if f.name in OPTIONS)
