# topmark:header:start
#
#   project      : LayoutFmt
#   file         : resolver.py
#   file_relpath : src/layoutfmt/config/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration resolver: raw option mapping -> immutable `Config` snapshot.

Resolution is all-or-nothing and performs no I/O. The phases run in a fixed order
so that the reported error is deterministic:

    1. unknown option names
    2. per-option type/domain validation
    3. stability gate (see `layoutfmt.config.stability`)
    4. cross-option checks

Typical usage:

    cfg = resolve({"max_width": 120, "fn_single_line": True}, unstable_enabled=True)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layoutfmt.config.errors import ConflictingOptionsError, UnknownOptionError
from layoutfmt.config.keys import Toml
from layoutfmt.config.logging import get_logger
from layoutfmt.config.model import Config
from layoutfmt.config.options import OPTIONS, default_values
from layoutfmt.config.stability import StabilityGate
from layoutfmt.config.types import UnstablePolicy
from layoutfmt.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.config.options import OptionValue
    from layoutfmt.config.types import RawOptions

logger: LayoutfmtLogger = get_logger(__name__)


def resolve(
    raw_options: RawOptions,
    unstable_enabled: bool | None = None,
    *,
    policy: UnstablePolicy = UnstablePolicy.REJECT,
    sources: Iterable[str] = (),
) -> Config:
    """Resolve raw options into an immutable configuration snapshot.

    Args:
        raw_options (RawOptions): Option name -> raw value. Absent options take their default.
        unstable_enabled (bool | None): Forces the unstable switch; ``None`` reads
            ``unstable_features`` from ``raw_options``.
        policy (UnstablePolicy): Handling of gated options when the switch is off.
        sources (Iterable[str]): Provenance labels recorded on the snapshot.

    Returns:
        Config: The resolved snapshot.

    Raises:
        UnknownOptionError: For an unrecognized option name.
        InvalidOptionTypeError: For a value outside an option's domain.
        UnstableOptionRejectedError: For a gated option under the REJECT policy.
        ConflictingOptionsError: For individually valid but incompatible values.
    """
    for name in raw_options:
        if name not in OPTIONS:
            raise UnknownOptionError(name)

    typed: dict[str, OptionValue] = {
        name: OPTIONS[name].coerce(value) for name, value in raw_options.items()
    }

    diagnostics = DiagnosticLog()
    gate: StabilityGate = StabilityGate.from_raw(
        raw_options, unstable_enabled=unstable_enabled, policy=policy
    )

    values: dict[str, OptionValue] = default_values()
    for name, value in typed.items():
        if gate.admit(OPTIONS[name], diagnostics):
            values[name] = value
    values[Toml.KEY_UNSTABLE_FEATURES] = gate.enabled

    _check_conflicts(values)

    config = Config(
        **values,  # type: ignore[arg-type]
        sources=tuple(sources),
        diagnostics=diagnostics.freeze(),
    )
    logger.debug("Resolved configuration from %d raw option(s): %r", len(raw_options), config)
    return config


def _check_conflicts(values: dict[str, OptionValue]) -> None:
    max_width = int(values[Toml.KEY_MAX_WIDTH])
    tab_spaces = int(values[Toml.KEY_TAB_SPACES])
    inline_attribute_width = int(values[Toml.KEY_INLINE_ATTRIBUTE_WIDTH])

    if tab_spaces >= max_width:
        raise ConflictingOptionsError(
            Toml.KEY_TAB_SPACES,
            Toml.KEY_MAX_WIDTH,
            f"an indent of {tab_spaces} leaves no room within a width of {max_width}",
        )
    if inline_attribute_width > max_width:
        raise ConflictingOptionsError(
            Toml.KEY_INLINE_ATTRIBUTE_WIDTH,
            Toml.KEY_MAX_WIDTH,
            f"{inline_attribute_width} exceeds the maximum line width {max_width}",
        )
