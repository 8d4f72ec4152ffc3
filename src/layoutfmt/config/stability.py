# topmark:header:start
#
#   project      : LayoutFmt
#   file         : stability.py
#   file_relpath : src/layoutfmt/config/stability.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stability gate for unstable options.

The gate is built once per resolution: it reads the top-level
``unstable_features`` switch (unless the caller forces it) and then admits or
rejects each requested option. It keeps no state beyond that single run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layoutfmt.config.errors import UnstableOptionRejectedError
from layoutfmt.config.keys import Toml
from layoutfmt.config.logging import get_logger
from layoutfmt.config.options import OPTIONS
from layoutfmt.config.types import UnstablePolicy
from layoutfmt.core.diagnostics import DiagnosticKind

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.config.options import OptionSpec
    from layoutfmt.config.types import RawOptions
    from layoutfmt.core.diagnostics import DiagnosticLog

logger: LayoutfmtLogger = get_logger(__name__)


def read_unstable_switch(raw_options: RawOptions) -> bool:
    """Return the validated value of ``unstable_features`` (False when absent).

    Raises:
        InvalidOptionTypeError: If the switch is present but not a boolean.
    """
    if Toml.KEY_UNSTABLE_FEATURES not in raw_options:
        return False
    return bool(OPTIONS[Toml.KEY_UNSTABLE_FEATURES].coerce(raw_options[Toml.KEY_UNSTABLE_FEATURES]))


@dataclass(frozen=True, slots=True)
class StabilityGate:
    """Admission predicate for unstable options.

    Attributes:
        enabled (bool): Effective value of the unstable switch.
        policy (UnstablePolicy): What to do with a gated option when the switch is off.
    """

    enabled: bool
    policy: UnstablePolicy = UnstablePolicy.REJECT

    @classmethod
    def from_raw(
        cls,
        raw_options: RawOptions,
        *,
        unstable_enabled: bool | None = None,
        policy: UnstablePolicy = UnstablePolicy.REJECT,
    ) -> StabilityGate:
        """Build the gate from the raw options, unless ``unstable_enabled`` forces the switch."""
        enabled: bool = (
            read_unstable_switch(raw_options) if unstable_enabled is None else unstable_enabled
        )
        logger.debug(
            "Unstable features %s (policy=%s)", "enabled" if enabled else "disabled", policy.value
        )
        return cls(enabled=enabled, policy=policy)

    def admit(self, spec: OptionSpec, diagnostics: DiagnosticLog) -> bool:
        """Return True if a requested option may be honored.

        Args:
            spec (OptionSpec): The requested option.
            diagnostics (DiagnosticLog): Receives an ``option_ignored`` warning under IGNORE.

        Returns:
            bool: True to honor the requested value, False to fall back to the default.

        Raises:
            UnstableOptionRejectedError: For a gated option under the REJECT policy.
        """
        if not spec.is_unstable or self.enabled:
            return True
        if self.policy is UnstablePolicy.REJECT:
            raise UnstableOptionRejectedError(spec.name)
        diagnostics.add_warning(
            DiagnosticKind.OPTION_IGNORED,
            f"Ignoring unstable option `{spec.name}` (unstable features are disabled); "
            f"using default {spec.to_toml_value(spec.default)!r}",
        )
        return False
