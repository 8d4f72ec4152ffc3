# topmark:header:start
#
#   project      : LayoutFmt
#   file         : types.py
#   file_relpath : src/layoutfmt/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.

Exports:
    - `RawOptions`: structural mapping type for manifest/CLI/API option dicts.
    - `NewlineStyle`, `ImportsIndent`: enumerated option values.
    - `Stability`, `OptionKind`: option schema metadata.
    - `UnstablePolicy`: what to do with an unstable option when the switch is off.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from layoutfmt.core.enum_mixins import KeyedStrEnum

# RawOptions: option name -> raw value (typed from TOML, or a string from the CLI).
RawOptions = Mapping[str, Any]


class NewlineStyle(KeyedStrEnum):
    """Line endings written to the formatted output."""

    AUTO = ("Auto", "Use the first line ending of the original source (native if none)")
    UNIX = ("Unix", "Always LF", ("lf",))
    WINDOWS = ("Windows", "Always CRLF", ("crlf",))


class ImportsIndent(KeyedStrEnum):
    """Indent style of wrapped import lists."""

    VISUAL = ("Visual", "Align continuation lines under the opening brace")
    BLOCK = ("Block", "Indent continuation lines by one block level")


class Stability(str, Enum):
    """Release channel of an option."""

    STABLE = "stable"
    UNSTABLE = "unstable"


class OptionKind(str, Enum):
    """Value domain of an option."""

    BOOL = "boolean"
    INT = "integer"
    ENUM = "enumerated string"


class UnstablePolicy(str, Enum):
    """Handling of unstable options requested while `unstable_features` is off.

    REJECT is the default: resolution fails with `UnstableOptionRejectedError`.
    IGNORE substitutes the option default and records an ``option_ignored`` diagnostic.
    """

    REJECT = "reject"
    IGNORE = "ignore"
