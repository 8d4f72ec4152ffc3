# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for LayoutFmt.

Exposes the immutable `Config` snapshot, the `MutableConfig` builder used for
layering (defaults -> manifest -> overrides), the `resolve` entry point, the
option schema and the configuration error hierarchy.

Tests and API callers should build configs through `resolve` or
`MutableConfig.freeze`, never by instantiating `Config` by hand.
"""

from __future__ import annotations

from layoutfmt.config.errors import (
    ConfigError,
    ConflictingOptionsError,
    InvalidOptionTypeError,
    ManifestError,
    UnknownOptionError,
    UnstableOptionRejectedError,
)
from layoutfmt.config.model import Config, MutableConfig, parse_override
from layoutfmt.config.options import OPTIONS, OptionSpec, default_values, unstable_option_names
from layoutfmt.config.resolver import resolve
from layoutfmt.config.stability import StabilityGate
from layoutfmt.config.types import (
    ImportsIndent,
    NewlineStyle,
    RawOptions,
    Stability,
    UnstablePolicy,
)

__all__: list[str] = [
    "OPTIONS",
    "Config",
    "ConfigError",
    "ConflictingOptionsError",
    "ImportsIndent",
    "InvalidOptionTypeError",
    "ManifestError",
    "MutableConfig",
    "NewlineStyle",
    "OptionSpec",
    "RawOptions",
    "Stability",
    "StabilityGate",
    "UnknownOptionError",
    "UnstableOptionRejectedError",
    "UnstablePolicy",
    "default_values",
    "parse_override",
    "resolve",
    "unstable_option_names",
]
