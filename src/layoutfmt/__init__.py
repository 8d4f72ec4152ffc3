# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LayoutFmt package.

LayoutFmt is a configuration-driven pretty-printer. It takes a syntax tree of a
Rust-like language (produced by an external parser), resolves a style manifest
into an immutable configuration snapshot, and renders the tree within a maximum
line width. It exposes both a CLI and a small typed API for automation.
"""

from __future__ import annotations

# Import order matters: `layoutfmt.core.diagnostics` imports `layoutfmt.config.logging`,
# and the config model imports diagnostics. Loading the config package first keeps
# that cycle resolvable.
from layoutfmt.config import Config, ConfigError, UnstablePolicy  # isort: skip
from layoutfmt.api import format_json, format_tree, load_config
from layoutfmt.engine import FormatResult
from layoutfmt.syntax import SyntaxTreeError

__all__: list[str] = [
    "Config",
    "ConfigError",
    "FormatResult",
    "SyntaxTreeError",
    "UnstablePolicy",
    "format_json",
    "format_tree",
    "load_config",
]
