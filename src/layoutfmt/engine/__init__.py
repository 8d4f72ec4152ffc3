# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pretty-printing engine: dispatch, width audit and line-ending policy."""

from __future__ import annotations

from layoutfmt.engine.printer import FormatResult, PrettyPrinter

__all__: list[str] = [
    "FormatResult",
    "PrettyPrinter",
]
