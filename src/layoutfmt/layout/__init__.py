# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layout model: width arithmetic independent of syntax."""

from __future__ import annotations

from layoutfmt.layout.state import LayoutState, first_line, is_multiline, last_line

__all__: list[str] = [
    "LayoutState",
    "first_line",
    "is_multiline",
    "last_line",
]
