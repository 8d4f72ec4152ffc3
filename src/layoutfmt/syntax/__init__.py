# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/syntax/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax tree input for LayoutFmt.

`layoutfmt.syntax.nodes` defines the closed set of node variants;
`layoutfmt.syntax.codec` decodes/encodes the JSON interchange format used by
external parsers.
"""

from __future__ import annotations

from layoutfmt.syntax.codec import SyntaxTreeError, decode_tree, dumps, encode_tree, loads

__all__: list[str] = [
    "SyntaxTreeError",
    "decode_tree",
    "dumps",
    "encode_tree",
    "loads",
]
