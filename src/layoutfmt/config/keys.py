# topmark:header:start
#
#   project      : LayoutFmt
#   file         : keys.py
#   file_relpath : src/layoutfmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical manifest key names for LayoutFmt configuration.

This module defines the authoritative string constants used when reading,
writing, and validating style options from a manifest (``rustfmt.toml``),
from ``--config key=value`` overrides, and from API dictionaries.

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - CLI option names are kept separate (see `layoutfmt.cli.options`).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Manifest keys understood by LayoutFmt.

    The ordering of constants mirrors the annotated default manifest rendered by
    ``layoutfmt config defaults``.
    """

    # Stability switch
    KEY_UNSTABLE_FEATURES: Final[str] = "unstable_features"

    # Width and indentation
    KEY_MAX_WIDTH: Final[str] = "max_width"
    KEY_TAB_SPACES: Final[str] = "tab_spaces"
    KEY_NEWLINE_STYLE: Final[str] = "newline_style"

    # Items and blocks
    KEY_FN_SINGLE_LINE: Final[str] = "fn_single_line"
    KEY_FORCE_MULTILINE_BLOCKS: Final[str] = "force_multiline_blocks"
    KEY_MATCH_BLOCK_TRAILING_COMMA: Final[str] = "match_block_trailing_comma"
    KEY_INLINE_ATTRIBUTE_WIDTH: Final[str] = "inline_attribute_width"

    # Imports
    KEY_IMPORTS_INDENT: Final[str] = "imports_indent"

    # Expressions
    KEY_OVERFLOW_DELIMITED_EXPR: Final[str] = "overflow_delimited_expr"
    KEY_USE_FIELD_INIT_SHORTHAND: Final[str] = "use_field_init_shorthand"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_UNSTABLE_FEATURES,
            KEY_MAX_WIDTH,
            KEY_TAB_SPACES,
            KEY_NEWLINE_STYLE,
            KEY_FN_SINGLE_LINE,
            KEY_FORCE_MULTILINE_BLOCKS,
            KEY_MATCH_BLOCK_TRAILING_COMMA,
            KEY_INLINE_ATTRIBUTE_WIDTH,
            KEY_IMPORTS_INDENT,
            KEY_OVERFLOW_DELIMITED_EXPR,
            KEY_USE_FIELD_INIT_SHORTHAND,
        }
    )

    # Manifest file names searched by discovery, in per-directory precedence order.
    MANIFEST_NAMES: Final[tuple[str, ...]] = ("rustfmt.toml", ".rustfmt.toml")
