# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __main__.py
#   file_relpath : src/layoutfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LayoutFmt via ``python -m layoutfmt``.

Delegates to `layoutfmt.cli.main.cli`, the same entry point as the
``layoutfmt`` console script.

Examples:
    Format a syntax tree document::

        python -m layoutfmt format tree.json
"""

from __future__ import annotations

from layoutfmt.cli.main import cli

if __name__ == "__main__":
    cli()
