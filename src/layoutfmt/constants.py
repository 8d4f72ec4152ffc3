# topmark:header:start
#
#   project      : LayoutFmt
#   file         : constants.py
#   file_relpath : src/layoutfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LayoutFmt Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LAYOUTFMT_VERSION: str = get_version("layoutfmt")

DUMP_BEGIN_MARKER: str = "# === BEGIN ==="
DUMP_END_MARKER: str = "# === END ==="
