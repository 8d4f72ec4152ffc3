# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across LayoutFmt.

Included modules:

- ``diagnostics``
  Non-fatal diagnostic types (levels, kinds, messages, aggregation) collected
  during configuration resolution and rendering.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical, with a dedicated ``WOULD_CHANGE`` code for ``check``.

- ``enum_mixins``
  ``KeyedStrEnum`` for manifest tokens such as ``"Visual"`` or ``"Unix"``.

Keep this package free of UI dependencies and side effects.
"""

from __future__ import annotations
