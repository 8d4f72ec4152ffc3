# topmark:header:start
#
#   project      : LayoutFmt
#   file         : audit.py
#   file_relpath : src/layoutfmt/engine/audit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Width audit of the emitted text.

Renderers never fail on overflow: when no layout fits they emit their best
effort. The audit then reports every offending output line as a non-fatal
diagnostic:

    * ``INDENT_OVERFLOW`` when the line's indentation alone reaches ``max_width``;
    * ``WIDTH_EXCEEDED`` for any other line longer than ``max_width``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layoutfmt.config.logging import get_logger
from layoutfmt.core.diagnostics import DiagnosticKind

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.core.diagnostics import DiagnosticLog

logger: LayoutfmtLogger = get_logger(__name__)


def audit_widths(text: str, max_width: int, log: DiagnosticLog) -> int:
    """Record one diagnostic per line of ``text`` that exceeds ``max_width``.

    Args:
        text (str): Rendered text with ``\\n`` line endings.
        max_width (int): The configured maximum width.
        log (DiagnosticLog): Receives the diagnostics.

    Returns:
        int: Number of offending lines.
    """
    offending: int = 0
    for number, line in enumerate(text.split("\n"), start=1):
        width: int = len(line)
        if width <= max_width:
            continue
        offending += 1
        indent: int = width - len(line.lstrip(" "))
        if indent >= max_width:
            log.add_warning(
                DiagnosticKind.INDENT_OVERFLOW,
                f"indentation of {indent} columns leaves no room within max_width {max_width}",
                line=number,
            )
        else:
            log.add_warning(
                DiagnosticKind.WIDTH_EXCEEDED,
                f"line is {width} columns wide, exceeding max_width {max_width}",
                line=number,
            )
    if offending:
        logger.debug("Width audit: %d line(s) exceed max_width %d", offending, max_width)
    return offending
