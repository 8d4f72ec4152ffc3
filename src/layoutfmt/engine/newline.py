# topmark:header:start
#
#   project      : LayoutFmt
#   file         : newline.py
#   file_relpath : src/layoutfmt/engine/newline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-ending policy (``newline_style``).

Renderers always work with ``\\n``; the engine converts line endings once, in the
Emit phase. ``Auto`` follows the first line ending of the original source text
when the caller supplies it and falls back to the platform's native ending.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from layoutfmt.config.logging import get_logger
from layoutfmt.config.types import NewlineStyle

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger

logger: LayoutfmtLogger = get_logger(__name__)


def detect_newline(source_text: str | None) -> str | None:
    """Return the first line ending used in ``source_text``, or None if it has none."""
    if not source_text:
        return None
    index: int = source_text.find("\n")
    if index < 0:
        return None
    return "\r\n" if index > 0 and source_text[index - 1] == "\r" else "\n"


def effective_newline(style: NewlineStyle, source_text: str | None = None) -> str:
    """Return the line ending to emit for ``style``."""
    if style is NewlineStyle.UNIX:
        return "\n"
    if style is NewlineStyle.WINDOWS:
        return "\r\n"
    detected: str | None = detect_newline(source_text)
    if detected is not None:
        return detected
    logger.debug("No line ending in the source text, using the native one (%r)", os.linesep)
    return os.linesep


def apply_newline_style(text: str, style: NewlineStyle, source_text: str | None = None) -> str:
    """Convert the ``\\n`` line endings of ``text`` according to ``style``."""
    newline: str = effective_newline(style, source_text)
    return text if newline == "\n" else text.replace("\n", newline)
