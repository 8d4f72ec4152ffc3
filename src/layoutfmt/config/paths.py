# topmark:header:start
#
#   project      : LayoutFmt
#   file         : paths.py
#   file_relpath : src/layoutfmt/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Manifest discovery.

Walks from a starting location up to the filesystem root and returns the
nearest manifest. Within one directory ``rustfmt.toml`` wins over
``.rustfmt.toml``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from layoutfmt.config.keys import Toml
from layoutfmt.config.logging import get_logger

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger

logger: LayoutfmtLogger = get_logger(__name__)


def find_manifest(start: Path) -> Path | None:
    """Return the nearest manifest at or above ``start``.

    Args:
        start (Path): A directory, or a file whose directory is used.

    Returns:
        Path | None: Absolute path of the manifest, or None if none exists.
    """
    anchor: Path = start.resolve()
    if not anchor.is_dir():
        anchor = anchor.parent

    for directory in (anchor, *anchor.parents):
        for name in Toml.MANIFEST_NAMES:
            candidate: Path = directory / name
            if candidate.is_file():
                logger.debug("Discovered manifest %s (from %s)", candidate, start)
                return candidate
    logger.debug("No manifest found above %s", start)
    return None
