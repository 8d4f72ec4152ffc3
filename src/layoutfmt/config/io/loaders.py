# topmark:header:start
#
#   project      : LayoutFmt
#   file         : loaders.py
#   file_relpath : src/layoutfmt/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load manifest files.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Unlike lenient settings files, a manifest that cannot be read or parsed is a
fatal configuration error: formatting with a half-understood style would be wrong.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from layoutfmt.config.errors import ManifestError
from layoutfmt.config.logging import get_logger

from .guards import as_toml_table

if TYPE_CHECKING:
    from pathlib import Path

    from layoutfmt.config.logging import LayoutfmtLogger

    from .types import TomlTable

logger: LayoutfmtLogger = get_logger(__name__)


def parse_manifest_text(text: str, *, path: Path | None = None) -> TomlTable:
    """Parse manifest text into a plain dict.

    Args:
        text (str): TOML document.
        path (Path | None): Origin, used in error messages only.

    Returns:
        TomlTable: The parsed options (unvalidated).

    Raises:
        ManifestError: If the text is not valid TOML.
    """
    origin: Any = path if path is not None else "<string>"
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", origin, e)
        raise ManifestError(origin, str(e)) from e

    table: TomlTable | None = as_toml_table(doc.unwrap())
    return table if table is not None else {}


def load_manifest_dict(path: Path) -> TomlTable:
    """Load and parse a manifest file from the filesystem.

    Args:
        path (Path): Path to a manifest (e.g., ``rustfmt.toml``).

    Returns:
        TomlTable: The parsed options (unvalidated).

    Raises:
        ManifestError: If the file cannot be read or decoded.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ManifestError(path, str(e)) from e
    return parse_manifest_text(text, path=path)
