# topmark:header:start
#
#   project      : LayoutFmt
#   file         : render.py
#   file_relpath : src/layoutfmt/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render manifests as TOML text.

`to_toml` serializes a plain table. `render_annotated_manifest` builds a
`tomlkit` document with one comment per option (its description and, for gated
options, an "unstable" note), the shape of a hand-written ``rustfmt.toml``.

TOML has no `null` value, so `None` entries are stripped during rendering.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from layoutfmt.config.logging import get_logger
from layoutfmt.config.options import OPTIONS

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.config.options import OptionSpec

    from .types import TomlTable

logger: LayoutfmtLogger = get_logger(__name__)


def _strip_none_for_toml(value: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in value.items():
        if v is None:
            logger.debug("Ignoring `None` entry in Mapping for key %s", k)
            continue
        out[k] = v
    return out


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return cast("str", tomlkit.dumps(_strip_none_for_toml(toml_dict)))


def render_annotated_manifest(toml_dict: TomlTable) -> str:
    """Render option values with a descriptive comment above each key.

    Keys that are not recognized options are rendered without a comment.

    Args:
        toml_dict (TomlTable): Option name -> TOML scalar.

    Returns:
        str: The annotated TOML document.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    first: bool = True
    for key, value in _strip_none_for_toml(toml_dict).items():
        if not first:
            doc.add(tomlkit.nl())
        first = False
        spec: OptionSpec | None = OPTIONS.get(key)
        if spec is not None:
            doc.add(tomlkit.comment(spec.description))
            if spec.is_unstable:
                doc.add(tomlkit.comment("Note: Unstable"))
        doc.add(key, value)
    return doc.as_string()
