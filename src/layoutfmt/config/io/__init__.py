# topmark:header:start
#
#   project      : LayoutFmt
#   file         : __init__.py
#   file_relpath : src/layoutfmt/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for LayoutFmt manifests.

Keeping these utilities separate from the model avoids import cycles and keeps
the model classes small and focused.

TOML parsing/formatting:
    LayoutFmt uses `tomlkit` for parsing and rendering.

    - `load_manifest_dict()` parses an on-disk manifest and returns a plain dict.
    - `parse_manifest_text()` does the same for in-memory text.
    - `to_toml()` renders a plain dict; `render_annotated_manifest()` adds one
      descriptive comment per option.

Typical flow:
    1. Discover a manifest (`layoutfmt.config.paths.find_manifest`).
    2. Load it (``load_manifest_dict``) into a `MutableConfig` layer.
    3. Freeze through the resolver.
    4. Serialize a snapshot back to TOML when needed (``render_annotated_manifest``).
"""

from __future__ import annotations

from .guards import as_toml_table, is_toml_table
from .loaders import load_manifest_dict, parse_manifest_text
from .render import render_annotated_manifest, to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "as_toml_table",
    "is_toml_table",
    "load_manifest_dict",
    "parse_manifest_text",
    "render_annotated_manifest",
    "to_toml",
]
