# topmark:header:start
#
#   project      : LayoutFmt
#   file         : guards.py
#   file_relpath : src/layoutfmt/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards and normalization helpers for manifest parsing.

These predicates help Pyright narrow runtime values coming from `tomlkit`
and keep the loader free of ad-hoc ``isinstance`` chains.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeGuard

from layoutfmt.config.logging import get_logger

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger

    from .types import TomlTable


logger: LayoutfmtLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def as_toml_table(obj: object) -> TomlTable | None:
    """Return the object as a TOML table when possible.

    Args:
        obj (object): Arbitrary object obtained from parsed TOML.

    Returns:
        TomlTable | None: ``obj`` when it is a ``dict``, otherwise ``None``.
    """
    if is_toml_table(obj):
        return obj

    logger.debug("Not a TOML table: %r", obj)
    return None
