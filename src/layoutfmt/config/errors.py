# topmark:header:start
#
#   project      : LayoutFmt
#   file         : errors.py
#   file_relpath : src/layoutfmt/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors.

Every configuration problem is fatal to the run and is raised before any
rendering starts. Each error names the offending option so the CLI can
report a single clear line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """Base class for all configuration errors.

    Attributes:
        option (str | None): Offending option name, when the error concerns one option.
    """

    def __init__(self, message: str, *, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option

    @property
    def message(self) -> str:
        """Return the error message."""
        return str(self.args[0]) if self.args else ""


class UnknownOptionError(ConfigError):
    """An option name that LayoutFmt does not recognize."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Unknown configuration option `{option}`", option=option)


class InvalidOptionTypeError(ConfigError):
    """A value outside the option's type or domain."""

    def __init__(self, option: str, value: object, expected: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for option `{option}`: expected {expected}",
            option=option,
        )
        self.value = value
        self.expected = expected


class UnstableOptionRejectedError(ConfigError):
    """An unstable option requested while unstable features are disabled."""

    def __init__(self, option: str) -> None:
        super().__init__(
            f"Option `{option}` is unstable; set `unstable_features = true` to use it",
            option=option,
        )


class ConflictingOptionsError(ConfigError):
    """Two individually valid options that cannot be combined."""

    def __init__(self, option: str, other: str, reason: str) -> None:
        super().__init__(f"Option `{option}` conflicts with `{other}`: {reason}", option=option)
        self.other = other


class ManifestError(ConfigError):
    """A manifest file that cannot be read or parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Cannot load manifest {path}: {reason}")
        self.path = path
