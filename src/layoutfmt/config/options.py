# topmark:header:start
#
#   project      : LayoutFmt
#   file         : options.py
#   file_relpath : src/layoutfmt/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Option schema: every recognized style option with its type, default and stability.

`OPTIONS` is the single registry consulted by the resolver, the stability gate,
the manifest renderer and the CLI. Each `OptionSpec` knows how to coerce a raw
value (typed from TOML, or a string from ``--config key=value``) into its
runtime type, raising `InvalidOptionTypeError` when it cannot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from layoutfmt.config.errors import InvalidOptionTypeError
from layoutfmt.config.keys import Toml
from layoutfmt.config.logging import get_logger
from layoutfmt.config.types import ImportsIndent, NewlineStyle, OptionKind, Stability
from layoutfmt.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger

logger: LayoutfmtLogger = get_logger(__name__)

OptionValue = Union[bool, int, KeyedStrEnum]

_TRUE_TOKENS: Final[frozenset[str]] = frozenset({"true", "yes", "on"})
_FALSE_TOKENS: Final[frozenset[str]] = frozenset({"false", "no", "off"})


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Schema entry for one option.

    Attributes:
        name (str): Manifest key.
        kind (OptionKind): Value domain.
        default (OptionValue): Value used when the option is absent (or ignored).
        stability (Stability): Release channel; unstable options are gated.
        description (str): One-line description, used in rendered manifests.
        minimum (int | None): Inclusive lower bound for integer options.
        enum_type (type[KeyedStrEnum] | None): Member type for enumerated options.
    """

    name: str
    kind: OptionKind
    default: OptionValue
    stability: Stability
    description: str
    minimum: int | None = None
    enum_type: type[KeyedStrEnum] | None = None

    @property
    def is_unstable(self) -> bool:
        """Return True if the option requires the unstable switch."""
        return self.stability is Stability.UNSTABLE

    @property
    def expected(self) -> str:
        """Human description of the accepted domain (used in error messages)."""
        if self.kind is OptionKind.BOOL:
            return "a boolean"
        if self.kind is OptionKind.INT:
            return f"an integer >= {self.minimum}" if self.minimum is not None else "an integer"
        assert self.enum_type is not None
        return f"one of {{{', '.join(self.enum_type.choices())}}}"

    def coerce(self, value: object) -> OptionValue:
        """Validate and convert a raw value.

        Args:
            value (object): Raw value from a manifest, a CLI override or an API dict.

        Returns:
            OptionValue: The typed value.

        Raises:
            InvalidOptionTypeError: If the value is outside the option's domain.
        """
        if self.kind is OptionKind.BOOL:
            return self._coerce_bool(value)
        if self.kind is OptionKind.INT:
            return self._coerce_int(value)
        return self._coerce_enum(value)

    def to_toml_value(self, value: OptionValue) -> bool | int | str:
        """Return the manifest representation of a typed value."""
        if isinstance(value, KeyedStrEnum):
            return value.key
        return value

    def _coerce_bool(self, value: object) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            token: str = value.strip().lower()
            if token in _TRUE_TOKENS:
                return True
            if token in _FALSE_TOKENS:
                return False
        raise InvalidOptionTypeError(self.name, value, self.expected)

    def _coerce_int(self, value: object) -> int:
        number: int | None = None
        # bool is an int subclass; TOML `true` must not pass as 1
        if isinstance(value, int) and not isinstance(value, bool):
            number = value
        elif isinstance(value, str):
            token: str = value.strip()
            # str.isdigit() also accepts superscripts, which int() rejects
            if token.isascii() and token.isdecimal():
                number = int(token)
        if number is None or (self.minimum is not None and number < self.minimum):
            raise InvalidOptionTypeError(self.name, value, self.expected)
        return number

    def _coerce_enum(self, value: object) -> KeyedStrEnum:
        assert self.enum_type is not None
        if isinstance(value, self.enum_type):
            return value
        if isinstance(value, str):
            member: KeyedStrEnum | None = self.enum_type.parse(value)
            if member is not None:
                return member
        raise InvalidOptionTypeError(self.name, value, self.expected)


def _spec(
    name: str,
    kind: OptionKind,
    default: OptionValue,
    description: str,
    *,
    unstable: bool = False,
    minimum: int | None = None,
    enum_type: type[KeyedStrEnum] | None = None,
) -> OptionSpec:
    return OptionSpec(
        name=name,
        kind=kind,
        default=default,
        stability=Stability.UNSTABLE if unstable else Stability.STABLE,
        description=description,
        minimum=minimum,
        enum_type=enum_type,
    )


OPTIONS: Final[dict[str, OptionSpec]] = {
    spec.name: spec
    for spec in (
        _spec(
            Toml.KEY_UNSTABLE_FEATURES,
            OptionKind.BOOL,
            False,
            "Enable unstable options",
        ),
        _spec(
            Toml.KEY_MAX_WIDTH,
            OptionKind.INT,
            100,
            "Maximum width of each line",
            minimum=1,
        ),
        _spec(
            Toml.KEY_TAB_SPACES,
            OptionKind.INT,
            4,
            "Number of spaces per indentation level",
            minimum=1,
        ),
        _spec(
            Toml.KEY_NEWLINE_STYLE,
            OptionKind.ENUM,
            NewlineStyle.AUTO,
            "Unix or Windows line endings",
            enum_type=NewlineStyle,
        ),
        _spec(
            Toml.KEY_FN_SINGLE_LINE,
            OptionKind.BOOL,
            False,
            "Put single-expression functions on a single line",
            unstable=True,
        ),
        _spec(
            Toml.KEY_FORCE_MULTILINE_BLOCKS,
            OptionKind.BOOL,
            False,
            "Force multiline closure and match arm bodies to be wrapped in a block",
        ),
        _spec(
            Toml.KEY_MATCH_BLOCK_TRAILING_COMMA,
            OptionKind.BOOL,
            False,
            "Put a trailing comma after a block based match arm",
        ),
        _spec(
            Toml.KEY_INLINE_ATTRIBUTE_WIDTH,
            OptionKind.INT,
            0,
            "Write an item and its attribute on the same line below this combined width",
            unstable=True,
            minimum=0,
        ),
        _spec(
            Toml.KEY_IMPORTS_INDENT,
            OptionKind.ENUM,
            ImportsIndent.BLOCK,
            "Indent style of imports",
            unstable=True,
            enum_type=ImportsIndent,
        ),
        _spec(
            Toml.KEY_OVERFLOW_DELIMITED_EXPR,
            OptionKind.BOOL,
            False,
            "Let a delimited last argument overflow like blocks and closures do",
            unstable=True,
        ),
        _spec(
            Toml.KEY_USE_FIELD_INIT_SHORTHAND,
            OptionKind.BOOL,
            False,
            "Use field initialize shorthand if possible",
        ),
    )
}


def default_values() -> dict[str, OptionValue]:
    """Return a fresh mapping of every option to its default value."""
    return {name: spec.default for name, spec in OPTIONS.items()}


def unstable_option_names() -> tuple[str, ...]:
    """Return the names of all unstable options, in schema order."""
    return tuple(name for name, spec in OPTIONS.items() if spec.is_unstable)
