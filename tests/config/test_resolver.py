# topmark:header:start
#
#   project      : LayoutFmt
#   file         : test_resolver.py
#   file_relpath : tests/config/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for option resolution: coercion, the stability gate and conflicts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from layoutfmt.config import (
    OPTIONS,
    ConflictingOptionsError,
    ImportsIndent,
    InvalidOptionTypeError,
    NewlineStyle,
    UnknownOptionError,
    UnstableOptionRejectedError,
    UnstablePolicy,
    default_values,
    resolve,
    unstable_option_names,
)
from layoutfmt.config.model import config_field_names
from layoutfmt.core.diagnostics import DiagnosticKind
from tests.conftest import mark_config, parametrize

if TYPE_CHECKING:
    from layoutfmt.config import Config


@mark_config
def test_empty_options_resolve_to_defaults() -> None:
    """It should give every option its schema default."""
    config: Config = resolve({})
    for name, value in default_values().items():
        assert config.value_of(name) == value
    assert config.max_width == 100
    assert config.tab_spaces == 4
    assert config.newline_style is NewlineStyle.AUTO
    assert config.imports_indent is ImportsIndent.BLOCK
    assert len(config.diagnostics) == 0


@mark_config
def test_every_option_is_a_config_field() -> None:
    """It should expose every schema option as an attribute of the snapshot."""
    assert set(config_field_names()) == set(OPTIONS)


@mark_config
def test_unstable_option_names() -> None:
    """It should list exactly the gated options."""
    assert set(unstable_option_names()) == {
        "fn_single_line",
        "inline_attribute_width",
        "imports_indent",
        "overflow_delimited_expr",
    }


@mark_config
@parametrize(
    "name,raw,expected",
    [
        ("max_width", 80, 80),
        ("max_width", "80", 80),
        ("tab_spaces", " 2 ", 2),
        ("use_field_init_shorthand", "yes", True),
        ("use_field_init_shorthand", "Off", False),
        ("match_block_trailing_comma", True, True),
        ("newline_style", "unix", NewlineStyle.UNIX),
        ("newline_style", "crlf", NewlineStyle.WINDOWS),
        ("newline_style", "Windows", NewlineStyle.WINDOWS),
    ],
)
def test_values_are_coerced(name: str, raw: Any, expected: Any) -> None:
    """It should accept values in the option's domain, including string spellings."""
    assert resolve({name: raw}).value_of(name) == expected


@mark_config
@parametrize(
    "name,raw",
    [
        ("max_width", True),
        ("max_width", 0),
        ("max_width", 1.5),
        ("max_width", "wide"),
        ("max_width", "\u00b2"),
        ("tab_spaces", "\u0663"),
        ("tab_spaces", -1),
        ("use_field_init_shorthand", "maybe"),
        ("use_field_init_shorthand", 1),
        ("newline_style", "Mac"),
        ("newline_style", 3),
    ],
)
def test_invalid_values_are_rejected(name: str, raw: Any) -> None:
    """It should raise InvalidOptionTypeError naming the option."""
    with pytest.raises(InvalidOptionTypeError) as excinfo:
        resolve({name: raw})
    assert excinfo.value.option == name
    assert f"`{name}`" in excinfo.value.message


@mark_config
def test_nested_table_is_an_invalid_value() -> None:
    """It should reject a table where a scalar is expected."""
    with pytest.raises(InvalidOptionTypeError):
        resolve({"max_width": {"value": 80}})


@mark_config
def test_unknown_option_is_rejected() -> None:
    """It should raise UnknownOptionError for an unrecognized name."""
    with pytest.raises(UnknownOptionError) as excinfo:
        resolve({"max_widht": 80})
    assert excinfo.value.option == "max_widht"
    assert "Unknown configuration option `max_widht`" in str(excinfo.value)


@mark_config
def test_unknown_option_is_reported_before_invalid_values() -> None:
    """It should check option names before any value."""
    with pytest.raises(UnknownOptionError):
        resolve({"max_width": "wide", "bogus": 1})


@mark_config
def test_invalid_value_is_reported_before_gating() -> None:
    """It should validate an unstable option's value even when the gate is closed."""
    with pytest.raises(InvalidOptionTypeError):
        resolve({"fn_single_line": "maybe"})


# ------------------ Stability gate ------------------


@mark_config
def test_unstable_option_rejected_by_default() -> None:
    """It should reject a gated option while unstable features are disabled."""
    with pytest.raises(UnstableOptionRejectedError) as excinfo:
        resolve({"fn_single_line": True})
    assert excinfo.value.option == "fn_single_line"
    assert "unstable_features = true" in excinfo.value.message


@mark_config
def test_unstable_option_honored_when_enabled_in_options() -> None:
    """It should honor gated options when ``unstable_features`` is set in the same layer."""
    config: Config = resolve(
        {"unstable_features": "true", "fn_single_line": True, "imports_indent": "visual"}
    )
    assert config.unstable_features is True
    assert config.fn_single_line is True
    assert config.imports_indent is ImportsIndent.VISUAL


@mark_config
def test_forced_switch_wins_over_options() -> None:
    """It should let ``unstable_enabled`` override the option value."""
    config: Config = resolve({"unstable_features": False, "fn_single_line": True}, True)
    assert config.unstable_features is True
    assert config.fn_single_line is True

    with pytest.raises(UnstableOptionRejectedError):
        resolve({"unstable_features": True, "fn_single_line": True}, False)


@mark_config
def test_ignore_policy_uses_default_and_records_a_warning() -> None:
    """It should substitute the default and record one option_ignored warning."""
    config: Config = resolve(
        {"fn_single_line": True, "inline_attribute_width": 40, "max_width": 80},
        policy=UnstablePolicy.IGNORE,
    )
    assert config.fn_single_line is False
    assert config.inline_attribute_width == 0
    assert config.max_width == 80

    ignored = config.diagnostics.of_kind(DiagnosticKind.OPTION_IGNORED)
    assert len(ignored) == 2
    assert "`fn_single_line`" in ignored[0].message
    assert "`inline_attribute_width`" in ignored[1].message


@mark_config
def test_stable_options_never_gated() -> None:
    """It should accept every stable option with unstable features disabled."""
    stable: dict[str, Any] = {
        name: spec.to_toml_value(spec.default)
        for name, spec in OPTIONS.items()
        if not spec.is_unstable
    }
    config: Config = resolve(stable)
    assert len(config.diagnostics) == 0


# ------------------ Conflicts ------------------


@mark_config
def test_indent_must_leave_room_within_width() -> None:
    """It should reject tab_spaces that reach max_width."""
    with pytest.raises(ConflictingOptionsError) as excinfo:
        resolve({"max_width": 8, "tab_spaces": 8})
    assert excinfo.value.option == "tab_spaces"
    assert excinfo.value.other == "max_width"


@mark_config
def test_inline_attribute_width_bounded_by_max_width() -> None:
    """It should reject an inline_attribute_width larger than max_width."""
    with pytest.raises(ConflictingOptionsError) as excinfo:
        resolve({"inline_attribute_width": 120}, True)
    assert excinfo.value.option == "inline_attribute_width"

    assert resolve({"inline_attribute_width": 100}, True).inline_attribute_width == 100


@mark_config
def test_sources_are_recorded() -> None:
    """It should keep the provenance labels on the snapshot."""
    config: Config = resolve({}, sources=["a.toml", "<overrides>"])
    assert config.sources == ("a.toml", "<overrides>")
