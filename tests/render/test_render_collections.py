# topmark:header:start
#
#   project      : LayoutFmt
#   file         : test_render_collections.py
#   file_relpath : tests/render/test_render_collections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for struct literals, arrays, tuples and macro calls."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layoutfmt.syntax.nodes import (
    Array,
    Call,
    FieldInit,
    Lit,
    Macro,
    Path,
    StructLit,
    Tuple,
)
from tests.conftest import mark_render, parametrize, render_text

if TYPE_CHECKING:
    from layoutfmt.syntax.nodes import Expr

POINT = StructLit("Point", (FieldInit("x", Path("x")), FieldInit("y", Lit("2"))))


@mark_render
@parametrize(
    "node,expected",
    [
        (StructLit("Unit"), "Unit {}"),
        (Tuple(), "()"),
        (Tuple((Lit("1"),)), "(1,)"),
        (Tuple((Lit("1"), Lit("2"))), "(1, 2)"),
        (Array((Lit("1"), Lit("2"))), "[1, 2]"),
        (Macro("println", (Lit('"a"'),)), 'println!("a")'),
        (Macro("vec", (Lit("1"),), delim="["), "vec![1]"),
        (Macro("m", (Path("x"),), delim="{"), "m! { x }"),
        (StructLit("Point", (FieldInit("x"),)), "Point { x }"),
    ],
)
def test_short_collections(node: Expr, expected: str) -> None:
    """It should render short collections on one line."""
    assert render_text(node) == expected


@mark_render
def test_field_init_shorthand() -> None:
    """It should abbreviate ``x: x`` only when use_field_init_shorthand is set."""
    assert render_text(POINT) == "Point { x: x, y: 2 }"
    assert render_text(POINT, use_field_init_shorthand=True) == "Point { x, y: 2 }"


@mark_render
def test_struct_literal_with_base_goes_vertical() -> None:
    """It should break fields one per line and keep ``..base`` without a comma."""
    node = StructLit(
        "Config",
        (FieldInit("width", Lit("80")), FieldInit("height", Lit("24"))),
        base=Call(Path("Default::default")),
    )
    assert render_text(node) == "Config { width: 80, height: 24, ..Default::default() }"
    assert render_text(node, max_width=30) == (
        "Config {\n    width: 80,\n    height: 24,\n    ..Default::default()\n}"
    )


@mark_render
def test_array_goes_vertical() -> None:
    """It should break array items one per line when they do not fit."""
    node = Array((Path("first_item"), Path("second_item")))
    assert render_text(node, max_width=20) == "[\n    first_item,\n    second_item,\n]"
