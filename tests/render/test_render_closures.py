# topmark:header:start
#
#   project      : LayoutFmt
#   file         : test_render_closures.py
#   file_relpath : tests/render/test_render_closures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for closure rendering."""

from __future__ import annotations

from layoutfmt.syntax.nodes import Binary, Block, Call, Closure, ExprStmt, Lit, Param, Path
from tests.conftest import mark_render, render_text

INCREMENT = Block((ExprStmt(Binary("+", Path("x"), Lit("1")), semi=False),))


@mark_render
def test_tail_block_is_unwrapped() -> None:
    """It should drop the braces around a lone tail expression that fits."""
    assert render_text(Closure((Param("x"),), INCREMENT)) == "|x| x + 1"


@mark_render
def test_return_type_keeps_the_block() -> None:
    """It should keep or add a block when the closure declares its return type."""
    assert render_text(Closure((Param("x"),), INCREMENT, ret="i32")) == (
        "|x| -> i32 {\n    x + 1\n}"
    )
    assert render_text(Closure((Param("x"),), Path("x"), ret="i32")) == "|x| -> i32 {\n    x\n}"


@mark_render
def test_move_and_typed_params() -> None:
    """It should render ``move`` and parameter types."""
    assert render_text(Closure((), Path("v"), is_move=True)) == "move || v"
    assert render_text(Closure((Param("a", "u8"), Param("b")), Path("a"))) == "|a: u8, b| a"


@mark_render
def test_multi_line_body_wrapped_only_when_forced() -> None:
    """It should wrap a bare multi-line body in a block under force_multiline_blocks."""
    closure = Closure((Param("x"),), Call(Path("compute"), (Path("alpha"), Path("beta"))))
    assert render_text(closure, max_width=20) == "|x| compute(\n    alpha,\n    beta,\n)"
    assert render_text(closure, max_width=20, force_multiline_blocks=True) == (
        "|x| {\n    compute(\n        alpha,\n        beta,\n    )\n}"
    )
