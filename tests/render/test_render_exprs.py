# topmark:header:start
#
#   project      : LayoutFmt
#   file         : test_render_exprs.py
#   file_relpath : tests/render/test_render_exprs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for operator, call and method chain rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from layoutfmt.render.exprs import flatten_binary, split_chain
from layoutfmt.syntax.nodes import (
    Binary,
    Call,
    Cast,
    Field,
    Index,
    Let,
    Lit,
    MethodCall,
    Paren,
    Path,
    Return,
    Try,
    Unary,
)
from tests.conftest import mark_render, parametrize, render_text

if TYPE_CHECKING:
    from layoutfmt.syntax.nodes import Expr

SUM = Binary("+", Binary("+", Path("alpha_value"), Path("beta_value")), Path("gamma"))


@mark_render
@parametrize(
    "node,expected",
    [
        (Unary("!", Path("done")), "!done"),
        (Unary("-", Lit("1")), "-1"),
        (Unary("&mut", Path("v")), "&mut v"),
        (Cast(Path("x"), "u64"), "x as u64"),
        (Paren(Binary("+", Path("a"), Path("b"))), "(a + b)"),
        (Index(Path("v"), Lit("0")), "v[0]"),
        (Return(), "return"),
        (Return(Path("x")), "return x"),
        (Field(Path("self"), "x"), "self.x"),
        (Try(Call(Path("f"))), "f()?"),
        (Binary("=", Path("x"), Lit("1")), "x = 1"),
        (Binary("+=", Path("total"), Path("n")), "total += n"),
        (Call(Path("f"), (Path("a"), Lit("2"))), "f(a, 2)"),
    ],
)
def test_short_expressions(node: Expr, expected: str) -> None:
    """It should render short expressions on one line."""
    assert render_text(node) == expected


@mark_render
def test_flatten_binary_only_same_operator() -> None:
    """It should flatten a left-associative chain of one operator."""
    mixed = Binary("*", SUM, Path("k"))
    assert flatten_binary(SUM) == [Path("alpha_value"), Path("beta_value"), Path("gamma")]
    assert flatten_binary(mixed) == [SUM, Path("k")]


@mark_render
def test_binary_breaks_before_operators() -> None:
    """It should put each operand after the first on its own line, operator first."""
    assert render_text(SUM) == "alpha_value + beta_value + gamma"
    assert render_text(SUM, max_width=20) == "alpha_value\n    + beta_value\n    + gamma"


@mark_render
def test_let_moves_rhs_to_next_line() -> None:
    """It should move a right-hand side that fits better on the next line."""
    assert render_text(Let("total", init=SUM), max_width=20) == (
        "let total =\n    alpha_value\n        + beta_value\n        + gamma;"
    )
    assert render_text(Let("x", init=Lit("1"))) == "let x = 1;"
    assert render_text(Let("x", ty="u8")) == "let x: u8;"


@mark_render
def test_call_arguments_go_vertical() -> None:
    """It should break call arguments one per line when they do not fit."""
    call = Call(Path("function_name"), (Path("alpha"), Path("beta")))
    assert render_text(call, max_width=20) == "function_name(\n    alpha,\n    beta,\n)"


@mark_render
def test_split_chain() -> None:
    """It should split a chain into its root and segments."""
    chain = Try(MethodCall(Field(Path("a"), "b"), "c"))
    root, segments = split_chain(chain)
    assert root == Path("a")
    assert [type(s).__name__ for s in segments] == ["Field", "MethodCall", "Try"]


@mark_render
def test_chain_inline_and_broken() -> None:
    """It should break a chain of two or more calls one call per line."""
    chain = MethodCall(MethodCall(Path("items"), "iter"), "map", (Path("f"),))
    assert render_text(chain) == "items.iter().map(f)"
    assert render_text(chain, max_width=15) == "items\n    .iter()\n    .map(f)"


@mark_render
def test_chain_keeps_try_attached() -> None:
    """It should keep ``?`` on the line of the call it follows."""
    chain = MethodCall(
        Try(MethodCall(Path("rlp"), "at", (Lit("0"),))), "as_val", turbofish="::<u8>"
    )
    assert render_text(chain) == "rlp.at(0)?.as_val::<u8>()"
    assert render_text(chain, max_width=20) == "rlp\n    .at(0)?\n    .as_val::<u8>()"


@mark_render
def test_single_call_chain_is_never_broken() -> None:
    """It should not break a chain holding a single call."""
    chain = MethodCall(Field(Path("self"), "entries"), "len")
    assert render_text(chain, max_width=10) == "self.entries.len()"
