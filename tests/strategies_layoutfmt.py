# topmark:header:start
#
#   project      : LayoutFmt
#   file         : strategies_layoutfmt.py
#   file_relpath : tests/strategies_layoutfmt.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating syntax trees.

The generated trees are bounded so that every tree has a layout that fits in 24
columns. Property tests rely on that bound:

- identifiers are at most 8 characters; names that sit behind a longer prefix
  (field inits, closure params, let patterns) are at most 4, arm patterns
  and guards at most 3;
- statements live one level deep in a function body, and their vertical shapes
  nest at most two more levels;
- closure and match arm bodies are paths or blocks holding one path.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from layoutfmt.syntax.nodes import (
    Arm,
    Binary,
    Block,
    Call,
    Closure,
    ExprStmt,
    FieldInit,
    Fn,
    Item,
    Let,
    Match,
    MethodCall,
    Param,
    Path,
    SourceFile,
    Stmt,
    StructLit,
    Use,
    UseTree,
)

Draw = Callable[[st.SearchStrategy[Any]], Any]

MIN_WIDTH: int = 24

s_ident: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9_]{0,7}", fullmatch=True)
s_short: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9]{0,3}", fullmatch=True)
s_tiny: st.SearchStrategy[str] = st.from_regex(r"[a-z][a-z0-9]{0,2}", fullmatch=True)
s_type_name: st.SearchStrategy[str] = st.from_regex(r"[A-Z][a-z]{0,7}", fullmatch=True)
s_width: st.SearchStrategy[int] = st.integers(min_value=MIN_WIDTH, max_value=100)


def s_path() -> st.SearchStrategy[Path]:
    """Strategy for a short path expression."""
    return s_ident.map(Path)


def s_tail_block() -> st.SearchStrategy[Block]:
    """Block whose only statement is a tail path."""
    return s_path().map(lambda p: Block((ExprStmt(p, semi=False),)))


@st.composite
def s_sum(draw: Draw) -> Binary:
    """Left-associative ``a + b + ...`` chain of 2 to 4 short paths."""
    operands: list[Path] = draw(st.lists(s_path(), min_size=2, max_size=4))
    expr = Binary("+", operands[0], operands[1])
    for operand in operands[2:]:
        expr = Binary("+", expr, operand)
    return expr


@st.composite
def s_struct_lit(draw: Draw) -> StructLit:
    """``Name { a: b, c, ..base }`` with up to 4 fields."""
    names: list[str] = draw(st.lists(s_short, max_size=4))
    fields: list[FieldInit] = []
    for name in names:
        value: Path | None = draw(st.one_of(st.none(), s_short.map(Path)))
        fields.append(FieldInit(name, value))
    base: Path | None = draw(st.one_of(st.none(), s_short.map(Path)))
    return StructLit(draw(s_type_name), tuple(fields), base=base)


@st.composite
def s_closure(draw: Draw) -> Closure:
    """Closure with up to 2 short params and a path or single-path block body."""
    params: list[str] = draw(st.lists(s_short, max_size=2))
    body: Path | Block = draw(st.one_of(s_path(), s_tail_block()))
    return Closure(tuple(Param(p) for p in params), body)


@st.composite
def s_call(draw: Draw) -> Call:
    """Call with up to 5 arguments: paths, sums, struct literals or closures."""
    callee: Path = draw(s_path())
    arg: st.SearchStrategy[Any] = st.one_of(s_path(), s_sum(), s_struct_lit(), s_closure())
    args: list[Any] = draw(st.lists(arg, max_size=5))
    return Call(callee, tuple(args))


@st.composite
def s_method_chain(draw: Draw) -> MethodCall:
    """``root.a(x).b().c(y, z)`` with 2 to 4 calls of up to 2 path arguments."""
    expr: Any = draw(s_path())
    for _ in range(draw(st.integers(min_value=2, max_value=4))):
        args: list[Path] = draw(st.lists(s_path(), max_size=2))
        expr = MethodCall(expr, draw(s_ident), tuple(args))
    return expr


@st.composite
def s_match(draw: Draw) -> Match:
    """``match x { ... }`` with up to 4 arms, some guarded."""
    arms: list[Arm] = []
    for _ in range(draw(st.integers(min_value=0, max_value=4))):
        pattern: str = draw(st.one_of(st.just("_"), s_tiny))
        body: Path | Block = draw(st.one_of(s_path(), s_tail_block()))
        guard: Path | None = draw(st.one_of(st.none(), s_tiny.map(Path)))
        arms.append(Arm(pattern, body, guard=guard))
    return Match(draw(s_path()), tuple(arms))


@st.composite
def s_stmt(draw: Draw) -> Stmt:
    """One function body statement."""
    kind: str = draw(st.sampled_from(["call", "chain", "let", "match"]))
    if kind == "call":
        return ExprStmt(draw(s_call()))
    if kind == "chain":
        return ExprStmt(draw(s_method_chain()))
    if kind == "let":
        return Let(draw(s_short), init=draw(s_struct_lit()))
    return ExprStmt(draw(s_match()), semi=False)


@st.composite
def s_use(draw: Draw) -> Use:
    """``use root::{a, b, ...};`` with 1 to 5 leaf children."""
    children: list[str] = draw(st.lists(s_ident, min_size=1, max_size=5))
    return Use(UseTree(draw(s_ident), children=tuple(UseTree(c) for c in children)))


@st.composite
def s_source_file(draw: Draw) -> SourceFile:
    """Up to 2 ``use`` items followed by one function of 1 to 3 statements."""
    uses: list[Use] = draw(st.lists(s_use(), max_size=2))
    stmts: list[Stmt] = draw(st.lists(s_stmt(), min_size=1, max_size=3))
    items: list[Item] = [*uses, Fn(draw(s_ident), body=Block(tuple(stmts)))]
    return SourceFile(tuple(items))
