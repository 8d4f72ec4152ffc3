# topmark:header:start
#
#   project      : LayoutFmt
#   file         : nodes.py
#   file_relpath : src/layoutfmt/syntax/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax node variants consumed by the pretty-printing engine.

The tree is produced by an external parser and is read-only input: every node is
a frozen dataclass and the engine never edits it. Node kinds form a closed sum
type; the engine selects one renderer per variant with an exhaustive ``match``.

Leaf syntax the engine never re-lays out (types, patterns, generics, literal
tokens) is carried as verbatim strings.

Sections:
    * Attributes and imports: `Attribute`, `UseTree`, `Use`
    * Items: `Fn`, `Param`, `Struct`, `FieldDef`, `Enum`, `Variant`, `Impl`, `Const`,
      `Comment`, `SourceFile`
    * Statements: `Let`, `ExprStmt` (and `Comment`)
    * Expressions: operators, calls, chains, collections, control flow, closures
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ------------------ Attributes and imports ------------------


@dataclass(frozen=True, slots=True)
class Attribute:
    """An attribute such as ``#[derive(Debug, Clone)]`` or ``#![allow(dead_code)]``.

    Attributes:
        path (str): Attribute path (``derive``, ``cfg``, ``inline``).
        args (tuple[str, ...] | None): Verbatim arguments, or None for a bare attribute.
        inner (bool): True for ``#![...]``.
    """

    path: str
    args: tuple[str, ...] | None = None
    inner: bool = False


@dataclass(frozen=True, slots=True)
class UseTree:
    """One node of an import tree.

    ``path`` is a ``::``-separated prefix (``std::ops``), a single name, ``self``,
    or ``*``. A tree with ``children`` renders as ``path::{a, b}``.
    """

    path: str
    children: tuple[UseTree, ...] | None = None
    alias: str | None = None


@dataclass(frozen=True, slots=True)
class Use:
    """An import item (``use a::b;``)."""

    tree: UseTree
    vis: str = ""
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


# ------------------ Items ------------------


@dataclass(frozen=True, slots=True)
class Param:
    """A function or closure parameter. ``ty`` is None for receivers and untyped params."""

    pattern: str
    ty: str | None = None


@dataclass(frozen=True, slots=True)
class Fn:
    """A function item. ``body`` is None for a bodiless declaration (``fn f();``)."""

    name: str
    params: tuple[Param, ...] = ()
    ret: str | None = None
    body: Block | None = None
    vis: str = ""
    qualifiers: str = ""
    generics: str = ""
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class FieldDef:
    """A named field of a struct definition."""

    name: str
    ty: str
    vis: str = ""
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Struct:
    """A struct item. ``fields`` is None for a unit struct (``struct Marker;``)."""

    name: str
    fields: tuple[FieldDef, ...] | None = None
    vis: str = ""
    generics: str = ""
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Variant:
    """An enum variant; ``fields`` holds tuple-variant types, None for a unit variant."""

    name: str
    fields: tuple[str, ...] | None = None
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Enum:
    """An enum item."""

    name: str
    variants: tuple[Variant, ...] = ()
    vis: str = ""
    generics: str = ""
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Impl:
    """An ``impl`` block, optionally for a trait."""

    self_ty: str
    trait_ref: str | None = None
    items: tuple[Item, ...] = ()
    generics: str = ""
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Const:
    """A ``const`` (or ``static``) item."""

    name: str
    ty: str
    value: Expr
    vis: str = ""
    static: bool = False
    attrs: tuple[Attribute, ...] = ()
    docs: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Comment:
    """A verbatim line comment (``// ...``), valid as an item or a statement."""

    text: str


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Root of a parsed file."""

    items: tuple[Item, ...] = ()
    attrs: tuple[Attribute, ...] = ()


# ------------------ Statements ------------------


@dataclass(frozen=True, slots=True)
class Let:
    """A ``let`` statement."""

    pattern: str
    ty: str | None = None
    init: Expr | None = None


@dataclass(frozen=True, slots=True)
class ExprStmt:
    """An expression statement; ``semi`` is False for a block's tail expression."""

    expr: Expr
    semi: bool = True


# ------------------ Expressions ------------------


@dataclass(frozen=True, slots=True)
class Path:
    """A path or identifier (``x``, ``self``, ``Self::payload_size``)."""

    text: str


@dataclass(frozen=True, slots=True)
class Lit:
    """A literal token, verbatim (``0u8``, ``"text"``)."""

    text: str


@dataclass(frozen=True, slots=True)
class Unary:
    """A prefix operator: ``&``, ``&mut``, ``!``, ``-``, ``*``."""

    op: str
    operand: Expr


@dataclass(frozen=True, slots=True)
class Binary:
    """A binary or assignment operator expression."""

    op: str
    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class Cast:
    """``expr as ty``."""

    expr: Expr
    ty: str


@dataclass(frozen=True, slots=True)
class Paren:
    """A parenthesized expression."""

    expr: Expr


@dataclass(frozen=True, slots=True)
class Call:
    """A call ``func(args)``."""

    func: Expr
    args: tuple[Expr, ...] = ()


@dataclass(frozen=True, slots=True)
class MethodCall:
    """A method call ``receiver.method::<T>(args)``."""

    receiver: Expr
    method: str
    args: tuple[Expr, ...] = ()
    turbofish: str = ""


@dataclass(frozen=True, slots=True)
class Field:
    """A field access ``base.name``."""

    base: Expr
    name: str


@dataclass(frozen=True, slots=True)
class Index:
    """An index expression ``base[index]``."""

    base: Expr
    index: Expr


@dataclass(frozen=True, slots=True)
class Try:
    """The ``?`` operator."""

    expr: Expr


@dataclass(frozen=True, slots=True)
class Macro:
    """A macro invocation with expression arguments; ``delim`` is ``(``, ``[`` or ``{``."""

    name: str
    args: tuple[Expr, ...] = ()
    delim: str = "("


@dataclass(frozen=True, slots=True)
class Tuple:
    """A tuple expression."""

    items: tuple[Expr, ...] = ()


@dataclass(frozen=True, slots=True)
class Array:
    """An array expression."""

    items: tuple[Expr, ...] = ()


@dataclass(frozen=True, slots=True)
class FieldInit:
    """A struct literal field; ``value`` None means the source already used shorthand."""

    name: str
    value: Expr | None = None


@dataclass(frozen=True, slots=True)
class StructLit:
    """A struct literal ``Path { a, b: c, ..base }``."""

    path: str
    fields: tuple[FieldInit, ...] = ()
    base: Expr | None = None


@dataclass(frozen=True, slots=True)
class Block:
    """A block expression or body."""

    stmts: tuple[Stmt, ...] = ()
    unsafe: bool = False


@dataclass(frozen=True, slots=True)
class LetCond:
    """The ``let PAT = EXPR`` condition of ``if let`` / ``while let``."""

    pattern: str
    expr: Expr


@dataclass(frozen=True, slots=True)
class If:
    """``if cond { then } else orelse`` (``orelse`` is a block or another ``If``)."""

    cond: Expr
    then: Block
    orelse: Block | If | None = None


@dataclass(frozen=True, slots=True)
class Arm:
    """A match arm; ``pattern`` is verbatim and may contain ``|`` alternatives."""

    pattern: str
    body: Expr
    guard: Expr | None = None


@dataclass(frozen=True, slots=True)
class Match:
    """A ``match`` expression."""

    scrutinee: Expr
    arms: tuple[Arm, ...] = ()


@dataclass(frozen=True, slots=True)
class Closure:
    """A closure ``move |params| -> ret body``."""

    params: tuple[Param, ...]
    body: Expr
    ret: str | None = None
    is_move: bool = False


@dataclass(frozen=True, slots=True)
class Return:
    """``return`` with an optional value."""

    value: Expr | None = None


@dataclass(frozen=True, slots=True)
class ForLoop:
    """``for pattern in iter { body }``."""

    pattern: str
    iter: Expr
    body: Block


@dataclass(frozen=True, slots=True)
class While:
    """``while cond { body }``."""

    cond: Expr
    body: Block


Item = Union[Use, Fn, Struct, Enum, Impl, Const, Comment]
Stmt = Union[Let, ExprStmt, Comment]
Expr = Union[
    Path,
    Lit,
    Unary,
    Binary,
    Cast,
    Paren,
    Call,
    MethodCall,
    Field,
    Index,
    Try,
    Macro,
    Tuple,
    Array,
    StructLit,
    Block,
    LetCond,
    If,
    Match,
    Closure,
    Return,
    ForLoop,
    While,
]
Node = Union[
    SourceFile,
    Item,
    Stmt,
    Expr,
    Attribute,
    UseTree,
    Param,
    FieldDef,
    Variant,
    FieldInit,
    Arm,
]

# Expressions that are laid out as blocks and never need a trailing `;` in statement position.
BLOCK_LIKE: tuple[type, ...] = (Block, If, Match, ForLoop, While)


def is_block_like(node: object) -> bool:
    """Return True for expressions whose layout is a ``{ ... }`` block."""
    return isinstance(node, BLOCK_LIKE)
