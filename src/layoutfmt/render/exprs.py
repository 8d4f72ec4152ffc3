# topmark:header:start
#
#   project      : LayoutFmt
#   file         : exprs.py
#   file_relpath : src/layoutfmt/render/exprs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Expression rendering: paths, literals, operators, calls and method chains.

Binary chains of one operator break before the operator, one level deeper::

    let total = header_size
        + payload_size
        + signature_size;

Method chains with two or more calls that do not fit break one call per line::

    rlp.at(0)?
        .as_val::<u8>()
        .map(TxType::from)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from layoutfmt.config.logging import get_logger
from layoutfmt.render.base import NodeRenderer, Rendered
from layoutfmt.render.lists import layout_list, node_elements, render_rhs
from layoutfmt.syntax.nodes import (
    Binary,
    Call,
    Cast,
    Field,
    Index,
    Lit,
    MethodCall,
    Paren,
    Path,
    Return,
    Try,
    Unary,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Expr

logger: LayoutfmtLogger = get_logger(__name__)

ASSIGN_OPS: frozenset[str] = frozenset(
    {"=", "+=", "-=", "*=", "/=", "%=", "^=", "&=", "|=", "<<=", ">>="}
)

Operator = Union[
    Path, Lit, Unary, Binary, Cast, Paren, Call, MethodCall, Field, Index, Try, Return
]
ChainSegment = Union[MethodCall, Field, Try]


class ExpressionRenderer(NodeRenderer[Operator]):
    """Renders leaf, operator, call and chain expressions."""

    category = "expression"

    def render(self, node: Operator, state: LayoutState, *, reserve: int = 0) -> Rendered:
        match node:
            case Path(text=text) | Lit(text=text):
                return Rendered.at(state, text)
            case Unary():
                prefix: str = node.op + " " if node.op[-1:].isalpha() else node.op
                operand: Rendered = self.child(node.operand, state.advance(prefix), reserve=reserve)
                return Rendered.at(state, prefix + operand.text)
            case Cast():
                suffix: str = f" as {node.ty}"
                inner: Rendered = self.child(node.expr, state, reserve=len(suffix) + reserve)
                return Rendered.at(state, inner.text + suffix)
            case Paren():
                inner = self.child(node.expr, state.advance("("), reserve=reserve + 1)
                return Rendered.at(state, f"({inner.text})")
            case Return():
                if node.value is None:
                    return Rendered.at(state, "return")
                value: Rendered = self.child(node.value, state.advance("return "), reserve=reserve)
                return Rendered.at(state, "return " + value.text)
            case Index():
                base: Rendered = self.child(node.base, state, reserve=reserve + 2)
                index: Rendered = self.child(
                    node.index, state.advance(base.text + "["), reserve=reserve + 1
                )
                return Rendered.at(state, f"{base.text}[{index.text}]")
            case Binary():
                return self._binary(node, state, reserve)
            case Call():
                callee: Rendered = self.child(node.func, state, reserve=1)
                return layout_list(
                    state,
                    callee.text,
                    node_elements(self.context, node.args),
                    opener="(",
                    closer=")",
                    reserve=reserve,
                )
            case MethodCall() | Field() | Try():
                return self._chain(node, state, reserve)
        raise TypeError(f"Not an operator expression: {type(node).__name__}")

    # ------------------ Binary operators ------------------

    def _binary(self, node: Binary, state: LayoutState, reserve: int) -> Rendered:
        if node.op in ASSIGN_OPS:
            target: Rendered = self.child(node.left, state, reserve=len(node.op) + 1)
            return render_rhs(
                self.context, state, f"{target.text} {node.op}", node.right, reserve=reserve
            )

        operands: list[Expr] = flatten_binary(node)
        separator: str = f" {node.op} "

        parts: list[str] = []
        cursor: LayoutState = state
        for i, operand in enumerate(operands):
            last: bool = i == len(operands) - 1
            rendered: Rendered = self.child(
                operand, cursor, reserve=reserve if last else len(separator)
            )
            if not rendered.single_line:
                break
            parts.append(rendered.text)
            cursor = cursor.advance(rendered.text + separator)
        else:
            text: str = separator.join(parts)
            if state.fits(text, reserve):
                return Rendered.at(state, text)

        self.trace(node, f"broken before {node.op!r}")
        inner: LayoutState = state.indented()
        prefix: str = node.op + " "
        text = self.child(operands[0], state).text
        for i, operand in enumerate(operands[1:], start=1):
            last = i == len(operands) - 1
            rendered = self.child(
                operand, inner.advance(prefix), reserve=reserve if last else 0
            )
            text += f"\n{inner.indent_str}{prefix}{rendered.text}"
        return Rendered.at(state, text)

    # ------------------ Method chains ------------------

    def _chain(self, node: ChainSegment, state: LayoutState, reserve: int) -> Rendered:
        root, segments = split_chain(node)
        calls: int = sum(isinstance(s, MethodCall) for s in segments)

        root_text: str = self.child(root, state).text
        inline: Rendered = self._chain_inline(root_text, segments, state, reserve)
        if calls < 2 or (inline.single_line and state.fits(inline.text, reserve)):
            return inline
        self.trace(node, f"chain of {calls} calls broken")
        return self._chain_broken(root_text, segments, state, reserve)

    def _chain_inline(
        self,
        text: str,
        segments: Sequence[ChainSegment],
        state: LayoutState,
        reserve: int,
    ) -> Rendered:
        for i, segment in enumerate(segments):
            if isinstance(segment, MethodCall):
                text = layout_list(
                    state,
                    f"{text}.{segment.method}{segment.turbofish}",
                    node_elements(self.context, segment.args),
                    opener="(",
                    closer=")",
                    reserve=_trailing_width(segments, i, reserve),
                ).text
            else:
                text += _attached(segment)
        return Rendered.at(state, text)

    def _chain_broken(
        self,
        text: str,
        segments: Sequence[ChainSegment],
        state: LayoutState,
        reserve: int,
    ) -> Rendered:
        inner: LayoutState = state.indented()
        first_call: int = next(i for i, s in enumerate(segments) if isinstance(s, MethodCall))
        for segment in segments[:first_call]:
            text += _attached(segment)

        for i in range(first_call, len(segments)):
            segment = segments[i]
            if isinstance(segment, MethodCall):
                call: Rendered = layout_list(
                    inner,
                    f".{segment.method}{segment.turbofish}",
                    node_elements(self.context, segment.args),
                    opener="(",
                    closer=")",
                    reserve=_trailing_width(segments, i, reserve),
                )
                text += f"\n{inner.indent_str}{call.text}"
            else:
                text += _attached(segment)
        return Rendered.at(state, text)


def flatten_binary(node: Binary) -> list[Expr]:
    """Return the operands of a left-associative chain of one operator."""
    operands: list[Expr] = [node.right]
    left: Expr = node.left
    while isinstance(left, Binary) and left.op == node.op:
        operands.append(left.right)
        left = left.left
    operands.append(left)
    operands.reverse()
    return operands


def split_chain(node: ChainSegment) -> tuple[Expr, list[ChainSegment]]:
    """Split ``a.b().c?.d()`` into its root ``a`` and its segments, outermost last."""
    segments: list[ChainSegment] = []
    current: Expr = node
    while True:
        if isinstance(current, MethodCall):
            segments.append(current)
            current = current.receiver
        elif isinstance(current, Field):
            segments.append(current)
            current = current.base
        elif isinstance(current, Try):
            segments.append(current)
            current = current.expr
        else:
            break
    segments.reverse()
    return current, segments


def _attached(segment: ChainSegment) -> str:
    if isinstance(segment, Field):
        return f".{segment.name}"
    return "?"


def _trailing_width(segments: Sequence[ChainSegment], index: int, reserve: int) -> int:
    """Width of the field accesses and ``?`` that follow call ``index`` on its line."""
    width: int = 0
    for segment in segments[index + 1 :]:
        if isinstance(segment, MethodCall):
            return width
        width += len(_attached(segment))
    return width + reserve

