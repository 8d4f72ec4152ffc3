# topmark:header:start
#
#   project      : LayoutFmt
#   file         : blocks.py
#   file_relpath : src/layoutfmt/render/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block, statement and control-flow rendering.

A non-empty block always renders multi-line, its statements one level deeper.
``if``/``for``/``while`` in statement position are always block-formatted; an
``if``/``else`` used as a value may take the single-line form
``if c { a } else { b }`` when both branches hold only a short tail expression.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from layoutfmt.config.logging import get_logger
from layoutfmt.render.base import NodeRenderer, Rendered
from layoutfmt.render.lists import render_rhs
from layoutfmt.syntax.nodes import (
    Block,
    ExprStmt,
    ForLoop,
    If,
    Let,
    LetCond,
    While,
    is_block_like,
)

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Expr, Stmt

logger: LayoutfmtLogger = get_logger(__name__)

BlockNode = Union[Block, Let, ExprStmt, If, LetCond, ForLoop, While]


def sole_tail_expr(block: Block) -> Expr | None:
    """Return the tail expression of a block that holds nothing else, else None."""
    if block.unsafe or len(block.stmts) != 1:
        return None
    stmt: Stmt = block.stmts[0]
    if isinstance(stmt, ExprStmt) and not stmt.semi:
        return stmt.expr
    return None


class BlockRenderer(NodeRenderer[BlockNode]):
    """Renders blocks, statements and control flow."""

    category = "block"

    def render(self, node: BlockNode, state: LayoutState, *, reserve: int = 0) -> Rendered:
        match node:
            case Block():
                return Rendered.at(state, self._block(node, state))
            case Let():
                return self._let(node, state)
            case ExprStmt():
                return self._expr_stmt(node, state)
            case If():
                return self._if(node, state, reserve, as_value=True)
            case LetCond():
                prefix: str = f"let {node.pattern} = "
                expr: Rendered = self.child(node.expr, state.advance(prefix), reserve=reserve)
                return Rendered.at(state, prefix + expr.text)
            case ForLoop():
                head: str = f"for {node.pattern} in "
                iterable: Rendered = self.child(node.iter, state.advance(head), reserve=2)
                return self._with_body(head + iterable.text, node.body, state)
            case While():
                cond: Rendered = self.child(node.cond, state.advance("while "), reserve=2)
                return self._with_body("while " + cond.text, node.body, state)
        raise TypeError(f"Not a block construct: {type(node).__name__}")

    # ------------------ Blocks and statements ------------------

    def _block(self, node: Block, state: LayoutState) -> str:
        keyword: str = "unsafe " if node.unsafe else ""
        if not node.stmts:
            return keyword + "{}"
        inner: LayoutState = state.indented()
        lines: list[str] = [inner.indent_str + self.child(s, inner).text for s in node.stmts]
        return keyword + "{\n" + "\n".join(lines) + "\n" + state.indent_str + "}"

    def _let(self, node: Let, state: LayoutState) -> Rendered:
        lhs: str = f"let {node.pattern}"
        if node.ty is not None:
            lhs += f": {node.ty}"
        if node.init is None:
            return Rendered.at(state, lhs + ";")
        assigned: Rendered = render_rhs(self.context, state, lhs + " =", node.init, reserve=1)
        return Rendered.at(state, assigned.text + ";")

    def _expr_stmt(self, node: ExprStmt, state: LayoutState) -> Rendered:
        semi: str = ";" if node.semi else ""
        if isinstance(node.expr, If):
            rendered: Rendered = self._if(node.expr, state, len(semi), as_value=False)
        else:
            rendered = self.child(node.expr, state, reserve=len(semi))
        return Rendered.at(state, rendered.text + semi)

    def _with_body(self, head: str, body: Block, state: LayoutState) -> Rendered:
        block: str = self._block(body, state.advance(head + " "))
        return Rendered.at(state, f"{head} {block}")

    # ------------------ if / else ------------------

    def _if(self, node: If, state: LayoutState, reserve: int, *, as_value: bool) -> Rendered:
        if as_value:
            single: str | None = self._if_single_line(node, state, reserve)
            if single is not None:
                self.trace(node, "single-line if/else")
                return Rendered.at(state, single)
        return Rendered.at(state, self._if_block(node, state))

    def _if_single_line(self, node: If, state: LayoutState, reserve: int) -> str | None:
        if not isinstance(node.orelse, Block):
            return None
        then_expr: Expr | None = sole_tail_expr(node.then)
        else_expr: Expr | None = sole_tail_expr(node.orelse)
        if then_expr is None or else_expr is None:
            return None
        if is_block_like(then_expr) or is_block_like(else_expr):
            return None

        cond: str | None = self.context.flat(node.cond, state.advance("if "))
        if cond is None:
            return None
        text: str = f"if {cond} {{ "
        then_text: str | None = self.context.flat(then_expr, state.advance(text))
        if then_text is None:
            return None
        text += f"{then_text} }} else {{ "
        else_text: str | None = self.context.flat(else_expr, state.advance(text))
        if else_text is None:
            return None
        text += f"{else_text} }}"
        return text if state.fits(text, reserve) else None

    def _if_block(self, node: If, state: LayoutState) -> str:
        cond: Rendered = self.child(node.cond, state.advance("if "), reserve=2)
        head: str = f"if {cond.text} "
        text: str = head + self._block(node.then, state.advance(head))
        if isinstance(node.orelse, If):
            text += " else " + self._if_block(node.orelse, state.advance(text + " else "))
        elif isinstance(node.orelse, Block):
            text += " else " + self._block(node.orelse, state.advance(text + " else "))
        return text

