# topmark:header:start
#
#   project      : LayoutFmt
#   file         : closures.py
#   file_relpath : src/layoutfmt/render/closures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closure rendering.

A block body holding only a tail expression is unwrapped when the expression
fits on the closure line (``|x| x + 1``). A bare body that spans several lines
is wrapped in a block when ``force_multiline_blocks`` is set, and kept in its
minimal form otherwise. A closure with an explicit return type keeps its block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from layoutfmt.config.logging import get_logger
from layoutfmt.render.base import NodeRenderer, Rendered, fits_around
from layoutfmt.render.blocks import sole_tail_expr
from layoutfmt.syntax.nodes import Block, Closure, is_block_like

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Expr, Node

logger: LayoutfmtLogger = get_logger(__name__)


def wrap_in_block(renderer: NodeRenderer[Any], body: Node, state: LayoutState) -> str:
    """Render ``body`` alone inside a ``{ ... }`` block opening at ``state``'s line."""
    inner: LayoutState = state.indented()
    rendered: Rendered = renderer.child(body, inner)
    return "{\n" + inner.indent_str + rendered.text + "\n" + state.indent_str + "}"


class ClosureRenderer(NodeRenderer[Closure]):
    """Renders closures."""

    category = "closure"

    def render(self, node: Closure, state: LayoutState, *, reserve: int = 0) -> Rendered:
        params: str = ", ".join(
            p.pattern if p.ty is None else f"{p.pattern}: {p.ty}" for p in node.params
        )
        prefix: str = ("move " if node.is_move else "") + f"|{params}|"
        if node.ret is not None:
            prefix += f" -> {node.ret}"
        prefix += " "
        cursor: LayoutState = state.advance(prefix)
        body: Expr = node.body

        if isinstance(body, Block):
            tail: Expr | None = sole_tail_expr(body) if node.ret is None else None
            if tail is not None and not is_block_like(tail):
                flat: str | None = self.context.flat(tail, cursor, reserve=reserve)
                if flat is not None:
                    self.trace(node, "block body unwrapped")
                    return Rendered.at(state, prefix + flat)
            return Rendered.at(state, prefix + self.child(body, cursor).text)

        if node.ret is not None:
            return Rendered.at(state, prefix + wrap_in_block(self, body, state))

        rendered: Rendered = self.child(body, cursor, reserve=reserve)
        if rendered.single_line and cursor.fits(rendered.text, reserve):
            return Rendered.at(state, prefix + rendered.text)
        if not rendered.single_line and fits_around(cursor, rendered.text, reserve):
            if not self.config.force_multiline_blocks:
                return Rendered.at(state, prefix + rendered.text)
        self.trace(node, "multi-line body wrapped in a block")
        return Rendered.at(state, prefix + wrap_in_block(self, body, state))
