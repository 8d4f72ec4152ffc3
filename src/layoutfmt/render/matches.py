# topmark:header:start
#
#   project      : LayoutFmt
#   file         : matches.py
#   file_relpath : src/layoutfmt/render/matches.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Match expression and match arm rendering.

Trailing comma law:
    * a non-block arm (``pat => expr``) always ends with ``,``;
    * a block arm (``pat => { ... }``) ends with ``,`` iff
      ``match_block_trailing_comma`` is set.

A block body holding only a tail expression that fits on the arm line is
flattened to a non-block arm. A non-block body that spans several lines is
wrapped in a block when ``force_multiline_blocks`` is set, or when even its
first line does not fit after the arrow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from layoutfmt.config.logging import get_logger
from layoutfmt.render.base import NodeRenderer, Rendered, fits_around
from layoutfmt.render.blocks import sole_tail_expr
from layoutfmt.render.closures import wrap_in_block
from layoutfmt.syntax.nodes import Arm, Block, Match, is_block_like

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Expr

logger: LayoutfmtLogger = get_logger(__name__)


class MatchRenderer(NodeRenderer[Union[Match, Arm]]):
    """Renders ``match`` expressions and their arms."""

    category = "match"

    def render(self, node: Match | Arm, state: LayoutState, *, reserve: int = 0) -> Rendered:
        if isinstance(node, Arm):
            return self._arm(node, state)
        scrutinee: Rendered = self.child(node.scrutinee, state.advance("match "), reserve=2)
        head: str = f"match {scrutinee.text} {{"
        if not node.arms:
            return Rendered.at(state, head + "}")
        inner: LayoutState = state.indented()
        arms: list[str] = [inner.indent_str + self.child(arm, inner).text for arm in node.arms]
        return Rendered.at(state, head + "\n" + "\n".join(arms) + "\n" + state.indent_str + "}")

    @property
    def block_comma(self) -> str:
        """Separator after a block-bodied arm."""
        return "," if self.config.match_block_trailing_comma else ""

    def _arm(self, node: Arm, state: LayoutState) -> Rendered:
        head: str = node.pattern
        if node.guard is not None:
            guard: Rendered = self.child(node.guard, state.advance(head + " if "), reserve=4)
            head += f" if {guard.text}"
        head += " => "
        cursor: LayoutState = state.advance(head)
        body: Expr = node.body

        if isinstance(body, Block):
            tail: Expr | None = sole_tail_expr(body)
            if tail is not None and not is_block_like(tail):
                flat: str | None = self.context.flat(tail, cursor, reserve=1)
                if flat is not None:
                    self.trace(node, "block body flattened")
                    return Rendered.at(state, f"{head}{flat},")
            block: Rendered = self.child(body, cursor)
            return Rendered.at(state, head + block.text + self.block_comma)

        rendered: Rendered = self.child(body, cursor, reserve=1)
        if rendered.single_line and cursor.fits(rendered.text, 1):
            return Rendered.at(state, f"{head}{rendered.text},")
        if not rendered.single_line and fits_around(cursor, rendered.text, 1):
            if not self.config.force_multiline_blocks:
                return Rendered.at(state, f"{head}{rendered.text},")
        self.trace(node, "body wrapped in a block")
        return Rendered.at(state, head + wrap_in_block(self, body, state) + self.block_comma)
