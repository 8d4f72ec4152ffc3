# topmark:header:start
#
#   project      : LayoutFmt
#   file         : attributes.py
#   file_relpath : src/layoutfmt/render/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Attribute rendering and attribute/item fusion.

`AttributeRenderer` lays out one attribute (its argument list breaks like any
delimited list). `decorate` places doc comments and outer attributes above an
already rendered item, fusing a lone attribute onto the item's first line when
``inline_attribute_width`` allows it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from layoutfmt.config.logging import get_logger
from layoutfmt.layout.state import first_line
from layoutfmt.render.base import NodeRenderer, Rendered
from layoutfmt.render.lists import layout_list, text_element
from layoutfmt.syntax.nodes import Attribute

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.render.base import RenderContext

logger: LayoutfmtLogger = get_logger(__name__)


class AttributeRenderer(NodeRenderer[Attribute]):
    """Renders ``#[path(args)]`` and ``#![path(args)]``."""

    category = "attribute"

    def render(self, node: Attribute, state: LayoutState, *, reserve: int = 0) -> Rendered:
        head: str = ("#![" if node.inner else "#[") + node.path
        if node.args is None:
            return Rendered.at(state, head + "]")
        return layout_list(
            state,
            head,
            [text_element(arg) for arg in node.args],
            opener="(",
            closer=")",
            suffix="]",
            reserve=reserve,
        )


def doc_line(text: str) -> str:
    """Return one ``///`` doc comment line."""
    return f"/// {text}" if text else "///"


def decorate(
    context: RenderContext,
    state: LayoutState,
    body: str,
    attrs: Sequence[Attribute],
    docs: Sequence[str],
) -> str:
    """Prefix a rendered item with its doc comments and attributes.

    Doc comments come first, then attributes, each on its own line at the item's
    indentation. A single outer attribute is fused with the item
    (``#[inline] fn f() {}``) when ``inline_attribute_width`` is non-zero, the fused
    first line is narrower than that width and it fits ``max_width``.

    Args:
        context (RenderContext): Render context of the run.
        state (LayoutState): State at which the item starts (a line start).
        body (str): The rendered item.
        attrs (Sequence[Attribute]): The item's attributes.
        docs (Sequence[str]): The item's doc comment lines (without ``///``).

    Returns:
        str: The decorated item text.
    """
    lines: list[str] = [doc_line(d) for d in docs]
    width: int = context.config.inline_attribute_width

    if width > 0 and len(attrs) == 1 and not attrs[0].inner:
        attr_text: str | None = context.flat(attrs[0], state)
        if attr_text is not None:
            fused: str = f"{attr_text} {first_line(body)}"
            if len(fused) < width and state.fits(fused):
                logger.trace("fused %s with its item (%d < %d)", attr_text, len(fused), width)
                return _join(state, [*lines, f"{attr_text} {body}"])

    lines.extend(context.render(attr, state).text for attr in attrs)
    lines.append(body)
    return _join(state, lines)


def _join(state: LayoutState, lines: list[str]) -> str:
    return ("\n" + state.indent_str).join(lines)
