# topmark:header:start
#
#   project      : LayoutFmt
#   file         : lists.py
#   file_relpath : src/layoutfmt/render/lists.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Delimited list layout shared by calls, parameters, collections and attributes.

A delimited list ``head(opener) e1, e2, ... (closer)suffix`` is laid out in the
first of three shapes that works:

1. **Horizontal**: every element single-line and the whole list fits.
2. **Overflow-last**: the earlier elements stay flat on the opening line and the
   last element (a closure or block, or with ``overflow_delimited_expr`` a
   struct literal, array or bracketed macro) opens on that line and closes at
   the line's indentation.
3. **Vertical**: one element per line, one indentation level deeper, with a
   trailing comma after every element; the closer sits on its own line.

The module also holds `render_rhs`, the right-hand-side placement shared by
``let``, ``const`` and assignments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from layoutfmt.config.logging import get_logger
from layoutfmt.layout.state import first_line
from layoutfmt.render.base import Rendered, fits_around
from layoutfmt.syntax.nodes import Array, Block, Closure, Macro, StructLit

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.config.model import Config
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.render.base import RenderContext
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Element:
    """One list element.

    Attributes:
        render (Callable[[LayoutState, int], Rendered]): Renders the element at a
            state, given the columns reserved after it.
        overflow (bool): The element may take the overflow-last shape.
        comma (bool): The element takes a trailing comma in the vertical shape.
    """

    render: Callable[[LayoutState, int], Rendered]
    overflow: bool = False
    comma: bool = True


def can_overflow(node: Node, config: Config) -> bool:
    """Return True if ``node`` may hang past the opening line as the last list element."""
    if isinstance(node, (Closure, Block)):
        return True
    if not config.overflow_delimited_expr:
        return False
    if isinstance(node, (StructLit, Array)):
        return True
    return isinstance(node, Macro) and node.delim in ("[", "{")


def node_element(context: RenderContext, node: Node, *, last: bool = False) -> Element:
    """Wrap a syntax node as a list element."""

    def _render(state: LayoutState, reserve: int) -> Rendered:
        return context.render(node, state, reserve=reserve)

    return Element(_render, overflow=last and can_overflow(node, context.config))


def text_element(text: str) -> Element:
    """Wrap verbatim text (a parameter type, an attribute argument) as a list element."""

    def _render(state: LayoutState, reserve: int) -> Rendered:
        return Rendered.at(state, text)

    return Element(_render)


def node_elements(context: RenderContext, nodes: Sequence[Node]) -> list[Element]:
    """Wrap a node sequence, marking the last node's overflow eligibility."""
    return [node_element(context, n, last=i == len(nodes) - 1) for i, n in enumerate(nodes)]


def layout_list(
    state: LayoutState,
    head: str,
    elements: Sequence[Element],
    *,
    opener: str,
    closer: str,
    pad: bool = False,
    suffix: str = "",
    reserve: int = 0,
    single_comma: bool = False,
) -> Rendered:
    """Lay out a delimited list starting at ``state``.

    Args:
        state (LayoutState): Where ``head`` starts.
        head (str): Text before the opener (callee, macro name, struct path); may be multi-line.
        elements (Sequence[Element]): The list elements.
        opener (str): Opening delimiter (``(``, ``[``, `` {``).
        closer (str): Closing delimiter.
        pad (bool): Put a space inside the delimiters of the horizontal shape (``{ a }``).
        suffix (str): Text written right after the closer (``]``, `` -> T``).
        reserve (int): Columns the caller appends after ``suffix``.
        single_comma (bool): A lone element keeps a comma in the horizontal shape (``(a,)``).

    Returns:
        Rendered: The first shape that works; the vertical shape when nothing fits.
    """
    open_text: str = head + opener
    if not elements:
        return Rendered.at(state, open_text + closer + suffix)

    horizontal: str | None = _horizontal(
        state,
        open_text,
        elements,
        closer + suffix,
        pad=pad,
        reserve=reserve,
        single_comma=single_comma,
    )
    if horizontal is not None:
        logger.trace("list %r: horizontal", head)
        return Rendered.at(state, horizontal)

    if elements[-1].overflow and not pad:
        overflow: str | None = _overflow_last(state, open_text, elements, closer + suffix, reserve)
        if overflow is not None:
            logger.trace("list %r: overflow-last", head)
            return Rendered.at(state, overflow)

    logger.trace("list %r: vertical", head)
    return Rendered.at(state, _vertical(state, open_text, elements, closer + suffix))


def _horizontal(
    state: LayoutState,
    open_text: str,
    elements: Sequence[Element],
    close_text: str,
    *,
    pad: bool,
    reserve: int,
    single_comma: bool,
) -> str | None:
    lead: str = " " if pad else ""
    cursor: LayoutState = state.advance(open_text + lead)
    parts: list[str] = []
    for i, element in enumerate(elements):
        last: bool = i == len(elements) - 1
        after: int = len(lead) + len(close_text) + reserve if last else 2
        rendered: Rendered = element.render(cursor, after)
        if not rendered.single_line:
            return None
        parts.append(rendered.text)
        cursor = cursor.advance(rendered.text + ("" if last else ", "))
    body: str = ", ".join(parts)
    if single_comma and len(parts) == 1:
        body += ","
    text: str = open_text + lead + body + lead + close_text
    return text if fits_around(state, text, reserve) else None


def _overflow_last(
    state: LayoutState,
    open_text: str,
    elements: Sequence[Element],
    close_text: str,
    reserve: int,
) -> str | None:
    prefix: str = open_text
    cursor: LayoutState = state.advance(open_text)
    for element in elements[:-1]:
        rendered: Rendered = element.render(cursor, 2)
        if not rendered.single_line:
            return None
        prefix += rendered.text + ", "
        cursor = cursor.advance(rendered.text + ", ")
    if cursor.column >= state.max_width:
        return None
    last: Rendered = elements[-1].render(cursor, len(close_text) + reserve)
    if last.single_line:
        return None
    text: str = prefix + last.text + close_text
    if state.column + len(first_line(text)) > state.max_width:
        return None
    return text if fits_around(state, text, reserve) else None


def _vertical(
    state: LayoutState,
    open_text: str,
    elements: Sequence[Element],
    close_text: str,
) -> str:
    inner: LayoutState = state.indented()
    lines: list[str] = []
    for element in elements:
        rendered: Rendered = element.render(inner, 1 if element.comma else 0)
        lines.append(inner.indent_str + rendered.text + ("," if element.comma else ""))
    return open_text + "\n" + "\n".join(lines) + "\n" + state.indent_str + close_text


def render_rhs(
    context: RenderContext,
    state: LayoutState,
    lhs: str,
    rhs: Node,
    *,
    reserve: int = 0,
) -> Rendered:
    """Render ``lhs rhs`` (``lhs`` ends with ``=`` or another assignment operator).

    The right-hand side stays on the ``lhs`` line when its first line fits there;
    otherwise it moves to the next line, one indentation level deeper, if it fits
    better there.
    """
    same_line: LayoutState = state.advance(lhs + " ")
    rendered: Rendered = context.render(rhs, same_line, reserve=reserve)
    if fits_around(same_line, rendered.text, reserve):
        return Rendered.at(state, lhs + " " + rendered.text)

    inner: LayoutState = state.indented()
    moved: Rendered = context.render(rhs, inner, reserve=reserve)
    if fits_around(inner, moved.text, reserve) or (
        inner.column + len(first_line(moved.text))
        < same_line.column + len(first_line(rendered.text))
    ):
        logger.trace("rhs of %r moved to the next line", lhs)
        return Rendered.at(state, lhs + "\n" + inner.indent_str + moved.text)
    return Rendered.at(state, lhs + " " + rendered.text)
