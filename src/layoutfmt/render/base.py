# topmark:header:start
#
#   project      : LayoutFmt
#   file         : base.py
#   file_relpath : src/layoutfmt/render/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderer base module for LayoutFmt's pretty-printing engine.

This module defines the shared rendering contract:

    render(node, state, reserve) -> Rendered(text, state')

and the `NodeRenderer` base class that every construct category subclasses.

A renderer never writes output directly and never mutates the syntax tree or the
layout state. It returns the text of one node (following the text conventions of
`layoutfmt.layout.state`) together with the state after that text. Children are
rendered through `RenderContext.render`, which routes back through the engine's
dispatch so that one category can embed any other.

``reserve`` is the number of columns the caller will append after the node on
the same line (``;``, ``,``, `` {``); renderers include it in their fit checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from layoutfmt.config.logging import get_logger
from layoutfmt.layout.state import first_line, is_multiline, last_line

if TYPE_CHECKING:
    from collections.abc import Callable

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.config.model import Config
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)

N = TypeVar("N")


@dataclass(frozen=True, slots=True)
class Rendered:
    """The render decision for one node.

    Attributes:
        text (str): Rendered text; the first line starts at the input state's column.
        state (LayoutState): Layout state after ``text``.
    """

    text: str
    state: LayoutState

    @classmethod
    def at(cls, state: LayoutState, text: str) -> Rendered:
        """Return ``text`` written at ``state``."""
        return cls(text, state.advance(text))

    @property
    def single_line(self) -> bool:
        """True if the decision is single-line."""
        return not is_multiline(self.text)


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Read-only context shared by all renderers of one engine.

    Attributes:
        config (Config): The configuration snapshot of the run.
        dispatch (Callable[[Node, LayoutState, int], Rendered]): The engine's dispatch.
    """

    config: Config
    dispatch: Callable[[Node, LayoutState, int], Rendered]

    def render(self, node: Node, state: LayoutState, *, reserve: int = 0) -> Rendered:
        """Render a child node through the engine."""
        return self.dispatch(node, state, reserve)

    def flat(self, node: Node, state: LayoutState, *, reserve: int = 0) -> str | None:
        """Return the single-line rendering of ``node`` if it fits, else None."""
        rendered: Rendered = self.render(node, state, reserve=reserve)
        if rendered.single_line and state.fits(rendered.text, reserve):
            return rendered.text
        return None


def fits_around(state: LayoutState, text: str, reserve: int = 0) -> bool:
    """Return True if the first and last lines of ``text`` fit when written at ``state``.

    Unlike `LayoutState.fits`, inner lines are not checked: they belong to children
    that already made their own decisions.
    """
    if not is_multiline(text):
        return state.fits(text, reserve)
    return (
        state.column + len(first_line(text)) <= state.max_width
        and len(last_line(text)) + reserve <= state.max_width
    )


class NodeRenderer(Generic[N]):
    """Base class for the renderers of one node category.

    Responsibilities:
        - **Decide** single-line vs. multi-line for the nodes of its category, given
          the configuration snapshot and the remaining width.
        - **Recurse** into children through `RenderContext.render`.
        - **Report** its decisions at TRACE level; diagnostics are produced later by
          the engine's width audit, so renderers never fail on overflow.

    Subclasses bind ``N`` to the node variants they accept, set ``category`` and
    implement `render`.
    """

    category: ClassVar[str] = "node"

    def __init__(self, context: RenderContext) -> None:
        self.context = context

    @property
    def config(self) -> Config:
        """The configuration snapshot of the run."""
        return self.context.config

    def render(self, node: N, state: LayoutState, *, reserve: int = 0) -> Rendered:
        """Render ``node`` starting at ``state``."""
        raise NotImplementedError

    def child(self, node: Node, state: LayoutState, *, reserve: int = 0) -> Rendered:
        """Render a child node (shorthand for ``self.context.render``)."""
        return self.context.render(node, state, reserve=reserve)

    def trace(self, node: object, decision: str) -> None:
        """Log a layout decision."""
        logger.trace("%s: %s -> %s", self.category, type(node).__name__, decision)
