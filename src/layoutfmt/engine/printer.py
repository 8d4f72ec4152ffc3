# topmark:header:start
#
#   project      : LayoutFmt
#   file         : printer.py
#   file_relpath : src/layoutfmt/engine/printer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pretty-printing engine.

`PrettyPrinter` orchestrates one formatting run over a syntax tree:

    Start -> Dispatch (renderer per node variant) -> Recurse -> Emit -> Done

Design notes:
  - No CLI dependencies: presentation and exit codes belong to ``layoutfmt.cli``.
  - Single pass, greedy: every node picks the first layout that fits; there is no
    re-layout pass. Renderers may try several candidate layouts for a child; the
    engine memoizes child renderings per (node, state, reserve) so those attempts
    stay cheap.
  - Total: rendering never fails on width. Overflow is reported by the width
    audit in the Emit phase as non-fatal diagnostics.
  - One engine instance per run/thread. The configuration snapshot is immutable
    and may be shared by engines formatting files in parallel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from layoutfmt.config.logging import get_logger
from layoutfmt.core.diagnostics import DiagnosticLog, FrozenDiagnosticLog
from layoutfmt.engine.audit import audit_widths
from layoutfmt.engine.newline import apply_newline_style
from layoutfmt.layout.state import LayoutState
from layoutfmt.render.attributes import AttributeRenderer
from layoutfmt.render.base import RenderContext
from layoutfmt.render.blocks import BlockRenderer
from layoutfmt.render.closures import ClosureRenderer
from layoutfmt.render.collections import CollectionRenderer
from layoutfmt.render.exprs import ExpressionRenderer
from layoutfmt.render.imports import ImportRenderer
from layoutfmt.render.items import ItemRenderer
from layoutfmt.render.matches import MatchRenderer
from layoutfmt.syntax.nodes import (
    Arm,
    Array,
    Attribute,
    Binary,
    Block,
    Call,
    Cast,
    Closure,
    Comment,
    Const,
    Enum,
    ExprStmt,
    Field,
    FieldDef,
    FieldInit,
    Fn,
    ForLoop,
    If,
    Impl,
    Index,
    Let,
    LetCond,
    Lit,
    Macro,
    Match,
    MethodCall,
    Param,
    Paren,
    Path,
    Return,
    SourceFile,
    Struct,
    StructLit,
    Try,
    Tuple,
    Unary,
    Use,
    UseTree,
    Variant,
    While,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.config.model import Config
    from layoutfmt.render.base import NodeRenderer, Rendered
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Outcome of one formatting run.

    Iterating a result yields ``(text, diagnostics)``, so it unpacks like the
    pair returned by the engine entry point.

    Attributes:
        text (str): The formatted text, with the configured line endings.
        diagnostics (FrozenDiagnosticLog): Configuration notices followed by
            width-audit findings.
        config (Config): The snapshot the run used.
        changed (bool | None): Whether ``text`` differs from the supplied source
            text; None when no source text was supplied.
    """

    text: str
    diagnostics: FrozenDiagnosticLog
    config: Config
    changed: bool | None = None

    def __iter__(self) -> Iterator[object]:
        yield self.text
        yield self.diagnostics


class PrettyPrinter:
    """Renders syntax trees with one configuration snapshot.

    Args:
        config (Config): The resolved snapshot, shared read-only by every renderer.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.context = RenderContext(config, self._dispatch)
        self.items = ItemRenderer(self.context)
        self.imports = ImportRenderer(self.context)
        self.attributes = AttributeRenderer(self.context)
        self.blocks = BlockRenderer(self.context)
        self.matches = MatchRenderer(self.context)
        self.closures = ClosureRenderer(self.context)
        self.collections = CollectionRenderer(self.context)
        self.expressions = ExpressionRenderer(self.context)
        self._memo: dict[tuple[int, LayoutState, int], tuple[Node, Rendered]] = {}

    def renderer_for(self, node: Node) -> NodeRenderer[Any]:
        """Select the renderer of ``node``'s variant.

        Raises:
            TypeError: If ``node`` is not a syntax node.
        """
        match node:
            case SourceFile() | Fn() | Param() | Struct() | FieldDef() | Enum() | Variant():
                return self.items
            case Impl() | Const() | Comment():
                return self.items
            case Use() | UseTree():
                return self.imports
            case Attribute():
                return self.attributes
            case Block() | Let() | ExprStmt() | If() | LetCond() | ForLoop() | While():
                return self.blocks
            case Match() | Arm():
                return self.matches
            case Closure():
                return self.closures
            case StructLit() | FieldInit() | Array() | Tuple() | Macro():
                return self.collections
            case Path() | Lit() | Unary() | Binary() | Cast() | Paren() | Return():
                return self.expressions
            case Call() | MethodCall() | Field() | Index() | Try():
                return self.expressions
            case _:
                raise TypeError(f"Unsupported syntax node: {type(node).__name__}")

    def _dispatch(self, node: Node, state: LayoutState, reserve: int) -> Rendered:
        key: tuple[int, LayoutState, int] = (id(node), state, reserve)
        hit: tuple[Node, Rendered] | None = self._memo.get(key)
        if hit is not None and hit[0] is node:
            return hit[1]
        rendered: Rendered = self.renderer_for(node).render(node, state, reserve=reserve)
        self._memo[key] = (node, rendered)
        return rendered

    def render(self, tree: Node, state: LayoutState | None = None) -> Rendered:
        """Render ``tree`` without the Emit phase (no audit, ``\\n`` line endings)."""
        return self._dispatch(tree, state or LayoutState.initial(self.config), 0)

    def format(self, tree: Node, *, source_text: str | None = None) -> FormatResult:
        """Run a full formatting pass over ``tree``.

        Args:
            tree (Node): Root of the syntax tree (usually a `SourceFile`).
            source_text (str | None): Original source, used for ``newline_style = Auto``
                and to compute `FormatResult.changed`.

        Returns:
            FormatResult: The formatted text and the run's diagnostics.
        """
        logger.info("Formatting %s (max_width=%d)", type(tree).__name__, self.config.max_width)
        self._memo.clear()
        try:
            text: str = self.render(tree).text
        finally:
            self._memo.clear()
        if text and not text.endswith("\n"):
            text += "\n"

        # Emit
        log: DiagnosticLog = DiagnosticLog.from_iterable(self.config.diagnostics)
        audit_widths(text, self.config.max_width, log)
        text = apply_newline_style(text, self.config.newline_style, source_text)

        changed: bool | None = None if source_text is None else text != source_text
        logger.debug("Formatted %d line(s), %d diagnostic(s)", text.count("\n"), len(log))
        return FormatResult(
            text=text, diagnostics=log.freeze(), config=self.config, changed=changed
        )
