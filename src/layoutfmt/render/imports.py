# topmark:header:start
#
#   project      : LayoutFmt
#   file         : imports.py
#   file_relpath : src/layoutfmt/render/imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Import (``use``) rendering and ordering.

Ordering: within a group and across consecutive ``use`` items, paths are compared
segment by segment with ``self``, ``super`` and ``crate`` first, then snake_case,
CamelCase and SCREAMING_CASE names (each alphabetical), nested groups after plain
names and the glob ``*`` last.

Layout of a group that does not fit on one line depends on ``imports_indent``:

Block (one indentation level, filled lines, trailing comma)::

    use crate::{
        Error, Header, Signature,
        SignedTransaction,
    };

Visual (aligned after the opening brace, no trailing comma)::

    use crate::{Error, Header, Signature,
                SignedTransaction};
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from layoutfmt.config.logging import get_logger
from layoutfmt.config.types import ImportsIndent
from layoutfmt.layout.state import is_multiline
from layoutfmt.render.attributes import decorate
from layoutfmt.render.base import NodeRenderer, Rendered
from layoutfmt.syntax.nodes import Use, UseTree

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Item

logger: LayoutfmtLogger = get_logger(__name__)

_SPECIAL_SEGMENTS: dict[str, int] = {"self": 0, "super": 1, "crate": 2, "": 6, "*": 7}


def use_segment_key(segment: str) -> tuple[int, str]:
    """Return the sort key of one path segment."""
    rank: int | None = _SPECIAL_SEGMENTS.get(segment)
    if rank is not None:
        return rank, segment
    name: str = segment.removeprefix("r#")
    if name[:1].islower() or name[:1] == "_":
        return 3, segment
    if name.isupper():
        return 5, segment
    return 4, segment


def use_tree_key(tree: UseTree) -> tuple[tuple[tuple[int, str], ...], bool, str]:
    """Return the sort key of a use tree."""
    segments: list[str] = tree.path.split("::") if tree.path else [""]
    return (
        tuple(use_segment_key(s) for s in segments),
        tree.children is not None,
        tree.alias or "",
    )


def sort_use_items(items: Sequence[Item]) -> tuple[Item, ...]:
    """Reorder each run of consecutive ``use`` items; other items keep their place."""
    out: list[Item] = []
    run: list[Use] = []
    for item in items:
        if isinstance(item, Use):
            run.append(item)
            continue
        out.extend(sorted(run, key=lambda u: use_tree_key(u.tree)))
        run = []
        out.append(item)
    out.extend(sorted(run, key=lambda u: use_tree_key(u.tree)))
    return tuple(out)


class ImportRenderer(NodeRenderer[Union[Use, UseTree]]):
    """Renders ``use`` items and their trees."""

    category = "import"

    def render(self, node: Use | UseTree, state: LayoutState, *, reserve: int = 0) -> Rendered:
        if isinstance(node, Use):
            return self._use(node, state)
        return self._tree(node, state, reserve)

    def _use(self, node: Use, state: LayoutState) -> Rendered:
        prefix: str = f"{node.vis} use " if node.vis else "use "
        tree: Rendered = self.child(node.tree, state.advance(prefix), reserve=1)
        body: str = prefix + tree.text + ";"
        return Rendered.at(state, decorate(self.context, state, body, node.attrs, node.docs))

    def _tree(self, node: UseTree, state: LayoutState, reserve: int) -> Rendered:
        if node.children is None:
            alias: str = f" as {node.alias}" if node.alias else ""
            return Rendered.at(state, node.path + alias)

        children: list[UseTree] = sorted(node.children, key=use_tree_key)
        if len(children) == 1 and children[0].children is None and node.path:
            only: UseTree = children[0]
            if only.path not in ("self", "*"):
                merged = UseTree(f"{node.path}::{only.path}", alias=only.alias)
                return self._tree(merged, state, reserve)

        head: str = f"{node.path}::{{" if node.path else "{"
        if not children:
            return Rendered.at(state, head + "}")

        cursor: LayoutState = state.advance(head)
        flat: list[str] = [self.child(c, cursor, reserve=2).text for c in children]
        one_line: str = head + ", ".join(flat) + "}"
        if not any(is_multiline(t) for t in flat) and state.fits(one_line, reserve):
            return Rendered.at(state, one_line)

        if self.config.imports_indent is ImportsIndent.VISUAL:
            self.trace(node, "visual")
            return Rendered.at(state, self._visual(head, children, state, reserve))
        self.trace(node, "block")
        return Rendered.at(state, self._block(head, children, state))

    def _block(self, head: str, children: list[UseTree], state: LayoutState) -> str:
        inner: LayoutState = state.indented()
        texts: list[str] = [self.child(c, inner, reserve=1).text for c in children]
        lines: list[str] = []
        if any(is_multiline(t) for t in texts):
            lines = [t + "," for t in texts]
        else:
            current: str = ""
            for text in texts:
                piece: str = text + ","
                if current and inner.indent + len(current) + 1 + len(piece) > state.max_width:
                    lines.append(current)
                    current = piece
                else:
                    current = f"{current} {piece}" if current else piece
            lines.append(current)
        body: str = "\n".join(inner.indent_str + line for line in lines)
        return f"{head}\n{body}\n{state.indent_str}}}"

    def _visual(
        self, head: str, children: list[UseTree], state: LayoutState, reserve: int
    ) -> str:
        column: int = state.column + len(head)
        aligned: LayoutState = state.aligned(column)
        texts: list[str] = [self.child(c, aligned, reserve=2).text for c in children]
        separator: str = ",\n" + " " * column
        if any(is_multiline(t) for t in texts):
            return head + separator.join(texts) + "}"

        lines: list[str] = []
        current: str = texts[0]
        for i, text in enumerate(texts[1:], start=1):
            tail: int = 1 + reserve if i == len(texts) - 1 else 1
            if column + len(current) + 2 + len(text) + tail > state.max_width:
                lines.append(current)
                current = text
            else:
                current = f"{current}, {text}"
        lines.append(current)
        return head + separator.join(lines) + "}"
