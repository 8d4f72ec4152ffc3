# topmark:header:start
#
#   project      : LayoutFmt
#   file         : items.py
#   file_relpath : src/layoutfmt/render/items.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Item rendering: source files, functions, structs, enums, impls and consts.

Items in a file or an ``impl`` are separated by one blank line, except:
    * consecutive ``use`` items;
    * consecutive items of the same kind that each rendered on one line;
    * an item directly after a line comment (the comment belongs to it).

Functions break their parameters vertically when the signature does not fit,
with ``) -> Ret {`` on the closing line. With ``fn_single_line`` a body holding a
single expression statement is kept on the signature line (``fn f() -> u8 { 1 }``)
when the whole function fits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from layoutfmt.config.logging import get_logger
from layoutfmt.layout.state import is_multiline
from layoutfmt.render.attributes import decorate
from layoutfmt.render.base import NodeRenderer, Rendered
from layoutfmt.render.imports import sort_use_items
from layoutfmt.render.lists import layout_list, node_element, render_rhs
from layoutfmt.syntax.nodes import (
    Comment,
    Const,
    Enum,
    ExprStmt,
    FieldDef,
    Fn,
    Impl,
    Param,
    SourceFile,
    Struct,
    Use,
    Variant,
    is_block_like,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Attribute, Block, Item, Stmt

logger: LayoutfmtLogger = get_logger(__name__)

ItemNode = Union[SourceFile, Fn, Param, Struct, FieldDef, Enum, Variant, Impl, Const, Comment]


def _words(*words: str) -> str:
    """Join the non-empty ``words`` with single spaces, with a trailing space."""
    return "".join(f"{w} " for w in words if w)


class ItemRenderer(NodeRenderer[ItemNode]):
    """Renders items and their members."""

    category = "item"

    def render(self, node: ItemNode, state: LayoutState, *, reserve: int = 0) -> Rendered:
        match node:
            case Comment():
                return Rendered.at(state, node.text)
            case Param():
                text: str = node.pattern if node.ty is None else f"{node.pattern}: {node.ty}"
                return Rendered.at(state, text)
            case FieldDef():
                return Rendered.at(state, f"{_words(node.vis)}{node.name}: {node.ty}")
            case Variant():
                fields: str = "" if node.fields is None else f"({', '.join(node.fields)})"
                return Rendered.at(state, node.name + fields)
            case SourceFile():
                return Rendered.at(state, self._source_file(node, state))
            case Fn():
                return self._decorated(self._fn(node, state), node.attrs, node.docs, state)
            case Struct():
                return self._decorated(self._struct(node, state), node.attrs, node.docs, state)
            case Enum():
                return self._decorated(self._enum(node, state), node.attrs, node.docs, state)
            case Impl():
                return self._decorated(self._impl(node, state), node.attrs, node.docs, state)
            case Const():
                return self._decorated(self._const(node, state), node.attrs, node.docs, state)
        raise TypeError(f"Not an item: {type(node).__name__}")

    def _decorated(
        self,
        body: str,
        attrs: Sequence[Attribute],
        docs: Sequence[str],
        state: LayoutState,
    ) -> Rendered:
        return Rendered.at(state, decorate(self.context, state, body, attrs, docs))

    # ------------------ Item sequences ------------------

    def _source_file(self, node: SourceFile, state: LayoutState) -> str:
        header: list[str] = [self.child(a, state).text for a in node.attrs]
        body: str = self.render_items(sort_use_items(node.items), state)
        if header and body:
            return "\n".join(header) + "\n\n" + body
        return "\n".join(header) or body

    def render_items(self, items: Sequence[Item], state: LayoutState) -> str:
        """Render a sequence of items at ``state`` with the item spacing rules."""
        text: str = ""
        previous: tuple[Item, str] | None = None
        for item in items:
            rendered: str = self.child(item, state).text
            if previous is None:
                text = rendered
            else:
                separator: str = "\n" if _tight(*previous, item, rendered) else "\n\n"
                text += separator + state.indent_str + rendered
            previous = (item, rendered)
        return text

    # ------------------ Functions ------------------

    def _fn(self, node: Fn, state: LayoutState) -> str:
        head: str = _words(node.vis, node.qualifiers) + f"fn {node.name}{node.generics}"
        ret: str = f" -> {node.ret}" if node.ret is not None else ""
        signature: Rendered = layout_list(
            state,
            head,
            [node_element(self.context, p) for p in node.params],
            opener="(",
            closer=")",
            suffix=ret,
            reserve=2 if node.body is not None else 1,
        )
        if node.body is None:
            return signature.text + ";"

        if self.config.fn_single_line and signature.single_line:
            single: str | None = self._fn_single_line(node, signature.text, state)
            if single is not None:
                return single

        opened: str = signature.text + " "
        return opened + self.child(node.body, state.advance(opened)).text

    def _fn_single_line(self, node: Fn, signature: str, state: LayoutState) -> str | None:
        body: Block | None = node.body
        if body is None or body.unsafe or len(body.stmts) != 1:
            return None
        stmt: Stmt = body.stmts[0]
        if not isinstance(stmt, ExprStmt) or is_block_like(stmt.expr):
            return None
        opened: str = signature + " { "
        rendered: Rendered = self.child(stmt, state.advance(opened), reserve=2)
        candidate: str = opened + rendered.text + " }"
        if rendered.single_line and state.fits(candidate):
            self.trace(node, "single-line body")
            return candidate
        self.trace(node, f"single-line body does not fit ({len(candidate)} columns)")
        return None

    # ------------------ Type definitions ------------------

    def _struct(self, node: Struct, state: LayoutState) -> str:
        head: str = _words(node.vis) + f"struct {node.name}{node.generics}"
        if node.fields is None:
            return head + ";"
        return head + self._members(node.fields, state)

    def _enum(self, node: Enum, state: LayoutState) -> str:
        head: str = _words(node.vis) + f"enum {node.name}{node.generics}"
        return head + self._members(node.variants, state)

    def _members(self, members: Sequence[FieldDef | Variant], state: LayoutState) -> str:
        if not members:
            return " {}"
        inner: LayoutState = state.indented()
        lines: list[str] = []
        for member in members:
            body: str = self.child(member, inner, reserve=1).text + ","
            decorated: str = decorate(self.context, inner, body, member.attrs, member.docs)
            lines.append(inner.indent_str + decorated)
        return " {\n" + "\n".join(lines) + "\n" + state.indent_str + "}"

    def _impl(self, node: Impl, state: LayoutState) -> str:
        head: str = f"impl{node.generics} "
        if node.trait_ref is not None:
            head += f"{node.trait_ref} for "
        head += node.self_ty
        if not node.items:
            return head + " {}"
        inner: LayoutState = state.indented()
        body: str = self.render_items(node.items, inner)
        return f"{head} {{\n{inner.indent_str}{body}\n{state.indent_str}}}"

    def _const(self, node: Const, state: LayoutState) -> str:
        keyword: str = "static" if node.static else "const"
        lhs: str = _words(node.vis, keyword) + f"{node.name}: {node.ty} ="
        return render_rhs(self.context, state, lhs, node.value, reserve=1).text + ";"


def _tight(previous: Item, previous_text: str, item: Item, text: str) -> bool:
    """Return True if no blank line separates ``previous`` from ``item``."""
    if isinstance(previous, Comment):
        return True
    if isinstance(previous, Use) and isinstance(item, Use):
        return True
    return (
        type(previous) is type(item)
        and not isinstance(item, Comment)
        and not is_multiline(previous_text)
        and not is_multiline(text)
    )
