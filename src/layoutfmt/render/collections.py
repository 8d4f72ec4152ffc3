# topmark:header:start
#
#   project      : LayoutFmt
#   file         : collections.py
#   file_relpath : src/layoutfmt/render/collections.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Literal and collection rendering: struct literals, arrays, tuples and macros.

Struct literals render as ``Name { a, b: c }`` when they fit, ``Name {}`` when
empty, and vertically (one field per line, trailing commas, no comma after
``..base``) otherwise. With ``use_field_init_shorthand`` a field whose value is
a path equal to the field name renders as the bare name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from layoutfmt.config.logging import get_logger
from layoutfmt.render.base import NodeRenderer, Rendered
from layoutfmt.render.lists import Element, layout_list, node_element, node_elements
from layoutfmt.syntax.nodes import Array, FieldInit, Macro, Path, StructLit, Tuple

if TYPE_CHECKING:
    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.layout.state import LayoutState
    from layoutfmt.syntax.nodes import Expr

logger: LayoutfmtLogger = get_logger(__name__)

Collection = Union[StructLit, FieldInit, Array, Tuple, Macro]

_MACRO_DELIMITERS: dict[str, tuple[str, str]] = {"(": ("(", ")"), "[": ("[", "]"), "{": (" {", "}")}


class CollectionRenderer(NodeRenderer[Collection]):
    """Renders struct literals, field initializers, arrays, tuples and macro calls."""

    category = "collection"

    def render(self, node: Collection, state: LayoutState, *, reserve: int = 0) -> Rendered:
        match node:
            case StructLit():
                return self._struct_lit(node, state, reserve)
            case FieldInit():
                return self._field_init(node, state, reserve)
            case Array():
                return layout_list(
                    state,
                    "",
                    node_elements(self.context, node.items),
                    opener="[",
                    closer="]",
                    reserve=reserve,
                )
            case Tuple():
                return layout_list(
                    state,
                    "",
                    node_elements(self.context, node.items),
                    opener="(",
                    closer=")",
                    reserve=reserve,
                    single_comma=True,
                )
            case Macro():
                opener, closer = _MACRO_DELIMITERS.get(node.delim, ("(", ")"))
                return layout_list(
                    state,
                    f"{node.name}!",
                    node_elements(self.context, node.args),
                    opener=opener,
                    closer=closer,
                    pad=node.delim == "{",
                    reserve=reserve,
                )
        raise TypeError(f"Not a collection: {type(node).__name__}")

    def _struct_lit(self, node: StructLit, state: LayoutState, reserve: int) -> Rendered:
        elements: list[Element] = [node_element(self.context, f) for f in node.fields]
        if node.base is not None:
            base: Expr = node.base

            def _render_base(at: LayoutState, after: int) -> Rendered:
                rendered: Rendered = self.child(base, at.advance(".."), reserve=after)
                return Rendered.at(at, ".." + rendered.text)

            elements.append(Element(_render_base, comma=False))
        return layout_list(
            state,
            node.path,
            elements,
            opener=" {",
            closer="}",
            pad=True,
            reserve=reserve,
        )

    def _field_init(self, node: FieldInit, state: LayoutState, reserve: int) -> Rendered:
        if node.value is None or (
            self.config.use_field_init_shorthand
            and isinstance(node.value, Path)
            and node.value.text == node.name
        ):
            return Rendered.at(state, node.name)
        prefix: str = f"{node.name}: "
        value: Rendered = self.child(node.value, state.advance(prefix), reserve=reserve)
        return Rendered.at(state, prefix + value.text)
