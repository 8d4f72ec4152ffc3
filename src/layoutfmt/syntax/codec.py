# topmark:header:start
#
#   project      : LayoutFmt
#   file         : codec.py
#   file_relpath : src/layoutfmt/syntax/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON interchange for syntax trees.

An external parser hands the engine a JSON document in which every node is an
object carrying a ``"kind"`` tag (``"fn"``, ``"method_call"``, ...). Field names
match the dataclass fields of `layoutfmt.syntax.nodes`; optional fields may be
omitted. Arrays decode to tuples.

Decoding is strict: an unknown kind, a missing required field, an unexpected
field or a scalar of the wrong type raises `SyntaxTreeError`, with a JSON-path
style location (``$.items[2].body``) in the message.
"""

from __future__ import annotations

import json
from dataclasses import MISSING, fields
from typing import TYPE_CHECKING, Any, get_args

from layoutfmt.config.logging import get_logger
from layoutfmt.syntax import nodes

if TYPE_CHECKING:
    from dataclasses import Field as DataclassField

    from layoutfmt.config.logging import LayoutfmtLogger
    from layoutfmt.syntax.nodes import Node

logger: LayoutfmtLogger = get_logger(__name__)


class SyntaxTreeError(ValueError):
    """A malformed syntax tree document.

    Attributes:
        location (str): JSON-path style location of the offending value.
    """

    def __init__(self, message: str, *, location: str = "$") -> None:
        super().__init__(f"{location}: {message}")
        self.location = location


KIND_TO_NODE: dict[str, type] = {
    "source_file": nodes.SourceFile,
    "attribute": nodes.Attribute,
    "use": nodes.Use,
    "use_tree": nodes.UseTree,
    "fn": nodes.Fn,
    "param": nodes.Param,
    "struct": nodes.Struct,
    "field_def": nodes.FieldDef,
    "enum": nodes.Enum,
    "variant": nodes.Variant,
    "impl": nodes.Impl,
    "const": nodes.Const,
    "comment": nodes.Comment,
    "let": nodes.Let,
    "expr_stmt": nodes.ExprStmt,
    "path": nodes.Path,
    "lit": nodes.Lit,
    "unary": nodes.Unary,
    "binary": nodes.Binary,
    "cast": nodes.Cast,
    "paren": nodes.Paren,
    "call": nodes.Call,
    "method_call": nodes.MethodCall,
    "field": nodes.Field,
    "index": nodes.Index,
    "try": nodes.Try,
    "macro": nodes.Macro,
    "tuple": nodes.Tuple,
    "array": nodes.Array,
    "field_init": nodes.FieldInit,
    "struct_lit": nodes.StructLit,
    "block": nodes.Block,
    "let_cond": nodes.LetCond,
    "if": nodes.If,
    "arm": nodes.Arm,
    "match": nodes.Match,
    "closure": nodes.Closure,
    "return": nodes.Return,
    "for_loop": nodes.ForLoop,
    "while": nodes.While,
}

NODE_TO_KIND: dict[type, str] = {cls: kind for kind, cls in KIND_TO_NODE.items()}

# Field annotations (as strings, see `from __future__ import annotations`) that hold scalars.
_SCALAR_CHECKS: dict[str, tuple[type, ...]] = {
    "str": (str,),
    "str | None": (str, type(None)),
    "bool": (bool,),
}
_STRING_TUPLES: frozenset[str] = frozenset({"tuple[str, ...]", "tuple[str, ...] | None"})


# ------------------ Decoding ------------------


def decode_tree(data: Any, *, location: str = "$") -> Node:
    """Decode a JSON-compatible object into a syntax node.

    Args:
        data (Any): A mapping with a ``"kind"`` tag (as produced by `json.loads`).
        location (str): Location prefix used in error messages.

    Returns:
        Node: The decoded, immutable node.

    Raises:
        SyntaxTreeError: If the document is malformed.
    """
    if not isinstance(data, dict):
        raise SyntaxTreeError(
            f"expected a node object, got {type(data).__name__}", location=location
        )
    kind: Any = data.get("kind")
    if not isinstance(kind, str):
        raise SyntaxTreeError("node object has no string `kind` tag", location=location)
    cls: type | None = KIND_TO_NODE.get(kind)
    if cls is None:
        raise SyntaxTreeError(f"unknown node kind {kind!r}", location=location)

    known: dict[str, DataclassField[Any]] = {f.name: f for f in fields(cls)}
    unexpected: list[str] = sorted(k for k in data if k != "kind" and k not in known)
    if unexpected:
        raise SyntaxTreeError(
            f"unexpected field(s) for {kind!r}: {', '.join(unexpected)}", location=location
        )

    kwargs: dict[str, Any] = {}
    for name, f in known.items():
        where: str = f"{location}.{name}"
        if name not in data:
            if f.default is MISSING and f.default_factory is MISSING:
                raise SyntaxTreeError(
                    f"missing required field {name!r} for {kind!r}", location=location
                )
            continue
        kwargs[name] = _decode_field(data[name], str(f.type), where)

    return cls(**kwargs)


def _decode_field(value: Any, annotation: str, location: str) -> Any:
    checks: tuple[type, ...] | None = _SCALAR_CHECKS.get(annotation)
    if checks is not None:
        if not isinstance(value, checks):
            raise SyntaxTreeError(
                f"expected {annotation}, got {type(value).__name__}", location=location
            )
        return value

    if annotation in _STRING_TUPLES:
        if value is None and annotation.endswith("None"):
            return None
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise SyntaxTreeError("expected an array of strings", location=location)
        return tuple(value)

    # Node-valued: a single node, an optional node, or a tuple of nodes.
    if value is None:
        if annotation.endswith("| None"):
            return None
        raise SyntaxTreeError("null is not allowed here", location=location)
    allowed: tuple[type, ...] = _allowed_node_types(annotation)
    if annotation.startswith("tuple["):
        if not isinstance(value, list):
            raise SyntaxTreeError("expected an array of nodes", location=location)
        return tuple(
            _expect(decode_tree(v, location=f"{location}[{i}]"), allowed, f"{location}[{i}]")
            for i, v in enumerate(value)
        )
    return _expect(decode_tree(value, location=location), allowed, location)


def _expect(node: Node, allowed: tuple[type, ...], location: str) -> Node:
    if not isinstance(node, allowed):
        names: str = ", ".join(sorted(NODE_TO_KIND[cls] for cls in allowed))
        raise SyntaxTreeError(
            f"node kind {NODE_TO_KIND[type(node)]!r} is not allowed here"
            f" (expected one of: {names})",
            location=location,
        )
    return node


_ALLOWED_CACHE: dict[str, tuple[type, ...]] = {}


def _allowed_node_types(annotation: str) -> tuple[type, ...]:
    """Return the node classes accepted by a field annotation such as ``tuple[Expr, ...]``."""
    cached: tuple[type, ...] | None = _ALLOWED_CACHE.get(annotation)
    if cached is not None:
        return cached
    inner: str = annotation.removeprefix("tuple[").replace(", ...]", "")
    out: list[type] = []
    for name in (part.strip() for part in inner.split("|")):
        if name == "None":
            continue
        target: Any = getattr(nodes, name)
        out.extend(get_args(target) or (target,))
    _ALLOWED_CACHE[annotation] = tuple(out)
    return _ALLOWED_CACHE[annotation]


def loads(text: str) -> Node:
    """Decode a JSON document into a syntax tree.

    Raises:
        SyntaxTreeError: If ``text`` is not JSON or not a valid tree.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise SyntaxTreeError(f"invalid JSON: {e}") from e
    node: Node = decode_tree(data)
    logger.debug("Decoded syntax tree rooted at %s", type(node).__name__)
    return node


# ------------------ Encoding ------------------


def encode_tree(node: Node) -> dict[str, Any]:
    """Encode a node into a JSON-compatible dict, omitting fields left at their default."""
    kind: str | None = NODE_TO_KIND.get(type(node))
    if kind is None:
        raise TypeError(f"Not a syntax node: {type(node).__name__}")
    out: dict[str, Any] = {"kind": kind}
    for f in fields(node):  # type: ignore[arg-type]
        value: Any = getattr(node, f.name)
        if f.default is not MISSING and value == f.default:
            continue
        out[f.name] = _encode_value(value)
    return out


def _encode_value(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_encode_value(v) for v in value]
    if type(value) in NODE_TO_KIND:
        return encode_tree(value)
    return value


def dumps(node: Node, *, indent: int | None = None) -> str:
    """Encode a syntax tree as a JSON document."""
    return json.dumps(encode_tree(node), indent=indent)
