# topmark:header:start
#
#   project      : LayoutFmt
#   file         : test_codec.py
#   file_relpath : tests/syntax/test_codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the JSON syntax tree interchange format."""

from __future__ import annotations

import json
from typing import Any

import pytest

from layoutfmt.syntax import SyntaxTreeError, decode_tree, dumps, encode_tree, loads
from layoutfmt.syntax.codec import KIND_TO_NODE
from layoutfmt.syntax.nodes import (
    Arm,
    Attribute,
    Block,
    Closure,
    ExprStmt,
    Fn,
    If,
    Lit,
    Match,
    Param,
    Path,
    SourceFile,
    Use,
    UseTree,
)
from tests.conftest import mark_syntax, parametrize

TREE = SourceFile(
    (
        Use(UseTree("std", children=(UseTree("io"), UseTree("fmt", alias="f")))),
        Fn(
            "main",
            params=(Param("x", "u8"),),
            body=Block(
                (
                    ExprStmt(
                        Match(
                            Path("x"),
                            (Arm("0", Lit("1")), Arm("_", Closure((), Path("x")))),
                        ),
                        semi=False,
                    ),
                    ExprStmt(If(Path("c"), Block(), orelse=If(Path("d"), Block()))),
                )
            ),
            attrs=(Attribute("inline"),),
            docs=("Entry point.",),
        ),
    ),
    attrs=(Attribute("allow", ("unused",), inner=True),),
)


@mark_syntax
def test_decode_minimal_document() -> None:
    """It should decode a document and fill in defaults."""
    node = loads('{"kind": "fn", "name": "f"}')
    assert node == Fn("f")


@mark_syntax
def test_encode_omits_defaults() -> None:
    """It should only write fields that differ from their default."""
    assert encode_tree(Fn("f")) == {"kind": "fn", "name": "f"}
    assert encode_tree(ExprStmt(Path("x"), semi=False)) == {
        "kind": "expr_stmt",
        "expr": {"kind": "path", "text": "x"},
        "semi": False,
    }


@mark_syntax
def test_round_trip_of_a_nested_tree() -> None:
    """It should decode what it encodes, through JSON text."""
    assert loads(dumps(TREE)) == TREE
    assert decode_tree(json.loads(dumps(TREE, indent=2))) == TREE


@mark_syntax
def test_every_kind_has_a_node_type() -> None:
    """It should map every kind tag to a distinct node class."""
    assert len(set(KIND_TO_NODE.values())) == len(KIND_TO_NODE)


@mark_syntax
@parametrize(
    "document,location,fragment",
    [
        ([], "$", "expected a node object"),
        ({"name": "f"}, "$", "kind"),
        ({"kind": "nope"}, "$", "unknown node kind 'nope'"),
        ({"kind": "fn"}, "$", "missing required field 'name'"),
        ({"kind": "fn", "name": "f", "color": 1}, "$", "color"),
        ({"kind": "fn", "name": 1}, "$.name", ""),
        (
            {"kind": "fn", "name": "f", "params": [{"kind": "lit", "text": "1"}]},
            "$.params[0]",
            "",
        ),
        ({"kind": "fn", "name": "f", "params": {"kind": "param"}}, "$.params", ""),
        ({"kind": "expr_stmt", "expr": {"kind": "fn", "name": "f"}}, "$.expr", ""),
    ],
)
def test_malformed_documents(document: Any, location: str, fragment: str) -> None:
    """It should report malformed documents with their location."""
    with pytest.raises(SyntaxTreeError) as excinfo:
        decode_tree(document)
    assert excinfo.value.location == location
    assert fragment in str(excinfo.value)


@mark_syntax
def test_invalid_json_text() -> None:
    """It should wrap JSON syntax errors."""
    with pytest.raises(SyntaxTreeError) as excinfo:
        loads("{")
    assert "invalid JSON" in str(excinfo.value)


@mark_syntax
def test_encode_rejects_foreign_objects() -> None:
    """It should refuse to encode objects that are not syntax nodes."""
    with pytest.raises(TypeError):
        encode_tree(object())  # type: ignore[arg-type]
