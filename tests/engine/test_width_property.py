# topmark:header:start
#
#   project      : LayoutFmt
#   file         : test_width_property.py
#   file_relpath : tests/engine/test_width_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the width bound and determinism of the engine.

Trees come from `tests.strategies_layoutfmt`, whose bounds guarantee that a
layout within ``max_width`` always exists. The engine must find one, and must
find the same one every time.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from layoutfmt.config import Config
from layoutfmt.engine import FormatResult, PrettyPrinter
from layoutfmt.syntax import decode_tree, encode_tree
from layoutfmt.syntax.nodes import SourceFile
from tests.conftest import make_config
from tests.strategies_layoutfmt import s_source_file, s_width

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=60,
)
@given(tree=s_source_file(), width=s_width)
def test_lines_stay_within_max_width(tree: SourceFile, width: int) -> None:
    """Every emitted line fits and the width audit stays silent.

    Args:
        tree (SourceFile): Generated file of imports and one function.
        width (int): Generated ``max_width``.
    """
    result: FormatResult = PrettyPrinter(make_config(max_width=width)).format(tree)
    for line in result.text.split("\n"):
        assert len(line) <= width, result.text
    assert len(result.diagnostics) == 0


@settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=40,
)
@given(tree=s_source_file(), width=s_width)
def test_output_is_deterministic(tree: SourceFile, width: int) -> None:
    """Formatting twice, or formatting a decoded copy, gives the same text.

    Args:
        tree (SourceFile): Generated file of imports and one function.
        width (int): Generated ``max_width``.
    """
    config: Config = make_config(max_width=width)
    printer = PrettyPrinter(config)
    first: str = printer.format(tree).text

    assert printer.format(tree).text == first
    copy = decode_tree(encode_tree(tree))
    assert copy == tree
    assert PrettyPrinter(config).format(copy).text == first
