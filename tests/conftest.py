# topmark:header:start
#
#   project      : LayoutFmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LayoutFmt test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs through `layoutfmt.config.resolve` or a `MutableConfig`
      (mutable), then `freeze()` into a `layoutfmt.config.Config`.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from layoutfmt.config import logging, resolve
from layoutfmt.engine import PrettyPrinter

if TYPE_CHECKING:
    from layoutfmt.config import Config
    from layoutfmt.syntax.nodes import Node

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.render`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_layout: DecoratorType[Any] = as_typed_mark(pytest.mark.layout)
mark_render: DecoratorType[Any] = as_typed_mark(pytest.mark.render)
mark_engine: DecoratorType[Any] = as_typed_mark(pytest.mark.engine)
mark_syntax: DecoratorType[Any] = as_typed_mark(pytest.mark.syntax)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.fixture`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.fixture`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_layoutfmt_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LayoutFmt's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    LAYOUTFMT_LOG_LEVEL in their shell. Individual tests can still raise the level
    via `pytest_configure` or `caplog`.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("LAYOUTFMT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**options: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``options``.

    Unstable features are enabled and line endings default to ``Unix`` so the
    expected texts in tests can use plain ``\\n``.

    Args:
        **options (Any): Raw option values, as they would appear in a manifest.

    Returns:
        Config: The resolved snapshot.
    """
    raw: dict[str, Any] = {"newline_style": "Unix", **options}
    return resolve(raw, unstable_enabled=True)


def render_text(node: Node, **options: Any) -> str:
    """Render ``node`` at the start of a line, without the Emit phase.

    Args:
        node (Node): The node to render.
        **options (Any): Raw option values passed to `make_config`.

    Returns:
        str: The rendered text (no trailing newline).
    """
    return PrettyPrinter(make_config(**options)).render(node).text


def format_text(node: Node, **options: Any) -> str:
    """Run a full formatting pass and return the emitted text.

    Args:
        node (Node): Root of the tree to format.
        **options (Any): Raw option values passed to `make_config`.

    Returns:
        str: The formatted text (ends with a newline).
    """
    return PrettyPrinter(make_config(**options)).format(node).text
