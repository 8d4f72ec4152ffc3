# topmark:header:start
#
#   project      : LayoutFmt
#   file         : state.py
#   file_relpath : src/layoutfmt/layout/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Width- and indentation-aware layout cursor.

`LayoutState` is an immutable value threaded through the renderers: each call
receives the state at which its text starts and derives new states for its
children. Because states are never mutated, sibling nodes cannot observe each
other's indentation changes and indentation is restored simply by returning.

Text conventions shared by every renderer:
    * the first line of a rendered fragment starts at ``state.column`` and carries
      no leading whitespace;
    * every following line carries its full (absolute) indentation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layoutfmt.config.model import Config


def first_line(text: str) -> str:
    """Return the first line of ``text``."""
    return text.split("\n", 1)[0]


def last_line(text: str) -> str:
    """Return the last line of ``text``."""
    return text.rsplit("\n", 1)[-1]


def is_multiline(text: str) -> bool:
    """Return True if ``text`` spans more than one line."""
    return "\n" in text


@dataclass(frozen=True, slots=True)
class LayoutState:
    """Cursor position and width budget at one point of the output.

    Attributes:
        max_width (int): Maximum line width.
        tab_spaces (int): Columns per indentation level.
        indent (int): Indentation (in columns) of the current line.
        column (int): Column at which the next character is written.

    Raises:
        ValueError: On construction, if ``indent`` is negative or ``column < indent``.
    """

    max_width: int
    tab_spaces: int
    indent: int = 0
    column: int = 0

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError(f"Negative indentation: {self.indent}")
        if self.column < self.indent:
            raise ValueError(f"Column {self.column} is left of indentation {self.indent}")

    @classmethod
    def initial(cls, config: Config) -> LayoutState:
        """Return the state at the start of a file."""
        return cls(max_width=config.max_width, tab_spaces=config.tab_spaces)

    @property
    def remaining(self) -> int:
        """Horizontal budget left on the current line (may be negative)."""
        return self.max_width - self.column

    @property
    def indent_str(self) -> str:
        """Whitespace that starts a new line at the current indentation."""
        return " " * self.indent

    def fits(self, text: str, reserve: int = 0) -> bool:
        """Return True if ``text`` written here stays within ``max_width``.

        For multi-line text the first line is measured from ``column`` and the
        following lines from column 0 (they carry their own indentation).
        ``reserve`` columns are kept free after the last line for text the caller
        appends (``;``, ``,``, `` {``).
        """
        lines: list[str] = text.split("\n")
        if len(lines) == 1:
            return self.column + len(text) + reserve <= self.max_width
        if self.column + len(lines[0]) > self.max_width:
            return False
        if any(len(line) > self.max_width for line in lines[1:-1]):
            return False
        return len(lines[-1]) + reserve <= self.max_width

    def indented(self, levels: int = 1) -> LayoutState:
        """Return a state on a fresh line ``levels`` indentation levels deeper.

        Negative ``levels`` dedent; dedenting past column 0 raises `ValueError`.
        """
        indent: int = self.indent + levels * self.tab_spaces
        return replace(self, indent=indent, column=indent)

    def aligned(self, column: int) -> LayoutState:
        """Return a state whose continuation lines align at ``column`` (visual indent)."""
        return replace(self, indent=column, column=column)

    def advance(self, text: str) -> LayoutState:
        """Return the state after writing ``text`` (which follows the text conventions)."""
        if "\n" in text:
            return replace(self, column=max(self.indent, len(last_line(text))))
        return replace(self, column=self.column + len(text))

    def newline(self) -> LayoutState:
        """Return the state at the start of the next line, same indentation."""
        return replace(self, column=self.indent)
