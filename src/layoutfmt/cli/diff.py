# topmark:header:start
#
#   project      : LayoutFmt
#   file         : diff.py
#   file_relpath : src/layoutfmt/cli/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff rendering for ``layoutfmt check --diff``."""

from __future__ import annotations

import difflib

from yachalk import chalk


def unified_diff(current: str, updated: str, *, name: str) -> str:
    """Return the unified diff from ``current`` to ``updated`` ('' when equal)."""
    lines: list[str] = []
    for line in difflib.unified_diff(
        current.splitlines(keepends=True),
        updated.splitlines(keepends=True),
        fromfile=f"{name} (current)",
        tofile=f"{name} (formatted)",
        n=3,
    ):
        lines.append(line if line.endswith("\n") else line + "\n")
    return "".join(lines)


def render_patch(patch: str, *, color: bool = True) -> str:
    """Render a unified diff for the terminal.

    Control characters are shown explicitly so line-ending changes are visible.
    """

    def process_line(line: str) -> str:
        content: str = line.replace("\r", "\\r")
        if not color or not content:
            return content
        match content[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    return "\n".join(process_line(line) for line in patch.rstrip("\n").split("\n"))
