# topmark:header:start
#
#   project      : LayoutFmt
#   file         : diagnostics.py
#   file_relpath : src/layoutfmt/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for LayoutFmt.

Diagnostics are the non-fatal side channel of a formatting run. Configuration
errors are exceptions (see `layoutfmt.config.errors`); everything that must not
halt rendering is reported here instead.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * DiagnosticKind: what was observed (width violation, indent overflow, ignored option).
    * Diagnostic: immutable structured diagnostic payload.
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable per-run collection with helpers for adding and summarizing.
    * FrozenDiagnosticLog: immutable snapshot container for results and config snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from layoutfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from layoutfmt.config.logging import LayoutfmtLogger


logger: LayoutfmtLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected during a run.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class DiagnosticKind(Enum):
    """Category of a diagnostic."""

    WIDTH_EXCEEDED = "width_exceeded"
    INDENT_OVERFLOW = "indent_overflow"
    OPTION_IGNORED = "option_ignored"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level, a kind and a message.

    Attributes:
        level (DiagnosticLevel): Severity.
        kind (DiagnosticKind): What was observed.
        message (str): Human-readable message.
        line (int | None): 1-based output line the diagnostic refers to, if any.
    """

    level: DiagnosticLevel
    kind: DiagnosticKind
    message: str
    line: int | None = None

    def render(self, *, color: bool = False) -> str:
        """Return a single-line human representation (``line 3: [warning] ...``)."""
        prefix: str = f"line {self.line}: " if self.line is not None else ""
        text: str = f"{prefix}[{self.level.value}] {self.message}"
        return self.level.color(text) if color else text


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int


@dataclass
class DiagnosticLog:
    """Mutable, per-run collection of diagnostics.

    Renderers never write here directly; the engine and the configuration
    resolver own the log for the duration of one run and freeze it into the result.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics.

        Args:
            diagnostics: Existing diagnostics (e.g., from a frozen snapshot).

        Returns:
            A new DiagnosticLog containing the provided diagnostics.
        """
        return cls(items=list(diagnostics))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic to the log.

        Args:
            diagnostic: The diagnostic object.
        """
        self.items.append(diagnostic)
        logger.trace(
            "Adding [%s/%s]: %r", diagnostic.level.value, diagnostic.kind.value, diagnostic.message
        )

    def add_warning(self, kind: DiagnosticKind, message: str, *, line: int | None = None) -> None:
        """Add a ``warning`` diagnostic to the log.

        Args:
            kind: The diagnostic kind.
            message: The diagnostic message.
            line: Optional 1-based output line.
        """
        self.add(Diagnostic(DiagnosticLevel.WARNING, kind, message, line))

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable diagnostic container.

    `FrozenDiagnosticLog` is the immutable counterpart to `DiagnosticLog`. It is
    stored on frozen objects (`Config`, `FormatResult`) where mutation is not permitted.
    """

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        """Return the diagnostics of one kind, in insertion order."""
        return tuple(d for d in self.items if d.kind == kind)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in items if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in items if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)

