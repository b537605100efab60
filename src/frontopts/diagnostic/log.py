# topmark:header:start
#
#   project      : FrontOpts
#   file         : log.py
#   file_relpath : src/frontopts/diagnostic/log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic sinks.

The host environment owns where diagnostics go (console, log file, IDE). This module
defines the `DiagnosticSink` contract and `DiagnosticLog`, the in-process sink that
collects diagnostics in report order.

Sections:
    * DiagnosticSink: structural interface of a sink.
    * DiagnosticStats: aggregated per-severity counts.
    * DiagnosticLog: mutable collection with reporting and summary helpers.
    * FrozenDiagnosticLog: immutable snapshot of a log.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from frontopts.config.logging import get_logger
from frontopts.diagnostic.kinds import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from frontopts.config.logging import FrontoptsLogger
    from frontopts.diagnostic.kinds import DiagnosticKind
    from frontopts.diagnostic.model import Diagnostic


logger: FrontoptsLogger = get_logger(__name__)


class DiagnosticSink(Protocol):
    """Anything diagnostics can be reported to."""

    def report(self, diagnostic: Diagnostic) -> None:
        """Accept one diagnostic."""
        ...


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity."""

    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_warning + self.n_error


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-severity counts for a sequence of diagnostics.

    Args:
        diagnostics (Iterable[Diagnostic]): The diagnostics to count.

    Returns:
        DiagnosticStats: Per-severity counts.
    """
    n_warn: int = 0
    n_err: int = 0
    for d in diagnostics:
        if d.severity is Severity.WARNING:
            n_warn += 1
        else:
            n_err += 1
    return DiagnosticStats(n_warning=n_warn, n_error=n_err)


@dataclass
class DiagnosticLog:
    """Mutable collection of reported diagnostics, in report order.

    Satisfies `DiagnosticSink`. Not synchronized: share one log between threads only
    behind a lock.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def report(self, diagnostic: Diagnostic) -> None:
        """Append ``diagnostic`` to the log.

        Args:
            diagnostic (Diagnostic): The diagnostic to record.
        """
        self.items.append(diagnostic)
        logger.trace(
            "Reported %s %s%04d: %s",
            diagnostic.severity.value,
            diagnostic.reporter,
            diagnostic.code,
            diagnostic.message_key,
        )

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def stats(self) -> DiagnosticStats:
        """Return per-severity counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.severity is Severity.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.severity is Severity.ERROR for d in self.items)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the diagnostics of ``kind``, in report order."""
        return [d for d in self.items if d.kind is kind]

    def kinds(self) -> list[DiagnosticKind]:
        """Return the kind of every diagnostic, in report order."""
        return [d.kind for d in self.items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`."""

    items: tuple[Diagnostic, ...]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-severity counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)
