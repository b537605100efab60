# topmark:header:start
#
#   project      : FrontOpts
#   file         : session.py
#   file_relpath : src/frontopts/options/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-invocation state of the option parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from frontopts.diagnostic.kinds import DiagnosticKind
from frontopts.diagnostic.localization import DEFAULT_LOCALIZER
from frontopts.diagnostic.model import Diagnostic
from frontopts.options.model import OptionsRecord

if TYPE_CHECKING:
    from frontopts.diagnostic.localization import Localizer
    from frontopts.diagnostic.log import DiagnosticSink

O = TypeVar("O", bound=OptionsRecord)


@dataclass
class ParseSession(Generic[O]):
    """Working state of one top-level parse.

    A session is created by `OptionParser.parse` and discarded when it returns. It is
    owned by a single invocation and never shared.

    Attributes:
        options (O): The record being populated.
        sink (DiagnosticSink): Where diagnostics are reported.
        localizer (Localizer): Renders message details embedded in other diagnostics.
        seen_response_files (set[str]): Canonical paths of response files already
            included, to suppress duplicate and cyclic inclusion.
    """

    options: O
    sink: DiagnosticSink
    localizer: Localizer = DEFAULT_LOCALIZER
    seen_response_files: set[str] = field(default_factory=lambda: set())

    def report(self, kind: DiagnosticKind, *arguments: str) -> Diagnostic:
        """Report a source-less diagnostic of ``kind``.

        Args:
            kind (DiagnosticKind): What went wrong.
            *arguments (str): Message arguments.

        Returns:
            Diagnostic: The reported diagnostic.
        """
        diagnostic = Diagnostic.of(kind, *arguments)
        self.sink.report(diagnostic)
        return diagnostic

    def localized_no_such_file(self, file_name: str) -> str:
        """Return the localized "file does not exist" text for ``file_name``."""
        return Diagnostic.of(DiagnosticKind.NoSuchFile, file_name).render(self.localizer)
