# topmark:header:start
#
#   project      : FrontOpts
#   file         : __init__.py
#   file_relpath : src/frontopts/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontOpts package.

FrontOpts is the command-line option ingestion and diagnostic reporting layer of a
compiler front end. It expands response files, resolves wildcard file specifications,
loads source text, and reports every recoverable problem as a classified diagnostic.
"""

from __future__ import annotations

from frontopts.diagnostic import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticLog,
    Severity,
    classify,
)
from frontopts.options import (
    OptionParser,
    OptionsRecord,
    ParseSession,
    StandardVocabulary,
    parse_command_line,
)

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "OptionParser",
    "OptionsRecord",
    "ParseSession",
    "Severity",
    "StandardVocabulary",
    "classify",
    "parse_command_line",
]
