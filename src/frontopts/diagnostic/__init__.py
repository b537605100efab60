# topmark:header:start
#
#   project      : FrontOpts
#   file         : __init__.py
#   file_relpath : src/frontopts/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic catalog and message primitives.

Design:
    - Every reportable problem has a `DiagnosticKind` with a stable code and a
      severity fixed by the kind alone.
    - Problems are reported as immutable `Diagnostic` instances into a
      `DiagnosticSink`; `DiagnosticLog` is the in-process sink.
    - Messages are rendered on demand through a `Localizer`.
"""

from __future__ import annotations

from frontopts.diagnostic.errors import DiagnosticArgumentError
from frontopts.diagnostic.kinds import (
    DEFAULT_TEMPLATES,
    WARNING_KINDS,
    DiagnosticKind,
    Severity,
    classify,
)
from frontopts.diagnostic.localization import (
    DEFAULT_LOCALIZER,
    CatalogLocalizer,
    Localizer,
    load_catalog,
)
from frontopts.diagnostic.locations import (
    DUMMY_DOCUMENT,
    DUMMY_LOCATION,
    SourceDocument,
    SourceDocumentLike,
    SourceLocation,
    SourceLocationLike,
)
from frontopts.diagnostic.log import (
    DiagnosticLog,
    DiagnosticSink,
    DiagnosticStats,
    FrozenDiagnosticLog,
)
from frontopts.diagnostic.model import Diagnostic

__all__ = [
    "DEFAULT_LOCALIZER",
    "DEFAULT_TEMPLATES",
    "DUMMY_DOCUMENT",
    "DUMMY_LOCATION",
    "WARNING_KINDS",
    "CatalogLocalizer",
    "Diagnostic",
    "DiagnosticArgumentError",
    "DiagnosticKind",
    "DiagnosticLog",
    "DiagnosticSink",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "Localizer",
    "Severity",
    "SourceDocument",
    "SourceDocumentLike",
    "SourceLocation",
    "SourceLocationLike",
    "classify",
    "load_catalog",
]
