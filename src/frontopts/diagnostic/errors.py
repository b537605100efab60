# topmark:header:start
#
#   project      : FrontOpts
#   file         : errors.py
#   file_relpath : src/frontopts/diagnostic/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the diagnostic layer.

Recoverable problems are *reported* as diagnostics; the exceptions here signal
programming errors in the code that builds or renders them.
"""

from __future__ import annotations


class DiagnosticArgumentError(ValueError):
    """A diagnostic's arguments do not fit its message template."""
