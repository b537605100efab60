# topmark:header:start
#
#   project      : FrontOpts
#   file         : exit_codes.py
#   file_relpath : src/frontopts/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FrontOpts CLI.

FrontOpts aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FrontOpts CLI.

    Attributes:
        SUCCESS: Arguments parsed without error diagnostics.
        FAILURE: At least one error diagnostic was reported (or a warning, under
            ``--warnaserror``).
        USAGE_ERROR: Invalid host options. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Missing or malformed settings or message catalog. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
