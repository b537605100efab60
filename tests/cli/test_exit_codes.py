# topmark:header:start
#
#   project      : FrontOpts
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit policy and diagnostic line format of the CLI."""

from __future__ import annotations

from frontopts.cli.emitters import format_diagnostic
from frontopts.cli.exit_codes import ExitCode
from frontopts.cli.main import resolve_exit_code
from frontopts.diagnostic import (
    DEFAULT_LOCALIZER,
    Diagnostic,
    DiagnosticKind,
    DiagnosticLog,
    SourceDocument,
)

WARNING = Diagnostic.of(DiagnosticKind.BadReferenceCompareLeft, "System.String")
ERROR = Diagnostic.of(DiagnosticKind.NoSourceFiles)


def test_exit_code_values_follow_sysexits() -> None:
    assert [int(c) for c in ExitCode] == [0, 1, 64, 78]


def test_warnings_do_not_fail_by_default() -> None:
    log = DiagnosticLog()
    log.report(WARNING)

    assert resolve_exit_code(log, warnaserror=False) is ExitCode.SUCCESS


def test_warnings_fail_under_warnaserror() -> None:
    log = DiagnosticLog()
    log.report(WARNING)

    assert resolve_exit_code(log, warnaserror=True) is ExitCode.FAILURE


def test_errors_always_fail() -> None:
    log = DiagnosticLog()
    log.report(ERROR)

    assert resolve_exit_code(log, warnaserror=False) is ExitCode.FAILURE


def test_empty_log_succeeds() -> None:
    assert resolve_exit_code(DiagnosticLog(), warnaserror=True) is ExitCode.SUCCESS


def test_warning_line_format() -> None:
    assert format_diagnostic(WARNING, DEFAULT_LOCALIZER).startswith("warning CciAst0009: ")


def test_error_line_format() -> None:
    assert format_diagnostic(ERROR, DEFAULT_LOCALIZER) == (
        "error CciAst0040: No source files to compile."
    )


def test_line_format_with_location() -> None:
    doc = SourceDocument(name="a.cs", text="x\n  y")
    d = Diagnostic.of(DiagnosticKind.NoSuchFile, "y", location=doc.location(4, 1))

    assert format_diagnostic(d, DEFAULT_LOCALIZER) == (
        "a.cs(2,3): error CciAst0041: File 'y' does not exist."
    )
