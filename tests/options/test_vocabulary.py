# topmark:header:start
#
#   project      : FrontOpts
#   file         : test_vocabulary.py
#   file_relpath : tests/options/test_vocabulary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the standard option vocabulary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from frontopts.diagnostic import DiagnosticKind
from tests.conftest import parametrize, parse

if TYPE_CHECKING:
    from frontopts.diagnostic import DiagnosticLog


@parametrize(
    "token, field, value",
    [
        ("/?", "display_help", True),
        ("/help", "display_help", True),
        ("-h", "display_help", True),
        ("/version", "display_version", True),
        ("/checked", "checked_arithmetic", True),
        ("/checked+", "checked_arithmetic", True),
        ("-c+", "checked_arithmetic", True),
        ("/codepage:1252", "code_page", 1252),
        ("/out:App.exe", "output_file_name", "App.exe"),
        ("-o:lib.dll", "output_file_name", "lib.dll"),
        ("/reference:a.dll;b.dll", "referenced_assemblies", ["a.dll", "b.dll"]),
        ("/r:a.dll,b.dll", "referenced_assemblies", ["a.dll", "b.dll"]),
    ],
)
def test_standard_options(token: str, field: str, value: Any, log: DiagnosticLog) -> None:
    options = parse([token], log, require_source_files=False)

    assert getattr(options, field) == value
    assert len(log) == 0


def test_last_checked_wins(log: DiagnosticLog) -> None:
    options = parse(["/checked+", "/checked-"], log, require_source_files=False)

    assert options.checked_arithmetic is False


def test_references_accumulate(log: DiagnosticLog) -> None:
    options = parse(["/r:a.dll", "/reference:b.dll;c.dll"], log, require_source_files=False)

    assert options.referenced_assemblies == ["a.dll", "b.dll", "c.dll"]


@parametrize(
    "token",
    ["/codepage:utf8", "/codepage", "/out:", "/r:", "/checkedx", "/helpme", "/verbose"],
)
def test_malformed_options_are_invalid(token: str, log: DiagnosticLog) -> None:
    parse([token], log, require_source_files=False)

    assert log.kinds() == [DiagnosticKind.InvalidCompilerOption]
    assert log.items[0].arguments == (token,)


def test_defaults(log: DiagnosticLog) -> None:
    options = parse([], log, require_source_files=False)

    assert options.to_dict() == {
        "checked_arithmetic": False,
        "code_page": None,
        "display_help": False,
        "display_version": False,
        "file_names": [],
        "output_file_name": None,
        "referenced_assemblies": [],
    }
