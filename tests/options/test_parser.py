# topmark:header:start
#
#   project      : FrontOpts
#   file         : test_parser.py
#   file_relpath : tests/options/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the option parser engine: dispatch, response files and file resolution."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from frontopts.diagnostic import (
    CatalogLocalizer,
    DiagnosticArgumentError,
    DiagnosticKind,
    DiagnosticLog,
)
from frontopts.options import (
    OptionParser,
    OptionsRecord,
    StandardVocabulary,
    parse_command_line,
)
from tests.conftest import parse

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from frontopts.options import ParseSession


class KeepAliveVocabulary(StandardVocabulary):
    """Accepts the unmatched specification ``keep`` and records every option it sees."""

    def __init__(self) -> None:
        self.seen: list[str] = []

    def parse_option(self, token: str, session: ParseSession[OptionsRecord]) -> bool:
        self.seen.append(token)
        return super().parse_option(token, session)

    def accepts_unmatched(self, directory: str, pattern: str, extension: str) -> bool:
        return pattern == "keep"


def test_empty_arguments_yield_exactly_one_no_source_files(log: DiagnosticLog) -> None:
    options = parse([], log)

    assert log.kinds() == [DiagnosticKind.NoSourceFiles]
    assert options.file_names == []


def test_no_source_files_not_reported_when_not_required(log: DiagnosticLog) -> None:
    parse([], log, require_source_files=False)

    assert len(log) == 0


def test_help_or_version_suppresses_no_source_files(log: DiagnosticLog) -> None:
    assert parse(["/?"], log).display_help
    assert parse(["-version"], log).display_version
    assert len(log) == 0


def test_empty_tokens_are_skipped(log: DiagnosticLog) -> None:
    parse(["", "/help", ""], log)

    assert len(log) == 0


def test_unknown_option_is_reported_and_parsing_continues(
    isolation: Path, log: DiagnosticLog
) -> None:
    (isolation / "a.cs").write_text("x", encoding="utf-8")

    options = parse(["--flag", "/bogus", "a.cs"], log)

    assert log.kinds() == [DiagnosticKind.InvalidCompilerOption] * 2
    assert [d.arguments for d in log] == [("--flag",), ("/bogus",)]
    assert options.file_names == [os.path.join(os.getcwd(), "a.cs")]


def test_missing_response_file_is_reported_not_raised(isolation: Path, log: DiagnosticLog) -> None:
    parse(["--flag", "@missing.rsp"], log)

    assert DiagnosticKind.BatchFileNotRead in log.kinds()
    batch = log.of_kind(DiagnosticKind.BatchFileNotRead)[0]
    assert batch.arguments == ("missing.rsp", "File 'missing.rsp' does not exist.")


def test_missing_response_file_uses_localizer(isolation: Path, log: DiagnosticLog) -> None:
    localizer = CatalogLocalizer({DiagnosticKind.NoSuchFile: "Datei '{0}' fehlt."})
    parser = OptionParser(StandardVocabulary(), sink=log, localizer=localizer)

    parser.parse(["@gone.rsp"], require_source_files=False)

    assert log.items[0].arguments == ("gone.rsp", "Datei 'gone.rsp' fehlt.")


def test_lone_at_sign_is_an_invalid_option(log: DiagnosticLog) -> None:
    parse(["@"], log, require_source_files=False)

    assert log.kinds() == [DiagnosticKind.InvalidCompilerOption]
    assert log.items[0].arguments == ("@",)


def test_response_file_tokens_are_spliced_in(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "a.cs").write_text("x", encoding="utf-8")
    (isolation / "b.cs").write_text("x", encoding="utf-8")
    (isolation / "args.rsp").write_text(
        '# build options\n"/out:My App.exe" /checked+\n/r:x.dll;y.dll\nb.cs\n', encoding="utf-8"
    )

    options = parse(["a.cs", "@args.rsp", "/r:z.dll"], log)

    assert len(log) == 0
    assert options.output_file_name == "My App.exe"
    assert options.checked_arithmetic
    assert options.referenced_assemblies == ["x.dll", "y.dll", "z.dll"]
    assert options.file_names == [
        os.path.join(os.getcwd(), "a.cs"),
        os.path.join(os.getcwd(), "b.cs"),
    ]


def test_response_file_alone_does_not_satisfy_its_own_file_requirement(
    isolation: Path, log: DiagnosticLog
) -> None:
    (isolation / "opts.rsp").write_text("/checked\n", encoding="utf-8")

    options = parse(["@opts.rsp"], log)

    assert options.checked_arithmetic
    assert log.kinds() == [DiagnosticKind.NoSourceFiles]


def test_nested_response_file_does_not_report_missing_sources(
    isolation: Path, log: DiagnosticLog
) -> None:
    (isolation / "inner.rsp").write_text("nothing-here.cs\n", encoding="utf-8")
    (isolation / "a.cs").write_text("x", encoding="utf-8")

    parse(["a.cs", "@inner.rsp"], log)

    assert len(log) == 0


def test_duplicate_response_file_reported_once(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "a.cs").write_text("x", encoding="utf-8")
    (isolation / "refs.rsp").write_text("/r:lib.dll\n", encoding="utf-8")

    options = parse(["a.cs", "@refs.rsp", "@refs.rsp"], log)

    assert log.kinds() == [DiagnosticKind.DuplicateResponseFile]
    assert log.items[0].arguments == (os.path.join(os.getcwd(), "refs.rsp"),)
    assert options.referenced_assemblies == ["lib.dll"]


def test_duplicate_detection_uses_canonical_path(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "sub").mkdir()
    (isolation / "sub" / "r.rsp").write_text("/checked\n", encoding="utf-8")

    parse(["@sub/r.rsp", "@sub/../sub/r.rsp"], log, require_source_files=False)

    assert log.kinds() == [DiagnosticKind.DuplicateResponseFile]


def test_self_including_response_file_stops(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "loop.rsp").write_text("/r:a.dll @loop.rsp\n", encoding="utf-8")

    options = parse(["@loop.rsp"], log, require_source_files=False)

    assert log.kinds() == [DiagnosticKind.DuplicateResponseFile]
    assert options.referenced_assemblies == ["a.dll"]


def test_indirect_cycle_stops(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "one.rsp").write_text("@two.rsp\n", encoding="utf-8")
    (isolation / "two.rsp").write_text("/checked @one.rsp\n", encoding="utf-8")

    options = parse(["@one.rsp"], log, require_source_files=False)

    assert options.checked_arithmetic
    assert log.kinds() == [DiagnosticKind.DuplicateResponseFile]
    assert log.items[0].arguments == (os.path.join(os.getcwd(), "one.rsp"),)


def test_binary_response_file(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "tool.rsp").write_bytes(b"MZ\x90\x00")

    parse(["@tool.rsp"], log, require_source_files=False)

    assert log.kinds() == [DiagnosticKind.IsBinaryFile]


def test_each_parse_has_a_fresh_session(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "r.rsp").write_text("/checked\n", encoding="utf-8")
    parser = OptionParser(StandardVocabulary(), sink=log)

    first = parser.parse(["@r.rsp"], require_source_files=False)
    second = parser.parse(["@r.rsp"], require_source_files=False)

    assert first is not second
    assert first.checked_arithmetic and second.checked_arithmetic
    assert len(log) == 0


def test_unmatched_file_spec_reports_source_file_not_read(
    isolation: Path, log: DiagnosticLog
) -> None:
    options = parse(["missing.cs"], log)

    assert log.kinds() == [DiagnosticKind.SourceFileNotRead]
    assert log.items[0].arguments == ("missing.cs", "File 'missing.cs' does not exist.")
    assert options.file_names == []


def test_unmatched_wildcard_reports_once_per_spec(isolation: Path, log: DiagnosticLog) -> None:
    parse(["*.cs", "*.vb"], log)

    assert log.kinds() == [DiagnosticKind.SourceFileNotRead] * 2


def test_vocabulary_may_accept_unmatched_spec(isolation: Path, log: DiagnosticLog) -> None:
    vocabulary = KeepAliveVocabulary()

    parse_command_line(["keep", "/checked"], vocabulary, log)

    assert vocabulary.seen == ["/checked"]
    assert log.kinds() == [DiagnosticKind.NoSourceFiles]


def test_invalid_path_is_reported(isolation: Path, log: DiagnosticLog) -> None:
    parse(["bad\x00name.cs"], log)

    # Embedded NUL characters make the path unusable; never raised to the caller.
    assert log.kinds()[0] in (DiagnosticKind.InvalidFileOrPath, DiagnosticKind.SourceFileNotRead)
    assert DiagnosticKind.NoSourceFiles not in log.kinds()


def test_duplicate_file_names_are_kept(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "a.cs").write_text("x", encoding="utf-8")

    options = parse(["a.cs", "*.cs"], log)

    assert options.file_names == [os.path.join(os.getcwd(), "a.cs")] * 2


class UnreadableFileSystem:
    """Filesystem whose directories exist but cannot be listed."""

    def is_dir(self, directory: str) -> bool:
        return True

    def list_files(self, directory: str, pattern: str, *, case_insensitive: bool) -> Iterable[str]:
        raise PermissionError(13, "Permission denied")

    def full_path(self, path: str) -> str:
        return path


def test_listing_error_is_reported_as_invalid_file_or_path(log: DiagnosticLog) -> None:
    parser = OptionParser(StandardVocabulary(), sink=log, filesystem=UnreadableFileSystem())

    options = parser.parse(["x/*.cs"])

    assert log.kinds() == [DiagnosticKind.InvalidFileOrPath]
    assert log.items[0].arguments == ("x/*.cs", "Permission denied")
    assert options.file_names == []


def test_bracketed_file_name_is_found(isolation: Path, log: DiagnosticLog) -> None:
    (isolation / "a[1].cs").write_text("x", encoding="utf-8")

    options = parse(["a[1].cs"], log)

    assert len(log) == 0
    assert options.file_names == [os.path.join(os.getcwd(), "a[1].cs")]


def test_broken_no_such_file_template_raises_for_file_spec(
    isolation: Path, log: DiagnosticLog
) -> None:
    localizer = CatalogLocalizer({DiagnosticKind.NoSuchFile: "{0} {1}"})
    parser = OptionParser(StandardVocabulary(), sink=log, localizer=localizer)

    with pytest.raises(DiagnosticArgumentError):
        parser.parse(["missing.cs"])
    assert DiagnosticKind.InvalidFileOrPath not in log.kinds()


def test_broken_no_such_file_template_raises_for_response_file(
    isolation: Path, log: DiagnosticLog
) -> None:
    localizer = CatalogLocalizer({DiagnosticKind.NoSuchFile: "{0} {1}"})
    parser = OptionParser(StandardVocabulary(), sink=log, localizer=localizer)

    with pytest.raises(DiagnosticArgumentError):
        parser.parse(["@gone.rsp"], require_source_files=False)
