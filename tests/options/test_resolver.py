# topmark:header:start
#
#   project      : FrontOpts
#   file         : test_resolver.py
#   file_relpath : tests/options/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for file specification splitting and wildcard resolution."""

from __future__ import annotations

import os
import warnings
from typing import TYPE_CHECKING

from frontopts.config import ParserSettings
from frontopts.options import LocalFileSystem, resolve_file_spec, split_file_spec
from tests.conftest import parametrize

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class ListingFileSystem:
    """In-memory filesystem that lists files in insertion order."""

    def __init__(self, files: dict[str, list[str]]) -> None:
        self.files: dict[str, list[str]] = files

    def is_dir(self, directory: str) -> bool:
        return directory in self.files

    def list_files(self, directory: str, pattern: str, *, case_insensitive: bool) -> Iterable[str]:
        # The pattern is ignored: only the extension filter is under test here.
        return [f"{directory}/{name}" for name in self.files[directory]]

    def full_path(self, path: str) -> str:
        return "/root/" + path


@parametrize(
    "spec, expected",
    [
        ("a.cs", (".", "a.cs", ".cs")),
        ("*.cs", (".", "*.cs", ".cs")),
        ("src/*.cs", ("src", "*.cs", ".cs")),
        ("src\\lib\\*.cs", ("src/lib", "*.cs", ".cs")),
        ("Makefile", (".", "Makefile", "")),
        ("dir/", ("dir", "", "")),
        ("/abs/x.txt", ("/abs", "x.txt", ".txt")),
        ("archive.tar.gz", (".", "archive.tar.gz", ".gz")),
    ],
)
def test_split_file_spec(spec: str, expected: tuple[str, str, str]) -> None:
    assert split_file_spec(spec) == expected


def test_wildcard_matches_in_name_order_as_absolute_paths(isolation: Path) -> None:
    for name in ("b.txt", "a.txt", "c.md"):
        (isolation / name).write_text("x", encoding="utf-8")

    assert resolve_file_spec("*.txt") == [
        os.path.join(os.getcwd(), "a.txt"),
        os.path.join(os.getcwd(), "b.txt"),
    ]


def test_extension_filter_excludes_longer_extensions(isolation: Path) -> None:
    (isolation / "a.cs").write_text("x", encoding="utf-8")
    (isolation / "b.csx").write_text("x", encoding="utf-8")

    assert resolve_file_spec("*.cs") == [os.path.join(os.getcwd(), "a.cs")]


def test_wildcard_in_extension_is_compared_literally(isolation: Path) -> None:
    (isolation / "a.cs").write_text("x", encoding="utf-8")
    (isolation / "b.csx").write_text("x", encoding="utf-8")

    assert resolve_file_spec("*.cs*") == []
    assert resolve_file_spec("*.*") == []


def test_brackets_match_literally(isolation: Path) -> None:
    (isolation / "a[1].cs").write_text("x", encoding="utf-8")
    (isolation / "a1.cs").write_text("x", encoding="utf-8")

    assert resolve_file_spec("a[1].cs") == [os.path.join(os.getcwd(), "a[1].cs")]
    assert resolve_file_spec("a[12].cs") == []
    assert resolve_file_spec("a?1?.cs") == [os.path.join(os.getcwd(), "a[1].cs")]


def test_pattern_matching_emits_no_deprecation_warning(isolation: Path) -> None:
    (isolation / "a.cs").write_text("x", encoding="utf-8")

    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        assert resolve_file_spec("*.cs") == [os.path.join(os.getcwd(), "a.cs")]


def test_subdirectory_and_backslash_separator(isolation: Path) -> None:
    (isolation / "src").mkdir()
    (isolation / "src" / "m.cs").write_text("x", encoding="utf-8")

    expected: list[str] = [os.path.join(os.getcwd(), "src", "m.cs")]
    assert resolve_file_spec("src/*.cs") == expected
    assert resolve_file_spec("src\\m.cs") == expected


def test_missing_directory_matches_nothing(isolation: Path) -> None:
    assert resolve_file_spec("nowhere/*.cs") == []


def test_directories_are_not_matched(isolation: Path) -> None:
    (isolation / "pkg.cs").mkdir()

    assert resolve_file_spec("*.cs") == []


def test_case_insensitive_by_default(isolation: Path) -> None:
    (isolation / "Main.CS").write_text("x", encoding="utf-8")

    assert resolve_file_spec("main.cs") == [os.path.join(os.getcwd(), "Main.CS")]


def test_case_sensitive_settings(isolation: Path) -> None:
    (isolation / "Main.CS").write_text("x", encoding="utf-8")
    strict = ParserSettings(extension_case_insensitive=False, pattern_case_insensitive=False)

    assert resolve_file_spec("main.cs", settings=strict) == []
    assert resolve_file_spec("*.cs", settings=strict) == []
    assert resolve_file_spec("*.CS", settings=strict) == [os.path.join(os.getcwd(), "Main.CS")]


def test_leading_hash_is_literal(isolation: Path) -> None:
    (isolation / "#odd.cs").write_text("x", encoding="utf-8")

    assert resolve_file_spec("#odd.cs") == [os.path.join(os.getcwd(), "#odd.cs")]


def test_enumeration_order_of_the_filesystem_is_kept() -> None:
    fs = ListingFileSystem({"src": ["z.cs", "readme", "a.cs", "m.CS"]})

    assert resolve_file_spec("src/*.cs", fs) == [
        "/root/src/z.cs",
        "/root/src/a.cs",
        "/root/src/m.CS",
    ]


def test_pattern_without_extension_matches_only_extensionless_files() -> None:
    fs = ListingFileSystem({".": ["README", "readme.txt"]})

    assert resolve_file_spec("*", fs) == ["/root/./README"]


def test_local_filesystem_full_path_normalizes(isolation: Path) -> None:
    assert LocalFileSystem().full_path("a/../b.cs") == os.path.join(os.getcwd(), "b.cs")
