# topmark:header:start
#
#   project      : FrontOpts
#   file         : resolver.py
#   file_relpath : src/frontopts/options/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve file specifications given on the command line.

A file specification is a path whose last component may contain wildcards, for
example ``src/*.cs`` or ``..\\lib\\util?.cs``. Both ``/`` and ``\\`` separate path
components. Matching is delegated to a `FileSystem`, so hosts and tests can supply
their own view of the disk; `LocalFileSystem` is the default implementation.

The wildcards are ``*`` and ``?``, applied to file names only; every other character,
brackets included, matches itself. Matching is done with `pathspec`'s wildmatch
patterns after escaping the characters that are special to them.
"""

from __future__ import annotations

import os
import posixpath
import re
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from pathspec import PathSpec

from frontopts.config.logging import get_logger
from frontopts.config.settings import ParserSettings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from frontopts.config.logging import FrontoptsLogger

logger: FrontoptsLogger = get_logger(__name__)

# Wildmatch metacharacters that are literal in a file specification.
_LITERAL_RE: re.Pattern[str] = re.compile(r"([\[\]\\])")


class FileSystem(Protocol):
    """The filesystem primitives the option parser depends on."""

    def is_dir(self, directory: str) -> bool:
        """Return True if ``directory`` exists and is a directory."""
        ...

    def list_files(self, directory: str, pattern: str, *, case_insensitive: bool) -> Iterable[str]:
        """Yield the paths of the files in ``directory`` whose name matches ``pattern``."""
        ...

    def full_path(self, path: str) -> str:
        """Return the absolute, normalized form of ``path``."""
        ...


def _compile_name_pattern(pattern: str, *, case_insensitive: bool) -> PathSpec:
    if case_insensitive:
        pattern = pattern.lower()
    pattern = _LITERAL_RE.sub(r"\\\1", pattern)
    # A leading '#' or '!' means comment or negation to wildmatch; match it literally.
    if pattern[:1] in ("#", "!"):
        pattern = "\\" + pattern
    return PathSpec.from_lines("gitwildmatch", [pattern])


class LocalFileSystem:
    """`FileSystem` backed by the local disk.

    Files are listed in name order so results do not depend on the order in which the
    operating system happens to return directory entries.
    """

    def is_dir(self, directory: str) -> bool:
        return Path(directory).is_dir()

    def list_files(self, directory: str, pattern: str, *, case_insensitive: bool) -> Iterable[str]:
        spec: PathSpec = _compile_name_pattern(pattern, case_insensitive=case_insensitive)
        for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
            if not entry.is_file():
                continue
            name: str = entry.name.lower() if case_insensitive else entry.name
            if spec.match_file(name):
                yield str(entry)

    def full_path(self, path: str) -> str:
        return os.path.abspath(path)


def file_extension(name: str) -> str:
    """Return the extension of ``name`` including its dot, or ``""`` if it has none."""
    ext: str = os.path.splitext(name)[1]
    return "" if ext == "." else ext


def split_file_spec(spec: str) -> tuple[str, str, str]:
    """Split a file specification into directory, file-name pattern and extension.

    Args:
        spec (str): The file specification; ``\\`` and ``/`` both separate components.

    Returns:
        tuple[str, str, str]: The directory (``"."`` when the specification has no
            separator), the file-name pattern and the pattern's extension (``""`` when
            it has none).

    Examples:
        ```python
        split_file_spec("src\\*.cs")  # ("src", "*.cs", ".cs")
        split_file_spec("Makefile")   # (".", "Makefile", "")
        ```
    """
    normalized: str = spec.replace("\\", "/")
    if "/" not in normalized:
        return ".", normalized, file_extension(normalized)
    directory, pattern = posixpath.split(normalized)
    return directory or "/", pattern, file_extension(pattern)


def resolve_file_spec(
    spec: str,
    filesystem: FileSystem | None = None,
    settings: ParserSettings | None = None,
) -> list[str]:
    """Return the absolute paths of all files matching ``spec``.

    A match is kept only when its extension equals the pattern's extension, so
    ``*.cs`` does not pick up ``notes.csx`` and a pattern without an extension only
    matches files without one. The comparison is literal even when the pattern's
    extension contains wildcards, so ``*.*`` matches nothing.

    Args:
        spec (str): The file specification.
        filesystem (FileSystem | None): Filesystem to search; the local disk when None.
        settings (ParserSettings | None): Controls case sensitivity; defaults when None.

    Returns:
        list[str]: Absolute paths in enumeration order; empty when nothing matches or
            the directory does not exist.

    Raises:
        OSError: If the directory cannot be listed.
        ValueError: If the specification is not a valid path.
    """
    filesystem = filesystem or LocalFileSystem()
    settings = settings or ParserSettings()
    directory, pattern, extension = split_file_spec(spec)
    if not pattern or not filesystem.is_dir(directory):
        logger.debug("No directory to search for '%s'", spec)
        return []

    wanted: str = extension.lower() if settings.extension_case_insensitive else extension
    matches: list[str] = []
    for path in filesystem.list_files(
        directory, pattern, case_insensitive=settings.pattern_case_insensitive
    ):
        ext: str = file_extension(path)
        if settings.extension_case_insensitive:
            ext = ext.lower()
        if ext != wanted:
            continue
        matches.append(filesystem.full_path(path))
    logger.trace("'%s' matched %d file(s)", spec, len(matches))
    return matches
