# topmark:header:start
#
#   project      : FrontOpts
#   file         : io.py
#   file_relpath : src/frontopts/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for FrontOpts settings and message catalogs.

Design goals:
    * Minimal side effects: functions **do not** mutate settings objects.
    * Clear typing: helpers use a small alias (``TomlTable``) and a TypeGuard.
    * Reading uses ``toml``; writing uses ``tomlkit`` so generated documents keep
      a stable, commented layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit

from frontopts.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit import TOMLDocument

    from frontopts.config.logging import FrontoptsLogger

logger: FrontoptsLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "SettingsError",
    "TomlTable",
    "get_table_value",
    "is_toml_table",
    "load_toml_dict",
    "to_toml_document",
]


class SettingsError(ValueError):
    """Raised when a settings or message catalog file is missing or malformed."""


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        val (Any): Value to check.

    Returns:
        TypeGuard[TomlTable]: True if ``val`` is a ``dict``.
    """
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``frontopts.toml`` or
            ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        SettingsError: If the file cannot be read or is not valid TOML.
    """
    try:
        val: TomlTable = toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise SettingsError(f"Cannot read '{path}': {e}") from e
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise SettingsError(f"Invalid TOML in '{path}': {e}") from e
    logger.debug("Loaded TOML from %s (%d top-level key(s))", path, len(val))
    return val


def to_toml_document(table: TomlTable, *, header: str | None = None) -> TOMLDocument:
    """Build a ``tomlkit`` document from a plain table.

    ``None`` values have no TOML representation; they are written as comments so the
    key stays discoverable.

    Args:
        table (TomlTable): Flat mapping of keys to TOML-compatible values.
        header (str | None): Optional comment placed at the top of the document.

    Returns:
        TOMLDocument: The document, ready for ``tomlkit.dumps``.
    """
    doc: TOMLDocument = tomlkit.document()
    if header:
        doc.add(tomlkit.comment(header))
        doc.add(tomlkit.nl())
    for key, value in table.items():
        if value is None:
            doc.add(tomlkit.comment(f"{key} = <not set>"))
            continue
        doc.add(key, value)
    return doc
