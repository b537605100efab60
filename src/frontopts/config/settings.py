# topmark:header:start
#
#   project      : FrontOpts
#   file         : settings.py
#   file_relpath : src/frontopts/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser settings and their TOML sources.

Settings tune portability decisions of the option parser (case sensitivity of
wildcard and extension matching, the fallback text encoding and the size limit
for loaded text). They come from, in order of precedence:

1. an explicit file passed to `load_settings` (``frontopts.toml`` layout or a
   ``pyproject.toml`` with a ``[tool.frontopts]`` table);
2. the first such file found by `discover_settings`;
3. the defaults of `ParserSettings`.
"""

from __future__ import annotations

import codecs
import locale
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit

from frontopts.config.io import (
    SettingsError,
    get_table_value,
    load_toml_dict,
    to_toml_document,
)
from frontopts.config.logging import get_logger
from frontopts.constants import (
    MAX_TEXT_LENGTH,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_TABLE,
    SETTINGS_FILE_NAME,
)

if TYPE_CHECKING:
    from frontopts.config.io import TomlTable
    from frontopts.config.logging import FrontoptsLogger

logger: FrontoptsLogger = get_logger(__name__)


def _preferred_encoding() -> str:
    return locale.getpreferredencoding(False)


@dataclass(frozen=True)
class ParserSettings:
    """Immutable knobs for the option parser.

    Attributes:
        extension_case_insensitive (bool): Compare a wildcard match's extension with the
            pattern's extension ignoring case.
        pattern_case_insensitive (bool): Match filename wildcards ignoring case.
        default_encoding (str): Encoding used for text without a byte-order mark when
            no code page was given.
        max_text_length (int): Largest file, in bytes, that may be loaded as text.
    """

    extension_case_insensitive: bool = True
    pattern_case_insensitive: bool = True
    default_encoding: str = field(default_factory=_preferred_encoding)
    max_text_length: int = MAX_TEXT_LENGTH

    @classmethod
    def from_table(cls, table: TomlTable, *, source: str = "<table>") -> ParserSettings:
        """Build settings from a TOML table, starting from the defaults.

        Unknown keys are logged and ignored.

        Args:
            table (TomlTable): Mapping of setting names to values.
            source (str): Where the table came from, for messages.

        Returns:
            ParserSettings: The resulting settings.

        Raises:
            SettingsError: If a known key has a value of the wrong type.
        """
        known: dict[str, type] = {
            "extension_case_insensitive": bool,
            "pattern_case_insensitive": bool,
            "default_encoding": str,
            "max_text_length": int,
        }
        values: dict[str, Any] = {}
        for key, value in table.items():
            expected: type | None = known.get(key)
            if expected is None:
                logger.warning("Ignoring unknown setting '%s' in %s", key, source)
                continue
            # bool is a subclass of int; reject it where an int is expected
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise SettingsError(
                    f"Setting '{key}' in {source} must be of type {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[key] = value
        if values.get("max_text_length", 1) < 1:
            raise SettingsError(f"Setting 'max_text_length' in {source} must be positive")
        if "default_encoding" in values:
            try:
                codecs.lookup(values["default_encoding"])
            except LookupError as e:
                raise SettingsError(
                    f"Setting 'default_encoding' in {source} names an unknown encoding: {e}"
                ) from e
        return replace(cls(), **values)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON/TOML-friendly mapping of the settings."""
        return asdict(self)

    def to_toml(self) -> str:
        """Render the settings as a standalone ``frontopts.toml`` document."""
        return tomlkit.dumps(to_toml_document(self.to_dict(), header="FrontOpts parser settings"))


def load_settings(path: Path) -> ParserSettings:
    """Load settings from ``path``.

    A file named ``pyproject.toml`` is read from its ``[tool.frontopts]`` table; any
    other file is read from its top-level table.

    Args:
        path (Path): The TOML file.

    Returns:
        ParserSettings: The loaded settings.

    Raises:
        SettingsError: If the file cannot be read or contains invalid values.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_TABLE)
    settings = ParserSettings.from_table(data, source=str(path))
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def find_settings_file(start_dir: Path) -> Path | None:
    """Find the settings file that applies to ``start_dir``.

    Walks from ``start_dir`` up to the filesystem root. In each directory a
    ``frontopts.toml`` wins over a ``pyproject.toml``; the latter only counts when it
    has a ``[tool.frontopts]`` table.

    Args:
        start_dir (Path): Directory to start from.

    Returns:
        Path | None: The settings file, or None if there is none.
    """
    for directory in (start_dir.resolve(), *start_dir.resolve().parents):
        candidate: Path = directory / SETTINGS_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            tool: TomlTable = get_table_value(load_toml_dict(pyproject), "tool")
            if PYPROJECT_TOOL_TABLE in tool:
                return pyproject
    return None


def discover_settings(start_dir: Path | None = None) -> ParserSettings:
    """Return the settings that apply to ``start_dir`` (default: the working directory).

    Args:
        start_dir (Path | None): Directory to start the search from.

    Returns:
        ParserSettings: Loaded settings, or the defaults when no file is found.
    """
    path: Path | None = find_settings_file(start_dir or Path.cwd())
    if path is None:
        logger.debug("No settings file found; using defaults")
        return ParserSettings()
    return load_settings(path)
