# topmark:header:start
#
#   project      : FrontOpts
#   file         : localization.py
#   file_relpath : src/frontopts/diagnostic/localization.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message templates and their substitution.

A localizer maps a diagnostic kind to a message template in the active culture.
Templates use ``{0}``, ``{1}``, ... placeholders that are replaced by the diagnostic's
arguments; any other text, including other braces, is copied verbatim.

Catalog files are TOML documents with a ``[messages]`` table keyed by kind name:

```toml
[messages]
NoSourceFiles = "Aucun fichier source à compiler."
InvalidCompilerOption = "Option non valide : '{0}'."
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from frontopts.config.io import SettingsError, get_table_value, load_toml_dict
from frontopts.config.logging import get_logger
from frontopts.diagnostic.errors import DiagnosticArgumentError
from frontopts.diagnostic.kinds import PLACEHOLDER_RE, DiagnosticKind, placeholder_count

if TYPE_CHECKING:
    import re
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from frontopts.config.io import TomlTable
    from frontopts.config.logging import FrontoptsLogger

logger: FrontoptsLogger = get_logger(__name__)


class Localizer(Protocol):
    """Resource lookup service used to render diagnostics."""

    def template_for(self, kind: DiagnosticKind) -> str:
        """Return the message template for ``kind`` in the active culture."""
        ...


class CatalogLocalizer:
    """Localizer backed by the built-in English templates plus optional overrides.

    Args:
        overrides (Mapping[DiagnosticKind, str] | None): Templates replacing the built-in
            ones for some kinds.
    """

    def __init__(self, overrides: Mapping[DiagnosticKind, str] | None = None) -> None:
        self._overrides: dict[DiagnosticKind, str] = dict(overrides or {})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(overrides={len(self._overrides)})"

    def template_for(self, kind: DiagnosticKind) -> str:
        """Return the override for ``kind`` if any, else its built-in template."""
        return self._overrides.get(kind, kind.template)


#: Localizer used when the caller does not supply one.
DEFAULT_LOCALIZER: CatalogLocalizer = CatalogLocalizer()


def substitute(template: str, arguments: Sequence[str]) -> str:
    """Replace each ``{i}`` in ``template`` with ``arguments[i]``.

    Args:
        template (str): The message template.
        arguments (Sequence[str]): Positional substitution arguments.

    Returns:
        str: The rendered message.

    Raises:
        DiagnosticArgumentError: If the template references an index with no argument.
    """

    def _arg(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(arguments):
            raise DiagnosticArgumentError(
                f"Template {template!r} references {{{index}}} "
                f"but only {len(arguments)} argument(s) were supplied"
            )
        return arguments[index]

    return PLACEHOLDER_RE.sub(_arg, template)


def catalog_from_table(table: TomlTable, *, source: str = "<table>") -> CatalogLocalizer:
    """Build a `CatalogLocalizer` from a ``{kind name: template}`` table.

    Args:
        table (TomlTable): Mapping of kind names to templates.
        source (str): Where the table came from, for messages.

    Returns:
        CatalogLocalizer: The localizer.

    Raises:
        SettingsError: If a key is not a kind name, a value is not a string, or a
            template references more arguments than its kind supplies.
    """
    overrides: dict[DiagnosticKind, str] = {}
    for name, template in table.items():
        kind: DiagnosticKind | None = DiagnosticKind.__members__.get(name)
        if kind is None:
            raise SettingsError(f"Unknown diagnostic kind '{name}' in {source}")
        if not isinstance(template, str):
            raise SettingsError(f"Message for '{name}' in {source} must be a string")
        if placeholder_count(template) > kind.placeholder_count:
            raise SettingsError(
                f"Message for '{name}' in {source} uses more than "
                f"{kind.placeholder_count} argument(s): {template!r}"
            )
        overrides[kind] = template
    logger.debug("Loaded %d message override(s) from %s", len(overrides), source)
    return CatalogLocalizer(overrides)


def load_catalog(path: Path) -> CatalogLocalizer:
    """Load message overrides from the ``[messages]`` table of a TOML file.

    Args:
        path (Path): The catalog file.

    Returns:
        CatalogLocalizer: A localizer with the file's templates.

    Raises:
        SettingsError: If the file cannot be read or has invalid entries.
    """
    data: TomlTable = load_toml_dict(path)
    return catalog_from_table(get_table_value(data, "messages"), source=str(path))
