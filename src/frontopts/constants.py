# topmark:header:start
#
#   project      : FrontOpts
#   file         : constants.py
#   file_relpath : src/frontopts/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FrontOpts Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

FRONTOPTS_VERSION: str = get_version("frontopts")

#: Identifier reported by every diagnostic of this subsystem.
REPORTER_ID: Final[str] = "CciAst"

#: Largest text (in bytes) `load_text` accepts.
MAX_TEXT_LENGTH: Final[int] = 2**31 - 1

#: Leading bytes of a PE/COFF executable image.
EXECUTABLE_SIGNATURE: Final[bytes] = b"MZ"

RESPONSE_FILE_PREFIX: Final[str] = "@"
OPTION_PREFIXES: Final[tuple[str, ...]] = ("/", "-")

#: Characters that may terminate a named flag.
FLAG_TERMINATORS: Final[frozenset[str]] = frozenset(" /\t\n\r")

#: Characters that separate the items of an option value list.
VALUE_LIST_SEPARATORS: Final[tuple[str, ...]] = (",", ";")

SETTINGS_FILE_NAME: Final[str] = "frontopts.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "frontopts"
