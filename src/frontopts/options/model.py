# topmark:header:start
#
#   project      : FrontOpts
#   file         : model.py
#   file_relpath : src/frontopts/options/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The options record populated by the option parser."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class OptionsRecord:
    """Mutable accumulator for one parse.

    Only the option parser (and the vocabulary it delegates to) writes to a record;
    downstream stages read it once parsing has finished. Vocabularies with more options
    subclass it.

    Attributes:
        checked_arithmetic (bool): Emit overflow checks for integer arithmetic.
        code_page (int | None): Code page used to decode source files without a
            byte-order mark.
        display_help (bool): The user asked for command-line help.
        display_version (bool): The user asked for the compiler version.
        file_names (list[str]): Absolute paths of the input files, in command-line order.
            Duplicates are kept.
        output_file_name (str | None): Explicit output file.
        referenced_assemblies (list[str]): Referenced libraries, in command-line order.
    """

    checked_arithmetic: bool = False
    code_page: int | None = None
    display_help: bool = False
    display_version: bool = False
    file_names: list[str] = field(default_factory=lambda: [])
    output_file_name: str | None = None
    referenced_assemblies: list[str] = field(default_factory=lambda: [])

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping of all fields, subclass fields included."""
        return asdict(self)
