# topmark:header:start
#
#   project      : FrontOpts
#   file         : vocabulary.py
#   file_relpath : src/frontopts/options/vocabulary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The standard option vocabulary.

`StandardVocabulary` fills in the fields of the base `OptionsRecord`. Compilers with
more options wrap or subclass it and fall back to it for the common ones.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from frontopts.config.logging import get_logger
from frontopts.options.matchers import (
    match_boolean,
    match_flag,
    match_value,
    match_value_list,
)
from frontopts.options.model import OptionsRecord

if TYPE_CHECKING:
    from frontopts.config.logging import FrontoptsLogger
    from frontopts.options.session import ParseSession

logger: FrontoptsLogger = get_logger(__name__)

HELP_TEXT: str = """\
Options:
  /help, /h, /?             Display this usage message.
  /version                  Display the compiler version.
  /checked[+|-], /c[+|-]    Generate overflow checks for integer arithmetic.
  /codepage:<n>             Use code page <n> for source files without a byte-order mark.
  /out:<file>, /o:<file>    Name of the output file.
  /reference:<list>, /r:<list>
                            Reference the listed assemblies (separated by ',' or ';').
  @<file>                   Read more options and files from a response file.

Options may start with '-' instead of '/'. Other arguments name source files and may
contain the wildcards '*' and '?' in their last component.
"""


class StandardVocabulary:
    """Options shared by every compiler built on the engine."""

    def create_options(self) -> OptionsRecord:
        return OptionsRecord()

    def parse_option(self, token: str, session: ParseSession[OptionsRecord]) -> bool:
        """Apply one of the standard options to ``session.options``.

        Args:
            token (str): Raw option token, starting with ``/`` or ``-``.
            session (ParseSession[OptionsRecord]): The running parse.

        Returns:
            bool: False if ``token`` is not a standard option.
        """
        options: OptionsRecord = session.options
        if token[1:] == "?" or match_flag(token, "help", "h"):
            options.display_help = True
            return True
        if match_flag(token, "version", ""):
            options.display_version = True
            return True

        checked: bool | None = match_boolean(token, "checked", "c")
        if checked is not None:
            options.checked_arithmetic = checked
            return True

        code_page: str | None = match_value(token, "codepage", "")
        if code_page is not None:
            try:
                options.code_page = int(code_page)
            except ValueError:
                logger.debug("Code page '%s' is not a number", code_page)
                return False
            return True

        output: str | None = match_value(token, "out", "o")
        if output:
            options.output_file_name = output
            return True

        references: list[str] | None = match_value_list(token, "reference", "r")
        if references is not None:
            options.referenced_assemblies.extend(references)
            return True

        return False

    def accepts_unmatched(self, directory: str, pattern: str, extension: str) -> bool:
        return False

    def help_text(self) -> str:
        return HELP_TEXT
