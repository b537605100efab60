# topmark:header:start
#
#   project      : FrontOpts
#   file         : parser.py
#   file_relpath : src/frontopts/options/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The option parser engine.

`OptionParser` walks an argument list and dispatches every token:

* empty tokens are skipped;
* ``@path`` splices in the tokens of a response file (see
  `frontopts.options.tokenizer`);
* tokens starting with ``/`` or ``-`` are handed to the `OptionVocabulary`; tokens it
  does not recognize yield InvalidCompilerOption;
* anything else is a file specification resolved against the `FileSystem`.

Problems in the arguments never stop the parse: they are reported to the diagnostic
sink and the next token is processed. A broken message template is a programming
error and raises.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from frontopts.config.logging import get_logger
from frontopts.config.settings import ParserSettings
from frontopts.constants import OPTION_PREFIXES, RESPONSE_FILE_PREFIX
from frontopts.diagnostic.kinds import DiagnosticKind
from frontopts.diagnostic.localization import DEFAULT_LOCALIZER
from frontopts.options.loader import load_text
from frontopts.options.model import OptionsRecord
from frontopts.options.resolver import LocalFileSystem, resolve_file_spec, split_file_spec
from frontopts.options.session import ParseSession
from frontopts.options.tokenizer import tokenize_response_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from frontopts.config.logging import FrontoptsLogger
    from frontopts.diagnostic.localization import Localizer
    from frontopts.diagnostic.log import DiagnosticSink
    from frontopts.options.resolver import FileSystem

logger: FrontoptsLogger = get_logger(__name__)

O = TypeVar("O", bound=OptionsRecord)


class OptionVocabulary(Protocol[O]):
    """The options understood by one particular compiler.

    The engine handles response files, file specifications and error reporting; a
    vocabulary only knows its own option grammar and the record it fills in.
    """

    def create_options(self) -> O:
        """Return a fresh, default-valued options record."""
        ...

    def parse_option(self, token: str, session: ParseSession[O]) -> bool:
        """Apply ``token`` (which starts with ``/`` or ``-``) to ``session.options``.

        Returns:
            bool: False if the token is not a known option.
        """
        ...

    def accepts_unmatched(self, directory: str, pattern: str, extension: str) -> bool:
        """Return True to silently accept a file specification that matched no files."""
        ...

    def help_text(self) -> str:
        """Return the command-line help text of this vocabulary."""
        ...


class OptionParser(Generic[O]):
    """Parse command-line arguments into an options record.

    Args:
        vocabulary (OptionVocabulary[O]): The compiler's option grammar.
        sink (DiagnosticSink): Receives every diagnostic.
        localizer (Localizer | None): Renders message details embedded in diagnostics.
        filesystem (FileSystem | None): Used to resolve file specifications.
        settings (ParserSettings | None): Portability and size settings.
    """

    def __init__(
        self,
        vocabulary: OptionVocabulary[O],
        *,
        sink: DiagnosticSink,
        localizer: Localizer | None = None,
        filesystem: FileSystem | None = None,
        settings: ParserSettings | None = None,
    ) -> None:
        self.vocabulary: OptionVocabulary[O] = vocabulary
        self.sink: DiagnosticSink = sink
        self.localizer: Localizer = localizer or DEFAULT_LOCALIZER
        self.filesystem: FileSystem = filesystem or LocalFileSystem()
        self.settings: ParserSettings = settings or ParserSettings()

    def parse(self, arguments: Iterable[str], *, require_source_files: bool = True) -> O:
        """Parse ``arguments`` with a fresh session.

        Args:
            arguments (Iterable[str]): The raw command-line tokens.
            require_source_files (bool): Report NoSourceFiles when the arguments name no
                input file (unless help or the version was requested).

        Returns:
            O: The populated options record.

        Raises:
            DiagnosticArgumentError: If the localizer's NoSuchFile template references
                an argument the message does not supply.
        """
        session: ParseSession[O] = ParseSession(
            options=self.vocabulary.create_options(),
            sink=self.sink,
            localizer=self.localizer,
        )
        self.parse_into(session, arguments, require_source_files=require_source_files)
        return session.options

    def parse_into(
        self,
        session: ParseSession[O],
        arguments: Iterable[str],
        *,
        require_source_files: bool,
    ) -> None:
        """Process ``arguments`` within an existing session.

        Response files are expanded through this method with ``require_source_files``
        set to False, sharing the session's set of included response files.

        Args:
            session (ParseSession[O]): The session to update.
            arguments (Iterable[str]): Tokens to process.
            require_source_files (bool): Whether this call needs at least one input file.
        """
        gave_not_found: bool = False
        for arg in arguments:
            if not arg:
                continue
            if arg.startswith(RESPONSE_FILE_PREFIX):
                self._parse_response_file(session, arg)
            elif arg.startswith(OPTION_PREFIXES):
                if not self.vocabulary.parse_option(arg, session):
                    logger.debug("Unrecognized option '%s'", arg)
                    session.report(DiagnosticKind.InvalidCompilerOption, arg)
            elif self._add_files(session, arg, require_source_files=require_source_files):
                gave_not_found = True

        options: O = session.options
        if (
            require_source_files
            and not options.file_names
            and not gave_not_found
            and not options.display_help
            and not options.display_version
        ):
            session.report(DiagnosticKind.NoSourceFiles)

    def _add_files(
        self, session: ParseSession[O], spec: str, *, require_source_files: bool
    ) -> bool:
        """Append the files matching ``spec``; return True if a not-found error was reported."""
        try:
            matches: list[str] = resolve_file_spec(spec, self.filesystem, self.settings)
        except (OSError, ValueError) as e:
            # ValueError covers malformed paths (embedded NUL) and wildcard patterns.
            logger.debug("Cannot resolve '%s': %s", spec, e)
            message: str = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            session.report(DiagnosticKind.InvalidFileOrPath, spec, message)
            return True
        if matches:
            session.options.file_names.extend(matches)
            return False
        if self.vocabulary.accepts_unmatched(*split_file_spec(spec)):
            return False
        if require_source_files:
            session.report(
                DiagnosticKind.SourceFileNotRead, spec, session.localized_no_such_file(spec)
            )
            return True
        return False

    def _parse_response_file(self, session: ParseSession[O], arg: str) -> None:
        path: str = arg[len(RESPONSE_FILE_PREFIX) :]
        if not path:
            session.report(DiagnosticKind.InvalidCompilerOption, arg)
            return
        try:
            canonical: str = os.path.abspath(path)
            exists: bool = os.path.isfile(canonical)
        except ValueError:
            canonical, exists = path, False
        if canonical in session.seen_response_files:
            logger.debug("Response file %s already included", canonical)
            session.report(DiagnosticKind.DuplicateResponseFile, canonical)
            return
        session.seen_response_files.add(canonical)
        if not exists:
            session.report(
                DiagnosticKind.BatchFileNotRead, path, session.localized_no_such_file(path)
            )
            return

        text: str = load_text(
            canonical,
            session.sink,
            code_page=session.options.code_page,
            settings=self.settings,
        )
        tokens: list[str] = tokenize_response_text(text)
        logger.debug("Expanding response file %s (%d token(s))", canonical, len(tokens))
        self.parse_into(session, tokens, require_source_files=False)


def parse_command_line(
    arguments: Iterable[str],
    vocabulary: OptionVocabulary[O],
    sink: DiagnosticSink,
    *,
    require_source_files: bool = True,
    localizer: Localizer | None = None,
    filesystem: FileSystem | None = None,
    settings: ParserSettings | None = None,
) -> O:
    """Parse ``arguments`` in one call; see `OptionParser.parse`."""
    parser: OptionParser[O] = OptionParser(
        vocabulary,
        sink=sink,
        localizer=localizer,
        filesystem=filesystem,
        settings=settings,
    )
    return parser.parse(arguments, require_source_files=require_source_files)
