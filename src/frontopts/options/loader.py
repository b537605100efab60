# topmark:header:start
#
#   project      : FrontOpts
#   file         : loader.py
#   file_relpath : src/frontopts/options/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load source and response files as text.

`load_text` is the single place where the parser reads file contents. It reports every
failure as a diagnostic and returns an empty string; it never raises.
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import TYPE_CHECKING, Final

from frontopts.config.logging import get_logger
from frontopts.config.settings import ParserSettings
from frontopts.constants import EXECUTABLE_SIGNATURE
from frontopts.diagnostic.kinds import DiagnosticKind
from frontopts.diagnostic.model import Diagnostic

if TYPE_CHECKING:
    from frontopts.config.logging import FrontoptsLogger
    from frontopts.diagnostic.log import DiagnosticSink

logger: FrontoptsLogger = get_logger(__name__)

# Windows code pages whose Python codec name is not simply ``cp<number>``.
CODE_PAGE_CODECS: Final[dict[int, str]] = {
    1200: "utf-16-le",
    1201: "utf-16-be",
    12000: "utf-32-le",
    12001: "utf-32-be",
    20127: "ascii",
    28591: "latin-1",
    65000: "utf-7",
    65001: "utf-8",
}

# Longest marks first: the UTF-32 LE mark starts with the UTF-16 LE mark.
_BYTE_ORDER_MARKS: Final[tuple[tuple[bytes, str], ...]] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def codec_for_code_page(code_page: int) -> str:
    """Return the name of the Python codec for a Windows code page.

    Args:
        code_page (int): Windows code page number.

    Returns:
        str: The canonical codec name.

    Raises:
        LookupError: If Python has no codec for the code page.
    """
    name: str = CODE_PAGE_CODECS.get(code_page, f"cp{code_page}")
    return codecs.lookup(name).name


def detect_byte_order_mark(data: bytes) -> tuple[str, int] | None:
    """Return the encoding announced by a leading byte-order mark and the mark's length."""
    for mark, encoding in _BYTE_ORDER_MARKS:
        if data.startswith(mark):
            return encoding, len(mark)
    return None


def load_text(
    path: str | Path,
    sink: DiagnosticSink,
    *,
    code_page: int | None = None,
    settings: ParserSettings | None = None,
) -> str:
    """Read ``path`` as text, reporting problems to ``sink``.

    Steps, in order:

    1. files larger than ``settings.max_text_length`` yield SourceFileTooLarge;
    2. files starting with ``MZ`` yield IsBinaryFile (with the full path);
    3. the bytes are decoded with the codec of ``code_page`` (an unknown code page
       yields InvalidCodePage) or with ``settings.default_encoding``; a byte-order mark
       overrides either. Undecodable bytes become replacement characters;
    4. any other I/O failure yields SourceFileNotRead with the system's message.

    Args:
        path (str | Path): File to read.
        sink (DiagnosticSink): Receives the diagnostics.
        code_page (int | None): Code page requested on the command line, if any.
        settings (ParserSettings | None): Parser settings; defaults when None.

    Returns:
        str: The decoded text, or ``""`` if a diagnostic was reported.
    """
    settings = settings or ParserSettings()
    file_path = Path(path)
    try:
        size: int = file_path.stat().st_size
        if size > settings.max_text_length:
            sink.report(Diagnostic.of(DiagnosticKind.SourceFileTooLarge, str(path)))
            return ""
        data: bytes = file_path.read_bytes()
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        sink.report(
            Diagnostic.of(DiagnosticKind.SourceFileNotRead, str(path), e.strerror or str(e))
        )
        return ""

    if data.startswith(EXECUTABLE_SIGNATURE):
        sink.report(Diagnostic.of(DiagnosticKind.IsBinaryFile, str(file_path.absolute())))
        return ""

    encoding: str = settings.default_encoding
    if code_page is not None:
        try:
            encoding = codec_for_code_page(code_page)
        except LookupError:
            sink.report(Diagnostic.of(DiagnosticKind.InvalidCodePage, str(code_page)))
            return ""

    offset: int = 0
    bom: tuple[str, int] | None = detect_byte_order_mark(data)
    if bom is not None:
        encoding, offset = bom

    logger.trace("Decoding %s (%d bytes) as %s", path, len(data), encoding)
    return data[offset:].decode(encoding, errors="replace")
