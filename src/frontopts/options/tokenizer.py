# topmark:header:start
#
#   project      : FrontOpts
#   file         : tokenizer.py
#   file_relpath : src/frontopts/options/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Response-file tokenizer.

A response file is plain text whose tokens are spliced into the argument list:

* tokens are separated by spaces, tabs, CR and LF;
* ``"..."`` encloses a token that may contain separators; a quote always ends the
  token before it, so ``a"b"c`` is three tokens;
* ``#`` outside quotes starts a comment that runs to the end of the line, and the
  partial token it interrupts is dropped;
* a line break always ends a quoted string.

This is deliberately not shell quoting: there are no escapes and quoted text never
merges with adjacent unquoted text.
"""

from __future__ import annotations

from typing import Final

from frontopts.config.logging import FrontoptsLogger, get_logger

logger: FrontoptsLogger = get_logger(__name__)

_BLANKS: Final[frozenset[str]] = frozenset(" \t")
_LINE_BREAKS: Final[frozenset[str]] = frozenset("\r\n")
_QUOTE: Final[str] = '"'
_COMMENT: Final[str] = "#"


def tokenize_response_text(text: str) -> list[str]:
    """Split the contents of a response file into argument tokens.

    Args:
        text (str): The response file's text.

    Returns:
        list[str]: The tokens, in order of appearance. Never contains empty strings.
    """
    tokens: list[str] = []
    in_quote: bool = False
    in_comment: bool = False
    start: int = 0  # first character of the pending token

    def flush(end: int) -> None:
        if start < end:
            tokens.append(text[start:end])

    for pos, ch in enumerate(text):
        if ch in _LINE_BREAKS:
            in_quote = False
            if not in_comment:
                flush(pos)
            in_comment = False
            start = pos + 1
        elif in_comment:
            continue
        elif ch in _BLANKS:
            if in_quote:
                continue
            flush(pos)
            start = pos + 1
        elif ch == _QUOTE:
            # Opening flushes unquoted text before the quote; closing flushes the quoted text.
            flush(pos)
            in_quote = not in_quote
            start = pos + 1
        elif ch == _COMMENT and not in_quote:
            in_comment = True

    if not in_comment:
        flush(len(text))

    logger.trace("Tokenized response text into %d token(s)", len(tokens))
    return tokens
