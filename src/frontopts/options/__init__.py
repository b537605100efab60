# topmark:header:start
#
#   project      : FrontOpts
#   file         : __init__.py
#   file_relpath : src/frontopts/options/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line option parser engine.

Design:
    - `OptionParser` owns the generic parts of option handling: response files,
      file specifications, and the "no source files" rule.
    - The compiler-specific option grammar is an `OptionVocabulary` passed in by the
      caller; `StandardVocabulary` covers the fields of `OptionsRecord`.
    - All state of one parse lives in a `ParseSession`.
"""

from __future__ import annotations

from frontopts.options.loader import load_text
from frontopts.options.matchers import (
    argument_separator_index,
    match_boolean,
    match_flag,
    match_value,
    match_value_list,
)
from frontopts.options.model import OptionsRecord
from frontopts.options.parser import OptionParser, OptionVocabulary, parse_command_line
from frontopts.options.resolver import (
    FileSystem,
    LocalFileSystem,
    resolve_file_spec,
    split_file_spec,
)
from frontopts.options.session import ParseSession
from frontopts.options.tokenizer import tokenize_response_text
from frontopts.options.vocabulary import StandardVocabulary

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "OptionParser",
    "OptionVocabulary",
    "OptionsRecord",
    "ParseSession",
    "StandardVocabulary",
    "argument_separator_index",
    "load_text",
    "match_boolean",
    "match_flag",
    "match_value",
    "match_value_list",
    "parse_command_line",
    "resolve_file_spec",
    "split_file_spec",
    "tokenize_response_text",
]
