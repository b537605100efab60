# topmark:header:start
#
#   project      : FrontOpts
#   file         : matchers.py
#   file_relpath : src/frontopts/options/matchers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Matchers for named option tokens.

Vocabularies use these helpers to recognize their options. Every matcher takes the
raw token (including its leading ``/`` or ``-``), a long name and a short name. The
name is looked up case-insensitively right after the prefix character; the long name
wins when both would match, and the short name is only tried when the long name
does not match.

Examples:
    ```python
    match_flag("/help", "help", "h")            # True
    match_boolean("-checked-", "checked", "c")  # False
    match_value("/out:App.exe", "out", "o")     # "App.exe"
    match_value_list("/r:a.dll;b.dll", "reference", "r")  # ["a.dll", "b.dll"]
    ```
"""

from __future__ import annotations

from frontopts.constants import FLAG_TERMINATORS, VALUE_LIST_SEPARATORS


def _match_name(token: str, name: str, short_name: str) -> int | None:
    """Return the index just past the matched name, or None if neither name matches."""
    lowered: str = token.lower()
    for candidate in (name, short_name):
        if candidate and lowered.startswith(candidate.lower(), 1):
            return 1 + len(candidate)
    return None


def match_flag(token: str, name: str, short_name: str) -> bool:
    """Return True if ``token`` is the flag ``name`` (or ``short_name``).

    The name must be followed by the end of the token or by one of space, ``/``, tab,
    LF or CR.

    Args:
        token (str): Raw option token.
        name (str): Long option name.
        short_name (str): Short option name.

    Returns:
        bool: Whether the token names this flag.
    """
    end: int | None = _match_name(token, name, short_name)
    if end is None:
        return False
    return end >= len(token) or token[end] in FLAG_TERMINATORS


def match_boolean(token: str, name: str, short_name: str) -> bool | None:
    """Match a flag that may carry a trailing ``+`` (on) or ``-`` (off).

    Args:
        token (str): Raw option token.
        name (str): Long option name.
        short_name (str): Short option name.

    Returns:
        bool | None: True for the bare flag or ``+``, False for ``-``, None if the token
            is not this option.
    """
    end: int | None = _match_name(token, name, short_name)
    if end is None:
        return None
    if end >= len(token):
        return True
    ch: str = token[end]
    if ch == "+":
        return True
    if ch == "-":
        return False
    if ch in FLAG_TERMINATORS:
        return True
    return None


def match_value(token: str, name: str, short_name: str) -> str | None:
    """Return the value of a ``name:value`` option.

    Args:
        token (str): Raw option token.
        name (str): Long option name.
        short_name (str): Short option name.

    Returns:
        str | None: Everything after the colon, in its original case; None if the token
            is not this option or has no colon right after the name.
    """
    end: int | None = _match_name(token, name, short_name)
    if end is None or end >= len(token) or token[end] != ":":
        return None
    return token[end + 1 :]


def argument_separator_index(value: str, start: int) -> int:
    """Return the index of the first list separator at or after ``start``, or -1."""
    found = (value.find(sep, start) for sep in VALUE_LIST_SEPARATORS)
    hits: list[int] = [i for i in found if i >= 0]
    return min(hits) if hits else -1


def split_value_list(value: str) -> list[str]:
    """Split ``value`` on ``,`` and ``;``, preserving order and dropping empty items."""
    items: list[str] = []
    pos: int = 0
    while pos < len(value):
        sep: int = argument_separator_index(value, pos)
        if sep < 0:
            items.append(value[pos:])
            break
        if sep > pos:
            items.append(value[pos:sep])
        pos = sep + 1
    return items


def match_value_list(token: str, name: str, short_name: str) -> list[str] | None:
    """Return the items of a ``name:a,b;c`` option.

    Args:
        token (str): Raw option token.
        name (str): Long option name.
        short_name (str): Short option name.

    Returns:
        list[str] | None: The items in order, or None if the token is not this option or
            its value is empty.
    """
    value: str | None = match_value(token, name, short_name)
    if not value:
        return None
    return split_value_list(value)
