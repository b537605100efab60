# topmark:header:start
#
#   project      : FrontOpts
#   file         : options.py
#   file_relpath : src/frontopts/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host options of the FrontOpts CLI and helpers to resolve them.

Host options are long-only. Compiler options use ``/`` or a single ``-``, so a token
such as ``-checked+`` or ``-version`` is never taken for a host option and reaches the
option parser unchanged.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Any, Callable, ParamSpec, TypeVar

import click

from frontopts.cli.errors import FrontoptsUsageError

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output formats of the ``frontopts`` command."""

    TEXT = "text"
    JSON = "json"


#: Click context settings: pass compiler tokens through untouched.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["--help"],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity.

    Args:
        verbose_count (int): Number of times ``--verbose`` was passed.
        quiet_count (int): Number of times ``--quiet`` was passed.

    Returns:
        int: ``0`` for the default output, positive for more detail, negative for less
            (``-1`` hides the options summary, ``-2`` also hides warnings).

    Raises:
        FrontoptsUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise FrontoptsUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return min(verbose_count, 2)
    return -min(quiet_count, 2)


def resolve_color_mode(
    *,
    no_color: bool,
    output_format: OutputFormat,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Disables color for JSON output and with ``--no-color``; honors the ``FORCE_COLOR``
    and ``NO_COLOR`` environment variables; otherwise enables color on a TTY.
    """
    if no_color or output_format is OutputFormat.JSON:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counted ``--verbose`` and ``--quiet`` options to a command."""
    f = click.option(
        "--verbose",
        count=True,
        help="Show more detail. Specify twice for even more.",
    )(f)
    f = click.option(
        "--quiet",
        count=True,
        help="Show less output. Specify twice to hide warnings as well.",
    )(f)
    return f
