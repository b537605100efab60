# topmark:header:start
#
#   project      : FrontOpts
#   file         : errors.py
#   file_relpath : src/frontopts/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the FrontOpts CLI.

Usage:
    Raise these exceptions in the CLI to stop with a standardized message and exit
    code. Problems found in the parsed arguments are diagnostics, not exceptions.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from frontopts.cli.exit_codes import ExitCode


class FrontoptsError(click.ClickException):
    """Base class for all FrontOpts CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class FrontoptsUsageError(FrontoptsError):
    """Error for command-line invocation errors (invalid host flags)."""

    exit_code = ExitCode.USAGE_ERROR


class FrontoptsConfigError(FrontoptsError):
    """Error for configuration errors (missing/invalid/malformed settings or catalog)."""

    exit_code = ExitCode.CONFIG_ERROR
