# topmark:header:start
#
#   project      : FrontOpts
#   file         : emitters.py
#   file_relpath : src/frontopts/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderers for the output of the ``frontopts`` command.

Text output is for humans and may be colored; JSON output is a single document meant
for tools and never contains ANSI codes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from frontopts.constants import FRONTOPTS_VERSION

if TYPE_CHECKING:
    from frontopts.cli.console import ConsoleLike
    from frontopts.diagnostic.localization import Localizer
    from frontopts.diagnostic.log import DiagnosticLog
    from frontopts.diagnostic.model import Diagnostic
    from frontopts.options.model import OptionsRecord


def format_diagnostic(diagnostic: Diagnostic, localizer: Localizer, *, color: bool = False) -> str:
    """Return the one-line text form of a diagnostic.

    The form is ``<severity> <reporter><code>: <message>``, with the code padded to
    four digits, preceded by ``<document>(<line>,<column>): `` when the diagnostic
    points into a named document.
    """
    severity: str = diagnostic.severity.value
    if color:
        severity = diagnostic.severity.color(severity)
    line: str = (
        f"{severity} {diagnostic.reporter}{diagnostic.code:04d}: {diagnostic.render(localizer)}"
    )
    location: Any = diagnostic.location
    name: str = getattr(location.document, "name", "")
    if name and hasattr(location, "line"):
        line = f"{name}({location.line},{location.column}): {line}"
    return line


def emit_diagnostics_text(
    console: ConsoleLike,
    log: DiagnosticLog,
    localizer: Localizer,
    *,
    verbosity_level: int,
    color: bool,
) -> None:
    """Write each diagnostic on its own line to the error stream."""
    for diagnostic in log:
        if diagnostic.is_warning:
            if verbosity_level <= -2:
                continue
            console.warn(format_diagnostic(diagnostic, localizer, color=color))
        else:
            console.error(format_diagnostic(diagnostic, localizer, color=color))


def emit_options_text(
    console: ConsoleLike, options: OptionsRecord, *, verbosity_level: int
) -> None:
    """Write a summary of the resolved options."""
    if verbosity_level < 0:
        return
    console.print(console.styled("Resolved options:", bold=True))
    for key, value in options.to_dict().items():
        if isinstance(value, list):
            if not value and verbosity_level == 0:
                continue
            console.print(f"  {key}:")
            for item in value:
                console.print(f"    {item}")
        elif value not in (None, False) or verbosity_level > 0:
            console.print(f"  {key}: {value}")


def emit_summary_text(console: ConsoleLike, log: DiagnosticLog) -> None:
    """Write the diagnostic counts."""
    stats = log.stats()
    console.print(f"{stats.n_error} error(s), {stats.n_warning} warning(s)")


def emit_version_text(console: ConsoleLike) -> None:
    console.print(f"FrontOpts {FRONTOPTS_VERSION}")


def build_json_payload(
    options: OptionsRecord,
    log: DiagnosticLog,
    localizer: Localizer,
    *,
    help_text: str | None,
) -> dict[str, Any]:
    """Return the JSON document describing one run."""
    stats = log.stats()
    payload: dict[str, Any] = {
        "options": options.to_dict(),
        "diagnostics": [d.to_dict(localizer) for d in log],
        "summary": {"errors": stats.n_error, "warnings": stats.n_warning},
    }
    if options.display_version:
        payload["version"] = FRONTOPTS_VERSION
    if help_text is not None:
        payload["help"] = help_text
    return payload


def emit_json(console: ConsoleLike, payload: dict[str, Any]) -> None:
    console.print(json.dumps(payload, indent=2))
