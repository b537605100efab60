# topmark:header:start
#
#   project      : FrontOpts
#   file         : main.py
#   file_relpath : src/frontopts/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``frontopts`` command.

``frontopts [HOST OPTIONS] [--] ARGUMENTS...`` parses ``ARGUMENTS`` the way a compiler
built on the engine would, then prints the diagnostics and the resolved options.

Exit status:
    0 when no error diagnostic was reported, 1 otherwise (warnings count as errors
    under ``--warnaserror``), 64 for invalid host options and 78 for a broken settings
    file or message catalog.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from frontopts.cli.console import ClickConsole
from frontopts.cli.emitters import (
    build_json_payload,
    emit_diagnostics_text,
    emit_json,
    emit_options_text,
    emit_summary_text,
    emit_version_text,
)
from frontopts.cli.errors import FrontoptsConfigError
from frontopts.cli.exit_codes import ExitCode
from frontopts.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from frontopts.config.io import SettingsError
from frontopts.config.logging import get_logger, resolve_env_log_level, setup_logging
from frontopts.config.settings import ParserSettings, discover_settings, load_settings
from frontopts.diagnostic.errors import DiagnosticArgumentError
from frontopts.diagnostic.localization import DEFAULT_LOCALIZER, load_catalog
from frontopts.diagnostic.log import DiagnosticLog
from frontopts.options.parser import OptionParser
from frontopts.options.vocabulary import StandardVocabulary

if TYPE_CHECKING:
    from frontopts.cli.console import ConsoleLike
    from frontopts.config.logging import FrontoptsLogger
    from frontopts.diagnostic.localization import Localizer
    from frontopts.options.model import OptionsRecord

logger: FrontoptsLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    output_format: OutputFormat,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context."""
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = resolve_color_mode(no_color=no_color, output_format=output_format)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def resolve_settings(config_path: Path | None) -> ParserSettings:
    """Load settings from ``config_path``, or discover them from the working directory.

    Raises:
        FrontoptsConfigError: If the settings file is unreadable or invalid.
    """
    try:
        if config_path is not None:
            return load_settings(config_path)
        return discover_settings()
    except SettingsError as e:
        raise FrontoptsConfigError(str(e)) from e


def resolve_localizer(messages_path: Path | None) -> Localizer:
    """Load the message catalog at ``messages_path``, or return the built-in one.

    Raises:
        FrontoptsConfigError: If the catalog is unreadable or invalid.
    """
    if messages_path is None:
        return DEFAULT_LOCALIZER
    try:
        return load_catalog(messages_path)
    except SettingsError as e:
        raise FrontoptsConfigError(str(e)) from e


def resolve_exit_code(log: DiagnosticLog, *, warnaserror: bool) -> ExitCode:
    """Return FAILURE if the log has errors, or warnings when they are treated as errors."""
    if log.has_error() or (warnaserror and log.has_warning()):
        return ExitCode.FAILURE
    return ExitCode.SUCCESS


@click.command(
    name="frontopts",
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Parse compiler ARGUMENTS (options, @response files and file specifications) "
        "and report the resulting diagnostics and options. Use '/help' for the "
        "compiler options."
    ),
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (frontopts.toml or pyproject.toml). Discovered when omitted.",
)
@click.option(
    "--messages",
    "messages_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file whose [messages] table overrides diagnostic messages.",
)
@click.option(
    "--warnaserror",
    is_flag=True,
    default=False,
    help="Fail when warnings are reported.",
)
@click.option(
    "--show-settings",
    is_flag=True,
    default=False,
    help="Print the effective parser settings as TOML and exit.",
)
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    output_format: str,
    config_path: Path | None,
    messages_path: Path | None,
    warnaserror: bool,
    show_settings: bool,
    arguments: tuple[str, ...],
) -> None:
    """Entry point for the FrontOpts CLI."""
    fmt = OutputFormat(output_format)
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color, output_format=fmt)
    console: ConsoleLike = ctx.obj["console"]
    verbosity_level: int = ctx.obj["verbosity_level"]

    settings: ParserSettings = resolve_settings(config_path)
    if show_settings:
        console.print(settings.to_toml(), nl=False)
        return
    localizer: Localizer = resolve_localizer(messages_path)

    vocabulary = StandardVocabulary()
    log = DiagnosticLog()
    parser: OptionParser[OptionsRecord] = OptionParser(
        vocabulary, sink=log, localizer=localizer, settings=settings
    )
    logger.debug("Parsing %d argument(s)", len(arguments))

    try:
        options: OptionsRecord = parser.parse(arguments)
        if fmt is OutputFormat.JSON:
            help_text: str | None = vocabulary.help_text() if options.display_help else None
            emit_json(console, build_json_payload(options, log, localizer, help_text=help_text))
        else:
            emit_diagnostics_text(
                console,
                log,
                localizer,
                verbosity_level=verbosity_level,
                color=ctx.obj["color_enabled"],
            )
            if options.display_version:
                emit_version_text(console)
            if options.display_help:
                console.print(vocabulary.help_text(), nl=False)
            emit_options_text(console, options, verbosity_level=verbosity_level)
            if verbosity_level > 0:
                emit_summary_text(console, log)
    except DiagnosticArgumentError as e:
        raise FrontoptsConfigError(f"Invalid message template: {e}") from e

    code: ExitCode = resolve_exit_code(log, warnaserror=warnaserror)
    if code is not ExitCode.SUCCESS:
        ctx.exit(code)


if __name__ == "__main__":
    cli()
