# topmark:header:start
#
#   project      : FrontOpts
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the FrontOpts test suite.

This file sets up global fixtures and configures logging for test runs.

Notes:
    Option parser tests should observe results through a `DiagnosticLog` sink (see
    the `log` fixture) rather than through logging output: diagnostics are the
    contract, log messages are not.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from frontopts.config import logging
from frontopts.diagnostic import DiagnosticLog
from frontopts.options import OptionParser, StandardVocabulary

if TYPE_CHECKING:
    from pathlib import Path

    from frontopts.options import OptionsRecord

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_frontopts_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure FrontOpts' runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    FRONTOPTS_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so the trace paths run under test."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def log() -> DiagnosticLog:
    """Return an empty diagnostic sink."""
    return DiagnosticLog()


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with an empty temporary directory as the working directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def parse(
    arguments: list[str],
    log: DiagnosticLog,
    *,
    require_source_files: bool = True,
) -> OptionsRecord:
    """Parse ``arguments`` with the standard vocabulary into ``log``."""
    parser = OptionParser(StandardVocabulary(), sink=log)
    return parser.parse(arguments, require_source_files=require_source_files)
