# topmark:header:start
#
#   project      : FrontOpts
#   file         : __init__.py
#   file_relpath : src/frontopts/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer: logging setup, parser settings and TOML helpers."""

from __future__ import annotations

from frontopts.config.io import SettingsError
from frontopts.config.settings import (
    ParserSettings,
    discover_settings,
    find_settings_file,
    load_settings,
)

__all__ = [
    "ParserSettings",
    "SettingsError",
    "discover_settings",
    "find_settings_file",
    "load_settings",
]
