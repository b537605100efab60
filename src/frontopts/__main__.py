# topmark:header:start
#
#   project      : FrontOpts
#   file         : __main__.py
#   file_relpath : src/frontopts/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the FrontOpts CLI with ``python -m frontopts``."""

from frontopts.cli.main import cli

cli()
