# topmark:header:start
#
#   project      : FrontOpts
#   file         : __init__.py
#   file_relpath : src/frontopts/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line host for the FrontOpts option parser.

The ``frontopts`` command parses compiler arguments with the standard vocabulary and
prints the diagnostics and the resolved options. It is meant for trying out response
files and file specifications, and as a reference host for embedding the engine.
"""
