# linguify:header:start
#
#   project      : Linguify
#   file         : __main__.py
#   file_relpath : src/linguify/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Module entry point for running Linguify via ``python -m linguify``.

Delegates to :func:`linguify.cli.main.cli`, the same entry point as the
``linguify`` console script.
"""

from __future__ import annotations

from linguify.cli.main import cli

if __name__ == "__main__":
    cli()
