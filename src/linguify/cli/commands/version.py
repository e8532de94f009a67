# linguify:header:start
#
#   project      : Linguify
#   file         : version.py
#   file_relpath : src/linguify/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Linguify `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linguify.constants import LINGUIFY_VERSION

if TYPE_CHECKING:
    from linguify.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Linguify.",
)
def version_command() -> None:
    """Print the Linguify version as installed in the current Python environment."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(f"linguify {LINGUIFY_VERSION}")
