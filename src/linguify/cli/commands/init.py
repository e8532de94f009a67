# linguify:header:start
#
#   project      : Linguify
#   file         : init.py
#   file_relpath : src/linguify/cli/commands/init.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Linguify `init` command.

Writes the default Linguify configuration as JSON. When a config file already
exists at the target path, the user is asked before it is overwritten; declining
leaves the file untouched and exits successfully.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from linguify.cli.errors import LinguifyIOError, LinguifyPermissionDeniedError
from linguify.config.io import default_config_path, save_config
from linguify.config.logging import get_logger
from linguify.config.model import Config

if TYPE_CHECKING:
    from linguify.cli.console import ConsoleLike

logger = get_logger(__name__)

OVERWRITE_PROMPT: str = "A linguify config file already exists. Do you want to overwrite it?"


@click.command(
    name="init",
    help="Create a Linguify config file with default values.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to write (default: ./linguify.config.json).",
)
def init_command(config_path: Path | None) -> None:
    """Write the default config, asking before overwriting an existing file.

    Args:
        config_path (Path | None): Target file; defaults to
            ``linguify.config.json`` in the current working directory.

    Raises:
        LinguifyPermissionDeniedError: If the file cannot be written for lack of permissions.
        LinguifyIOError: If the file cannot be written for another OS-level reason.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    path: Path = config_path or default_config_path()
    console.print(console.styled("Initiating linguify", fg="blue"))

    if path.exists():
        if not click.confirm(OVERWRITE_PROMPT, default=False):
            console.print(console.styled("Exiting linguify initiating", fg="yellow"))
            return
        console.print(console.styled("Overwriting linguify config", fg="yellow"))

    try:
        save_config(Config(), path)
    except PermissionError as exc:
        raise LinguifyPermissionDeniedError(f"Permission denied writing {path}: {exc}") from exc
    except OSError as exc:
        raise LinguifyIOError(f"Cannot write config file {path}: {exc}") from exc

    logger.info("Config written to %s", path)
    location: str = console.styled(str(path), fg="cyan", underline=True)
    console.print(f"Linguify config saved to {location} successfully")
    console.print(console.styled("Linguify initiated successfully", fg="green"))
