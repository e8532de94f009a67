# linguify:header:start
#
#   project      : Linguify
#   file         : errors.py
#   file_relpath : src/linguify/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Exceptions for the Linguify CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They print through the project console when one is
available in the Click context.
"""

from __future__ import annotations

from typing import IO, Any

import click

from linguify.cli.exit_codes import ExitCode


class LinguifyCliError(click.ClickException):
    """Base class for all Linguify CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class LinguifyUsageError(LinguifyCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LinguifyPermissionDeniedError(LinguifyCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class LinguifyIOError(LinguifyCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR
