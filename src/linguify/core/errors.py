# linguify:header:start
#
#   project      : Linguify
#   file         : errors.py
#   file_relpath : src/linguify/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Exceptions raised by the Linguify core."""

from __future__ import annotations


class LinguifyError(Exception):
    """Base class for all non-CLI Linguify errors."""


class InvalidArgumentError(LinguifyError, TypeError):
    """Raised when an operation receives a root value that is not a structure."""
