# linguify:header:start
#
#   project      : Linguify
#   file         : __init__.py
#   file_relpath : src/linguify/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Linguify package.

Linguify manages translation catalogs stored as nested JSON objects. The
[`linguify.core`][linguify.core] package exposes the pure structure helpers; the
CLI lives in [`linguify.cli`][linguify.cli].
"""

from __future__ import annotations

from linguify.core import (
    InvalidArgumentError,
    LinguifyError,
    Structure,
    clear,
    flatten,
    is_assignable,
    is_structure,
    sort,
    unflatten,
)

__all__: list[str] = [
    "InvalidArgumentError",
    "LinguifyError",
    "Structure",
    "clear",
    "flatten",
    "is_assignable",
    "is_structure",
    "sort",
    "unflatten",
]
