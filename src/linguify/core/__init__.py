# linguify:header:start
#
#   project      : Linguify
#   file         : __init__.py
#   file_relpath : src/linguify/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Pure helpers for nested key-value structures.

This package holds the transformations Linguify applies to translation
catalogs and to its own configuration:

    * `flatten` / `unflatten`: convert between nested and separator-joined keys.
    * `clear`: drop empty nested structures.
    * `sort`: order keys alphabetically at every depth.
    * `is_assignable`: check that a path does not run through a scalar.

None of these helpers perform I/O or mutate their input.
"""

from __future__ import annotations

from .errors import InvalidArgumentError, LinguifyError
from .guards import is_structure
from .objects import clear, flatten, is_assignable, sort, unflatten
from .paths import get_path, has_path, join_path, path_prefixes, split_path
from .types import DEFAULT_SEPARATOR, FlatStructure, PathLike, Structure

__all__: list[str] = [
    "DEFAULT_SEPARATOR",
    "FlatStructure",
    "InvalidArgumentError",
    "LinguifyError",
    "PathLike",
    "Structure",
    "clear",
    "flatten",
    "get_path",
    "has_path",
    "is_assignable",
    "is_structure",
    "join_path",
    "path_prefixes",
    "sort",
    "split_path",
    "unflatten",
]
