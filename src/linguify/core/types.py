# linguify:header:start
#
#   project      : Linguify
#   file         : types.py
#   file_relpath : src/linguify/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Shared type aliases for nested key-value structures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Structure = dict[str, Any]
FlatStructure = dict[str, Any]
PathLike = str | Sequence[str]

DEFAULT_SEPARATOR: str = "."
