# linguify:header:start
#
#   project      : Linguify
#   file         : paths.py
#   file_relpath : src/linguify/core/paths.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Path helpers for separator-joined keys.

A path is an ordered sequence of non-empty string segments. Its serialized form
joins the segments with a separator (``"."`` by default). Splitting is lenient:
empty segments produced by leading, trailing or doubled separators are dropped
instead of being reported as errors.

The walkers in this module (`has_path`, `get_path`) are read-only; they never
create intermediate structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .guards import is_structure
from .types import DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import PathLike, Structure


def split_path(path: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split a serialized path into its non-empty segments.

    Args:
        path (str): Serialized path, e.g. ``"a.b.c"``.
        separator (str): Segment separator.

    Returns:
        list[str]: The segments, without empty ones. ``""`` and separator-only
            strings yield an empty list.
    """
    return [part for part in path.split(separator) if part != ""]


def join_path(segments: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join path segments with ``separator``."""
    return separator.join(segments)


def to_segments(path: PathLike, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Normalize a serialized path or a pre-split sequence into segments.

    Pre-split sequences are taken as-is, except that empty segments are dropped
    the same way `split_path` drops them.
    """
    if isinstance(path, str):
        return split_path(path, separator)
    return [part for part in path if part != ""]


def path_prefixes(segments: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Return the cumulative prefixes of a path.

    Example:
        ``path_prefixes(["a", "b", "c"])`` returns ``["a", "a.b", "a.b.c"]``.

    Args:
        segments (Sequence[str]): Path segments.
        separator (str): Separator used to join each prefix.

    Returns:
        list[str]: One serialized prefix per segment, shortest first.
    """
    return [join_path(segments[:depth], separator) for depth in range(1, len(segments) + 1)]


_MISSING: Any = object()


def get_path(obj: Structure, segments: Sequence[str], default: Any = None) -> Any:
    """Return the value stored at ``segments`` in ``obj``.

    The walk stops (returning ``default``) as soon as a segment is missing or an
    intermediate value is not a structure.

    Args:
        obj (Structure): Structure to read.
        segments (Sequence[str]): Path segments.
        default (Any): Value returned when the path does not exist.

    Returns:
        Any: The stored value, or ``default``. An empty path returns ``obj``.
    """
    current: Any = obj
    for segment in segments:
        if not is_structure(current) or segment not in current:
            return default
        current = current[segment]
    return current


def has_path(obj: Structure, segments: Sequence[str]) -> bool:
    """Return ``True`` if a value (``None`` included) is stored at ``segments``."""
    return get_path(obj, segments, _MISSING) is not _MISSING
