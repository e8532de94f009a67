# linguify:header:start
#
#   project      : Linguify
#   file         : objects.py
#   file_relpath : src/linguify/core/objects.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Pure transformations over nested key-value structures.

Translation catalogs and the Linguify config are stored as nested JSON-like
objects. The helpers in this module convert between the nested form and a flat
form keyed by separator-joined paths, prune empty branches, sort keys, and check
whether a path can be assigned without turning a scalar into a container.

Design goals:
    * No side effects: inputs are never mutated; every call builds new dicts.
    * A single discriminator: a value is a structure if and only if
      [`is_structure`][linguify.core.guards.is_structure] says so. Lists and
      tuples are scalar leaves.
    * No I/O and no schema: callers decide where structures come from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from linguify.config.logging import get_logger

from .errors import InvalidArgumentError
from .guards import is_structure
from .paths import get_path, has_path, path_prefixes, split_path, to_segments
from .types import DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from linguify.config.logging import LinguifyLogger

    from .types import FlatStructure, PathLike, Structure

logger: LinguifyLogger = get_logger(__name__)

INVALID_OBJECT_MESSAGE: str = "'object' parameter must be a valid object"


def _copy_structure(obj: Structure) -> Structure:
    """Return a deep copy of the nested structures in ``obj``; scalars are shared."""
    return {
        key: _copy_structure(value) if is_structure(value) else value
        for key, value in obj.items()
    }


# --- Flatten / unflatten ---


def flatten(obj: Structure, *, separator: str = DEFAULT_SEPARATOR) -> FlatStructure:
    """Flatten a nested structure into a single-depth structure.

    Nested keys are joined with ``separator``:

        flatten({"a": {"b": 1, "c": 2}}) == {"a.b": 1, "a.c": 2}

    Keys that collide after joining are resolved by iteration order (last write
    wins). Empty nested structures are kept as ``{}`` leaves so that
    [`unflatten`][linguify.core.objects.unflatten] can restore them.

    Args:
        obj (Structure): Structure to flatten.
        separator (str): String inserted between parent and child keys.

    Returns:
        FlatStructure: A new single-depth structure.

    Raises:
        InvalidArgumentError: If ``obj`` is not a structure.
    """
    if not is_structure(obj):
        raise InvalidArgumentError(INVALID_OBJECT_MESSAGE)

    flattened: FlatStructure = {}
    for key, value in obj.items():
        if is_structure(value) and value:
            for child_key, child_value in flatten(value, separator=separator).items():
                flat_key: str = f"{key}{separator}{child_key}"
                if flat_key in flattened:
                    logger.trace("Flat key %r overwritten by a later entry", flat_key)
                flattened[flat_key] = child_value
        else:
            if key in flattened:
                logger.trace("Flat key %r overwritten by a later entry", key)
            flattened[key] = {} if is_structure(value) else value
    return flattened


def unflatten(flat_obj: FlatStructure, *, separator: str = DEFAULT_SEPARATOR) -> Structure:
    """Convert a flat structure with separator-joined keys into a nested structure.

        unflatten({"a.b": 1, "a.c": 2}) == {"a": {"b": 1, "c": 2}}

    Empty segments are ignored, so ``"a..b"``, ``".a.b"`` and ``"a.b."`` all
    address ``a -> b``. Keys made only of separators (or the empty key)
    contribute nothing.

    When an intermediate segment already holds a scalar written by an earlier
    key, the scalar is replaced by a new structure. When the last segment lands
    on an existing entry, the later value replaces it.

    Args:
        flat_obj (FlatStructure): Flat structure to expand.
        separator (str): Separator used to split keys.

    Returns:
        Structure: A new nested structure.

    Raises:
        InvalidArgumentError: If ``flat_obj`` is not a structure.
    """
    if not is_structure(flat_obj):
        raise InvalidArgumentError(INVALID_OBJECT_MESSAGE)

    nested: Structure = {}
    for key, value in flat_obj.items():
        parts: list[str] = split_path(key, separator)
        if not parts:
            logger.debug("Ignoring key %r: no path segments", key)
            continue

        node: Structure = nested
        for part in parts[:-1]:
            child: Any = node.get(part)
            if not is_structure(child):
                if part in node:
                    logger.debug(
                        "Replacing scalar %r at segment %r of key %r with a structure",
                        child,
                        part,
                        key,
                    )
                child = {}
                node[part] = child
            node = child
        # Later keys may descend into this entry, so it must not alias the input
        node[parts[-1]] = _copy_structure(value) if is_structure(value) else value
    return nested


# --- Pruning and ordering ---


def clear(obj: Structure, *, skip_first_depth: bool = False) -> Structure:
    """Remove empty nested structures.

    Structure values are cleared recursively; a child that ends up empty is
    dropped. Scalars pass through unchanged.

    With ``skip_first_depth=True`` the top level is treated as a fixed set of
    buckets (for instance one per language code): a top-level structure that
    ends up empty is kept as ``{}`` and a top-level scalar is replaced by ``{}``.
    Deeper levels are pruned normally.

    Example:
        ``clear({"a": {}, "b": {"c": 1}}) == {"b": {"c": 1}}``

        ``clear({"a": {}, "b": 1}, skip_first_depth=True) == {"a": {}, "b": {}}``

    Args:
        obj (Structure): Structure to clear.
        skip_first_depth (bool): Keep top-level keys, coercing their values to
            structures.

    Returns:
        Structure: A new structure in the input's key order.
    """
    cleared: Structure = {}
    for key, value in obj.items():
        if not is_structure(value):
            cleared[key] = {} if skip_first_depth else value
            continue

        child: Structure = clear(value)
        if child or skip_first_depth:
            cleared[key] = child
        else:
            logger.trace("Dropping empty structure at key %r", key)
    return cleared


def sort(obj: Structure) -> Structure:
    """Return a copy of ``obj`` with keys sorted alphabetically at every depth."""
    return {
        key: sort(value) if is_structure(value) else value
        for key, value in sorted(obj.items(), key=lambda item: item[0])
    }


# --- Assignment checks ---


def is_assignable(
    obj: Structure,
    path: PathLike,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> Literal[True] | str:
    """Check whether ``path`` can be assigned in ``obj``.

    A path is not assignable when one of its cumulative prefixes already holds
    a scalar: assigning the full path would need that scalar to be a container.
    ``None`` and sequences count as scalars.

    The returned prefix is always a dot-path, whatever ``separator`` is.

    Example:
        ``is_assignable({"a": {"b": 1}}, "a.b.c") == "a.b"``

        ``is_assignable({"a": {"b": 1}}, "a/b/c", separator="/") == "a.b"``

        ``is_assignable({"a": {"b": 1}}, "a.x") is True``

    Args:
        obj (Structure): Structure to check. It is not modified.
        path (PathLike): Serialized path or pre-split segments.
        separator (str): Separator used to split a serialized ``path``.

    Returns:
        Literal[True] | str: ``True`` if assignable, otherwise the shortest
            dot-path prefix that holds a scalar.
    """
    segments: list[str] = to_segments(path, separator)
    for depth, prefix in enumerate(path_prefixes(segments), start=1):
        point: list[str] = segments[:depth]
        if has_path(obj, point) and not is_structure(get_path(obj, point)):
            logger.debug("Path %r is not assignable: %r holds a scalar", path, prefix)
            return prefix
    return True
