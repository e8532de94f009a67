# linguify:header:start
#
#   project      : Linguify
#   file         : guards.py
#   file_relpath : src/linguify/core/guards.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Type guards used to tell structures from scalars.

Every transformation in [`linguify.core.objects`][linguify.core.objects] relies on
`is_structure` as its only discriminator: a value is either a nested structure
(``dict``) or a scalar leaf. Sequences are scalars and are never recursed into.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeGuard

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .types import Structure


def is_structure(obj: object) -> TypeGuard[Structure]:
    """Type guard for a nested structure.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[Structure]: ``True`` if ``obj`` is a ``dict``.
    """
    return isinstance(obj, dict)


def is_str_sequence(obj: object) -> TypeGuard[Sequence[str]]:
    """Type guard for a list or tuple of strings.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[Sequence[str]]: True if obj is a list or tuple whose
            items are all ``str``.
    """
    return isinstance(obj, (list, tuple)) and all(isinstance(x, str) for x in obj)
