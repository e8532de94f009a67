# linguify:header:start
#
#   project      : Linguify
#   file         : getters.py
#   file_relpath : src/linguify/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Value getters for parsed config tables.

Each getter validates the expected type and logs a **warning** naming the
offending key before falling back to the default. Missing keys return the
default silently.

The getters are used when reading config files so that user mistakes are
surfaced without crashing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from linguify.config.logging import get_logger
from linguify.core.guards import is_str_sequence

if TYPE_CHECKING:
    from linguify.config.logging import LinguifyLogger
    from linguify.core.types import Structure

logger: LinguifyLogger = get_logger(__name__)


def get_string_value_checked(
    table: Structure,
    key: str,
    *,
    where: str,
    default: str = "",
) -> str:
    """Return a string value, logging a warning when the type is not `str`.

    Ints, bools and floats are **not** coerced to strings. If the key is
    missing, `default` is returned.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    return default


def get_int_value_checked(
    table: Structure,
    key: str,
    *,
    where: str,
    default: int,
    min_value: int | None = None,
) -> int:
    """Return an integer value, logging a warning on a type or range mismatch.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (Structure): Table to query.
        key (str): Key to extract.
        where (str): Dotted location of ``table``, used in log messages.
        default (int): Value returned when the key is missing or invalid.
        min_value (int | None): Inclusive lower bound, if any.

    Returns:
        int: The integer value, or ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected integer in %s, got %s: %r", loc, type(value).__name__, value)
        return default
    if min_value is not None and value < min_value:
        logger.warning("Expected integer >= %d in %s, got %d", min_value, loc, value)
        return default
    return value


def get_string_list_value_checked(
    table: Structure,
    key: str,
    *,
    where: str,
    default: list[str] | None = None,
) -> list[str]:
    """Return a list of strings, logging a warning when the shape is wrong.

    A single string is accepted and wrapped into a one-item list.

    Args:
        table (Structure): Table to query.
        key (str): Key to extract.
        where (str): Dotted location of ``table``, used in log messages.
        default (list[str] | None): Value returned when the key is missing or invalid.

    Returns:
        list[str]: A new list of strings, ``default``, or an empty list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return list(default or [])
    if isinstance(value, str):
        return [value]
    if is_str_sequence(value):
        return list(value)

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected list of strings in %s, got %r", loc, value)
    return list(default or [])
