# linguify:header:start
#
#   project      : Linguify
#   file         : test_flatten.py
#   file_relpath : tests/core/test_flatten.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

"""Tests for `linguify.core.objects.flatten`."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from linguify.core import InvalidArgumentError, flatten


def test_flatten_nested_keys() -> None:
    """Nested keys are joined with the default separator."""
    assert flatten({"a": {"b": 1, "c": 2}}) == {"a.b": 1, "a.c": 2}


def test_flatten_deep_and_mixed() -> None:
    """Scalars at every depth keep their value under the joined key."""
    source: dict[str, Any] = {
        "title": "Hello",
        "menu": {"file": {"open": "Open", "close": "Close"}, "help": "Help"},
    }

    assert flatten(source) == {
        "title": "Hello",
        "menu.file.open": "Open",
        "menu.file.close": "Close",
        "menu.help": "Help",
    }


def test_flatten_preserves_iteration_order() -> None:
    """Flat keys appear in depth-first input order."""
    flat: dict[str, Any] = flatten({"z": 1, "a": {"y": 2, "b": 3}})

    assert list(flat) == ["z", "a.y", "a.b"]


def test_flatten_custom_separator() -> None:
    """The separator option is used between parent and child keys."""
    assert flatten({"a": {"b": {"c": 1}}}, separator="/") == {"a/b/c": 1}


def test_flatten_treats_sequences_as_leaves() -> None:
    """Lists and tuples are copied as-is, not recursed into."""
    source: dict[str, Any] = {"a": [1, {"b": 2}], "t": (1, 2)}

    assert flatten(source) == {"a": [1, {"b": 2}], "t": (1, 2)}


def test_flatten_keeps_scalars_falsy_values() -> None:
    """None, False, 0 and "" are regular scalar leaves."""
    source: dict[str, Any] = {"a": {"n": None, "f": False, "z": 0, "e": ""}}

    assert flatten(source) == {"a.n": None, "a.f": False, "a.z": 0, "a.e": ""}


def test_flatten_keeps_empty_nested_structure() -> None:
    """An empty nested structure becomes an empty-dict leaf."""
    assert flatten({"a": {}, "b": {"c": {}}}) == {"a": {}, "b.c": {}}


def test_flatten_collision_last_write_wins() -> None:
    """A later entry overwrites an earlier one mapped to the same flat key."""
    assert flatten({"a.b": 1, "a": {"b": 2}}) == {"a.b": 2}
    assert flatten({"a": {"b": 2}, "a.b": 1}) == {"a.b": 1}


def test_flatten_empty_structure() -> None:
    """Flattening an empty structure yields an empty structure."""
    assert flatten({}) == {}


def test_flatten_does_not_mutate_input() -> None:
    """The input structure is left untouched."""
    source: dict[str, Any] = {"a": {"b": {"c": 1}}, "d": []}
    snapshot: dict[str, Any] = copy.deepcopy(source)

    flatten(source)

    assert source == snapshot


@pytest.mark.parametrize("value", [1, 1.5, "text", None, True, [1, 2], ("a",)])
def test_flatten_rejects_non_structures(value: Any) -> None:
    """Non-structure roots raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError, match="must be a valid object"):
        flatten(value)


def test_invalid_argument_is_a_type_error() -> None:
    """Callers catching TypeError also catch InvalidArgumentError."""
    with pytest.raises(TypeError):
        flatten(None)  # type: ignore[arg-type]
