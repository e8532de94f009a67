# linguify:header:start
#
#   project      : Linguify
#   file         : strategies_linguify.py
#   file_relpath : tests/strategies_linguify.py
#   license      : MIT
#   copyright    : (c) 2025 The Linguify Authors
#
# linguify:header:end

# pyright: strict

"""Hypothesis strategies for nested key-value structures.

Keys never contain the default separator and are never empty, so generated
structures satisfy the preconditions of the flatten/unflatten round trip.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

KEY_ALPHABET: str = "abcdefgXYZ_-019"

s_keys: st.SearchStrategy[str] = st.text(alphabet=KEY_ALPHABET, min_size=1, max_size=6)

s_scalars: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-1000, max_value=1000),
    st.text(max_size=8),
    st.lists(st.integers(min_value=0, max_value=9), max_size=3),
)

s_values: st.SearchStrategy[Any] = st.recursive(
    s_scalars,
    lambda children: st.dictionaries(s_keys, children, max_size=4),
    max_leaves=24,
)

s_structures: st.SearchStrategy[dict[str, Any]] = st.dictionaries(s_keys, s_values, max_size=5)
