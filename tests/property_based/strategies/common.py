# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "keyed_pairs",
    "mixed_values",
    "small_ints",
    "sorted_int_lists",
]


def small_ints(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy of short integer lists with frequent repeats."""
    return st.lists(st.integers(min_value=-5, max_value=5), max_size=max_size)


def sorted_int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy of ascending integer lists, duplicates allowed."""
    return small_ints(max_size).map(sorted)


def keyed_pairs(max_size: int = 30) -> st.SearchStrategy[list[tuple[int, int]]]:
    """Return ``(key, serial)`` pairs sorted by key with unique serials.

    The serial records each element's position so stability can be checked
    after a merge.

    Args:
        max_size: Maximum number of pairs generated.

    Returns:
        Hypothesis strategy producing key-sorted pair lists.
    """
    return st.lists(st.integers(min_value=0, max_value=4), max_size=max_size).map(
        lambda keys: [(key, serial) for serial, key in enumerate(sorted(keys))],
    )


def mixed_values() -> st.SearchStrategy[list[object]]:
    """Heterogeneous element lists for type-narrowing checks."""
    return st.lists(st.one_of(st.integers(), st.text(max_size=3), st.none(), st.floats(allow_nan=False)))
