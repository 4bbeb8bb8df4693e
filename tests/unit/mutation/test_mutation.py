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

"""Unit tests for in-place mutation helpers."""

from __future__ import annotations

from collections import UserList, deque

import pytest

from seqwiz.mutation import dedup_in_place, dedupe_preserve, swap_elements

pytestmark = pytest.mark.unit


def test_dedup_in_place_keeps_first_occurrences() -> None:
    values = [3, 1, 3, 2, 1]

    removed = dedup_in_place(values)

    assert values == [3, 1, 2]
    assert removed == 2


def test_dedup_in_place_mutates_the_same_object() -> None:
    values = ["a", "a"]
    alias = values

    _ = dedup_in_place(values)

    assert alias is values
    assert alias == ["a"]


def test_dedup_in_place_supports_deque() -> None:
    values = deque([3, 1, 3, 2, 1])
    alias = values

    removed = dedup_in_place(values)

    assert removed == 2
    assert alias is values
    assert list(values) == [3, 1, 2]


def test_dedup_in_place_supports_user_list() -> None:
    values = UserList(["b", "a", "b", "b"])

    removed = dedup_in_place(values)

    assert removed == 2
    assert values == ["b", "a"]


def test_dedup_in_place_preserves_identity_of_first_occurrence() -> None:
    first = (1, 2)
    second = tuple([1, 2])
    values = [first, second]

    _ = dedup_in_place(values)

    assert values == [first]
    assert values[0] is first


def test_dedup_in_place_noop_on_distinct_or_empty() -> None:
    distinct = [1, 2, 3]
    empty: list[int] = []

    assert dedup_in_place(distinct) == 0
    assert dedup_in_place(empty) == 0
    assert distinct == [1, 2, 3]
    assert empty == []


def test_dedupe_preserve_does_not_mutate() -> None:
    values = [2, 2, 1]

    assert dedupe_preserve(values) == [2, 1]
    assert values == [2, 2, 1]


def test_swap_elements() -> None:
    values = ["a", "b", "c"]

    swap_elements(values, 0, 2)

    assert values == ["c", "b", "a"]


def test_swap_elements_out_of_range_leaves_values_untouched() -> None:
    values = [1, 2]

    with pytest.raises(IndexError):
        swap_elements(values, 0, 5)
    assert values == [1, 2]
