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

"""Unit tests for cursor adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from seqwiz.exceptions import EmptyAccessError, SeqwizError, UnsupportedMutationError
from seqwiz.sequences import Cursor, ListCursor, empty_sequence, iterate

if TYPE_CHECKING:
    from collections.abc import Iterator

pytestmark = pytest.mark.unit


def test_empty_sequence_is_exhausted_and_canonical() -> None:
    empty = empty_sequence()

    assert empty is empty_sequence()
    assert not empty.has_next()
    assert list(empty) == []


def test_empty_sequence_rejects_reads_and_removal() -> None:
    empty = empty_sequence()

    with pytest.raises(EmptyAccessError):
        _ = empty.next_element()
    with pytest.raises(EmptyAccessError):
        empty.remove()


def test_cursor_reads_in_order_then_raises() -> None:
    cursor = iterate([1, 2])

    assert cursor.has_next()
    assert cursor.next_element() == 1
    assert cursor.next_element() == 2
    assert not cursor.has_next()
    with pytest.raises(EmptyAccessError):
        _ = cursor.next_element()


def test_cursor_has_next_is_idempotent_and_pulls_lazily() -> None:
    pulled: list[int] = []

    def source() -> Iterator[int]:
        for value in (1, 2, 3):
            pulled.append(value)
            yield value

    cursor = Cursor(source())

    assert pulled == []
    assert cursor.has_next()
    assert cursor.has_next()
    assert pulled == [1]
    assert cursor.next_element() == 1
    assert pulled == [1]


def test_cursor_yields_none_elements() -> None:
    cursor = Cursor([None, 0])

    assert cursor.next_element() is None
    assert cursor.next_element() == 0


def test_cursor_supports_native_iteration_after_partial_read() -> None:
    cursor = Cursor("abc")
    _ = cursor.next_element()

    assert list(cursor) == ["b", "c"]


def test_cursor_is_read_only() -> None:
    cursor = Cursor([1])
    _ = cursor.next_element()

    with pytest.raises(UnsupportedMutationError) as excinfo:
        cursor.remove()
    assert isinstance(excinfo.value, SeqwizError)


def test_list_cursor_removes_last_returned_element() -> None:
    values = [1, 2, 2, 3]
    cursor = ListCursor(values)
    seen: set[int] = set()
    while cursor.has_next():
        value = cursor.next_element()
        if value in seen:
            cursor.remove()
        seen.add(value)

    assert values == [1, 2, 3]


def test_list_cursor_remove_requires_a_read() -> None:
    values = [1, 2]
    cursor = ListCursor(values)

    with pytest.raises(EmptyAccessError):
        cursor.remove()
    _ = cursor.next_element()
    cursor.remove()
    with pytest.raises(EmptyAccessError):
        cursor.remove()
    assert values == [2]
    assert list(cursor) == [2]


def test_list_cursor_raises_when_exhausted() -> None:
    cursor = ListCursor([])

    with pytest.raises(EmptyAccessError):
        _ = cursor.next_element()
