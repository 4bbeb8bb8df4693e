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

"""Helper functions for deterministic collection operations."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def dedupe_preserve(values: Iterable[H]) -> list[H]:
    """Return items in order, dropping subsequent duplicates.

    Args:
        values: Iterable of hashable items whose first occurrence should be
            preserved.

    Returns:
        A list containing the first appearance of each unique value, ordered by
        the original traversal.
    """
    seen: set[H] = set()
    result: list[H] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def materialise(values: Iterable[T]) -> Sequence[T]:
    """Return ``values`` as an indexable sequence, copying only when needed.

    Lists and tuples are returned unchanged so callers get random access
    without an extra allocation; any other iterable is drained into a list.

    Args:
        values: Finite iterable to expose with random access.

    Returns:
        A sequence holding the same elements in traversal order.
    """
    if isinstance(values, (list, tuple)):
        return values
    return list(values)


__all__ = ["dedupe_preserve", "materialise"]
