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

"""Stable merging of sequences that are already sorted.

The merge is the combining step of merge sort: two cursors walk the inputs
and the smaller head is emitted each step, the left input winning ties. The
inputs are trusted to be sorted under the comparator; unsorted input yields
an unspecified order, never an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from seqwiz._internal.collection_utils import materialise
from seqwiz._internal.logging_utils import structured_extra
from seqwiz.core.model_types import LogComponent, Ordering

T = TypeVar("T")

logger: logging.Logger = logging.getLogger("seqwiz.merge")


def natural_order(left: Any, right: Any) -> int:
    """Compare two values using their own ``<`` ordering.

    Args:
        left: First operand.
        right: Second operand.

    Returns:
        ``-1``, ``0`` or ``1``.
    """
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def reverse_order(comparator: Callable[[T, T], int] = natural_order) -> Callable[[T, T], int]:
    """Return a comparator that inverts ``comparator``."""

    def _reversed(left: T, right: T) -> int:
        return comparator(right, left)

    return _reversed


def comparing(key: Callable[[T], Any]) -> Callable[[T, T], int]:
    """Build a comparator that orders elements by ``key(element)``.

    Args:
        key: Function extracting a naturally ordered sort key.

    Returns:
        Comparator applying ``natural_order`` to the extracted keys.
    """

    def _by_key(left: T, right: T) -> int:
        return natural_order(key(left), key(right))

    return _by_key


def merge_sorted(
    left: Iterable[T],
    right: Iterable[T],
    comparator: Callable[[T, T], int] = natural_order,
    *,
    merge_equal: bool = False,
) -> list[T]:
    """Merge two individually sorted sequences into one sorted list.

    When the elements under both cursors compare equal, the left element is
    always emitted first. With ``merge_equal`` the right element of that pair
    is dropped; otherwise both are emitted. Both cursors advance either way,
    so runs of equal elements are resolved one aligned pair at a time.

    Args:
        left: Finite sequence sorted ascending under ``comparator``.
        right: Finite sequence sorted ascending under ``comparator``.
        comparator: Three-way comparison returning a negative, zero or
            positive number.
        merge_equal: Drop the right-hand element of each aligned equal pair.

    Returns:
        A new list holding the merged elements.
    """
    left_items = materialise(left)
    right_items = materialise(right)
    left_size = len(left_items)
    right_size = len(right_items)
    result: list[T] = []
    i = 0
    j = 0
    dropped = 0
    while i < left_size and j < right_size:
        left_item = left_items[i]
        right_item = right_items[j]
        order = Ordering.from_compare(comparator(left_item, right_item))
        if order is Ordering.LESS:
            result.append(left_item)
            i += 1
        elif order is Ordering.GREATER:
            result.append(right_item)
            j += 1
        else:
            result.append(left_item)
            if merge_equal:
                dropped += 1
            else:
                result.append(right_item)
            i += 1
            j += 1
    result.extend(left_items[i:])
    result.extend(right_items[j:])

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Merged %d + %d elements into %d",
            left_size,
            right_size,
            len(result),
            extra=structured_extra(
                component=LogComponent.MERGE,
                operation="merge_sorted",
                counts={"left": left_size, "right": right_size, "merged": len(result), "dropped": dropped},
            ),
        )
    return result


__all__ = ["comparing", "merge_sorted", "natural_order", "reverse_order"]
