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

"""In-place mutation helpers for caller-owned lists."""

from __future__ import annotations

import logging
from collections.abc import Hashable, MutableSequence
from typing import TypeVar

from seqwiz._internal.collection_utils import dedupe_preserve
from seqwiz._internal.logging_utils import structured_extra
from seqwiz.core.model_types import LogComponent

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

logger: logging.Logger = logging.getLogger("seqwiz.mutation")


def dedup_in_place(values: MutableSequence[H]) -> int:
    """Remove every element equal to an earlier one, mutating ``values``.

    The first occurrence of each value keeps its position relative to the
    other survivors and its identity. The compacted contents are built first,
    then ``values`` is cleared and refilled through ``clear`` and ``extend``.
    Only the ``MutableSequence`` mixin API is used, so ``list``, ``deque`` and
    ``UserList`` are all supported.

    Args:
        values: Mutable sequence of hashable elements.

    Returns:
        Number of removed elements.
    """
    kept = dedupe_preserve(values)
    removed = len(values) - len(kept)
    if removed:
        values.clear()
        values.extend(kept)
        logger.debug(
            "Removed %d duplicate(s)",
            removed,
            extra=structured_extra(
                component=LogComponent.MUTATION,
                operation="dedup_in_place",
                counts={"kept": len(kept), "removed": removed},
            ),
        )
    return removed


def swap_elements(values: MutableSequence[T], first: int, second: int) -> None:
    """Swap the elements at positions ``first`` and ``second``.

    Raises:
        IndexError: If either position is out of range.
    """
    values[first], values[second] = values[second], values[first]


__all__ = ["dedup_in_place", "dedupe_preserve", "swap_elements"]
