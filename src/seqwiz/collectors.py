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

"""Drain sequences into concrete containers.

Every collector makes a single pass over its source and allocates exactly one
result container. Mapping collectors derive keys or values with a caller
function; when two elements produce the same key the ``on_duplicate`` policy
decides the outcome, defaulting to last-write-wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, MutableSequence, MutableSet
from typing import TypeVar, overload

from seqwiz._internal.exceptions import DuplicateKeyError, SeqwizTypeError
from seqwiz._internal.logging_utils import structured_extra
from seqwiz.core.model_types import DuplicateKeyPolicy, LogComponent
from seqwiz.sequences import filter_by_type

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
K = TypeVar("K", bound=Hashable)
H = TypeVar("H", bound=Hashable)

logger: logging.Logger = logging.getLogger("seqwiz.collectors")


def to_list(source: Iterable[T]) -> list[T]:
    """Collect ``source`` into a list, keeping order and duplicates."""
    return list(source)


def to_set(source: Iterable[H]) -> set[H]:
    """Collect ``source`` into a set; duplicates collapse by equality."""
    return set(source)


def _put(
    result: dict[K, V],
    key: K,
    value: V,
    policy: DuplicateKeyPolicy,
    operation: str,
) -> None:
    if key not in result:
        result[key] = value
        return
    if policy is DuplicateKeyPolicy.REJECT:
        raise DuplicateKeyError(key)
    if policy is DuplicateKeyPolicy.FIRST_WINS:
        return
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Key %r collected twice; keeping the later value",
            key,
            extra=structured_extra(
                component=LogComponent.COLLECTORS,
                operation=operation,
                policy=policy,
            ),
        )
    result[key] = value


def to_map_by_key(
    source: Iterable[V],
    key_fn: Callable[[V], K],
    *,
    on_duplicate: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS,
) -> dict[K, V]:
    """Index ``source`` by ``key_fn(element)``.

    Args:
        source: Elements to index.
        key_fn: Function deriving each element's key.
        on_duplicate: Resolution when two elements derive the same key.

    Returns:
        Mapping from derived key to element.

    Raises:
        DuplicateKeyError: If ``on_duplicate`` is ``REJECT`` and a key repeats.
    """
    result: dict[K, V] = {}
    for element in source:
        _put(result, key_fn(element), element, on_duplicate, "to_map_by_key")
    return result


def to_map_by_value(
    source: Iterable[K],
    value_fn: Callable[[K], V],
    *,
    on_duplicate: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS,
) -> dict[K, V]:
    """Map each element of ``source`` to ``value_fn(element)``.

    Args:
        source: Hashable elements used as keys.
        value_fn: Function deriving each key's value.
        on_duplicate: Resolution when an element occurs more than once.

    Returns:
        Mapping from source element to derived value.

    Raises:
        DuplicateKeyError: If ``on_duplicate`` is ``REJECT`` and an element
            repeats.
    """
    result: dict[K, V] = {}
    for key in source:
        _put(result, key, value_fn(key), on_duplicate, "to_map_by_value")
    return result


def map_transform(source: Iterable[T], transform_fn: Callable[[T], V]) -> list[V]:
    """Return ``[transform_fn(e) for e in source]``, same order and length."""
    return [transform_fn(element) for element in source]


def map_to_tuple(source: Iterable[T], transform_fn: Callable[[T], V]) -> tuple[V, ...]:
    """Like ``map_transform`` but returns an immutable tuple."""
    return tuple(transform_fn(element) for element in source)


def map_filter_transform(source: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Keep the elements satisfying ``predicate``, in their relative order."""
    return [element for element in source if predicate(element)]


def concat_map(source: Iterable[T], expand_fn: Callable[[T], Iterable[V]]) -> list[V]:
    """Expand each element with ``expand_fn`` and flatten in source order.

    Args:
        source: Elements to expand.
        expand_fn: Function returning the sub-sequence for one element.

    Returns:
        The concatenation of every sub-sequence.
    """
    result: list[V] = []
    for element in source:
        result.extend(expand_fn(element))
    return result


@overload
def add_all(target: MutableSequence[T], source: Iterable[T]) -> MutableSequence[T]: ...


@overload
def add_all(target: MutableSet[T], source: Iterable[T]) -> MutableSet[T]: ...


def add_all(
    target: MutableSequence[T] | MutableSet[T],
    source: Iterable[T],
) -> MutableSequence[T] | MutableSet[T]:
    """Drain ``source`` into an existing container.

    Sequences are appended to; sets are added to.

    Args:
        target: Mutable sequence or mutable set receiving the elements.
        source: Elements to add.

    Returns:
        ``target``, for chaining.

    Raises:
        SeqwizTypeError: If ``target`` is neither a mutable sequence nor a
            mutable set.
    """
    if isinstance(target, MutableSequence):
        target.extend(source)
        return target
    if isinstance(target, MutableSet):
        for element in source:
            target.add(element)
        return target
    message = f"add_all target must be a mutable sequence or set, not {type(target).__name__}"
    raise SeqwizTypeError(message)


def collect_instances(source: Iterable[object], type_tag: type[U] | tuple[type[U], ...]) -> list[U]:
    """Collect the instances of ``type_tag`` from ``source`` into a list."""
    return list(filter_by_type(source, type_tag))


__all__ = [
    "add_all",
    "collect_instances",
    "concat_map",
    "map_filter_transform",
    "map_to_tuple",
    "map_transform",
    "to_list",
    "to_map_by_key",
    "to_map_by_value",
    "to_set",
]
