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

"""Pull-based sequence adapters.

A ``Cursor`` is an explicit forward-only view over a caller-owned source with
``has_next`` / ``next_element`` / ``remove`` operations. Every cursor also
speaks the native iterator protocol, so it can be handed to any function in
this package that accepts an iterable. A source must only be consumed by one
cursor or loop at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Final, Generic, TypeVar, cast

from seqwiz._internal.exceptions import EmptyAccessError, UnsupportedMutationError
from seqwiz.compat import Self

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

_EXHAUSTED_MESSAGE: Final[str] = "cursor is exhausted"


class BaseCursor(ABC, Generic[T]):
    """Common iterator protocol on top of the explicit cursor operations."""

    __slots__ = ()

    @abstractmethod
    def has_next(self) -> bool:
        """Return whether another element can be read."""

    @abstractmethod
    def next_element(self) -> T:
        """Return the next element.

        Raises:
            EmptyAccessError: If the cursor is exhausted.
        """

    @abstractmethod
    def remove(self) -> None:
        """Remove the element most recently returned by ``next_element``."""

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next_element()


class Cursor(BaseCursor[T]):
    """Read-only cursor over any iterable.

    At most one element is pulled ahead of the caller, and only when
    ``has_next`` needs to look.
    """

    __slots__ = ("_iterator", "_lookahead")

    _MISSING: Final[object] = object()

    def __init__(self, source: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(source)
        self._lookahead: object = self._MISSING

    def has_next(self) -> bool:
        if self._lookahead is not self._MISSING:
            return True
        try:
            self._lookahead = next(self._iterator)
        except StopIteration:
            return False
        return True

    def next_element(self) -> T:
        if not self.has_next():
            raise EmptyAccessError(_EXHAUSTED_MESSAGE)
        element = cast("T", self._lookahead)
        self._lookahead = self._MISSING
        return element

    def remove(self) -> None:
        message = "cursor over an arbitrary iterable is read-only"
        raise UnsupportedMutationError(message)


class ListCursor(BaseCursor[T]):
    """Cursor over a caller-owned list that supports removal.

    ``remove`` deletes the element last returned by ``next_element`` from the
    underlying list and keeps the read position on the element that followed
    it.
    """

    __slots__ = ("_index", "_last", "_values")

    def __init__(self, values: list[T]) -> None:
        self._values = values
        self._index = 0
        self._last = -1

    def has_next(self) -> bool:
        return self._index < len(self._values)

    def next_element(self) -> T:
        if not self.has_next():
            raise EmptyAccessError(_EXHAUSTED_MESSAGE)
        self._last = self._index
        self._index += 1
        return self._values[self._last]

    def remove(self) -> None:
        if self._last < 0:
            message = "no element to remove; call next_element() first"
            raise EmptyAccessError(message)
        del self._values[self._last]
        self._index = self._last
        self._last = -1


class _EmptyCursor(BaseCursor[Any]):
    __slots__ = ()

    def has_next(self) -> bool:
        return False

    def next_element(self) -> Any:
        raise EmptyAccessError(_EXHAUSTED_MESSAGE)

    def remove(self) -> None:
        message = "cannot remove from an empty sequence"
        raise EmptyAccessError(message)

    def __repr__(self) -> str:
        return "empty_sequence()"


_EMPTY: Final[_EmptyCursor] = _EmptyCursor()


def empty_sequence() -> BaseCursor[T]:
    """Return the canonical exhausted cursor.

    Iteration stops immediately; ``next_element`` and ``remove`` raise
    ``EmptyAccessError``.
    """
    return cast("BaseCursor[T]", _EMPTY)


def iterate(source: Iterable[T]) -> Cursor[T]:
    """Wrap ``source`` in a read-only ``Cursor``."""
    return Cursor(source)


def find(source: Iterable[T], condition: Callable[[T], bool]) -> T | None:
    """Return the first element satisfying ``condition``.

    Iteration stops at the match, so an iterator source keeps its remaining
    elements for the caller.

    Args:
        source: Elements to scan.
        condition: Predicate selecting the wanted element.

    Returns:
        The first matching element, or ``None`` if the source is exhausted
        without a match.

    Note:
        A matching element that is itself ``None`` cannot be told apart from
        "no match". When ``None`` is a legitimate element, use
        ``next(filtered(source, condition), sentinel)`` with a private sentinel
        instead.
    """
    for element in source:
        if condition(element):
            return element
    return None


def find_instance(source: Iterable[object], type_tag: type[U] | tuple[type[U], ...]) -> U | None:
    """Return the first element that is an instance of ``type_tag``."""
    for element in source:
        if isinstance(element, type_tag):
            return element
    return None


def filter_by_type(source: Iterable[object], type_tag: type[U] | tuple[type[U], ...]) -> Iterator[U]:
    """Lazily yield the elements of ``source`` that are instances of ``type_tag``.

    Other elements are skipped without being buffered or reported.

    Args:
        source: Heterogeneous elements.
        type_tag: Type, or tuple of types, accepted by ``isinstance``.

    Returns:
        Iterator over the matching elements in source order.
    """
    return (element for element in source if isinstance(element, type_tag))


def filtered(source: Iterable[T], condition: Callable[[T], bool]) -> Iterator[T]:
    """Lazily yield the elements of ``source`` satisfying ``condition``."""
    return (element for element in source if condition(element))


def transformed(source: Iterable[T], transform: Callable[[T], V]) -> Iterator[V]:
    """Lazily yield ``transform(element)`` for each element of ``source``."""
    return (transform(element) for element in source)


def count(source: Iterable[T], condition: Callable[[T], bool] | None = None) -> int:
    """Count the elements of ``source``, optionally only those matching ``condition``.

    Args:
        source: Finite elements to drain.
        condition: Optional predicate; ``None`` counts everything.

    Returns:
        Number of counted elements.
    """
    if condition is None:
        return sum(1 for _ in source)
    return sum(1 for element in source if condition(element))


__all__ = [
    "BaseCursor",
    "Cursor",
    "ListCursor",
    "count",
    "empty_sequence",
    "filter_by_type",
    "filtered",
    "find",
    "find_instance",
    "iterate",
    "transformed",
]
