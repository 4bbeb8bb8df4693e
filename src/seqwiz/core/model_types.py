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

"""Enumerations shared across seqwiz.

This module defines the small closed vocabularies the algorithms and the
ambient layers agree on:

- ``Ordering`` for normalised three-way comparison results
- ``DuplicateKeyPolicy`` for key collisions in mapping collectors
- ``LogFormat`` and ``LogComponent`` for structured logging
"""

from __future__ import annotations

from enum import IntEnum

from seqwiz.compat import StrEnum


class Ordering(IntEnum):
    """Normalised outcome of a three-way comparison.

    Attributes:
        LESS: Left operand sorts before the right operand.
        EQUAL: Operands are interchangeable for ordering purposes.
        GREATER: Left operand sorts after the right operand.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_compare(cls, result: int) -> Ordering:
        """Collapse a ``cmp``-style integer into an ``Ordering`` member.

        Args:
            result: Negative, zero, or positive comparator output.

        Returns:
            The matching ``Ordering`` member.
        """
        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL


class DuplicateKeyPolicy(StrEnum):
    """How mapping collectors resolve two elements deriving the same key.

    Attributes:
        LAST_WINS: The later element overwrites the earlier one.
        FIRST_WINS: The earliest element is kept; later ones are ignored.
        REJECT: A collision raises ``DuplicateKeyError``.
    """

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"
    REJECT = "reject"

    @classmethod
    def from_str(cls, raw: str) -> DuplicateKeyPolicy:
        """Create a DuplicateKeyPolicy enum from a string value.

        Hyphens are accepted in place of underscores (``last-wins``).

        Args:
            raw: String representation of the policy.

        Returns:
            DuplicateKeyPolicy enum value.

        Raises:
            ValueError: If the string does not match any policy value.
        """
        value = raw.strip().lower().replace("-", "_")
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown duplicate key policy '{raw}'"
            raise ValueError(msg) from exc


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable seqwiz components.

    Attributes:
        MERGE: Sorted-sequence merging.
        COLLECTORS: Bulk collection into containers.
        MUTATION: In-place list mutation helpers.
        CONFIG: Settings discovery and validation.
    """

    MERGE = "merge"
    COLLECTORS = "collectors"
    MUTATION = "mutation"
    CONFIG = "config"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        """Create a LogComponent enum from a string value.

        Args:
            raw: String representation of the log component.

        Returns:
            LogComponent enum value.

        Raises:
            ValueError: If the string does not match any LogComponent value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log component '{raw}'"
            raise ValueError(msg) from exc


__all__ = [
    "DuplicateKeyPolicy",
    "LogComponent",
    "LogFormat",
    "Ordering",
]
