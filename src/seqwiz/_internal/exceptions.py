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

"""Common exception hierarchy for seqwiz."""

from __future__ import annotations

__all__ = [
    "DuplicateKeyError",
    "EmptyAccessError",
    "SeqwizError",
    "SeqwizTypeError",
    "SeqwizValidationError",
    "UnsupportedMutationError",
]


class SeqwizError(Exception):
    """Base error for all seqwiz exceptions."""


class SeqwizValidationError(SeqwizError, ValueError):
    """Raised when input data fails validation checks."""


class SeqwizTypeError(SeqwizError, TypeError):
    """Raised when input data has an unexpected type."""


class EmptyAccessError(SeqwizError, LookupError):
    """Raised when reading from, or removing through, an exhausted cursor."""


class UnsupportedMutationError(SeqwizError, NotImplementedError):
    """Raised when removal is attempted through a read-only cursor."""


class DuplicateKeyError(SeqwizValidationError):
    """Raised when a collector under the ``reject`` policy sees a key twice."""

    def __init__(self, key: object) -> None:
        """Initialize the exception with the colliding key.

        Args:
            key: The key derived from more than one source element.
        """
        self.key = key
        super().__init__(f"Duplicate key {key!r}")
