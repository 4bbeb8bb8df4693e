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

"""seqwiz - container-agnostic sequence algorithms.

Provides a stable merge of sorted sequences, pull-based cursor adapters,
bulk collectors that drain sequences into lists, sets and mappings, and
in-place deduplication, all defined over plain iterables and caller-supplied
comparators, predicates and transforms.
"""

from __future__ import annotations

from seqwiz.exceptions import (
    DuplicateKeyError,
    EmptyAccessError,
    SeqwizError,
    SeqwizTypeError,
    SeqwizValidationError,
    UnsupportedMutationError,
)

from ._internal.logging_utils import configure_logging
from .collectors import (
    add_all,
    collect_instances,
    concat_map,
    map_filter_transform,
    map_to_tuple,
    map_transform,
    to_list,
    to_map_by_key,
    to_map_by_value,
    to_set,
)
from .config import Settings, load_config
from .core.model_types import DuplicateKeyPolicy, Ordering
from .merge import comparing, merge_sorted, natural_order, reverse_order
from .mutation import dedup_in_place, dedupe_preserve, swap_elements
from .sequences import (
    BaseCursor,
    Cursor,
    ListCursor,
    count,
    empty_sequence,
    filter_by_type,
    filtered,
    find,
    find_instance,
    iterate,
    transformed,
)

__all__ = [
    "BaseCursor",
    "Cursor",
    "DuplicateKeyError",
    "DuplicateKeyPolicy",
    "EmptyAccessError",
    "ListCursor",
    "Ordering",
    "SeqwizError",
    "SeqwizTypeError",
    "SeqwizValidationError",
    "Settings",
    "UnsupportedMutationError",
    "__version__",
    "add_all",
    "collect_instances",
    "comparing",
    "concat_map",
    "configure_logging",
    "count",
    "dedup_in_place",
    "dedupe_preserve",
    "empty_sequence",
    "filter_by_type",
    "filtered",
    "find",
    "find_instance",
    "iterate",
    "load_config",
    "map_filter_transform",
    "map_to_tuple",
    "map_transform",
    "merge_sorted",
    "natural_order",
    "reverse_order",
    "swap_elements",
    "to_list",
    "to_map_by_key",
    "to_map_by_value",
    "to_set",
    "transformed",
]

__version__ = "0.1.0"
