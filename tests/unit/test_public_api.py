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

"""Smoke tests for the top-level seqwiz namespace."""

from __future__ import annotations

import pytest

import seqwiz

pytestmark = pytest.mark.unit


def test_public_names_resolve() -> None:
    for name in seqwiz.__all__:
        assert hasattr(seqwiz, name), name


def test_version_is_exposed() -> None:
    assert seqwiz.__version__ == "0.1.0"


def test_internal_package_loads_modules_lazily() -> None:
    from seqwiz import _internal

    assert "collection_utils" in dir(_internal)
    assert _internal.collection_utils.dedupe_preserve([1, 1]) == [1]
    with pytest.raises(AttributeError):
        _ = _internal.missing  # type: ignore[attr-defined]
