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

"""Unit tests for the error code registry."""

from __future__ import annotations

from pathlib import Path

import pytest

from seqwiz._internal.error_codes import error_code_catalog, error_code_for
from seqwiz.config import ConfigReadError, ConfigValidationError, UnsupportedConfigVersionError
from seqwiz.exceptions import (
    DuplicateKeyError,
    EmptyAccessError,
    SeqwizError,
    SeqwizTypeError,
    SeqwizValidationError,
    UnsupportedMutationError,
)

pytestmark = pytest.mark.unit


def test_error_code_for_known_hierarchy() -> None:
    assert error_code_for(SeqwizError("x")) == "SW000"
    assert error_code_for(SeqwizValidationError("x")) == "SW100"
    assert error_code_for(SeqwizTypeError("x")) == "SW101"
    assert error_code_for(DuplicateKeyError("k")) == "SW102"
    assert error_code_for(ConfigValidationError("x")) == "SW110"
    assert error_code_for(UnsupportedConfigVersionError(3, 0)) == "SW111"
    assert error_code_for(ConfigReadError(Path("x.toml"), OSError("nope"))) == "SW112"
    assert error_code_for(EmptyAccessError("x")) == "SW200"
    assert error_code_for(UnsupportedMutationError("x")) == "SW201"


def test_error_code_for_unknown_defaults_to_base() -> None:
    class CustomError(RuntimeError):
        pass

    assert error_code_for(CustomError("x")) == "SW000"


def test_error_code_for_subclass_uses_nearest_registered_parent() -> None:
    class ReadOnlyViewError(UnsupportedMutationError):
        pass

    assert error_code_for(ReadOnlyViewError("x")) == "SW201"


def test_error_code_catalog_uniqueness() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(set(codes)) == len(codes)
    assert catalog["seqwiz._internal.exceptions.SeqwizError"] == "SW000"
    assert catalog["seqwiz.config.models.InvalidConfigFileError"] == "SW113"


def test_exceptions_are_catchable_as_builtins() -> None:
    assert issubclass(EmptyAccessError, LookupError)
    assert issubclass(UnsupportedMutationError, NotImplementedError)
    assert issubclass(SeqwizTypeError, TypeError)
