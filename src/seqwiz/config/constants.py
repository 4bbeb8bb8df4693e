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

"""Shared configuration defaults and lookup names for seqwiz."""

from __future__ import annotations

from typing import Final

from seqwiz._internal.logging_utils import LOG_FORMAT_ENV, LOG_LEVEL_ENV

CONFIG_VERSION: Final[int] = 0
CONFIG_FILENAMES: Final[tuple[str, ...]] = ("seqwiz.toml", ".seqwiz.toml", "pyproject.toml")
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
TOOL_SECTION: Final[str] = "seqwiz"

DUPLICATE_KEY_POLICY_ENV: Final[str] = "SEQWIZ_DUPLICATE_KEY_POLICY"

__all__ = [
    "CONFIG_FILENAMES",
    "CONFIG_VERSION",
    "DUPLICATE_KEY_POLICY_ENV",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "PYPROJECT_FILENAME",
    "TOOL_SECTION",
]
