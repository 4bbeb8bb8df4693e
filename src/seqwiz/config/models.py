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

"""Configuration models and validation for seqwiz.

Settings are validated with a Pydantic model when read from TOML or the
environment, then converted to a frozen dataclass for runtime use.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from seqwiz._internal.exceptions import SeqwizValidationError
from seqwiz.core.model_types import DuplicateKeyPolicy, LogFormat

from .constants import CONFIG_VERSION

if TYPE_CHECKING:
    from pathlib import Path

LogLevelName = Literal["debug", "info", "warning", "error"]


class ConfigValidationError(SeqwizValidationError):
    """Raised when configuration data contains invalid values."""


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of seqwiz.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid seqwiz configuration in {path}: {error}")


class SettingsModel(BaseModel):
    """Pydantic model for validating seqwiz settings from TOML or environment.

    Attributes:
        config_version: Schema version number for the configuration file.
        log_format: Output format used by ``configure_logging``.
        log_level: Verbosity used by ``configure_logging``.
        duplicate_key_policy: Default collision policy for mapping collectors.
    """

    model_config = ConfigDict(extra="forbid")

    config_version: int = Field(default=CONFIG_VERSION)
    log_format: LogFormat = Field(default=LogFormat.TEXT)
    log_level: LogLevelName = "info"
    duplicate_key_policy: DuplicateKeyPolicy = Field(default=DuplicateKeyPolicy.LAST_WINS)

    @field_validator("log_format", mode="before")
    @classmethod
    def _coerce_log_format(cls, value: object) -> object:
        if isinstance(value, str):
            return LogFormat.from_str(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("duplicate_key_policy", mode="before")
    @classmethod
    def _coerce_policy(cls, value: object) -> object:
        if isinstance(value, str):
            return DuplicateKeyPolicy.from_str(value)
        return value


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime view of validated seqwiz settings."""

    log_format: LogFormat = LogFormat.TEXT
    log_level: LogLevelName = "info"
    duplicate_key_policy: DuplicateKeyPolicy = DuplicateKeyPolicy.LAST_WINS


def settings_from_model(model: SettingsModel) -> Settings:
    """Convert a validated ``SettingsModel`` into runtime ``Settings``.

    Args:
        model: Model produced by ``SettingsModel.model_validate``.

    Returns:
        Frozen settings ready for runtime use.

    Raises:
        UnsupportedConfigVersionError: If the model declares an unknown schema
            version.
    """
    if model.config_version != CONFIG_VERSION:
        raise UnsupportedConfigVersionError(model.config_version, CONFIG_VERSION)
    return Settings(
        log_format=model.log_format,
        log_level=model.log_level,
        duplicate_key_policy=model.duplicate_key_policy,
    )


__all__ = [
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LogLevelName",
    "Settings",
    "SettingsModel",
    "UnsupportedConfigVersionError",
    "settings_from_model",
]
