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

"""Configuration loading for seqwiz.

Settings come from, in increasing precedence:

1. Built-in defaults.
2. The first of ``seqwiz.toml``, ``.seqwiz.toml`` or ``[tool.seqwiz]`` in
   ``pyproject.toml`` found in the search directory (or an explicit file).
3. ``SEQWIZ_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, cast

from pydantic import ValidationError

from seqwiz._internal.logging_utils import structured_extra
from seqwiz.compat import tomllib
from seqwiz.core.model_types import LogComponent

from .constants import (
    CONFIG_FILENAMES,
    DUPLICATE_KEY_POLICY_ENV,
    LOG_FORMAT_ENV,
    LOG_LEVEL_ENV,
    PYPROJECT_FILENAME,
    TOOL_SECTION,
)
from .models import (
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    Settings,
    SettingsModel,
    settings_from_model,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger("seqwiz.config")

_ENV_FIELDS: tuple[tuple[str, str], ...] = (
    (LOG_FORMAT_ENV, "log_format"),
    (LOG_LEVEL_ENV, "log_level"),
    (DUPLICATE_KEY_POLICY_ENV, "duplicate_key_policy"),
)


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for loaded settings and their source path.

    Attributes:
        settings: Parsed settings instance.
        path: Filesystem path the settings were loaded from, or None when
            defaults are used.
    """

    settings: Settings
    path: Path | None


def load_config(explicit_path: Path | None = None, *, search_dir: Path | None = None) -> Settings:
    """Load seqwiz settings from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file.
        search_dir: Directory searched when ``explicit_path`` is not given.
            Defaults to the current working directory.

    Returns:
        The resolved ``Settings``.
    """
    return load_config_with_metadata(explicit_path, search_dir=search_dir).settings


def load_config_with_metadata(
    explicit_path: Path | None = None,
    *,
    search_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LoadedConfig:
    """Load seqwiz settings together with the file they came from.

    Standalone files may hold settings at the top level or under
    ``[tool.seqwiz]``; ``pyproject.toml`` is only used when it has a
    ``[tool.seqwiz]`` table. Environment overrides are applied last.

    Args:
        explicit_path: Optional explicit path to a configuration file. If
            provided, only this file is checked and it must exist.
        search_dir: Directory searched when ``explicit_path`` is not given.
        environ: Environment mapping consulted for overrides. Defaults to
            ``os.environ``.

    Returns:
        LoadedConfig: Parsed settings and the path they originated from.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed.
        InvalidConfigFileError: If a candidate file fails validation.
        ConfigValidationError: If an environment override is invalid.
    """
    env = os.environ if environ is None else environ
    for candidate in _config_search_order(explicit_path, search_dir):
        payload = _load_candidate_payload(candidate, explicit=explicit_path is not None)
        if payload is None:
            continue
        try:
            model = SettingsModel.model_validate(payload)
        except ValidationError as exc:
            raise InvalidConfigFileError(candidate, exc) from exc
        resolved = candidate.resolve()
        logger.debug(
            "Loaded settings from %s",
            resolved,
            extra=structured_extra(component=LogComponent.CONFIG, operation="load", path=resolved),
        )
        return LoadedConfig(settings=_apply_env_overrides(model, env), path=resolved)

    return LoadedConfig(settings=_apply_env_overrides(SettingsModel(), env), path=None)


def _config_search_order(explicit_path: Path | None, search_dir: Path | None) -> list[Path]:
    if explicit_path is not None:
        return [explicit_path if explicit_path.is_absolute() else (Path.cwd() / explicit_path)]
    base_dir = search_dir if search_dir is not None else Path.cwd()
    return [base_dir / name for name in CONFIG_FILENAMES]


def _load_candidate_payload(candidate: Path, *, explicit: bool) -> dict[str, object] | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc
    return _extract_seqwiz_payload(candidate, raw_map)


def _extract_seqwiz_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the seqwiz configuration payload from a TOML mapping.

    Args:
        candidate: Source configuration path.
        raw_map: Data parsed from the TOML document.

    Returns:
        Mapping to validate, or None when a ``pyproject.toml`` carries no
        seqwiz section.

    Raises:
        InvalidConfigFileError: If ``[tool.seqwiz]`` exists but is not a table.
    """
    is_pyproject = candidate.name == PYPROJECT_FILENAME
    tool_section = raw_map.get("tool")
    if isinstance(tool_section, dict):
        section = cast("dict[str, object]", tool_section).get(TOOL_SECTION)
        if section is not None and not isinstance(section, dict):
            message = f"[tool.{TOOL_SECTION}] must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        if isinstance(section, dict):
            return cast("dict[str, object]", section)
    if is_pyproject:
        return None
    # standalone configs ignore unrelated tool entries
    return {key: value for key, value in raw_map.items() if key != "tool"}


def _apply_env_overrides(model: SettingsModel, environ: Mapping[str, str]) -> Settings:
    overrides = {field: environ[name] for name, field in _ENV_FIELDS if environ.get(name)}
    if not overrides:
        return settings_from_model(model)
    payload = {**model.model_dump(mode="python"), **overrides}
    try:
        merged = SettingsModel.model_validate(payload)
    except ValidationError as exc:
        names = ", ".join(sorted(name for name, field in _ENV_FIELDS if field in overrides))
        message = f"Invalid environment override ({names}): {exc}"
        raise ConfigValidationError(message) from exc
    return settings_from_model(merged)


__all__ = ["LoadedConfig", "load_config", "load_config_with_metadata"]
