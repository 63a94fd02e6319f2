# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Configuration model and loaders for transform-text.

Values are merged from, in increasing priority: built-in defaults, the
``[tool.transform-text]`` table of ``pyproject.toml``, ``TRANSFORM_TEXT_*``
environment variables and explicit overrides supplied by the CLI.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, ValidationError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "transform-text"

ENV_CATALOG: Final[str] = "TRANSFORM_TEXT_CATALOG"
ENV_SEED: Final[str] = "TRANSFORM_TEXT_SEED"
ENV_NO_EMOJI: Final[str] = "TRANSFORM_TEXT_NO_EMOJI"
ENV_NO_COLOR: Final[str] = "TRANSFORM_TEXT_NO_COLOR"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class Config(BaseModel):
    """Resolved runtime configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    catalog_path: Path | None = None
    use_emoji: bool = True
    use_color: bool = True
    seed: int | None = None

    def with_overrides(self, **overrides: Any) -> Config:
        """Return a copy with every non-``None`` override applied.

        Args:
            **overrides: Field values supplied by the caller.

        Returns:
            Config: Updated configuration.

        Raises:
            ConfigError: If an override names an unknown field or has an invalid value.
        """

        updates = {key: value for key, value in overrides.items() if value is not None}
        return _validate({**self.model_dump(), **updates}, source="overrides")


def _validate(payload: Mapping[str, Any], *, source: str) -> Config:
    try:
        return Config.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration from {source}: {exc}") from exc


def read_pyproject(root: Path) -> dict[str, Any]:
    """Return the ``[tool.transform-text]`` table of ``root/pyproject.toml``.

    Args:
        root: Project directory that may contain ``pyproject.toml``.

    Returns:
        dict[str, Any]: Section contents with dashes in keys normalised to
        underscores and ``catalog_path`` resolved against ``root``; empty when
        the file or section is absent.

    Raises:
        ConfigError: If the file is not valid TOML or the section is not a table.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    section = data.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_SECTION_KEY}] must be a table")
    normalised = {str(key).replace("-", "_"): value for key, value in section.items()}
    catalog = normalised.get("catalog_path")
    if isinstance(catalog, str):
        candidate = Path(catalog)
        normalised["catalog_path"] = candidate if candidate.is_absolute() else root / candidate
    return normalised


def read_environment(env: Mapping[str, str]) -> dict[str, Any]:
    """Translate ``TRANSFORM_TEXT_*`` variables into configuration fields.

    Args:
        env: Environment mapping to inspect.

    Returns:
        dict[str, Any]: Fields set by the environment.
    """

    values: dict[str, Any] = {}
    if catalog := env.get(ENV_CATALOG):
        values["catalog_path"] = Path(catalog)
    if seed := env.get(ENV_SEED):
        values["seed"] = seed
    if env.get(ENV_NO_EMOJI, "").strip().lower() in _TRUTHY:
        values["use_emoji"] = False
    if env.get(ENV_NO_COLOR, "").strip().lower() in _TRUTHY:
        values["use_color"] = False
    return values


def load_config(root: Path | None = None, *, env: Mapping[str, str] | None = None) -> Config:
    """Load configuration for ``root`` merging pyproject and environment sources.

    Args:
        root: Project directory; defaults to the current working directory.
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If any source provides invalid values.
    """

    project_root = (root or Path.cwd()).resolve()
    payload: dict[str, Any] = Config().model_dump()
    payload.update(read_pyproject(project_root))
    payload.update(read_environment(os.environ if env is None else env))
    return _validate(payload, source=str(project_root))


__all__ = [
    "ENV_CATALOG",
    "ENV_NO_COLOR",
    "ENV_NO_EMOJI",
    "ENV_SEED",
    "Config",
    "ConfigError",
    "load_config",
    "read_environment",
    "read_pyproject",
]
