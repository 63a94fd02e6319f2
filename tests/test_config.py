# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Tests for configuration loading and precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from transform_text.config import Config, ConfigError, load_config, read_environment, read_pyproject


def _write_pyproject(root: Path, body: str) -> None:
    (root / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults_without_sources(tmp_path: Path) -> None:
    config = load_config(tmp_path, env={})
    assert config == Config()
    assert config.catalog_path is None
    assert config.use_emoji is True
    assert config.use_color is True
    assert config.seed is None


def test_pyproject_section_is_read(tmp_path: Path) -> None:
    _write_pyproject(
        tmp_path,
        '[tool.transform-text]\ncatalog-path = "tools/catalog.json"\nseed = 5\nuse-emoji = false\n',
    )
    config = load_config(tmp_path, env={})
    assert config.catalog_path == tmp_path.resolve() / "tools" / "catalog.json"
    assert config.seed == 5
    assert config.use_emoji is False


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[project]\nname = "other"\n')
    assert read_pyproject(tmp_path) == {}


def test_environment_overrides_pyproject(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, "[tool.transform-text]\nseed = 5\n")
    config = load_config(
        tmp_path,
        env={"TRANSFORM_TEXT_SEED": "9", "TRANSFORM_TEXT_NO_COLOR": "yes", "TRANSFORM_TEXT_NO_EMOJI": "0"},
    )
    assert config.seed == 9
    assert config.use_color is False
    assert config.use_emoji is True


def test_read_environment_catalog() -> None:
    assert read_environment({"TRANSFORM_TEXT_CATALOG": "/tmp/c.json"}) == {"catalog_path": Path("/tmp/c.json")}
    assert read_environment({}) == {}


def test_overrides_apply_and_skip_none() -> None:
    base = Config(seed=1)
    updated = base.with_overrides(seed=None, use_color=False)
    assert updated.seed == 1
    assert updated.use_color is False
    assert base.use_color is True


def test_invalid_seed_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path, env={"TRANSFORM_TEXT_SEED": "not-a-number"})


def test_unknown_pyproject_key_is_rejected(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, "[tool.transform-text]\ntheme = 'dark'\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})


def test_malformed_pyproject_raises_config_error(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, "[tool.transform-text\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path, env={})


def test_non_table_section_raises_config_error(tmp_path: Path) -> None:
    _write_pyproject(tmp_path, '[tool]\ntransform-text = "yes"\n')
    with pytest.raises(ConfigError, match="must be a table"):
        read_pyproject(tmp_path)


def test_config_is_frozen() -> None:
    config = Config()
    with pytest.raises(ValueError):
        config.seed = 3  # type: ignore[misc]
