# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest

from transform_text.catalog import ToolCatalog, default_catalog


@pytest.fixture
def catalog() -> ToolCatalog:
    """Return the catalog bundled with the package."""
    return default_catalog()


@pytest.fixture
def write_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a catalog document into ``tmp_path``."""

    def _write(tools: Sequence[Mapping[str, Any]], *, name: str = "catalog.json", **extra: Any) -> Path:
        document: dict[str, Any] = {"schemaVersion": "1.0.0", "tools": list(tools)}
        document.update(extra)
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer ``TRANSFORM_TEXT_*`` settings out of the tests."""
    for name in (
        "TRANSFORM_TEXT_CATALOG",
        "TRANSFORM_TEXT_SEED",
        "TRANSFORM_TEXT_NO_EMOJI",
        "TRANSFORM_TEXT_NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
