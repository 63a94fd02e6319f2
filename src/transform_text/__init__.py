# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Text transformation rules, the tool catalog that exposes them, and a CLI."""

from __future__ import annotations

from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version("transform-text")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
