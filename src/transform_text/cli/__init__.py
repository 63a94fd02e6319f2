# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Command-line interface for transform-text."""

from __future__ import annotations

from .app import app

__all__ = ["app"]
