# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Allow ``python -m transform_text``."""

from __future__ import annotations

from .cli.app import app

if __name__ == "__main__":
    app(prog_name="transform-text")
