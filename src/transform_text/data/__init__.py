# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Bundled catalog document and JSON schema."""
