# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Tool catalog: ordered selection keys, display labels and rules."""

from __future__ import annotations

from .errors import CatalogIntegrityError, CatalogValidationError
from .loader import ToolCatalogLoader, default_catalog, load_catalog, resolve_callable
from .model import ToolCatalog, ToolEntry, TransformationRule

__all__ = (
    "CatalogIntegrityError",
    "CatalogValidationError",
    "ToolCatalog",
    "ToolCatalogLoader",
    "ToolEntry",
    "TransformationRule",
    "default_catalog",
    "load_catalog",
    "resolve_callable",
)
