# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Loader that validates catalog documents and materialises tool entries."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, cast

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from .errors import CatalogIntegrityError, CatalogValidationError
from .io import CATALOG_DOCUMENT, JSONValue, bundled_resource, load_document, load_schema
from .model import ToolCatalog, ToolEntry

LOGGER = logging.getLogger(__name__)


def resolve_callable(implementation: str, *, context: str) -> Callable[..., Any]:
    """Import the callable referenced by a dotted ``implementation`` path.

    Args:
        implementation: Dotted path such as ``"transform_text.transforms.snake_case"``.
        context: Human-readable context used in error messages.

    Returns:
        Callable[..., Any]: Imported callable.

    Raises:
        CatalogIntegrityError: If the module cannot be imported or the
            attribute is missing or not callable.
    """

    module_path, _, attribute_name = implementation.rpartition(".")
    if not module_path:
        raise CatalogIntegrityError(
            f"{context}: implementation '{implementation}' must include a module path",
        )
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise CatalogIntegrityError(f"{context}: unable to import module '{module_path}'") from exc
    attribute = getattr(module, attribute_name, None)
    if attribute is None:
        raise CatalogIntegrityError(f"{context}: module '{module_path}' has no attribute '{attribute_name}'")
    if not callable(attribute):
        raise CatalogIntegrityError(f"{context}: '{implementation}' is not callable")
    return cast(Callable[..., Any], attribute)


@dataclass(slots=True)
class ToolCatalogLoader:
    """Validate catalog documents against the bundled schema and build catalogs."""

    schema_path: Path | None = None
    _validator: Draft202012Validator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Compile the JSON schema validator."""

        self._validator = Draft202012Validator(load_schema(self.schema_path))

    def validate(self, document: Mapping[str, JSONValue], *, source: str) -> None:
        """Validate ``document`` against the catalog schema.

        Args:
            document: Parsed catalog document.
            source: Document location used in error messages.

        Raises:
            CatalogValidationError: When the document fails schema validation.
        """

        try:
            self._validator.validate(document)
        except JsonSchemaValidationError as exc:
            raise CatalogValidationError(f"{source}: {exc.message}") from exc

    def build(self, document: Mapping[str, JSONValue], *, source: str) -> ToolCatalog:
        """Validate ``document`` and convert it into a :class:`ToolCatalog`.

        Args:
            document: Parsed catalog document.
            source: Document location used in error messages.

        Returns:
            ToolCatalog: Catalog whose order mirrors the document.
        """

        self.validate(document, source=source)
        records = cast(list[Mapping[str, Any]], document["tools"])
        entries = []
        for position, record in enumerate(records):
            context = f"{source}: tools[{position}]"
            entries.append(
                ToolEntry(
                    display_label=record["label"],
                    selection_key=record["key"],
                    rule=resolve_callable(record["implementation"], context=context),
                    description=record.get("description", ""),
                    stochastic=record.get("stochastic", False),
                ),
            )
        catalog = ToolCatalog(tuple(entries))
        LOGGER.debug("Loaded %d tools from %s", len(catalog), source)
        return catalog

    def load(self, path: Path | Traversable) -> ToolCatalog:
        """Load, validate and build the catalog stored at ``path``.

        Args:
            path: Catalog document location.

        Returns:
            ToolCatalog: Materialised catalog.
        """

        return self.build(load_document(path), source=str(path))


def load_catalog(path: Path | None = None) -> ToolCatalog:
    """Load a catalog document, defaulting to the catalog bundled with the package.

    Args:
        path: Optional catalog document overriding the bundled one.

    Returns:
        ToolCatalog: Materialised catalog.
    """

    if path is None:
        return default_catalog()
    return ToolCatalogLoader().load(path)


@lru_cache(maxsize=1)
def default_catalog() -> ToolCatalog:
    """Return the cached catalog bundled with the package.

    Returns:
        ToolCatalog: Built-in tool catalog.
    """

    return ToolCatalogLoader().load(bundled_resource(CATALOG_DOCUMENT))


__all__ = ["ToolCatalogLoader", "default_catalog", "load_catalog", "resolve_callable"]
