# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""I/O helpers for reading catalog JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Final, TypeAlias, cast

from .errors import CatalogIntegrityError

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

DATA_PACKAGE: Final[str] = "transform_text.data"
CATALOG_DOCUMENT: Final[str] = "catalog.json"
CATALOG_SCHEMA: Final[str] = "catalog.schema.json"


def bundled_resource(name: str) -> Traversable:
    """Return a handle to a JSON resource shipped with the package.

    Args:
        name: File name inside the ``transform_text.data`` package.

    Returns:
        Traversable: Resource handle readable with ``open``.
    """

    return resources.files(DATA_PACKAGE).joinpath(name)


def load_document(path: Path | Traversable) -> Mapping[str, JSONValue]:
    """Load a JSON document and ensure it is a JSON object.

    Args:
        path: Filesystem path or package resource holding the document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the document does not exist.
        CatalogIntegrityError: If the document cannot be parsed or is not a JSON object.
    """

    if not path.is_file():
        raise FileNotFoundError(str(path))
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse catalog JSON") from exc
    if not isinstance(payload, Mapping):
        raise CatalogIntegrityError(f"{path}: expected a JSON object")
    return payload


def load_schema(path: Path | Traversable | None = None) -> Mapping[str, JSONValue]:
    """Load the catalog JSON schema, defaulting to the bundled copy.

    Args:
        path: Optional schema location overriding the bundled schema.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.
    """

    return load_document(path if path is not None else bundled_resource(CATALOG_SCHEMA))


__all__ = [
    "CATALOG_DOCUMENT",
    "CATALOG_SCHEMA",
    "JSONValue",
    "bundled_resource",
    "load_document",
    "load_schema",
]
