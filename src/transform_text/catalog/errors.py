# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Custom exceptions raised by tool catalog operations."""

from __future__ import annotations


class CatalogIntegrityError(RuntimeError):
    """Raised when catalog data violates semantic invariants."""

    def __init__(self, message: str | None = None) -> None:
        """Create the integrity error with an optional ``message``.

        Args:
            message: Human-readable description of the violation.
        """

        super().__init__(message or "catalog integrity violation")


class CatalogValidationError(RuntimeError):
    """Raised when a catalog document fails structural schema validation."""


__all__ = ("CatalogIntegrityError", "CatalogValidationError")
