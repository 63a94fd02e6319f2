# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""List the tools offered by the active catalog."""

from __future__ import annotations

from ..catalog import ToolCatalog
from .rendering import build_tools_table
from .shared import CLILogger


def run_tools(*, catalog: ToolCatalog, logger: CLILogger) -> int:
    """Render the catalog as a table.

    Args:
        catalog: Catalog to list.
        logger: CLI logger whose console receives the table.

    Returns:
        int: ``0`` when tools were listed, ``1`` for an empty catalog.
    """

    if not len(catalog):
        logger.warn("The catalog does not define any tools")
        return 1
    logger.console.print(build_tools_table(catalog))
    return 0


__all__ = ["run_tools"]
