# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Rendering helpers shared by the CLI commands."""

from __future__ import annotations

from rich import box
from rich.table import Table

from ..catalog import ToolCatalog


def build_tools_table(catalog: ToolCatalog) -> Table:
    """Return a rich table listing the catalog in presentation order.

    Args:
        catalog: Catalog to describe.

    Returns:
        Table: Rich table with one row per tool.
    """

    table = Table(title="Available tools", box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Tool", style="bold")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Description", overflow="fold")
    for position, entry in enumerate(catalog, start=1):
        table.add_row(str(position), entry.display_label, entry.selection_key, entry.description or "-")
    return table


def unknown_tool_message(selection_key: str, catalog: ToolCatalog) -> str:
    """Return the warning shown when ``selection_key`` is not registered.

    Args:
        selection_key: Key supplied by the user.
        catalog: Catalog the key was looked up in.

    Returns:
        str: Message naming the valid keys.
    """

    return f"Unknown tool: {selection_key}. Available tools: {', '.join(catalog.keys())}"


__all__ = ["build_tools_table", "unknown_tool_message"]
