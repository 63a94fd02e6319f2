# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Apply a single catalog tool to some text."""

from __future__ import annotations

import random
from pathlib import Path

import typer

from ..catalog import ToolCatalog
from ..config import Config
from .rendering import unknown_tool_message
from .shared import CLIError, CLILogger

UNKNOWN_TOOL_EXIT_CODE = 2


def read_input(text: str | None, file: Path | None) -> str:
    """Return the text to transform from the argument, a file or stdin.

    Args:
        text: Positional text argument, if given.
        file: ``--file`` option, if given.

    Returns:
        str: Input text.

    Raises:
        CLIError: If both sources are given or the file cannot be read.
    """

    if text is not None and file is not None:
        raise CLIError("Pass either TEXT or --file, not both")
    if text is not None:
        return text
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as exc:
            raise CLIError(f"Unable to read {file}: {exc.strerror or exc}") from exc
    return typer.get_text_stream("stdin").read()


def run_apply(
    selection_key: str,
    text: str,
    *,
    catalog: ToolCatalog,
    config: Config,
    logger: CLILogger,
) -> int:
    """Transform ``text`` with the tool registered as ``selection_key``.

    Args:
        selection_key: Catalog key of the tool to run.
        text: Input text.
        catalog: Catalog to resolve the key against.
        config: Effective configuration (``seed`` drives stochastic tools).
        logger: CLI logger used for output.

    Returns:
        int: ``0`` on success, ``2`` when the key is unknown.
    """

    entry = catalog.try_get(selection_key)
    if entry is None:
        logger.warn(unknown_tool_message(selection_key, catalog))
        return UNKNOWN_TOOL_EXIT_CODE
    rng = random.Random(config.seed) if config.seed is not None else None
    logger.debug(f"tool={entry.selection_key} chars={len(text)}")
    logger.echo(entry.apply(text, rng=rng))
    return 0


__all__ = ["UNKNOWN_TOOL_EXIT_CODE", "read_input", "run_apply"]
