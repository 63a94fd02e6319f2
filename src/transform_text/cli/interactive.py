# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Prompt-driven session: enter text, choose tools, preview and copy the result."""

from __future__ import annotations

import random
from collections.abc import Callable

import typer

from ..catalog import ToolCatalog
from ..clipboard import ClipboardError, copy_to_clipboard
from ..config import Config
from ..session import (
    CopyCompleted,
    CopyRequested,
    CopyStatusKind,
    InputChanged,
    SessionState,
    StatusCleared,
    ToolSelected,
    update,
)
from .rendering import build_tools_table
from .shared import CLILogger

INPUT_PROMPT = "Step 1: Enter or paste your text"
CONTINUATION_PROMPT = "..."
TOOL_PROMPT = "Step 2: Choose an action (blank to finish)"
PREVIEW_TITLE = "Step 3: Preview the formatted text"
COPY_COMMAND = "copy"


def read_text_block() -> str:
    """Prompt for lines until an empty line and return them joined with ``\\n``.

    Returns:
        str: Entered text without the terminating empty line.
    """

    lines = [typer.prompt(INPUT_PROMPT)]
    while line := typer.prompt(CONTINUATION_PROMPT, default="", show_default=False):
        lines.append(line)
    return "\n".join(lines)


def _copy_result(state: SessionState, *, catalog: ToolCatalog, logger: CLILogger) -> SessionState:
    state = update(state, CopyRequested(), catalog=catalog)
    if state.copy_status is None:
        try:
            copy_to_clipboard(state.result)
        except ClipboardError as exc:
            state = update(state, CopyCompleted(error=str(exc)), catalog=catalog)
        else:
            state = update(state, CopyCompleted(), catalog=catalog)
    status = state.copy_status
    if status is not None:
        report: dict[CopyStatusKind, Callable[[str], None]] = {
            CopyStatusKind.SUCCESS: logger.ok,
            CopyStatusKind.WARNING: logger.warn,
            CopyStatusKind.ERROR: logger.fail,
        }
        report[status.kind](status.text)
    return update(state, StatusCleared(), catalog=catalog)


def run_interactive(*, catalog: ToolCatalog, config: Config, logger: CLILogger) -> SessionState:
    """Drive a :class:`SessionState` from terminal prompts until the user stops.

    The text may span several lines and ends at the first empty line. At the
    action prompt ``copy`` copies the current result instead of running a
    tool, so a catalog key named ``copy`` is not reachable from here.

    Args:
        catalog: Catalog offered to the user.
        config: Effective configuration (``seed`` drives stochastic tools).
        logger: CLI logger used for output.

    Returns:
        SessionState: Final session state.
    """

    rng = random.Random(config.seed) if config.seed is not None else None
    logger.info("Finish the text with an empty line")
    state = update(SessionState(), InputChanged(read_text_block()), catalog=catalog)
    logger.console.print(build_tools_table(catalog))
    logger.info(f"Type a key from the table, or '{COPY_COMMAND}' to copy the result")

    while True:
        selection_key = typer.prompt(TOOL_PROMPT, default="", show_default=False).strip()
        if not selection_key:
            break
        if selection_key == COPY_COMMAND:
            state = _copy_result(state, catalog=catalog, logger=logger)
            continue
        state = update(state, ToolSelected(selection_key), catalog=catalog, rng=rng)
        if state.notice:
            logger.warn(state.notice)
            state = update(state, StatusCleared(), catalog=catalog)
            continue
        logger.section(PREVIEW_TITLE)
        logger.echo(state.result)

    if state.result:
        logger.ok("Done")
    return state


__all__ = ["run_interactive"]
