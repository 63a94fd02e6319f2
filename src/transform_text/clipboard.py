# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Copy text to the system clipboard through a platform clipboard command."""

from __future__ import annotations

import shutil

# Bandit: the clipboard command comes from a fixed table and runs without a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from typing import Final

CLIPBOARD_COMMANDS: Final[tuple[tuple[str, ...], ...]] = (
    ("pbcopy",),
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("clip",),
)

COPY_TIMEOUT_SECONDS: Final[float] = 5.0


class ClipboardError(RuntimeError):
    """Raised when text could not be placed on the clipboard."""


def find_clipboard_command() -> tuple[str, ...] | None:
    """Return the first clipboard command available on ``PATH``.

    Returns:
        tuple[str, ...] | None: Command and arguments, or ``None`` when no
        supported clipboard tool is installed.
    """

    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is not None:
            return command
    return None


def copy_to_clipboard(text: str, *, command: Sequence[str] | None = None) -> None:
    """Feed ``text`` to a clipboard command on its standard input.

    Args:
        text: Text to copy.
        command: Explicit command; defaults to :func:`find_clipboard_command`.

    Raises:
        ClipboardError: If no command is available, it cannot be started, it
            times out or it exits with a non-zero status.
    """

    args = list(command) if command is not None else find_clipboard_command()
    if not args:
        raise ClipboardError("no clipboard command found")
    try:
        # Bandit: argument list without shell expansion.
        completed = subprocess.run(  # nosec B603
            list(args),
            input=text,
            text=True,
            capture_output=True,
            check=False,
            timeout=COPY_TIMEOUT_SECONDS,
        )
    except subprocess.TimeoutExpired as exc:
        raise ClipboardError(f"'{args[0]}' timed out after {COPY_TIMEOUT_SECONDS:.1f}s") from exc
    except OSError as exc:
        raise ClipboardError(f"unable to run '{args[0]}': {exc.strerror or exc}") from exc
    if completed.returncode != 0:
        detail = completed.stderr.strip() or "<no stderr>"
        raise ClipboardError(f"'{args[0]}' exited with status {completed.returncode}: {detail}")


__all__ = ["CLIPBOARD_COMMANDS", "ClipboardError", "copy_to_clipboard", "find_clipboard_command"]
