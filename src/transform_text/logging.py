# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""User-facing status messages rendered with rich.

Each message kind pairs an emoji prefix with a colour. Both are optional: the
prefix is dropped when emoji output is disabled and the colour when colour
output is disabled, leaving plain text that is safe to pipe.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.rule import Rule
from rich.text import Text


@dataclass(frozen=True, slots=True)
class MessageKind:
    """Presentation of one category of status message."""

    prefix: str
    style: str


INFO: Final[MessageKind] = MessageKind(prefix="ℹ️ ", style="cyan")
OK: Final[MessageKind] = MessageKind(prefix="✅ ", style="green")
WARN: Final[MessageKind] = MessageKind(prefix="⚠️ ", style="yellow")
FAIL: Final[MessageKind] = MessageKind(prefix="❌ ", style="red")


def build_console(*, color: bool, emoji: bool) -> Console:
    """Return a console writing to stdout with the given presentation flags.

    Args:
        color: Whether ANSI colour output is allowed.
        emoji: Whether rich may substitute emoji codes.

    Returns:
        Console: Console that never wraps long messages.
    """

    return Console(no_color=not color, highlight=False, emoji=emoji, soft_wrap=True)


def render_message(msg: str, kind: MessageKind, *, use_emoji: bool, use_color: bool) -> Text:
    """Return ``msg`` decorated for ``kind``.

    Args:
        msg: Message text.
        kind: Message category.
        use_emoji: Whether to prepend the emoji prefix.
        use_color: Whether to apply the category colour.

    Returns:
        Text: Renderable message; markup in ``msg`` is not interpreted.
    """

    text = Text(f"{kind.prefix}{msg}" if use_emoji else msg)
    if use_color:
        text.stylize(kind.style)
    return text


def emit(console: Console, msg: str, kind: MessageKind, *, use_emoji: bool, use_color: bool) -> None:
    """Print one status message to ``console``."""

    console.print(render_message(msg, kind, use_emoji=use_emoji, use_color=use_color))


def section(console: Console, title: str, *, use_color: bool) -> None:
    """Print a section header: a rule when colour is on, a dashed line otherwise."""

    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(Text(f"\n--- {title} ---"))


__all__ = [
    "FAIL",
    "INFO",
    "OK",
    "WARN",
    "MessageKind",
    "build_console",
    "emit",
    "render_message",
    "section",
]
