# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Interactive session state and its update cycle.

A front end keeps a single :class:`SessionState`, feeds user actions to
:func:`update` as events and renders whatever state comes back. The state is
immutable and serialises to plain JSON types, so it can be stored or sent
across a process boundary. Clipboard access stays with the front end: it
reports the outcome through :class:`CopyCompleted`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, Final, TypeAlias

from .catalog import ToolCatalog
from .transforms import RandomSource

LOGGER = logging.getLogger(__name__)

NOTHING_TO_COPY: Final[str] = "Nothing to copy"
COPY_SUCCEEDED: Final[str] = "Text copied to clipboard"


class CopyStatusKind(StrEnum):
    """Severity of a copy status message."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class CopyStatus:
    """Outcome message shown after a copy attempt."""

    kind: CopyStatusKind
    text: str


@dataclass(frozen=True, slots=True)
class SessionState:
    """Complete view state for one interactive session."""

    input_text: str = ""
    result: str = ""
    copy_status: CopyStatus | None = None
    notice: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation of the state.

        Returns:
            dict[str, Any]: Plain mapping accepted by :meth:`from_dict`.
        """

        status = None
        if self.copy_status is not None:
            status = {"kind": self.copy_status.kind.value, "text": self.copy_status.text}
        return {
            "input_text": self.input_text,
            "result": self.result,
            "copy_status": status,
            "notice": self.notice,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SessionState:
        """Rebuild a state produced by :meth:`to_dict`.

        Args:
            data: Mapping previously produced by :meth:`to_dict`.

        Returns:
            SessionState: Restored state.
        """

        raw_status = data.get("copy_status")
        status = None
        if raw_status is not None:
            status = CopyStatus(kind=CopyStatusKind(raw_status["kind"]), text=str(raw_status["text"]))
        return cls(
            input_text=str(data.get("input_text", "")),
            result=str(data.get("result", "")),
            copy_status=status,
            notice=data.get("notice"),
        )


@dataclass(frozen=True, slots=True)
class InputChanged:
    """The user edited the input text."""

    text: str


@dataclass(frozen=True, slots=True)
class ToolSelected:
    """The user picked a transformation."""

    selection_key: str


@dataclass(frozen=True, slots=True)
class CopyRequested:
    """The user asked to copy the current result."""


@dataclass(frozen=True, slots=True)
class CopyCompleted:
    """The front end finished a clipboard write; ``error`` is set on failure."""

    error: str | None = None


@dataclass(frozen=True, slots=True)
class StatusCleared:
    """Transient messages expired."""


SessionEvent: TypeAlias = InputChanged | ToolSelected | CopyRequested | CopyCompleted | StatusCleared


def update(
    state: SessionState,
    event: SessionEvent,
    *,
    catalog: ToolCatalog,
    rng: RandomSource | None = None,
) -> SessionState:
    """Return the state that follows ``state`` once ``event`` is applied.

    Args:
        state: Current session state.
        event: User or front-end event to apply.
        catalog: Catalog used to resolve selected tools.
        rng: Optional random source for stochastic tools.

    Returns:
        SessionState: New state; ``state`` itself is never modified.

    Raises:
        TypeError: If ``event`` is not a recognised session event.
    """

    if isinstance(event, InputChanged):
        return replace(state, input_text=event.text)
    if isinstance(event, ToolSelected):
        entry = catalog.lookup(event.selection_key)
        if entry is None:
            return replace(state, notice=f"Unknown tool: {event.selection_key}")
        return replace(state, result=entry.apply(state.input_text, rng=rng), notice=None)
    if isinstance(event, CopyRequested):
        if not state.result:
            return replace(state, copy_status=CopyStatus(CopyStatusKind.WARNING, NOTHING_TO_COPY))
        return state
    if isinstance(event, CopyCompleted):
        if event.error is None:
            return replace(state, copy_status=CopyStatus(CopyStatusKind.SUCCESS, COPY_SUCCEEDED))
        LOGGER.debug("Clipboard write failed: %s", event.error)
        return replace(
            state,
            copy_status=CopyStatus(CopyStatusKind.ERROR, f"Unable to copy text: {event.error}"),
        )
    if isinstance(event, StatusCleared):
        return replace(state, copy_status=None, notice=None)
    raise TypeError(f"Unsupported session event: {event!r}")


__all__ = [
    "COPY_SUCCEEDED",
    "NOTHING_TO_COPY",
    "CopyCompleted",
    "CopyRequested",
    "CopyStatus",
    "CopyStatusKind",
    "InputChanged",
    "SessionEvent",
    "SessionState",
    "StatusCleared",
    "ToolSelected",
    "update",
]
