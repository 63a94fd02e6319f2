# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Tool catalog models mapping selection keys to transformation rules."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeAlias

from ..transforms.sarcastic import RandomSource
from .errors import CatalogIntegrityError

LOGGER = logging.getLogger(__name__)

TransformationRule: TypeAlias = Callable[..., str]


@dataclass(frozen=True, slots=True)
class ToolEntry:
    """Single catalog record pairing a display label with a transformation rule."""

    display_label: str
    selection_key: str
    rule: TransformationRule
    description: str = ""
    stochastic: bool = False

    def apply(self, text: str, *, rng: RandomSource | None = None) -> str:
        """Run the rule against ``text``.

        Args:
            text: Input text to transform.
            rng: Random source forwarded to stochastic rules; ignored otherwise.

        Returns:
            str: Transformed text.
        """

        if self.stochastic and rng is not None:
            return self.rule(text, rng=rng)
        return self.rule(text)


@dataclass(frozen=True, slots=True)
class ToolCatalog:
    """Ordered, read-only collection of :class:`ToolEntry` records.

    Iteration follows insertion order, which is also the presentation order
    used by user interfaces. Selection keys are unique. Lookups never raise:
    an unknown key yields ``None`` so callers can treat it as a no-op.
    """

    entries: tuple[ToolEntry, ...] = ()
    _by_key: MappingProxyType[str, ToolEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Index entries by selection key.

        Raises:
            CatalogIntegrityError: If two entries share a selection key.
        """

        ordered = tuple(self.entries)
        index: dict[str, ToolEntry] = {}
        for entry in ordered:
            if entry.selection_key in index:
                raise CatalogIntegrityError(
                    f"Duplicate selection key '{entry.selection_key}' detected in tool catalog",
                )
            index[entry.selection_key] = entry
        object.__setattr__(self, "entries", ordered)
        object.__setattr__(self, "_by_key", MappingProxyType(index))

    def __iter__(self) -> Iterator[ToolEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, selection_key: object) -> bool:
        return selection_key in self._by_key

    def keys(self) -> tuple[str, ...]:
        """Return selection keys in presentation order.

        Returns:
            tuple[str, ...]: Registered selection keys.
        """

        return tuple(entry.selection_key for entry in self.entries)

    def try_get(self, selection_key: str) -> ToolEntry | None:
        """Return the entry registered for ``selection_key`` or ``None``.

        Args:
            selection_key: Key identifying the tool.

        Returns:
            ToolEntry | None: Matching entry, or ``None`` when unknown.
        """

        return self._by_key.get(selection_key)

    def lookup(self, selection_key: str) -> ToolEntry | None:
        """Return the entry for ``selection_key``, logging a warning when it is unknown.

        Args:
            selection_key: Key identifying the tool.

        Returns:
            ToolEntry | None: Matching entry, or ``None`` when unknown.
        """

        entry = self.try_get(selection_key)
        if entry is None:
            LOGGER.warning("Unknown tool: %s", selection_key)
        return entry

    def transform(
        self,
        selection_key: str,
        text: str,
        *,
        rng: RandomSource | None = None,
    ) -> str | None:
        """Apply the tool registered for ``selection_key`` to ``text``.

        Args:
            selection_key: Key identifying the tool.
            text: Input text to transform.
            rng: Optional random source for stochastic tools.

        Returns:
            str | None: Transformed text, or ``None`` when no tool matches.
        """

        entry = self.lookup(selection_key)
        if entry is None:
            return None
        return entry.apply(text, rng=rng)

    def with_entries(self, extra: Sequence[ToolEntry]) -> ToolCatalog:
        """Return a new catalog with ``extra`` appended after the current entries.

        Args:
            extra: Additional records to register.

        Returns:
            ToolCatalog: New catalog; ``self`` is left untouched.
        """

        return ToolCatalog((*self.entries, *extra))


__all__ = ["ToolCatalog", "ToolEntry", "TransformationRule"]
