# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Title casing following the MLA and AP style guides."""

from __future__ import annotations

from collections.abc import Collection
from typing import Final

MLA_STOP_WORDS: Final[frozenset[str]] = frozenset(
    {
        # articles
        "a",
        "an",
        "the",
        # coordinating conjunctions
        "and",
        "but",
        "or",
        "nor",
        "for",
        "so",
        "yet",
        # short prepositions
        "at",
        "by",
        "in",
        "of",
        "on",
        "to",
        "up",
        "via",
        "with",
        "over",
        "into",
        "onto",
        "off",
        "as",
    },
)

AP_STOP_WORDS: Final[frozenset[str]] = frozenset(
    {"a", "an", "the", "and", "but", "or", "nor", "for", "on", "to", "in", "at", "by"},
)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def title_case(text: str, stop_words: Collection[str]) -> str:
    """Title-case ``text`` word by word.

    The first and last words are always capitalised. Interior words found in
    ``stop_words`` (compared case-insensitively) are lowercased; every other
    word is capitalised with the remainder forced to lowercase, so acronyms
    are not preserved.

    Args:
        text: Text to convert. Whitespace runs collapse to single spaces.
        stop_words: Lowercase words kept lowercase when not first or last.

    Returns:
        str: Title-cased text, or an empty string for blank input.
    """

    words = text.split()
    last_index = len(words) - 1
    rendered: list[str] = []
    for index, word in enumerate(words):
        lowered = word.lower()
        if 0 < index < last_index and lowered in stop_words:
            rendered.append(lowered)
        else:
            rendered.append(_capitalize(word))
    return " ".join(rendered)


def title_case_mla(text: str) -> str:
    """Title-case ``text`` using the MLA (Chicago-like) stop-word set."""

    return title_case(text, MLA_STOP_WORDS)


def title_case_ap(text: str) -> str:
    """Title-case ``text`` using the narrower AP stop-word set."""

    return title_case(text, AP_STOP_WORDS)


__all__ = [
    "AP_STOP_WORDS",
    "MLA_STOP_WORDS",
    "title_case",
    "title_case_ap",
    "title_case_mla",
]
