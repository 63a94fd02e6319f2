# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Whole-string case conversions."""

from __future__ import annotations


def uppercase(text: str) -> str:
    """Return ``text`` converted to uppercase."""

    return text.upper()


def lowercase(text: str) -> str:
    """Return ``text`` converted to lowercase."""

    return text.lower()


def sentence_case(text: str) -> str:
    """Capitalise the first character and lowercase everything after it.

    Surrounding whitespace is removed first. The remainder is lowercased as a
    single sentence, including text after sentence-ending punctuation.

    Args:
        text: Text to convert.

    Returns:
        str: Sentence-cased text, or an empty string for blank input.
    """

    stripped = text.strip()
    if not stripped:
        return ""
    return stripped[0].upper() + stripped[1:].lower()


__all__ = ["lowercase", "sentence_case", "uppercase"]
