# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Compound identifier converters (snake_case, kebab-case, PascalCase, camelCase).

Every converter runs the same pipeline:

1. insert a break between a lowercase letter or digit and a following
   uppercase letter (``helloWorld`` -> ``hello World``);
2. strip noise, keeping letters, digits, whitespace, ``-`` and ``_``;
3. collapse whitespace/hyphen/underscore runs into the target separator, or
   split them into words for PascalCase and camelCase;
4. trim separators from both ends;
5. apply the target casing.

Letters and digits are matched in the Unicode sense, so ``"naïve café"``
becomes ``naïve_café``. PascalCase keeps all-caps words of two or more letters
verbatim so acronyms such as ``API`` survive; camelCase relies on that when it
lowercases the leading word.
"""

from __future__ import annotations

import re
from typing import Final

# a letter or digit, with the following letter captured by the lookahead
_ADJACENT_PAIR: Final[re.Pattern[str]] = re.compile(r"([^\W_])(?=([^\W\d_]))")
_NOISE: Final[re.Pattern[str]] = re.compile(r"[^\w\s-]+")
_SEPARATOR_RUN: Final[re.Pattern[str]] = re.compile(r"[\s_-]+")

SNAKE_SEPARATOR: Final[str] = "_"
KEBAB_SEPARATOR: Final[str] = "-"


def _break_case_change(match: re.Match[str]) -> str:
    current, following = match.group(1), match.group(2)
    if (current.islower() or current.isdigit()) and following.isupper():
        return f"{current} "
    return current


def _prepare(text: str) -> str:
    """Run the boundary-insertion and noise-stripping steps shared by all converters."""

    spaced = _ADJACENT_PAIR.sub(_break_case_change, text)
    return _NOISE.sub("", spaced)


def _join_lower(text: str, separator: str) -> str:
    collapsed = _SEPARATOR_RUN.sub(separator, _prepare(text))
    return collapsed.strip(separator).lower()

def split_words(text: str) -> list[str]:
    """Split ``text`` into the words used by PascalCase and camelCase.

    Args:
        text: Free-form text or an identifier in any supported casing.

    Returns:
        list[str]: Non-empty words in their original casing.
    """

    return [word for word in _SEPARATOR_RUN.split(_prepare(text).strip()) if word]


def capitalize_word(word: str) -> str:
    """Return ``word`` with an uppercase first letter, preserving acronyms.

    Args:
        word: Single word produced by :func:`split_words`.

    Returns:
        str: ``word`` unchanged when it is an all-caps acronym, otherwise the
        word with its first character upper-cased and the rest lower-cased.
    """

    if len(word) >= 2 and word.isalpha() and word.isupper():
        return word
    return word[:1].upper() + word[1:].lower()


def _leading_word_length(word: str) -> int:
    """Return the length of the capitalised word or acronym that starts ``word``.

    An uppercase run followed by a lowercase letter gives up its last letter to
    the next word (``APIKey`` -> ``API``). The result is ``0`` when ``word``
    does not start with an uppercase letter.
    """

    run = 0
    while run < len(word) and word[run].isupper():
        run += 1
    if run > 1 and run < len(word) and word[run].islower():
        return run - 1
    return run


def snake_case(text: str) -> str:
    """Convert ``text`` to ``snake_case``."""

    return _join_lower(text, SNAKE_SEPARATOR)


def kebab_case(text: str) -> str:
    """Convert ``text`` to ``kebab-case``."""

    return _join_lower(text, KEBAB_SEPARATOR)


def pascal_case(text: str) -> str:
    """Convert ``text`` to ``PascalCase``.

    Args:
        text: Free-form text or an identifier in any supported casing.

    Returns:
        str: Concatenated capitalised words; acronyms are kept verbatim.
    """

    return "".join(capitalize_word(word) for word in split_words(text))


def camel_case(text: str) -> str:
    """Convert ``text`` to ``camelCase``.

    The PascalCase form is re-tokenised so a leading acronym is lowered as a
    whole (``"API key"`` -> ``"apiKey"``) while later tokens are untouched.

    Args:
        text: Free-form text or an identifier in any supported casing.

    Returns:
        str: camelCase rendering of ``text``.
    """

    pascal = pascal_case(text)
    split = _leading_word_length(pascal)
    return pascal[:split].lower() + pascal[split:]


__all__ = [
    "KEBAB_SEPARATOR",
    "SNAKE_SEPARATOR",
    "camel_case",
    "capitalize_word",
    "kebab_case",
    "pascal_case",
    "snake_case",
    "split_words",
]
