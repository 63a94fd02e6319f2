# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Escape and unescape line separators.

The pair is not a bijection: ``unescape_newlines`` cannot tell a literal
``\\n`` that was already present in the text from one it produced, and
``escape_newlines`` collapses mixed separator runs such as ``CRLF`` into a
single escape.
"""

from __future__ import annotations

import re
from typing import Final

NEWLINE_ESCAPE: Final[str] = "\\n"

# CR, LF, NEL, LINE SEPARATOR, PARAGRAPH SEPARATOR
_SEPARATORS: Final[str] = "\r\n\u0085\u2028\u2029"
_SEPARATOR_RUN: Final[re.Pattern[str]] = re.compile(f"[{_SEPARATORS}]+")


def escape_newlines(text: str) -> str:
    """Replace each run of line separators with the literal two-character ``\\n``.

    A run that ends the string is dropped rather than escaped.

    Args:
        text: Text whose line separators should be escaped.

    Returns:
        str: Single-line representation of ``text``.
    """

    trimmed = text.rstrip(_SEPARATORS)
    return _SEPARATOR_RUN.sub(lambda _match: NEWLINE_ESCAPE, trimmed)


def unescape_newlines(text: str) -> str:
    """Replace every literal ``\\n`` sequence with a line feed.

    Args:
        text: Text containing escaped newlines.

    Returns:
        str: Text with each escape converted to an actual newline.
    """

    return text.replace(NEWLINE_ESCAPE, "\n")


__all__ = ["NEWLINE_ESCAPE", "escape_newlines", "unescape_newlines"]
