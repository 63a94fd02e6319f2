# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Pure text transformation rules exposed through the tool catalog."""

from __future__ import annotations

from .casing import lowercase, sentence_case, uppercase
from .compound import camel_case, kebab_case, pascal_case, snake_case
from .newlines import escape_newlines, unescape_newlines
from .sarcastic import RandomSource, sarcastic_spongebob
from .titles import title_case, title_case_ap, title_case_mla

__all__ = [
    "RandomSource",
    "camel_case",
    "escape_newlines",
    "kebab_case",
    "lowercase",
    "pascal_case",
    "sarcastic_spongebob",
    "sentence_case",
    "snake_case",
    "title_case",
    "title_case_ap",
    "title_case_mla",
    "unescape_newlines",
    "uppercase",
]
