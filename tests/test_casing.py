# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Tests for whole-string case conversions."""

from __future__ import annotations

import pytest

from transform_text.transforms import lowercase, sentence_case, uppercase


def test_uppercase_and_lowercase() -> None:
    assert uppercase("hello, World 42") == "HELLO, WORLD 42"
    assert lowercase("HELLO, World 42") == "hello, world 42"


def test_sentence_case_lowercases_remainder() -> None:
    assert sentence_case("HELLO WORLD") == "Hello world"


def test_sentence_case_trims_and_ignores_sentence_boundaries() -> None:
    assert sentence_case("  hi. THERE  ") == "Hi. there"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_sentence_case_blank_input(text: str) -> None:
    assert sentence_case(text) == ""


def test_sentence_case_non_letter_start() -> None:
    assert sentence_case("42 IS THE ANSWER") == "42 is the answer"
