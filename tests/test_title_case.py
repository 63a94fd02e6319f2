# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Tests for MLA and AP title casing."""

from __future__ import annotations

import pytest

from transform_text.transforms import title_case, title_case_ap, title_case_mla
from transform_text.transforms.titles import AP_STOP_WORDS, MLA_STOP_WORDS

PANGRAM = "the quick brown fox jumps over the lazy dog"


def test_mla_keeps_over_lowercase() -> None:
    assert title_case_mla(PANGRAM) == "The Quick Brown Fox Jumps over the Lazy Dog"


def test_ap_capitalises_over() -> None:
    assert title_case_ap(PANGRAM) == "The Quick Brown Fox Jumps Over the Lazy Dog"


def test_styles_differ_on_short_prepositions() -> None:
    assert title_case_mla("a tale of two cities") == "A Tale of Two Cities"
    assert title_case_ap("a tale of two cities") == "A Tale Of Two Cities"


@pytest.mark.parametrize("convert", [title_case_mla, title_case_ap])
def test_last_word_is_always_capitalised(convert) -> None:
    assert convert("what are you looking at") == "What Are You Looking At"


@pytest.mark.parametrize("convert", [title_case_mla, title_case_ap])
def test_single_stop_word_is_capitalised(convert) -> None:
    assert convert("the") == "The"


def test_whitespace_is_collapsed_and_case_forced() -> None:
    assert title_case_mla("  the   LORD of   the rINGS  ") == "The Lord of the Rings"


def test_acronyms_are_not_preserved() -> None:
    assert title_case_ap("NASA and the moon") == "Nasa and the Moon"


@pytest.mark.parametrize("convert", [title_case_mla, title_case_ap])
def test_blank_input(convert) -> None:
    assert convert("") == ""
    assert convert(" \n ") == ""


def test_ap_set_is_narrower_than_mla() -> None:
    assert AP_STOP_WORDS <= MLA_STOP_WORDS
    assert "over" in MLA_STOP_WORDS - AP_STOP_WORDS


def test_title_case_accepts_custom_stop_words() -> None:
    assert title_case("war and peace and love", {"and"}) == "War and Peace and Love"
