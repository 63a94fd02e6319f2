# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Tests for the randomised alternating-case transform."""

from __future__ import annotations

import random
from collections.abc import Iterable

import pytest

from transform_text.transforms import RandomSource, sarcastic_spongebob
from transform_text.transforms.sarcastic import is_cased_letter


class ScriptedRandom:
    """Random source replaying a fixed list of values."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = iter(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)


def _case_counts(text: str) -> tuple[int, int]:
    upper = sum(1 for char in text if is_cased_letter(char) and char.isupper())
    lower = sum(1 for char in text if is_cased_letter(char) and char.islower())
    return upper, lower


def test_scripted_random_satisfies_protocol() -> None:
    assert isinstance(ScriptedRandom([]), RandomSource)
    assert isinstance(random.Random(), RandomSource)


def test_lower_quota_exhausted_forces_uppercase() -> None:
    source = ScriptedRandom([0.9, 0.9])
    assert sarcastic_spongebob("abcd", rng=source) == "abCD"
    assert source.calls == 2


def test_upper_quota_exhausted_forces_lowercase() -> None:
    source = ScriptedRandom([0.1, 0.1])
    assert sarcastic_spongebob("abcd", rng=source) == "ABcd"
    assert source.calls == 2


def test_single_letter_is_uppercased() -> None:
    assert sarcastic_spongebob("a", rng=ScriptedRandom([])) == "A"


@pytest.mark.parametrize("seed", range(20))
def test_case_split_is_exact(seed: int) -> None:
    text = "The quick brown fox, 42 times!"
    result = sarcastic_spongebob(text, rng=random.Random(seed))
    assert len(result) == len(text)
    assert result.lower() == text.lower()
    letters = sum(1 for char in text if is_cased_letter(char))
    assert _case_counts(result) == ((letters + 1) // 2, letters // 2)


@pytest.mark.parametrize("seed", range(10))
def test_lowercase_input_always_changes(seed: int) -> None:
    assert sarcastic_spongebob("hello world", rng=random.Random(seed)) != "hello world"


def test_non_letters_are_kept_in_place() -> None:
    result = sarcastic_spongebob("a-1 b!", rng=random.Random(0))
    assert result[1:4] == "-1 "
    assert result[5] == "!"


def test_uncased_characters_pass_through() -> None:
    assert sarcastic_spongebob("ßa", rng=ScriptedRandom([])) == "ßA"
    assert sarcastic_spongebob("日本", rng=ScriptedRandom([])) == "日本"


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("text", ["ſun", "ıi", "µm", "λόγος", "Straße", "İstanbul"])
def test_lowercase_form_is_preserved_for_irregular_letters(text: str, seed: int) -> None:
    result = sarcastic_spongebob(text, rng=random.Random(seed))
    assert len(result) == len(text)
    assert result.lower() == text.lower()


def test_letters_without_round_trip_pass_through() -> None:
    assert sarcastic_spongebob("ſıµ", rng=ScriptedRandom([])) == "ſıµ"


def test_empty_input() -> None:
    assert sarcastic_spongebob("") == ""


def test_seeded_runs_are_reproducible() -> None:
    text = "reproducible output please"
    first = sarcastic_spongebob(text, rng=random.Random(7))
    second = sarcastic_spongebob(text, rng=random.Random(7))
    assert first == second


def test_default_source_keeps_quota() -> None:
    result = sarcastic_spongebob("abcdef")
    assert _case_counts(result) == (3, 3)


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("a", True),
        ("Z", True),
        ("é", True),
        ("ß", False),
        ("ı", False),
        ("ſ", False),
        ("µ", False),
        ("ς", False),
        ("1", False),
        (" ", False),
        ("日", False),
    ],
)
def test_is_cased_letter(char: str, expected: bool) -> None:
    assert is_cased_letter(char) is expected
