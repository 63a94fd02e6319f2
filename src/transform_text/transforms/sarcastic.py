# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""Randomised alternating case ("Sarcastic SpongeBob")."""

from __future__ import annotations

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Minimal random interface consumed by :func:`sarcastic_spongebob`."""

    def random(self) -> float:
        """Return a float uniformly drawn from ``[0.0, 1.0)``.

        Returns:
            float: Next random value.
        """
        ...


def is_cased_letter(char: str) -> bool:
    """Return ``True`` when ``char`` has distinct one-character upper and lower forms.

    Letters such as ``ß`` (upper-cases to ``SS``) or CJK ideographs (no case)
    are excluded so the output keeps the input length and the case split
    stays exact. So are letters whose case mapping does not round-trip, such
    as dotless ``ı`` (``I`` lowers to ``i``), long ``ſ`` and the micro sign
    ``µ`` (upper-cases to Greek ``Μ``).

    Args:
        char: Single character to inspect.

    Returns:
        bool: ``True`` for letters whose case can be flipped in place.
    """

    if not char.isalpha():
        return False
    upper, lower = char.upper(), char.lower()
    if upper == lower or len(upper) != 1 or len(lower) != 1:
        return False
    return upper.lower() == lower and lower.upper() == upper


def sarcastic_spongebob(text: str, *, rng: RandomSource | None = None) -> str:
    """Randomly mix the case of the letters in ``text``.

    Exactly ``ceil(L / 2)`` of the ``L`` cased letters end up uppercase and
    ``floor(L / 2)`` lowercase. Each letter is decided by a fair coin flip
    until one of the two quotas is exhausted, after which the other case is
    forced. Every other character is returned unchanged in place.

    Args:
        text: Text to transform.
        rng: Optional random source; a fresh unseeded :class:`random.Random`
            is used when omitted.

    Returns:
        str: ``text`` with randomised letter casing.
    """

    source: RandomSource = rng if rng is not None else random.Random()
    letter_count = sum(1 for char in text if is_cased_letter(char))
    upper_cap = (letter_count + 1) // 2
    lower_cap = letter_count // 2
    upper_used = lower_used = 0

    output: list[str] = []
    for char in text:
        if not is_cased_letter(char):
            output.append(char)
            continue
        if upper_used >= upper_cap:
            make_upper = False
        elif lower_used >= lower_cap:
            make_upper = True
        else:
            make_upper = source.random() < 0.5
        if make_upper:
            upper_used += 1
            output.append(char.upper())
        else:
            lower_used += 1
            output.append(char.lower())
    return "".join(output)


__all__ = ["RandomSource", "is_cased_letter", "sarcastic_spongebob"]
