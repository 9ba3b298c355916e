"""
Vowel-group syllable estimation.

This is a heuristic, not a dictionary lookup. Each run of vowels (a, e, i,
o, u, y in either case) counts as one syllable, a trailing ``e`` is treated
as silent when the word has more than one group, and every word has at
least one syllable. Words such as "simile" (estimated at 2) or "rhythm"
(estimated at 1) come out wrong, and callers should expect that.
"""

from __future__ import annotations

from typing import Sequence

VOWELS = frozenset("aeiouyAEIOUY")


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in a single word."""
    count = 0
    prev_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not prev_was_vowel:
            count += 1
        prev_was_vowel = is_vowel

    if word.endswith("e") and count > 1:
        count -= 1

    return max(count, 1)


def average_syllables(words: Sequence[str]) -> float:
    """Mean syllable estimate over words, 0.0 for an empty sequence."""
    if not words:
        return 0.0
    return sum(count_syllables(word) for word in words) / len(words)
