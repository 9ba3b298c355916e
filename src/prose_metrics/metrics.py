from __future__ import annotations

from typing import Sequence

import regex

from .models import ComplexityMetrics, StyleMetrics
from .syllables import average_syllables, count_syllables

PASSIVE_VOICE_RE = regex.compile(r"\b(was|were|been|being)\s+\w+ed\b")
ADVERB_RE = regex.compile(r"\b\w+ly\b")
DIALOGUE_RE = regex.compile(r'"[^"]*"')

FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6
FOG_WEIGHT = 0.4


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 instead of failing when the denominator is zero."""
    if not denominator:
        return 0.0
    return float(numerator) / float(denominator)


def compute_complexity_metrics(
    words: Sequence[str],
    sentence_count: int,
    complex_word_syllables: int = 3,
) -> ComplexityMetrics:
    """Compute averages, Flesch reading ease and the Fog index for a word list."""
    word_count = len(words)
    avg_words_per_sentence = safe_ratio(word_count, sentence_count)
    avg_syllables_per_word = average_syllables(words)
    unique_words = {word.lower() for word in words}
    unique_word_ratio = safe_ratio(len(unique_words), word_count)

    flesch_reading_ease = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * avg_words_per_sentence
        - FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word
    )

    # Zero words means zero sentences too, so the index collapses to 0.0.
    complex_words = sum(
        1 for word in words if count_syllables(word) >= complex_word_syllables
    )
    fog_index = FOG_WEIGHT * (
        avg_words_per_sentence + 100.0 * safe_ratio(complex_words, word_count)
    )

    return ComplexityMetrics(
        avg_words_per_sentence=avg_words_per_sentence,
        avg_syllables_per_word=avg_syllables_per_word,
        fog_index=fog_index,
        flesch_reading_ease=flesch_reading_ease,
        unique_word_ratio=unique_word_ratio,
    )


def compute_style_metrics(
    text: str,
    word_count: int,
    sentence_count: int,
    paragraph_count: int,
    *,
    passive_voice_pattern: regex.Pattern[str] = PASSIVE_VOICE_RE,
    adverb_pattern: regex.Pattern[str] = ADVERB_RE,
    dialogue_pattern: regex.Pattern[str] = DIALOGUE_RE,
) -> StyleMetrics:
    """Count pattern matches over the raw text and normalize them."""
    passive_matches = _count_matches(passive_voice_pattern, text)
    adverb_matches = _count_matches(adverb_pattern, text)
    dialogue_matches = _count_matches(dialogue_pattern, text)

    return StyleMetrics(
        passive_voice_ratio=safe_ratio(passive_matches, sentence_count),
        adverb_ratio=safe_ratio(adverb_matches, word_count),
        dialogue_ratio=safe_ratio(dialogue_matches, paragraph_count),
        action_ratio=0.0,
        description_ratio=0.0,
    )


def _count_matches(pattern: regex.Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))
