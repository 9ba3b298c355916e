from __future__ import annotations

from typing import List

import regex

from .metrics import ADVERB_RE, PASSIVE_VOICE_RE
from .models import OptimizationSuggestion
from .patterns import TextPatterns
from .tokenization import WORD_RE

SENTENCE_LENGTH = "sentence_length"
PASSIVE_VOICE = "passive_voice"
ADVERB_USAGE = "adverb_usage"

PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"

LONG_SENTENCE_MESSAGE = (
    "Consider breaking this long sentence into shorter ones for better readability."
)
PASSIVE_VOICE_MESSAGE = "Consider using active voice for more engaging writing."
ADVERB_MESSAGE = "Consider using stronger verbs instead of adverbs."


def find_long_sentences(
    text: str,
    *,
    word_pattern: regex.Pattern[str] = WORD_RE,
    word_limit: int = 25,
    position_stride: int = 50,
) -> List[OptimizationSuggestion]:
    """
    Flag period-delimited fragments with more than ``word_limit`` words.

    Fragments come from a literal split on ``.``, not from the sentence
    tokenizer. Positions are approximate: fragment ``i`` is reported as
    ``[i * position_stride, (i + 1) * position_stride)``, which consumers
    rely on and which does not correspond to real character offsets.
    """
    suggestions: List[OptimizationSuggestion] = []
    for index, fragment in enumerate(text.split(".")):
        word_count = sum(1 for _ in word_pattern.finditer(fragment))
        if word_count > word_limit:
            suggestions.append(
                OptimizationSuggestion(
                    suggestion_type=SENTENCE_LENGTH,
                    priority=PRIORITY_MEDIUM,
                    message=LONG_SENTENCE_MESSAGE,
                    start_pos=index * position_stride,
                    end_pos=(index + 1) * position_stride,
                )
            )
    return suggestions


def find_passive_voice(
    text: str, pattern: regex.Pattern[str] = PASSIVE_VOICE_RE
) -> List[OptimizationSuggestion]:
    """Flag every auxiliary + ``-ed`` match with its exact offsets."""
    return _suggest_matches(
        text, pattern, PASSIVE_VOICE, PRIORITY_LOW, PASSIVE_VOICE_MESSAGE
    )


def find_adverbs(
    text: str, pattern: regex.Pattern[str] = ADVERB_RE
) -> List[OptimizationSuggestion]:
    """Flag every ``-ly`` word with its exact offsets."""
    return _suggest_matches(text, pattern, ADVERB_USAGE, PRIORITY_LOW, ADVERB_MESSAGE)


def generate_suggestions(
    text: str,
    patterns: TextPatterns,
    *,
    long_sentence_word_limit: int = 25,
    position_stride: int = 50,
) -> List[OptimizationSuggestion]:
    """Run all scans; results are grouped long-sentence, passive, then adverb."""
    suggestions = find_long_sentences(
        text,
        word_pattern=patterns.word,
        word_limit=long_sentence_word_limit,
        position_stride=position_stride,
    )
    suggestions.extend(find_passive_voice(text, patterns.passive_voice))
    suggestions.extend(find_adverbs(text, patterns.adverb))
    return suggestions


def _suggest_matches(
    text: str,
    pattern: regex.Pattern[str],
    suggestion_type: str,
    priority: str,
    message: str,
) -> List[OptimizationSuggestion]:
    return [
        OptimizationSuggestion(
            suggestion_type=suggestion_type,
            priority=priority,
            message=message,
            start_pos=match.start(),
            end_pos=match.end(),
        )
        for match in pattern.finditer(text)
    ]
