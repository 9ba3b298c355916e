from __future__ import annotations

from dataclasses import dataclass

import regex

from .config import EngineConfig


class PatternCompileError(ValueError):
    """Raised when a configured pattern is not a valid regular expression."""


@dataclass(slots=True, frozen=True)
class TextPatterns:
    """Compiled matchers shared read-only by every call on an engine."""

    word: regex.Pattern[str]
    sentence: regex.Pattern[str]
    paragraph: regex.Pattern[str]
    passive_voice: regex.Pattern[str]
    adverb: regex.Pattern[str]
    dialogue: regex.Pattern[str]


def compile_patterns(config: EngineConfig) -> TextPatterns:
    """Compile every pattern named by the config, failing on the first bad one."""
    return TextPatterns(
        word=_compile("word_pattern", config.word_pattern),
        sentence=_compile("sentence_pattern", config.sentence_pattern),
        paragraph=_compile("paragraph_pattern", config.paragraph_pattern),
        passive_voice=_compile("passive_voice_pattern", config.passive_voice_pattern),
        adverb=_compile("adverb_pattern", config.adverb_pattern),
        dialogue=_compile("dialogue_pattern", config.dialogue_pattern),
    )


def _compile(name: str, source: str) -> regex.Pattern[str]:
    try:
        return regex.compile(source)
    except regex.error as exc:
        raise PatternCompileError(f"Invalid {name} {source!r}: {exc}") from exc
