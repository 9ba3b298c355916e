from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .metrics import ADVERB_RE, DIALOGUE_RE, PASSIVE_VOICE_RE
from .tokenization import PARAGRAPH_SPLIT_RE, SENTENCE_SPLIT_RE, WORD_RE


@dataclass(slots=True, frozen=True)
class EngineConfig:
    """
    Configuration for a TextProcessor.

    The defaults are the canonical patterns and thresholds; results are only
    comparable across engines that share them. Frozen so an engine's
    thresholds cannot drift away from the patterns it compiled.
    """

    word_pattern: str = WORD_RE.pattern
    sentence_pattern: str = SENTENCE_SPLIT_RE.pattern
    paragraph_pattern: str = PARAGRAPH_SPLIT_RE.pattern
    passive_voice_pattern: str = PASSIVE_VOICE_RE.pattern
    adverb_pattern: str = ADVERB_RE.pattern
    dialogue_pattern: str = DIALOGUE_RE.pattern
    long_sentence_word_limit: int = 25
    position_stride: int = 50
    complex_word_syllables: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


PATTERN_FIELDS = frozenset(
    {
        "word_pattern",
        "sentence_pattern",
        "paragraph_pattern",
        "passive_voice_pattern",
        "adverb_pattern",
        "dialogue_pattern",
    }
)

# Smallest accepted value for each integer threshold.
THRESHOLD_MINIMUMS = {
    "long_sentence_word_limit": 0,
    "position_stride": 1,
    "complex_word_syllables": 1,
}


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EngineConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    for key, value in kwargs.items():
        if key in PATTERN_FIELDS:
            if not isinstance(value, str):
                raise ValueError(f"{key} must be a string, got {value!r}.")
        # bool is an int subclass but never a sensible threshold.
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{key} must be an integer, got {value!r}.")
        elif value < THRESHOLD_MINIMUMS[key]:
            raise ValueError(f"{key} must be at least {THRESHOLD_MINIMUMS[key]}, got {value}.")
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> EngineConfig:
    """Build an EngineConfig from a dictionary-like input, validating value types."""
    if data is None:
        return EngineConfig()
    return EngineConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EngineConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EngineConfig()
    return config_from_yaml(path)
