from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


@dataclass(slots=True, frozen=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True, frozen=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(slots=True, frozen=True)
class ComplexityMetrics:
    """Sentence and word level difficulty measures."""

    avg_words_per_sentence: float
    avg_syllables_per_word: float
    fog_index: float
    flesch_reading_ease: float
    unique_word_ratio: float


@dataclass(slots=True, frozen=True)
class StyleMetrics:
    """
    Pattern-based stylistic ratios.

    ``action_ratio`` and ``description_ratio`` are placeholders and are
    always 0.0 until a real classifier exists for them.
    """

    passive_voice_ratio: float
    adverb_ratio: float
    dialogue_ratio: float
    action_ratio: float = 0.0
    description_ratio: float = 0.0


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Everything measured about a single block of text."""

    word_count: int
    character_count: int
    paragraph_count: int
    sentence_count: int
    readability_score: float
    complexity_metrics: ComplexityMetrics
    style_metrics: StyleMetrics
    content_hash: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary, nested metrics included."""
        return asdict(self)


@dataclass(slots=True, frozen=True)
class OptimizationSuggestion:
    """One heuristic finding over the text, with character offsets."""

    suggestion_type: str
    priority: str
    message: str
    start_pos: int
    end_pos: int
    suggested_replacement: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True, frozen=True)
class CollaborationConflict:
    """A pre-detected disagreement between two users' edits of the same span."""

    conflict_id: str
    conflict_type: str
    start_pos: int
    end_pos: int
    user_a_change: str
    user_b_change: str
    timestamp: str
    resolution_suggestion: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


CONFLICT_INT_FIELDS = frozenset({"start_pos", "end_pos"})


def conflict_from_dict(data: Mapping[str, Any]) -> CollaborationConflict:
    """
    Build a CollaborationConflict from a decoded JSON object.

    Unknown keys are ignored. Every field except ``resolution_suggestion``
    is required. Positions must be integers and every other field a string;
    a ValueError names the missing or mistyped fields.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Conflict must be an object, got {type(data).__name__}.")
    allowed = {field.name for field in fields(CollaborationConflict)}
    required = allowed - {"resolution_suggestion"}
    missing = sorted(required - set(data))
    if missing:
        raise ValueError(f"Conflict is missing required fields: {', '.join(missing)}")
    kwargs = {key: data[key] for key in data if key in allowed}
    mistyped = sorted(
        key for key, value in kwargs.items() if not _has_field_type(key, value)
    )
    if mistyped:
        raise ValueError(f"Conflict has mistyped fields: {', '.join(mistyped)}")
    return CollaborationConflict(**kwargs)


def _has_field_type(name: str, value: Any) -> bool:
    if name in CONFLICT_INT_FIELDS:
        # JSON true/false decode to bool, which is an int subclass.
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, str)
