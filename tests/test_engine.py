import dataclasses
import math

import pytest

from prose_metrics.config import EngineConfig
from prose_metrics.engine import TextProcessor
from prose_metrics.models import CollaborationConflict, Document


def test_analyze_counts_reference_text(processor: TextProcessor):
    result = processor.analyze_text("This is a test. This is another test!")

    assert result.sentence_count == 2
    assert result.word_count == 8
    assert result.paragraph_count == 1
    assert result.character_count == 37
    assert result.complexity_metrics.avg_words_per_sentence == pytest.approx(4.0)
    assert result.complexity_metrics.fog_index == pytest.approx(6.6)
    assert result.readability_score == result.complexity_metrics.flesch_reading_ease
    assert result.readability_score == pytest.approx(97.025)


def test_analyze_empty_text_is_all_zero(processor: TextProcessor):
    result = processor.analyze_text("")

    assert (result.word_count, result.character_count) == (0, 0)
    assert (result.sentence_count, result.paragraph_count) == (0, 0)
    complexity = result.complexity_metrics
    assert complexity.avg_words_per_sentence == 0.0
    assert complexity.avg_syllables_per_word == 0.0
    assert complexity.fog_index == 0.0
    assert complexity.unique_word_ratio == 0.0
    assert complexity.flesch_reading_ease == 206.835
    assert result.readability_score == 206.835
    style = result.style_metrics
    assert style.passive_voice_ratio == style.adverb_ratio == style.dialogue_ratio == 0.0
    assert result.content_hash == processor.generate_content_hash("")


@pytest.mark.parametrize(
    "text",
    ["", "   \n\n  ", "...!!!", "word", '"quoted"\n\nwas tested quickly.', "ünïcödé wörds"],
)
def test_analyze_is_total_and_finite(processor: TextProcessor, text: str):
    """Degenerate inputs never raise and never produce NaN or negative ratios."""
    result = processor.analyze_text(text)
    metrics = result.complexity_metrics
    ratios = [
        metrics.avg_words_per_sentence,
        metrics.avg_syllables_per_word,
        metrics.fog_index,
        metrics.unique_word_ratio,
        result.style_metrics.passive_voice_ratio,
        result.style_metrics.adverb_ratio,
        result.style_metrics.dialogue_ratio,
        result.style_metrics.action_ratio,
        result.style_metrics.description_ratio,
    ]
    assert all(math.isfinite(value) and value >= 0.0 for value in ratios)
    assert math.isfinite(result.readability_score)


def test_analyze_result_serializes(processor: TextProcessor):
    payload = processor.analyze_text('He said "hi".').to_dict()
    assert payload["style_metrics"]["dialogue_ratio"] == 1.0
    assert set(payload["complexity_metrics"]) == {
        "avg_words_per_sentence",
        "avg_syllables_per_word",
        "fog_index",
        "flesch_reading_ease",
        "unique_word_ratio",
    }


def test_optimize_text_reports_passive_voice(processor: TextProcessor):
    text = "The letter was delivered late."
    passive = [
        s for s in processor.optimize_text(text) if s.suggestion_type == "passive_voice"
    ]
    assert len(passive) == 1
    assert text[passive[0].start_pos : passive[0].end_pos] == "was delivered"


def test_optimize_text_respects_config_thresholds():
    processor = TextProcessor(EngineConfig(long_sentence_word_limit=3, position_stride=10))
    suggestions = processor.optimize_text("One two. Three four five six.")
    assert [(s.start_pos, s.end_pos) for s in suggestions] == [(10, 20)]


def test_resolve_conflicts_through_engine(processor: TextProcessor):
    conflict = CollaborationConflict(
        conflict_id="1",
        conflict_type="text_insertion",
        start_pos=0,
        end_pos=0,
        user_a_change="foo",
        user_b_change="bar",
        timestamp="t",
        resolution_suggestion="",
    )
    [resolved] = processor.resolve_conflicts([conflict])
    assert resolved.resolution_suggestion == "foo bar"


def test_analyze_corpus_keys_by_doc_id(processor: TextProcessor):
    documents = [Document("a.txt", "One sentence."), Document("b.txt", "Two. Sentences.")]
    results = processor.analyze_corpus(documents)
    assert results["a.txt"].sentence_count == 1
    assert results["b.txt"].sentence_count == 2


def test_engine_is_reusable_across_calls(processor: TextProcessor):
    first = processor.analyze_text("Same input.")
    processor.analyze_text("Something else entirely, quickly.")
    assert processor.analyze_text("Same input.") == first


def test_word_count_treats_marks_and_connectors_as_word_characters(
    processor: TextProcessor,
):
    """Decomposed accents and non-underscore connectors stay within one word."""
    assert processor.analyze_text("nai\u0308ve").word_count == 1
    assert processor.analyze_text("a\u203fb").word_count == 1


def test_engine_config_is_fixed_after_construction():
    """Thresholds cannot be changed under an engine that already compiled its patterns."""
    config = EngineConfig()
    processor = TextProcessor(config)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.long_sentence_word_limit = 1  # type: ignore[misc]
    assert processor.optimize_text("one two three.") == []
    assert processor.config.long_sentence_word_limit == 25
