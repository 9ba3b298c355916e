from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .config import EngineConfig
from .conflicts import resolve_conflicts
from .hashing import generate_content_hash
from .metrics import compute_complexity_metrics, compute_style_metrics
from .models import (
    AnalysisResult,
    CollaborationConflict,
    Document,
    OptimizationSuggestion,
)
from .patterns import TextPatterns, compile_patterns
from .suggestions import generate_suggestions
from .tokenization import split_paragraphs, split_sentences, tokenize_words

logger = logging.getLogger(__name__)


class TextProcessor:
    """
    Stateless text analysis engine.

    Patterns are compiled once in the constructor and only read afterwards,
    so one instance can serve concurrent callers. An invalid pattern in the
    config raises PatternCompileError here rather than on first use.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self._config = config or EngineConfig()
        self._patterns = compile_patterns(self._config)
        logger.debug("Initialized text processor")

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def patterns(self) -> TextPatterns:
        return self._patterns

    def analyze_text(self, text: str) -> AnalysisResult:
        """Compute counts, readability and style metrics for text."""
        logger.debug("Analyzing %d characters", len(text))
        patterns = self._patterns
        words = [token.text for token in tokenize_words(text, patterns.word)]
        sentences = split_sentences(text, patterns.sentence)
        paragraphs = split_paragraphs(text, patterns.paragraph)

        word_count = len(words)
        sentence_count = len(sentences)
        paragraph_count = len(paragraphs)

        complexity = compute_complexity_metrics(
            words,
            sentence_count,
            complex_word_syllables=self._config.complex_word_syllables,
        )
        style = compute_style_metrics(
            text,
            word_count,
            sentence_count,
            paragraph_count,
            passive_voice_pattern=patterns.passive_voice,
            adverb_pattern=patterns.adverb,
            dialogue_pattern=patterns.dialogue,
        )

        return AnalysisResult(
            word_count=word_count,
            character_count=len(text),
            paragraph_count=paragraph_count,
            sentence_count=sentence_count,
            readability_score=complexity.flesch_reading_ease,
            complexity_metrics=complexity,
            style_metrics=style,
            content_hash=generate_content_hash(text),
        )

    def optimize_text(self, text: str) -> List[OptimizationSuggestion]:
        """Return heuristic writing suggestions for text."""
        return generate_suggestions(
            text,
            self._patterns,
            long_sentence_word_limit=self._config.long_sentence_word_limit,
            position_stride=self._config.position_stride,
        )

    def resolve_conflicts(
        self, conflicts: Sequence[CollaborationConflict]
    ) -> List[CollaborationConflict]:
        """Propose a resolution for each conflict."""
        return resolve_conflicts(conflicts)

    def generate_content_hash(self, text: str) -> str:
        """Return the content fingerprint of text."""
        return generate_content_hash(text)

    def analyze_corpus(self, documents: Sequence[Document]) -> Dict[str, AnalysisResult]:
        """Analyze every document and key the results by doc_id."""
        results: Dict[str, AnalysisResult] = {}
        for document in documents:
            results[document.doc_id] = self.analyze_text(document.text)
        return results
