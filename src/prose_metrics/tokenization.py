from __future__ import annotations

from typing import List

import regex

from .models import Token

# regex's \w is the Unicode word class: letters, marks, digits and
# connector punctuation, so decomposed accents stay inside a word.
WORD_RE = regex.compile(r"\b\w+\b")
SENTENCE_SPLIT_RE = regex.compile(r"[.!?]+")
PARAGRAPH_SPLIT_RE = regex.compile(r"\n\s*\n")


def tokenize_words(text: str, pattern: regex.Pattern[str] = WORD_RE) -> List[Token]:
    """Tokenize text into word tokens with character offsets."""
    tokens: List[Token] = []
    for match in pattern.finditer(text):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens


def split_sentences(
    text: str, pattern: regex.Pattern[str] = SENTENCE_SPLIT_RE
) -> List[str]:
    """Split text on runs of sentence terminators into trimmed, non-empty sentences."""
    fragments = (sentence.strip() for sentence in pattern.split(text))
    return [sentence for sentence in fragments if sentence]


def split_paragraphs(
    text: str, pattern: regex.Pattern[str] = PARAGRAPH_SPLIT_RE
) -> List[str]:
    """Split text on blank lines into trimmed, non-empty paragraphs."""
    fragments = (paragraph.strip() for paragraph in pattern.split(text))
    return [paragraph for paragraph in fragments if paragraph]
