"""Tokenization and intent matching."""

from jarvy.matching.matcher import FALLBACK_CONFIDENCE, PatternMatcher
from jarvy.matching.tokenizer import (
    extract_keywords,
    is_question,
    levenshtein_distance,
    similarity,
    tokenize,
)

__all__ = [
    "extract_keywords",
    "FALLBACK_CONFIDENCE",
    "is_question",
    "levenshtein_distance",
    "PatternMatcher",
    "similarity",
    "tokenize",
]
