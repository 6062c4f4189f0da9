"""Text normalization and fuzzy token similarity."""

import re

_NON_WORD = re.compile(r"[^\w\s]")

QUESTION_WORDS = frozenset({
    "what", "how", "why", "when", "where", "who", "which",
    "can", "is", "are", "do", "does",
})

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has",
    "had", "do", "does", "did", "will", "would", "could", "should",
})


def tokenize(text: str) -> list[str]:
    """Lower-case, strip punctuation and split into non-empty tokens."""
    return _NON_WORD.sub(" ", text.lower()).split()


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum single-character edits turning a into b.

    Keeps two rows of the dynamic-programming table.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(a) + 1))
    for j, char_b in enumerate(b, start=1):
        current = [j] + [0] * len(a)
        for i, char_a in enumerate(a, start=1):
            cost = 0 if char_a == char_b else 1
            current[i] = min(
                current[i - 1] + 1,
                previous[i] + 1,
                previous[i - 1] + cost,
            )
        previous = current
    return previous[len(a)]


def tokens_match(token: str, other: str) -> bool:
    """Two tokens match on containment either way or one edit apart."""
    return (
        other in token
        or token in other
        or levenshtein_distance(token, other) <= 1
    )


def similarity(text: str, pattern: str) -> float:
    """Share of input tokens that fuzzily match some pattern token.

    The denominator is the longer of the two token lists, so a short input
    against a long phrase scores low.
    """
    input_tokens = tokenize(text)
    pattern_tokens = tokenize(pattern)
    total = max(len(input_tokens), len(pattern_tokens))
    if total == 0:
        return 0.0

    matches = sum(
        1 for token in input_tokens
        if any(tokens_match(token, p) for p in pattern_tokens)
    )
    return matches / total


def is_question(text: str) -> bool:
    """Heuristic: contains a question word or a question mark."""
    words = text.lower().split(" ")
    return "?" in text or any(word in QUESTION_WORDS for word in words)


def extract_keywords(text: str) -> list[str]:
    """Tokens longer than two characters that are not stop words."""
    return [
        word for word in tokenize(text)
        if len(word) > 2 and word not in STOP_WORDS
    ]
