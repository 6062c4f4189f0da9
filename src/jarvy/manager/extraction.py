"""Domain-knowledge mining from labeled conversations.

Heuristic extraction of concept/fact/example triples: concepts from the
query, facts and examples from the response text.
"""

import re
from typing import Iterable

from jarvy.matching.tokenizer import tokenize
from jarvy.models.knowledge import DomainKnowledgeItem
from jarvy.models.training import TrainingConversation

CONCEPT_STOP_WORDS = frozenset({
    "what", "how", "why", "when", "where", "which", "should", "would", "could",
    # stems tokenize() leaves from contractions like "shouldn't"
    "shouldn", "wouldn", "couldn", "doesn", "haven", "weren",
})
MIN_CONCEPT_LENGTH = 5
MAX_CONCEPTS = 2

MAX_FACTS = 5
MAX_EXAMPLES = 3
STORED_FACTS = 3
STORED_EXAMPLES = 2

FACT_MARKERS = ("is", "are", "can", "will")
_FACT_SPLIT = re.compile(r"[•\n]")

EXAMPLE_PATTERNS = [
    re.compile(r"examples?[:\s]+([^•\n]*)", re.IGNORECASE),
    re.compile(r"such as[:\s]+([^•\n]*)", re.IGNORECASE),
    re.compile(r"like[:\s]+([^•\n]*)", re.IGNORECASE),
    re.compile(r"including[:\s]+([^•\n]*)", re.IGNORECASE),
]


def extract_concepts(text: str) -> list[str]:
    """Long query words as candidate concepts.

    Takes the first two qualifying tokens, then drops repeats, so a
    repeated word yields a single concept. Tokens come from the same
    tokenize() the knowledge graph matches queries with.
    """
    candidates = [
        word for word in tokenize(text)
        if len(word) >= MIN_CONCEPT_LENGTH and word not in CONCEPT_STOP_WORDS
    ][:MAX_CONCEPTS]
    return list(dict.fromkeys(candidates))


def extract_facts(text: str) -> list[str]:
    """Declarative bullet or line fragments of a response."""
    lines = [line.strip() for line in _FACT_SPLIT.split(text)]
    facts = [
        line for line in lines
        if 10 < len(line) < 200
        and "?" not in line
        and not line.startswith("**")
        and any(marker in line for marker in FACT_MARKERS)
    ]
    return facts[:MAX_FACTS]


def extract_examples(text: str) -> list[str]:
    """Trailing text after example markers, all markers in order."""
    examples: list[str] = []
    for pattern in EXAMPLE_PATTERNS:
        for match in pattern.finditer(text):
            example = match.group(1).strip()
            if 5 < len(example) < 100:
                examples.append(example)
    return examples[:MAX_EXAMPLES]


def extract_domain_knowledge(
    conversations: Iterable[TrainingConversation],
) -> dict[str, list[DomainKnowledgeItem]]:
    """Group mined items by conversation category.

    A concept is only kept when its response yields at least one fact.
    """
    knowledge: dict[str, list[DomainKnowledgeItem]] = {}
    for conversation in conversations:
        items = knowledge.setdefault(conversation.category, [])
        facts = extract_facts(conversation.response)
        if not facts:
            continue
        examples = extract_examples(conversation.response)
        for concept in extract_concepts(conversation.query):
            items.append(
                DomainKnowledgeItem(
                    concept=concept,
                    facts=facts[:STORED_FACTS],
                    examples=examples[:STORED_EXAMPLES],
                )
            )
    return knowledge
