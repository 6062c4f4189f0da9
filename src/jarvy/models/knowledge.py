"""Knowledge graph models.

Concept nodes carry facts, examples and a confidence score, and link to
other concepts by name through their relations.
"""

from datetime import datetime, UTC

from pydantic import BaseModel, Field

MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 1.0


def clamp_confidence(value: float) -> float:
    """Clamp a confidence value into [MIN_CONFIDENCE, MAX_CONFIDENCE]."""
    return max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value))


class KnowledgeNode(BaseModel):
    """A concept in the knowledge graph."""

    id: str
    concept: str
    category: str
    relations: list[str] = Field(default_factory=list)
    facts: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.7, ge=MIN_CONFIDENCE, le=MAX_CONFIDENCE)
    last_updated: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def add_relation(self, concept: str) -> bool:
        """Link a concept name, keeping relations unique and ordered.

        Returns:
            True if the relation was new
        """
        if concept in self.relations:
            return False
        self.relations.append(concept)
        return True

    def touch(self) -> None:
        self.last_updated = datetime.now(UTC)


class DomainKnowledgeItem(BaseModel):
    """A concept with facts and examples, ready to insert into the graph."""

    concept: str
    facts: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)


class GraphMetrics(BaseModel):
    """Aggregate view of the engine's knowledge and state."""

    total_concepts: int = 0
    average_confidence: float = 0.0
    total_relations: int = 0
    categories: list[str] = Field(default_factory=list)
    total_intents: int = 0
    active_contexts: int = 0
