"""Knowledge graph store and seed data."""

from jarvy.knowledge.graph import KnowledgeGraph, concept_similarity, slugify
from jarvy.knowledge.seed import KNOWLEDGE_SEED, seed_nodes

__all__ = [
    "concept_similarity",
    "KNOWLEDGE_SEED",
    "KnowledgeGraph",
    "seed_nodes",
    "slugify",
]
