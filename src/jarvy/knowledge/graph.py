"""Knowledge graph store.

Holds concept nodes keyed by slug, links new nodes to existing ones by
lexical overlap or shared category, and answers depth-bounded traversals.
All mutations go through a single re-entrant lock so confidence updates
are atomic read-modify-writes.
"""

import logging
import re
import threading
from typing import Any, Iterable

from jarvy.config import Settings, get_settings
from jarvy.exceptions import KnowledgeNodeNotFoundError
from jarvy.knowledge.seed import seed_nodes
from jarvy.matching.tokenizer import tokenize
from jarvy.models.knowledge import (
    GraphMetrics,
    KnowledgeNode,
    clamp_confidence,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def slugify(concept: str) -> str:
    """Deterministic node id for a concept ("AI Ethics" -> "ai_ethics")."""
    return _WHITESPACE.sub("_", concept.strip().lower())


def concept_similarity(concept1: str, concept2: str) -> float:
    """Jaccard overlap of the lower-cased whitespace tokens of two concepts."""
    words1 = set(concept1.lower().split())
    words2 = set(concept2.lower().split())
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


class KnowledgeGraph:
    """Mutable, confidence-weighted concept graph.

    Provides:
    - Node insertion with automatic bidirectional linking
    - Depth-bounded traversal from seed concepts
    - Concept extraction from free text
    - Atomic confidence adjustment
    """

    def __init__(
        self,
        settings: Settings | None = None,
        nodes: Iterable[KnowledgeNode] | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._lock = threading.RLock()
        self._nodes: dict[str, KnowledgeNode] = {}
        self.load(seed_nodes() if nodes is None else nodes)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    @property
    def nodes(self) -> list[KnowledgeNode]:
        with self._lock:
            return list(self._nodes.values())

    def get(self, node_id: str) -> KnowledgeNode | None:
        return self._nodes.get(node_id)

    def require(self, node_id: str) -> KnowledgeNode:
        node = self._nodes.get(node_id)
        if node is None:
            raise KnowledgeNodeNotFoundError(node_id)
        return node

    def find_by_concept(self, concept: str) -> KnowledgeNode | None:
        return self._nodes.get(slugify(concept))

    def nodes_containing(self, concept: str) -> list[KnowledgeNode]:
        """Nodes whose concept text contains the given concept."""
        needle = concept.lower()
        return [node for node in self.nodes if needle in node.concept.lower()]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_knowledge(
        self,
        concept: str,
        category: str,
        facts: list[str],
        examples: list[str],
    ) -> KnowledgeNode:
        """Insert a concept and link it into the graph.

        A node with the same slug is replaced.

        Args:
            concept: Concept name
            category: Category used for linking
            facts: Fact sentences
            examples: Example phrases

        Returns:
            The inserted node
        """
        node = KnowledgeNode(
            id=slugify(concept),
            concept=concept,
            category=category,
            facts=list(facts),
            examples=list(examples),
            confidence=self._settings.initial_node_confidence,
        )
        with self._lock:
            if node.id in self._nodes:
                logger.debug(f"Replacing knowledge node '{node.id}'")
            self._nodes[node.id] = node
            linked = self.update_relations(node)

        logger.info(
            f"Added knowledge '{concept}' ({category}) linked to {linked} nodes"
        )
        return node

    def update_relations(self, new_node: KnowledgeNode) -> int:
        """Link a node both ways to similar or same-category nodes.

        Returns:
            Number of existing nodes linked
        """
        threshold = self._settings.relation_similarity_threshold
        linked = 0
        with self._lock:
            for node_id, existing in self._nodes.items():
                if node_id == new_node.id:
                    continue
                similar = concept_similarity(new_node.concept, existing.concept) > threshold
                if similar or existing.category == new_node.category:
                    new_node.add_relation(existing.concept)
                    existing.add_relation(new_node.concept)
                    linked += 1
        return linked

    def adjust_confidence(self, node_id: str, delta: float) -> KnowledgeNode:
        """Add delta to a node's confidence, clamped to [0.1, 1.0]."""
        with self._lock:
            node = self.require(node_id)
            node.confidence = clamp_confidence(node.confidence + delta)
            node.touch()
            return node

    def load(self, nodes: Iterable[KnowledgeNode]) -> None:
        """Replace the graph contents with the given nodes."""
        with self._lock:
            self._nodes = {node.id: node for node in nodes}

    def reset(self) -> None:
        """Restore the seed graph."""
        self.load(seed_nodes())
        logger.info("Knowledge graph reset to seed set")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def extract_concepts(self, text: str) -> list[str]:
        """Concepts sharing a token with the text; both sides use tokenize()."""
        words = set(tokenize(text))
        concepts: list[str] = []
        for node in self.nodes:
            concept_words = tokenize(node.concept)
            if any(word in words for word in concept_words):
                if node.concept not in concepts:
                    concepts.append(node.concept)
        return concepts

    def traverse(
        self,
        seed_concepts: list[str],
        max_depth: int | None = None,
    ) -> list[KnowledgeNode]:
        """Collect nodes reachable from seed concepts.

        A node is collected when its concept or one of its relations
        contains the current concept (case-insensitive); the walk then
        continues into that node's relations one level deeper. A visited
        set keyed by concept string stops cycles. The same node may appear
        more than once when reached from different concepts.

        Args:
            seed_concepts: Concepts to start from
            max_depth: Deepest level expanded (defaults to reasoning_depth)

        Returns:
            Collected nodes in discovery order
        """
        if max_depth is None:
            max_depth = self._settings.reasoning_depth

        snapshot = self.nodes
        visited: set[str] = set()
        related: list[KnowledgeNode] = []

        def visit(concept: str, depth: int) -> None:
            if depth > max_depth or concept in visited or not concept:
                return
            visited.add(concept)

            needle = concept.lower()
            for node in snapshot:
                if needle in node.concept.lower() or any(
                    needle in relation.lower() for relation in node.relations
                ):
                    related.append(node)
                    for relation in list(node.relations):
                        visit(relation, depth + 1)

        for concept in seed_concepts:
            visit(concept, 0)

        return related

    def metrics(self) -> GraphMetrics:
        nodes = self.nodes
        if not nodes:
            return GraphMetrics()
        categories: list[str] = []
        for node in nodes:
            if node.category not in categories:
                categories.append(node.category)
        return GraphMetrics(
            total_concepts=len(nodes),
            average_confidence=sum(n.confidence for n in nodes) / len(nodes),
            total_relations=sum(len(n.relations) for n in nodes),
            categories=categories,
        )

    def export(self) -> list[dict[str, Any]]:
        """JSON-ready node dicts (ISO-8601 timestamps)."""
        return [node.model_dump(mode="json") for node in self.nodes]
