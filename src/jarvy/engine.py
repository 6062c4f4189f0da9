"""Reasoning engine facade.

JarvyEngine wires the matcher, knowledge graph, classifier, composer and
learning updater together and is the single object collaborators hold.
The AutoTrainer talks to it through the ReasoningEngine protocol.
"""

import logging
import random
from typing import Any, Iterable, Protocol, runtime_checkable

from jarvy.config import Settings, get_settings
from jarvy.knowledge.graph import KnowledgeGraph
from jarvy.manager.composer import ResponseComposer
from jarvy.manager.context_store import ContextStore
from jarvy.manager.learning import LearningUpdater
from jarvy.matching.matcher import PatternMatcher
from jarvy.models.context import ConversationContext
from jarvy.models.intent import IntentResponse, TrainingPattern
from jarvy.models.knowledge import DomainKnowledgeItem, GraphMetrics, KnowledgeNode
from jarvy.models.reasoning import ComposedResponse, EngineResponse
from jarvy.reasoning.classifier import ReasoningClassifier

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = "default"


@runtime_checkable
class ReasoningEngine(Protocol):
    """What the auto-trainer and other collaborators need from an engine."""

    def match(self, text: str) -> IntentResponse: ...

    def train_batch(self, data: list[tuple[str, str, float]]) -> int: ...

    def add_domain_knowledge(
        self,
        domain: str,
        items: Iterable[DomainKnowledgeItem | dict[str, Any]],
    ) -> list[KnowledgeNode]: ...

    def get_metrics(self) -> GraphMetrics: ...


class JarvyEngine:
    """Conversational reasoning engine.

    Provides:
    - Lightweight intent replies (match)
    - Graph-grounded answers per user (process_complex_query)
    - A routing entry point over both (respond)
    - Feedback learning, batch training and knowledge seeding
    - reset/snapshot/restore for isolation
    """

    def __init__(
        self,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        rng = rng or random.Random()
        self.matcher = PatternMatcher(settings=self.settings, rng=rng)
        self.graph = KnowledgeGraph(settings=self.settings)
        self.classifier = ReasoningClassifier()
        self.contexts = ContextStore()
        self.composer = ResponseComposer(self.graph, self.classifier, rng=rng)
        self.learner = LearningUpdater(self.graph, settings=self.settings)

    # -------------------------------------------------------------------------
    # Query interface
    # -------------------------------------------------------------------------

    def match(self, text: str) -> IntentResponse:
        return self.matcher.get_response(text)

    def process_complex_query(
        self, query: str, user_id: str = DEFAULT_USER_ID
    ) -> ComposedResponse:
        """Compose a graph-grounded answer in the user's context."""
        with self.contexts.session(user_id) as context:
            return self.composer.compose(query, context)

    def respond(self, utterance: str, user_id: str | None = None) -> EngineResponse:
        """Answer an utterance through the composer or the matcher.

        Utterances naming a known concept get a composed answer; all
        others get the intent reply, including its low-confidence help
        fallback.
        """
        if utterance.strip() and self.graph.extract_concepts(utterance):
            composed = self.process_complex_query(utterance, user_id or DEFAULT_USER_ID)
            return EngineResponse(
                text=composed.text,
                type=composed.type.value,
                confidence=composed.confidence,
                reasoning=composed.reasoning,
                follow_up=composed.follow_up,
                complexity=composed.complexity,
                sources=composed.sources,
            )

        intent = self.match(utterance)
        return EngineResponse(
            text=intent.text,
            type=intent.type.value,
            confidence=intent.confidence,
            suggestions=intent.suggestions,
        )

    def get_context(self, user_id: str = DEFAULT_USER_ID) -> ConversationContext:
        return self.contexts.get_or_create(user_id)

    # -------------------------------------------------------------------------
    # Learning and knowledge
    # -------------------------------------------------------------------------

    def learn_from_interaction(
        self,
        query: str,
        response: str,
        feedback: float,
        user_id: str = DEFAULT_USER_ID,
    ) -> list[str]:
        """Apply user feedback and mark the user's latest turn with it."""
        with self.contexts.session(user_id) as context:
            adjusted = self.learner.learn_from_interaction(
                query, response, feedback, context
            )
            if context.history and context.history[-1].input == query:
                context.history[-1].satisfaction = feedback
        return adjusted

    def train_batch(self, data: list[tuple[str, str, float]]) -> int:
        return self.learner.train_from_conversations(data)

    def add_knowledge(
        self,
        concept: str,
        category: str,
        facts: list[str],
        examples: list[str],
    ) -> KnowledgeNode:
        return self.graph.add_knowledge(concept, category, facts, examples)

    def add_domain_knowledge(
        self,
        domain: str,
        items: Iterable[DomainKnowledgeItem | dict[str, Any]],
    ) -> list[KnowledgeNode]:
        """Insert each item as a node in the domain's category."""
        nodes = []
        for item in items:
            if not isinstance(item, DomainKnowledgeItem):
                item = DomainKnowledgeItem(**item)
            nodes.append(
                self.graph.add_knowledge(item.concept, domain, item.facts, item.examples)
            )
        logger.info(f"Added {len(nodes)} concepts to {domain} domain")
        return nodes

    def teach_intent(
        self, patterns: list[str], responses: list[str], tag: str
    ) -> TrainingPattern:
        return self.matcher.train_with_new_data(patterns, responses, tag)

    # -------------------------------------------------------------------------
    # Introspection and isolation
    # -------------------------------------------------------------------------

    def get_metrics(self) -> GraphMetrics:
        metrics = self.graph.metrics()
        metrics.total_intents = len(self.matcher.intents)
        metrics.active_contexts = len(self.contexts)
        return metrics

    def export_knowledge_graph(self) -> list[dict[str, Any]]:
        return self.graph.export()

    def snapshot(self) -> dict[str, Any]:
        """JSON-ready copy of graph, contexts and intent library."""
        return {
            "nodes": self.graph.export(),
            "contexts": self.contexts.export(),
            "intents": [intent.model_dump(mode="json") for intent in self.matcher.intents],
        }

    def restore(self, snapshot: dict[str, Any]) -> None:
        """Replace engine state with a snapshot() result."""
        self.graph.load(KnowledgeNode.model_validate(n) for n in snapshot["nodes"])
        self.contexts.load(
            ConversationContext.model_validate(c) for c in snapshot.get("contexts", [])
        )
        if "intents" in snapshot:
            self.matcher.load(
                TrainingPattern.model_validate(i) for i in snapshot["intents"]
            )
        logger.info(f"Restored engine snapshot with {len(self.graph)} nodes")

    def reset(self) -> None:
        """Return to the seed graph, seed intents and no contexts."""
        self.graph.reset()
        self.matcher.reset()
        self.contexts.clear()
