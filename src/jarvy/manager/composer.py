"""Response composer.

Builds a knowledge-grounded answer for a query: a tone-matched opener,
facts from matched graph nodes, follow-up questions, a complexity grade
and an aggregate confidence. The composed turn is appended to the
user's history.
"""

import logging
import random

from jarvy.knowledge.graph import KnowledgeGraph
from jarvy.models.context import (
    CommunicationStyle,
    ConversationContext,
    HistoryEntry,
)
from jarvy.models.knowledge import KnowledgeNode, clamp_confidence
from jarvy.models.reasoning import Complexity, ComposedResponse, ResponseType
from jarvy.reasoning.classifier import ReasoningClassifier

logger = logging.getLogger(__name__)

MAX_FACT_NODES = 3
MAX_FOLLOW_UPS = 3

CASUAL_STARTERS = [
    "Hey! So you're asking about",
    "Ah, interesting question!",
    "Cool, let me break this down for you",
    "Alright, here's the deal with",
]

MOOD_ADJUSTMENTS: dict[str, str] = {
    "curious": "I love that you're exploring this! ",
    "confused": "No worries, this can be tricky. ",
    "excited": "Your enthusiasm is awesome! ",
    "thoughtful": "Great question to ponder. ",
}

TECHNICAL_PREFIXES: dict[str, str] = {
    "beginner": "Let me explain the fundamentals: ",
    "intermediate": "Building on your knowledge: ",
    "advanced": "From a technical perspective: ",
    "expert": "Considering the advanced implications: ",
}
TECHNICAL_DEFAULT = "From a technical standpoint: "
FORMAL_OPENER = "I shall provide a comprehensive analysis of your inquiry. "
FRIENDLY_OPENER = "I'm happy to help you understand this better! "

FOLLOW_UP_TEMPLATES = [
    "Would you like to know more about {concept}?",
    "How does {concept} relate to your current project?",
]

# First matching entry wins
RESPONSE_TYPE_TRIGGERS: list[tuple[ResponseType, tuple[str, ...]]] = [
    (ResponseType.REASONING, ("why", "how", "explain")),
    (ResponseType.FACTUAL, ("what is", "define")),
    (ResponseType.CREATIVE, ("create", "imagine", "design")),
    (ResponseType.ANALYTICAL, ("analyze", "compare", "evaluate")),
]

# (upper bound exclusive, grade)
COMPLEXITY_BUCKETS: list[tuple[float, Complexity]] = [
    (2, Complexity.SIMPLE),
    (5, Complexity.MODERATE),
    (10, Complexity.COMPLEX),
]


class ResponseComposer:
    """Composes graph-grounded answers."""

    def __init__(
        self,
        graph: KnowledgeGraph,
        classifier: ReasoningClassifier | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.graph = graph
        self.classifier = classifier or ReasoningClassifier()
        self._rng = rng or random.Random()

    def compose(self, query: str, context: ConversationContext) -> ComposedResponse:
        """Compose an answer and record the turn in the context.

        Args:
            query: The user's query
            context: The user's conversation context (mutated)

        Returns:
            ComposedResponse with text, trace and scores
        """
        concepts = self.graph.extract_concepts(query)
        nodes = self.unique_nodes(self.graph.traverse(concepts))
        reasoning = self.build_reasoning(query, concepts, nodes)

        opener = self.select_tone(context)
        factual = self.build_factual_content(nodes)
        text = f"{opener}\n\n{factual}"

        response = ComposedResponse(
            text=text,
            type=self.classify_response_type(query),
            confidence=self.calculate_confidence(concepts, nodes, reasoning),
            reasoning=reasoning,
            follow_up=self.build_follow_ups(concepts),
            complexity=self.determine_complexity(query, concepts, nodes),
            sources=[node.concept for node in nodes],
            emotions=[context.current_mood],
        )

        context.history.append(HistoryEntry(input=query, response=text))
        logger.debug(
            f"Composed {response.type.value} answer for {context.user_id}: "
            f"{len(concepts)} concepts, {len(nodes)} nodes, "
            f"confidence {response.confidence:.2f}"
        )
        return response

    @staticmethod
    def unique_nodes(nodes: list[KnowledgeNode]) -> list[KnowledgeNode]:
        """Matched nodes in discovery order, each once."""
        seen: set[str] = set()
        unique = []
        for node in nodes:
            if node.id not in seen:
                seen.add(node.id)
                unique.append(node)
        return unique

    def select_tone(self, context: ConversationContext) -> str:
        """Opener chosen by communication style and mood."""
        preferences = context.user_preferences
        style = preferences.communication_style

        if style == CommunicationStyle.CASUAL:
            return MOOD_ADJUSTMENTS.get(context.current_mood, "") + self._rng.choice(
                CASUAL_STARTERS
            )
        if style == CommunicationStyle.TECHNICAL:
            return TECHNICAL_PREFIXES.get(
                preferences.expertise_level.value, TECHNICAL_DEFAULT
            )
        if style == CommunicationStyle.FORMAL:
            return FORMAL_OPENER
        return FRIENDLY_OPENER

    def build_reasoning(
        self,
        query: str,
        concepts: list[str],
        nodes: list[KnowledgeNode],
    ) -> list[str]:
        """Human-readable trace of how the answer was reached."""
        assessment = self.classifier.classify(query)
        inferences = self.generate_inferences(concepts, nodes)
        return [
            f"Reasoning approach: {assessment.style.value}",
            f"Key concepts identified: {', '.join(concepts)}",
            f"Connected knowledge areas: {len(nodes)} domains",
            f"Logical connections: {len(inferences)} inference chains",
        ]

    @staticmethod
    def generate_inferences(
        concepts: list[str], nodes: list[KnowledgeNode]
    ) -> list[str]:
        """Facts of matched nodes that mention one of the concepts."""
        lowered = [c.lower() for c in concepts]
        inferences = []
        for node in nodes:
            for fact in node.facts:
                fact_lower = fact.lower()
                if any(concept in fact_lower for concept in lowered):
                    inferences.append(f"{node.concept}: {fact}")
        return inferences

    @staticmethod
    def build_factual_content(nodes: list[KnowledgeNode]) -> str:
        if not nodes:
            return ""

        lines = ["Here's what I know:", ""]
        for node in nodes[:MAX_FACT_NODES]:
            lines.append(f"**{node.concept}**:")
            if node.facts:
                lines.append(f"• {node.facts[0]}")
            if node.examples:
                lines.append(f"• Example: {node.examples[0]}")
            lines.append("")
        return "\n".join(lines) + "\n"

    @staticmethod
    def build_follow_ups(concepts: list[str]) -> list[str]:
        """One templated question per concept, at most three."""
        return [
            FOLLOW_UP_TEMPLATES[i % len(FOLLOW_UP_TEMPLATES)].format(concept=concept)
            for i, concept in enumerate(concepts[:MAX_FOLLOW_UPS])
        ]

    @staticmethod
    def classify_response_type(query: str) -> ResponseType:
        query_lower = query.lower()
        for response_type, triggers in RESPONSE_TYPE_TRIGGERS:
            if any(trigger in query_lower for trigger in triggers):
                return response_type
        return ResponseType.CONVERSATIONAL

    @staticmethod
    def determine_complexity(
        query: str,
        concepts: list[str],
        nodes: list[KnowledgeNode],
    ) -> Complexity:
        score = len(concepts) * 0.3 + len(nodes) * 0.4 + len(query.split()) * 0.1
        for upper, grade in COMPLEXITY_BUCKETS:
            if score < upper:
                return grade
        return Complexity.EXPERT

    @staticmethod
    def calculate_confidence(
        concepts: list[str],
        nodes: list[KnowledgeNode],
        reasoning: list[str],
    ) -> float:
        """Weighted blend of coverage, node confidence and trace depth.

        Clamped to [0.1, 1.0]; coverage can exceed 1 when traversal
        reaches more nodes than there were concepts.
        """
        coverage = len(nodes) / len(concepts) if concepts else 0.5
        node_confidence = (
            sum(node.confidence for node in nodes) / len(nodes) if nodes else 0.0
        )
        depth = min(len(reasoning) / 5, 1.0)
        return clamp_confidence(coverage * 0.4 + node_confidence * 0.4 + depth * 0.2)
