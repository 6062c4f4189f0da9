"""Feedback-driven learning.

Nudges the confidence of nodes a query touched and adapts the user's
preferences with a deliberately simple rule set.
"""

import logging

from jarvy.config import Settings, get_settings
from jarvy.knowledge.graph import KnowledgeGraph
from jarvy.models.context import (
    CommunicationStyle,
    ConversationContext,
    ResponseLength,
)

logger = logging.getLogger(__name__)

POSITIVE_FEEDBACK = 0.7
NEGATIVE_FEEDBACK = 0.3
NEUTRAL_FEEDBACK = 0.5

TRAINING_USER_ID = "training_user"


class LearningUpdater:
    """Applies feedback to the knowledge graph and user preferences."""

    def __init__(
        self,
        graph: KnowledgeGraph,
        settings: Settings | None = None,
    ) -> None:
        self.graph = graph
        self._settings = settings or get_settings()

    @property
    def learning_rate(self) -> float:
        return self._settings.learning_rate

    def learn_from_interaction(
        self,
        query: str,
        response: str,
        feedback: float,
        context: ConversationContext,
    ) -> list[str]:
        """Learn from one rated interaction.

        Args:
            query: The user's query
            response: The answer that was rated
            feedback: Rating in [0, 1]; 0.5 is neutral
            context: The user's context (preferences are mutated)

        Returns:
            Ids of the nodes whose confidence changed

        Raises:
            ValueError: If feedback is outside [0, 1]
        """
        if not 0.0 <= feedback <= 1.0:
            raise ValueError(f"feedback must be within [0, 1], got {feedback}")

        delta = self.learning_rate * (feedback - NEUTRAL_FEEDBACK)
        adjusted: list[str] = []

        for concept in self.graph.extract_concepts(query):
            for node in self.graph.nodes_containing(concept):
                self.graph.adjust_confidence(node.id, delta)
                if node.id not in adjusted:
                    adjusted.append(node.id)

        self.update_user_preferences(context, feedback)

        if adjusted:
            logger.debug(
                f"Feedback {feedback:.2f} adjusted {len(adjusted)} nodes by {delta:+.3f}"
            )
        return adjusted

    @staticmethod
    def update_user_preferences(
        context: ConversationContext, feedback: float
    ) -> None:
        """Positive feedback expands brief answers; negative flips formality."""
        preferences = context.user_preferences
        if feedback > POSITIVE_FEEDBACK:
            if preferences.response_length == ResponseLength.BRIEF:
                preferences.response_length = ResponseLength.DETAILED
        elif feedback < NEGATIVE_FEEDBACK:
            preferences.communication_style = (
                CommunicationStyle.CASUAL
                if preferences.communication_style == CommunicationStyle.FORMAL
                else CommunicationStyle.FORMAL
            )

    def train_from_conversations(
        self, conversations: list[tuple[str, str, float]]
    ) -> int:
        """Apply (query, response, feedback) triples with a throwaway context.

        Returns:
            Number of triples applied
        """
        context = ConversationContext(user_id=TRAINING_USER_ID)
        for query, response, feedback in conversations:
            self.learn_from_interaction(query, response, feedback, context)
        return len(conversations)
