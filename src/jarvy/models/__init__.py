"""Pydantic models for Jarvy - the contracts."""

from jarvy.models.context import (
    CommunicationStyle,
    ConversationContext,
    ExpertiseLevel,
    HistoryEntry,
    ResponseLength,
    UserPreferences,
)
from jarvy.models.intent import (
    IntentResponse,
    IntentResponseType,
    MatchResult,
    TrainingPattern,
)
from jarvy.models.knowledge import (
    MAX_CONFIDENCE,
    MIN_CONFIDENCE,
    DomainKnowledgeItem,
    GraphMetrics,
    KnowledgeNode,
    clamp_confidence,
)
from jarvy.models.reasoning import (
    Complexity,
    ComposedResponse,
    EngineResponse,
    ReasoningAssessment,
    ReasoningStyle,
    ResponseType,
)
from jarvy.models.training import (
    TrainingConfig,
    TrainingConversation,
    TrainingProgress,
    TrainingStatus,
)

__all__ = [
    "clamp_confidence",
    "CommunicationStyle",
    "Complexity",
    "ComposedResponse",
    "ConversationContext",
    "DomainKnowledgeItem",
    "EngineResponse",
    "ExpertiseLevel",
    "GraphMetrics",
    "HistoryEntry",
    "IntentResponse",
    "IntentResponseType",
    "KnowledgeNode",
    "MatchResult",
    "MAX_CONFIDENCE",
    "MIN_CONFIDENCE",
    "ReasoningAssessment",
    "ReasoningStyle",
    "ResponseLength",
    "ResponseType",
    "TrainingConfig",
    "TrainingConversation",
    "TrainingPattern",
    "TrainingProgress",
    "TrainingStatus",
    "UserPreferences",
]
