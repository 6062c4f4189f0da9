"""Per-user conversation context models."""

import time
from datetime import datetime, UTC
from enum import Enum

from pydantic import BaseModel, Field


class CommunicationStyle(str, Enum):
    """How the user likes to be addressed."""

    FORMAL = "formal"
    CASUAL = "casual"
    TECHNICAL = "technical"
    FRIENDLY = "friendly"


class ExpertiseLevel(str, Enum):
    """Self-reported or inferred user expertise."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class ResponseLength(str, Enum):
    """Preferred amount of detail in replies."""

    BRIEF = "brief"
    DETAILED = "detailed"
    COMPREHENSIVE = "comprehensive"


class UserPreferences(BaseModel):
    """Adaptable user preferences."""

    communication_style: CommunicationStyle = CommunicationStyle.FRIENDLY
    expertise_level: ExpertiseLevel = ExpertiseLevel.INTERMEDIATE
    preferred_topics: list[str] = Field(default_factory=list)
    response_length: ResponseLength = ResponseLength.DETAILED


class HistoryEntry(BaseModel):
    """One composed turn."""

    input: str
    response: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    satisfaction: float | None = Field(default=None, ge=0.0, le=1.0)


def _session_id() -> str:
    return f"session_{int(time.time() * 1000)}"


class ConversationContext(BaseModel):
    """Conversation state for one user."""

    user_id: str
    session_id: str = Field(default_factory=_session_id)
    history: list[HistoryEntry] = Field(default_factory=list)
    user_preferences: UserPreferences = Field(default_factory=UserPreferences)
    current_mood: str = "curious"
    learning_goals: list[str] = Field(default_factory=list)
