"""Intent library models.

A TrainingPattern is a named intent with example phrasings and candidate
replies; the matcher scores utterances against these phrasings.
"""

from enum import Enum

from pydantic import BaseModel, Field


class IntentResponseType(str, Enum):
    """Kind of reply produced by the intent matcher."""

    TEXT = "text"
    SUGGESTION = "suggestion"
    COMMAND = "command"
    HELP = "help"


class TrainingPattern(BaseModel):
    """A named intent with example phrasings and candidate replies."""

    tag: str
    patterns: list[str]
    responses: list[str]
    context: list[str] | None = None
    suggestions: list[str] = Field(default_factory=list)


class MatchResult(BaseModel):
    """Best-scoring pattern for an utterance."""

    tag: str
    score: float = Field(gt=0.0, le=1.0)
    pattern: str


class IntentResponse(BaseModel):
    """Reply from the lightweight intent path."""

    text: str
    type: IntentResponseType
    confidence: float = Field(ge=0.0, le=1.0)
    suggestions: list[str] | None = None
    tag: str | None = None
