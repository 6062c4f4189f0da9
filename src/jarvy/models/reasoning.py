"""Reasoning and composed-response models."""

from enum import Enum

from pydantic import BaseModel, Field


class ReasoningStyle(str, Enum):
    """Inferred shape of a query."""

    CAUSAL = "causal"
    COMPARATIVE = "comparative"
    ANALYTICAL = "analytical"
    TEMPORAL = "temporal"
    HYPOTHETICAL = "hypothetical"
    GENERAL = "general"


class ResponseType(str, Enum):
    """Kind of answer produced by the composer."""

    REASONING = "reasoning"
    FACTUAL = "factual"
    CREATIVE = "creative"
    ANALYTICAL = "analytical"
    CONVERSATIONAL = "conversational"


class Complexity(str, Enum):
    """Complexity grade, shared by composed answers and training records."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    EXPERT = "expert"


class ReasoningAssessment(BaseModel):
    """Result of reasoning-style classification."""

    style: ReasoningStyle = ReasoningStyle.GENERAL
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)


class ComposedResponse(BaseModel):
    """Answer assembled from the knowledge graph."""

    text: str
    type: ResponseType
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: list[str] = Field(default_factory=list)
    follow_up: list[str] = Field(default_factory=list)
    complexity: Complexity = Complexity.SIMPLE
    sources: list[str] = Field(default_factory=list)
    emotions: list[str] = Field(default_factory=list)


class EngineResponse(BaseModel):
    """Unified reply returned to collaborators by JarvyEngine.respond()."""

    text: str
    type: str
    confidence: float = Field(ge=0.0, le=1.0)
    suggestions: list[str] | None = None
    reasoning: list[str] | None = None
    follow_up: list[str] | None = None
    complexity: Complexity | None = None
    sources: list[str] | None = None
