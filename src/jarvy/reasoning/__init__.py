"""Reasoning-style classification."""

from jarvy.reasoning.classifier import (
    GENERAL_CONFIDENCE,
    REASONING_PRIORITY,
    ReasoningClassifier,
    ReasoningPattern,
)

__all__ = [
    "GENERAL_CONFIDENCE",
    "REASONING_PRIORITY",
    "ReasoningClassifier",
    "ReasoningPattern",
]
