"""Jarvy - conversational reasoning engine."""

__version__ = "0.1.0"

from jarvy.engine import JarvyEngine, ReasoningEngine
from jarvy.exceptions import (
    KnowledgeNodeNotFoundError,
    TrainingCancelledError,
    TrainingConfigError,
    TrainingDeadlineExceededError,
    TrainingInProgressError,
)

__all__ = [
    "__version__",
    "JarvyEngine",
    "KnowledgeNodeNotFoundError",
    "ReasoningEngine",
    "TrainingCancelledError",
    "TrainingConfigError",
    "TrainingDeadlineExceededError",
    "TrainingInProgressError",
]
