"""Composer, learning updater, context store and auto-trainer."""

from jarvy.manager.composer import ResponseComposer
from jarvy.manager.context_store import ContextStore
from jarvy.manager.extraction import (
    extract_concepts,
    extract_domain_knowledge,
    extract_examples,
    extract_facts,
)
from jarvy.manager.learning import LearningUpdater
from jarvy.manager.trainer import TRAINER_PRESETS, AutoTrainer
from jarvy.manager.training_data import SAMPLE_TRAINING_DATA

__all__ = [
    "AutoTrainer",
    "ContextStore",
    "extract_concepts",
    "extract_domain_knowledge",
    "extract_examples",
    "extract_facts",
    "LearningUpdater",
    "ResponseComposer",
    "SAMPLE_TRAINING_DATA",
    "TRAINER_PRESETS",
]
