"""Knowledge graph seed data.

Baseline concepts loaded when a graph is constructed or reset. Seed
relations are concept slugs; learned relations are concept names.
"""

import logging
from typing import Any

from jarvy.models.knowledge import KnowledgeNode

logger = logging.getLogger(__name__)


KNOWLEDGE_SEED: list[dict[str, Any]] = [
    {
        "id": "ai_fundamentals",
        "concept": "Artificial Intelligence",
        "category": "technology",
        "relations": ["machine_learning", "neural_networks", "natural_language_processing"],
        "facts": [
            "AI systems can process vast amounts of data faster than humans",
            "Machine learning allows AI to improve through experience",
            "Neural networks are inspired by biological brain structures",
            "AI can recognize patterns in complex datasets",
        ],
        "examples": [
            "Conversational assistants",
            "Computer vision for image recognition",
            "Recommendation systems in streaming platforms",
            "Autonomous vehicles using AI for navigation",
        ],
        "confidence": 0.95,
    },
    {
        "id": "quantum_computing",
        "concept": "Quantum Computing",
        "category": "science",
        "relations": ["physics", "computing", "cryptography"],
        "facts": [
            "Quantum computers use quantum bits (qubits) instead of classical bits",
            "Quantum superposition allows qubits to exist in multiple states simultaneously",
            "Quantum entanglement correlates the states of particles",
            "Quantum computers could break current encryption methods",
        ],
        "examples": [
            "Superconducting qubit processors",
            "Quantum cryptography for secure communications",
            "Quantum algorithms for optimization problems",
        ],
        "confidence": 0.88,
    },
    {
        "id": "ai_ethics",
        "concept": "AI Ethics",
        "category": "philosophy",
        "relations": ["artificial_intelligence", "philosophy", "society"],
        "facts": [
            "AI systems can perpetuate human biases if not carefully designed",
            "Transparency in AI decision-making is crucial for trust",
            "AI should augment human capabilities, not replace human judgment",
            "Privacy and data protection are fundamental in AI development",
        ],
        "examples": [
            "Bias in hiring algorithms",
            "Explainable AI in medical diagnosis",
            "AI governance frameworks",
        ],
        "confidence": 0.92,
    },
    {
        "id": "mathematical_reasoning",
        "concept": "Mathematical Logic",
        "category": "mathematics",
        "relations": ["logic", "proofs", "algorithms"],
        "facts": [
            "Mathematical proofs provide certainty in reasoning",
            "Logic forms the foundation of computer science",
            "Algorithms are step-by-step problem-solving procedures",
            "Mathematical models describe real-world phenomena",
        ],
        "examples": [
            "Euclidean geometry proofs",
            "Boolean logic in programming",
            "Graph theory in network analysis",
        ],
        "confidence": 0.96,
    },
    {
        "id": "human_psychology",
        "concept": "Human Psychology",
        "category": "psychology",
        "relations": ["behavior", "cognition", "emotions"],
        "facts": [
            "Cognitive biases affect human decision-making",
            "Emotional intelligence impacts social interactions",
            "Learning styles vary among individuals",
            "Motivation drives human behavior and achievement",
        ],
        "examples": [
            "Confirmation bias in information processing",
            "Growth mindset in learning",
            "Social proof in consumer behavior",
        ],
        "confidence": 0.89,
    },
    {
        "id": "communication_theory",
        "concept": "Effective Communication",
        "category": "communication",
        "relations": ["language", "psychology", "social_skills"],
        "facts": [
            "Active listening improves understanding",
            "Non-verbal communication conveys significant meaning",
            "Cultural context affects message interpretation",
            "Feedback loops enhance communication effectiveness",
        ],
        "examples": [
            "Body language in presentations",
            "Cross-cultural communication challenges",
            "Digital communication etiquette",
        ],
        "confidence": 0.91,
    },
]


def seed_nodes() -> list[KnowledgeNode]:
    """Build fresh node instances from the seed set."""
    nodes = [KnowledgeNode(**entry) for entry in KNOWLEDGE_SEED]
    logger.debug(f"Loaded {len(nodes)} seed knowledge nodes")
    return nodes
