"""Reasoning-style classification.

Labels a query with the shape of reasoning it calls for by scanning for
trigger phrases. Styles are checked in REASONING_PRIORITY order and the
first style with any hit wins, so the order is the precedence.
"""

from dataclasses import dataclass

from jarvy.models.reasoning import ReasoningAssessment, ReasoningStyle


@dataclass(frozen=True)
class ReasoningPattern:
    """Trigger phrases and answer structure for one reasoning style."""

    style: ReasoningStyle
    triggers: tuple[str, ...]
    structure: str


REASONING_PRIORITY: tuple[ReasoningPattern, ...] = (
    ReasoningPattern(
        style=ReasoningStyle.CAUSAL,
        triggers=("why", "because", "cause", "reason", "leads to", "results in"),
        structure="cause → effect → implications",
    ),
    ReasoningPattern(
        style=ReasoningStyle.COMPARATIVE,
        triggers=("vs", "versus", "compare", "difference", "better", "worse"),
        structure="item1 ↔ item2 → analysis → conclusion",
    ),
    ReasoningPattern(
        style=ReasoningStyle.ANALYTICAL,
        triggers=("analyze", "breakdown", "components", "factors", "elements"),
        structure="whole → parts → relationships → synthesis",
    ),
    ReasoningPattern(
        style=ReasoningStyle.TEMPORAL,
        triggers=("timeline", "history", "evolution", "progression", "development"),
        structure="past → present → future trends",
    ),
    ReasoningPattern(
        style=ReasoningStyle.HYPOTHETICAL,
        triggers=("what if", "suppose", "imagine", "hypothetically", "scenario"),
        structure="premise → logical steps → conclusions → implications",
    ),
)

GENERAL_CONFIDENCE = 0.5


class ReasoningClassifier:
    """Classifies queries by reasoning style."""

    def __init__(
        self, patterns: tuple[ReasoningPattern, ...] = REASONING_PRIORITY
    ) -> None:
        self._patterns = patterns

    def classify(self, query: str) -> ReasoningAssessment:
        """Return the first style with a trigger hit.

        Confidence is the share of that style's triggers found in the
        query; with no hits the query is GENERAL at 0.5.
        """
        query_lower = query.lower()
        for pattern in self._patterns:
            hits = sum(1 for trigger in pattern.triggers if trigger in query_lower)
            if hits > 0:
                return ReasoningAssessment(
                    style=pattern.style,
                    confidence=hits / len(pattern.triggers),
                )
        return ReasoningAssessment(
            style=ReasoningStyle.GENERAL, confidence=GENERAL_CONFIDENCE
        )

    def structure_for(self, style: ReasoningStyle) -> str | None:
        for pattern in self._patterns:
            if pattern.style == style:
                return pattern.structure
        return None
