"""Intent matcher.

Scores an utterance against every phrasing in the intent library and
turns the best score into a tiered reply: direct, hedged, or help.
"""

import logging
import random
import threading
import time
from typing import Iterable

from jarvy.config import Settings, get_settings
from jarvy.matching.patterns import (
    EMPTY_INPUT_SUGGESTIONS,
    EMPTY_INPUT_TEXT,
    HELP_FALLBACK_SUGGESTIONS,
    HELP_FALLBACK_TEXT,
    QUICK_SUGGESTIONS,
    load_intents,
)
from jarvy.matching.tokenizer import similarity
from jarvy.models.intent import (
    IntentResponse,
    IntentResponseType,
    MatchResult,
    TrainingPattern,
)

logger = logging.getLogger(__name__)

FALLBACK_CONFIDENCE = 0.1


class PatternMatcher:
    """Fuzzy intent matcher over a mutable phrase library."""

    def __init__(
        self,
        intents: list[TrainingPattern] | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._intents: list[TrainingPattern] = (
            intents if intents is not None else load_intents()
        )
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

    @property
    def intents(self) -> list[TrainingPattern]:
        return list(self._intents)

    @property
    def categories(self) -> list[str]:
        return [intent.tag for intent in self._intents]

    def get_intent(self, tag: str) -> TrainingPattern | None:
        for intent in self._intents:
            if intent.tag == tag:
                return intent
        return None

    def find_best_match(self, text: str) -> MatchResult | None:
        """Find the highest-scoring phrasing above the match threshold.

        Ties keep the first phrasing encountered. If the scan outlives
        the configured deadline it stops early and keeps the best so far.

        Args:
            text: The raw utterance

        Returns:
            MatchResult, or None when nothing scores above the threshold
        """
        text = text[: self._settings.max_input_chars]
        threshold = self._settings.match_threshold
        deadline = self._settings.match_deadline_seconds
        started = time.monotonic()

        best: MatchResult | None = None
        best_score = 0.0

        with self._lock:
            intents = list(self._intents)

        for intent in intents:
            if deadline is not None and time.monotonic() - started > deadline:
                logger.warning(
                    f"Match scan exceeded {deadline}s deadline; "
                    f"stopping at intent '{intent.tag}'"
                )
                break
            for pattern in intent.patterns:
                score = similarity(text, pattern)
                if score > best_score and score > threshold:
                    best_score = score
                    best = MatchResult(tag=intent.tag, score=score, pattern=pattern)

        return best

    def get_response(self, text: str) -> IntentResponse:
        """Produce a tiered reply for an utterance.

        Args:
            text: The raw utterance

        Returns:
            IntentResponse; never raises for unmatched input
        """
        if not text.strip():
            return IntentResponse(
                text=EMPTY_INPUT_TEXT,
                type=IntentResponseType.HELP,
                suggestions=list(EMPTY_INPUT_SUGGESTIONS),
                confidence=1.0,
            )

        match = self.find_best_match(text)

        if match and match.score > self._settings.direct_reply_threshold:
            intent = self.get_intent(match.tag)
            suggestions = list(intent.suggestions) if intent else []
            response_type = (
                IntentResponseType.HELP if "help" in match.tag
                else IntentResponseType.TEXT
            )
            logger.debug(f"Direct match '{match.tag}' ({match.score:.2f})")
            return IntentResponse(
                text=self._pick_response(intent),
                type=response_type,
                suggestions=suggestions or None,
                confidence=match.score,
                tag=match.tag,
            )

        if match:
            intent = self.get_intent(match.tag)
            topic = match.tag.replace("_", " ")
            logger.debug(f"Hedged match '{match.tag}' ({match.score:.2f})")
            return IntentResponse(
                text=f"I think you're asking about {topic}. {self._pick_response(intent)}",
                type=IntentResponseType.SUGGESTION,
                suggestions=list(intent.suggestions) if intent else [],
                confidence=match.score,
                tag=match.tag,
            )

        return IntentResponse(
            text=HELP_FALLBACK_TEXT,
            type=IntentResponseType.HELP,
            suggestions=list(HELP_FALLBACK_SUGGESTIONS),
            confidence=FALLBACK_CONFIDENCE,
        )

    def train_with_new_data(
        self,
        patterns: list[str],
        responses: list[str],
        tag: str,
    ) -> TrainingPattern:
        """Extend an intent's phrasings and replies, creating it if new."""
        with self._lock:
            intent = self.get_intent(tag)
            if intent is None:
                intent = TrainingPattern(
                    tag=tag, patterns=list(patterns), responses=list(responses)
                )
                self._intents.append(intent)
                logger.info(f"Added intent '{tag}' with {len(patterns)} patterns")
            else:
                intent.patterns.extend(patterns)
                intent.responses.extend(responses)
                logger.info(f"Extended intent '{tag}' with {len(patterns)} patterns")
            return intent

    def quick_suggestions(self) -> list[str]:
        return list(QUICK_SUGGESTIONS)

    def load(self, intents: Iterable[TrainingPattern]) -> None:
        with self._lock:
            self._intents = list(intents)

    def reset(self) -> None:
        self.load(load_intents())

    def _pick_response(self, intent: TrainingPattern | None) -> str:
        if intent is None or not intent.responses:
            return ""
        return self._rng.choice(intent.responses)
