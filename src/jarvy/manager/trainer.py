"""Auto-trainer for the reasoning engine.

Filters a labeled conversation dataset, feeds it to the engine in
fixed-size batches and mines domain knowledge from each batch. A failed
batch is recorded and skipped; only failures outside the per-batch guard
end the run with status ERROR.
"""

import asyncio
import logging
import time
from datetime import datetime, UTC
from typing import TYPE_CHECKING, Any, Sequence

from pydantic import ValidationError

from jarvy.config import get_settings
from jarvy.exceptions import (
    TrainingCancelledError,
    TrainingConfigError,
    TrainingDeadlineExceededError,
    TrainingInProgressError,
)
from jarvy.manager.extraction import extract_domain_knowledge
from jarvy.models.reasoning import Complexity
from jarvy.models.training import (
    TrainingConfig,
    TrainingConversation,
    TrainingProgress,
    TrainingStatus,
)

if TYPE_CHECKING:
    from jarvy.engine import ReasoningEngine

logger = logging.getLogger(__name__)

RATING_SCALE = 5


TRAINER_PRESETS: dict[str, TrainingConfig] = {
    "comprehensive": TrainingConfig(
        batch_size=15, delay_between_batches=0.05, minimum_rating=4
    ),
    "quick": TrainingConfig(
        batch_size=20,
        delay_between_batches=0.01,
        enable_progress_logging=False,
        filter_by_complexity=[Complexity.SIMPLE, Complexity.MODERATE],
        minimum_rating=4,
    ),
    "expert": TrainingConfig(
        batch_size=5,
        delay_between_batches=0.2,
        filter_by_complexity=[Complexity.COMPLEX, Complexity.EXPERT],
        minimum_rating=5,
    ),
    "technology": TrainingConfig(
        batch_size=10, delay_between_batches=0.1, filter_by_category=["technology"]
    ),
    "business": TrainingConfig(
        batch_size=10, delay_between_batches=0.1, filter_by_category=["business"]
    ),
    "health": TrainingConfig(
        batch_size=8, delay_between_batches=0.15, filter_by_category=["health"]
    ),
}


class AutoTrainer:
    """Batch trainer with best-effort semantics.

    Provides:
    - Dataset filtering by rating, complexity and category
    - Batched learning with a cooperative delay between batches
    - Domain-knowledge mining into the knowledge graph
    - Pollable progress, cancellation and an optional run deadline
    """

    def __init__(
        self,
        engine: "ReasoningEngine",
        config: TrainingConfig | dict[str, Any] | None = None,
    ) -> None:
        self._engine = engine
        self.config = self._coerce_config(config)
        self._progress = TrainingProgress()
        self._lock = asyncio.Lock()
        self._cancel_requested = False

    @classmethod
    def from_preset(cls, engine: "ReasoningEngine", name: str) -> "AutoTrainer":
        """Create a trainer from a named preset.

        Raises:
            TrainingConfigError: If the preset does not exist
        """
        config = TRAINER_PRESETS.get(name)
        if config is None:
            raise TrainingConfigError(
                f"unknown preset '{name}' (choose from {', '.join(TRAINER_PRESETS)})"
            )
        return cls(engine, config.model_copy(deep=True))

    @staticmethod
    def _coerce_config(
        config: TrainingConfig | dict[str, Any] | None,
    ) -> TrainingConfig:
        if config is None:
            settings = get_settings()
            return TrainingConfig(
                batch_size=settings.training_batch_size,
                delay_between_batches=settings.training_delay_seconds,
                minimum_rating=settings.training_minimum_rating,
            )
        if isinstance(config, TrainingConfig):
            return config
        try:
            return TrainingConfig(**config)
        except ValidationError as e:
            raise TrainingConfigError(str(e)) from e

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    def get_progress(self) -> TrainingProgress:
        """Copy of the current (or last) run's progress."""
        return self._progress.model_copy(deep=True)

    def cancel(self) -> bool:
        """Request that a running training stop before its next batch.

        Returns:
            True if a run was active
        """
        if not self.is_running:
            return False
        self._cancel_requested = True
        logger.info("Training cancellation requested")
        return True

    async def train(
        self, dataset: Sequence[TrainingConversation | dict[str, Any]]
    ) -> TrainingProgress:
        """Run one training pass over a dataset.

        Args:
            dataset: Labeled conversations, in order; unreadable records
                fail their batch instead of the run

        Returns:
            Final TrainingProgress

        Raises:
            TrainingInProgressError: If this trainer is already running
            TrainingCancelledError: If cancel() was called mid-run
            TrainingDeadlineExceededError: If the run outlived its deadline
        """
        if self._lock.locked():
            raise TrainingInProgressError()

        async with self._lock:
            self._cancel_requested = False
            self._progress = TrainingProgress(
                training_start_time=datetime.now(UTC),
                status=TrainingStatus.RUNNING,
            )
            started = time.monotonic()

            try:
                filtered = self._filter_dataset(dataset)
                self._progress.total_conversations = len(filtered)

                batches = self._create_batches(filtered, self.config.batch_size)
                self._progress.total_batches = len(batches)

                if self.config.enable_progress_logging:
                    logger.info(
                        f"Starting auto-training with {len(filtered)} conversations "
                        f"in {len(batches)} batches"
                    )

                for index, batch in enumerate(batches, start=1):
                    self._check_continue(started)
                    await self._process_batch(batch, index, len(batches))

                    if index < len(batches):
                        await asyncio.sleep(self.config.delay_between_batches)

                self._progress.average_rating = self._calculate_average_rating(filtered)
                self._progress.status = TrainingStatus.COMPLETED
                self._progress.training_end_time = datetime.now(UTC)

                if self.config.enable_progress_logging:
                    logger.info(
                        f"Auto-training completed: "
                        f"{self._progress.processed_conversations}/"
                        f"{self._progress.total_conversations} processed, "
                        f"average rating {self._progress.average_rating:.2f}, "
                        f"categories {self._progress.categories_added}, "
                        f"{len(self._progress.errors)} errors, "
                        f"{self._progress.duration_ms:.0f}ms"
                    )

                return self.get_progress()

            except (Exception, asyncio.CancelledError) as e:
                self._progress.status = TrainingStatus.ERROR
                self._progress.errors.append(str(e) or type(e).__name__)
                self._progress.training_end_time = datetime.now(UTC)
                logger.error(f"Auto-training failed: {e}")
                raise

    def _check_continue(self, started: float) -> None:
        if self._cancel_requested:
            raise TrainingCancelledError(
                self._progress.completed_batches, self._progress.total_batches
            )
        deadline = self.config.deadline_seconds
        if deadline is not None:
            elapsed = time.monotonic() - started
            if elapsed > deadline:
                raise TrainingDeadlineExceededError(deadline, elapsed)

    def _filter_dataset(self, dataset: Sequence[Any]) -> list[Any]:
        """Apply the rating, complexity and category filters.

        Records that do not validate as TrainingConversation are kept
        as-is so that their batch fails and records the error.
        """
        complexities = self.config.filter_by_complexity
        categories = self.config.filter_by_category
        kept: list[Any] = []
        for record in dataset:
            try:
                conversation = TrainingConversation.model_validate(record)
            except ValidationError:
                kept.append(record)
                continue
            if (
                conversation.rating >= self.config.minimum_rating
                and (complexities is None or conversation.complexity in complexities)
                and (categories is None or conversation.category in categories)
            ):
                kept.append(conversation)
        return kept

    @staticmethod
    def _create_batches(items: list[Any], batch_size: int) -> list[list[Any]]:
        return [items[i:i + batch_size] for i in range(0, len(items), batch_size)]

    async def _process_batch(
        self,
        batch: list[Any],
        batch_number: int,
        total_batches: int,
    ) -> None:
        """Merge one batch's mined knowledge, then learn from it.

        Validation and mining run before any engine call, and the engine
        learns only after the knowledge insert succeeded, so a failed
        batch leaves node confidences untouched. Failures are recorded
        in progress.errors and never propagate.
        """
        try:
            conversations = [
                TrainingConversation.model_validate(record) for record in batch
            ]
            knowledge = extract_domain_knowledge(conversations)
            triples = [
                (c.query, c.response, c.rating / RATING_SCALE) for c in conversations
            ]

            for domain, items in knowledge.items():
                if items:
                    self._engine.add_domain_knowledge(domain, items)
            self._engine.train_batch(triples)

            self._progress.processed_conversations += len(conversations)
            self._progress.completed_batches += 1
            for conversation in conversations:
                if conversation.category not in self._progress.categories_added:
                    self._progress.categories_added.append(conversation.category)

            if self.config.enable_progress_logging:
                logger.info(
                    f"Batch {batch_number}/{total_batches} completed "
                    f"({self._progress.percent_complete:.0f}%)"
                )

        except Exception as e:
            message = f"Batch {batch_number} failed: {e}"
            self._progress.errors.append(message)
            logger.warning(message)

    @staticmethod
    def _calculate_average_rating(dataset: list[Any]) -> float:
        rated = [c for c in dataset if isinstance(c, TrainingConversation)]
        if not rated:
            return 0.0
        return sum(c.rating for c in rated) / len(rated)
