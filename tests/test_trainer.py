"""Tests for the auto-trainer."""

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from jarvy.exceptions import (
    TrainingCancelledError,
    TrainingConfigError,
    TrainingDeadlineExceededError,
    TrainingInProgressError,
)
from jarvy.manager.trainer import TRAINER_PRESETS, AutoTrainer
from jarvy.manager.training_data import SAMPLE_TRAINING_DATA
from jarvy.models.reasoning import Complexity
from jarvy.models.training import (
    TrainingConfig,
    TrainingConversation,
    TrainingProgress,
    TrainingStatus,
)


def _conversation(category: str, rating: int = 5, **kwargs) -> TrainingConversation:
    defaults = dict(
        query="Explain caching layers",
        response="Caching is a way to avoid repeated work",
        rating=rating,
        category=category,
        complexity=Complexity.MODERATE,
    )
    defaults.update(kwargs)
    return TrainingConversation(**defaults)


def _dataset() -> list[TrainingConversation]:
    return (
        [_conversation("alpha") for _ in range(10)]
        + [_conversation("beta") for _ in range(10)]
        + [_conversation("gamma") for _ in range(5)]
    )


@pytest.fixture
def mock_engine():
    engine = MagicMock()
    engine.train_batch.return_value = 0
    engine.add_domain_knowledge.return_value = []
    return engine


@pytest.fixture
def fast_config() -> TrainingConfig:
    return TrainingConfig(batch_size=10, delay_between_batches=0.0)


# =============================================================================
# Configuration
# =============================================================================


class TestConfiguration:
    """Tests for config coercion and presets."""

    def test_defaults_come_from_settings(self, mock_engine, monkeypatch):
        monkeypatch.setenv("JARVY_TRAINING_BATCH_SIZE", "7")
        monkeypatch.setenv("JARVY_TRAINING_MINIMUM_RATING", "3")
        trainer = AutoTrainer(mock_engine)
        assert trainer.config.batch_size == 7
        assert trainer.config.minimum_rating == 3
        assert trainer.config.delay_between_batches == 0.1

    def test_dict_config(self, mock_engine):
        trainer = AutoTrainer(mock_engine, {"batch_size": 3, "minimum_rating": 5})
        assert trainer.config.batch_size == 3
        assert trainer.config.minimum_rating == 5

    @pytest.mark.parametrize(
        "config",
        [
            {"batch_size": 0},
            {"delay_between_batches": -1},
            {"minimum_rating": 6},
            {"filter_by_category": []},
        ],
    )
    def test_invalid_config(self, mock_engine, config):
        with pytest.raises(TrainingConfigError):
            AutoTrainer(mock_engine, config)

    def test_presets(self, mock_engine):
        assert set(TRAINER_PRESETS) == {
            "comprehensive", "quick", "expert", "technology", "business", "health",
        }
        trainer = AutoTrainer.from_preset(mock_engine, "expert")
        assert trainer.config.batch_size == 5
        assert trainer.config.minimum_rating == 5
        assert trainer.config.filter_by_complexity == [Complexity.COMPLEX, Complexity.EXPERT]

    def test_preset_is_copied(self, mock_engine):
        trainer = AutoTrainer.from_preset(mock_engine, "health")
        trainer.config.filter_by_category.append("fitness")
        assert TRAINER_PRESETS["health"].filter_by_category == ["health"]

    def test_unknown_preset(self, mock_engine):
        with pytest.raises(TrainingConfigError) as exc_info:
            AutoTrainer.from_preset(mock_engine, "nope")
        assert "nope" in str(exc_info.value)


# =============================================================================
# Training runs
# =============================================================================


class TestTrain:
    """Tests for AutoTrainer.train()."""

    @pytest.mark.asyncio
    async def test_batches_and_feedback_scaling(self, mock_engine, fast_config):
        trainer = AutoTrainer(mock_engine, fast_config)
        progress = await trainer.train(_dataset())

        assert mock_engine.train_batch.call_count == 3
        first_batch = mock_engine.train_batch.call_args_list[0].args[0]
        assert len(first_batch) == 10
        assert first_batch[0] == (
            "Explain caching layers", "Caching is a way to avoid repeated work", 1.0,
        )
        assert progress.status == TrainingStatus.COMPLETED
        assert progress.total_conversations == 25
        assert progress.processed_conversations == 25
        assert progress.total_batches == 3
        assert progress.completed_batches == 3
        assert progress.categories_added == ["alpha", "beta", "gamma"]
        assert progress.percent_complete == 100.0
        assert progress.training_end_time is not None
        assert progress.duration_ms >= 0

    @pytest.mark.asyncio
    async def test_failed_batch_is_skipped(self, mock_engine, fast_config):
        def add_domain_knowledge(domain, items):
            if domain == "beta":
                raise RuntimeError("store unavailable")
            return []

        mock_engine.add_domain_knowledge.side_effect = add_domain_knowledge
        trainer = AutoTrainer(mock_engine, fast_config)
        progress = await trainer.train(_dataset())

        assert progress.status == TrainingStatus.COMPLETED
        assert progress.errors == ["Batch 2 failed: store unavailable"]
        assert progress.processed_conversations == 15
        assert progress.completed_batches == 2
        assert progress.categories_added == ["alpha", "gamma"]
        # batch 2 never reached the learning step
        assert mock_engine.train_batch.call_count == 2

    @pytest.mark.asyncio
    async def test_malformed_record_fails_only_its_batch(self, mock_engine, fast_config):
        dataset = (
            [_conversation("alpha") for _ in range(10)]
            + [{"query": "x"}]
            + [_conversation("beta") for _ in range(9)]
        )
        trainer = AutoTrainer(mock_engine, fast_config)
        progress = await trainer.train(dataset)

        assert progress.status == TrainingStatus.COMPLETED
        assert progress.total_conversations == 20
        assert progress.total_batches == 2
        assert progress.processed_conversations == 10
        assert progress.completed_batches == 1
        assert len(progress.errors) == 1
        assert progress.errors[0].startswith("Batch 2 failed:")
        assert progress.average_rating == 5.0
        assert mock_engine.train_batch.call_count == 1

    @pytest.mark.asyncio
    async def test_dict_records_are_accepted(self, mock_engine, fast_config):
        record = _conversation("alpha").model_dump()
        progress = await AutoTrainer(mock_engine, fast_config).train([record])
        assert progress.processed_conversations == 1
        assert progress.errors == []

    @pytest.mark.asyncio
    async def test_filters(self, mock_engine, fast_config):
        dataset = [
            _conversation("alpha", rating=3),
            _conversation("alpha", complexity=Complexity.EXPERT),
            _conversation("beta"),
        ]
        config = fast_config.model_copy(
            update={"filter_by_complexity": [Complexity.MODERATE]}
        )
        progress = await AutoTrainer(mock_engine, config).train(dataset)
        assert progress.total_conversations == 1
        assert progress.categories_added == ["beta"]

        config = fast_config.model_copy(update={"filter_by_category": ["alpha"]})
        progress = await AutoTrainer(mock_engine, config).train(dataset)
        assert progress.total_conversations == 1

    @pytest.mark.asyncio
    async def test_empty_dataset(self, mock_engine, fast_config):
        progress = await AutoTrainer(mock_engine, fast_config).train([])
        assert progress.status == TrainingStatus.COMPLETED
        assert progress.total_batches == 0
        assert progress.average_rating == 0.0
        assert progress.percent_complete == 0.0
        mock_engine.train_batch.assert_not_called()

    @pytest.mark.asyncio
    async def test_sample_data_into_real_engine(self, engine, fast_config):
        progress = await AutoTrainer(engine, fast_config).train(SAMPLE_TRAINING_DATA)

        assert progress.status == TrainingStatus.COMPLETED
        assert progress.total_conversations == 5
        assert progress.average_rating == pytest.approx(4.8)
        assert progress.categories_added == ["technology", "business", "health", "education"]
        assert progress.errors == []
        assert "difference" in engine.graph
        assert "optimize" in engine.graph
        assert engine.graph.require("validate").category == "business"

    @pytest.mark.asyncio
    async def test_progress_is_a_copy(self, mock_engine, fast_config):
        trainer = AutoTrainer(mock_engine, fast_config)
        await trainer.train(_dataset())
        progress = trainer.get_progress()
        progress.errors.append("tampered")
        assert trainer.get_progress().errors == []


# =============================================================================
# Failure modes
# =============================================================================


class TestFailureModes:
    """Tests for fatal errors, cancellation, deadlines and re-entry."""

    @pytest.mark.asyncio
    async def test_fatal_error_sets_error_status(self, mock_engine, fast_config):
        trainer = AutoTrainer(mock_engine, fast_config)
        with patch.object(
            trainer, "_filter_dataset", side_effect=RuntimeError("bad dataset")
        ):
            with pytest.raises(RuntimeError):
                await trainer.train(_dataset())

        progress = trainer.get_progress()
        assert progress.status == TrainingStatus.ERROR
        assert progress.errors == ["bad dataset"]
        assert progress.training_end_time is not None
        assert not trainer.is_running

    @pytest.mark.asyncio
    async def test_cancel_stops_before_next_batch(self, mock_engine, fast_config):
        trainer = AutoTrainer(mock_engine, fast_config)
        mock_engine.train_batch.side_effect = lambda data: trainer.cancel()

        with pytest.raises(TrainingCancelledError) as exc_info:
            await trainer.train(_dataset())

        assert exc_info.value.completed_batches == 1
        assert exc_info.value.total_batches == 3
        assert mock_engine.train_batch.call_count == 1
        assert trainer.get_progress().status == TrainingStatus.ERROR

    def test_cancel_when_idle(self, mock_engine):
        assert AutoTrainer(mock_engine).cancel() is False

    @pytest.mark.asyncio
    async def test_deadline(self, mock_engine):
        config = TrainingConfig(
            batch_size=10, delay_between_batches=0.05, deadline_seconds=0.001
        )
        trainer = AutoTrainer(mock_engine, config)

        with pytest.raises(TrainingDeadlineExceededError):
            await trainer.train(_dataset())

        assert mock_engine.train_batch.call_count == 1
        assert trainer.get_progress().status == TrainingStatus.ERROR

    @pytest.mark.asyncio
    async def test_concurrent_run_rejected(self, mock_engine):
        config = TrainingConfig(batch_size=10, delay_between_batches=0.05)
        trainer = AutoTrainer(mock_engine, config)

        first = asyncio.create_task(trainer.train(_dataset()))
        await asyncio.sleep(0)
        assert trainer.is_running

        with pytest.raises(TrainingInProgressError):
            await trainer.train(_dataset())

        progress = await first
        assert progress.status == TrainingStatus.COMPLETED
        assert not trainer.is_running


class TestTrainingProgress:
    """Tests for TrainingProgress derived fields."""

    def test_running_progress(self):
        progress = TrainingProgress(total_conversations=4, processed_conversations=1)
        assert progress.duration_ms == 0.0
        assert progress.percent_complete == 25.0


class TestFailedBatchWrites:
    """A failed batch must not leave its learning applied."""

    @staticmethod
    def _quantum_conversation() -> TrainingConversation:
        return _conversation(
            "science",
            query="Explain quantum computing",
            response="Quantum computing is built on qubits",
        )

    @pytest.mark.asyncio
    async def test_insert_failure_keeps_confidence(self, engine, fast_config):
        before = engine.graph.require("quantum_computing").confidence
        trainer = AutoTrainer(engine, fast_config)

        with patch.object(
            engine, "add_domain_knowledge", side_effect=RuntimeError("store unavailable")
        ):
            progress = await trainer.train([self._quantum_conversation()])

        assert progress.status == TrainingStatus.COMPLETED
        assert progress.errors == ["Batch 1 failed: store unavailable"]
        assert progress.processed_conversations == 0
        assert engine.graph.require("quantum_computing").confidence == before

    @pytest.mark.asyncio
    async def test_mining_failure_skips_engine_calls(self, mock_engine, fast_config):
        trainer = AutoTrainer(mock_engine, fast_config)

        with patch(
            "jarvy.manager.trainer.extract_domain_knowledge",
            side_effect=RuntimeError("bad response text"),
        ):
            progress = await trainer.train([self._quantum_conversation()])

        assert progress.errors == ["Batch 1 failed: bad response text"]
        mock_engine.train_batch.assert_not_called()
        mock_engine.add_domain_knowledge.assert_not_called()

    @pytest.mark.asyncio
    async def test_successful_batch_learns(self, engine, fast_config):
        before = engine.graph.require("quantum_computing").confidence
        await AutoTrainer(engine, fast_config).train([self._quantum_conversation()])
        assert engine.graph.require("quantum_computing").confidence > before
