"""Auto-trainer models: input records, run configuration and progress."""

from datetime import datetime, UTC
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from jarvy.models.reasoning import Complexity


class TrainingConversation(BaseModel):
    """A labeled conversation example."""

    model_config = ConfigDict(frozen=True)

    query: str
    response: str
    rating: int = Field(ge=1, le=5)
    category: str
    complexity: Complexity
    tags: tuple[str, ...] = ()


class TrainingStatus(str, Enum):
    """Lifecycle of a training run."""

    RUNNING = "running"
    COMPLETED = "completed"
    ERROR = "error"


class TrainingConfig(BaseModel):
    """Configuration for an AutoTrainer."""

    batch_size: int = Field(default=10, gt=0)
    delay_between_batches: float = Field(default=0.1, ge=0.0)  # seconds
    enable_progress_logging: bool = True
    filter_by_complexity: list[Complexity] | None = None
    filter_by_category: list[str] | None = None
    minimum_rating: int = Field(default=4, ge=1, le=5)
    deadline_seconds: float | None = Field(default=None, gt=0.0)

    @field_validator("filter_by_complexity", "filter_by_category")
    @classmethod
    def _non_empty_filter(cls, value: list | None) -> list | None:
        if value is not None and len(value) == 0:
            raise ValueError("allow-lists must be omitted or non-empty")
        return value


class TrainingProgress(BaseModel):
    """Snapshot of a training run."""

    total_conversations: int = 0
    processed_conversations: int = 0
    categories_added: list[str] = Field(default_factory=list)
    average_rating: float = 0.0
    training_start_time: datetime = Field(default_factory=lambda: datetime.now(UTC))
    training_end_time: datetime | None = None
    status: TrainingStatus = TrainingStatus.RUNNING
    errors: list[str] = Field(default_factory=list)
    total_batches: int = 0
    completed_batches: int = 0

    @property
    def duration_ms(self) -> float:
        """Elapsed wall-clock time of a finished run (0 while running)."""
        if self.training_end_time is None:
            return 0.0
        delta = self.training_end_time - self.training_start_time
        return delta.total_seconds() * 1000

    @property
    def percent_complete(self) -> float:
        if self.total_conversations == 0:
            return 0.0
        return self.processed_conversations / self.total_conversations * 100
