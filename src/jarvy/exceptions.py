"""Custom exceptions for Jarvy."""


class TrainingConfigError(Exception):
    """Raised when an auto-trainer configuration cannot be used."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid training configuration: {reason}")


class TrainingInProgressError(Exception):
    """Raised when a trainer is asked to start while a run is active."""

    def __init__(self) -> None:
        super().__init__("A training run is already in progress on this trainer")


class TrainingCancelledError(Exception):
    """Raised inside a run when cancellation was requested."""

    def __init__(self, completed_batches: int, total_batches: int) -> None:
        self.completed_batches = completed_batches
        self.total_batches = total_batches
        super().__init__(
            f"Training cancelled after {completed_batches}/{total_batches} batches"
        )


class TrainingDeadlineExceededError(Exception):
    """Raised when a training run exceeds its deadline."""

    def __init__(self, deadline_seconds: float, elapsed_seconds: float) -> None:
        self.deadline_seconds = deadline_seconds
        self.elapsed_seconds = elapsed_seconds
        super().__init__(
            f"Training deadline exceeded: elapsed={elapsed_seconds:.2f}s, "
            f"deadline={deadline_seconds:.2f}s"
        )


class KnowledgeNodeNotFoundError(KeyError):
    """Raised when a knowledge node id is not in the graph."""

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Knowledge node not found: {node_id}")
