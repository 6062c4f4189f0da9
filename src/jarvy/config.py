"""Configuration and environment loading for Jarvy."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (JARVY_*)."""

    model_config = SettingsConfigDict(
        env_prefix="JARVY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    # Intent matching
    match_threshold: float = 0.3
    direct_reply_threshold: float = 0.5
    match_deadline_seconds: float | None = 0.5
    max_input_chars: int = 2000

    # Knowledge graph
    initial_node_confidence: float = 0.7
    relation_similarity_threshold: float = 0.6
    reasoning_depth: int = 3

    # Learning
    learning_rate: float = 0.1

    # Auto-trainer defaults
    training_batch_size: int = 10
    training_delay_seconds: float = 0.1
    training_minimum_rating: int = 4


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
