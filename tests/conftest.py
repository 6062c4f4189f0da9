"""Global test configuration for Jarvy."""

import random

import pytest

from jarvy.config import Settings, get_settings
from jarvy.engine import JarvyEngine


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Clear the cached settings so env changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(match_deadline_seconds=None)


@pytest.fixture
def engine(settings: Settings) -> JarvyEngine:
    return JarvyEngine(settings=settings, rng=random.Random(0))
