from datetime import datetime, timezone

import pytest

from matching.batch import BatchAnalyzer
from matching.vocabulary import get_dictionary

FIXED_TIME = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

CONFIG_VARS = ["SKILL_VOCABULARY_PATH", "MAX_WORKERS", "BATCH_TIMEOUT_SECONDS", "FALLBACK_SCORE"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test against the default vocabulary and settings."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    get_dictionary.cache_clear()
    yield
    get_dictionary.cache_clear()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def analyzer(fixed_clock):
    return BatchAnalyzer(max_workers=1, fallback_score=65, clock=fixed_clock)
