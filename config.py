import os
import logging
from typing import Optional
from dotenv import load_dotenv

from errors import ConfigurationFault

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Score given to resumes that could not be analyzed; must sit in the Medium band.
FALLBACK_SCORE_RANGE = (60, 79)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationFault(f"{name} must be an integer, got {raw!r}")


def _float_env(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationFault(f"{name} must be a number, got {raw!r}")


def check_timeout(value: Optional[float], name: str = "timeout") -> Optional[float]:
    """None means no budget; anything else must be a positive number of seconds."""
    if value is None:
        return None
    if value <= 0:
        raise ConfigurationFault(f"{name} must be positive, got {value}")
    return value


def check_fallback_score(score: int, name: str = "fallback_score") -> int:
    low, high = FALLBACK_SCORE_RANGE
    if not low <= score <= high:
        raise ConfigurationFault(
            f"{name} must be between {low} and {high} so fallback records stay Medium, got {score}"
        )
    return score


def max_workers() -> int:
    """Worker pool size, defaults to the number of available cores."""
    return max(1, _int_env("MAX_WORKERS", os.cpu_count() or 1))


def batch_timeout() -> Optional[float]:
    return check_timeout(_float_env("BATCH_TIMEOUT_SECONDS"), "BATCH_TIMEOUT_SECONDS")


def fallback_score() -> int:
    return check_fallback_score(_int_env("FALLBACK_SCORE", 65), "FALLBACK_SCORE")


def vocabulary_path() -> Optional[str]:
    path = os.getenv("SKILL_VOCABULARY_PATH")
    return path or None
