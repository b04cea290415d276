"""Configuration utilities for the metrics engine.

Values come from environment variables, optionally loaded from a
``.env`` file. Settings only provide defaults; every operation also
accepts explicit options per call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class EngineSettings:
    """Engine-wide defaults.

    Attributes:
        default_composite_strategy: Body-fat synthesis strategy name
        disagreement_threshold: Dispersion (percentage points) above which
            methods are flagged as disagreeing
        confidence_max: Upper bound of the 1RM confidence curve
        confidence_min: Lower bound of the 1RM confidence curve
        confidence_mid: Rep count where confidence drops fastest
        confidence_k: Steepness of the confidence curve
        max_reps_for_estimate: Reps beyond which the overage penalty applies
        standard_gravity: Acceleration (m/s^2) used to normalize force
        log_level: Root log level name
        log_format: 'console' or 'json'
    """

    default_composite_strategy: str = "median"
    disagreement_threshold: float = 8.0
    confidence_max: float = 0.95
    confidence_min: float = 0.20
    confidence_mid: float = 9.0
    confidence_k: float = 0.6
    max_reps_for_estimate: int = 15
    standard_gravity: float = 9.81
    log_level: str = "INFO"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> EngineSettings:
        """Build settings from ``METRICS_*`` and ``LOG_*`` variables."""
        return cls(
            default_composite_strategy=os.getenv(
                "METRICS_DEFAULT_COMPOSITE_STRATEGY", "median"
            ).strip().lower(),
            disagreement_threshold=_get_float("METRICS_DISAGREEMENT_THRESHOLD", 8.0),
            confidence_max=_get_float("METRICS_CONFIDENCE_MAX", 0.95),
            confidence_min=_get_float("METRICS_CONFIDENCE_MIN", 0.20),
            confidence_mid=_get_float("METRICS_CONFIDENCE_MID", 9.0),
            confidence_k=_get_float("METRICS_CONFIDENCE_K", 0.6),
            max_reps_for_estimate=_get_int("METRICS_MAX_REPS_FOR_ESTIMATE", 15),
            standard_gravity=_get_float("METRICS_STANDARD_GRAVITY", 9.81),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("LOG_FORMAT", "console").lower(),
        )


def load_env_file(path: Optional[Path] = None) -> bool:
    """Load a ``.env`` file without overriding variables already set.

    Returns:
        True if a file was found and loaded
    """
    env_path = path or Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Return process-wide settings (read once)."""
    load_env_file()
    return EngineSettings.from_env()
