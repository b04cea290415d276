"""Calculation services for body composition."""

from .body_fat_estimator import (
    BodyFatEstimatorService,
    confidence_bands,
    estimate_body_fat,
)
from .composite_strategies import dispersion, get_strategy, register_strategy
from .deurenberg_service import DeurenbergMethodService
from .navy_service import NavyMethodService
from .ymca_service import YMCAMethodService

__all__ = [
    "BodyFatEstimatorService",
    "NavyMethodService",
    "DeurenbergMethodService",
    "YMCAMethodService",
    "estimate_body_fat",
    "confidence_bands",
    "dispersion",
    "get_strategy",
    "register_strategy",
]
