"""Body composition: composite body-fat estimation."""

from .calculation import BodyFatEstimatorService, estimate_body_fat
from .core.value_objects import (
    BodyFatEstimateResult,
    BodyFatInput,
    BodyFatMethod,
    BodyFatMethodEstimate,
    CircumferenceUnit,
    CompositeStrategy,
    Gender,
    SanityFlag,
)

__all__ = [
    "BodyFatEstimatorService",
    "estimate_body_fat",
    "BodyFatInput",
    "BodyFatEstimateResult",
    "BodyFatMethod",
    "BodyFatMethodEstimate",
    "CircumferenceUnit",
    "CompositeStrategy",
    "Gender",
    "SanityFlag",
]
