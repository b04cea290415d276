"""Value objects for body composition domain."""

from .body_fat_input import BodyFatInput, CircumferenceUnit
from .body_fat_result import (
    BodyFatEstimateResult,
    BodyFatMethodEstimate,
    CompositeEstimate,
    FlagSeverity,
    NormalizedBodyMeasures,
    SanityFlag,
)
from .composite_strategy import BodyFatMethod, CompositeStrategy
from .gender import Gender

__all__ = [
    "Gender",
    "CircumferenceUnit",
    "CompositeStrategy",
    "BodyFatMethod",
    "BodyFatInput",
    "BodyFatMethodEstimate",
    "CompositeEstimate",
    "FlagSeverity",
    "NormalizedBodyMeasures",
    "SanityFlag",
    "BodyFatEstimateResult",
]
