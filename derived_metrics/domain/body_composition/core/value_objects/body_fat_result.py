"""Body-fat result value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .composite_strategy import BodyFatMethod, CompositeStrategy


class FlagSeverity(str, Enum):
    """How seriously a sanity flag should be taken."""

    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class SanityFlag:
    """Plausibility warning attached to an estimate.

    Flags never block the composite from being returned.

    Attributes:
        code: Stable machine-readable code (e.g. 'BMI_OUT_OF_RANGE')
        message: Human-readable explanation
        severity: info, warn or error
    """

    code: str
    message: str
    severity: FlagSeverity = FlagSeverity.WARN

    def to_dict(self) -> Dict[str, str]:
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
        }


@dataclass(frozen=True)
class BodyFatMethodEstimate:
    """Body-fat percentage produced by one method.

    Attributes:
        method: Method that produced the value
        body_fat_percent: Estimate in percent
    """

    method: BodyFatMethod
    body_fat_percent: float

    def __post_init__(self) -> None:
        """Validate the estimate is a percentage.

        Raises:
            ValueError: If outside 0-100
        """
        if not (0.0 <= self.body_fat_percent <= 100.0):
            raise ValueError(
                f"Body fat must be 0-100%, got {self.body_fat_percent}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {"method": self.method.value, "body_fat_percent": self.body_fat_percent}


@dataclass(frozen=True)
class CompositeEstimate:
    """Synthesized body-fat estimate with its uncertainty.

    Attributes:
        bf: Composite body fat in percent (0-100)
        dispersion: Standard deviation across contributing methods
        strategy: Aggregation used
        ci68: ~68% band (bf +/- sigma, sigma floored at 2 points)
        ci95: ~95% band (bf +/- 2 sigma)
    """

    bf: float
    dispersion: float
    strategy: CompositeStrategy
    ci68: Tuple[float, float]
    ci95: Tuple[float, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bf": self.bf,
            "dispersion": self.dispersion,
            "strategy": self.strategy.value,
            "ci68": list(self.ci68),
            "ci95": list(self.ci95),
        }


@dataclass(frozen=True)
class NormalizedBodyMeasures:
    """Inputs converted to cm/kg, plus derived ratios.

    Attributes:
        height_cm: Height in centimeters, if known
        weight_kg: Weight in kilograms, if known
        neck_cm: Neck circumference in centimeters
        waist_cm: Waist circumference in centimeters
        hip_cm: Hip circumference in centimeters, if known
    """

    height_cm: Optional[float]
    weight_kg: Optional[float]
    neck_cm: float
    waist_cm: float
    hip_cm: Optional[float] = None

    @property
    def bmi(self) -> Optional[float]:
        """BMI = weight (kg) / (height (m))^2, None when not computable."""
        if self.height_cm is None or self.weight_kg is None or self.height_cm <= 0:
            return None
        height_m = self.height_cm / 100.0
        return self.weight_kg / (height_m * height_m)

    @property
    def waist_to_height(self) -> Optional[float]:
        if self.height_cm is None or self.height_cm <= 0:
            return None
        return self.waist_cm / self.height_cm

    @property
    def waist_to_neck(self) -> Optional[float]:
        if self.neck_cm <= 0:
            return None
        return self.waist_cm / self.neck_cm

    def to_dict(self) -> Dict[str, Optional[float]]:
        return {
            "height_cm": _round1(self.height_cm),
            "weight_kg": _round1(self.weight_kg),
            "neck_cm": _round1(self.neck_cm),
            "waist_cm": _round1(self.waist_cm),
            "hip_cm": _round1(self.hip_cm),
            "bmi": _round1(self.bmi),
            "waist_to_height": _round1(self.waist_to_height),
        }


@dataclass(frozen=True)
class BodyFatEstimateResult:
    """Outcome of a composite body-fat estimation.

    Attributes:
        methods: Estimates from every method that could be computed
        composite: Synthesized estimate
        flags: Sanity flags raised along the way
        inputs_normalized: Inputs after unit normalization
    """

    methods: Tuple[BodyFatMethodEstimate, ...]
    composite: CompositeEstimate
    flags: Tuple[SanityFlag, ...] = field(default_factory=tuple)
    inputs_normalized: Optional[NormalizedBodyMeasures] = None

    @property
    def warnings(self) -> Tuple[str, ...]:
        """Flag messages, in the order they were raised."""
        return tuple(flag.message for flag in self.flags)

    def has_flag(self, code: str) -> bool:
        return any(flag.code == code for flag in self.flags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "methods": [m.to_dict() for m in self.methods],
            "composite": self.composite.to_dict(),
            "warnings": list(self.warnings),
            "flags": [f.to_dict() for f in self.flags],
            "inputs_normalized": (
                self.inputs_normalized.to_dict() if self.inputs_normalized else None
            ),
        }


def _round1(value: Optional[float]) -> Optional[float]:
    return None if value is None else round(value, 1)
