"""Value objects for projected one-rep-max estimation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from derived_metrics.domain.shared.measurement import Measurement


class EstimatorMode(str, Enum):
    """Which 1RM formula produces the projected max.

    - EPLEY: w × (1 + r/30)
    - BRZYCKI: w × 36 / (37 − r)
    - BLEND: arithmetic mean of both (default)
    """

    EPLEY = "epley"
    BRZYCKI = "brzycki"
    BLEND = "blend"


@dataclass(frozen=True)
class ProjectedMaxOptions:
    """Estimator selection and confidence-curve tuning.

    Attributes:
        estimator: Formula to report
        confidence_max: Confidence ceiling (low-rep sets)
        confidence_min: Confidence floor (high-rep sets)
        confidence_mid: Rep count where confidence drops fastest
        confidence_k: Steepness of the logistic decay
        max_reps_for_estimate: Reps cap for the curve; beyond it an
            exponential overage penalty applies
    """

    estimator: EstimatorMode = EstimatorMode.BLEND
    confidence_max: float = 0.95
    confidence_min: float = 0.20
    confidence_mid: float = 9.0
    confidence_k: float = 0.6
    max_reps_for_estimate: int = 15

    def __post_init__(self) -> None:
        """Validate options.

        Raises:
            ValueError: If the estimator is unknown or the bounds are inverted
        """
        try:
            object.__setattr__(self, "estimator", EstimatorMode(self.estimator))
        except ValueError:
            raise ValueError(f"Unknown estimator '{self.estimator}'") from None
        if self.confidence_min > self.confidence_max:
            raise ValueError(
                f"confidence_min ({self.confidence_min}) must not exceed "
                f"confidence_max ({self.confidence_max})"
            )
        if self.max_reps_for_estimate < 1:
            raise ValueError(
                f"max_reps_for_estimate must be >= 1, got {self.max_reps_for_estimate}"
            )


@dataclass(frozen=True)
class ProjectedMaxMeta:
    """Raw formula outputs, exposed for auditing."""

    reps_used: int
    estimator: EstimatorMode
    epley: float
    brzycki: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reps_used": self.reps_used,
            "estimator": self.estimator.value,
            "epley": self.epley,
            "brzycki": self.brzycki,
        }


@dataclass(frozen=True)
class ProjectedMaxResult:
    """Projected one-rep max with confidence.

    Attributes:
        projected_max: Estimated 1RM, same unit as the input weight.
            ``inf`` when Brzycki is involved and reps >= 37.
        confidence: Reliability of the estimate in [min, max]
        meta: Raw formula outputs
    """

    projected_max: Measurement
    confidence: float
    meta: ProjectedMaxMeta

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.projected_max.value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "projected_max": {
                "value": self.projected_max.value,
                "unit": self.projected_max.unit.value,
            },
            "confidence": self.confidence,
            "meta": self.meta.to_dict(),
        }
