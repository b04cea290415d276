"""ProjectedMaxService - one-rep-max projection from a single set."""

from __future__ import annotations

import math
from typing import Optional

import structlog

from derived_metrics.domain.shared.measurement import Measurement, UnitFamily

from ..core.value_objects import (
    EstimatorMode,
    ProjectedMaxMeta,
    ProjectedMaxOptions,
    ProjectedMaxResult,
)

logger = structlog.get_logger(__name__)

OVERAGE_DECAY = 0.35
BRZYCKI_SINGULARITY = 37


def epley_1rm(weight: float, reps: int) -> float:
    """Epley estimate: w × (1 + r/30)."""
    return weight * (1 + reps / 30)


def brzycki_1rm(weight: float, reps: int) -> float:
    """Brzycki estimate: w × 36 / (37 − r); ``inf`` for r >= 37."""
    if reps >= BRZYCKI_SINGULARITY:
        return math.inf
    return weight * 36 / (BRZYCKI_SINGULARITY - reps)


def confidence_for_reps(reps: int, options: Optional[ProjectedMaxOptions] = None) -> float:
    """Confidence that a set of ``reps`` predicts true 1RM.

    Logistic decay over the (capped) rep count, with an extra
    exponential penalty for reps above ``max_reps_for_estimate``:

        logistic = min + (max − min) / (1 + e^(k·(min(r, cap) − mid)))
        penalty  = e^(−0.35·(r − cap)) if r > cap else 1

    Result is clamped to [min, max].

    Example:
        >>> round(confidence_for_reps(1), 2)
        0.94
        >>> confidence_for_reps(30)
        0.2
    """
    opts = options or ProjectedMaxOptions()
    r = max(1, math.floor(reps))
    capped = min(r, opts.max_reps_for_estimate)

    logistic = opts.confidence_min + (opts.confidence_max - opts.confidence_min) / (
        1 + math.exp(opts.confidence_k * (capped - opts.confidence_mid))
    )
    penalty = (
        math.exp(-OVERAGE_DECAY * (r - opts.max_reps_for_estimate))
        if r > opts.max_reps_for_estimate
        else 1.0
    )
    return max(opts.confidence_min, min(logistic * penalty, opts.confidence_max))


class ProjectedMaxService:
    """Project a one-rep max from a single logged set.

    Low-rep sets (1-5) predict maximal strength well (~95% confidence);
    high-rep sets (15+) are confounded by fatigue (~20%).

    Formulas (w = weight, r = max(1, floor(reps))):
        Epley:   w × (1 + r/30)
        Brzycki: w × 36 / (37 − r), +inf for r >= 37
        Blend:   (Epley + Brzycki) / 2

    References:
        Epley B. Poundage chart. Boyd Epley Workout. 1985.
        Brzycki M. Strength testing: predicting a one-rep max from
        reps-to-fatigue. JOPERD. 1993;64(1):88-90.
    """

    def __init__(self, options: Optional[ProjectedMaxOptions] = None) -> None:
        self.options = options or ProjectedMaxOptions()

    def calculate(
        self,
        reps: int,
        weight: Measurement,
        options: Optional[ProjectedMaxOptions] = None,
    ) -> ProjectedMaxResult:
        """Calculate the projected max.

        Args:
            reps: Repetitions performed (floored, minimum 1)
            weight: Load lifted; must be a weight unit
            options: Per-call override of the service options

        Returns:
            ProjectedMaxResult in the same unit as ``weight``

        Raises:
            UnitMismatchError: If ``weight`` is not a weight measurement

        Example:
            >>> service = ProjectedMaxService()
            >>> result = service.calculate(5, Measurement(value=100, unit="kg"))
            >>> round(result.projected_max.value, 2)
            114.58
        """
        weight.require_family(UnitFamily.WEIGHT)
        opts = options or self.options

        r = max(1, math.floor(reps))
        w = max(0.0, weight.value)

        epley = epley_1rm(w, r)
        brzycki = brzycki_1rm(w, r)

        if opts.estimator is EstimatorMode.EPLEY:
            projected = epley
        elif opts.estimator is EstimatorMode.BRZYCKI:
            projected = brzycki
        else:
            projected = (epley + brzycki) / 2

        confidence = confidence_for_reps(r, opts)

        logger.debug(
            "Projected max calculated",
            reps=r,
            estimator=opts.estimator.value,
            projected=projected,
            confidence=confidence,
        )

        return ProjectedMaxResult(
            projected_max=Measurement(value=projected, unit=weight.unit),
            confidence=confidence,
            meta=ProjectedMaxMeta(
                reps_used=r,
                estimator=opts.estimator,
                epley=epley,
                brzycki=brzycki,
            ),
        )


def calculate_projected_max(
    reps: int,
    weight: Measurement,
    options: Optional[ProjectedMaxOptions] = None,
) -> ProjectedMaxResult:
    """Project a one-rep max (see :class:`ProjectedMaxService`)."""
    return ProjectedMaxService().calculate(reps, weight, options)
