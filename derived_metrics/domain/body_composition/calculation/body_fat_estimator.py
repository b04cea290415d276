"""BodyFatEstimatorService - composite body-fat estimation."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import structlog

from derived_metrics.domain.shared.errors import InvalidResultError, MissingInputError
from derived_metrics.domain.shared.measurement import (
    Measurement,
    to_centimeters,
    to_kilograms,
)

from ..core.ports.calculators import IBodyFatMethodCalculator
from ..core.value_objects.body_fat_input import BodyFatInput, CircumferenceUnit
from ..core.value_objects.body_fat_result import (
    BodyFatEstimateResult,
    BodyFatMethodEstimate,
    CompositeEstimate,
    FlagSeverity,
    NormalizedBodyMeasures,
    SanityFlag,
)
from ..core.value_objects.composite_strategy import CompositeStrategy
from .composite_strategies import dispersion, get_strategy
from .deurenberg_service import DeurenbergMethodService
from .navy_service import NavyMethodService
from .sanity_checks import agreement_checks, plausibility_checks, validate_numerics
from .ymca_service import YMCAMethodService

logger = structlog.get_logger(__name__)

METHOD_RANGE: Tuple[float, float] = (0.0, 60.0)
COMPOSITE_RANGE: Tuple[float, float] = (0.0, 100.0)
MIN_SIGMA = 2.0


class BodyFatEstimatorService:
    """Reconcile several body-fat formulas into one composite estimate.

    Flow:
    1. Normalize tape and body measurements to cm/kg
    2. Run every method whose inputs are present (Navy, Deurenberg, YMCA)
    3. Clamp each method to 0-60% and synthesize with the chosen strategy
    4. Attach dispersion, confidence bands and sanity flags

    Hard failures:
        MissingInputError: neck/waist missing or no method computable
        InvalidResultError: composite outside 0-100%
    """

    def __init__(
        self,
        methods: Optional[Sequence[IBodyFatMethodCalculator]] = None,
        disagreement_threshold: float = 8.0,
        default_strategy: CompositeStrategy = CompositeStrategy.MEDIAN,
    ) -> None:
        """Initialize service.

        Args:
            methods: Method calculators (defaults to Navy, Deurenberg, YMCA)
            disagreement_threshold: Dispersion above which methods disagree
            default_strategy: Strategy used when the input names none
        """
        self.methods: Tuple[IBodyFatMethodCalculator, ...] = tuple(
            methods
            if methods is not None
            else (NavyMethodService(), DeurenbergMethodService(), YMCAMethodService())
        )
        self.disagreement_threshold = disagreement_threshold
        self.default_strategy = default_strategy

    def estimate(self, data: BodyFatInput) -> BodyFatEstimateResult:
        """Estimate body fat from the supplied measurements.

        Args:
            data: Body measurements

        Returns:
            BodyFatEstimateResult with methods, composite and flags

        Example:
            >>> service = BodyFatEstimatorService()
            >>> result = service.estimate(BodyFatInput(
            ...     gender="male", age=33,
            ...     height=Measurement(value=74, unit="in"),
            ...     weight=Measurement(value=182, unit="lb"),
            ...     neck=16, waist=33.5, circumference_unit="in",
            ... ))
            >>> len(result.methods)
            3
        """
        missing = [name for name in ("neck", "waist") if getattr(data, name) is None]
        if missing:
            raise MissingInputError(*missing)

        measures = self.normalize(data)
        flags: List[SanityFlag] = validate_numerics(data)
        flags.extend(plausibility_checks(measures))

        raw: List[BodyFatMethodEstimate] = []
        for calculator in self.methods:
            reason = calculator.skip_reason(data.gender, data.age, measures)
            if reason is not None:
                flags.append(reason)
                continue
            value = calculator.calculate(data.gender, data.age, measures)
            if not math.isfinite(value):
                flags.append(
                    SanityFlag(
                        code="METHOD_SKIPPED",
                        message=f"{calculator.method.value} method produced a non-finite value.",
                        severity=FlagSeverity.ERROR,
                    )
                )
                continue
            raw.append(
                BodyFatMethodEstimate(
                    method=calculator.method,
                    body_fat_percent=_clamp(value, *METHOD_RANGE),
                )
            )

        if not raw:
            raise MissingInputError(
                message="No body-fat method could be computed from the supplied inputs"
            )

        strategy = data.composite_strategy or self.default_strategy
        bf = get_strategy(strategy)(raw, data.method_weights or {})
        if not math.isfinite(bf) or not (COMPOSITE_RANGE[0] <= bf <= COMPOSITE_RANGE[1]):
            raise InvalidResultError("composite_bf", bf, COMPOSITE_RANGE)

        spread = dispersion(raw)
        flags.extend(agreement_checks(len(raw), spread, self.disagreement_threshold))

        ci68, ci95 = confidence_bands(bf, spread)
        composite = CompositeEstimate(
            bf=round(bf, 1),
            dispersion=round(spread, 1),
            strategy=strategy,
            ci68=ci68,
            ci95=ci95,
        )

        if any(flag.severity is not FlagSeverity.INFO for flag in flags):
            logger.warning(
                "Body fat sanity flags raised",
                codes=[flag.code for flag in flags],
            )
        logger.debug(
            "Body fat estimated",
            methods=[e.method.value for e in raw],
            strategy=strategy.value,
            bf=composite.bf,
            dispersion=composite.dispersion,
        )

        return BodyFatEstimateResult(
            methods=tuple(
                BodyFatMethodEstimate(e.method, round(e.body_fat_percent, 1)) for e in raw
            ),
            composite=composite,
            flags=tuple(flags),
            inputs_normalized=measures,
        )

    @staticmethod
    def normalize(data: BodyFatInput) -> NormalizedBodyMeasures:
        """Convert the input measurements to centimeters and kilograms."""
        unit = data.circumference_unit.value

        def tape_cm(value: Optional[float]) -> Optional[float]:
            if value is None:
                return None
            if data.circumference_unit is CircumferenceUnit.CENTIMETER:
                return value
            return to_centimeters(Measurement(value=value, unit=unit))

        return NormalizedBodyMeasures(
            height_cm=to_centimeters(data.height) if data.height is not None else None,
            weight_kg=to_kilograms(data.weight) if data.weight is not None else None,
            neck_cm=tape_cm(data.neck),
            waist_cm=tape_cm(data.waist),
            hip_cm=tape_cm(data.hip),
        )


def confidence_bands(
    bf: float, spread: float
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Return (ci68, ci95) around ``bf``.

    Sigma is the inter-method dispersion, floored at 2 percentage points.
    """
    sigma = max(MIN_SIGMA, spread)
    ci68 = (_band(bf - sigma), _band(bf + sigma))
    ci95 = (_band(bf - 2 * sigma), _band(bf + 2 * sigma))
    return ci68, ci95


def estimate_body_fat(
    data: BodyFatInput,
    *,
    disagreement_threshold: float = 8.0,
    default_strategy: CompositeStrategy = CompositeStrategy.MEDIAN,
) -> BodyFatEstimateResult:
    """Estimate composite body fat (see :class:`BodyFatEstimatorService`)."""
    service = BodyFatEstimatorService(
        disagreement_threshold=disagreement_threshold,
        default_strategy=default_strategy,
    )
    return service.estimate(data)


def _band(value: float) -> float:
    return round(_clamp(value, *COMPOSITE_RANGE), 1)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
