"""YMCAMethodService - waist/weight body-fat regression."""

from typing import Optional

from derived_metrics.domain.shared.measurement import Unit

from ..core.ports.calculators import IBodyFatMethodCalculator
from ..core.value_objects.body_fat_result import (
    FlagSeverity,
    NormalizedBodyMeasures,
    SanityFlag,
)
from ..core.value_objects.composite_strategy import BodyFatMethod
from ..core.value_objects.gender import Gender


class YMCAMethodService(IBodyFatMethodCalculator):
    """Estimate body fat from waist and weight only (YMCA formula).

    Weakest data requirement of the three methods; acts as a
    counterweight when the circumference methods disagree.

    Formula (waist in inches, weight in pounds):
        Men:   BF% = (4.15 × waist − 0.082 × weight − 98.42) / weight × 100
        Women: BF% = (4.15 × waist − 0.082 × weight − 76.76) / weight × 100
    """

    method = BodyFatMethod.YMCA

    MALE_CONSTANT = 98.42
    FEMALE_CONSTANT = 76.76

    def skip_reason(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> Optional[SanityFlag]:
        if measures.weight_kg is None or measures.weight_kg <= 0 or measures.waist_cm <= 0:
            return SanityFlag(
                code="METHOD_SKIPPED",
                message="YMCA method skipped: weight or waist missing.",
                severity=FlagSeverity.INFO,
            )
        return None

    def calculate(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> float:
        """Calculate YMCA body fat.

        Example:
            >>> service = YMCAMethodService()
            >>> m = NormalizedBodyMeasures(
            ...     height_cm=180.0, weight_kg=81.64663, neck_cm=40.0, waist_cm=86.36
            ... )
            >>> round(service.calculate(Gender.MALE, None, m), 1)
            15.5
        """
        waist_in = measures.waist_cm / 2.54
        weight_lb = measures.weight_kg / Unit.POUND.to_canonical
        constant = self.MALE_CONSTANT if gender is Gender.MALE else self.FEMALE_CONSTANT
        return (4.15 * waist_in - 0.082 * weight_lb - constant) / weight_lb * 100
