"""NavyMethodService - U.S. Navy circumference method."""

import math
from typing import Optional

from ..core.ports.calculators import IBodyFatMethodCalculator
from ..core.value_objects.body_fat_result import (
    FlagSeverity,
    NormalizedBodyMeasures,
    SanityFlag,
)
from ..core.value_objects.composite_strategy import BodyFatMethod
from ..core.value_objects.gender import Gender

CM_PER_INCH = 2.54


class NavyMethodService(IBodyFatMethodCalculator):
    """Estimate body fat from tape measurements (U.S. Navy method).

    Formula (all lengths in inches; inputs arrive in cm):
        Men:   86.010 × log10(waist − neck) − 70.041 × log10(height) + 36.76
        Women: 163.205 × log10(waist + hip − neck) − 97.684 × log10(height) − 78.387

    The female formula needs the hip circumference; without it the
    method is skipped rather than defaulted.

    References:
        Hodgdon JA, Beckett MB. Prediction of percent body fat for U.S.
        Navy men and women from body circumferences and height.
        Naval Health Research Center, Report No. 84-29/84-11, 1984.
    """

    method = BodyFatMethod.NAVY

    def skip_reason(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> Optional[SanityFlag]:
        if gender is Gender.FEMALE and measures.hip_cm is None:
            return SanityFlag(
                code="MISSING_HIP_FOR_FEMALE_NAVY",
                message="Hip measurement is required for the female Navy formula.",
                severity=FlagSeverity.ERROR,
            )
        if measures.height_cm is None:
            return SanityFlag(
                code="METHOD_SKIPPED",
                message="Navy method skipped: height is missing.",
                severity=FlagSeverity.INFO,
            )
        if self._log_argument(gender, measures) <= 0 or measures.height_cm <= 0:
            return SanityFlag(
                code="NAVY_LOG_DOMAIN_ERROR",
                message=(
                    "Navy formula could not be computed (invalid log10 domain). "
                    "Check tape measurements."
                ),
                severity=FlagSeverity.ERROR,
            )
        return None

    def calculate(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> float:
        """Calculate Navy body fat.

        Example:
            >>> service = NavyMethodService()
            >>> m = NormalizedBodyMeasures(
            ...     height_cm=180.0, weight_kg=80.0, neck_cm=38.0, waist_cm=85.0
            ... )
            >>> round(service.calculate(Gender.MALE, 30, m), 1)
            16.2
        """
        x = self._log_argument(gender, measures) / CM_PER_INCH
        height = measures.height_cm / CM_PER_INCH
        if gender is Gender.MALE:
            return 86.010 * math.log10(x) - 70.041 * math.log10(height) + 36.76
        return 163.205 * math.log10(x) - 97.684 * math.log10(height) - 78.387

    @staticmethod
    def _log_argument(gender: Gender, measures: NormalizedBodyMeasures) -> float:
        if gender is Gender.MALE:
            return measures.waist_cm - measures.neck_cm
        return measures.waist_cm + (measures.hip_cm or 0.0) - measures.neck_cm
