"""DeurenbergMethodService - BMI-based body-fat regression."""

from typing import Optional

from ..core.ports.calculators import IBodyFatMethodCalculator
from ..core.value_objects.body_fat_result import (
    FlagSeverity,
    NormalizedBodyMeasures,
    SanityFlag,
)
from ..core.value_objects.composite_strategy import BodyFatMethod
from ..core.value_objects.gender import Gender


class DeurenbergMethodService(IBodyFatMethodCalculator):
    """Estimate body fat from BMI, age and sex.

    Formula:
        BF% = 1.2 × BMI + 0.23 × age − 10.8 × sex − 5.4
        (sex = 1 for men, 0 for women)

    References:
        Deurenberg P, Weststrate JA, Seidell JC. Body mass index as a
        measure of body fatness: age- and sex-specific prediction formulas.
        Br J Nutr. 1991;65(2):105-114.
    """

    method = BodyFatMethod.DEURENBERG

    def skip_reason(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> Optional[SanityFlag]:
        missing = []
        if measures.bmi is None or measures.bmi <= 0:
            missing.append("height/weight")
        if age is None:
            missing.append("age")
        if missing:
            return SanityFlag(
                code="METHOD_SKIPPED",
                message=f"Deurenberg method skipped: {' and '.join(missing)} missing.",
                severity=FlagSeverity.INFO,
            )
        return None

    def calculate(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> float:
        """Calculate Deurenberg body fat.

        Example:
            >>> service = DeurenbergMethodService()
            >>> m = NormalizedBodyMeasures(
            ...     height_cm=200.0, weight_kg=100.0, neck_cm=40.0, waist_cm=90.0
            ... )
            >>> round(service.calculate(Gender.MALE, 40, m), 2)
            23.0
        """
        bmi = measures.bmi
        return 1.2 * bmi + 0.23 * age - 10.8 * gender.deurenberg_sex_term() - 5.4
