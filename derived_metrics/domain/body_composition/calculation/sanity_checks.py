"""Plausibility checks for body-fat inputs and method agreement.

Every check returns flags; none of them raise.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from ..core.value_objects.body_fat_input import BodyFatInput
from ..core.value_objects.body_fat_result import (
    FlagSeverity,
    NormalizedBodyMeasures,
    SanityFlag,
)

WAIST_TO_NECK_BAND: Tuple[float, float] = (1.0, 4.0)
WAIST_TO_HEIGHT_BAND: Tuple[float, float] = (0.35, 0.75)
BMI_BAND: Tuple[float, float] = (15.0, 45.0)


def validate_numerics(data: BodyFatInput) -> List[SanityFlag]:
    """Flag non-finite or non-positive raw inputs."""
    flags: List[SanityFlag] = []
    values: Sequence[Tuple[str, Optional[float]]] = (
        ("age", data.age),
        ("height", data.height.value if data.height is not None else None),
        ("weight", data.weight.value if data.weight is not None else None),
        ("neck", data.neck),
        ("waist", data.waist),
        ("hip", data.hip),
    )
    for name, value in values:
        if value is None:
            continue
        if not math.isfinite(value):
            flags.append(
                SanityFlag(
                    code="INVALID_NUMERIC",
                    message=f"Input '{name}' is not a finite number.",
                    severity=FlagSeverity.ERROR,
                )
            )
        elif value <= 0:
            flags.append(
                SanityFlag(
                    code="OUT_OF_RANGE",
                    message=f"Input '{name}' must be > 0.",
                    severity=FlagSeverity.ERROR,
                )
            )
    return flags


def plausibility_checks(measures: NormalizedBodyMeasures) -> List[SanityFlag]:
    """Flag ratios outside typical adult ranges."""
    flags: List[SanityFlag] = []

    ratio = measures.waist_to_neck
    if ratio is not None and not _within(ratio, WAIST_TO_NECK_BAND):
        flags.append(
            SanityFlag(
                code="WAIST_NECK_RATIO",
                message=(
                    "Waist-to-neck ratio is outside a plausible range. "
                    "This may indicate a tape placement or unit issue."
                ),
            )
        )

    whtr = measures.waist_to_height
    if whtr is not None and not _within(whtr, WAIST_TO_HEIGHT_BAND):
        flags.append(
            SanityFlag(
                code="UNREALISTIC_WH_RATIO",
                message=(
                    "Waist-to-height ratio is outside typical human ranges. "
                    "Re-check measurements and units."
                ),
            )
        )

    bmi = measures.bmi
    if bmi is not None and not _within(bmi, BMI_BAND):
        flags.append(
            SanityFlag(
                code="BMI_OUT_OF_RANGE",
                message="BMI is outside a typical adult range. Re-check height/weight units.",
            )
        )

    return flags


def agreement_checks(
    method_count: int, dispersion: float, threshold: float
) -> List[SanityFlag]:
    """Flag low method coverage or strong disagreement between methods."""
    flags: List[SanityFlag] = []
    if method_count == 1:
        flags.append(
            SanityFlag(
                code="LOW_METHOD_COVERAGE",
                message=(
                    "Only one method could be computed; the composite has no "
                    "cross-method confidence."
                ),
            )
        )
    elif dispersion > threshold:
        flags.append(
            SanityFlag(
                code="EXTREME_METHOD_DISAGREEMENT",
                message=(
                    f"Methods disagree (dispersion {dispersion:.1f} points); low confidence. "
                    "This often indicates tape placement issues or a body type "
                    "outside these formulas' assumptions."
                ),
            )
        )
    return flags


def _within(value: float, band: Tuple[float, float]) -> bool:
    low, high = band
    return low <= value <= high
