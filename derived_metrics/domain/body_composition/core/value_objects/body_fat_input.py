"""BodyFatInput value object - measurements fed to the body-fat estimator."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from derived_metrics.domain.shared.measurement import Measurement, UnitFamily

from .composite_strategy import BodyFatMethod, CompositeStrategy
from .gender import Gender


class CircumferenceUnit(str, Enum):
    """Unit of the tape measurements (neck, waist, hip)."""

    INCH = "in"
    CENTIMETER = "cm"


class BodyFatInput(BaseModel):
    """
    Body measurements for composite body-fat estimation.

    Tape measurements are plain numbers expressed in
    ``circumference_unit``. ``neck`` and ``waist`` are the hard minimum;
    ``hip`` is only needed by the female Navy formula.

    Example:
        >>> data = BodyFatInput(
        ...     gender="male",
        ...     age=33,
        ...     height=Measurement(value=74, unit="in"),
        ...     weight=Measurement(value=182, unit="lb"),
        ...     neck=16,
        ...     waist=33.5,
        ...     circumference_unit="in",
        ... )
        >>> data.composite_strategy is None
        True
    """

    model_config = ConfigDict(frozen=True)

    gender: Gender
    age: Optional[int] = Field(default=None, gt=0, description="Age in years")
    height: Optional[Measurement] = None
    weight: Optional[Measurement] = None
    neck: Optional[float] = None
    waist: Optional[float] = None
    hip: Optional[float] = None
    circumference_unit: CircumferenceUnit = CircumferenceUnit.CENTIMETER
    composite_strategy: Optional[CompositeStrategy] = None
    method_weights: Optional[Dict[BodyFatMethod, float]] = None

    @field_validator("height")
    @classmethod
    def height_is_distance(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        """Height must be a distance."""
        if v is not None:
            v.require_family(UnitFamily.DISTANCE)
        return v

    @field_validator("weight")
    @classmethod
    def weight_is_weight(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        """Weight must be a weight."""
        if v is not None:
            v.require_family(UnitFamily.WEIGHT)
        return v

    @field_validator("method_weights")
    @classmethod
    def weights_non_negative(
        cls, v: Optional[Dict[BodyFatMethod, float]]
    ) -> Optional[Dict[BodyFatMethod, float]]:
        """Method weights cannot be negative."""
        if v is not None:
            for method, weight in v.items():
                if weight < 0:
                    raise ValueError(
                        f"Weight for method '{method.value}' must be non-negative, got {weight}"
                    )
        return v
