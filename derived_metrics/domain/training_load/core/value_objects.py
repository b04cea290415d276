"""
Training-load value objects.

Logged sets, the per-exercise physics profile and the athlete's
body stats, shared by the work/power calculator and the muscle-work
aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from derived_metrics.domain.shared.measurement import Measurement, Unit, UnitFamily

MuscleWorkMap = Dict[str, float]


def _require(v: Optional[Measurement], family: UnitFamily) -> Optional[Measurement]:
    if v is not None:
        v.require_family(family)
    return v


class WorkPowerConstants(BaseModel):
    """
    Per-exercise physics profile.

    Configuration data attached to an exercise definition. When
    ``use_calories`` is true every other field is ignored.

    Example:
        >>> squat = WorkPowerConstants(leg_length_factor=0.5, bodyweight_factor=0.85)
        >>> squat.default_distance
        Measurement(value=0.0, unit=<Unit.METER: 'm'>)
    """

    model_config = ConfigDict(frozen=True)

    use_calories: bool = False
    default_distance: Measurement = Field(
        default_factory=lambda: Measurement(value=0.0, unit=Unit.METER)
    )
    arm_length_factor: float = 0.0
    leg_length_factor: float = 0.0
    bodyweight_factor: float = 0.0

    @field_validator("default_distance")
    @classmethod
    def distance_family(cls, v: Measurement) -> Measurement:
        """Default distance must be a distance."""
        return _require(v, UnitFamily.DISTANCE)

    @property
    def uses_limbs(self) -> bool:
        """True when range of motion comes from the athlete's limbs."""
        return self.arm_length_factor != 0 or self.leg_length_factor != 0


class MuscleGroups(BaseModel):
    """Muscle groups trained by an exercise (identifiers or names)."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(..., min_length=1)
    secondary: Optional[str] = None
    tertiary: Optional[str] = None


class ExerciseSetRecord(BaseModel):
    """
    Measurable facts of one logged set.

    ``constants`` and ``muscle_groups`` come from the exercise
    definition; a set without constants uses the default profile.
    """

    model_config = ConfigDict(frozen=True)

    reps: Optional[int] = Field(default=None, ge=0)
    external_load: Optional[Measurement] = None
    distance: Optional[Measurement] = None
    time: Optional[Measurement] = None
    calories: Optional[Measurement] = None
    constants: Optional[WorkPowerConstants] = None
    muscle_groups: Optional[MuscleGroups] = None

    @field_validator("external_load")
    @classmethod
    def load_family(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        return _require(v, UnitFamily.WEIGHT)

    @field_validator("distance")
    @classmethod
    def distance_family(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        return _require(v, UnitFamily.DISTANCE)

    @field_validator("time")
    @classmethod
    def time_family(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        return _require(v, UnitFamily.TIME)

    @field_validator("calories")
    @classmethod
    def calories_family(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        return _require(v, UnitFamily.ENERGY)


class UserStats(BaseModel):
    """
    Latest known body stats of the athlete.

    The caller resolves "latest" values before calling the engine;
    every field may be absent here and the calculator decides what
    is mandatory.
    """

    model_config = ConfigDict(frozen=True)

    weight: Optional[Measurement] = None
    height: Optional[Measurement] = None
    arm_length: Optional[Measurement] = None
    leg_length: Optional[Measurement] = None

    @field_validator("weight")
    @classmethod
    def weight_family(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        return _require(v, UnitFamily.WEIGHT)

    @field_validator("height", "arm_length", "leg_length")
    @classmethod
    def length_family(cls, v: Optional[Measurement]) -> Optional[Measurement]:
        return _require(v, UnitFamily.DISTANCE)


@dataclass(frozen=True)
class SetWork:
    """Work breakdown for one set.

    Attributes:
        work_j: Work in joules
        force_n: Effective force in newtons (0 for calorie sets)
        distance_m: Distance per rep in meters (0 for calorie sets)
        reps: Repetitions counted
        from_calories: True when work came from logged calories
    """

    work_j: float
    force_n: float = 0.0
    distance_m: float = 0.0
    reps: int = 1
    from_calories: bool = False


@dataclass(frozen=True)
class WorkPowerResult:
    """Mechanical work (and power, when a duration was given).

    Attributes:
        all_work: Total work in joules
        average_power: Average power in watts; None when no duration
            was supplied (not computable, distinct from zero)
        sets: Per-set breakdown, in input order
    """

    all_work: Measurement
    average_power: Optional[Measurement] = None
    sets: Tuple[SetWork, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "all_work": {"value": self.all_work.value, "unit": self.all_work.unit.value},
        }
        if self.average_power is not None:
            data["average_power"] = {
                "value": self.average_power.value,
                "unit": self.average_power.unit.value,
            }
        return data
