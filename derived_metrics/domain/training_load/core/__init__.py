"""Core training-load model."""

from .value_objects import (
    ExerciseSetRecord,
    MuscleGroups,
    MuscleWorkMap,
    SetWork,
    UserStats,
    WorkPowerConstants,
    WorkPowerResult,
)

__all__ = [
    "ExerciseSetRecord",
    "MuscleGroups",
    "MuscleWorkMap",
    "SetWork",
    "UserStats",
    "WorkPowerConstants",
    "WorkPowerResult",
]
