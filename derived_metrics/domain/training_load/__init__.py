"""Training load: mechanical work/power and muscle-work distribution."""

from .calculation import (
    MuscleWorkService,
    WorkPowerService,
    calculate_muscle_work_distribution,
    calculate_output,
    normalize_muscle_work,
)
from .core import (
    ExerciseSetRecord,
    MuscleGroups,
    MuscleWorkMap,
    UserStats,
    WorkPowerConstants,
    WorkPowerResult,
)

__all__ = [
    "WorkPowerService",
    "MuscleWorkService",
    "calculate_output",
    "calculate_muscle_work_distribution",
    "normalize_muscle_work",
    "ExerciseSetRecord",
    "MuscleGroups",
    "MuscleWorkMap",
    "UserStats",
    "WorkPowerConstants",
    "WorkPowerResult",
]
