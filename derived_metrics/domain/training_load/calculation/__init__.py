"""Calculation services for training load."""

from .muscle_work_service import (
    MuscleWorkService,
    calculate_muscle_work_distribution,
    normalize_muscle_work,
    set_load,
)
from .work_power_service import WorkPowerService, calculate_output

__all__ = [
    "WorkPowerService",
    "calculate_output",
    "MuscleWorkService",
    "calculate_muscle_work_distribution",
    "normalize_muscle_work",
    "set_load",
]
