"""
Derived fitness metrics engine.

Pure, deterministic computations that turn logged measurements into
composite body fat, projected 1RM, mechanical work/power and
muscle-work distribution.
"""

from derived_metrics.application import MetricsEngine, create_metrics_engine
from derived_metrics.domain.body_composition import (
    BodyFatEstimateResult,
    BodyFatInput,
    CompositeStrategy,
    Gender,
    estimate_body_fat,
)
from derived_metrics.domain.shared import (
    DomainError,
    InvalidResultError,
    Measurement,
    MissingInputError,
    Unit,
    UnitMismatchError,
)
from derived_metrics.domain.strength import (
    EstimatorMode,
    ProjectedMaxOptions,
    ProjectedMaxResult,
    calculate_projected_max,
)
from derived_metrics.domain.training_load import (
    ExerciseSetRecord,
    MuscleGroups,
    UserStats,
    WorkPowerConstants,
    WorkPowerResult,
    calculate_muscle_work_distribution,
    calculate_output,
    normalize_muscle_work,
)

__version__ = "0.1.0"

__all__ = [
    "estimate_body_fat",
    "calculate_projected_max",
    "calculate_output",
    "calculate_muscle_work_distribution",
    "normalize_muscle_work",
    "MetricsEngine",
    "create_metrics_engine",
    "Measurement",
    "Unit",
    "BodyFatInput",
    "BodyFatEstimateResult",
    "CompositeStrategy",
    "Gender",
    "EstimatorMode",
    "ProjectedMaxOptions",
    "ProjectedMaxResult",
    "ExerciseSetRecord",
    "MuscleGroups",
    "UserStats",
    "WorkPowerConstants",
    "WorkPowerResult",
    "DomainError",
    "MissingInputError",
    "InvalidResultError",
    "UnitMismatchError",
]
