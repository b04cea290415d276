"""SessionOrchestrator - coordinates training-load services over one session."""

from dataclasses import dataclass
from typing import Iterable, Optional

from derived_metrics.domain.shared.measurement import Measurement
from derived_metrics.domain.training_load.calculation.muscle_work_service import (
    MuscleWorkService,
    normalize_muscle_work,
)
from derived_metrics.domain.training_load.calculation.work_power_service import (
    WorkPowerService,
)
from derived_metrics.domain.training_load.core.value_objects import (
    ExerciseSetRecord,
    MuscleWorkMap,
    UserStats,
    WorkPowerResult,
)


@dataclass(frozen=True)
class SessionAnalysis:
    """Result of a session analysis."""

    work_power: WorkPowerResult
    muscle_work: MuscleWorkMap
    intensities: MuscleWorkMap


class SessionOrchestrator:
    """
    Orchestrates training-load services for a completed session.

    Flow:
    1. Calculate total work (and power) over the logged sets
    2. Distribute the same sets' load across muscle groups
    3. Normalize muscle loads to heatmap intensities
    """

    def __init__(
        self,
        work_power_service: WorkPowerService,
        muscle_work_service: MuscleWorkService,
    ):
        self._work_power_service = work_power_service
        self._muscle_work_service = muscle_work_service

    def analyze(
        self,
        user_stats: UserStats,
        exercise_sets: Iterable[ExerciseSetRecord],
        duration: Optional[Measurement] = None,
    ) -> SessionAnalysis:
        """
        Analyze a logged session.

        Args:
            user_stats: Athlete's latest weight and limb lengths
            exercise_sets: Logged sets of the session
            duration: Session duration, if known

        Returns:
            SessionAnalysis with work/power and muscle distribution

        Raises:
            MissingInputError: If user stats or sets are missing
        """
        exercise_sets = tuple(exercise_sets)
        work_power = self._work_power_service.calculate(
            user_stats=user_stats,
            exercise_sets=exercise_sets,
            duration=duration,
        )
        muscle_work = self._muscle_work_service.calculate(exercise_sets)

        return SessionAnalysis(
            work_power=work_power,
            muscle_work=muscle_work,
            intensities=normalize_muscle_work(muscle_work),
        )
