"""MetricsEngine - services wired with configured defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

import structlog

from derived_metrics.application.training.orchestrators.session_orchestrator import (
    SessionAnalysis,
    SessionOrchestrator,
)
from derived_metrics.domain.body_composition.calculation.body_fat_estimator import (
    BodyFatEstimatorService,
)
from derived_metrics.domain.body_composition.core.value_objects import (
    BodyFatEstimateResult,
    BodyFatInput,
    CompositeStrategy,
)
from derived_metrics.domain.shared.measurement import Measurement
from derived_metrics.domain.strength.calculation.projected_max_service import (
    ProjectedMaxService,
)
from derived_metrics.domain.strength.core.value_objects import (
    EstimatorMode,
    ProjectedMaxOptions,
    ProjectedMaxResult,
)
from derived_metrics.domain.training_load.calculation.muscle_work_service import (
    MuscleGroupResolver,
    MuscleWorkService,
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
from derived_metrics.infrastructure.config import EngineSettings, get_settings

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MetricsEngine:
    """Entry point for callers (request handlers, jobs).

    Holds stateless services configured from :class:`EngineSettings`.
    Safe to share across threads: no call mutates it.
    """

    body_fat: BodyFatEstimatorService
    projected_max: ProjectedMaxService
    work_power: WorkPowerService
    muscle_work: MuscleWorkService

    def estimate_body_fat(self, data: BodyFatInput) -> BodyFatEstimateResult:
        return self.body_fat.estimate(data)

    def calculate_projected_max(
        self,
        reps: int,
        weight: Measurement,
        estimator: Optional[EstimatorMode] = None,
    ) -> ProjectedMaxResult:
        """Project a 1RM. ``estimator`` swaps the formula and keeps the configured curve."""
        options = None
        if estimator is not None:
            options = replace(self.projected_max.options, estimator=estimator)
        return self.projected_max.calculate(reps, weight, options)

    def calculate_output(
        self,
        user_stats: UserStats,
        exercise_sets: Iterable[ExerciseSetRecord],
        duration: Optional[Measurement] = None,
        acceleration: Optional[float] = None,
    ) -> WorkPowerResult:
        return self.work_power.calculate(user_stats, exercise_sets, duration, acceleration)

    def calculate_muscle_work_distribution(
        self,
        logged_sets: Iterable[ExerciseSetRecord],
        muscle_group_resolver: Optional[MuscleGroupResolver] = None,
    ) -> MuscleWorkMap:
        service = (
            MuscleWorkService(muscle_group_resolver)
            if muscle_group_resolver is not None
            else self.muscle_work
        )
        return service.calculate(logged_sets)

    def analyze_session(
        self,
        user_stats: UserStats,
        exercise_sets: Iterable[ExerciseSetRecord],
        duration: Optional[Measurement] = None,
    ) -> SessionAnalysis:
        orchestrator = SessionOrchestrator(self.work_power, self.muscle_work)
        return orchestrator.analyze(user_stats, exercise_sets, duration)


def create_metrics_engine(
    settings: Optional[EngineSettings] = None,
    muscle_group_resolver: Optional[MuscleGroupResolver] = None,
) -> MetricsEngine:
    """
    Create a metrics engine from configuration.

    Environment Variables:
        METRICS_DEFAULT_COMPOSITE_STRATEGY: median, mean, weighted_mean
            or trimmed_mean (unknown values fall back to median)
        METRICS_DISAGREEMENT_THRESHOLD: Body-fat dispersion threshold
        METRICS_CONFIDENCE_*: 1RM confidence curve
        METRICS_STANDARD_GRAVITY: Gravity used to normalize force

    Returns:
        MetricsEngine (a new instance per call)
    """
    settings = settings or get_settings()

    try:
        strategy = CompositeStrategy(settings.default_composite_strategy)
    except ValueError:
        logger.warning(
            "Unknown composite strategy, using median",
            strategy=settings.default_composite_strategy,
        )
        strategy = CompositeStrategy.MEDIAN

    return MetricsEngine(
        body_fat=BodyFatEstimatorService(
            disagreement_threshold=settings.disagreement_threshold,
            default_strategy=strategy,
        ),
        projected_max=ProjectedMaxService(
            ProjectedMaxOptions(
                confidence_max=settings.confidence_max,
                confidence_min=settings.confidence_min,
                confidence_mid=settings.confidence_mid,
                confidence_k=settings.confidence_k,
                max_reps_for_estimate=settings.max_reps_for_estimate,
            )
        ),
        work_power=WorkPowerService(standard_gravity=settings.standard_gravity),
        muscle_work=MuscleWorkService(muscle_group_resolver),
    )
