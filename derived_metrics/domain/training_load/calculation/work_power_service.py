"""WorkPowerService - mechanical work and average power of logged sets."""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog

from derived_metrics.domain.shared.errors import MissingInputError
from derived_metrics.domain.shared.measurement import (
    Measurement,
    Unit,
    to_joules,
    to_kilograms,
    to_meters,
    to_seconds,
)

from ..core.value_objects import (
    ExerciseSetRecord,
    SetWork,
    UserStats,
    WorkPowerConstants,
    WorkPowerResult,
)

logger = structlog.get_logger(__name__)

STANDARD_GRAVITY = 9.81
DEFAULT_CONSTANTS = WorkPowerConstants()


class WorkPowerService:
    """Convert logged sets into physical work (J) and power (W).

    Per set:
        calories sets:  work = calories × 4184
        other sets:     force = (bodyweight_kg × bodyweight_factor + load_kg)
                                × 9.81 × (acceleration / 9.81)
                        work  = force × distance_m × reps

    Distance priority: logged distance, then limb-based distance
    (arm_m × arm_factor + leg_m × leg_factor) when either factor is
    non-zero, then the exercise's default distance. Reps default to 1.

    The physics profile is opaque data; no exercise is special-cased.
    """

    def __init__(self, standard_gravity: float = STANDARD_GRAVITY) -> None:
        self.standard_gravity = standard_gravity

    def calculate(
        self,
        user_stats: UserStats,
        exercise_sets: Iterable[ExerciseSetRecord],
        duration: Optional[Measurement] = None,
        acceleration: Optional[float] = None,
    ) -> WorkPowerResult:
        """Calculate total work and, when a duration is given, average power.

        Args:
            user_stats: Athlete's weight and limb lengths
            exercise_sets: Logged sets (at least one)
            duration: Session duration (any time unit)
            acceleration: Acceleration in m/s^2 (defaults to standard gravity)

        Returns:
            WorkPowerResult; ``average_power`` is None without a positive duration

        Raises:
            MissingInputError: If weight, arm length or leg length is missing,
                or ``exercise_sets`` is empty

        Example:
            >>> service = WorkPowerService()
            >>> stats = UserStats(
            ...     weight=Measurement(value=80, unit="kg"),
            ...     arm_length=Measurement(value=60, unit="cm"),
            ...     leg_length=Measurement(value=90, unit="cm"),
            ... )
            >>> row = ExerciseSetRecord(
            ...     reps=1,
            ...     external_load=Measurement(value=100, unit="kg"),
            ...     constants=WorkPowerConstants(
            ...         default_distance=Measurement(value=1, unit="m")
            ...     ),
            ... )
            >>> round(service.calculate(stats, [row]).all_work.value, 6)
            981.0
        """
        missing = [
            name
            for name in ("weight", "arm_length", "leg_length")
            if getattr(user_stats, name) is None
        ]
        if missing:
            raise MissingInputError(*missing)
        exercise_sets = tuple(exercise_sets)
        if not exercise_sets:
            raise MissingInputError("exercise_sets")

        accel = self.standard_gravity if acceleration is None else acceleration

        breakdown: List[SetWork] = [
            self.set_work(user_stats, record, accel) for record in exercise_sets
        ]
        total = sum(item.work_j for item in breakdown)

        average_power: Optional[Measurement] = None
        if duration is not None:
            seconds = to_seconds(duration)
            if seconds > 0:
                average_power = Measurement(value=total / seconds, unit=Unit.WATT)

        logger.debug(
            "Work and power calculated",
            sets=len(breakdown),
            work_j=total,
            power_w=average_power.value if average_power is not None else None,
        )

        return WorkPowerResult(
            all_work=Measurement(value=total, unit=Unit.JOULE),
            average_power=average_power,
            sets=tuple(breakdown),
        )

    def set_work(
        self,
        user_stats: UserStats,
        record: ExerciseSetRecord,
        acceleration: Optional[float] = None,
    ) -> SetWork:
        """Work performed in a single set."""
        constants = record.constants if record.constants is not None else DEFAULT_CONSTANTS
        accel = self.standard_gravity if acceleration is None else acceleration

        if constants.use_calories:
            if record.calories is None:
                return SetWork(work_j=0.0, reps=0, from_calories=True)
            return SetWork(work_j=to_joules(record.calories), reps=0, from_calories=True)

        bodyweight_kg = to_kilograms(user_stats.weight) if user_stats.weight is not None else 0.0
        load_kg = to_kilograms(record.external_load) if record.external_load is not None else 0.0
        mass = bodyweight_kg * constants.bodyweight_factor + load_kg
        force = mass * self.standard_gravity * (accel / self.standard_gravity)

        distance = self.distance_meters(user_stats, record, constants)
        reps = record.reps or 1

        return SetWork(
            work_j=force * distance * reps,
            force_n=force,
            distance_m=distance,
            reps=reps,
        )

    @staticmethod
    def distance_meters(
        user_stats: UserStats,
        record: ExerciseSetRecord,
        constants: WorkPowerConstants,
    ) -> float:
        """Distance per rep, in meters, by priority."""
        if record.distance is not None:
            return to_meters(record.distance)
        if constants.uses_limbs:
            limb = 0.0
            if constants.arm_length_factor and user_stats.arm_length is not None:
                limb += to_meters(user_stats.arm_length) * constants.arm_length_factor
            if constants.leg_length_factor and user_stats.leg_length is not None:
                limb += to_meters(user_stats.leg_length) * constants.leg_length_factor
            return limb
        return to_meters(constants.default_distance)


def calculate_output(
    user_stats: UserStats,
    exercise_sets: Iterable[ExerciseSetRecord],
    duration: Optional[Measurement] = None,
    acceleration: float = STANDARD_GRAVITY,
) -> WorkPowerResult:
    """Calculate work and power (see :class:`WorkPowerService`)."""
    return WorkPowerService().calculate(user_stats, exercise_sets, duration, acceleration)
