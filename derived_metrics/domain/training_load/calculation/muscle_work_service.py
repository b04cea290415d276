"""MuscleWorkService - distribute set load across trained muscle groups."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Optional, Union

import structlog

from ..core.value_objects import ExerciseSetRecord, MuscleWorkMap

logger = structlog.get_logger(__name__)

PRIMARY_WEIGHT = 1.0
SECONDARY_WEIGHT = 0.5
TERTIARY_WEIGHT = 0.25

MuscleGroupResolver = Union[Mapping[str, str], Callable[[str], Optional[str]]]


def set_load(record: ExerciseSetRecord) -> float:
    """Relative load of a set (unitless).

    First non-zero of: weight × distance, weight × reps, reps,
    distance, time; otherwise 1 so every logged set counts.

    Example:
        >>> set_load(ExerciseSetRecord(reps=10))
        10.0
        >>> set_load(ExerciseSetRecord())
        1.0
    """
    weight = record.external_load.value if record.external_load is not None else 0.0
    reps = float(record.reps or 0)
    distance = record.distance.value if record.distance is not None else 0.0
    time = record.time.value if record.time is not None else 0.0

    if weight > 0 and distance > 0:
        return weight * distance
    if weight > 0 and reps > 0:
        return weight * reps
    if reps > 0:
        return reps
    if distance > 0:
        return distance
    if time > 0:
        return time
    return 1.0


class MuscleWorkService:
    """Apportion each set's load to the muscles it trains.

    Weights: primary 1.0, secondary 0.5, tertiary 0.25.

    Best-effort visualization aid: identifiers the resolver cannot map
    to a group name are skipped, never raised.
    """

    def __init__(self, resolver: Optional[MuscleGroupResolver] = None) -> None:
        """Initialize service.

        Args:
            resolver: Mapping or callable from identifier to group name.
                Without one, identifiers are used as names.
        """
        self.resolver = resolver

    def calculate(self, logged_sets: Iterable[ExerciseSetRecord]) -> MuscleWorkMap:
        """Accumulate load per muscle group.

        Args:
            logged_sets: Logged sets with their exercise's muscle groups

        Returns:
            MuscleWorkMap: group name -> accumulated relative load

        Example:
            >>> service = MuscleWorkService()
            >>> service.calculate([
            ...     ExerciseSetRecord(
            ...         reps=10,
            ...         muscle_groups=MuscleGroups(primary="chest", secondary="triceps"),
            ...     )
            ... ])
            {'chest': 10.0, 'triceps': 5.0}
        """
        work: MuscleWorkMap = {}
        skipped = 0

        for record in logged_sets:
            groups = record.muscle_groups
            if groups is None:
                continue
            load = set_load(record)
            for identifier, weight in (
                (groups.primary, PRIMARY_WEIGHT),
                (groups.secondary, SECONDARY_WEIGHT),
                (groups.tertiary, TERTIARY_WEIGHT),
            ):
                if not identifier:
                    continue
                name = self.resolve(identifier)
                if name is None:
                    skipped += 1
                    continue
                work[name] = work.get(name, 0.0) + load * weight

        if skipped:
            logger.debug("Unresolved muscle groups skipped", count=skipped)
        return work

    def resolve(self, identifier: str) -> Optional[str]:
        """Resolve an identifier to a group name, or None."""
        if self.resolver is None:
            return identifier
        if callable(self.resolver):
            return self.resolver(identifier) or None
        if identifier in self.resolver:
            return self.resolver[identifier]
        if identifier in self.resolver.values():
            return identifier
        return None


def normalize_muscle_work(work: Mapping[str, float]) -> MuscleWorkMap:
    """Scale loads to [0, 1] intensities for heatmap rendering.

    The divisor is the largest load, floored at 1.

    Example:
        >>> normalize_muscle_work({"chest": 10.0, "triceps": 5.0})
        {'chest': 1.0, 'triceps': 0.5}
    """
    peak = max([1.0, *work.values()])
    return {name: min(max(load / peak, 0.0), 1.0) for name, load in work.items()}


def calculate_muscle_work_distribution(
    logged_sets: Iterable[ExerciseSetRecord],
    muscle_group_resolver: Optional[MuscleGroupResolver] = None,
) -> MuscleWorkMap:
    """Distribute set load across muscle groups (see :class:`MuscleWorkService`)."""
    return MuscleWorkService(muscle_group_resolver).calculate(logged_sets)
