"""Calculation services for strength estimation."""

from .projected_max_service import (
    ProjectedMaxService,
    brzycki_1rm,
    calculate_projected_max,
    confidence_for_reps,
    epley_1rm,
)

__all__ = [
    "ProjectedMaxService",
    "calculate_projected_max",
    "confidence_for_reps",
    "epley_1rm",
    "brzycki_1rm",
]
