"""Strength: projected one-rep-max estimation."""

from .calculation import ProjectedMaxService, calculate_projected_max, confidence_for_reps
from .core import EstimatorMode, ProjectedMaxMeta, ProjectedMaxOptions, ProjectedMaxResult

__all__ = [
    "ProjectedMaxService",
    "calculate_projected_max",
    "confidence_for_reps",
    "EstimatorMode",
    "ProjectedMaxOptions",
    "ProjectedMaxMeta",
    "ProjectedMaxResult",
]
