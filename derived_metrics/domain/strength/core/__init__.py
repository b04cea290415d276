"""Core strength model."""

from .value_objects import (
    EstimatorMode,
    ProjectedMaxMeta,
    ProjectedMaxOptions,
    ProjectedMaxResult,
)

__all__ = [
    "EstimatorMode",
    "ProjectedMaxOptions",
    "ProjectedMaxMeta",
    "ProjectedMaxResult",
]
