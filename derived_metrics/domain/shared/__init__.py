"""Shared domain primitives: measurements and exceptions."""

from .errors import (
    DomainError,
    InvalidResultError,
    MetricsDomainError,
    MissingInputError,
    UnitMismatchError,
)
from .measurement import (
    Measurement,
    Unit,
    UnitFamily,
    to_centimeters,
    to_inches,
    to_joules,
    to_kilograms,
    to_meters,
    to_pounds,
    to_seconds,
)

__all__ = [
    "DomainError",
    "MetricsDomainError",
    "MissingInputError",
    "InvalidResultError",
    "UnitMismatchError",
    "Measurement",
    "Unit",
    "UnitFamily",
    "to_meters",
    "to_centimeters",
    "to_inches",
    "to_kilograms",
    "to_pounds",
    "to_seconds",
    "to_joules",
]
