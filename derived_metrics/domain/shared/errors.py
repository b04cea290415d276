"""
Domain exceptions.

Typed exceptions for the derived metrics engine.
Hard failures only: soft conditions are reported as flags, never raised.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All engine exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# METRICS EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class MetricsDomainError(DomainError):
    """Base exception for derived metric computations."""

    pass


class MissingInputError(MetricsDomainError):
    """
    Hard-minimum inputs for a computation are absent.

    Raised when:
    - Body fat: neck or waist missing, or no method computable
    - Work/power: user weight, arm length or leg length missing
    - Work/power: empty set list

    Example:
        >>> raise MissingInputError("neck", "waist")
    """

    def __init__(self, *fields: str, message: str | None = None):
        self.fields = tuple(fields)
        if message is None:
            message = f"Missing required input(s): {', '.join(fields)}"
        super().__init__(message)


class InvalidResultError(MetricsDomainError):
    """
    Computed value falls outside its physically valid range.

    Raised instead of clamping silently, so the caller can
    discard or flag the entry.

    Example:
        >>> raise InvalidResultError("composite_bf", 104.2, (0.0, 100.0))
    """

    def __init__(self, name: str, value: float, valid_range: tuple[float, float]):
        super().__init__(
            f"{name}={value} is outside valid range "
            f"[{valid_range[0]}, {valid_range[1]}]"
        )
        self.name = name
        self.value = value
        self.valid_range = valid_range


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class UnitMismatchError(DomainError, ValueError):
    """
    Measurement unit does not belong to the expected family.

    Raised when:
    - Converting between families (kg -> m)
    - Passing a distance where a weight is expected

    Example:
        >>> raise UnitMismatchError("Expected weight unit, got 'cm'")
    """

    pass
