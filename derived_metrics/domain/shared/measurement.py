"""
Measurement value object.

Unit-tagged numeric values shared by every estimator.
Conversions go through one canonical unit per family
(kg, m, s, J, W) and only happen at computation boundaries.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import UnitMismatchError


class UnitFamily(str, Enum):
    """Physical quantity a unit measures."""

    WEIGHT = "weight"
    DISTANCE = "distance"
    TIME = "time"
    PERCENTAGE = "percentage"
    ENERGY = "energy"
    POWER = "power"
    COUNT = "count"


class Unit(str, Enum):
    """Supported measurement units.

    Example:
        >>> Unit.KILOGRAM.family
        <UnitFamily.WEIGHT: 'weight'>
        >>> Unit.FOOT.to_canonical
        0.3048
    """

    # weight
    KILOGRAM = "kg"
    POUND = "lb"
    # distance
    CENTIMETER = "cm"
    METER = "m"
    INCH = "in"
    FOOT = "ft"
    YARD = "yd"
    KILOMETER = "km"
    MILE = "mi"
    # time
    SECOND = "s"
    MINUTE = "min"
    HOUR = "hr"
    # percentage
    PERCENT = "%"
    # energy
    CALORIE = "cal"
    KILOCALORIE = "kcal"
    JOULE = "J"
    KILOJOULE = "kJ"
    # power
    WATT = "W"
    KILOWATT = "kW"
    # count
    REPS = "reps"

    @property
    def family(self) -> UnitFamily:
        """Family this unit belongs to."""
        return _UNIT_TABLE[self][0]

    @property
    def to_canonical(self) -> float:
        """Multiplier converting a value in this unit to its family's canonical unit."""
        return _UNIT_TABLE[self][1]

    @classmethod
    def parse(cls, raw: Any) -> Unit:
        """Resolve a unit from its symbol, accepting common aliases.

        Raises:
            UnitMismatchError: If the symbol is unknown
        """
        if isinstance(raw, Unit):
            return raw
        symbol = str(raw).strip()
        symbol = UNIT_ALIASES.get(symbol, symbol)
        try:
            return cls(symbol)
        except ValueError:
            raise UnitMismatchError(f"Unknown unit '{raw}'") from None


# Canonical units: kg, m, s, %, J, W, reps.
# Dietary calories: both 'cal' and 'kcal' are 4184 J.
_UNIT_TABLE: Dict[Unit, tuple[UnitFamily, float]] = {
    Unit.KILOGRAM: (UnitFamily.WEIGHT, 1.0),
    Unit.POUND: (UnitFamily.WEIGHT, 0.45359237),
    Unit.CENTIMETER: (UnitFamily.DISTANCE, 0.01),
    Unit.METER: (UnitFamily.DISTANCE, 1.0),
    Unit.INCH: (UnitFamily.DISTANCE, 0.0254),
    Unit.FOOT: (UnitFamily.DISTANCE, 0.3048),
    Unit.YARD: (UnitFamily.DISTANCE, 0.9144),
    Unit.KILOMETER: (UnitFamily.DISTANCE, 1000.0),
    Unit.MILE: (UnitFamily.DISTANCE, 1609.34),
    Unit.SECOND: (UnitFamily.TIME, 1.0),
    Unit.MINUTE: (UnitFamily.TIME, 60.0),
    Unit.HOUR: (UnitFamily.TIME, 3600.0),
    Unit.PERCENT: (UnitFamily.PERCENTAGE, 1.0),
    Unit.CALORIE: (UnitFamily.ENERGY, 4184.0),
    Unit.KILOCALORIE: (UnitFamily.ENERGY, 4184.0),
    Unit.JOULE: (UnitFamily.ENERGY, 1.0),
    Unit.KILOJOULE: (UnitFamily.ENERGY, 1000.0),
    Unit.WATT: (UnitFamily.POWER, 1.0),
    Unit.KILOWATT: (UnitFamily.POWER, 1000.0),
    Unit.REPS: (UnitFamily.COUNT, 1.0),
}

# Units whose canonical conversion is an exact division.
_DIVISORS: Dict[Unit, float] = {
    Unit.CENTIMETER: 100.0,
}

UNIT_ALIASES: Dict[str, str] = {
    "lbs": "lb",
    "kgs": "kg",
    "sec": "s",
    "mins": "min",
    "h": "hr",
    "j": "J",
    "kj": "kJ",
    "w": "W",
    "kw": "kW",
}


class Measurement(BaseModel):
    """
    Unit-tagged numeric value.

    Example:
        >>> height = Measurement(value=180, unit="cm")
        >>> round(height.to(Unit.INCH).value, 2)
        70.87
        >>> Measurement(value=200, unit="lbs").unit
        <Unit.POUND: 'lb'>
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Numeric magnitude")
    unit: Unit = Field(..., description="Unit symbol")

    @field_validator("unit", mode="before")
    @classmethod
    def resolve_alias(cls, v: Any) -> Unit:
        """Accept unit aliases such as 'lbs'."""
        return Unit.parse(v)

    def __str__(self) -> str:
        """String representation."""
        return f"{self.value:g} {self.unit.value}"

    def __hash__(self) -> int:
        """Allow use as dict key."""
        return hash((self.value, self.unit))

    @property
    def family(self) -> UnitFamily:
        return self.unit.family

    def require_family(self, family: UnitFamily) -> Measurement:
        """Return self if the unit belongs to ``family``.

        Raises:
            UnitMismatchError: If the unit is from another family
        """
        if self.unit.family is not family:
            raise UnitMismatchError(
                f"Expected {family.value} unit, got '{self.unit.value}'"
            )
        return self

    def canonical_value(self) -> float:
        """Value expressed in the family's canonical unit."""
        return _to_canonical(self.value, self.unit)

    def to(self, unit: Unit | str) -> Measurement:
        """Convert to another unit of the same family.

        Raises:
            UnitMismatchError: If ``unit`` belongs to another family
        """
        target = Unit.parse(unit)
        if target is self.unit:
            return self
        if target.family is not self.unit.family:
            raise UnitMismatchError(
                f"Cannot convert '{self.unit.value}' to '{target.value}'"
            )
        return Measurement(
            value=_from_canonical(self.canonical_value(), target), unit=target
        )

    @classmethod
    def of(cls, value: float, unit: Unit | str) -> Measurement:
        """Create from a value and unit symbol."""
        return cls(value=value, unit=unit)


def to_meters(measurement: Measurement) -> float:
    """Distance in meters."""
    return measurement.require_family(UnitFamily.DISTANCE).canonical_value()


def to_centimeters(measurement: Measurement) -> float:
    """Distance in centimeters."""
    return measurement.to(Unit.CENTIMETER).value


def to_inches(measurement: Measurement) -> float:
    """Distance in inches."""
    return measurement.to(Unit.INCH).value


def to_kilograms(measurement: Measurement) -> float:
    """Weight in kilograms."""
    return measurement.require_family(UnitFamily.WEIGHT).canonical_value()


def to_pounds(measurement: Measurement) -> float:
    """Weight in pounds."""
    return measurement.to(Unit.POUND).value


def to_seconds(measurement: Measurement) -> float:
    """Duration in seconds."""
    return measurement.require_family(UnitFamily.TIME).canonical_value()


def to_joules(measurement: Measurement) -> float:
    """Energy in joules."""
    return measurement.require_family(UnitFamily.ENERGY).canonical_value()


def _to_canonical(value: float, unit: Unit) -> float:
    divisor = _DIVISORS.get(unit)
    if divisor is not None:
        return value / divisor
    return value * unit.to_canonical


def _from_canonical(value: float, unit: Unit) -> float:
    divisor = _DIVISORS.get(unit)
    if divisor is not None:
        return value * divisor
    return value / unit.to_canonical
