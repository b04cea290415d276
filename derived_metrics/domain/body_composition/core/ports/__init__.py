"""Ports for body composition calculations."""

from .calculators import IBodyFatMethodCalculator

__all__ = ["IBodyFatMethodCalculator"]
