"""Unit tests for ProjectedMaxService."""

import math

import pytest

from derived_metrics.domain.shared.errors import UnitMismatchError
from derived_metrics.domain.shared.measurement import Measurement, Unit
from derived_metrics.domain.strength.calculation.projected_max_service import (
    ProjectedMaxService,
    brzycki_1rm,
    calculate_projected_max,
    confidence_for_reps,
    epley_1rm,
)
from derived_metrics.domain.strength.core.value_objects import (
    EstimatorMode,
    ProjectedMaxOptions,
)


def _kg(value: float) -> Measurement:
    return Measurement(value=value, unit="kg")


class TestFormulas:
    """Test raw 1RM formulas."""

    def test_epley(self):
        """Test Epley: w * (1 + r/30)."""
        assert epley_1rm(100.0, 5) == pytest.approx(116.6667, abs=1e-4)
        assert epley_1rm(100.0, 30) == pytest.approx(200.0)

    def test_brzycki(self):
        """Test Brzycki: w * 36 / (37 - r)."""
        assert brzycki_1rm(100.0, 5) == pytest.approx(112.5)
        assert brzycki_1rm(100.0, 1) == pytest.approx(100.0)

    def test_brzycki_singularity(self):
        """Test Brzycki is unbounded at 37 reps and beyond."""
        assert brzycki_1rm(100.0, 37) == math.inf
        assert brzycki_1rm(100.0, 50) == math.inf


class TestConfidenceForReps:
    """Test confidence curve."""

    def test_low_reps_high_confidence(self):
        """Test singles are trusted."""
        assert confidence_for_reps(1) == pytest.approx(0.944, abs=1e-3)

    def test_monotonic(self):
        """Test confidence decreases with reps."""
        assert confidence_for_reps(3) > confidence_for_reps(12) > confidence_for_reps(20)

    def test_bounded(self):
        """Test confidence stays within [min, max]."""
        for reps in range(1, 60):
            confidence = confidence_for_reps(reps)
            assert 0.20 <= confidence <= 0.95

    def test_floor_for_high_reps(self):
        """Test the overage penalty drives high reps to the floor."""
        assert confidence_for_reps(30) == 0.20

    def test_custom_options(self):
        """Test curve bounds come from options."""
        options = ProjectedMaxOptions(confidence_max=0.8, confidence_min=0.5)

        assert confidence_for_reps(1, options) <= 0.8
        assert confidence_for_reps(40, options) == 0.5


class TestProjectedMaxService:
    """Test projected max calculation."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = ProjectedMaxService()

    def test_blend_default(self):
        """Test default estimator averages Epley and Brzycki."""
        result = self.service.calculate(5, _kg(100))

        # (116.667 + 112.5) / 2
        assert result.projected_max.value == pytest.approx(114.583, abs=1e-3)
        assert result.meta.estimator is EstimatorMode.BLEND
        assert result.meta.reps_used == 5

    def test_epley_only(self):
        """Test Epley estimator."""
        options = ProjectedMaxOptions(estimator=EstimatorMode.EPLEY)

        result = self.service.calculate(5, _kg(100), options)

        assert result.projected_max.value == pytest.approx(116.6667, abs=1e-4)

    def test_estimator_from_string(self):
        """Test estimator accepts its string value."""
        result = self.service.calculate(5, _kg(100), ProjectedMaxOptions(estimator="brzycki"))

        assert result.projected_max.value == pytest.approx(112.5)

    def test_meta_exposes_both(self):
        """Test raw formula outputs are kept for auditing."""
        result = self.service.calculate(10, _kg(100))

        assert result.meta.epley == pytest.approx(133.333, abs=1e-3)
        assert result.meta.brzycki == pytest.approx(133.333, abs=1e-3)

    def test_unit_preserved(self):
        """Test result is in the input unit."""
        result = self.service.calculate(5, Measurement(value=225, unit="lb"))

        assert result.projected_max.unit is Unit.POUND
        assert result.projected_max.value == pytest.approx(257.81, abs=0.01)

    def test_reps_floored_to_one(self):
        """Test zero reps is treated as a single."""
        result = self.service.calculate(0, _kg(100))

        assert result.meta.reps_used == 1

    def test_fractional_reps_floored(self):
        """Test fractional reps are floored."""
        result = self.service.calculate(5.9, _kg(100))

        assert result.meta.reps_used == 5

    def test_negative_weight_clamped(self):
        """Test negative load is treated as zero."""
        result = self.service.calculate(5, _kg(-20))

        assert result.projected_max.value == 0.0

    def test_singularity(self):
        """Test 37+ reps give an infinite max with finite confidence."""
        result = self.service.calculate(37, _kg(100))

        assert result.projected_max.value == math.inf
        assert not result.is_finite
        assert result.confidence == 0.20

    def test_epley_stays_finite_past_singularity(self):
        """Test Epley alone never diverges."""
        options = ProjectedMaxOptions(estimator="epley")

        result = self.service.calculate(40, _kg(100), options)

        assert result.is_finite

    def test_confidence_decreases_with_reps(self):
        """Test 3 > 12 > 20 reps in confidence."""
        c3 = self.service.calculate(3, _kg(100)).confidence
        c12 = self.service.calculate(12, _kg(100)).confidence
        c20 = self.service.calculate(20, _kg(100)).confidence

        assert c3 > c12 > c20

    def test_wrong_unit_family(self):
        """Test a distance is rejected."""
        with pytest.raises(UnitMismatchError):
            self.service.calculate(5, Measurement(value=100, unit="m"))

    def test_service_options(self):
        """Test options set on the service apply to every call."""
        service = ProjectedMaxService(ProjectedMaxOptions(estimator="epley"))

        result = service.calculate(5, _kg(100))

        assert result.meta.estimator is EstimatorMode.EPLEY

    def test_deterministic(self):
        """Test identical input gives identical output."""
        assert self.service.calculate(8, _kg(80)) == self.service.calculate(8, _kg(80))

    def test_to_dict(self):
        """Test serialization shape."""
        data = self.service.calculate(5, _kg(100)).to_dict()

        assert data["projected_max"]["unit"] == "kg"
        assert data["meta"]["estimator"] == "blend"
        assert 0.2 <= data["confidence"] <= 0.95


class TestProjectedMaxOptions:
    """Test options validation."""

    def test_unknown_estimator(self):
        """Test unknown estimator is rejected."""
        with pytest.raises(ValueError, match="Unknown estimator"):
            ProjectedMaxOptions(estimator="lombardi")

    def test_inverted_bounds(self):
        """Test min above max is rejected."""
        with pytest.raises(ValueError, match="confidence_min"):
            ProjectedMaxOptions(confidence_min=0.9, confidence_max=0.5)

    def test_max_reps_positive(self):
        """Test reps cap must be at least 1."""
        with pytest.raises(ValueError, match="max_reps_for_estimate"):
            ProjectedMaxOptions(max_reps_for_estimate=0)


class TestCalculateProjectedMax:
    """Test module-level entry point."""

    def test_matches_service(self):
        """Test function delegates to the service."""
        assert calculate_projected_max(5, _kg(100)) == ProjectedMaxService().calculate(
            5, _kg(100)
        )
