"""Unit tests for the Navy, Deurenberg and YMCA method services."""

import pytest

from derived_metrics.domain.body_composition.calculation.deurenberg_service import (
    DeurenbergMethodService,
)
from derived_metrics.domain.body_composition.calculation.navy_service import (
    NavyMethodService,
)
from derived_metrics.domain.body_composition.calculation.ymca_service import (
    YMCAMethodService,
)
from derived_metrics.domain.body_composition.core.value_objects import (
    FlagSeverity,
    Gender,
    NormalizedBodyMeasures,
)


def _measures(**overrides) -> NormalizedBodyMeasures:
    values = dict(height_cm=180.0, weight_kg=80.0, neck_cm=38.0, waist_cm=85.0)
    values.update(overrides)
    return NormalizedBodyMeasures(**values)


class TestNavyMethodService:
    """Test U.S. Navy circumference method."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = NavyMethodService()

    def test_calculate_male(self):
        """Test male formula (coefficients published for inches)."""
        bf = self.service.calculate(Gender.MALE, 30, _measures())

        # 86.010*log10(47/2.54) - 70.041*log10(180/2.54) + 36.76
        assert bf == pytest.approx(16.15, abs=0.01)

    def test_calculate_female(self):
        """Test female formula uses the hip circumference."""
        measures = _measures(
            height_cm=165.0, weight_kg=60.0, neck_cm=32.0, waist_cm=70.0, hip_cm=95.0
        )

        bf = self.service.calculate(Gender.FEMALE, 30, measures)

        assert bf == pytest.approx(25.1, abs=0.05)

    def test_larger_waist_increases_estimate(self):
        """Test more waist means more body fat."""
        lean = self.service.calculate(Gender.MALE, 30, _measures(waist_cm=80.0))
        heavy = self.service.calculate(Gender.MALE, 30, _measures(waist_cm=100.0))

        assert heavy > lean

    def test_female_without_hip_is_skipped(self):
        """Test female Navy is skipped, not defaulted, without hip."""
        flag = self.service.skip_reason(Gender.FEMALE, 30, _measures())

        assert flag is not None
        assert flag.code == "MISSING_HIP_FOR_FEMALE_NAVY"
        assert flag.severity is FlagSeverity.ERROR

    def test_male_without_hip_is_computed(self):
        """Test hip is not needed for men."""
        assert self.service.skip_reason(Gender.MALE, 30, _measures()) is None

    def test_missing_height_is_skipped(self):
        """Test Navy needs height."""
        flag = self.service.skip_reason(Gender.MALE, 30, _measures(height_cm=None))

        assert flag is not None
        assert flag.code == "METHOD_SKIPPED"
        assert flag.severity is FlagSeverity.INFO

    def test_log_domain(self):
        """Test waist below neck cannot be computed."""
        flag = self.service.skip_reason(Gender.MALE, 30, _measures(waist_cm=35.0, neck_cm=40.0))

        assert flag is not None
        assert flag.code == "NAVY_LOG_DOMAIN_ERROR"


class TestDeurenbergMethodService:
    """Test BMI-based Deurenberg regression."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = DeurenbergMethodService()

    def test_calculate_male(self):
        """Test male formula."""
        measures = _measures(height_cm=200.0, weight_kg=100.0)

        bf = self.service.calculate(Gender.MALE, 40, measures)

        # BMI 25: 1.2*25 + 0.23*40 - 10.8 - 5.4 = 23.0
        assert bf == pytest.approx(23.0)

    def test_calculate_female(self):
        """Test female formula has no sex term."""
        measures = _measures(height_cm=200.0, weight_kg=100.0)

        bf = self.service.calculate(Gender.FEMALE, 40, measures)

        assert bf == pytest.approx(33.8)

    def test_age_increases_estimate(self):
        """Test 0.23 points per year of age."""
        measures = _measures()

        young = self.service.calculate(Gender.MALE, 20, measures)
        old = self.service.calculate(Gender.MALE, 50, measures)

        assert old - young == pytest.approx(6.9)

    def test_missing_age_is_skipped(self):
        """Test Deurenberg needs age."""
        flag = self.service.skip_reason(Gender.MALE, None, _measures())

        assert flag is not None
        assert flag.code == "METHOD_SKIPPED"
        assert "age" in flag.message

    def test_missing_weight_is_skipped(self):
        """Test Deurenberg needs a BMI."""
        flag = self.service.skip_reason(Gender.MALE, 30, _measures(weight_kg=None))

        assert flag is not None
        assert "height/weight" in flag.message


class TestYMCAMethodService:
    """Test YMCA waist/weight regression."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = YMCAMethodService()

    def test_calculate_male(self):
        """Test male formula in inches and pounds."""
        # 34 in waist, 180 lb
        measures = _measures(weight_kg=81.64663, waist_cm=86.36)

        bf = self.service.calculate(Gender.MALE, None, measures)

        # (4.15*34 - 0.082*180 - 98.42) / 180 * 100
        assert bf == pytest.approx(15.51, abs=0.01)

    def test_calculate_female(self):
        """Test female constant."""
        measures = _measures(weight_kg=81.64663, waist_cm=86.36)

        bf = self.service.calculate(Gender.FEMALE, None, measures)

        assert bf == pytest.approx(27.54, abs=0.01)

    def test_height_not_required(self):
        """Test YMCA runs without height."""
        assert self.service.skip_reason(Gender.MALE, None, _measures(height_cm=None)) is None

    def test_missing_weight_is_skipped(self):
        """Test YMCA needs weight."""
        flag = self.service.skip_reason(Gender.MALE, None, _measures(weight_kg=None))

        assert flag is not None
        assert flag.code == "METHOD_SKIPPED"
