"""Unit tests for composite strategies."""

import pytest

from derived_metrics.domain.body_composition.calculation.composite_strategies import (
    dispersion,
    get_strategy,
    mean_strategy,
    median_strategy,
    register_strategy,
    trimmed_mean_strategy,
    weighted_mean_strategy,
)
from derived_metrics.domain.body_composition.calculation import composite_strategies
from derived_metrics.domain.body_composition.core.value_objects import (
    BodyFatMethod,
    BodyFatMethodEstimate,
    CompositeStrategy,
)


def _estimates(navy=10.0, deurenberg=20.0, ymca=None):
    values = [
        BodyFatMethodEstimate(BodyFatMethod.NAVY, navy),
        BodyFatMethodEstimate(BodyFatMethod.DEURENBERG, deurenberg),
    ]
    if ymca is not None:
        values.append(BodyFatMethodEstimate(BodyFatMethod.YMCA, ymca))
    return values


class TestStrategies:
    """Test built-in aggregation functions."""

    def test_median_odd(self):
        """Test median of three."""
        assert median_strategy(_estimates(ymca=40.0), {}) == 20.0

    def test_median_even(self):
        """Test median of two is their midpoint."""
        assert median_strategy(_estimates(), {}) == 15.0

    def test_mean(self):
        """Test arithmetic mean."""
        assert mean_strategy(_estimates(ymca=30.0), {}) == pytest.approx(20.0)

    def test_weighted_mean(self):
        """Test unspecified methods weigh 1."""
        result = weighted_mean_strategy(_estimates(), {BodyFatMethod.NAVY: 3.0})

        # (3*10 + 1*20) / 4
        assert result == pytest.approx(12.5)

    def test_weighted_mean_zero_weights(self):
        """Test all-zero weights fall back to the plain mean."""
        weights = {BodyFatMethod.NAVY: 0.0, BodyFatMethod.DEURENBERG: 0.0}

        assert weighted_mean_strategy(_estimates(), weights) == pytest.approx(15.0)

    def test_trimmed_mean(self):
        """Test extremes are dropped with three or more estimates."""
        assert trimmed_mean_strategy(_estimates(ymca=90.0), {}) == pytest.approx(20.0)

    def test_trimmed_mean_two_values(self):
        """Test two estimates are not trimmed."""
        assert trimmed_mean_strategy(_estimates(), {}) == pytest.approx(15.0)


class TestDispersion:
    """Test inter-method dispersion."""

    def test_population_std(self):
        """Test dispersion is the population standard deviation."""
        assert dispersion(_estimates()) == pytest.approx(5.0)

    def test_single_estimate(self):
        """Test one estimate has no dispersion."""
        assert dispersion(_estimates()[:1]) == 0.0

    def test_agreement(self):
        """Test identical estimates have zero dispersion."""
        assert dispersion(_estimates(navy=18.0, deurenberg=18.0, ymca=18.0)) == 0.0


class TestRegistry:
    """Test strategy lookup and registration."""

    def test_every_strategy_registered(self):
        """Test each enum member resolves to a function."""
        for strategy in CompositeStrategy:
            assert callable(get_strategy(strategy))

    def test_unknown_strategy(self, monkeypatch):
        """Test lookup of an unregistered strategy fails."""
        monkeypatch.delitem(composite_strategies._STRATEGIES, CompositeStrategy.MEAN)

        with pytest.raises(ValueError, match="No composite strategy"):
            get_strategy(CompositeStrategy.MEAN)

    def test_register_replaces(self, monkeypatch):
        """Test registering overrides the existing function."""
        monkeypatch.setitem(
            composite_strategies._STRATEGIES,
            CompositeStrategy.MEDIAN,
            composite_strategies._STRATEGIES[CompositeStrategy.MEDIAN],
        )

        def lowest(estimates, weights):
            return min(e.body_fat_percent for e in estimates)

        register_strategy(CompositeStrategy.MEDIAN, lowest)

        assert get_strategy(CompositeStrategy.MEDIAN)(_estimates(), {}) == 10.0
