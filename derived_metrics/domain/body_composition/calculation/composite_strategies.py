"""Composite strategies - synthesize method estimates into one number.

Strategies are looked up by :class:`CompositeStrategy` value.
Adding one means adding an enum member and registering a function.

The registry is module-level state. Register at import time only:
registration is not thread-safe, and estimations read the registry
without locking.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Sequence

import numpy as np

from ..core.value_objects.body_fat_result import BodyFatMethodEstimate
from ..core.value_objects.composite_strategy import BodyFatMethod, CompositeStrategy

StrategyFn = Callable[
    [Sequence[BodyFatMethodEstimate], Mapping[BodyFatMethod, float]], float
]

_STRATEGIES: Dict[CompositeStrategy, StrategyFn] = {}


def register_strategy(
    strategy: CompositeStrategy, fn: Optional[StrategyFn] = None
) -> Callable[[StrategyFn], StrategyFn] | StrategyFn:
    """Register an aggregation function for ``strategy``.

    Usable directly or as a decorator:

        >>> @register_strategy(CompositeStrategy.MEAN)
        ... def _mean(estimates, weights):
        ...     ...
    """

    def decorator(func: StrategyFn) -> StrategyFn:
        _STRATEGIES[strategy] = func
        return func

    if fn is not None:
        return decorator(fn)
    return decorator


def get_strategy(strategy: CompositeStrategy) -> StrategyFn:
    """Return the aggregation function for ``strategy``.

    Raises:
        ValueError: If no function is registered
    """
    try:
        return _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"No composite strategy registered for '{strategy}'") from None


def dispersion(estimates: Sequence[BodyFatMethodEstimate]) -> float:
    """Population standard deviation of the estimates (0 for fewer than two)."""
    if len(estimates) < 2:
        return 0.0
    return float(np.std(_values(estimates)))


def _values(estimates: Sequence[BodyFatMethodEstimate]) -> np.ndarray:
    return np.array([e.body_fat_percent for e in estimates], dtype=float)


@register_strategy(CompositeStrategy.MEDIAN)
def median_strategy(
    estimates: Sequence[BodyFatMethodEstimate], weights: Mapping[BodyFatMethod, float]
) -> float:
    return float(np.median(_values(estimates)))


@register_strategy(CompositeStrategy.MEAN)
def mean_strategy(
    estimates: Sequence[BodyFatMethodEstimate], weights: Mapping[BodyFatMethod, float]
) -> float:
    return float(np.mean(_values(estimates)))


@register_strategy(CompositeStrategy.WEIGHTED_MEAN)
def weighted_mean_strategy(
    estimates: Sequence[BodyFatMethodEstimate], weights: Mapping[BodyFatMethod, float]
) -> float:
    """Weighted mean; unspecified methods weigh 1, zero total falls back to mean."""
    w = np.array([weights.get(e.method, 1.0) for e in estimates], dtype=float)
    if w.sum() == 0:
        return mean_strategy(estimates, weights)
    return float(np.average(_values(estimates), weights=w))


@register_strategy(CompositeStrategy.TRIMMED_MEAN)
def trimmed_mean_strategy(
    estimates: Sequence[BodyFatMethodEstimate], weights: Mapping[BodyFatMethod, float]
) -> float:
    """Mean after dropping the lowest and highest value (needs 3+ estimates)."""
    values = np.sort(_values(estimates))
    if len(values) >= 3:
        values = values[1:-1]
    return float(np.mean(values))
