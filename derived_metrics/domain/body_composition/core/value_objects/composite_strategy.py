"""CompositeStrategy value object - how method estimates are synthesized."""

from enum import Enum


class CompositeStrategy(str, Enum):
    """Aggregation applied to the per-method body-fat estimates.

    - MEDIAN: robust to one outlier method (default)
    - MEAN: arithmetic mean
    - WEIGHTED_MEAN: mean weighted per method (missing weights count as 1)
    - TRIMMED_MEAN: mean after dropping the lowest and highest estimate
    """

    MEDIAN = "median"
    MEAN = "mean"
    WEIGHTED_MEAN = "weighted_mean"
    TRIMMED_MEAN = "trimmed_mean"


class BodyFatMethod(str, Enum):
    """Independent body-fat estimation methods."""

    NAVY = "navy"
    DEURENBERG = "deurenberg"
    YMCA = "ymca"
