"""Calculator ports - interfaces for the body-fat methods."""

from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.body_fat_result import NormalizedBodyMeasures, SanityFlag
from ..value_objects.composite_strategy import BodyFatMethod
from ..value_objects.gender import Gender


class IBodyFatMethodCalculator(ABC):
    """Port for a single body-fat estimation method.

    A method either produces a percentage or explains, through a
    sanity flag, why it was skipped. Skipping is never an error.
    """

    method: BodyFatMethod

    @abstractmethod
    def skip_reason(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> Optional[SanityFlag]:
        """Return a flag if the method's inputs are missing or invalid.

        Args:
            gender: Biological sex
            age: Age in years, if known
            measures: Normalized measurements

        Returns:
            SanityFlag describing why the method cannot run, else None
        """
        pass

    @abstractmethod
    def calculate(
        self, gender: Gender, age: Optional[int], measures: NormalizedBodyMeasures
    ) -> float:
        """Calculate the raw (unclamped) body-fat percentage.

        Only called when :meth:`skip_reason` returned None.

        Args:
            gender: Biological sex
            age: Age in years, if known
            measures: Normalized measurements

        Returns:
            float: Body fat in percent
        """
        pass
