"""Gender value object - selects sex-specific regression constants."""

from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the body-fat regressions."""

    MALE = "male"
    FEMALE = "female"

    def deurenberg_sex_term(self) -> int:
        """Sex indicator for the Deurenberg equation (1 male, 0 female).

        Example:
            >>> Gender.MALE.deurenberg_sex_term()
            1
        """
        return 1 if self is Gender.MALE else 0
