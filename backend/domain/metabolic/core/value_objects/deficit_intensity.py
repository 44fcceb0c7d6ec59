"""DeficitIntensity value object - how far below TDEE the target sits."""

from enum import Enum


class DeficitIntensity(str, Enum):
    """Caloric deficit intensity selected by the user.

    - LIGHT: 10% below TDEE
    - MODERATE: 20% below TDEE (default)
    - AGGRESSIVE: 30% below TDEE
    """

    LIGHT = "light"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"

    @classmethod
    def default(cls) -> "DeficitIntensity":
        """Intensity used when the user has not chosen one."""
        return cls.MODERATE

    def fraction(self) -> float:
        """Get the share of TDEE removed from the daily target.

        Returns:
            float: Deficit fraction (0.0-1.0)

        Example:
            >>> DeficitIntensity.AGGRESSIVE.fraction()
            0.3
        """
        fractions = {
            DeficitIntensity.LIGHT: 0.10,
            DeficitIntensity.MODERATE: 0.20,
            DeficitIntensity.AGGRESSIVE: 0.30,
        }
        return fractions[self]
