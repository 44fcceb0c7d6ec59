"""ActivityLevel value object - physical activity tier for TDEE."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) tier, ordered from least to most active.

    - SEDENTARY: Little or no exercise
    - LIGHTLY_ACTIVE: Light exercise 1-3 days/week
    - MODERATELY_ACTIVE: Moderate exercise 3-5 days/week
    - VERY_ACTIVE: Hard exercise 6-7 days/week
    - EXTRA_ACTIVE: Very hard exercise or physical job
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Example:
            >>> ActivityLevel.MODERATELY_ACTIVE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY_ACTIVE: 1.375,
            ActivityLevel.MODERATELY_ACTIVE: 1.55,
            ActivityLevel.VERY_ACTIVE: 1.725,
            ActivityLevel.EXTRA_ACTIVE: 1.9,
        }
        return multipliers[self]

    def description(self) -> str:
        """Get human-readable description.

        Returns:
            str: Activity level description
        """
        descriptions = {
            ActivityLevel.SEDENTARY: "Sedentary (little or no exercise)",
            ActivityLevel.LIGHTLY_ACTIVE: "Lightly active (light exercise 1-3 days/week)",
            ActivityLevel.MODERATELY_ACTIVE: (
                "Moderately active (moderate exercise 3-5 days/week)"
            ),
            ActivityLevel.VERY_ACTIVE: "Very active (hard exercise 6-7 days/week)",
            ActivityLevel.EXTRA_ACTIVE: "Extra active (very hard exercise or physical job)",
        }
        return descriptions[self]
