"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR × PAL

    PAL Multipliers:
        - Sedentary: 1.2
        - Lightly active: 1.375
        - Moderately active: 1.55
        - Very active: 1.725
        - Extra active: 1.9
    """

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity tier

        Returns:
            TDEE: Unrounded total daily energy expenditure in kcal/day

        Example:
            >>> TDEEService().calculate(BMR(value=1848.75), ActivityLevel.SEDENTARY).value
            2218.5
        """
        return TDEE(value=bmr.value * activity_level.pal_multiplier())
