"""CalorieTargetService - deficit-adjusted targets and time to goal."""

import math

from ..core.ports.calculators import ICalorieTargetCalculator
from ..core.value_objects.deficit_intensity import DeficitIntensity
from .rounding import round_half_up

# Approximate energy content of 1 kg of body fat
KCAL_PER_KG_FAT = 7700


class CalorieTargetService(ICalorieTargetCalculator):
    """Apply a percentage deficit to TDEE and estimate weeks to goal.

    Formulas:
        target = round(TDEE × (1 - fraction))
        weekly deficit = (TDEE - target) × 7
        weeks = ceil(kg × 7700 / max(weekly deficit, 1))
    """

    def target_calories(self, tdee: int, deficit: DeficitIntensity) -> int:
        """Calculate the daily calorie target.

        Example:
            >>> CalorieTargetService().target_calories(2219, DeficitIntensity.MODERATE)
            1775
        """
        return round_half_up(tdee * (1 - deficit.fraction()))

    def weeks_to_goal(
        self,
        tdee: int,
        target_calories: int,
        target_weight_loss_kg: float,
    ) -> int:
        """Estimate whole weeks needed to lose the target weight.

        Example:
            >>> CalorieTargetService().weeks_to_goal(2219, 1553, 10.0)
            17
        """
        if target_weight_loss_kg <= 0:
            return 0

        weekly_deficit = (tdee - target_calories) * 7
        # Guard against a zero deficit (target equal to TDEE)
        return math.ceil(target_weight_loss_kg * KCAL_PER_KG_FAT / max(weekly_deficit, 1))
