"""MetabolicCalculator - biometrics + deficit intensity to daily stats."""

from typing import Optional

from ..core.exceptions.domain_errors import InvalidInputError
from ..core.ports.calculators import (
    IBMRCalculator,
    ICalorieTargetCalculator,
    ITDEECalculator,
)
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.calculated_stats import CalculatedStats
from ..core.value_objects.deficit_intensity import DeficitIntensity
from .bmr_service import BMRService
from .calorie_target_service import CalorieTargetService
from .rounding import round_half_up
from .tdee_service import TDEEService


class MetabolicCalculator:
    """Compose BMR, TDEE and calorie target services into CalculatedStats.

    Stateless: the same inputs always give the same stats, and one
    instance can be shared between concurrent callers.

    Flow:
    1. BMR via Mifflin-St Jeor (kept unrounded for TDEE)
    2. TDEE from the unrounded BMR and the activity multiplier, rounded
    3. Calorie target from TDEE and the deficit fraction, rounded
    4. Weeks to goal from the weekly deficit (7700 kcal per kg)
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        target_service: Optional[ICalorieTargetCalculator] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._target_service = target_service or CalorieTargetService()

    def compute_stats(
        self,
        profile: BiometricProfile,
        deficit: DeficitIntensity = DeficitIntensity.MODERATE,
    ) -> CalculatedStats:
        """Calculate daily energy figures for a profile.

        Args:
            profile: Validated biometric profile
            deficit: Deficit intensity (defaults to moderate)

        Returns:
            CalculatedStats: BMR, TDEE, calorie target and weeks to goal

        Raises:
            InvalidInputError: If the arguments are not a profile and an
                intensity, or the biometrics yield a non-positive BMR

        Example:
            >>> stats = MetabolicCalculator().compute_stats(profile, DeficitIntensity.MODERATE)
            >>> stats.target_calories
            1775
        """
        if not isinstance(profile, BiometricProfile):
            raise InvalidInputError(f"Expected BiometricProfile, got {type(profile).__name__}")
        if not isinstance(deficit, DeficitIntensity):
            raise InvalidInputError(f"Unknown deficit intensity: {deficit!r}", field="deficit")

        raw_bmr = self._bmr_service.calculate(profile)
        bmr = round_half_up(raw_bmr.value)
        tdee = round_half_up(self._tdee_service.calculate(raw_bmr, profile.activity_level).value)

        target_calories = self._target_service.target_calories(tdee, deficit)
        weeks_to_goal = self._target_service.weeks_to_goal(
            tdee=tdee,
            target_calories=target_calories,
            target_weight_loss_kg=profile.target_weight_loss_kg,
        )

        return CalculatedStats(
            bmr=bmr,
            tdee=tdee,
            target_calories=target_calories,
            weeks_to_goal=weeks_to_goal,
        )


_default_calculator = MetabolicCalculator()


def compute_stats(
    profile: BiometricProfile,
    deficit: DeficitIntensity = DeficitIntensity.MODERATE,
) -> CalculatedStats:
    """Compute stats with the default Mifflin-St Jeor services.

    Module-level entry point for callers that do not need to swap
    calculation services.
    """
    return _default_calculator.compute_stats(profile, deficit)
