"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.bmr import BMR


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, profile: BiometricProfile) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            profile: User biometric data (weight, height, age, sex)

        Returns:
            BMR: Unrounded basal metabolic rate in kcal/day

        Raises:
            InvalidInputError: If the inputs yield a non-positive BMR

        Example:
            >>> profile = BiometricProfile(
            ...     sex=Sex.MALE, age=30, weight=90.0, height=175.0,
            ...     activity_level=ActivityLevel.SEDENTARY,
            ... )
            >>> BMRService().calculate(profile).value
            1848.75
        """
        base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
        return BMR(value=base + profile.sex.bmr_offset())
