"""Calculator ports - interfaces for BMR/TDEE/calorie target calculations."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.biometric_profile import BiometricProfile
from ..value_objects.bmr import BMR
from ..value_objects.deficit_intensity import DeficitIntensity
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, profile: BiometricProfile) -> BMR:
        """Calculate BMR from biometric data.

        Args:
            profile: User biometric data

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity tier

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class ICalorieTargetCalculator(ABC):
    """Port for deficit-adjusted calorie targets and goal estimates."""

    @abstractmethod
    def target_calories(self, tdee: int, deficit: DeficitIntensity) -> int:
        """Calculate the daily calorie target under a deficit.

        Args:
            tdee: Total daily energy expenditure (kcal/day)
            deficit: Selected deficit intensity

        Returns:
            int: Daily calorie target
        """
        pass

    @abstractmethod
    def weeks_to_goal(
        self,
        tdee: int,
        target_calories: int,
        target_weight_loss_kg: float,
    ) -> int:
        """Estimate the weeks needed to lose the target weight.

        Args:
            tdee: Total daily energy expenditure (kcal/day)
            target_calories: Daily calorie target
            target_weight_loss_kg: Weight to lose

        Returns:
            int: Whole weeks to goal (0 when nothing to lose)
        """
        pass
