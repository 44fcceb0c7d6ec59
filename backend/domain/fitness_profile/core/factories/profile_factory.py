"""FitnessProfileFactory - factory for creating profiles."""

from typing import Optional

from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.plan.core.value_objects.diet_preferences import DietPreferences
from domain.plan.core.value_objects.workout_preferences import WorkoutPreferences

from ..entities.fitness_profile import FitnessProfile
from ..value_objects.health_screening import HealthScreening
from ..value_objects.profile_id import ProfileId


class FitnessProfileFactory:
    """Factory for creating FitnessProfile entities.

    Encapsulates creation logic and enforces consistency: a new profile
    always starts with a confirmed health screening, empty plans, and
    default preferences when none are given.
    """

    @staticmethod
    def create(
        user_id: str,
        name: str,
        email: str,
        biometrics: BiometricProfile,
        deficit: DeficitIntensity,
        stats: CalculatedStats,
        health_screening: HealthScreening,
        diet_preferences: Optional[DietPreferences] = None,
        workout_preferences: Optional[WorkoutPreferences] = None,
    ) -> FitnessProfile:
        """Create new fitness profile without plans.

        Args:
            user_id: User identifier
            name: Display name
            email: Contact email
            biometrics: Biometric and activity data
            deficit: Selected deficit intensity
            stats: Stats computed from biometrics and deficit
            health_screening: Health questionnaire answers, all confirmed
            diet_preferences: Food availability (default: none given)
            workout_preferences: Training preferences (default: 3 x 1h)

        Returns:
            FitnessProfile: New profile with empty plans

        Raises:
            InvalidProfileDataError: If the health screening is incomplete
        """
        return FitnessProfile(
            profile_id=ProfileId.generate(),
            user_id=user_id,
            name=name,
            email=email,
            biometrics=biometrics,
            deficit=deficit,
            stats=stats,
            diet_preferences=diet_preferences or DietPreferences(),
            workout_preferences=workout_preferences or WorkoutPreferences(),
            health_screening=health_screening,
        )
