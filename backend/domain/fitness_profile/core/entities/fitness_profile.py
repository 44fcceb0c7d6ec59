"""FitnessProfile entity - aggregate root for a user's onboarding data."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.plan.core.entities.diet import DietDay, DietMeal
from domain.plan.core.entities.workout import WorkoutDay
from domain.plan.core.value_objects.diet_preferences import DietPreferences
from domain.plan.core.value_objects.workout_preferences import WorkoutPreferences

from ..exceptions.domain_errors import InvalidPlanIndexError, InvalidProfileDataError
from ..value_objects.health_screening import HealthScreening
from ..value_objects.profile_id import ProfileId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_email(email: str) -> None:
    if email and "@" not in email:
        raise InvalidProfileDataError(f"Invalid email address: {email}")


@dataclass
class FitnessProfile:
    """Fitness profile aggregate root.

    Holds everything collected and produced during onboarding:
    - User details (name, email)
    - Biometrics and the chosen deficit intensity
    - Calculated stats (BMR, TDEE, calorie target, weeks to goal)
    - Diet and workout preferences
    - The generated weekly diet plan and workout plan

    Stats are supplied by the application layer after every change to
    biometrics or deficit, so they always match the current inputs.

    Attributes:
        profile_id: Unique profile identifier
        user_id: User this profile belongs to
        name: Display name
        email: Contact email
        biometrics: Biometric and activity data
        deficit: Selected deficit intensity
        stats: Calculated energy figures
        diet_preferences: Food availability
        workout_preferences: Training availability and focus
        health_screening: Confirmed health questionnaire (absent only on
            profiles stored before it was collected)
        diet_plan: Weekly diet plan (empty until generated)
        workout_plan: Workout plan (empty until generated)
        created_at: Profile creation timestamp
        updated_at: Last update timestamp
    """

    profile_id: ProfileId
    user_id: str
    name: str
    email: str
    biometrics: BiometricProfile
    deficit: DeficitIntensity
    stats: CalculatedStats
    diet_preferences: DietPreferences = field(default_factory=DietPreferences)
    workout_preferences: WorkoutPreferences = field(default_factory=WorkoutPreferences)
    health_screening: Optional[HealthScreening] = None
    diet_plan: List[DietDay] = field(default_factory=list)
    workout_plan: List[WorkoutDay] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        self.validate_invariants()

    def validate_invariants(self) -> None:
        """Validate domain invariants.

        Raises:
            InvalidProfileDataError: If any invariant is violated
        """
        if not self.user_id or not self.user_id.strip():
            raise InvalidProfileDataError("User ID cannot be empty")

        _check_email(self.email)

        if self.stats.target_calories <= 0:
            raise InvalidProfileDataError(
                f"Calorie target must be positive, got {self.stats.target_calories}"
            )

        if self.health_screening is not None:
            self.health_screening.ensure_complete()

    def _touch(self) -> None:
        self.updated_at = _utcnow()

    # ------------------------------------------------------------------
    # Biometrics and targets
    # ------------------------------------------------------------------

    def update_details(self, name: Optional[str] = None, email: Optional[str] = None) -> None:
        """Update display name and/or email.

        Raises:
            InvalidProfileDataError: If the email is malformed; nothing is
                changed in that case
        """
        if email is not None:
            _check_email(email)
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email
        self._touch()
        self.validate_invariants()

    def update_biometrics(self, biometrics: BiometricProfile, stats: CalculatedStats) -> None:
        """Replace biometrics together with the stats computed from them.

        Plans are kept as they are; regenerating them is a separate step.
        """
        self.biometrics = biometrics
        self.update_stats(stats)

    def change_deficit(self, deficit: DeficitIntensity, stats: CalculatedStats) -> None:
        """Switch deficit intensity together with the recomputed stats."""
        self.deficit = deficit
        self.update_stats(stats)

    def update_stats(self, stats: CalculatedStats) -> None:
        self.stats = stats
        self._touch()
        self.validate_invariants()

    def update_preferences(
        self,
        diet_preferences: Optional[DietPreferences] = None,
        workout_preferences: Optional[WorkoutPreferences] = None,
    ) -> None:
        """Update diet and/or workout preferences."""
        if diet_preferences is not None:
            self.diet_preferences = diet_preferences
        if workout_preferences is not None:
            self.workout_preferences = workout_preferences
        self._touch()

    # ------------------------------------------------------------------
    # Plans
    # ------------------------------------------------------------------

    def set_diet_plan(self, plan: List[DietDay]) -> None:
        self.diet_plan = list(plan)
        self._touch()

    def set_workout_plan(self, plan: List[WorkoutDay]) -> None:
        self.workout_plan = list(plan)
        self._touch()

    def has_diet_plan(self) -> bool:
        return bool(self.diet_plan)

    def has_workout_plan(self) -> bool:
        return bool(self.workout_plan)

    def get_meal(self, day_index: int, meal_index: int) -> DietMeal:
        """Get one meal of the diet plan.

        Raises:
            InvalidPlanIndexError: If the day or meal does not exist
        """
        day = self._diet_day(day_index)
        if not 0 <= meal_index < len(day.meals):
            raise InvalidPlanIndexError("meal", meal_index, len(day.meals))
        return day.meals[meal_index]

    def replace_meal(self, day_index: int, meal_index: int, meal: DietMeal) -> DietDay:
        """Replace one meal of the diet plan.

        Returns:
            DietDay: The updated day

        Raises:
            InvalidPlanIndexError: If the day or meal does not exist
        """
        self.get_meal(day_index, meal_index)
        updated_day = self.diet_plan[day_index].with_meal(meal_index, meal)
        self.diet_plan[day_index] = updated_day
        self._touch()
        return updated_day

    def get_workout_day(self, day_index: int) -> WorkoutDay:
        """Get one session of the workout plan.

        Raises:
            InvalidPlanIndexError: If the day does not exist
        """
        if not 0 <= day_index < len(self.workout_plan):
            raise InvalidPlanIndexError("workout day", day_index, len(self.workout_plan))
        return self.workout_plan[day_index]

    def replace_workout_day(self, day_index: int, day: WorkoutDay) -> None:
        """Replace one session of the workout plan.

        Raises:
            InvalidPlanIndexError: If the day does not exist
        """
        self.get_workout_day(day_index)
        self.workout_plan[day_index] = day
        self._touch()

    def _diet_day(self, day_index: int) -> DietDay:
        if not 0 <= day_index < len(self.diet_plan):
            raise InvalidPlanIndexError("diet day", day_index, len(self.diet_plan))
        return self.diet_plan[day_index]

    def __str__(self) -> str:
        return (
            f"FitnessProfile {self.profile_id} - User {self.user_id} - "
            f"Deficit: {self.deficit.value} - Target: {self.stats.target_calories} kcal"
        )
