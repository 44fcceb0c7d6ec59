"""WorkoutPreferences value object - how the user wants to train."""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..exceptions.domain_errors import InvalidWorkoutPreferencesError
from .muscle_group import MuscleGroup
from .workout_duration import WorkoutDuration


@dataclass(frozen=True)
class WorkoutPreferences:
    """Training availability and goals.

    Attributes:
        workout_days: Training days per week (1-7)
        workout_duration: Maximum length of one session
        target_muscles: Muscle groups to emphasise
    """

    workout_days: int = 3
    workout_duration: WorkoutDuration = WorkoutDuration.UP_TO_1_HOUR
    target_muscles: Tuple[MuscleGroup, ...] = ()

    def __post_init__(self) -> None:
        """Validate preferences.

        Raises:
            InvalidWorkoutPreferencesError: If a constraint is violated
        """
        if not 1 <= self.workout_days <= 7:
            raise InvalidWorkoutPreferencesError(
                f"Workout days must be 1-7, got {self.workout_days}"
            )
        if not isinstance(self.workout_duration, WorkoutDuration):
            raise InvalidWorkoutPreferencesError(
                f"Unknown workout duration: {self.workout_duration!r}"
            )
        # Tuples keep the value object hashable; lists are accepted as input
        object.__setattr__(self, "target_muscles", tuple(self.target_muscles))
        for muscle in self.target_muscles:
            if not isinstance(muscle, MuscleGroup):
                raise InvalidWorkoutPreferencesError(f"Unknown muscle group: {muscle!r}")

    def require_target_muscles(self) -> None:
        """Ensure at least one muscle group is selected.

        Raises:
            InvalidWorkoutPreferencesError: If no target muscle is set
        """
        if not self.target_muscles:
            raise InvalidWorkoutPreferencesError(
                "Select at least one target muscle group before generating a workout"
            )

    def with_changes(
        self,
        workout_days: Optional[int] = None,
        workout_duration: Optional[WorkoutDuration] = None,
        target_muscles: Optional[Tuple[MuscleGroup, ...]] = None,
    ) -> "WorkoutPreferences":
        """Return a copy with the given fields replaced."""
        changes = {
            "workout_days": workout_days,
            "workout_duration": workout_duration,
            "target_muscles": target_muscles,
        }
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
