"""Value objects for the plan domain."""

from .diet_preferences import DietPreferences
from .muscle_group import MuscleGroup
from .plan_requests import DietPlanRequest, MealRequest, WorkoutPlanRequest
from .workout_duration import WorkoutDuration
from .workout_preferences import WorkoutPreferences

__all__ = [
    "DietPreferences",
    "MuscleGroup",
    "WorkoutDuration",
    "WorkoutPreferences",
    "DietPlanRequest",
    "MealRequest",
    "WorkoutPlanRequest",
]
