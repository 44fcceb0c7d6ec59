"""Requests passed to the plan generator."""

from dataclasses import dataclass

from domain.metabolic.core.value_objects.activity_level import ActivityLevel
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats

from .diet_preferences import DietPreferences
from .workout_preferences import WorkoutPreferences


@dataclass(frozen=True)
class DietPlanRequest:
    """Everything needed to generate a weekly diet plan."""

    biometrics: BiometricProfile
    stats: CalculatedStats
    preferences: DietPreferences


@dataclass(frozen=True)
class MealRequest:
    """Replacement for a single meal, keeping its slot and calories."""

    meal_name: str
    target_calories: int
    preferences: DietPreferences


@dataclass(frozen=True)
class WorkoutPlanRequest:
    """Everything needed to generate a workout plan."""

    preferences: WorkoutPreferences
    activity_level: ActivityLevel
