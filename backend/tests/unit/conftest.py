"""Unit test fixtures.

Builds domain objects directly; no app, no network, no database.
"""

from typing import List

import pytest

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.factories.profile_factory import FitnessProfileFactory
from domain.fitness_profile.core.value_objects.health_screening import HealthScreening
from domain.metabolic.calculation.metabolic_calculator import MetabolicCalculator
from domain.metabolic.core.value_objects.activity_level import ActivityLevel
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.metabolic.core.value_objects.sex import Sex
from domain.plan.core.entities.diet import DietDay, DietMeal, MacroBreakdown
from domain.plan.core.entities.workout import Exercise, WorkoutDay
from domain.plan.core.value_objects.diet_preferences import DietPreferences
from domain.plan.core.value_objects.muscle_group import MuscleGroup
from domain.plan.core.value_objects.workout_duration import WorkoutDuration
from domain.plan.core.value_objects.workout_preferences import WorkoutPreferences


@pytest.fixture
def biometrics() -> BiometricProfile:
    """Male, 30y, 90kg, 175cm, sedentary, 10kg to lose."""
    return BiometricProfile(
        sex=Sex.MALE,
        age=30,
        weight=90.0,
        height=175.0,
        activity_level=ActivityLevel.SEDENTARY,
        target_weight_loss_kg=10.0,
    )


@pytest.fixture
def health_screening() -> HealthScreening:
    return HealthScreening(
        no_heart_conditions=True,
        no_chest_pain_or_dizziness=True,
        no_serious_injuries=True,
        accepts_responsibility=True,
    )


@pytest.fixture
def stats(biometrics: BiometricProfile) -> CalculatedStats:
    return MetabolicCalculator().compute_stats(biometrics, DeficitIntensity.MODERATE)


@pytest.fixture
def workout_preferences() -> WorkoutPreferences:
    return WorkoutPreferences(
        workout_days=3,
        workout_duration=WorkoutDuration.UP_TO_45_MIN,
        target_muscles=(MuscleGroup.GLUTES, MuscleGroup.ABS),
    )


@pytest.fixture
def diet_plan() -> List[DietDay]:
    return [
        DietDay(
            day_name="Monday",
            total_calories=1000,
            meals=[
                DietMeal(
                    name="Breakfast",
                    description="Oats with banana",
                    calories=400,
                    macros=MacroBreakdown(protein="20g", carbs="60g", fats="8g"),
                ),
                DietMeal(name="Dinner", description="Chicken and rice", calories=600),
            ],
        ),
        DietDay(
            day_name="Tuesday",
            total_calories=500,
            meals=[DietMeal(name="Lunch", description="Eggs and salad", calories=500)],
        ),
    ]


@pytest.fixture
def workout_plan() -> List[WorkoutDay]:
    return [
        WorkoutDay(
            day_name="Workout A",
            focus="Glutes",
            duration="up to 45 minutes",
            exercises=[Exercise(name="Hip thrust", sets=3, reps="10-12", rest="60s")],
            cardio="10 min bike",
        ),
        WorkoutDay(
            day_name="Workout B",
            focus="Abs",
            duration="up to 45 minutes",
            exercises=[Exercise(name="Plank", sets=3, reps="30s")],
        ),
    ]


@pytest.fixture
def profile(
    biometrics: BiometricProfile,
    stats: CalculatedStats,
    workout_preferences: WorkoutPreferences,
    health_screening: HealthScreening,
) -> FitnessProfile:
    """Profile without plans."""
    return FitnessProfileFactory.create(
        user_id="user123",
        name="Alex",
        email="alex@example.com",
        biometrics=biometrics,
        deficit=DeficitIntensity.MODERATE,
        stats=stats,
        health_screening=health_screening,
        diet_preferences=DietPreferences(available_foods="eggs, rice, chicken"),
        workout_preferences=workout_preferences,
    )


@pytest.fixture
def profile_with_plans(
    profile: FitnessProfile,
    diet_plan: List[DietDay],
    workout_plan: List[WorkoutDay],
) -> FitnessProfile:
    profile.set_diet_plan(diet_plan)
    profile.set_workout_plan(workout_plan)
    return profile
