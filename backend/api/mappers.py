"""Mapping between domain objects and GraphQL types.

GraphQL enums carry the same values as the domain enums, so
conversions go through `.value`.
"""

from typing import Optional

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.value_objects.health_screening import HealthScreening
from domain.metabolic.core.value_objects.activity_level import ActivityLevel
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.metabolic.core.value_objects.sex import Sex
from domain.plan.core.entities.diet import DietDay, DietMeal
from domain.plan.core.entities.workout import WorkoutDay
from domain.plan.core.value_objects.muscle_group import MuscleGroup
from domain.plan.core.value_objects.workout_duration import WorkoutDuration
from domain.plan.core.value_objects.workout_preferences import WorkoutPreferences

from api.types_fitness_profile import (
    DietDayType,
    DietMealType,
    ExerciseType,
    FitnessProfileType,
    HealthScreeningInput,
    HealthScreeningType,
    MacroBreakdownType,
    MuscleGroupEnum,
    WorkoutDayType,
    WorkoutDurationEnum,
    WorkoutPreferencesInput,
    WorkoutPreferencesType,
)
from api.types_metabolic import (
    ActivityLevelEnum,
    BiometricsInput,
    BiometricsType,
    CalculatedStatsType,
    DeficitIntensityEnum,
    SexEnum,
)

# ============================================
# INPUT → DOMAIN
# ============================================


def biometrics_from_input(data: BiometricsInput) -> BiometricProfile:
    """Build a validated BiometricProfile (raises InvalidInputError)."""
    return BiometricProfile(
        sex=Sex(data.sex.value),
        age=data.age,
        weight=data.weight,
        height=data.height,
        activity_level=ActivityLevel(data.activity_level.value),
        target_weight_loss_kg=data.target_weight_loss_kg,
    )


def deficit_from_input(deficit: DeficitIntensityEnum) -> DeficitIntensity:
    return DeficitIntensity(deficit.value)


def duration_from_input(duration: WorkoutDurationEnum) -> WorkoutDuration:
    return WorkoutDuration(duration.value)


def health_screening_from_input(data: HealthScreeningInput) -> HealthScreening:
    """Answers are timestamped when received."""
    return HealthScreening(
        no_heart_conditions=data.no_heart_conditions,
        no_chest_pain_or_dizziness=data.no_chest_pain_or_dizziness,
        no_serious_injuries=data.no_serious_injuries,
        accepts_responsibility=data.accepts_responsibility,
    )


def workout_preferences_from_input(data: WorkoutPreferencesInput) -> WorkoutPreferences:
    return WorkoutPreferences(
        workout_days=data.workout_days,
        workout_duration=duration_from_input(data.workout_duration),
        target_muscles=tuple(MuscleGroup(m.value) for m in data.target_muscles),
    )


# ============================================
# DOMAIN → GRAPHQL
# ============================================


def map_stats(stats: CalculatedStats) -> CalculatedStatsType:
    return CalculatedStatsType(
        bmr=stats.bmr,
        tdee=stats.tdee,
        target_calories=stats.target_calories,
        weeks_to_goal=stats.weeks_to_goal,
        daily_deficit=stats.daily_deficit,
    )


def map_biometrics(biometrics: BiometricProfile) -> BiometricsType:
    return BiometricsType(
        sex=SexEnum(biometrics.sex.value),
        age=biometrics.age,
        weight=biometrics.weight,
        height=biometrics.height,
        activity_level=ActivityLevelEnum(biometrics.activity_level.value),
        target_weight_loss_kg=biometrics.target_weight_loss_kg,
    )


def map_meal(meal: DietMeal) -> DietMealType:
    return DietMealType(
        name=meal.name,
        description=meal.description,
        calories=meal.calories,
        macros=MacroBreakdownType(
            protein=meal.macros.protein,
            carbs=meal.macros.carbs,
            fats=meal.macros.fats,
        ),
    )


def map_diet_day(day: DietDay) -> DietDayType:
    return DietDayType(
        day_name=day.day_name,
        total_calories=day.total_calories,
        meals=[map_meal(meal) for meal in day.meals],
    )


def map_workout_day(day: WorkoutDay) -> WorkoutDayType:
    return WorkoutDayType(
        day_name=day.day_name,
        focus=day.focus,
        duration=day.duration,
        cardio=day.cardio,
        exercises=[
            ExerciseType(
                name=exercise.name,
                sets=exercise.sets,
                reps=exercise.reps,
                rest=exercise.rest,
                notes=exercise.notes,
            )
            for exercise in day.exercises
        ],
    )


def map_health_screening(
    screening: Optional[HealthScreening],
) -> Optional[HealthScreeningType]:
    if screening is None:
        return None
    return HealthScreeningType(
        no_heart_conditions=screening.no_heart_conditions,
        no_chest_pain_or_dizziness=screening.no_chest_pain_or_dizziness,
        no_serious_injuries=screening.no_serious_injuries,
        accepts_responsibility=screening.accepts_responsibility,
        confirmed_at=screening.confirmed_at,
    )


def map_profile(profile: FitnessProfile) -> FitnessProfileType:
    """Map domain FitnessProfile to GraphQL FitnessProfileType."""
    preferences = profile.workout_preferences
    return FitnessProfileType(
        profile_id=str(profile.profile_id),
        user_id=profile.user_id,
        name=profile.name,
        email=profile.email,
        biometrics=map_biometrics(profile.biometrics),
        deficit=DeficitIntensityEnum(profile.deficit.value),
        stats=map_stats(profile.stats),
        available_foods=profile.diet_preferences.available_foods,
        workout_preferences=WorkoutPreferencesType(
            workout_days=preferences.workout_days,
            workout_duration=WorkoutDurationEnum(preferences.workout_duration.value),
            target_muscles=[MuscleGroupEnum(m.value) for m in preferences.target_muscles],
        ),
        diet_plan=[map_diet_day(day) for day in profile.diet_plan],
        workout_plan=[map_workout_day(day) for day in profile.workout_plan],
        health_screening=map_health_screening(profile.health_screening),
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )
