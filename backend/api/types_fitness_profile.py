"""GraphQL types for fitness profiles, diet plans and workout plans."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

import strawberry

from api.types_metabolic import (
    BiometricsInput,
    BiometricsType,
    CalculatedStatsType,
    DeficitIntensityEnum,
)

__all__ = [
    # Enums
    "WorkoutDurationEnum",
    "MuscleGroupEnum",
    # Output types
    "MacroBreakdownType",
    "DietMealType",
    "DietDayType",
    "ExerciseType",
    "WorkoutDayType",
    "WorkoutPreferencesType",
    "HealthScreeningType",
    "FitnessProfileType",
    # Input types
    "WorkoutPreferencesInput",
    "HealthScreeningInput",
    "CreateFitnessProfileInput",
    "UpdateBiometricsInput",
    "UpdatePreferencesInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class WorkoutDurationEnum(str, Enum):
    """Maximum length of one workout session."""

    UP_TO_30_MIN = "30min"
    UP_TO_45_MIN = "45min"
    UP_TO_1_HOUR = "1h"
    UP_TO_90_MIN = "1h30"
    UP_TO_2_HOURS = "2h"


@strawberry.enum
class MuscleGroupEnum(str, Enum):
    """Muscle groups a workout plan can target."""

    CHEST = "chest"
    BACK = "back"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    ABS = "abs"
    INTENSE_CARDIO = "intense_cardio"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class MacroBreakdownType:
    protein: str
    carbs: str
    fats: str


@strawberry.type
class DietMealType:
    """Single meal of a diet day."""

    name: str
    description: str
    calories: int  # kcal
    macros: MacroBreakdownType


@strawberry.type
class DietDayType:
    """One day of the weekly diet plan."""

    day_name: str
    total_calories: int  # kcal
    meals: List[DietMealType]


@strawberry.type
class ExerciseType:
    name: str
    sets: int
    reps: str
    rest: str
    notes: str


@strawberry.type
class WorkoutDayType:
    """One training session."""

    day_name: str
    focus: str
    duration: str
    exercises: List[ExerciseType]
    cardio: str


@strawberry.type
class WorkoutPreferencesType:
    workout_days: int
    workout_duration: WorkoutDurationEnum
    target_muscles: List[MuscleGroupEnum]


@strawberry.type
class HealthScreeningType:
    """Health questionnaire answered before onboarding."""

    no_heart_conditions: bool
    no_chest_pain_or_dizziness: bool
    no_serious_injuries: bool
    accepts_responsibility: bool
    confirmed_at: datetime


@strawberry.type
class FitnessProfileType:
    """Complete fitness profile with stats and plans."""

    profile_id: str
    user_id: str
    name: str
    email: str
    biometrics: BiometricsType
    deficit: DeficitIntensityEnum
    stats: CalculatedStatsType
    available_foods: str
    workout_preferences: WorkoutPreferencesType
    diet_plan: List[DietDayType]
    workout_plan: List[WorkoutDayType]
    health_screening: Optional[HealthScreeningType]
    created_at: datetime
    updated_at: datetime


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class WorkoutPreferencesInput:
    """Training availability and focus."""

    workout_days: int = 3  # 1-7
    workout_duration: WorkoutDurationEnum = WorkoutDurationEnum.UP_TO_1_HOUR
    target_muscles: List[MuscleGroupEnum] = strawberry.field(default_factory=list)


@strawberry.input
class HealthScreeningInput:
    """Health questionnaire; every statement must be true to onboard."""

    no_heart_conditions: bool
    no_chest_pain_or_dizziness: bool
    no_serious_injuries: bool
    accepts_responsibility: bool


@strawberry.input
class CreateFitnessProfileInput:
    """Input for onboarding a user."""

    user_id: str
    name: str
    email: str
    biometrics: BiometricsInput
    health_screening: HealthScreeningInput
    deficit: DeficitIntensityEnum = DeficitIntensityEnum.MODERATE
    available_foods: str = ""
    workout_preferences: Optional[WorkoutPreferencesInput] = None
    generate_plans: bool = False


@strawberry.input
class UpdateBiometricsInput:
    """Input for editing biometrics (and optionally name/email)."""

    user_id: str
    biometrics: BiometricsInput
    name: Optional[str] = None
    email: Optional[str] = None


@strawberry.input
class UpdatePreferencesInput:
    """Input for changing diet and/or workout preferences."""

    user_id: str
    available_foods: Optional[str] = None
    workout_preferences: Optional[WorkoutPreferencesInput] = None
