"""GraphQL types for the metabolic calculator.

These types expose BMR/TDEE calculation and the deficit-based calorie
target used during onboarding.
"""

from __future__ import annotations

from enum import Enum

import strawberry

__all__ = [
    # Enums
    "SexEnum",
    "ActivityLevelEnum",
    "DeficitIntensityEnum",
    # Output types
    "BiometricsType",
    "CalculatedStatsType",
    # Input types
    "BiometricsInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class SexEnum(str, Enum):
    """Biological sex for BMR calculation."""

    MALE = "male"
    FEMALE = "female"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation."""

    SEDENTARY = "sedentary"  # x1.2
    LIGHTLY_ACTIVE = "lightly_active"  # x1.375
    MODERATELY_ACTIVE = "moderately_active"  # x1.55
    VERY_ACTIVE = "very_active"  # x1.725
    EXTRA_ACTIVE = "extra_active"  # x1.9


@strawberry.enum
class DeficitIntensityEnum(str, Enum):
    """Share of TDEE removed from the daily calorie target."""

    LIGHT = "light"  # 10%
    MODERATE = "moderate"  # 20%
    AGGRESSIVE = "aggressive"  # 30%


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class BiometricsType:
    """User biometric and activity data."""

    sex: SexEnum
    age: int  # years
    weight: float  # kg
    height: float  # cm
    activity_level: ActivityLevelEnum
    target_weight_loss_kg: float

    @strawberry.field
    def bmi(self) -> float:
        """Body Mass Index."""
        height_m = self.height / 100.0
        return round(self.weight / (height_m**2), 1)


@strawberry.type
class CalculatedStatsType:
    """Daily energy figures for a profile and deficit intensity."""

    bmr: int  # kcal/day at rest
    tdee: int  # kcal/day with activity
    target_calories: int  # kcal/day under the deficit
    weeks_to_goal: int
    daily_deficit: int  # kcal/day below TDEE


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class BiometricsInput:
    """Biometric and activity data input."""

    sex: SexEnum
    age: int  # years (> 0)
    weight: float  # kg (> 0)
    height: float  # cm (> 0)
    activity_level: ActivityLevelEnum
    target_weight_loss_kg: float = 0.0
