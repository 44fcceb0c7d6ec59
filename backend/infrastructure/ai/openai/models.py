"""Pydantic models for OpenAI structured outputs.

These models define the schema for structured outputs from OpenAI API.
Used with beta.chat.completions.parse() for native Pydantic support.
Structured outputs need an object at the root, so plans are wrapped in
a response model with a list field.
"""

from typing import List

from pydantic import BaseModel, Field


class MacrosModel(BaseModel):
    """Macronutrient breakdown of one meal, as short text."""

    protein: str = Field(..., description="Protein amount (e.g., '30g')")
    carbs: str = Field(..., description="Carbohydrate amount (e.g., '45g')")
    fats: str = Field(..., description="Fat amount (e.g., '12g')")


class MealModel(BaseModel):
    """
    Single meal of a diet day.

    Maps to domain entity DietMeal.
    """

    name: str = Field(..., description="Meal slot name (e.g., 'Breakfast')")
    description: str = Field(..., description="Detailed description of foods and quantities")
    calories: int = Field(..., ge=0, description="Approximate calories of the meal (kcal)")
    macros: MacrosModel


class DietDayModel(BaseModel):
    """One day of the weekly diet plan. Maps to domain entity DietDay."""

    day_name: str = Field(..., description="Day label (e.g., 'Monday' or 'Day 1')")
    total_calories: int = Field(..., ge=0, description="Total calories of the day (kcal)")
    meals: List[MealModel]


class DietPlanResponse(BaseModel):
    """Root model for a generated weekly diet plan."""

    days: List[DietDayModel] = Field(
        default_factory=list,
        description="Seven days of meals",
    )


class ExerciseModel(BaseModel):
    """Single exercise prescription. Maps to domain entity Exercise."""

    name: str
    sets: int = Field(..., ge=0)
    reps: str = Field(..., description="Repetitions (e.g., '10-12' or '30s')")
    rest: str = Field(..., description="Rest between sets (e.g., '60s')")
    notes: str = Field(..., description="Technique or intensity notes")


class WorkoutDayModel(BaseModel):
    """One training session. Maps to domain entity WorkoutDay."""

    day_name: str = Field(..., description="Session label (e.g., 'Workout A')")
    focus: str = Field(..., description="Muscle focus (e.g., 'Legs and glutes')")
    duration: str = Field(..., description="Estimated duration in minutes")
    cardio: str = Field(..., description="Specific cardio instructions")
    exercises: List[ExerciseModel]


class WorkoutPlanResponse(BaseModel):
    """Root model for a generated workout plan."""

    sessions: List[WorkoutDayModel] = Field(
        default_factory=list,
        description="One session per training day",
    )
