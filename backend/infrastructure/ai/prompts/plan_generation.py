"""Prompts for diet and workout plan generation.

Prompts are plain templates filled from the generator requests. The
response schema is enforced by structured outputs, so prompts only
describe the content.
"""

from typing import Optional

from domain.plan.core.entities.workout import WorkoutDay
from domain.plan.core.value_objects.plan_requests import (
    DietPlanRequest,
    MealRequest,
    WorkoutPlanRequest,
)
from domain.plan.core.value_objects.workout_duration import WorkoutDuration

PLAN_SYSTEM_PROMPT = """You are a certified nutritionist and strength coach.
You design practical plans for people losing body fat with a moderate
caloric deficit. Plans must be varied, healthy and realistic to follow.
Use the foods the user has available whenever possible.
Respect every numeric limit you are given (calories, days, session time).
Answer in English."""


def build_diet_plan_prompt(request: DietPlanRequest) -> str:
    biometrics = request.biometrics
    return f"""Create a 7-day weekly diet plan for a person with:
- Weight: {biometrics.weight:g} kg
- Height: {biometrics.height:g} cm
- Age: {biometrics.age} years
- Daily calorie target: {request.stats.target_calories} kcal (caloric deficit for weight loss)
- Available foods / preferences: "{request.preferences.describe()}"

Each day's meals should add up to about the daily target.
The plan should be varied, healthy and focused on fat loss."""


def build_meal_prompt(request: MealRequest) -> str:
    return f"""Create ONE substitute option for the meal "{request.meal_name}".
- Calorie target for the meal: about {request.target_calories} kcal
- Available foods: "{request.preferences.describe()}"
- Goal: fat loss

Keep the original meal name "{request.meal_name}"."""


def build_workout_plan_prompt(request: WorkoutPlanRequest) -> str:
    preferences = request.preferences
    duration = preferences.workout_duration.label()
    muscles = ", ".join(muscle.label() for muscle in preferences.target_muscles)
    return f"""Create a personalised workout plan focused on fat loss and muscle definition.
- Available days: {preferences.workout_days} days per week ({preferences.workout_days} sessions)
- Time per session: {duration}
- Target muscle groups: {muscles}
- Current activity level: {request.activity_level.description()}

IMPORTANT:
- Respect the time limit ({duration}). Adjust volume and intensity to fit it.
- Balance the plan to avoid excessive muscle fatigue and prevent injuries,
  since the person is in a caloric deficit.
- Include strength training and cardio suited to the available time."""


def build_workout_day_prompt(
    current_day: WorkoutDay,
    new_duration: Optional[WorkoutDuration] = None,
) -> str:
    duration = new_duration.label() if new_duration is not None else current_day.duration
    return f"""Create a NEW exercise sequence to replace the session "{current_day.day_name}".
- Muscle focus: {current_day.focus}
- Target duration: {duration} (IMPORTANT: adjust the volume to fit this time)
- Goal: fat loss and muscle definition
- Change the exercises from the usual ones and vary the stimulus.

Keep the session name "{current_day.day_name}" and the same focus."""
