"""Plan generation prompts for OpenAI."""

from infrastructure.ai.prompts.plan_generation import (
    PLAN_SYSTEM_PROMPT,
    build_diet_plan_prompt,
    build_meal_prompt,
    build_workout_day_prompt,
    build_workout_plan_prompt,
)

__all__ = [
    "PLAN_SYSTEM_PROMPT",
    "build_diet_plan_prompt",
    "build_meal_prompt",
    "build_workout_plan_prompt",
    "build_workout_day_prompt",
]
