"""OpenAI client implementation for plan generation."""

from infrastructure.ai.openai.client import OpenAIPlanClient
from infrastructure.ai.openai.models import (
    DietPlanResponse,
    MealModel,
    WorkoutDayModel,
    WorkoutPlanResponse,
)

__all__ = [
    "OpenAIPlanClient",
    "DietPlanResponse",
    "MealModel",
    "WorkoutDayModel",
    "WorkoutPlanResponse",
]
