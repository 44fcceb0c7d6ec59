"""Port (interface) for generative plan providers.

This port defines the contract that external text-generation services
(e.g., OpenAI) must implement to produce diet and workout plans.
"""

from typing import List, Optional, Protocol

from ..entities.diet import DietDay, DietMeal
from ..entities.workout import WorkoutDay
from ..value_objects.plan_requests import DietPlanRequest, MealRequest, WorkoutPlanRequest
from ..value_objects.workout_duration import WorkoutDuration


class IPlanGenerator(Protocol):
    """
    Interface for plan generation providers.

    Implementations can be:
    - OpenAI structured outputs (production)
    - Deterministic stub (tests, local development)
    """

    async def generate_diet_plan(self, request: DietPlanRequest) -> List[DietDay]:
        """
        Generate a 7-day diet plan around the calorie target.

        Raises:
            PlanGenerationError: If no usable plan is returned
        """
        ...

    async def regenerate_meal(self, request: MealRequest) -> DietMeal:
        """
        Generate one substitute meal with the same name and about the same calories.

        Raises:
            PlanGenerationError: If no usable meal is returned
        """
        ...

    async def generate_workout_plan(self, request: WorkoutPlanRequest) -> List[WorkoutDay]:
        """
        Generate one session per training day within the session time limit.

        Raises:
            PlanGenerationError: If no usable plan is returned
        """
        ...

    async def regenerate_workout_day(
        self,
        current_day: WorkoutDay,
        new_duration: Optional[WorkoutDuration] = None,
    ) -> WorkoutDay:
        """
        Generate a new exercise sequence for the same day and focus.

        Args:
            current_day: Session being replaced
            new_duration: Session length to fit; defaults to the current one

        Raises:
            PlanGenerationError: If no usable day is returned
        """
        ...
