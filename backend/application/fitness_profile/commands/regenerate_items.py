"""Regenerate a single meal or workout day of an existing plan."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.events.plan_events import (
    DIET_PLAN,
    WORKOUT_PLAN,
    PlanItemRegenerated,
)
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.plan.core.value_objects.workout_duration import WorkoutDuration
from domain.shared.ports.event_bus import IEventBus

from ..orchestrators.plan_orchestrator import PlanOrchestrator
from ._loading import load_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegenerateMealCommand:
    """Command to replace one meal of the diet plan.

    Attributes:
        user_id: User identifier
        day_index: Zero-based day of the diet plan
        meal_index: Zero-based meal of that day
    """

    user_id: str
    day_index: int
    meal_index: int


@dataclass(frozen=True)
class RegenerateWorkoutDayCommand:
    """Command to replace one session of the workout plan.

    Attributes:
        user_id: User identifier
        day_index: Zero-based session of the workout plan
        new_duration: Session length for the new day (keeps the old one if None)
    """

    user_id: str
    day_index: int
    new_duration: Optional[WorkoutDuration] = None


class RegenerateMealHandler:
    """Handler for RegenerateMealCommand."""

    def __init__(
        self,
        orchestrator: PlanOrchestrator,
        repository: IFitnessProfileRepository,
        event_bus: IEventBus,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: RegenerateMealCommand) -> FitnessProfile:
        """
        Raises:
            FitnessProfileNotFoundError: If the user has no profile
            InvalidPlanIndexError: If the meal does not exist
            PlanGenerationError: If no substitute can be generated
        """
        profile = await load_profile(self._repository, command.user_id)

        meal = await self._orchestrator.build_replacement_meal(
            profile, command.day_index, command.meal_index
        )
        day = profile.replace_meal(command.day_index, command.meal_index, meal)
        await self._repository.save(profile)

        logger.info(
            "Meal replaced",
            extra={
                "user_id": profile.user_id,
                "day_index": command.day_index,
                "meal_index": command.meal_index,
                "day_total_calories": day.total_calories,
            },
        )

        await self._event_bus.publish(
            PlanItemRegenerated.create(
                profile.profile_id.value,
                profile.user_id,
                DIET_PLAN,
                command.day_index,
                command.meal_index,
            )
        )
        return profile


class RegenerateWorkoutDayHandler:
    """Handler for RegenerateWorkoutDayCommand."""

    def __init__(
        self,
        orchestrator: PlanOrchestrator,
        repository: IFitnessProfileRepository,
        event_bus: IEventBus,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: RegenerateWorkoutDayCommand) -> FitnessProfile:
        """
        Raises:
            FitnessProfileNotFoundError: If the user has no profile
            InvalidPlanIndexError: If the day does not exist
            PlanGenerationError: If no session can be generated
        """
        profile = await load_profile(self._repository, command.user_id)

        day = await self._orchestrator.build_replacement_workout_day(
            profile, command.day_index, command.new_duration
        )
        profile.replace_workout_day(command.day_index, day)
        await self._repository.save(profile)

        logger.info(
            "Workout day replaced",
            extra={
                "user_id": profile.user_id,
                "day_index": command.day_index,
                "duration": day.duration,
            },
        )

        await self._event_bus.publish(
            PlanItemRegenerated.create(
                profile.profile_id.value, profile.user_id, WORKOUT_PLAN, command.day_index
            )
        )
        return profile
