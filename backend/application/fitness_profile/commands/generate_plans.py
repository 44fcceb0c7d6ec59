"""Generate whole diet or workout plans for an existing profile."""

import logging
from dataclasses import dataclass

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.events.plan_events import (
    DIET_PLAN,
    WORKOUT_PLAN,
    PlanGenerated,
)
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.shared.ports.event_bus import IEventBus

from ..orchestrators.plan_orchestrator import PlanOrchestrator
from ._loading import load_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateDietPlanCommand:
    """Command to (re)generate the weekly diet plan."""

    user_id: str


@dataclass(frozen=True)
class GenerateWorkoutPlanCommand:
    """Command to (re)generate the workout plan."""

    user_id: str


class GenerateDietPlanHandler:
    """Handler for GenerateDietPlanCommand."""

    def __init__(
        self,
        orchestrator: PlanOrchestrator,
        repository: IFitnessProfileRepository,
        event_bus: IEventBus,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: GenerateDietPlanCommand) -> FitnessProfile:
        """
        Raises:
            FitnessProfileNotFoundError: If the user has no profile
            PlanGenerationError: If the plan cannot be generated
        """
        profile = await load_profile(self._repository, command.user_id)

        profile.set_diet_plan(await self._orchestrator.build_diet_plan(profile))
        await self._repository.save(profile)

        logger.info(
            "Diet plan generated",
            extra={"user_id": profile.user_id, "days": len(profile.diet_plan)},
        )

        await self._event_bus.publish(
            PlanGenerated.create(
                profile.profile_id.value, profile.user_id, DIET_PLAN, len(profile.diet_plan)
            )
        )
        return profile


class GenerateWorkoutPlanHandler:
    """Handler for GenerateWorkoutPlanCommand."""

    def __init__(
        self,
        orchestrator: PlanOrchestrator,
        repository: IFitnessProfileRepository,
        event_bus: IEventBus,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: GenerateWorkoutPlanCommand) -> FitnessProfile:
        """
        Raises:
            FitnessProfileNotFoundError: If the user has no profile
            InvalidWorkoutPreferencesError: If no target muscle is selected
            PlanGenerationError: If the plan cannot be generated
        """
        profile = await load_profile(self._repository, command.user_id)

        profile.set_workout_plan(await self._orchestrator.build_workout_plan(profile))
        await self._repository.save(profile)

        logger.info(
            "Workout plan generated",
            extra={"user_id": profile.user_id, "sessions": len(profile.workout_plan)},
        )

        await self._event_bus.publish(
            PlanGenerated.create(
                profile.profile_id.value,
                profile.user_id,
                WORKOUT_PLAN,
                len(profile.workout_plan),
            )
        )
        return profile
