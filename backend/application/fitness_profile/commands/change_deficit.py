"""ChangeDeficitCommand - switch deficit intensity."""

import logging
from dataclasses import dataclass

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.events.profile_updated import FitnessProfileUpdated
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.shared.ports.event_bus import IEventBus

from ..orchestrators.plan_orchestrator import PlanOrchestrator
from ._loading import load_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeDeficitCommand:
    """Command to change the deficit intensity of a profile."""

    user_id: str
    deficit: DeficitIntensity


class ChangeDeficitHandler:
    """Handler for ChangeDeficitCommand."""

    def __init__(
        self,
        orchestrator: PlanOrchestrator,
        repository: IFitnessProfileRepository,
        event_bus: IEventBus,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: ChangeDeficitCommand) -> FitnessProfile:
        """
        Raises:
            FitnessProfileNotFoundError: If the user has no profile
            InvalidInputError: If the intensity is unknown
        """
        profile = await load_profile(self._repository, command.user_id)
        previous = profile.deficit

        stats = self._orchestrator.compute_stats(profile.biometrics, command.deficit)
        profile.change_deficit(command.deficit, stats)

        await self._repository.save(profile)

        logger.info(
            "Deficit changed",
            extra={
                "user_id": profile.user_id,
                "from": previous.value,
                "to": command.deficit.value,
                "target_calories": stats.target_calories,
            },
        )

        await self._event_bus.publish(
            FitnessProfileUpdated.create(
                profile_id=profile.profile_id.value,
                user_id=profile.user_id,
                updated_fields=["deficit"],
                target_calories=stats.target_calories,
            )
        )
        return profile
