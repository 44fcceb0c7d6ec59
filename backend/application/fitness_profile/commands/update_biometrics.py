"""UpdateBiometricsCommand - edit biometrics and recompute stats."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.events.profile_updated import FitnessProfileUpdated
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.shared.ports.event_bus import IEventBus

from ..orchestrators.plan_orchestrator import PlanOrchestrator
from ._loading import load_profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateBiometricsCommand:
    """Command to replace a profile's biometrics.

    Attributes:
        user_id: User identifier
        biometrics: New biometric and activity data
        name: New display name (optional)
        email: New email (optional)
    """

    user_id: str
    biometrics: BiometricProfile
    name: Optional[str] = None
    email: Optional[str] = None


class UpdateBiometricsHandler:
    """Handler for UpdateBiometricsCommand.

    Stats are recomputed with the stored deficit. Existing plans are
    kept; the user regenerates them explicitly.
    """

    def __init__(
        self,
        orchestrator: PlanOrchestrator,
        repository: IFitnessProfileRepository,
        event_bus: IEventBus,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: UpdateBiometricsCommand) -> FitnessProfile:
        """
        Raises:
            FitnessProfileNotFoundError: If the user has no profile
            InvalidInputError: If biometrics are invalid
        """
        profile = await load_profile(self._repository, command.user_id)

        updated_fields = ["biometrics"]
        if command.name is not None or command.email is not None:
            profile.update_details(name=command.name, email=command.email)
            if command.name is not None:
                updated_fields.append("name")
            if command.email is not None:
                updated_fields.append("email")

        stats = self._orchestrator.compute_stats(command.biometrics, profile.deficit)
        profile.update_biometrics(command.biometrics, stats)

        await self._repository.save(profile)

        logger.info(
            "Biometrics updated",
            extra={
                "user_id": profile.user_id,
                "target_calories": stats.target_calories,
                "weeks_to_goal": stats.weeks_to_goal,
            },
        )

        await self._event_bus.publish(
            FitnessProfileUpdated.create(
                profile_id=profile.profile_id.value,
                user_id=profile.user_id,
                updated_fields=updated_fields,
                target_calories=stats.target_calories,
            )
        )
        return profile
