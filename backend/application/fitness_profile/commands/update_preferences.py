"""UpdatePreferencesCommand - change diet and/or workout preferences."""

from dataclasses import dataclass
from typing import Optional

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.events.profile_updated import FitnessProfileUpdated
from domain.fitness_profile.core.exceptions.domain_errors import InvalidProfileDataError
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.plan.core.value_objects.diet_preferences import DietPreferences
from domain.plan.core.value_objects.workout_preferences import WorkoutPreferences
from domain.shared.ports.event_bus import IEventBus

from ._loading import load_profile


@dataclass(frozen=True)
class UpdatePreferencesCommand:
    """Command to update plan preferences.

    Attributes:
        user_id: User identifier
        diet_preferences: New food availability (optional)
        workout_preferences: New training preferences (optional)
    """

    user_id: str
    diet_preferences: Optional[DietPreferences] = None
    workout_preferences: Optional[WorkoutPreferences] = None


class UpdatePreferencesHandler:
    """Handler for UpdatePreferencesCommand.

    Only preferences change; stats and plans are left as they are.
    """

    def __init__(self, repository: IFitnessProfileRepository, event_bus: IEventBus):
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: UpdatePreferencesCommand) -> FitnessProfile:
        """
        Raises:
            InvalidProfileDataError: If no preferences are given
            FitnessProfileNotFoundError: If the user has no profile
        """
        updated_fields = []
        if command.diet_preferences is not None:
            updated_fields.append("diet_preferences")
        if command.workout_preferences is not None:
            updated_fields.append("workout_preferences")
        if not updated_fields:
            raise InvalidProfileDataError("No preferences to update")

        profile = await load_profile(self._repository, command.user_id)
        profile.update_preferences(
            diet_preferences=command.diet_preferences,
            workout_preferences=command.workout_preferences,
        )

        await self._repository.save(profile)

        await self._event_bus.publish(
            FitnessProfileUpdated.create(
                profile_id=profile.profile_id.value,
                user_id=profile.user_id,
                updated_fields=updated_fields,
                target_calories=profile.stats.target_calories,
            )
        )
        return profile
