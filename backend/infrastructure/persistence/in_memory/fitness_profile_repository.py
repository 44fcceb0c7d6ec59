"""In-memory implementation of IFitnessProfileRepository for testing."""

from copy import deepcopy
from typing import Dict, Optional

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.exceptions.domain_errors import ProfileAlreadyExistsError
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.fitness_profile.core.value_objects.profile_id import ProfileId


class InMemoryFitnessProfileRepository(IFitnessProfileRepository):
    """
    In-memory implementation of fitness profile repository.

    Uses a dictionary to store profiles in memory. Suitable for testing
    and development. Data is lost when the application stops.
    Profiles are deep-copied on the way in and out, so callers never
    share state with the store.
    """

    def __init__(self) -> None:
        self._profiles: Dict[str, FitnessProfile] = {}

    async def save(self, profile: FitnessProfile) -> None:
        key = str(profile.profile_id)
        # Check and insert run without yielding to the event loop
        for stored_key, stored in self._profiles.items():
            if stored.user_id == profile.user_id and stored_key != key:
                raise ProfileAlreadyExistsError(profile.user_id)
        self._profiles[key] = deepcopy(profile)

    async def find_by_id(self, profile_id: ProfileId) -> Optional[FitnessProfile]:
        profile = self._profiles.get(str(profile_id))
        return deepcopy(profile) if profile else None

    async def find_by_user_id(self, user_id: str) -> Optional[FitnessProfile]:
        for profile in self._profiles.values():
            if profile.user_id == user_id:
                return deepcopy(profile)
        return None

    async def delete(self, profile_id: ProfileId) -> None:
        self._profiles.pop(str(profile_id), None)

    async def exists(self, user_id: str) -> bool:
        return any(profile.user_id == user_id for profile in self._profiles.values())

    def clear(self) -> None:
        """
        Clear all profiles from memory.

        Useful for test cleanup.
        """
        self._profiles.clear()

    def count(self) -> int:
        return len(self._profiles)
