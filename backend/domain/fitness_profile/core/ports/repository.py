"""IFitnessProfileRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.fitness_profile import FitnessProfile
from ..value_objects.profile_id import ProfileId


class IFitnessProfileRepository(ABC):
    """Port for fitness profile persistence.

    Defines interface that infrastructure adapters must implement.
    Domain and application layers depend on this abstraction, not on
    concrete storage backends.
    """

    @abstractmethod
    async def save(self, profile: FitnessProfile) -> None:
        """Save profile (create or update).

        A user owns at most one profile. Storing a profile whose user
        already has a different one must fail atomically.

        Raises:
            ProfileAlreadyExistsError: If another profile exists for the user
        """
        pass

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[FitnessProfile]:
        """Find profile by ID.

        Returns:
            Optional[FitnessProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> Optional[FitnessProfile]:
        """Find profile by user ID.

        Returns:
            Optional[FitnessProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, profile_id: ProfileId) -> None:
        """Delete profile."""
        pass

    @abstractmethod
    async def exists(self, user_id: str) -> bool:
        """Check if a profile exists for the user."""
        pass
