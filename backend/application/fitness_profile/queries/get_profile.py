"""GetFitnessProfileQuery - retrieve a user's fitness profile."""

from dataclasses import dataclass

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.exceptions.domain_errors import FitnessProfileNotFoundError
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository


@dataclass(frozen=True)
class GetFitnessProfileQuery:
    """Query to retrieve profile by user ID.

    Attributes:
        user_id: User identifier
    """

    user_id: str


class GetFitnessProfileQueryHandler:
    """Handler for GetFitnessProfileQuery.

    Provides read-only access to profiles via repository.
    """

    def __init__(self, repository: IFitnessProfileRepository):
        self._repository = repository

    async def handle(self, query: GetFitnessProfileQuery) -> FitnessProfile:
        """
        Raises:
            FitnessProfileNotFoundError: If the user has no profile
        """
        profile = await self._repository.find_by_user_id(query.user_id)
        if profile is None:
            raise FitnessProfileNotFoundError(query.user_id)
        return profile
