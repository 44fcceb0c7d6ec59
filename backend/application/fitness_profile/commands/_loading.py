"""Profile lookup shared by command handlers."""

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.exceptions.domain_errors import FitnessProfileNotFoundError
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository


async def load_profile(repository: IFitnessProfileRepository, user_id: str) -> FitnessProfile:
    """Load a user's profile or raise FitnessProfileNotFoundError."""
    profile = await repository.find_by_user_id(user_id)
    if profile is None:
        raise FitnessProfileNotFoundError(user_id)
    return profile
