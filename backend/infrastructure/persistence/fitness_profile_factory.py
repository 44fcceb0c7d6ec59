"""Factory for creating fitness profile repository instances.

Environment-based repository selection:
- .env (runtime): REPOSITORY_BACKEND=mongodb (production persistence)
- .env.test (pytest): REPOSITORY_BACKEND=inmemory (fast, isolated tests)
"""

import os
from typing import Optional

from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from infrastructure.config import get_mongodb_uri
from infrastructure.persistence.in_memory.fitness_profile_repository import (
    InMemoryFitnessProfileRepository,
)

_fitness_profile_repository: Optional[IFitnessProfileRepository] = None


def create_fitness_profile_repository() -> IFitnessProfileRepository:
    """
    Create fitness profile repository based on REPOSITORY_BACKEND.

    Environment Variables:
        REPOSITORY_BACKEND: 'inmemory' (default) or 'mongodb'
        MONGODB_URI: MongoDB connection URI (required if 'mongodb')

    Raises:
        ValueError: If REPOSITORY_BACKEND='mongodb' but MONGODB_URI not set
    """
    repo_type = os.getenv("REPOSITORY_BACKEND", "inmemory").lower()

    if repo_type == "mongodb":
        if not get_mongodb_uri():
            raise ValueError(
                "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
                "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
            )
        from infrastructure.persistence.mongodb.fitness_profile_repository import (
            MongoFitnessProfileRepository,
        )

        return MongoFitnessProfileRepository()

    # Unknown type - graceful fallback to inmemory
    return InMemoryFitnessProfileRepository()


def get_fitness_profile_repository() -> IFitnessProfileRepository:
    """Get singleton repository instance (lazy initialization)."""
    global _fitness_profile_repository
    if _fitness_profile_repository is None:
        _fitness_profile_repository = create_fitness_profile_repository()
    return _fitness_profile_repository


def reset_fitness_profile_repository() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _fitness_profile_repository
    _fitness_profile_repository = None
