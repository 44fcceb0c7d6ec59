"""MongoDB repository implementations."""

from .base import MongoBaseRepository
from .fitness_profile_repository import MongoFitnessProfileRepository

__all__ = [
    "MongoBaseRepository",
    "MongoFitnessProfileRepository",
]
