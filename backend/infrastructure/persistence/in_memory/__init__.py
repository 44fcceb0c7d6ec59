"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.fitness_profile_repository import (
    InMemoryFitnessProfileRepository,
)

__all__ = [
    "InMemoryFitnessProfileRepository",
]
