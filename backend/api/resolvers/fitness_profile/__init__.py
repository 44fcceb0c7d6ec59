"""Fitness profile GraphQL resolvers.

This module exports mutations and queries for the fitness profile domain.
"""

from api.resolvers.fitness_profile.mutations import FitnessProfileMutations
from api.resolvers.fitness_profile.queries import FitnessProfileQueries

__all__ = [
    "FitnessProfileMutations",
    "FitnessProfileQueries",
]
