"""Fitness profile entities."""

from .fitness_profile import FitnessProfile

__all__ = [
    "FitnessProfile",
]
