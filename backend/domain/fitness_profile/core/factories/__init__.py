"""Factories for fitness profile domain."""

from .profile_factory import FitnessProfileFactory

__all__ = [
    "FitnessProfileFactory",
]
