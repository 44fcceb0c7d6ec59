"""CQRS Queries for fitness profiles."""

from .get_profile import GetFitnessProfileQuery, GetFitnessProfileQueryHandler

__all__ = [
    "GetFitnessProfileQuery",
    "GetFitnessProfileQueryHandler",
]
