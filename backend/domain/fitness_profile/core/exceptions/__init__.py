"""Domain exceptions for fitness profiles."""

from .domain_errors import (
    FitnessProfileDomainError,
    FitnessProfileNotFoundError,
    InvalidPlanIndexError,
    InvalidProfileDataError,
    ProfileAlreadyExistsError,
)

__all__ = [
    "FitnessProfileDomainError",
    "InvalidProfileDataError",
    "FitnessProfileNotFoundError",
    "ProfileAlreadyExistsError",
    "InvalidPlanIndexError",
]
