"""Domain exceptions for diet and workout plans."""

from .domain_errors import (
    InvalidPlanDataError,
    InvalidWorkoutPreferencesError,
    PlanDomainError,
    PlanGenerationError,
)

__all__ = [
    "PlanDomainError",
    "PlanGenerationError",
    "InvalidPlanDataError",
    "InvalidWorkoutPreferencesError",
]
