"""Domain exceptions for metabolic calculations."""

from .domain_errors import InvalidInputError, MetabolicDomainError

__all__ = [
    "MetabolicDomainError",
    "InvalidInputError",
]
