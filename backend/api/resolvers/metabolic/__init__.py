"""Metabolic GraphQL resolvers."""

from api.resolvers.metabolic.queries import MetabolicQueries

__all__ = [
    "MetabolicQueries",
]
