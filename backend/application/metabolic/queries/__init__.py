"""CQRS Queries for metabolic calculations."""

from .compute_stats import ComputeStatsQuery, ComputeStatsQueryHandler

__all__ = [
    "ComputeStatsQuery",
    "ComputeStatsQueryHandler",
]
