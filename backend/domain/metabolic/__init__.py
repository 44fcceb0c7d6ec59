"""Metabolic domain: BMR, TDEE and calorie target calculation."""

from .calculation.metabolic_calculator import MetabolicCalculator, compute_stats

__all__ = [
    "MetabolicCalculator",
    "compute_stats",
]
