"""Ports for the metabolic domain."""

from .calculators import IBMRCalculator, ICalorieTargetCalculator, ITDEECalculator

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "ICalorieTargetCalculator",
]
