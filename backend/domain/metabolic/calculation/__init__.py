"""Calculation services for the metabolic domain."""

from .bmr_service import BMRService
from .calorie_target_service import CalorieTargetService
from .metabolic_calculator import MetabolicCalculator, compute_stats
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "CalorieTargetService",
    "MetabolicCalculator",
    "compute_stats",
]
