"""Plan entities."""

from .diet import DietDay, DietMeal, MacroBreakdown
from .workout import Exercise, WorkoutDay

__all__ = [
    "MacroBreakdown",
    "DietMeal",
    "DietDay",
    "Exercise",
    "WorkoutDay",
]
