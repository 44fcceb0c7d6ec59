"""Value objects for the metabolic domain."""

from .activity_level import ActivityLevel
from .biometric_profile import BiometricProfile
from .bmr import BMR
from .calculated_stats import CalculatedStats
from .deficit_intensity import DeficitIntensity
from .sex import Sex
from .tdee import TDEE

__all__ = [
    "Sex",
    "ActivityLevel",
    "DeficitIntensity",
    "BiometricProfile",
    "BMR",
    "TDEE",
    "CalculatedStats",
]
