"""CQRS Commands for fitness profiles."""

from .change_deficit import ChangeDeficitCommand, ChangeDeficitHandler
from .create_profile import CreateFitnessProfileCommand, CreateFitnessProfileHandler
from .generate_plans import (
    GenerateDietPlanCommand,
    GenerateDietPlanHandler,
    GenerateWorkoutPlanCommand,
    GenerateWorkoutPlanHandler,
)
from .regenerate_items import (
    RegenerateMealCommand,
    RegenerateMealHandler,
    RegenerateWorkoutDayCommand,
    RegenerateWorkoutDayHandler,
)
from .update_biometrics import UpdateBiometricsCommand, UpdateBiometricsHandler
from .update_preferences import UpdatePreferencesCommand, UpdatePreferencesHandler

__all__ = [
    # Onboarding
    "CreateFitnessProfileCommand",
    "CreateFitnessProfileHandler",
    # Edits
    "UpdateBiometricsCommand",
    "UpdateBiometricsHandler",
    "ChangeDeficitCommand",
    "ChangeDeficitHandler",
    "UpdatePreferencesCommand",
    "UpdatePreferencesHandler",
    # Plans
    "GenerateDietPlanCommand",
    "GenerateDietPlanHandler",
    "GenerateWorkoutPlanCommand",
    "GenerateWorkoutPlanHandler",
    "RegenerateMealCommand",
    "RegenerateMealHandler",
    "RegenerateWorkoutDayCommand",
    "RegenerateWorkoutDayHandler",
]
