"""Plan orchestrator.

Coordinates the metabolic calculator and the plan generator for a
fitness profile.
"""

import logging
from typing import List, Optional

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.metabolic.calculation.metabolic_calculator import MetabolicCalculator
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.calculated_stats import CalculatedStats
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.plan.core.entities.diet import DietDay, DietMeal
from domain.plan.core.entities.workout import WorkoutDay
from domain.plan.core.exceptions.domain_errors import PlanGenerationError
from domain.plan.core.ports.plan_generator import IPlanGenerator
from domain.plan.core.value_objects.plan_requests import (
    DietPlanRequest,
    MealRequest,
    WorkoutPlanRequest,
)
from domain.plan.core.value_objects.workout_duration import WorkoutDuration

logger = logging.getLogger(__name__)


class PlanOrchestrator:
    """
    Orchestrate stats calculation and plan generation.

    Builds generator requests from the current state of a profile, so
    every plan is generated against up-to-date stats and preferences.

    Example:
        >>> orchestrator = PlanOrchestrator(calculator, plan_generator)
        >>> stats = orchestrator.compute_stats(biometrics, DeficitIntensity.MODERATE)
        >>> diet_plan = await orchestrator.build_diet_plan(profile)
    """

    def __init__(
        self,
        calculator: MetabolicCalculator,
        plan_generator: IPlanGenerator,
    ):
        self._calculator = calculator
        self._generator = plan_generator

    def compute_stats(
        self,
        biometrics: BiometricProfile,
        deficit: DeficitIntensity,
    ) -> CalculatedStats:
        return self._calculator.compute_stats(biometrics, deficit)

    async def build_diet_plan(self, profile: FitnessProfile) -> List[DietDay]:
        """
        Generate a weekly diet plan for the profile's calorie target.

        Raises:
            PlanGenerationError: If the generator returns no days
        """
        logger.info(
            "Generating diet plan",
            extra={
                "user_id": profile.user_id,
                "target_calories": profile.stats.target_calories,
            },
        )

        plan = await self._generator.generate_diet_plan(
            DietPlanRequest(
                biometrics=profile.biometrics,
                stats=profile.stats,
                preferences=profile.diet_preferences,
            )
        )
        if not plan:
            raise PlanGenerationError("generate_diet_plan", "no days returned")
        return plan

    async def build_workout_plan(self, profile: FitnessProfile) -> List[WorkoutDay]:
        """
        Generate a workout plan from the profile's workout preferences.

        Raises:
            InvalidWorkoutPreferencesError: If no target muscle is selected
            PlanGenerationError: If the generator returns no sessions
        """
        preferences = profile.workout_preferences
        preferences.require_target_muscles()

        logger.info(
            "Generating workout plan",
            extra={
                "user_id": profile.user_id,
                "workout_days": preferences.workout_days,
                "workout_duration": preferences.workout_duration.value,
            },
        )

        plan = await self._generator.generate_workout_plan(
            WorkoutPlanRequest(
                preferences=preferences,
                activity_level=profile.biometrics.activity_level,
            )
        )
        if not plan:
            raise PlanGenerationError("generate_workout_plan", "no sessions returned")
        return plan

    async def build_replacement_meal(
        self,
        profile: FitnessProfile,
        day_index: int,
        meal_index: int,
    ) -> DietMeal:
        """
        Generate a substitute for one meal, keeping its name and calories.

        Raises:
            InvalidPlanIndexError: If the meal does not exist
        """
        current = profile.get_meal(day_index, meal_index)

        logger.info(
            "Regenerating meal",
            extra={
                "user_id": profile.user_id,
                "day_index": day_index,
                "meal_index": meal_index,
                "meal_name": current.name,
            },
        )

        return await self._generator.regenerate_meal(
            MealRequest(
                meal_name=current.name,
                target_calories=current.calories,
                preferences=profile.diet_preferences,
            )
        )

    async def build_replacement_workout_day(
        self,
        profile: FitnessProfile,
        day_index: int,
        new_duration: Optional[WorkoutDuration] = None,
    ) -> WorkoutDay:
        """
        Generate a new session for one workout day.

        When new_duration is given the returned day always carries it,
        whatever duration text the generator produced.

        Raises:
            InvalidPlanIndexError: If the day does not exist
        """
        current = profile.get_workout_day(day_index)

        logger.info(
            "Regenerating workout day",
            extra={
                "user_id": profile.user_id,
                "day_index": day_index,
                "new_duration": new_duration.value if new_duration else None,
            },
        )

        day = await self._generator.regenerate_workout_day(current, new_duration)
        if new_duration is not None:
            day = day.with_duration(new_duration.label())
        return day
