"""CreateFitnessProfileCommand - onboard a new user."""

import logging
from dataclasses import dataclass
from typing import Optional

from domain.fitness_profile.core.entities.fitness_profile import FitnessProfile
from domain.fitness_profile.core.events.plan_events import (
    DIET_PLAN,
    WORKOUT_PLAN,
    PlanGenerated,
)
from domain.fitness_profile.core.events.profile_created import FitnessProfileCreated
from domain.fitness_profile.core.exceptions.domain_errors import (
    InvalidProfileDataError,
    ProfileAlreadyExistsError,
)
from domain.fitness_profile.core.factories.profile_factory import FitnessProfileFactory
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.fitness_profile.core.value_objects.health_screening import HealthScreening
from domain.metabolic.core.value_objects.biometric_profile import BiometricProfile
from domain.metabolic.core.value_objects.deficit_intensity import DeficitIntensity
from domain.plan.core.value_objects.diet_preferences import DietPreferences
from domain.plan.core.value_objects.workout_preferences import WorkoutPreferences
from domain.shared.ports.event_bus import IEventBus

from ..orchestrators.plan_orchestrator import PlanOrchestrator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateFitnessProfileCommand:
    """Command to create a new fitness profile.

    Attributes:
        user_id: User identifier
        name: Display name
        email: Contact email
        biometrics: Biometric and activity data
        health_screening: Health questionnaire answers; required, with
            every statement confirmed
        deficit: Deficit intensity (defaults to moderate)
        diet_preferences: Food availability
        workout_preferences: Training preferences
        generate_plans: Also generate the diet plan, and the workout
            plan when target muscles are selected
    """

    user_id: str
    name: str
    email: str
    biometrics: BiometricProfile
    health_screening: Optional[HealthScreening] = None
    deficit: DeficitIntensity = DeficitIntensity.MODERATE
    diet_preferences: Optional[DietPreferences] = None
    workout_preferences: Optional[WorkoutPreferences] = None
    generate_plans: bool = False


class CreateFitnessProfileHandler:
    """Handler for CreateFitnessProfileCommand.

    Flow:
    1. Check the health screening is present and fully confirmed
    2. Check the user has no profile yet
    3. Compute stats from biometrics and deficit
    4. Create the profile via the factory
    5. Optionally generate diet and workout plans
    6. Persist and publish events

    The existence check is repeated atomically by the repository on save,
    so two concurrent creates for one user store a single profile.
    """

    def __init__(
        self,
        orchestrator: PlanOrchestrator,
        repository: IFitnessProfileRepository,
        event_bus: IEventBus,
    ):
        self._orchestrator = orchestrator
        self._repository = repository
        self._event_bus = event_bus

    async def handle(self, command: CreateFitnessProfileCommand) -> FitnessProfile:
        """
        Handle profile creation command.

        Raises:
            InvalidProfileDataError: If the health screening is missing or
                has an unconfirmed statement
            ProfileAlreadyExistsError: If user already has a profile, including
                one stored while this command was running
            InvalidInputError: If biometrics are invalid
            PlanGenerationError: If requested plans cannot be generated
        """
        if command.health_screening is None:
            raise InvalidProfileDataError("Health screening is required before onboarding")
        command.health_screening.ensure_complete()

        if await self._repository.exists(command.user_id):
            raise ProfileAlreadyExistsError(command.user_id)

        stats = self._orchestrator.compute_stats(command.biometrics, command.deficit)

        profile = FitnessProfileFactory.create(
            user_id=command.user_id,
            name=command.name,
            email=command.email,
            biometrics=command.biometrics,
            deficit=command.deficit,
            stats=stats,
            health_screening=command.health_screening,
            diet_preferences=command.diet_preferences,
            workout_preferences=command.workout_preferences,
        )

        if command.generate_plans:
            profile.set_diet_plan(await self._orchestrator.build_diet_plan(profile))
            if profile.workout_preferences.target_muscles:
                profile.set_workout_plan(await self._orchestrator.build_workout_plan(profile))
            else:
                logger.info(
                    "Skipping workout plan, no target muscles selected",
                    extra={"user_id": command.user_id},
                )

        await self._repository.save(profile)

        logger.info(
            "Fitness profile created",
            extra={
                "user_id": profile.user_id,
                "profile_id": str(profile.profile_id),
                "target_calories": stats.target_calories,
            },
        )

        await self._event_bus.publish(
            FitnessProfileCreated.create(
                profile_id=profile.profile_id.value,
                user_id=profile.user_id,
                deficit=profile.deficit.value,
                bmr=stats.bmr,
                tdee=stats.tdee,
                target_calories=stats.target_calories,
                weeks_to_goal=stats.weeks_to_goal,
            )
        )
        if profile.has_diet_plan():
            await self._event_bus.publish(
                PlanGenerated.create(
                    profile.profile_id.value, profile.user_id, DIET_PLAN, len(profile.diet_plan)
                )
            )
        if profile.has_workout_plan():
            await self._event_bus.publish(
                PlanGenerated.create(
                    profile.profile_id.value,
                    profile.user_id,
                    WORKOUT_PLAN,
                    len(profile.workout_plan),
                )
            )

        return profile
