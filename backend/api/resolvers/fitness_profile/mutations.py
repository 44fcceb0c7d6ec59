"""Mutation resolvers for fitness profile domain.

These resolvers execute CQRS commands using Command Handlers:
- createFitnessProfile: Onboard a user (stats, optionally plans)
- updateBiometrics / changeDeficit / updatePreferences: Edit inputs
- generateDietPlan / generateWorkoutPlan: (Re)generate whole plans
- regenerateMeal / regenerateWorkoutDay: Replace a single plan item

Domain errors propagate and surface as GraphQL errors.
"""

from typing import Any, Optional, Tuple

import strawberry

from api.mappers import (
    biometrics_from_input,
    deficit_from_input,
    duration_from_input,
    health_screening_from_input,
    map_profile,
    workout_preferences_from_input,
)
from api.types_fitness_profile import (
    CreateFitnessProfileInput,
    FitnessProfileType,
    UpdateBiometricsInput,
    UpdatePreferencesInput,
    WorkoutDurationEnum,
)
from api.types_metabolic import DeficitIntensityEnum
from application.fitness_profile.commands import (
    ChangeDeficitCommand,
    ChangeDeficitHandler,
    CreateFitnessProfileCommand,
    CreateFitnessProfileHandler,
    GenerateDietPlanCommand,
    GenerateDietPlanHandler,
    GenerateWorkoutPlanCommand,
    GenerateWorkoutPlanHandler,
    RegenerateMealCommand,
    RegenerateMealHandler,
    RegenerateWorkoutDayCommand,
    RegenerateWorkoutDayHandler,
    UpdateBiometricsCommand,
    UpdateBiometricsHandler,
    UpdatePreferencesCommand,
    UpdatePreferencesHandler,
)
from domain.plan.core.value_objects.diet_preferences import DietPreferences


def _dependencies(info: strawberry.types.Info) -> Tuple[Any, Any, Any]:
    context = info.context
    orchestrator = context.get("plan_orchestrator")
    repository = context.get("profile_repository")
    event_bus = context.get("event_bus")

    if not all([orchestrator, repository, event_bus]):
        raise Exception("Missing dependencies in GraphQL context")

    return orchestrator, repository, event_bus


@strawberry.type
class FitnessProfileMutations:
    """Mutations for fitness profile operations."""

    @strawberry.mutation
    async def create_fitness_profile(
        self, info: strawberry.types.Info, input: CreateFitnessProfileInput
    ) -> FitnessProfileType:
        """Create a fitness profile from onboarding data.

        Workflow:
        1. Reject unless every health screening statement is confirmed
        2. Calculate BMR (Mifflin-St Jeor) and TDEE
        3. Apply the deficit intensity to get the calorie target
        4. Optionally generate diet and workout plans
        5. Store in repository and publish events

        Example:
            mutation {
              fitnessProfile {
                createFitnessProfile(input: {
                  userId: "user123", name: "Alex", email: "alex@example.com"
                  biometrics: {sex: MALE, age: 30, weight: 80, height: 180,
                               activityLevel: MODERATELY_ACTIVE, targetWeightLossKg: 5}
                  healthScreening: {noHeartConditions: true, noChestPainOrDizziness: true,
                                    noSeriousInjuries: true, acceptsResponsibility: true}
                  deficit: MODERATE
                  generatePlans: true
                }) { profileId stats { targetCalories weeksToGoal } }
              }
            }
        """
        orchestrator, repository, event_bus = _dependencies(info)

        command = CreateFitnessProfileCommand(
            user_id=input.user_id,
            name=input.name,
            email=input.email,
            biometrics=biometrics_from_input(input.biometrics),
            health_screening=health_screening_from_input(input.health_screening),
            deficit=deficit_from_input(input.deficit),
            diet_preferences=DietPreferences(available_foods=input.available_foods),
            workout_preferences=(
                workout_preferences_from_input(input.workout_preferences)
                if input.workout_preferences is not None
                else None
            ),
            generate_plans=input.generate_plans,
        )
        handler = CreateFitnessProfileHandler(orchestrator, repository, event_bus)
        return map_profile(await handler.handle(command))

    @strawberry.mutation
    async def update_biometrics(
        self, info: strawberry.types.Info, input: UpdateBiometricsInput
    ) -> FitnessProfileType:
        """Replace biometrics and recompute stats with the stored deficit."""
        orchestrator, repository, event_bus = _dependencies(info)

        command = UpdateBiometricsCommand(
            user_id=input.user_id,
            biometrics=biometrics_from_input(input.biometrics),
            name=input.name,
            email=input.email,
        )
        handler = UpdateBiometricsHandler(orchestrator, repository, event_bus)
        return map_profile(await handler.handle(command))

    @strawberry.mutation
    async def change_deficit(
        self,
        info: strawberry.types.Info,
        user_id: str,
        deficit: DeficitIntensityEnum,
    ) -> FitnessProfileType:
        """Switch deficit intensity and recompute stats."""
        orchestrator, repository, event_bus = _dependencies(info)

        handler = ChangeDeficitHandler(orchestrator, repository, event_bus)
        profile = await handler.handle(
            ChangeDeficitCommand(user_id=user_id, deficit=deficit_from_input(deficit))
        )
        return map_profile(profile)

    @strawberry.mutation
    async def update_preferences(
        self, info: strawberry.types.Info, input: UpdatePreferencesInput
    ) -> FitnessProfileType:
        """Update available foods and/or workout preferences."""
        _, repository, event_bus = _dependencies(info)

        command = UpdatePreferencesCommand(
            user_id=input.user_id,
            diet_preferences=(
                DietPreferences(available_foods=input.available_foods)
                if input.available_foods is not None
                else None
            ),
            workout_preferences=(
                workout_preferences_from_input(input.workout_preferences)
                if input.workout_preferences is not None
                else None
            ),
        )
        handler = UpdatePreferencesHandler(repository, event_bus)
        return map_profile(await handler.handle(command))

    @strawberry.mutation
    async def generate_diet_plan(
        self, info: strawberry.types.Info, user_id: str
    ) -> FitnessProfileType:
        """Generate a new 7-day diet plan for the current calorie target."""
        orchestrator, repository, event_bus = _dependencies(info)

        handler = GenerateDietPlanHandler(orchestrator, repository, event_bus)
        return map_profile(await handler.handle(GenerateDietPlanCommand(user_id=user_id)))

    @strawberry.mutation
    async def generate_workout_plan(
        self, info: strawberry.types.Info, user_id: str
    ) -> FitnessProfileType:
        """Generate a new workout plan from the workout preferences."""
        orchestrator, repository, event_bus = _dependencies(info)

        handler = GenerateWorkoutPlanHandler(orchestrator, repository, event_bus)
        return map_profile(await handler.handle(GenerateWorkoutPlanCommand(user_id=user_id)))

    @strawberry.mutation
    async def regenerate_meal(
        self,
        info: strawberry.types.Info,
        user_id: str,
        day_index: int,
        meal_index: int,
    ) -> FitnessProfileType:
        """Replace one meal with a substitute of about the same calories."""
        orchestrator, repository, event_bus = _dependencies(info)

        handler = RegenerateMealHandler(orchestrator, repository, event_bus)
        profile = await handler.handle(
            RegenerateMealCommand(user_id=user_id, day_index=day_index, meal_index=meal_index)
        )
        return map_profile(profile)

    @strawberry.mutation
    async def regenerate_workout_day(
        self,
        info: strawberry.types.Info,
        user_id: str,
        day_index: int,
        new_duration: Optional[WorkoutDurationEnum] = None,
    ) -> FitnessProfileType:
        """Replace one workout session, optionally with a new duration."""
        orchestrator, repository, event_bus = _dependencies(info)

        handler = RegenerateWorkoutDayHandler(orchestrator, repository, event_bus)
        profile = await handler.handle(
            RegenerateWorkoutDayCommand(
                user_id=user_id,
                day_index=day_index,
                new_duration=duration_from_input(new_duration) if new_duration else None,
            )
        )
        return map_profile(profile)
