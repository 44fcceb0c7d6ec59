"""Unit tests for plan generation and regeneration commands."""

from unittest.mock import AsyncMock, Mock

import pytest

from application.fitness_profile.commands import (
    GenerateDietPlanCommand,
    GenerateDietPlanHandler,
    GenerateWorkoutPlanCommand,
    GenerateWorkoutPlanHandler,
    RegenerateMealCommand,
    RegenerateMealHandler,
    RegenerateWorkoutDayCommand,
    RegenerateWorkoutDayHandler,
)
from application.fitness_profile.orchestrators import PlanOrchestrator
from domain.fitness_profile.core.entities import FitnessProfile
from domain.fitness_profile.core.events import PlanGenerated, PlanItemRegenerated
from domain.fitness_profile.core.exceptions import (
    FitnessProfileNotFoundError,
    InvalidPlanIndexError,
)
from domain.metabolic import MetabolicCalculator
from domain.plan.core.exceptions import InvalidWorkoutPreferencesError, PlanGenerationError
from domain.plan.core.value_objects import WorkoutDuration, WorkoutPreferences
from infrastructure.persistence.in_memory import InMemoryFitnessProfileRepository
from infrastructure.plan.providers import StubPlanGenerator


@pytest.fixture
def repository() -> InMemoryFitnessProfileRepository:
    return InMemoryFitnessProfileRepository()


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def orchestrator() -> PlanOrchestrator:
    return PlanOrchestrator(calculator=MetabolicCalculator(), plan_generator=StubPlanGenerator())


class TestGenerateDietPlan:
    @pytest.mark.asyncio
    async def test_generates_and_persists(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile: FitnessProfile,
    ) -> None:
        await repository.save(profile)
        handler = GenerateDietPlanHandler(orchestrator, repository, event_bus)

        updated = await handler.handle(GenerateDietPlanCommand(user_id="user123"))

        assert len(updated.diet_plan) == 7
        for day in updated.diet_plan:
            assert day.meals_calories() == profile.stats.target_calories
        stored = await repository.find_by_user_id("user123")
        assert stored is not None
        assert stored.diet_plan == updated.diet_plan

        event = event_bus.publish.call_args.args[0]
        assert isinstance(event, PlanGenerated)
        assert event.plan_type == "diet"
        assert event.day_count == 7

    @pytest.mark.asyncio
    async def test_generation_failure_leaves_profile_unchanged(
        self,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile_with_plans: FitnessProfile,
    ) -> None:
        await repository.save(profile_with_plans)
        orchestrator = Mock(spec=PlanOrchestrator)
        orchestrator.build_diet_plan = AsyncMock(
            side_effect=PlanGenerationError("generate_diet_plan", "timeout")
        )
        handler = GenerateDietPlanHandler(orchestrator, repository, event_bus)

        with pytest.raises(PlanGenerationError):
            await handler.handle(GenerateDietPlanCommand(user_id="user123"))

        stored = await repository.find_by_user_id("user123")
        assert stored is not None
        assert stored.diet_plan == profile_with_plans.diet_plan
        event_bus.publish.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_profile(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
    ) -> None:
        handler = GenerateDietPlanHandler(orchestrator, repository, event_bus)

        with pytest.raises(FitnessProfileNotFoundError):
            await handler.handle(GenerateDietPlanCommand(user_id="ghost"))


class TestGenerateWorkoutPlan:
    @pytest.mark.asyncio
    async def test_one_session_per_day(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile: FitnessProfile,
    ) -> None:
        await repository.save(profile)
        handler = GenerateWorkoutPlanHandler(orchestrator, repository, event_bus)

        updated = await handler.handle(GenerateWorkoutPlanCommand(user_id="user123"))

        assert len(updated.workout_plan) == 3
        assert {day.duration for day in updated.workout_plan} == {"up to 45 minutes"}
        event = event_bus.publish.call_args.args[0]
        assert event.plan_type == "workout"

    @pytest.mark.asyncio
    async def test_requires_target_muscles(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile: FitnessProfile,
    ) -> None:
        profile.update_preferences(workout_preferences=WorkoutPreferences())
        await repository.save(profile)
        handler = GenerateWorkoutPlanHandler(orchestrator, repository, event_bus)

        with pytest.raises(InvalidWorkoutPreferencesError):
            await handler.handle(GenerateWorkoutPlanCommand(user_id="user123"))


class TestRegenerateMeal:
    @pytest.mark.asyncio
    async def test_replaces_only_target_meal(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile_with_plans: FitnessProfile,
    ) -> None:
        await repository.save(profile_with_plans)
        handler = RegenerateMealHandler(orchestrator, repository, event_bus)

        updated = await handler.handle(
            RegenerateMealCommand(user_id="user123", day_index=0, meal_index=1)
        )

        new_meal = updated.diet_plan[0].meals[1]
        assert new_meal.name == "Dinner"
        assert new_meal.calories == 600
        assert new_meal.description.startswith("Alternative #1")
        assert updated.diet_plan[0].meals[0] == profile_with_plans.diet_plan[0].meals[0]
        assert updated.diet_plan[1] == profile_with_plans.diet_plan[1]

        event = event_bus.publish.call_args.args[0]
        assert isinstance(event, PlanItemRegenerated)
        assert (event.plan_type, event.day_index, event.item_index) == ("diet", 0, 1)

    @pytest.mark.asyncio
    async def test_bad_index(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile_with_plans: FitnessProfile,
    ) -> None:
        await repository.save(profile_with_plans)
        handler = RegenerateMealHandler(orchestrator, repository, event_bus)

        with pytest.raises(InvalidPlanIndexError):
            await handler.handle(RegenerateMealCommand(user_id="user123", day_index=0, meal_index=5))

        event_bus.publish.assert_not_called()


class TestRegenerateWorkoutDay:
    @pytest.mark.asyncio
    async def test_replaces_day_with_new_duration(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile_with_plans: FitnessProfile,
    ) -> None:
        await repository.save(profile_with_plans)
        handler = RegenerateWorkoutDayHandler(orchestrator, repository, event_bus)

        updated = await handler.handle(
            RegenerateWorkoutDayCommand(
                user_id="user123",
                day_index=1,
                new_duration=WorkoutDuration.UP_TO_2_HOURS,
            )
        )

        day = updated.workout_plan[1]
        assert day.day_name == "Workout B"
        assert day.focus == "Abs"
        assert day.duration == "up to 120 minutes"
        assert updated.workout_plan[0] == profile_with_plans.workout_plan[0]

        event = event_bus.publish.call_args.args[0]
        assert (event.plan_type, event.day_index, event.item_index) == ("workout", 1, None)

    @pytest.mark.asyncio
    async def test_keeps_duration_when_not_given(
        self,
        orchestrator: PlanOrchestrator,
        repository: InMemoryFitnessProfileRepository,
        event_bus: AsyncMock,
        profile_with_plans: FitnessProfile,
    ) -> None:
        await repository.save(profile_with_plans)
        handler = RegenerateWorkoutDayHandler(orchestrator, repository, event_bus)

        updated = await handler.handle(RegenerateWorkoutDayCommand(user_id="user123", day_index=0))

        assert updated.workout_plan[0].duration == "up to 45 minutes"
        assert updated.workout_plan[0].exercises[0].name == "Hip thrust (variation 1)"
