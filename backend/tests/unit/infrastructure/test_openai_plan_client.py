"""Unit tests for OpenAI plan client.

Tests focus on:
- Client initialization
- Pydantic model mapping to domain entities
- Error handling
- Cache statistics tracking

Note: These are UNIT tests with mocked OpenAI API calls.
Each failure case uses a different client method so no circuit
breaker reaches its failure threshold.
"""

from typing import Any, Iterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from domain.metabolic.core.value_objects import (
    ActivityLevel,
    BiometricProfile,
    CalculatedStats,
)
from domain.plan.core.entities import DietDay, Exercise, WorkoutDay
from domain.plan.core.exceptions import PlanGenerationError
from domain.plan.core.value_objects import (
    DietPlanRequest,
    DietPreferences,
    MealRequest,
    MuscleGroup,
    WorkoutDuration,
    WorkoutPlanRequest,
    WorkoutPreferences,
)
from infrastructure.ai.openai.client import OpenAIPlanClient
from infrastructure.ai.openai.models import (
    DietDayModel,
    DietPlanResponse,
    ExerciseModel,
    MacrosModel,
    MealModel,
    WorkoutDayModel,
    WorkoutPlanResponse,
)


@pytest.fixture
def mock_openai_client() -> Iterator[Any]:
    """Fixture providing mocked OpenAI AsyncClient."""
    with patch("infrastructure.ai.openai.client.AsyncOpenAI") as mock:
        yield mock


@pytest.fixture
def openai_client(mock_openai_client: Any) -> OpenAIPlanClient:
    """Fixture providing OpenAIPlanClient with mocked API."""
    return OpenAIPlanClient(api_key="test-key")


def _response(parsed: Any, cached_tokens: Any = 0) -> Any:
    mock_response = MagicMock()
    mock_response.choices = [MagicMock(message=MagicMock(parsed=parsed))]
    mock_response.usage = MagicMock(
        total_tokens=1500,
        prompt_tokens=1000,
        completion_tokens=500,
    )
    mock_response.usage.prompt_tokens_details = MagicMock(cached_tokens=cached_tokens)
    return mock_response


def _meal(name: str = "Breakfast", calories: int = 400) -> MealModel:
    return MealModel(
        name=name,
        description="Scrambled eggs with toast",
        calories=calories,
        macros=MacrosModel(protein="25g", carbs="30g", fats="15g"),
    )


def _workout_day(name: str = "Workout A") -> WorkoutDayModel:
    return WorkoutDayModel(
        day_name=name,
        focus="Legs",
        duration="45 minutes",
        cardio="10 min rowing",
        exercises=[
            ExerciseModel(name="Squat", sets=4, reps="8-10", rest="90s", notes="Slow descent")
        ],
    )


@pytest.fixture
def diet_request(biometrics: BiometricProfile, stats: CalculatedStats) -> DietPlanRequest:
    return DietPlanRequest(
        biometrics=biometrics,
        stats=stats,
        preferences=DietPreferences(available_foods="eggs, bread"),
    )


@pytest.fixture
def workout_request() -> WorkoutPlanRequest:
    return WorkoutPlanRequest(
        preferences=WorkoutPreferences(
            workout_days=2,
            workout_duration=WorkoutDuration.UP_TO_45_MIN,
            target_muscles=(MuscleGroup.QUADRICEPS,),
        ),
        activity_level=ActivityLevel.LIGHTLY_ACTIVE,
    )


class TestOpenAIPlanClientInit:
    def test_init_with_defaults(self, mock_openai_client: Any) -> None:
        client = OpenAIPlanClient(api_key="test-key")

        assert client._model == "gpt-4o-2024-08-06"
        assert client._temperature == 0.7
        assert client._cache_stats == {"hits": 0, "misses": 0}
        mock_openai_client.assert_called_once_with(api_key="test-key")

    def test_init_with_custom_params(self, mock_openai_client: Any) -> None:
        client = OpenAIPlanClient(api_key="test-key", model="gpt-4o-mini", temperature=0.2)

        assert client._model == "gpt-4o-mini"
        assert client._temperature == 0.2

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self, openai_client: OpenAIPlanClient) -> None:
        openai_client._client.close = AsyncMock()

        async with openai_client as client:
            assert client is openai_client

        openai_client._client.close.assert_awaited_once()


class TestGenerateDietPlan:
    @pytest.mark.asyncio
    async def test_success(
        self, openai_client: OpenAIPlanClient, diet_request: DietPlanRequest
    ) -> None:
        parsed = DietPlanResponse(
            days=[
                DietDayModel(
                    day_name=f"Day {i}",
                    total_calories=1775,
                    meals=[_meal("Breakfast", 700), _meal("Dinner", 1075)],
                )
                for i in range(1, 8)
            ]
        )
        mock_parse = AsyncMock(return_value=_response(parsed))
        openai_client._client.beta.chat.completions.parse = mock_parse

        days = await openai_client.generate_diet_plan(diet_request)

        assert len(days) == 7
        assert isinstance(days[0], DietDay)
        assert days[0].meals[1].calories == 1075
        assert days[0].meals[0].macros.protein == "25g"

        kwargs = mock_parse.call_args.kwargs
        assert kwargs["response_format"] is DietPlanResponse
        assert kwargs["model"] == "gpt-4o-2024-08-06"
        user_prompt = kwargs["messages"][1]["content"]
        assert "1775 kcal" in user_prompt
        assert "eggs, bread" in user_prompt

    @pytest.mark.asyncio
    async def test_empty_days_raise(
        self, openai_client: OpenAIPlanClient, diet_request: DietPlanRequest
    ) -> None:
        openai_client._client.beta.chat.completions.parse = AsyncMock(
            return_value=_response(DietPlanResponse(days=[]))
        )

        with pytest.raises(PlanGenerationError) as exc_info:
            await openai_client.generate_diet_plan(diet_request)

        assert exc_info.value.operation == "generate_diet_plan"


class TestRegenerateMeal:
    @pytest.mark.asyncio
    async def test_keeps_original_name(self, openai_client: OpenAIPlanClient) -> None:
        openai_client._client.beta.chat.completions.parse = AsyncMock(
            return_value=_response(_meal("Light breakfast", 410))
        )

        meal = await openai_client.regenerate_meal(
            MealRequest(meal_name="Breakfast", target_calories=400, preferences=DietPreferences())
        )

        assert meal.name == "Breakfast"
        assert meal.calories == 410

    @pytest.mark.asyncio
    async def test_empty_parsed_response(self, openai_client: OpenAIPlanClient) -> None:
        openai_client._client.beta.chat.completions.parse = AsyncMock(
            return_value=_response(None)
        )

        with pytest.raises(PlanGenerationError, match="empty parsed response"):
            await openai_client.regenerate_meal(
                MealRequest(meal_name="Lunch", target_calories=600, preferences=DietPreferences())
            )


class TestGenerateWorkoutPlan:
    @pytest.mark.asyncio
    async def test_success(
        self, openai_client: OpenAIPlanClient, workout_request: WorkoutPlanRequest
    ) -> None:
        parsed = WorkoutPlanResponse(sessions=[_workout_day("Workout A"), _workout_day("Workout B")])
        mock_parse = AsyncMock(return_value=_response(parsed))
        openai_client._client.beta.chat.completions.parse = mock_parse

        sessions = await openai_client.generate_workout_plan(workout_request)

        assert [s.day_name for s in sessions] == ["Workout A", "Workout B"]
        assert sessions[0].exercises[0] == Exercise(
            name="Squat", sets=4, reps="8-10", rest="90s", notes="Slow descent"
        )
        user_prompt = mock_parse.call_args.kwargs["messages"][1]["content"]
        assert "up to 45 minutes" in user_prompt
        assert "quadriceps" in user_prompt

    @pytest.mark.asyncio
    async def test_no_choices(
        self, openai_client: OpenAIPlanClient, workout_request: WorkoutPlanRequest
    ) -> None:
        response = _response(None)
        response.choices = []
        openai_client._client.beta.chat.completions.parse = AsyncMock(return_value=response)

        with pytest.raises(PlanGenerationError, match="no choices"):
            await openai_client.generate_workout_plan(workout_request)


class TestRegenerateWorkoutDay:
    @pytest.mark.asyncio
    async def test_keeps_name_and_focus(self, openai_client: OpenAIPlanClient) -> None:
        mock_parse = AsyncMock(return_value=_response(_workout_day("Leg day")))
        openai_client._client.beta.chat.completions.parse = mock_parse
        current = WorkoutDay(day_name="Workout C", focus="Glutes", duration="up to 60 minutes")

        day = await openai_client.regenerate_workout_day(current, WorkoutDuration.UP_TO_30_MIN)

        assert day.day_name == "Workout C"
        assert day.focus == "Glutes"
        user_prompt = mock_parse.call_args.kwargs["messages"][1]["content"]
        assert "up to 30 minutes" in user_prompt

    @pytest.mark.asyncio
    async def test_invalid_content_becomes_generation_error(
        self, openai_client: OpenAIPlanClient
    ) -> None:
        bad_day = _workout_day()
        bad_day.exercises[0].name = ""
        openai_client._client.beta.chat.completions.parse = AsyncMock(
            return_value=_response(bad_day)
        )
        current = WorkoutDay(day_name="Workout A", focus="Legs", duration="up to 45 minutes")

        with pytest.raises(PlanGenerationError) as exc_info:
            await openai_client.regenerate_workout_day(current)

        assert exc_info.value.operation == "regenerate_workout_day"


class TestCacheStats:
    @pytest.mark.asyncio
    async def test_hits_and_misses(self, openai_client: OpenAIPlanClient) -> None:
        request = MealRequest(meal_name="Snack", target_calories=150, preferences=DietPreferences())
        openai_client._client.beta.chat.completions.parse = AsyncMock(
            side_effect=[
                _response(_meal("Snack", 150), cached_tokens=800),
                _response(_meal("Snack", 150), cached_tokens=0),
            ]
        )

        await openai_client.regenerate_meal(request)
        await openai_client.regenerate_meal(request)

        assert openai_client.get_cache_stats() == {
            "hits": 1,
            "misses": 1,
            "hit_rate_percent": 50.0,
        }

    def test_empty_stats(self, openai_client: OpenAIPlanClient) -> None:
        assert openai_client.get_cache_stats()["hit_rate_percent"] == 0
