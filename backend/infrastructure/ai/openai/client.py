"""OpenAI plan client - implements IPlanGenerator port.

Key Features:
- Structured outputs (native Pydantic support)
- Prompt caching metrics
- Circuit breaker (5 failures → 60s timeout)
- Retry logic (exponential backoff)
"""

# mypy: warn-unused-ignores=False

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from circuitbreaker import circuit
from openai import APIError, AsyncOpenAI
from pydantic import BaseModel
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.plan.core.entities.diet import DietDay, DietMeal, MacroBreakdown
from domain.plan.core.entities.workout import Exercise, WorkoutDay
from domain.plan.core.exceptions.domain_errors import (
    InvalidPlanDataError,
    PlanGenerationError,
)
from domain.plan.core.value_objects.plan_requests import (
    DietPlanRequest,
    MealRequest,
    WorkoutPlanRequest,
)
from domain.plan.core.value_objects.workout_duration import WorkoutDuration
from infrastructure.ai.openai.models import (
    DietDayModel,
    DietPlanResponse,
    MealModel,
    WorkoutDayModel,
    WorkoutPlanResponse,
)
from infrastructure.ai.prompts.plan_generation import (
    PLAN_SYSTEM_PROMPT,
    build_diet_plan_prompt,
    build_meal_prompt,
    build_workout_day_prompt,
    build_workout_plan_prompt,
)
from infrastructure.config import DEFAULT_PLAN_MODEL, DEFAULT_PLAN_TEMPERATURE

logger = logging.getLogger(__name__)

T = TypeVar("T")
TResponse = TypeVar("TResponse", bound=BaseModel)

_RETRYABLE = (TimeoutError, ConnectionError, APIError)


class OpenAIPlanClient:
    """
    OpenAI client implementing IPlanGenerator port.

    Follows Dependency Inversion Principle:
    - Domain defines IPlanGenerator interface (port)
    - Infrastructure provides OpenAIPlanClient implementation (adapter)

    Example:
        >>> client = OpenAIPlanClient(api_key="sk-...")
        >>> days = await client.generate_diet_plan(request)
        >>> print(f"Generated {len(days)} days")
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_PLAN_MODEL,
        temperature: float = DEFAULT_PLAN_TEMPERATURE,
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Model name (must support structured outputs)
            temperature: Sampling temperature (plans benefit from some variety)
        """
        self._client = AsyncOpenAI(api_key=api_key)
        self._model = model
        self._temperature = temperature
        self._cache_stats = {"hits": 0, "misses": 0}

    async def __aenter__(self) -> "OpenAIPlanClient":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self._client.close()

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_diet_plan")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(_RETRYABLE),
        reraise=True,
    )
    async def generate_diet_plan(self, request: DietPlanRequest) -> List[DietDay]:
        """
        Generate a 7-day diet plan.

        Implements IPlanGenerator.generate_diet_plan() port.

        Raises:
            APIError: On OpenAI API failures (after retries)
            PlanGenerationError: On empty or unusable responses
        """
        start_time = time.time()

        logger.info(
            "Generating diet plan",
            extra={
                "target_calories": request.stats.target_calories,
                "model": self._model,
            },
        )

        response = await self._structured_completion(
            operation="generate_diet_plan",
            prompt=build_diet_plan_prompt(request),
            response_model=DietPlanResponse,
        )
        if not response.days:
            raise PlanGenerationError("generate_diet_plan", "response contained no days")

        days = self._convert(
            "generate_diet_plan", lambda: [_to_diet_day(d) for d in response.days]
        )

        logger.info(
            "Diet plan generated",
            extra={
                "day_count": len(days),
                "processing_time_ms": int((time.time() - start_time) * 1000),
            },
        )
        return days

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_meal")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(_RETRYABLE),
        reraise=True,
    )
    async def regenerate_meal(self, request: MealRequest) -> DietMeal:
        """
        Generate a substitute meal.

        The original meal name is kept even if the model renames it.

        Raises:
            APIError: On OpenAI API failures (after retries)
            PlanGenerationError: On empty or unusable responses
        """
        logger.info(
            "Regenerating meal",
            extra={
                "meal_name": request.meal_name,
                "target_calories": request.target_calories,
                "model": self._model,
            },
        )

        response = await self._structured_completion(
            operation="regenerate_meal",
            prompt=build_meal_prompt(request),
            response_model=MealModel,
        )
        return self._convert(
            "regenerate_meal", lambda: _to_diet_meal(response, name=request.meal_name)
        )

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_workout_plan")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(_RETRYABLE),
        reraise=True,
    )
    async def generate_workout_plan(self, request: WorkoutPlanRequest) -> List[WorkoutDay]:
        """
        Generate a workout plan.

        Raises:
            APIError: On OpenAI API failures (after retries)
            PlanGenerationError: On empty or unusable responses
        """
        start_time = time.time()

        logger.info(
            "Generating workout plan",
            extra={
                "workout_days": request.preferences.workout_days,
                "workout_duration": request.preferences.workout_duration.value,
                "model": self._model,
            },
        )

        response = await self._structured_completion(
            operation="generate_workout_plan",
            prompt=build_workout_plan_prompt(request),
            response_model=WorkoutPlanResponse,
        )
        if not response.sessions:
            raise PlanGenerationError("generate_workout_plan", "response contained no sessions")

        sessions = self._convert(
            "generate_workout_plan", lambda: [_to_workout_day(s) for s in response.sessions]
        )

        if len(sessions) != request.preferences.workout_days:
            logger.warning(
                "Workout session count differs from requested days",
                extra={
                    "requested": request.preferences.workout_days,
                    "received": len(sessions),
                },
            )

        logger.info(
            "Workout plan generated",
            extra={
                "session_count": len(sessions),
                "processing_time_ms": int((time.time() - start_time) * 1000),
            },
        )
        return sessions

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_workout_day")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(_RETRYABLE),
        reraise=True,
    )
    async def regenerate_workout_day(
        self,
        current_day: WorkoutDay,
        new_duration: Optional[WorkoutDuration] = None,
    ) -> WorkoutDay:
        """
        Generate a new exercise sequence for one session.

        Day name and focus are taken from current_day.

        Raises:
            APIError: On OpenAI API failures (after retries)
            PlanGenerationError: On empty or unusable responses
        """
        logger.info(
            "Regenerating workout day",
            extra={
                "day_name": current_day.day_name,
                "new_duration": new_duration.value if new_duration else None,
                "model": self._model,
            },
        )

        response = await self._structured_completion(
            operation="regenerate_workout_day",
            prompt=build_workout_day_prompt(current_day, new_duration),
            response_model=WorkoutDayModel,
        )
        return self._convert(
            "regenerate_workout_day",
            lambda: _to_workout_day(
                response, day_name=current_day.day_name, focus=current_day.focus
            ),
        )

    async def _structured_completion(
        self,
        operation: str,
        prompt: str,
        response_model: Type[TResponse],
    ) -> TResponse:
        """
        Execute OpenAI completion with structured output.

        Uses beta.chat.completions.parse() for native Pydantic support.

        Raises:
            APIError: On API failures
            PlanGenerationError: If the parsed response is empty
        """
        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": PLAN_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

        logger.debug(
            "Calling OpenAI structured completion",
            extra={
                "model": self._model,
                "response_model": response_model.__name__,
                "operation": operation,
            },
        )

        response = await self._client.beta.chat.completions.parse(
            model=self._model,
            messages=messages,  # type: ignore[arg-type]
            response_format=response_model,
            temperature=self._temperature,
        )

        usage = response.usage
        if usage is not None:
            self._track_cache(usage)
            logger.info(
                "OpenAI response received",
                extra={
                    "model": self._model,
                    "operation": operation,
                    "total_tokens": usage.total_tokens,
                    "prompt_tokens": usage.prompt_tokens,
                    "completion_tokens": usage.completion_tokens,
                },
            )

        if not response.choices:
            raise PlanGenerationError(operation, "OpenAI returned no choices")

        parsed = response.choices[0].message.parsed
        if parsed is None:
            raise PlanGenerationError(operation, "OpenAI returned empty parsed response")

        return parsed

    def _track_cache(self, usage: Any) -> None:
        details = getattr(usage, "prompt_tokens_details", None)
        cached = getattr(details, "cached_tokens", None) if details else None
        if not isinstance(cached, int):
            return
        if cached > 0:
            self._cache_stats["hits"] += 1
            logger.info("OpenAI cache hit", extra={"cached_tokens": cached})
        else:
            self._cache_stats["misses"] += 1

    @staticmethod
    def _convert(operation: str, build: Callable[[], T]) -> T:
        """Run a response-to-domain mapping, reporting bad content as PlanGenerationError."""
        try:
            return build()
        except InvalidPlanDataError as e:
            raise PlanGenerationError(operation, str(e)) from e

    def get_cache_stats(self) -> dict[str, Any]:
        """
        Get cache performance statistics.

        Returns:
            Dictionary with cache hits, misses, and hit rate
        """
        total = self._cache_stats["hits"] + self._cache_stats["misses"]
        hit_rate = (self._cache_stats["hits"] / total * 100) if total > 0 else 0

        return {
            **self._cache_stats,
            "hit_rate_percent": round(hit_rate, 2),
        }


def _to_diet_meal(model: MealModel, name: Optional[str] = None) -> DietMeal:
    return DietMeal(
        name=name or model.name,
        description=model.description,
        calories=model.calories,
        macros=MacroBreakdown(
            protein=model.macros.protein,
            carbs=model.macros.carbs,
            fats=model.macros.fats,
        ),
    )


def _to_diet_day(model: DietDayModel) -> DietDay:
    return DietDay(
        day_name=model.day_name,
        total_calories=model.total_calories,
        meals=[_to_diet_meal(meal) for meal in model.meals],
    )


def _to_workout_day(
    model: WorkoutDayModel,
    day_name: Optional[str] = None,
    focus: Optional[str] = None,
) -> WorkoutDay:
    return WorkoutDay(
        day_name=day_name or model.day_name,
        focus=focus or model.focus,
        duration=model.duration,
        cardio=model.cardio,
        exercises=[
            Exercise(
                name=exercise.name,
                sets=exercise.sets,
                reps=exercise.reps,
                rest=exercise.rest,
                notes=exercise.notes,
            )
            for exercise in model.exercises
        ],
    )
