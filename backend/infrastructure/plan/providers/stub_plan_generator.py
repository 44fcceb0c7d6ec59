"""Stub plan generator for testing.

Returns deterministic plans without calling external APIs.
Useful for integration/E2E tests and local development.
"""

from typing import List, Optional, Tuple

from domain.plan.core.entities.diet import DietDay, DietMeal, MacroBreakdown
from domain.plan.core.entities.workout import Exercise, WorkoutDay
from domain.plan.core.value_objects.muscle_group import MuscleGroup
from domain.plan.core.value_objects.plan_requests import (
    DietPlanRequest,
    MealRequest,
    WorkoutPlanRequest,
)
from domain.plan.core.value_objects.workout_duration import WorkoutDuration

WEEK_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Meal slot name and share of the daily target
MEAL_SLOTS: Tuple[Tuple[str, float], ...] = (
    ("Breakfast", 0.25),
    ("Lunch", 0.35),
    ("Snack", 0.10),
    ("Dinner", 0.30),
)

_EXERCISES = {
    MuscleGroup.CHEST: ("Push-up", "Dumbbell bench press"),
    MuscleGroup.BACK: ("Dumbbell row", "Lat pulldown"),
    MuscleGroup.QUADRICEPS: ("Goblet squat", "Walking lunge"),
    MuscleGroup.HAMSTRINGS: ("Romanian deadlift", "Leg curl"),
    MuscleGroup.GLUTES: ("Hip thrust", "Glute bridge"),
    MuscleGroup.SHOULDERS: ("Overhead press", "Lateral raise"),
    MuscleGroup.BICEPS: ("Dumbbell curl", "Hammer curl"),
    MuscleGroup.TRICEPS: ("Triceps dip", "Overhead triceps extension"),
    MuscleGroup.ABS: ("Plank", "Dead bug"),
    MuscleGroup.INTENSE_CARDIO: ("Burpee", "Mountain climber"),
}


class StubPlanGenerator:
    """
    Stub implementation of IPlanGenerator for testing.

    Diet days split the calorie target over fixed meal slots so each day
    adds up to the target. Workout sessions rotate over the target muscles.
    Supports async context manager protocol for lifespan compatibility.
    """

    def __init__(self) -> None:
        self._variant = 0

    async def __aenter__(self) -> "StubPlanGenerator":
        """Enter async context (no-op for stub)."""
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Exit async context (no-op for stub)."""
        return None

    async def generate_diet_plan(self, request: DietPlanRequest) -> List[DietDay]:
        target = request.stats.target_calories
        foods = request.preferences.describe()
        days = []
        for day_name in WEEK_DAYS:
            meals = _split_meals(target, foods)
            days.append(DietDay(day_name=day_name, total_calories=target, meals=meals))
        return days

    async def regenerate_meal(self, request: MealRequest) -> DietMeal:
        self._variant += 1
        return _meal(
            request.meal_name,
            request.target_calories,
            f"Alternative #{self._variant} with {request.preferences.describe()}",
        )

    async def generate_workout_plan(self, request: WorkoutPlanRequest) -> List[WorkoutDay]:
        preferences = request.preferences
        muscles = preferences.target_muscles or tuple(MuscleGroup)
        sessions = []
        for index in range(preferences.workout_days):
            focus = muscles[index % len(muscles)]
            sessions.append(
                WorkoutDay(
                    day_name=f"Workout {chr(ord('A') + index)}",
                    focus=focus.label().capitalize(),
                    duration=preferences.workout_duration.label(),
                    exercises=_exercises_for(focus, preferences.workout_duration),
                    cardio=_cardio_for(preferences.workout_duration),
                )
            )
        return sessions

    async def regenerate_workout_day(
        self,
        current_day: WorkoutDay,
        new_duration: Optional[WorkoutDuration] = None,
    ) -> WorkoutDay:
        self._variant += 1
        exercises = [
            Exercise(
                name=f"{exercise.name} (variation {self._variant})",
                sets=exercise.sets,
                reps=exercise.reps,
                rest=exercise.rest,
                notes=exercise.notes,
            )
            for exercise in current_day.exercises
        ] or [Exercise(name="Circuit training", sets=3, reps="12", rest="45s")]
        return WorkoutDay(
            day_name=current_day.day_name,
            focus=current_day.focus,
            duration=new_duration.label() if new_duration else current_day.duration,
            exercises=exercises,
            cardio=_cardio_for(new_duration) if new_duration else current_day.cardio,
        )


def _meal(name: str, calories: int, description: str) -> DietMeal:
    # 30% protein, 45% carbs, 25% fats
    return DietMeal(
        name=name,
        description=description,
        calories=calories,
        macros=MacroBreakdown(
            protein=f"{round(calories * 0.30 / 4)}g",
            carbs=f"{round(calories * 0.45 / 4)}g",
            fats=f"{round(calories * 0.25 / 9)}g",
        ),
    )


def _split_meals(target: int, foods: str) -> List[DietMeal]:
    meals = []
    remaining = target
    for index, (slot, share) in enumerate(MEAL_SLOTS):
        last = index == len(MEAL_SLOTS) - 1
        calories = remaining if last else int(target * share)
        remaining -= calories
        meals.append(_meal(slot, calories, f"{slot} with {foods}"))
    return meals


def _exercises_for(focus: MuscleGroup, duration: WorkoutDuration) -> List[Exercise]:
    sets = 3 if duration.minutes() <= 45 else 4
    return [
        Exercise(name=name, sets=sets, reps="10-12", rest="60s")
        for name in _EXERCISES[focus]
    ]


def _cardio_for(duration: WorkoutDuration) -> str:
    minutes = max(10, duration.minutes() // 4)
    return f"{minutes} min moderate cardio"
