"""Diet plan entities - meals grouped into days."""

from dataclasses import dataclass, field, replace
from typing import List

from ..exceptions.domain_errors import InvalidPlanDataError


@dataclass(frozen=True)
class MacroBreakdown:
    """Macronutrients of a meal as free text (e.g. "30g")."""

    protein: str = ""
    carbs: str = ""
    fats: str = ""


@dataclass(frozen=True)
class DietMeal:
    """Single meal of a diet day.

    Attributes:
        name: Meal slot name (e.g. "Breakfast")
        description: Foods and quantities
        calories: Approximate energy in kcal (>= 0)
        macros: Protein/carbs/fats breakdown
    """

    name: str
    description: str
    calories: int
    macros: MacroBreakdown = field(default_factory=MacroBreakdown)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidPlanDataError("Meal name cannot be empty")
        if self.calories < 0:
            raise InvalidPlanDataError(f"Meal calories cannot be negative, got {self.calories}")


@dataclass(frozen=True)
class DietDay:
    """One day of a weekly diet plan.

    Attributes:
        day_name: Day label (e.g. "Monday" or "Day 1")
        total_calories: Day total as planned (kcal)
        meals: Meals in serving order
    """

    day_name: str
    total_calories: int
    meals: List[DietMeal] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.total_calories < 0:
            raise InvalidPlanDataError(
                f"Day calories cannot be negative, got {self.total_calories}"
            )

    def meals_calories(self) -> int:
        """Sum of the calories of the day's meals."""
        return sum(meal.calories for meal in self.meals)

    def with_meal(self, meal_index: int, meal: DietMeal) -> "DietDay":
        """Return a copy of the day with one meal replaced.

        The day total moves by the calorie difference between the old
        and the new meal.

        Raises:
            IndexError: If meal_index is out of range
        """
        if not 0 <= meal_index < len(self.meals):
            raise IndexError(f"Meal index {meal_index} out of range for {self.day_name}")

        old_meal = self.meals[meal_index]
        meals = list(self.meals)
        meals[meal_index] = meal
        total = max(0, self.total_calories - old_meal.calories + meal.calories)
        return replace(self, meals=meals, total_calories=total)
