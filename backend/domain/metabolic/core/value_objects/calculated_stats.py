"""CalculatedStats value object - output of the metabolic calculation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CalculatedStats:
    """Daily energy figures derived from a biometric profile.

    Recomputed whenever the profile or the deficit intensity changes;
    it has no identity of its own.

    Attributes:
        bmr: Basal metabolic rate (kcal/day)
        tdee: Total daily energy expenditure (kcal/day)
        target_calories: Daily intake target under the chosen deficit
        weeks_to_goal: Estimated weeks to reach the weight loss target
    """

    bmr: int
    tdee: int
    target_calories: int
    weeks_to_goal: int

    def __post_init__(self) -> None:
        if self.weeks_to_goal < 0:
            raise ValueError(f"weeks_to_goal must be non-negative, got {self.weeks_to_goal}")

    @property
    def daily_deficit(self) -> int:
        """Calories below TDEE per day."""
        return self.tdee - self.target_calories

    @property
    def weekly_deficit(self) -> int:
        """Calories below TDEE per week."""
        return self.daily_deficit * 7

    def __str__(self) -> str:
        return (
            f"BMR {self.bmr} / TDEE {self.tdee} / target {self.target_calories} kcal "
            f"({self.weeks_to_goal} weeks)"
        )
