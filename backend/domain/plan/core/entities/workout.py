"""Workout plan entities - exercises grouped into training days."""

from dataclasses import dataclass, field, replace
from typing import List

from ..exceptions.domain_errors import InvalidPlanDataError


@dataclass(frozen=True)
class Exercise:
    """Single exercise prescription."""

    name: str
    sets: int
    reps: str
    rest: str = ""
    notes: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidPlanDataError("Exercise name cannot be empty")
        if self.sets < 0:
            raise InvalidPlanDataError(f"Sets cannot be negative, got {self.sets}")


@dataclass(frozen=True)
class WorkoutDay:
    """One training session of a workout plan.

    Attributes:
        day_name: Session label (e.g. "Workout A")
        focus: Muscle focus (e.g. "Legs and glutes")
        duration: Planned session length as text (e.g. "45 min")
        exercises: Strength exercises in order
        cardio: Cardio instructions for the session
    """

    day_name: str
    focus: str
    duration: str
    exercises: List[Exercise] = field(default_factory=list)
    cardio: str = ""

    def with_duration(self, duration: str) -> "WorkoutDay":
        """Return a copy with a different planned duration."""
        return replace(self, duration=duration)
