"""MuscleGroup value object - training focus selectable by the user."""

from enum import Enum


class MuscleGroup(str, Enum):
    """Muscle groups (and intense cardio) a workout plan can target."""

    CHEST = "chest"
    BACK = "back"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    ABS = "abs"
    INTENSE_CARDIO = "intense_cardio"

    def label(self) -> str:
        return self.value.replace("_", " ")
