"""WorkoutDuration value object - available time per session."""

from enum import Enum


class WorkoutDuration(str, Enum):
    """Maximum time the user can spend on one workout."""

    UP_TO_30_MIN = "30min"
    UP_TO_45_MIN = "45min"
    UP_TO_1_HOUR = "1h"
    UP_TO_90_MIN = "1h30"
    UP_TO_2_HOURS = "2h"

    def minutes(self) -> int:
        """Upper bound of the session in minutes.

        Example:
            >>> WorkoutDuration.UP_TO_90_MIN.minutes()
            90
        """
        minutes = {
            WorkoutDuration.UP_TO_30_MIN: 30,
            WorkoutDuration.UP_TO_45_MIN: 45,
            WorkoutDuration.UP_TO_1_HOUR: 60,
            WorkoutDuration.UP_TO_90_MIN: 90,
            WorkoutDuration.UP_TO_2_HOURS: 120,
        }
        return minutes[self]

    def label(self) -> str:
        """Human-readable label used in prompts and UIs."""
        return f"up to {self.minutes()} minutes"
