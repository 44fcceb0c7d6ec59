"""FitnessProfileCreated domain event."""

from dataclasses import dataclass
from uuid import UUID

from .base import DomainEvent


@dataclass(frozen=True)
class FitnessProfileCreated(DomainEvent):
    """Event emitted when a fitness profile is created.

    Attributes:
        profile_id: ID of created profile
        user_id: User the profile belongs to
        deficit: Selected deficit intensity
        bmr: Calculated BMR
        tdee: Calculated TDEE
        target_calories: Daily calorie target
        weeks_to_goal: Estimated weeks to reach the target loss
    """

    profile_id: UUID
    user_id: str
    deficit: str
    bmr: int
    tdee: int
    target_calories: int
    weeks_to_goal: int

    @staticmethod
    def create(
        profile_id: UUID,
        user_id: str,
        deficit: str,
        bmr: int,
        tdee: int,
        target_calories: int,
        weeks_to_goal: int,
    ) -> "FitnessProfileCreated":
        """Factory method to create event."""
        return FitnessProfileCreated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            profile_id=profile_id,
            user_id=user_id,
            deficit=deficit,
            bmr=bmr,
            tdee=tdee,
            target_calories=target_calories,
            weeks_to_goal=weeks_to_goal,
        )
