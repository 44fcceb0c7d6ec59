"""FitnessProfileUpdated domain event."""

from dataclasses import dataclass
from typing import List, Tuple
from uuid import UUID

from .base import DomainEvent


@dataclass(frozen=True)
class FitnessProfileUpdated(DomainEvent):
    """Event emitted when profile inputs change.

    Tracks which fields were updated (e.g., biometrics, deficit,
    preferences) and the resulting calorie target.

    Attributes:
        profile_id: ID of updated profile
        user_id: User the profile belongs to
        updated_fields: Names of the fields that changed
        target_calories: Calorie target after the update
    """

    profile_id: UUID
    user_id: str
    updated_fields: Tuple[str, ...]
    target_calories: int

    @staticmethod
    def create(
        profile_id: UUID,
        user_id: str,
        updated_fields: List[str],
        target_calories: int,
    ) -> "FitnessProfileUpdated":
        """Factory method to create event."""
        return FitnessProfileUpdated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            profile_id=profile_id,
            user_id=user_id,
            updated_fields=tuple(updated_fields),
            target_calories=target_calories,
        )
