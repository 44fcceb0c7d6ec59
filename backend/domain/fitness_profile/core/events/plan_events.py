"""Plan-related domain events."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .base import DomainEvent

DIET_PLAN = "diet"
WORKOUT_PLAN = "workout"


@dataclass(frozen=True)
class PlanGenerated(DomainEvent):
    """Event emitted when a whole diet or workout plan is (re)generated.

    Attributes:
        profile_id: Profile owning the plan
        user_id: User the profile belongs to
        plan_type: "diet" or "workout"
        day_count: Number of days in the new plan
    """

    profile_id: UUID
    user_id: str
    plan_type: str
    day_count: int

    @staticmethod
    def create(profile_id: UUID, user_id: str, plan_type: str, day_count: int) -> "PlanGenerated":
        return PlanGenerated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            profile_id=profile_id,
            user_id=user_id,
            plan_type=plan_type,
            day_count=day_count,
        )


@dataclass(frozen=True)
class PlanItemRegenerated(DomainEvent):
    """Event emitted when a single meal or workout day is replaced.

    Attributes:
        profile_id: Profile owning the plan
        user_id: User the profile belongs to
        plan_type: "diet" or "workout"
        day_index: Day of the plan that changed
        item_index: Meal index for diet plans, None for workout days
    """

    profile_id: UUID
    user_id: str
    plan_type: str
    day_index: int
    item_index: Optional[int] = None

    @staticmethod
    def create(
        profile_id: UUID,
        user_id: str,
        plan_type: str,
        day_index: int,
        item_index: Optional[int] = None,
    ) -> "PlanItemRegenerated":
        return PlanItemRegenerated(
            event_id=DomainEvent._generate_event_id(),
            occurred_at=DomainEvent._now(),
            profile_id=profile_id,
            user_id=user_id,
            plan_type=plan_type,
            day_index=day_index,
            item_index=item_index,
        )
