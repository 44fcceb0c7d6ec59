"""Domain events for fitness profile."""

from .base import DomainEvent
from .plan_events import PlanGenerated, PlanItemRegenerated
from .profile_created import FitnessProfileCreated
from .profile_updated import FitnessProfileUpdated

__all__ = [
    "DomainEvent",
    "FitnessProfileCreated",
    "FitnessProfileUpdated",
    "PlanGenerated",
    "PlanItemRegenerated",
]
