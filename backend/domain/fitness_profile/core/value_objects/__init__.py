"""Value objects for the fitness profile domain."""

from .health_screening import HealthScreening
from .profile_id import ProfileId

__all__ = [
    "HealthScreening",
    "ProfileId",
]
