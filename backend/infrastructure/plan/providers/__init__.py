"""Plan generator providers (OpenAI and stub)."""

from infrastructure.plan.providers.factory import (
    create_plan_generator,
    get_plan_generator,
    reset_plan_generator,
)
from infrastructure.plan.providers.stub_plan_generator import StubPlanGenerator

__all__ = [
    "StubPlanGenerator",
    "create_plan_generator",
    "get_plan_generator",
    "reset_plan_generator",
]
