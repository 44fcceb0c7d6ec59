"""Provider Factory for plan generation.

Environment-based provider selection with graceful fallback to the stub.
Strategy:
- .env (runtime): PLAN_PROVIDER=openai
- .env.test (pytest): PLAN_PROVIDER=stub
- Default: stub (safe fallback if env vars not set)

Usage:
    from infrastructure.plan.providers.factory import get_plan_generator

    generator = get_plan_generator()  # Returns stub or OpenAI based on env
"""

import os
from typing import Optional

from domain.plan.core.ports.plan_generator import IPlanGenerator
from infrastructure.ai.openai.client import OpenAIPlanClient
from infrastructure.config import get_plan_model, get_plan_temperature
from infrastructure.plan.providers.stub_plan_generator import StubPlanGenerator


def create_plan_generator() -> IPlanGenerator:
    """Create plan generator based on PLAN_PROVIDER env var.

    Environment variable: PLAN_PROVIDER
    Values:
        - "openai": OpenAI structured outputs (requires OPENAI_API_KEY)
        - "stub": Stub provider (default)

    Raises:
        ValueError: If PLAN_PROVIDER=openai and OPENAI_API_KEY is not set

    Example:
        # In .env (production):
        PLAN_PROVIDER=openai
        OPENAI_API_KEY=sk-...
        OPENAI_PLAN_MODEL=gpt-4o-2024-08-06
    """
    mode = os.getenv("PLAN_PROVIDER", "stub").lower()

    if mode == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError(
                "PLAN_PROVIDER=openai but OPENAI_API_KEY not set. "
                "Set OPENAI_API_KEY in .env or use PLAN_PROVIDER=stub"
            )
        return OpenAIPlanClient(
            api_key=api_key,
            model=get_plan_model(),
            temperature=get_plan_temperature(),
        )

    return StubPlanGenerator()


_plan_generator: Optional[IPlanGenerator] = None


def get_plan_generator() -> IPlanGenerator:
    """Get singleton plan generator instance."""
    global _plan_generator
    if _plan_generator is None:
        _plan_generator = create_plan_generator()
    return _plan_generator


def reset_plan_generator() -> None:
    """Reset singleton instance.

    Useful for testing to force re-creation with different env vars.
    """
    global _plan_generator
    _plan_generator = None
