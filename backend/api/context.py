"""GraphQL context factory for dependency injection.

Provides all required dependencies for GraphQL resolvers:
- Repository (fitness profile storage)
- Event bus (domain events)
- Orchestrator (stats calculation and plan generation)
- Calculator (stateless stats preview)
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from application.fitness_profile.orchestrators.plan_orchestrator import PlanOrchestrator
from domain.fitness_profile.core.ports.repository import IFitnessProfileRepository
from domain.metabolic.calculation.metabolic_calculator import MetabolicCalculator
from domain.shared.ports.event_bus import IEventBus


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    This context is injected into all GraphQL resolvers via the
    `info` parameter. Resolvers access dependencies using
    `info.context.get("service_name")`.

    Attributes:
        profile_repository: Repository for fitness profile persistence
        event_bus: Event bus for domain events
        plan_orchestrator: Orchestrator for stats and plan generation
        calculator: Metabolic calculator for previews
        request: FastAPI request object
    """

    def __init__(
        self,
        profile_repository: IFitnessProfileRepository,
        event_bus: IEventBus,
        plan_orchestrator: PlanOrchestrator,
        calculator: MetabolicCalculator,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.profile_repository = profile_repository
        self.event_bus = event_bus
        self.plan_orchestrator = plan_orchestrator
        self.calculator = calculator
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name (None if not found).

        Example:
            >>> repository = info.context.get("profile_repository")
        """
        return getattr(self, key, None)


def create_context(
    profile_repository: IFitnessProfileRepository,
    event_bus: IEventBus,
    plan_orchestrator: PlanOrchestrator,
    calculator: Optional[MetabolicCalculator] = None,
    request: Optional[Request] = None,
) -> GraphQLContext:
    """Create GraphQL context with all dependencies.

    Example:
        >>> context = create_context(
        ...     profile_repository=InMemoryFitnessProfileRepository(),
        ...     event_bus=InMemoryEventBus(),
        ...     plan_orchestrator=PlanOrchestrator(calculator, StubPlanGenerator()),
        ... )
    """
    return GraphQLContext(
        profile_repository=profile_repository,
        event_bus=event_bus,
        plan_orchestrator=plan_orchestrator,
        calculator=calculator or MetabolicCalculator(),
        request=request,
    )
