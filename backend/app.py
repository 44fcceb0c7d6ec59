from __future__ import annotations

# Standard library
import os
import datetime
import logging as _logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Final, Any

# Third-party
import strawberry
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Environment must be loaded before the factories below read it
load_dotenv(Path(__file__).parent / ".env")

# Local application imports
from api.context import create_context  # noqa: E402
from api.resolvers.fitness_profile import (  # noqa: E402
    FitnessProfileMutations,
    FitnessProfileQueries,
)
from api.resolvers.metabolic import MetabolicQueries  # noqa: E402
from api.schema import create_schema  # noqa: E402
from application.fitness_profile.orchestrators.plan_orchestrator import (  # noqa: E402
    PlanOrchestrator,
)
from domain.fitness_profile.core.events import (  # noqa: E402
    DomainEvent,
    FitnessProfileCreated,
    FitnessProfileUpdated,
    PlanGenerated,
    PlanItemRegenerated,
)
from domain.metabolic.calculation.metabolic_calculator import MetabolicCalculator  # noqa: E402
from infrastructure.events.in_memory_bus import InMemoryEventBus  # noqa: E402
from infrastructure.persistence.fitness_profile_factory import (  # noqa: E402
    get_fitness_profile_repository,
)
from infrastructure.plan.providers.factory import get_plan_generator  # noqa: E402

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

_startup_logger = _logging.getLogger("startup")
if _startup_logger.level == 0:  # not set explicitly
    _startup_logger.setLevel(getattr(_logging, _LOG_LEVEL, _logging.INFO))

# Version from env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.now(datetime.timezone.utc).isoformat()

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Metabolic calculator queries")  # type: ignore[misc]
    def metabolic(self) -> MetabolicQueries:
        """Stateless calorie calculations.

        Example:
            query {
              metabolic {
                computeStats(input: {...}, deficit: MODERATE) { targetCalories }
              }
            }
        """
        return MetabolicQueries()

    @strawberry.field(description="Fitness profile queries")  # type: ignore[misc]
    def fitness_profile(self) -> FitnessProfileQueries:
        """Fitness profile queries (CQRS).

        Example:
            query {
              fitnessProfile {
                profile(userId: "user123") { stats { targetCalories } }
              }
            }
        """
        return FitnessProfileQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Fitness profile mutations")  # type: ignore[misc]
    def fitness_profile(self) -> FitnessProfileMutations:
        """Fitness profile mutations (CQRS).

        Example:
            mutation {
              fitnessProfile {
                changeDeficit(userId: "user123", deficit: LIGHT) {
                  stats { targetCalories }
                }
              }
            }
        """
        return FitnessProfileMutations()


schema = create_schema()

# Explicit export per mypy/tests
__all__: list[str] = []


# ============================================
# Singletons (shared across requests)
# ============================================
# - REPOSITORY_BACKEND: "inmemory" (default) | "mongodb"
# - PLAN_PROVIDER: "stub" (default) | "openai"
_profile_repository = get_fitness_profile_repository()
_event_bus = InMemoryEventBus()
_event_logger = _logging.getLogger("events")
_calculator = MetabolicCalculator()
_plan_generator = get_plan_generator()
_plan_orchestrator = PlanOrchestrator(calculator=_calculator, plan_generator=_plan_generator)


async def _log_domain_event(event: DomainEvent) -> None:
    _event_logger.info(
        type(event).__name__,
        extra={"event_id": str(event.event_id), "user_id": getattr(event, "user_id", None)},
    )


for _event_type in (
    FitnessProfileCreated,
    FitnessProfileUpdated,
    PlanGenerated,
    PlanItemRegenerated,
):
    _event_bus.subscribe(_event_type, _log_domain_event)


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:
    """Application lifecycle manager.

    Startup: logs configuration and enters the shared plan generator, the
    same instance the orchestrator already holds.
    Shutdown: the generator context closes its HTTP session and the
    MongoDB client (if any) is closed.
    """
    logger = _logging.getLogger("startup")

    api_key = os.getenv("OPENAI_API_KEY")
    masked_key = None
    if api_key:
        if len(api_key) > 8:
            masked_key = api_key[:4] + "..." + api_key[-4:]
        else:
            masked_key = "***"

    logger.info(
        "startup.config",
        extra={
            "openai_key_present": bool(api_key),
            "openai_key_masked": masked_key,
            "plan_provider": os.getenv("PLAN_PROVIDER", "stub"),
            "repository_backend": os.getenv("REPOSITORY_BACKEND", "inmemory"),
            "version": APP_VERSION,
        },
    )

    async with _plan_generator as initialized_generator:  # type: ignore[attr-defined]
        logger.info(
            "lifespan.clients_ready",
            extra={"plan_generator": type(initialized_generator).__name__},
        )

        logger.info("lifespan.ready", extra={"status": "serving"})
        yield

        logger.info("lifespan.shutdown", extra={"status": "cleanup"})
        close = getattr(_profile_repository, "close", None)
        if close is not None:
            await close()


app = FastAPI(
    title="FitPlan Backend",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


def get_graphql_context(request: Request) -> Any:
    """Create GraphQL context with all dependencies.

    Singletons are read at request time so tests can swap them.
    """
    return create_context(
        profile_repository=_profile_repository,
        event_bus=_event_bus,
        plan_orchestrator=_plan_orchestrator,
        calculator=_calculator,
        request=request,
    )


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
