"""REST endpoints and root GraphQL fields."""

from typing import Any

import pytest
from httpx import AsyncClient

import app as app_module
from domain.fitness_profile.core.events import (
    FitnessProfileCreated,
    FitnessProfileUpdated,
    PlanGenerated,
    PlanItemRegenerated,
)
from infrastructure.persistence.in_memory import InMemoryFitnessProfileRepository
from infrastructure.plan.providers.stub_plan_generator import StubPlanGenerator


class _ClosingPlanGenerator(StubPlanGenerator):
    def __init__(self) -> None:
        super().__init__()
        self.open_count = 0
        self.close_count = 0

    async def __aenter__(self) -> "_ClosingPlanGenerator":
        self.open_count += 1
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close_count += 1


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    response = await client.get("/version")

    assert response.status_code == 200
    assert response.json() == {"version": app_module.APP_VERSION}


@pytest.mark.asyncio
async def test_graphql_root_fields(client: AsyncClient) -> None:
    response = await client.post("/graphql", json={"query": "{ health serverTime }"})

    data = response.json()["data"]
    assert data["health"] == "ok"
    assert data["serverTime"].endswith("+00:00")


def test_domain_events_are_logged() -> None:
    for event_type in (
        FitnessProfileCreated,
        FitnessProfileUpdated,
        PlanGenerated,
        PlanItemRegenerated,
    ):
        assert app_module._event_bus.get_handler_count(event_type) == 1


@pytest.mark.asyncio
async def test_lifespan_closes_the_shared_plan_generator(monkeypatch: pytest.MonkeyPatch) -> None:
    generator = _ClosingPlanGenerator()
    orchestrator = app_module._plan_orchestrator
    monkeypatch.setattr(app_module, "_plan_generator", generator)
    monkeypatch.setattr(app_module, "_profile_repository", InMemoryFitnessProfileRepository())

    async with app_module.lifespan(app_module.app):
        assert generator.open_count == 1
        assert app_module._plan_orchestrator is orchestrator

    assert generator.close_count == 1
    assert app_module._plan_orchestrator is orchestrator
