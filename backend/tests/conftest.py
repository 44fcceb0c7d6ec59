"""Integration/E2E test fixtures.

This conftest loads the full app and is used for integration/e2e tests.
Unit tests in tests/unit/ build their own objects and never touch the
app singletons.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv

# Load .env.test (overrides .env values) before the app reads its config
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

# Tests never call OpenAI or a real database unless asked to explicitly
os.environ.setdefault("PLAN_PROVIDER", "stub")
os.environ.setdefault("REPOSITORY_BACKEND", "inmemory")

from httpx import ASGITransport, AsyncClient  # noqa: E402

import app as app_module  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_profiles() -> Generator[None, None, None]:
    """Empty the in-memory profile store around each test."""
    repository = app_module._profile_repository
    clear = getattr(repository, "clear", None)
    if clear is not None:
        clear()
    yield
    if clear is not None:
        clear()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a dummy
    base_url so relative requests resolve.
    """
    transport = ASGITransport(app=cast(Any, app_module.app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
