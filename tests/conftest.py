"""
Shared test fixtures.

The spooler keeps everything in memory, so there is no infrastructure to
fake. The only trick is the HTTP client:
- HTTP server → httpx.AsyncClient with ASGI transport (no network)
- app.state.engine → a fresh SpoolerEngine per test via dependency_overrides

This means tests:
- Run in milliseconds (no network, no disk)
- Are fully isolated (each test gets an empty print queue)
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import create_app
from api.dependencies import get_engine
from models.repository import JobRepository
from scheduler.engine import SpoolerEngine

# Small enough that capacity tests only need a handful of submissions
TEST_CAPACITY = 5


@pytest.fixture
def engine():
    """A SpoolerEngine over an empty queue with TEST_CAPACITY slots."""
    return SpoolerEngine(JobRepository(capacity=TEST_CAPACITY))


@pytest.fixture
def seeded_engine(engine):
    """The three-job example: ids 1, 2, 3 with sizes 10, 5, 20 and priorities 2, 1, 3."""
    engine.submit_job(10, 2)
    engine.submit_job(5, 1)
    engine.submit_job(20, 3)
    return engine


@pytest_asyncio.fixture
async def client(engine):
    """
    Create a test HTTP client that talks directly to the FastAPI app.

    dependency_overrides tells FastAPI: "instead of the engine created in
    lifespan, use this one". ASGITransport doesn't run lifespan, so without
    the override app.state.engine wouldn't exist.
    """
    app = create_app()

    async def override_get_engine():
        return engine

    app.dependency_overrides[get_engine] = override_get_engine

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
