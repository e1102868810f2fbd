"""
FastAPI dependency injection.

How this works:
- An endpoint declares `engine: SpoolerEngine = Depends(get_engine)`
- FastAPI calls get_engine() before your endpoint runs
- Your endpoint receives the engine stored on the app at startup

Tests swap the engine out with `app.dependency_overrides[get_engine]`,
so each test gets a fresh, empty print queue.
"""

from fastapi import Request

from scheduler.engine import SpoolerEngine


async def get_engine(request: Request) -> SpoolerEngine:
    """Returns the SpoolerEngine stored on the app during startup."""
    return request.app.state.engine
