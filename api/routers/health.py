"""
Health check endpoint.

This is the first thing you hit to verify the system is running.
There is no database or broker behind the spooler, so "healthy" just means
the app started and the engine is attached.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_engine
from scheduler.engine import SpoolerEngine

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    engine: SpoolerEngine = Depends(get_engine),
) -> dict:
    """Report liveness plus how full the print queue is."""
    return {
        "status": "healthy",
        "jobs": len(engine.repository),
        "capacity": engine.repository.capacity,
    }
