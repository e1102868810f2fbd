"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (create the print queue + engine)
3. Registers all routers (jobs, simulations, health)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.
It replaces the older @app.on_event("startup") pattern.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
   or:  python -m api.main   (host/port from settings)

Nothing is persisted: restarting the server empties the queue.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from models.repository import JobRepository
from scheduler.engine import SpoolerEngine
from api.routers import jobs, simulations, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs on startup (before yield) and shutdown (after yield).

    Startup:
    - Creates an empty print queue with the configured capacity
    - Wraps it in a SpoolerEngine that every request shares
    """
    # ── Startup ─────────────────────────────────────────────────
    app.state.engine = SpoolerEngine(JobRepository(capacity=settings.MAX_JOBS))
    logger.info(f"API ready — queue capacity: {settings.MAX_JOBS}")

    yield  # app is running and serving requests between startup and shutdown

    # ── Shutdown ────────────────────────────────────────────────
    queued = len(app.state.engine.repository)
    logger.info(f"API shut down, discarding {queued} queued jobs")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Print Spooler Simulator",
        description="Compare FCFS, SJF and Priority scheduling over a print queue",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Register routers — each one adds its endpoints to the app
    app.include_router(health.router)
    app.include_router(jobs.router)
    app.include_router(simulations.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
