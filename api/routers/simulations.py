"""
Simulation endpoints.

GET /simulations/compare   → Run every policy on the same queue, side by side
GET /simulations/{policy}  → Run one policy (fcfs, sjf, priority)

Simulations are read-only: they order a snapshot of the queue and measure
it, so running one never changes the queue. That's why these are GETs.

Route order matters: /compare is registered BEFORE /{policy}, otherwise
FastAPI would try to parse "compare" as a SchedulingPolicy and return 422.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_engine
from api.schemas.simulation import ComparisonResponse, SimulationResponse
from models.enums import SchedulingPolicy
from models.errors import EmptyQueueError
from scheduler.engine import SpoolerEngine

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.get("/compare", response_model=ComparisonResponse)
async def compare_policies(
    engine: SpoolerEngine = Depends(get_engine),
) -> ComparisonResponse:
    """Run FCFS, SJF and Priority against the same snapshot of the queue."""
    try:
        reports = engine.compare_policies()
    except EmptyQueueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    results = {
        policy: SimulationResponse.from_report(policy, report)
        for policy, report in reports.items()
    }
    return ComparisonResponse(
        results=results,
        best_avg_wait=min(reports, key=lambda p: reports[p].avg_wait_time),
        best_avg_turnaround=min(reports, key=lambda p: reports[p].avg_turnaround_time),
    )


@router.get("/{policy}", response_model=SimulationResponse)
async def run_simulation(
    policy: SchedulingPolicy,
    engine: SpoolerEngine = Depends(get_engine),
) -> SimulationResponse:
    """
    Simulate the printer under one policy.

    Unknown policy names never reach this function: FastAPI validates
    the path parameter against SchedulingPolicy and returns 422.
    """
    try:
        report = engine.run_simulation(policy)
    except EmptyQueueError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return SimulationResponse.from_report(policy, report)
