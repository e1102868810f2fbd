"""
Pydantic schemas for the /simulations endpoints.

JobMetricsResponse: one row of the results table.
SimulationResponse: a full report for one policy.
ComparisonResponse: one report per policy, computed on the same queue.
"""

from pydantic import BaseModel

from models.enums import SchedulingPolicy
from models.metrics import MetricsReport


class JobMetricsResponse(BaseModel):
    job_id: int
    size: int
    priority: int
    wait_time: int
    turnaround_time: int
    start_time: int
    finish_time: int

    model_config = {"from_attributes": True}


class SimulationResponse(BaseModel):
    policy: SchedulingPolicy
    policy_name: str           # human readable, e.g. "Shortest Job First (SJF)"
    order: list[int]           # job ids in print order
    jobs: list[JobMetricsResponse]
    avg_wait_time: float
    avg_turnaround_time: float
    total_time: int

    @classmethod
    def from_report(cls, policy: SchedulingPolicy, report: MetricsReport) -> "SimulationResponse":
        return cls(
            policy=policy,
            policy_name=policy.display_name,
            order=report.order,
            jobs=[JobMetricsResponse.model_validate(row) for row in report.jobs],
            avg_wait_time=report.avg_wait_time,
            avg_turnaround_time=report.avg_turnaround_time,
            total_time=report.total_time,
        )


class ComparisonResponse(BaseModel):
    results: dict[SchedulingPolicy, SimulationResponse]
    best_avg_wait: SchedulingPolicy         # first policy with the lowest average wait
    best_avg_turnaround: SchedulingPolicy
