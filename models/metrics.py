"""
Simulation output types.

A MetricsReport is created fresh for every simulation run and never stored.
It is plain data: the CLI renders it as a table, the API serializes it
through api/schemas/simulation.py.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class JobMetrics:
    job_id: int
    size: int
    priority: int
    wait_time: int        # time spent queued before printing starts
    turnaround_time: int  # submission (t=0) to completion

    @property
    def start_time(self) -> int:
        # every job is submitted at t=0, so it starts after waiting
        return self.wait_time

    @property
    def finish_time(self) -> int:
        return self.turnaround_time


@dataclass(frozen=True)
class MetricsReport:
    jobs: tuple[JobMetrics, ...]
    avg_wait_time: float
    avg_turnaround_time: float
    total_time: int  # printer clock after the last job

    @property
    def order(self) -> list[int]:
        """Job ids in the order they were printed."""
        return [entry.job_id for entry in self.jobs]
