"""
Spooler Engine — the core orchestrator.

This is the library API every collaborator (CLI menu, HTTP service, tests)
talks to. It binds one JobRepository to the ordering policies and the
timeline simulator:

      JobRepository           OrderingPolicy            simulate()
    ┌──────────────┐       ┌──────────────────┐      ┌──────────────┐
    │ jobs in      │──────>│ FCFS/SJF/Priority│─────>│ MetricsReport│
    │ submit order │ snap  │ (new list)       │ order│              │
    └──────────────┘       └──────────────────┘      └──────────────┘

The engine doesn't print anything. It only ORDERS and MEASURES.
Rendering the report is the collaborator's business.
"""

import logging
from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from models.errors import SpoolerError
from models.job import PrintJob
from models.metrics import MetricsReport
from models.repository import JobRepository
from scheduler.registry import available_policies, create_policy
from scheduler.simulator import simulate

logger = logging.getLogger(__name__)


class SpoolerEngine:

    def __init__(self, repository: Optional[JobRepository] = None):
        self._repository = repository if repository is not None else JobRepository()

    @property
    def repository(self) -> JobRepository:
        return self._repository

    def submit_job(self, size: int, priority: int) -> PrintJob:
        """
        Add a print job to the queue.

        Raises ValidationError or CapacityExceeded; in both cases the queue
        is left untouched.
        """
        try:
            job = self._repository.submit(size, priority)
        except SpoolerError as e:
            logger.warning(f"Rejected job (size={size}, priority={priority}): {e}")
            raise
        logger.info(f"Added job {job.id} ({job.size} pages, priority {job.priority})")
        return job

    def list_jobs(self) -> list[PrintJob]:
        """All jobs in submission order (a copy)."""
        return self._repository.snapshot()

    def run_simulation(self, policy: SchedulingPolicy | str | None = None) -> MetricsReport:
        """
        Order the current queue with `policy` and simulate the printer.

        Without a policy, settings.DEFAULT_SCHEDULING_POLICY is used.
        Raises EmptyQueueError if no jobs have been submitted.
        """
        ordering = create_policy(policy or settings.DEFAULT_SCHEDULING_POLICY)
        report = simulate(ordering.order(self._repository.snapshot()))
        logger.info(
            f"{ordering.display_name}: order={report.order} "
            f"avg_wait={report.avg_wait_time:.2f} avg_turnaround={report.avg_turnaround_time:.2f}"
        )
        return report

    def compare_policies(self) -> dict[SchedulingPolicy, MetricsReport]:
        """
        Run every registered policy against the SAME snapshot.

        Taking one snapshot up front means a job submitted mid-comparison
        can't make the reports disagree about which jobs exist.
        """
        jobs = self._repository.snapshot()
        results: dict[SchedulingPolicy, MetricsReport] = {}
        for policy in available_policies():
            results[policy] = simulate(create_policy(policy).order(jobs))
        logger.info(f"Compared {len(results)} policies over {len(jobs)} jobs")
        return results
