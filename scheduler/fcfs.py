"""
First Come First Served (FCFS) policy.

The simplest scheduling policy: jobs print in the order they were submitted.
The repository already stores jobs in that order, so ordering is just a copy.

When to use: when fairness matters more than efficiency.
Every job gets served in arrival order, so no job gets starved.

Downside: a 500-page job blocks everything behind it.
This is called the "convoy effect".
"""

from typing import Sequence

from models.enums import SchedulingPolicy
from models.job import PrintJob
from scheduler.base import OrderingPolicy


class FCFSPolicy(OrderingPolicy):

    def order(self, jobs: Sequence[PrintJob]) -> list[PrintJob]:
        return list(jobs)

    @property
    def policy_name(self) -> SchedulingPolicy:
        return SchedulingPolicy.FCFS
