"""
Shortest Job First (SJF) policy, non-preemptive.

Jobs with the fewest pages print first. This minimizes average waiting
time across all jobs; it's provably optimal for that metric when every
job is already in the queue at t=0.

The sort key is a tuple: (size, id)
- size: the sorting key (shortest first)
- id: tiebreaker — if two jobs have the same page count, the one
  submitted first wins, so equal-size jobs degrade to FCFS.

Non-preemptive: the order is fixed before the first page prints.
Since all jobs arrive at t=0 there is nothing to re-evaluate mid-run.

Downside: starvation. A 1000-page job might never print if short
jobs keep arriving. Not an issue here (no arrivals after t=0).
"""

from typing import Sequence

from models.enums import SchedulingPolicy
from models.job import PrintJob
from scheduler.base import OrderingPolicy


class SJFPolicy(OrderingPolicy):

    def order(self, jobs: Sequence[PrintJob]) -> list[PrintJob]:
        return sorted(jobs, key=lambda job: (job.size, job.id))

    @property
    def policy_name(self) -> SchedulingPolicy:
        return SchedulingPolicy.SJF
