"""
Priority-based policy, non-preemptive.

Jobs with the lowest priority NUMBER print first (1 = faculty, 2 = student,
3 = guest). Same approach as SJF, but keyed on priority instead of size.

Sort key: (priority, id) — equal priorities fall back to submission order.

Downside: same starvation problem as SJF: low-priority jobs
might wait forever if high-priority jobs keep arriving.
A fix would be "aging": gradually raise the priority of waiting jobs.
"""

from typing import Sequence

from models.enums import SchedulingPolicy
from models.job import PrintJob
from scheduler.base import OrderingPolicy


class PriorityPolicy(OrderingPolicy):

    def order(self, jobs: Sequence[PrintJob]) -> list[PrintJob]:
        return sorted(jobs, key=lambda job: (job.priority, job.id))

    @property
    def policy_name(self) -> SchedulingPolicy:
        return SchedulingPolicy.PRIORITY
