"""
Timeline simulator — turns an ordered list of jobs into timing metrics.

One printer, every job submitted at t=0, no preemption. The printer
clock starts at 0 and walks through the jobs in the given order:

    job      wait = clock      turnaround = wait + size      clock += size
    ───      ────────────      ────────────────────────      ─────────────
    #1 (10)        0                     10                        10
    #2 (5)        10                     15                        15
    #3 (20)       15                     35                        35

Wait time is "how long did this job sit in the queue", turnaround is
"how long from submission until the last page came out". Because every
job is submitted at t=0, start time == wait time and finish time ==
turnaround time.

The simulator never reorders its input. Ordering is the policy's job;
this module only measures whatever order it is handed.
"""

from typing import Sequence

from models.errors import EmptyQueueError
from models.job import PrintJob
from models.metrics import JobMetrics, MetricsReport


def simulate(ordered_jobs: Sequence[PrintJob]) -> MetricsReport:
    """
    Run the printer over `ordered_jobs` and measure each job.

    Raises:
        EmptyQueueError: no jobs were given (averages would divide by zero)
    """
    if not ordered_jobs:
        raise EmptyQueueError("Cannot run simulation: The print queue is empty.")

    clock = 0
    total_wait = 0
    total_turnaround = 0
    rows: list[JobMetrics] = []

    for job in ordered_jobs:
        wait_time = clock
        turnaround_time = wait_time + job.size

        total_wait += wait_time
        total_turnaround += turnaround_time
        clock += job.size  # printer is busy for the whole job

        rows.append(JobMetrics(
            job_id=job.id,
            size=job.size,
            priority=job.priority,
            wait_time=wait_time,
            turnaround_time=turnaround_time,
        ))

    count = len(rows)
    return MetricsReport(
        jobs=tuple(rows),
        avg_wait_time=total_wait / count,
        avg_turnaround_time=total_turnaround / count,
        total_time=clock,
    )
