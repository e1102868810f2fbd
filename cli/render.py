"""
Plain-text table rendering for the console menu.

Each function returns a string instead of printing, so the menu decides
where output goes and tests can compare exact text.
"""

from models.enums import SchedulingPolicy
from models.job import PrintJob
from models.metrics import MetricsReport


def render_queue(jobs: list[PrintJob]) -> str:
    if not jobs:
        return "The print queue is currently empty."

    lines = [
        "",
        "--- Current Print Queue (FCFS Order) ---",
        "Job ID | Page Count | Priority",
        "-" * 34,
    ]
    for job in jobs:
        lines.append("{:<6} | {:<10} | {:<8}".format(job.id, job.size, job.priority))
    return "\n".join(lines)


def render_report(policy: SchedulingPolicy, report: MetricsReport) -> str:
    lines = [
        "",
        f"--- Simulation Results: {policy.display_name} ---",
        "Job ID | Pages | Priority | Wait Time | Turnaround Time",
        "-" * 58,
    ]
    for row in report.jobs:
        lines.append("{:<6} | {:<5} | {:<8} | {:<9} | {:<15}".format(
            row.job_id, row.size, row.priority, row.wait_time, row.turnaround_time
        ))
    lines.append("-" * 58)
    lines.append(f"Average Waiting Time:     {report.avg_wait_time:.2f}")
    lines.append(f"Average Turnaround Time:  {report.avg_turnaround_time:.2f}")
    return "\n".join(lines)


def render_comparison(reports: dict[SchedulingPolicy, MetricsReport]) -> str:
    lines = [
        "",
        "--- Policy Comparison ---",
        "{:<34} {:>10} {:>16}".format("Policy", "Avg Wait", "Avg Turnaround"),
        "-" * 62,
    ]
    for policy, report in reports.items():
        lines.append("{:<34} {:>10.2f} {:>16.2f}".format(
            policy.display_name, report.avg_wait_time, report.avg_turnaround_time
        ))
    return "\n".join(lines)
