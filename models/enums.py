"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("sjf", not "SchedulingPolicy.SJF")
- They work as FastAPI path parameters (unknown values → 422)
- Typos become immediate errors instead of silent bugs
"""

import enum


class SchedulingPolicy(str, enum.Enum):
    FCFS = "fcfs"              # First Come First Served — submission order
    SJF = "sjf"                # Shortest Job First — ascending page count
    PRIORITY = "priority"      # Priority — ascending priority number (1 = highest)

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    SchedulingPolicy.FCFS: "First-Come, First-Served (FCFS)",
    SchedulingPolicy.SJF: "Shortest Job First (SJF)",
    SchedulingPolicy.PRIORITY: "Priority Scheduling",
}
