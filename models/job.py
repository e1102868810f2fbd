"""
PrintJob — one document waiting in the print queue.

Key design decisions:
- Sequential integer ids: the id doubles as the submission order, so FCFS
  and every tiebreak can simply compare ids
- size is the page count, the "burst time" of the printer
- priority: lower number = served first (1 = faculty, 2 = student, 3 = guest)
- frozen: once submitted a job never changes, so orderings can share
  the same objects without copying them
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PrintJob:
    id: int
    size: int       # page count
    priority: int   # 1 = highest

    def __repr__(self) -> str:
        return f"<PrintJob {self.id} [{self.size} pages] p{self.priority}>"
