"""
Abstract base class for all ordering policies (Strategy pattern).

The Strategy pattern lets you swap algorithms at runtime without changing
the code that uses them. The SpoolerEngine only knows about OrderingPolicy:
it calls order() without caring whether it's FCFS, SJF or Priority.

To add a new scheduling policy:
1. Create a new class that inherits OrderingPolicy
2. Implement order() and policy_name
3. Register it in scheduler/registry.py

That's it. No other code needs to change.

Contract every policy must honour:
- order() returns a NEW list, the input is never mutated
- the output is a permutation of the input (nothing dropped or duplicated)
- equal keys keep submission order (lower job id first)
"""

from abc import ABC, abstractmethod
from typing import Sequence

from models.enums import SchedulingPolicy
from models.job import PrintJob


class OrderingPolicy(ABC):

    @abstractmethod
    def order(self, jobs: Sequence[PrintJob]) -> list[PrintJob]:
        """Return the jobs in the order the printer should serve them."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> SchedulingPolicy:
        """Which policy this is (e.g., SchedulingPolicy.FCFS)."""
        ...

    @property
    def display_name(self) -> str:
        return self.policy_name.display_name
