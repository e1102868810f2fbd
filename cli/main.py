"""
Interactive console menu for the print spooler.

Usage:
    python -m cli.main                  # queue capacity from settings (default 100)
    python -m cli.main --max-jobs 10    # smaller queue

    --- Print Job Spooler Simulation ---
    1. Add Print Job
    2. Display Current Queue (Unsorted)
    3. Run FCFS Simulation
    4. Run SJF Simulation
    5. Run Priority Simulation
    6. Compare All Policies
    7. Exit

The menu owns the loop and the I/O; every real decision is delegated to
SpoolerEngine. Errors from the engine are printed and the menu comes back;
nothing the user types can end the session except Exit or end of input.
"""

import argparse
import logging
from typing import Callable

from config.settings import settings
from models.enums import SchedulingPolicy
from models.errors import SpoolerError
from models.repository import JobRepository
from scheduler.engine import SpoolerEngine
from cli.render import render_comparison, render_queue, render_report

logger = logging.getLogger(__name__)

MENU = """
--- Print Job Spooler Simulation ---
1. Add Print Job
2. Display Current Queue (Unsorted)
3. Run FCFS Simulation
4. Run SJF Simulation
5. Run Priority Simulation
6. Compare All Policies
7. Exit
--------------------------------------"""

INVALID_NUMBER = "Invalid input. Please enter a number."


class SpoolerMenu:

    def __init__(
        self,
        engine: SpoolerEngine,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self._engine = engine
        self._input = input_fn
        self._output = output_fn
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_job,
            2: self.display_queue,
            3: lambda: self.run_policy(SchedulingPolicy.FCFS),
            4: lambda: self.run_policy(SchedulingPolicy.SJF),
            5: lambda: self.run_policy(SchedulingPolicy.PRIORITY),
            6: self.compare,
        }
        self._exit_choice = 7

    def run(self) -> None:
        """Show the menu until the user exits or input runs out."""
        while True:
            self._output(MENU)
            try:
                raw = self._input("Enter your choice: ")
            except EOFError:
                break

            try:
                choice = int(raw.strip())
            except ValueError:
                self._output(INVALID_NUMBER)
                continue

            if choice == self._exit_choice:
                break

            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid choice. Please try again.")
                continue

            try:
                action()
            except EOFError:
                break

        self._output("Exiting simulation. Goodbye!")

    def add_job(self) -> None:
        repository = self._engine.repository
        if repository.is_full:
            self._output(
                f"Error: Print queue is full ({repository.capacity} jobs). Cannot add more jobs."
            )
            return

        try:
            size = int(self._input("  Enter Page Count (e.g., 50): ").strip())
            priority = int(self._input("  Enter Priority (1=Faculty, 2=Student, 3=Guest): ").strip())
        except ValueError:
            self._output(INVALID_NUMBER)
            return

        try:
            job = self._engine.submit_job(size, priority)
        except SpoolerError as e:
            self._output(f"Error: {e}")
            return

        self._output(
            f"  Success: Added Job {job.id} ({job.size} pages, priority {job.priority})."
        )

    def display_queue(self) -> None:
        self._output(render_queue(self._engine.list_jobs()))

    def run_policy(self, policy: SchedulingPolicy) -> None:
        try:
            report = self._engine.run_simulation(policy)
        except SpoolerError as e:
            self._output(str(e))
            return
        self._output(render_report(policy, report))

    def compare(self) -> None:
        try:
            reports = self._engine.compare_policies()
        except SpoolerError as e:
            self._output(str(e))
            return
        self._output(render_comparison(reports))


def main():
    parser = argparse.ArgumentParser(description="Print Job Spooler Simulation")
    parser.add_argument(
        "--max-jobs", type=int, default=settings.MAX_JOBS,
        help=f"Queue capacity (default: {settings.MAX_JOBS})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    engine = SpoolerEngine(JobRepository(capacity=args.max_jobs))
    logger.debug(f"Starting menu with capacity {args.max_jobs}")
    SpoolerMenu(engine).run()


if __name__ == "__main__":
    main()
