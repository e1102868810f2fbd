"""
Domain errors raised by the repository and the simulator.

None of these are fatal: the CLI prints the message and shows the menu
again, the API turns them into 4xx responses. Every one of them is raised
BEFORE any state changes, so a failed call leaves the queue exactly as it was.
"""


class SpoolerError(Exception):
    """Base class for all print spooler errors."""


class ValidationError(SpoolerError, ValueError):
    """Page count or priority is not a positive integer."""


class CapacityExceeded(SpoolerError):
    """The print queue already holds its maximum number of jobs."""


class EmptyQueueError(SpoolerError):
    """A simulation was requested but there are no jobs to schedule."""
