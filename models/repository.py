"""
In-memory job repository — the print queue itself.

The repository is the only mutable state in the system. It owns:
- the list of submitted jobs, in submission order
- the id counter (next id to hand out)
- the capacity bound

Submission is atomic: either a valid job is appended AND an id is consumed,
or nothing happens at all. A rejected job never burns an id, so accepted
jobs are always numbered 1, 2, 3, ... with no gaps.

Thread safety:
The API server may handle requests concurrently, and a simulation must see
a consistent set of jobs. submit() and snapshot() share one lock, and
snapshot() hands out a copy that callers are free to sort or slice
without touching the queue.
"""

import logging
import threading
from typing import Optional

from config.settings import settings
from models.errors import CapacityExceeded, ValidationError
from models.job import PrintJob

logger = logging.getLogger(__name__)


class JobRepository:

    def __init__(self, capacity: Optional[int] = None):
        self._capacity = settings.MAX_JOBS if capacity is None else capacity
        if self._capacity < 1:
            raise ValueError(f"Capacity must be at least 1, got {self._capacity}")
        self._jobs: list[PrintJob] = []
        self._next_id: int = 1
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._jobs) >= self._capacity

    def submit(self, size: int, priority: int) -> PrintJob:
        """
        Add a job to the end of the queue.

        Raises:
            CapacityExceeded: the queue already holds `capacity` jobs
            ValidationError: size or priority is not a positive integer
        """
        with self._lock:
            if len(self._jobs) >= self._capacity:
                raise CapacityExceeded(
                    f"Print queue is full ({self._capacity} jobs). Cannot add more jobs."
                )
            if not (_is_int(size) and _is_int(priority)):
                raise ValidationError(
                    f"Page count and priority must be integers (got size={size!r}, priority={priority!r})."
                )
            if size <= 0 or priority <= 0:
                raise ValidationError(
                    f"Page count and priority must be positive (got size={size}, priority={priority})."
                )

            job = PrintJob(id=self._next_id, size=size, priority=priority)
            self._jobs.append(job)
            self._next_id += 1

        logger.debug(f"Stored job {job.id} ({len(self._jobs)}/{self._capacity})")
        return job

    def snapshot(self) -> list[PrintJob]:
        """Copy of all jobs in submission order."""
        with self._lock:
            return list(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)


def _is_int(value) -> bool:
    # bool is an int subclass, but True pages is not a page count
    return isinstance(value, int) and not isinstance(value, bool)
