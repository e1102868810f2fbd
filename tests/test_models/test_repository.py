"""
Tests for the in-memory JobRepository.

These test the submission contract:
- accepted jobs get ids 1, 2, 3, ... with no gaps
- rejected jobs (bad input or full queue) change nothing, not even the id counter
- snapshot() is a copy in submission order
"""

import dataclasses
import threading

import pytest

from models.errors import CapacityExceeded, ValidationError
from models.repository import JobRepository


def test_ids_are_sequential_from_one():
    repo = JobRepository(capacity=10)
    jobs = [repo.submit(10, 2), repo.submit(5, 1), repo.submit(20, 3)]

    assert [j.id for j in jobs] == [1, 2, 3]
    assert [(j.size, j.priority) for j in jobs] == [(10, 2), (5, 1), (20, 3)]


@pytest.mark.parametrize("size, priority", [(0, 1), (-5, 1), (10, 0), (10, -1)])
def test_non_positive_values_rejected(size, priority):
    repo = JobRepository(capacity=10)
    repo.submit(10, 2)

    with pytest.raises(ValidationError, match="must be positive"):
        repo.submit(size, priority)

    assert len(repo) == 1


def test_rejected_submission_does_not_consume_id():
    repo = JobRepository(capacity=10)
    repo.submit(10, 2)

    with pytest.raises(ValidationError):
        repo.submit(0, 2)
    with pytest.raises(ValidationError):
        repo.submit(3, -1)

    assert repo.submit(7, 1).id == 2


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        JobRepository(capacity=10).submit(0, 0)


def test_capacity_exceeded():
    repo = JobRepository(capacity=2)
    repo.submit(1, 1)
    repo.submit(2, 2)

    with pytest.raises(CapacityExceeded, match="full"):
        repo.submit(3, 3)

    assert len(repo) == 2
    assert [j.id for j in repo.snapshot()] == [1, 2]


def test_full_queue_rejects_even_invalid_jobs_as_capacity():
    """The capacity check comes first: a full queue reports being full."""
    repo = JobRepository(capacity=1)
    repo.submit(1, 1)

    with pytest.raises(CapacityExceeded):
        repo.submit(0, 0)


def test_capacity_rejection_does_not_consume_id():
    repo = JobRepository(capacity=2)
    repo.submit(1, 1)
    repo.submit(2, 2)
    with pytest.raises(CapacityExceeded):
        repo.submit(3, 3)
    with pytest.raises(CapacityExceeded):
        repo.submit(4, 4)

    assert len(repo) == 2
    assert [j.id for j in repo.snapshot()] == [1, 2]
    assert repo.is_full


@pytest.mark.parametrize("size, priority", [
    (2.5, 1),
    (10, 1.5),
    ("5", 1),
    (10, "2"),
    (None, 1),
    (True, 1),
    (10, True),
])
def test_non_integer_values_rejected(size, priority):
    repo = JobRepository(capacity=10)

    with pytest.raises(ValidationError, match="must be integers"):
        repo.submit(size, priority)

    assert repo.snapshot() == []
    assert repo.submit(3, 1).id == 1


def test_float_size_never_reaches_a_report(engine):
    with pytest.raises(ValidationError):
        engine.submit_job(2.5, 1)
    engine.submit_job(4, 1)

    report = engine.run_simulation("fcfs")
    assert [(row.size, row.turnaround_time) for row in report.jobs] == [(4, 4)]
    assert report.total_time == 4


def test_default_capacity_from_settings(monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "MAX_JOBS", 3)
    assert JobRepository().capacity == 3


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        JobRepository(capacity=0)


def test_snapshot_is_a_copy():
    repo = JobRepository(capacity=10)
    repo.submit(1, 1)
    repo.submit(2, 2)

    snap = repo.snapshot()
    snap.reverse()
    snap.pop()

    assert [j.id for j in repo.snapshot()] == [1, 2]


def test_snapshot_of_empty_repository():
    assert JobRepository(capacity=10).snapshot() == []


def test_jobs_are_immutable():
    job = JobRepository(capacity=10).submit(10, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        job.size = 1


def test_concurrent_submissions_get_unique_ids():
    """Threads racing on submit() must never share or skip an id."""
    repo = JobRepository(capacity=200)

    def submit_many():
        for _ in range(50):
            repo.submit(1, 1)

    threads = [threading.Thread(target=submit_many) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert [j.id for j in repo.snapshot()] == list(range(1, 201))
