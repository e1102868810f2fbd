"""
Policy factory — maps policy names to ordering policy classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
you have ONE place that knows how to create policies.
"""

from models.enums import SchedulingPolicy
from scheduler.base import OrderingPolicy
from scheduler.fcfs import FCFSPolicy
from scheduler.sjf import SJFPolicy
from scheduler.priority import PriorityPolicy


_REGISTRY: dict[SchedulingPolicy, type[OrderingPolicy]] = {
    SchedulingPolicy.FCFS: FCFSPolicy,
    SchedulingPolicy.SJF: SJFPolicy,
    SchedulingPolicy.PRIORITY: PriorityPolicy,
}


def create_policy(policy: SchedulingPolicy | str) -> OrderingPolicy:
    """
    Create an ordering policy for the given policy name.

    Accepts the enum or its string value ("fcfs", "sjf", "priority").
    Raises ValueError for anything else.
    """
    try:
        key = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(
            f"Unknown scheduling policy: '{policy}'. Available: {[p.value for p in _REGISTRY]}"
        ) from None
    return _REGISTRY[key]()


def available_policies() -> list[SchedulingPolicy]:
    """All registered policies, in declaration order."""
    return list(_REGISTRY)
