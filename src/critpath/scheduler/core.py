"""Core dataclasses and arithmetic for the scheduling passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..exceptions import InfeasibleScheduleError
from ..models import Task, TimeWindow
from .critical_path import MAX_CRITICAL_CHAINS, count_chains, enumerate_chains


def _default_dict() -> dict[str, Any]:
    return {}


def latest_window(task: Task, latest_end: int) -> TimeWindow:
    """Latest window for ``task`` when it must finish by ``latest_end``.

    Arithmetic is done on plain ints so a too-tight deadline shows up as a
    negative start, which is reported instead of being stored.

    Raises:
        InfeasibleScheduleError: If the task would have to start before time 0
    """
    latest_start = latest_end - task.duration
    if latest_start < 0:
        raise InfeasibleScheduleError(
            f"Task '{task.id}' must finish by {latest_end} but takes {task.duration}: "
            f"it would have to start at {latest_start}"
        )
    return TimeWindow(latest_start, latest_end)


@dataclass(frozen=True)
class ScheduledTask:
    """Snapshot of one task's computed schedule."""

    task_id: str
    duration: int
    earliest: TimeWindow
    latest: TimeWindow
    slack: int
    critical: bool
    dependencies: tuple[str, ...] = ()


@dataclass
class BackwardPassResult:
    """What a backward pass did, for logging and result metadata."""

    deadline: int
    relaxations: int = 0  # Times a latest window was assigned or tightened
    revisits: int = 0  # Times a task was queued again after its first visit
    metadata: dict[str, Any] = field(default_factory=_default_dict)


@dataclass
class ScheduleResult:
    """Complete result of a scheduling run.

    Critical chains are not stored: they are derived from ``critical_edges``
    on request, since their number can grow exponentially.
    """

    project_name: str
    horizon: TimeWindow
    deadline: int
    order: list[str]
    tasks: list[ScheduledTask]
    critical_path: list[str]
    critical_edges: list[tuple[str, str]]
    metadata: dict[str, Any] = field(default_factory=_default_dict)

    def get(self, task_id: str) -> ScheduledTask:
        for task in self.tasks:
            if task.task_id == task_id:
                return task
        raise KeyError(task_id)

    def critical_chains(self, limit: int | None = MAX_CRITICAL_CHAINS) -> list[list[str]]:
        """Up to ``limit`` ordered chains through the critical set."""
        return enumerate_chains(self.critical_path, self.critical_edges, limit)

    def critical_chain_count(self) -> int:
        return count_chains(self.critical_path, self.critical_edges)

    @property
    def max_slack(self) -> int:
        return max((task.slack for task in self.tasks), default=0)
