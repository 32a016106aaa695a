"""Forward pass: earliest start and finish for every task."""

from __future__ import annotations

from ..exceptions import SchedulingError
from ..logger import get_logger
from ..models import Project, TimeWindow
from .topology import topological_order

logger = get_logger()


def forward_pass(project: Project, order: list[int] | None = None) -> TimeWindow:
    """Assign ``earliest`` to every task and set the project horizon.

    Each task starts when its last dependency finishes (0 with no
    dependencies). One pass over the topological order, O(V+E).

    Args:
        project: Project to schedule, mutated in place
        order: Topological order from topological_order(); computed when omitted

    Returns:
        The project horizon ``[0, max earliest.end]``

    Raises:
        SchedulingError: If ``order`` is not a permutation of the project's
            tasks, or places a task before one of its dependencies
    """
    if order is None:
        order = topological_order(project)
    elif sorted(order) != list(range(len(project))):
        raise SchedulingError(
            f"Order must list each of the {len(project)} tasks exactly once, got {order}"
        )

    for task in project.tasks:
        task.earliest = None

    visited = [False] * len(project)
    horizon_end = 0
    for position in order:
        task = project.tasks[position]
        start = 0
        for dep_position in project.dependency_indices(position):
            dependency = project.tasks[dep_position]
            if not visited[dep_position] or dependency.earliest is None:
                raise SchedulingError(
                    f"Order places '{task.id}' before its dependency '{dependency.id}'"
                )
            start = max(start, dependency.earliest.end)

        task.earliest = TimeWindow(start, start + task.duration)
        visited[position] = True
        logger.changes(f"{task.id}: earliest {task.earliest}")
        horizon_end = max(horizon_end, task.earliest.end)

    project.set_horizon_end(horizon_end)
    logger.changes(f"Project horizon: {horizon_end}")
    return project.horizon
