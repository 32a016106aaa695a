"""Topological ordering of the project graph."""

from __future__ import annotations

from collections import deque

from ..exceptions import CyclicDependencyError
from ..logger import get_logger
from ..models import Project

logger = get_logger()


def topological_order(project: Project) -> list[int]:
    """Order arena indices so every dependency precedes its dependents.

    Kahn's algorithm. Ready tasks are released in graph order, so the result
    is deterministic and equals insertion order whenever insertion order is
    already valid.

    Returns:
        Arena indices in topological order

    Raises:
        CyclicDependencyError: If some tasks can never become ready
    """
    # Count unresolved dependencies per task
    remaining = [len(project.dependency_indices(i)) for i in range(len(project))]
    ready: deque[int] = deque(i for i, count in enumerate(remaining) if count == 0)
    order: list[int] = []

    while ready:
        position = ready.popleft()
        order.append(position)
        for dependent in project.dependent_indices(position):
            remaining[dependent] -= 1
            if remaining[dependent] == 0:
                ready.append(dependent)

    if len(order) != len(project):
        unsorted = [i for i, count in enumerate(remaining) if count > 0]
        cycle = _find_cycle(project, set(unsorted))
        raise CyclicDependencyError(
            f"Circular dependency detected: {' -> '.join(cycle)}",
            [project.tasks[i].id for i in unsorted],
        )

    logger.debug("Topological order: %s", ", ".join(project.tasks[i].id for i in order))
    return order


def topological_ids(project: Project) -> list[str]:
    """Task IDs in topological order."""
    return [project.tasks[i].id for i in topological_order(project)]


def _find_cycle(project: Project, unsorted: set[int]) -> list[str]:
    """Walk dependency edges inside the unsorted set until a task repeats.

    Every unsorted task still has an unsorted dependency, so the walk cannot
    dead-end.
    """
    start = min(unsorted)
    path: list[int] = []
    seen_at: dict[int, int] = {}
    current = start
    while current not in seen_at:
        seen_at[current] = len(path)
        path.append(current)
        current = next(d for d in project.dependency_indices(current) if d in unsorted)

    cycle = path[seen_at[current] :] + [current]
    return [project.tasks[i].id for i in cycle]
