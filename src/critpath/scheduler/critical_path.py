"""Slack computation and critical path extraction."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from ..exceptions import InfeasibleScheduleError, SchedulingError
from ..models import Project, Task, TimeWindow

# Default cap on listed chains; layered graphs have exponentially many
MAX_CRITICAL_CHAINS = 100


def slack(task: Task) -> int:
    """Latest start minus earliest start.

    Raises:
        SchedulingError: If either pass has not run for this task
        InfeasibleScheduleError: If the slack is negative
    """
    value = task.slack
    if value is None:
        raise SchedulingError(f"Task '{task.id}' has no schedule; run both passes first")
    if value < 0:
        raise InfeasibleScheduleError(
            f"Task '{task.id}' has negative slack {value}: latest start "
            f"{task.latest.start if task.latest else '?'} is before earliest start "
            f"{task.earliest.start if task.earliest else '?'}"
        )
    return value


def critical_path(project: Project) -> list[Task]:
    """Every zero-slack task, in graph order.

    Disjoint critical chains are all included; the result is a set, not
    necessarily one connected path. Slack is checked for every task, so an
    over-constrained project raises even when its critical set is empty.
    """
    return [task for task in project.tasks if slack(task) == 0]


def critical_edges(project: Project) -> list[tuple[str, str]]:
    """Tight edges of the critical subgraph, as ``(dependency, dependent)`` ID pairs.

    An edge is tight when both ends are critical and the dependency finishes
    exactly when the dependent starts. Pairs come out grouped by dependency,
    both ends in graph order. O(V+E).
    """
    critical = {project.index_of(task) for task in critical_path(project)}
    edges: list[tuple[str, str]] = []
    for position in sorted(critical):
        task = project.tasks[position]
        finish = _earliest(task).end
        for dependent_position in project.dependent_indices(position):
            dependent = project.tasks[dependent_position]
            if dependent_position in critical and _earliest(dependent).start == finish:
                edges.append((task.id, dependent.id))
    return edges


def critical_chains(project: Project, limit: int | None = MAX_CRITICAL_CHAINS) -> list[list[str]]:
    """Ordered chains through the critical set, at most ``limit`` of them.

    A chain begins at a critical task with no tight critical dependency and
    ends at one with no tight critical dependent. Converging and diverging
    edges yield one chain per path, so the full count can grow exponentially;
    use count_chains() to learn how many were left out.
    """
    nodes = [task.id for task in critical_path(project)]
    return enumerate_chains(nodes, critical_edges(project), limit)


def enumerate_chains(
    nodes: Sequence[str],
    edges: Sequence[tuple[str, str]],
    limit: int | None = MAX_CRITICAL_CHAINS,
) -> list[list[str]]:
    """Walk ``edges`` from every source in ``nodes`` and list the paths.

    Depth-first with successors in edge order, so output is deterministic.
    Every branch ends in a chain, so the walk stops after ``limit`` chains
    without exploring further.
    """
    successors, sources = _adjacency(nodes, edges)
    chains: list[list[str]] = []
    for source in sources:
        stack: list[list[str]] = [[source]]
        while stack:
            if limit is not None and len(chains) >= limit:
                return chains
            path = stack.pop()
            nexts = successors[path[-1]]
            if not nexts:
                chains.append(path)
                continue
            for task_id in reversed(nexts):
                stack.append(path + [task_id])
    return chains


def count_chains(nodes: Sequence[str], edges: Sequence[tuple[str, str]]) -> int:
    """Number of chains enumerate_chains() would list without a limit. O(V+E)."""
    successors, sources = _adjacency(nodes, edges)
    incoming = {task_id: 0 for task_id in nodes}
    for _, dependent in edges:
        incoming[dependent] += 1

    # Kahn over the critical subgraph, then count paths to a sink in reverse
    ready: deque[str] = deque(sources)
    order: list[str] = []
    while ready:
        task_id = ready.popleft()
        order.append(task_id)
        for successor in successors[task_id]:
            incoming[successor] -= 1
            if incoming[successor] == 0:
                ready.append(successor)

    paths: dict[str, int] = {}
    for task_id in reversed(order):
        nexts = successors[task_id]
        paths[task_id] = sum(paths[s] for s in nexts) if nexts else 1
    return sum(paths[source] for source in sources)


def _adjacency(
    nodes: Sequence[str], edges: Sequence[tuple[str, str]]
) -> tuple[dict[str, list[str]], list[str]]:
    successors: dict[str, list[str]] = {task_id: [] for task_id in nodes}
    targets: set[str] = set()
    for dependency, dependent in edges:
        successors[dependency].append(dependent)
        targets.add(dependent)
    return successors, [task_id for task_id in nodes if task_id not in targets]


def _earliest(task: Task) -> TimeWindow:
    if task.earliest is None:
        raise SchedulingError(f"Task '{task.id}' has no earliest window; run the forward pass")
    return task.earliest
