"""Backward pass as worklist relaxation from the terminal tasks."""

from collections import deque

from ...logger import get_logger
from ...models import Project
from ..core import BackwardPassResult, latest_window

logger = get_logger()


class RelaxationBackwardPass:
    """Propagates deadlines backward along dependency edges until nothing improves.

    Terminal tasks are seeded with the deadline. A task taken from the
    worklist offers its latest start to each of its dependencies as a
    candidate latest finish; a dependency with no window yet, or whose latest
    finish is strictly larger than the candidate, takes the candidate and is
    queued so the tighter value flows further back.

    Where paths converge a task may be improved, and processed, more than
    once. Every revisit either tightens a window or is a no-op, and values
    only decrease, so the loop terminates on an acyclic graph with each task
    holding the minimum over all paths to a terminal task.
    """

    def run(self, project: Project, order: list[int], deadline: int) -> BackwardPassResult:
        """Assign ``latest`` to every task.

        Args:
            project: Project whose forward pass has completed
            order: Topological order of arena indices (unused; terminals seed the walk)
            deadline: Latest finish for terminal tasks

        Returns:
            BackwardPassResult with relaxation and revisit counts

        Raises:
            InfeasibleScheduleError: If a task would have to start before 0
        """
        for task in project.tasks:
            task.latest = None

        result = BackwardPassResult(deadline=deadline, metadata={"strategy": "relaxation"})
        worklist: deque[int] = deque()
        queued: set[int] = set()
        processed: set[int] = set()

        for position, task in enumerate(project.tasks):
            if project.dependent_indices(position):
                continue
            task.latest = latest_window(task, deadline)
            logger.changes(f"{task.id}: latest {task.latest} (terminal)")
            result.relaxations += 1
            worklist.append(position)
            queued.add(position)

        while worklist:
            position = worklist.popleft()
            queued.discard(position)
            processed.add(position)

            task = project.tasks[position]
            assert task.latest is not None
            candidate = task.latest.start

            for dep_position in project.dependency_indices(position):
                dependency = project.tasks[dep_position]
                current = dependency.latest
                logger.checks(
                    f"{dependency.id}: offered {candidate} by {task.id}, "
                    f"current {current.end if current else 'unset'}"
                )
                if current is not None and candidate >= current.end:
                    continue

                dependency.latest = latest_window(dependency, candidate)
                result.relaxations += 1
                logger.changes(f"{dependency.id}: latest {dependency.latest} (via {task.id})")

                if dep_position in queued:
                    continue
                if dep_position in processed:
                    result.revisits += 1
                worklist.append(dep_position)
                queued.add(dep_position)

        logger.debug(
            f"Relaxation finished: {result.relaxations} relaxations, {result.revisits} revisits"
        )
        return result
