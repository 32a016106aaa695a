"""Backward pass as a single sweep over reversed topological order."""

from ...logger import get_logger
from ...models import Project
from ..core import BackwardPassResult, latest_window

logger = get_logger()


class ReverseTopologicalBackwardPass:
    """Computes latest windows in one O(V+E) sweep.

    Visiting tasks in reverse topological order means every dependent has its
    latest window before any of its dependencies is reached, so each task's
    latest finish is simply the minimum latest start over its dependents, or
    the deadline for terminal tasks.
    """

    def run(self, project: Project, order: list[int], deadline: int) -> BackwardPassResult:
        """Assign ``latest`` to every task.

        Args:
            project: Project whose forward pass has completed
            order: Topological order of arena indices
            deadline: Latest finish for terminal tasks

        Returns:
            BackwardPassResult with one relaxation per task

        Raises:
            InfeasibleScheduleError: If a task would have to start before 0
        """
        for task in project.tasks:
            task.latest = None

        for position in reversed(order):
            task = project.tasks[position]
            dependents = project.dependent_indices(position)

            if not dependents:
                latest_end = deadline
                logger.checks(f"{task.id}: terminal task, finishes by deadline {deadline}")
            else:
                starts: list[int] = []
                for dependent_position in dependents:
                    dependent = project.tasks[dependent_position]
                    assert dependent.latest is not None
                    logger.checks(
                        f"{task.id}: dependent {dependent.id} starts by {dependent.latest.start}"
                    )
                    starts.append(dependent.latest.start)
                latest_end = min(starts)

            task.latest = latest_window(task, latest_end)
            logger.changes(f"{task.id}: latest {task.latest}")

        return BackwardPassResult(
            deadline=deadline,
            relaxations=len(order),
            metadata={"strategy": "reverse_topological"},
        )
