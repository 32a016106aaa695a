"""High-level scheduling service."""

from __future__ import annotations

from collections.abc import Iterable

from ..logger import get_logger
from ..models import Project, TaskSpec
from .backward import create_backward_pass
from .config import SchedulingConfig
from .core import ScheduledTask, ScheduleResult
from .critical_path import critical_edges, critical_path, slack
from .forward_pass import forward_pass
from .topology import topological_order

logger = get_logger()


class SchedulingService:
    """Runs the full CPM pipeline on a project.

    The steps run strictly in sequence:
    - topological ordering (rejects cycles before anything is mutated)
    - forward pass (earliest windows, horizon)
    - backward pass (latest windows from the deadline)
    - critical path extraction (slack, zero-slack set, tight critical edges)
    """

    def __init__(self, config: SchedulingConfig | None = None):
        """Initialize scheduling service.

        Args:
            config: Optional scheduling configuration
        """
        self.config = config or SchedulingConfig()

    def schedule(self, project: Project) -> ScheduleResult:
        """Schedule ``project`` in place and return a snapshot of the result.

        Raises:
            CyclicDependencyError: If the graph has a cycle
            InfeasibleScheduleError: If the configured deadline cannot be met
        """
        order = topological_order(project)
        project.reset()

        horizon = forward_pass(project, order)
        deadline = self.config.deadline if self.config.deadline is not None else horizon.end
        if deadline != horizon.end:
            logger.changes(f"Using fixed deadline {deadline} (computed horizon {horizon.end})")

        backward = create_backward_pass(self.config.backward_strategy)
        backward_result = backward.run(project, order, deadline)

        critical_ids = {task.id for task in critical_path(project)}
        edges = critical_edges(project)

        scheduled: list[ScheduledTask] = []
        for task in project.tasks:
            assert task.earliest is not None and task.latest is not None
            scheduled.append(
                ScheduledTask(
                    task_id=task.id,
                    duration=task.duration,
                    earliest=task.earliest,
                    latest=task.latest,
                    slack=slack(task),
                    critical=task.id in critical_ids,
                    dependencies=task.dependencies,
                )
            )

        logger.changes(
            f"Critical path: {', '.join(t.task_id for t in scheduled if t.critical) or '(none)'}"
        )

        return ScheduleResult(
            project_name=project.name,
            horizon=horizon,
            deadline=deadline,
            order=[project.tasks[i].id for i in order],
            tasks=scheduled,
            critical_path=[t.task_id for t in scheduled if t.critical],
            critical_edges=edges,
            metadata={
                "strategy": self.config.backward_strategy.value,
                "relaxations": backward_result.relaxations,
                "revisits": backward_result.revisits,
            },
        )

    def schedule_specs(self, specs: Iterable[TaskSpec], name: str = "Project") -> ScheduleResult:
        """Build a project from descriptors and schedule it."""
        return self.schedule(Project.from_specs(specs, name=name))
