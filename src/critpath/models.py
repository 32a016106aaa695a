"""Data models for critpath: time windows, tasks and the project graph."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .exceptions import (
    CyclicDependencyError,
    DuplicateTaskIDError,
    InvalidDurationError,
    SchedulingError,
    UnknownDependencyError,
    ValidationError,
)


def validate_duration(task_id: str, duration: Any) -> int:
    """Return ``duration`` if it is a non-negative integer, else raise.

    Booleans and floats are rejected even when they hold a whole number.
    """
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise InvalidDurationError(
            f"Task '{task_id}' has invalid duration {duration!r}: must be a non-negative integer"
        )
    if duration < 0:
        raise InvalidDurationError(
            f"Task '{task_id}' has negative duration {duration}: must be a non-negative integer"
        )
    return duration


@dataclass(frozen=True)
class TimeWindow:
    """A closed ``[start, end]`` interval in abstract time units."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(f"Time window {self} has a negative bound")
        if self.end < self.start:
            raise ValueError(f"Time window {self} ends before it starts")

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"


@dataclass(frozen=True)
class TaskSpec:
    """Input descriptor for a task, as read from a file, dataset or prompt."""

    id: str
    duration: int
    dependency_ids: tuple[str, ...] = ()

    @classmethod
    def create(cls, task_id: str, duration: Any, dependency_ids: Iterable[str] = ()) -> TaskSpec:
        """Build a descriptor, validating the duration up front."""
        return cls(
            id=task_id,
            duration=validate_duration(task_id, duration),
            dependency_ids=tuple(dependency_ids),
        )


@dataclass
class Task:
    """A node in the project graph.

    Dependencies are stored as task IDs. The owning Project resolves them to
    arena indices; a Task never holds a reference to another Task.
    """

    id: str
    duration: int
    dependencies: tuple[str, ...] = ()
    earliest: TimeWindow | None = None
    latest: TimeWindow | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError(f"Task ID must be a non-empty string, got {self.id!r}")
        validate_duration(self.id, self.duration)
        if self.id in self.dependencies:
            raise CyclicDependencyError(
                f"Task '{self.id}' depends on itself: {self.id} -> {self.id}", [self.id]
            )
        # Collapse repeats, keeping first-seen order
        self.dependencies = tuple(dict.fromkeys(self.dependencies))

    @classmethod
    def from_spec(cls, spec: TaskSpec) -> Task:
        return cls(id=spec.id, duration=spec.duration, dependencies=spec.dependency_ids)

    @property
    def slack(self) -> int | None:
        """Latest start minus earliest start, or None until both passes ran."""
        if self.earliest is None or self.latest is None:
            return None
        return self.latest.start - self.earliest.start

    def clear_schedule(self) -> None:
        """Forget computed windows."""
        self.earliest = None
        self.latest = None


@dataclass
class Project:
    """An ordered arena of tasks.

    Tasks are addressed by their position in ``tasks``; ``_index`` maps IDs to
    positions. Dependency edges are kept as index tuples in both directions so
    forward and backward traversals never search the task list.
    """

    name: str = "Project"
    tasks: list[Task] = field(default_factory=list[Task])
    _index: dict[str, int] = field(default_factory=dict[str, int], repr=False)
    _dependencies: list[tuple[int, ...]] = field(default_factory=list[tuple[int, ...]], repr=False)
    _dependents: list[list[int]] = field(default_factory=list[list[int]], repr=False)
    _horizon_end: int | None = field(default=None, repr=False)

    def add_task(self, task: Task) -> Task:
        """Append a task whose dependencies are already in the project.

        Raises:
            DuplicateTaskIDError: If the ID is already taken
            UnknownDependencyError: If a dependency is not yet in the project
        """
        if task.id in self._index:
            raise DuplicateTaskIDError(f"Duplicate task ID: {task.id}")
        for dep_id in task.dependencies:
            if dep_id not in self._index:
                raise UnknownDependencyError(
                    f"Task '{task.id}' depends on unknown task '{dep_id}'"
                )
        self._append(task)
        self._link(len(self.tasks) - 1)
        return task

    @classmethod
    def from_specs(cls, specs: Iterable[TaskSpec], name: str = "Project") -> Project:
        """Build a project from descriptors that may reference later tasks.

        Cycles are accepted here and rejected by the topological sort.
        """
        project = cls(name=name)
        specs = list(specs)
        for spec in specs:
            if spec.id in project._index:
                raise DuplicateTaskIDError(f"Duplicate task ID: {spec.id}")
            project._append(Task.from_spec(spec))

        for task in project.tasks:
            for dep_id in task.dependencies:
                if dep_id not in project._index:
                    raise UnknownDependencyError(
                        f"Task '{task.id}' depends on unknown task '{dep_id}'"
                    )
        for position in range(len(project.tasks)):
            project._link(position)
        return project

    def _append(self, task: Task) -> None:
        self._index[task.id] = len(self.tasks)
        self.tasks.append(task)
        self._dependencies.append(())
        self._dependents.append([])

    def _link(self, position: int) -> None:
        dep_positions = tuple(self._index[dep_id] for dep_id in self.tasks[position].dependencies)
        self._dependencies[position] = dep_positions
        for dep_position in dep_positions:
            self._dependents[dep_position].append(position)

    # Lookup

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._index

    def index_of(self, task: Task | str) -> int:
        """Arena position of a task or task ID."""
        task_id = task if isinstance(task, str) else task.id
        try:
            return self._index[task_id]
        except KeyError:
            raise UnknownDependencyError(f"Unknown task '{task_id}'") from None

    def get_task(self, task_id: str) -> Task:
        return self.tasks[self.index_of(task_id)]

    def dependency_indices(self, position: int) -> tuple[int, ...]:
        return self._dependencies[position]

    def dependent_indices(self, position: int) -> list[int]:
        return self._dependents[position]

    def dependencies_of(self, task: Task | str) -> list[Task]:
        """Tasks that ``task`` depends on, in declaration order."""
        return [self.tasks[i] for i in self._dependencies[self.index_of(task)]]

    def dependents_of(self, task: Task | str) -> list[Task]:
        """Tasks whose dependency set contains ``task``, in graph order."""
        return [self.tasks[i] for i in self._dependents[self.index_of(task)]]

    def terminal_tasks(self) -> list[Task]:
        """Tasks nothing depends on; the endpoints of the schedule."""
        return [task for i, task in enumerate(self.tasks) if not self._dependents[i]]

    # Schedule state

    @property
    def horizon(self) -> TimeWindow:
        """``[0, max earliest.end]``; only defined after the forward pass."""
        if self._horizon_end is None:
            raise SchedulingError("Project horizon is undefined until the forward pass has run")
        return TimeWindow(0, self._horizon_end)

    def set_horizon_end(self, end: int) -> None:
        self._horizon_end = end

    @property
    def is_scheduled(self) -> bool:
        return self._horizon_end is not None and all(
            task.earliest is not None and task.latest is not None for task in self.tasks
        )

    def reset(self) -> None:
        """Clear every computed window so the graph can be scheduled again."""
        for task in self.tasks:
            task.clear_schedule()
        self._horizon_end = None
