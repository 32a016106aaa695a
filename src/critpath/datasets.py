"""Predefined task sets for demonstrations and tests."""

from __future__ import annotations

from .exceptions import UnknownDatasetError
from .models import Project, TaskSpec

# (id, duration, dependency ids) in declaration order
_DATASETS: dict[str, tuple[str, list[tuple[str, int, tuple[str, ...]]]]] = {
    "a": (
        "Twelve-task network",
        [
            ("A", 6, ()),
            ("B", 2, ()),
            ("C", 3, ()),
            ("D", 10, ("A",)),
            ("E", 3, ("A",)),
            ("F", 2, ("B",)),
            ("G", 4, ("C",)),
            ("H", 5, ("E",)),
            ("I", 8, ("F", "G")),
            ("J", 6, ("G",)),
            ("K", 4, ("I",)),
            ("L", 2, ("J",)),
        ],
    ),
    "b": (
        "Diamond network",
        [
            ("A", 10, ()),
            ("B", 4, ("A",)),
            ("C", 7, ("A",)),
            ("D", 5, ("C",)),
            ("E", 5, ("B", "D")),
            ("F", 3, ("C",)),
        ],
    ),
}


def dataset_names() -> list[str]:
    return sorted(_DATASETS)


def dataset_title(name: str) -> str:
    return _lookup(name)[0]


def dataset_specs(name: str) -> list[TaskSpec]:
    """Fresh task descriptors for a named dataset.

    Raises:
        UnknownDatasetError: If no dataset has that name
    """
    _, rows = _lookup(name)
    return [TaskSpec.create(task_id, duration, deps) for task_id, duration, deps in rows]


def load_dataset(name: str) -> Project:
    """Build a new, unscheduled project from a named dataset."""
    return Project.from_specs(dataset_specs(name), name=dataset_title(name))


def _lookup(name: str) -> tuple[str, list[tuple[str, int, tuple[str, ...]]]]:
    try:
        return _DATASETS[name.strip().lower()]
    except KeyError:
        raise UnknownDatasetError(
            f"Unknown dataset '{name}'. Available datasets: {', '.join(dataset_names())}"
        ) from None
