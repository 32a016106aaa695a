"""Pytest configuration and fixtures for critpath tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from critpath import context
from critpath.logger import reset_logger
from critpath.models import Project, TaskSpec
from critpath.scheduler.config import BackwardStrategy

TaskRows = list[tuple[str, int, tuple[str, ...]]]

LINEAR_CHAIN: TaskRows = [
    ("A", 6, ()),
    ("B", 4, ("A",)),
    ("C", 5, ("B",)),
]

DIAMOND: TaskRows = [
    ("A", 10, ()),
    ("B", 4, ("A",)),
    ("C", 7, ("A",)),
    ("D", 5, ("C",)),
    ("E", 5, ("B", "D")),
    ("F", 3, ("C",)),
]


def build_project(rows: TaskRows, name: str = "Test") -> Project:
    """Create a project from (id, duration, dependency ids) rows."""
    return Project.from_specs(
        [TaskSpec.create(task_id, duration, deps) for task_id, duration, deps in rows],
        name=name,
    )


def layered_rows(layers: int) -> TaskRows:
    """Two unit tasks per layer, each depending on both tasks of the layer before.

    Every task is critical and the number of critical chains is ``2 ** layers``.
    """
    rows: TaskRows = []
    previous: tuple[str, ...] = ()
    for layer in range(layers):
        ids = (f"L{layer}a", f"L{layer}b")
        rows.extend((task_id, 1, previous) for task_id in ids)
        previous = ids
    return rows


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    """Reset the logger and CLI context around every test."""
    reset_logger()
    context.set_config_path(None)
    yield
    reset_logger()
    context.set_config_path(None)


@pytest.fixture
def make_project() -> Callable[[TaskRows], Project]:
    """Factory for projects built from task rows."""
    return build_project


@pytest.fixture
def linear_project() -> Project:
    return build_project(LINEAR_CHAIN, name="Linear")


@pytest.fixture
def diamond_project() -> Project:
    return build_project(DIAMOND, name="Diamond")


@pytest.fixture(
    params=[BackwardStrategy.REVERSE_TOPOLOGICAL, BackwardStrategy.RELAXATION],
    ids=["reverse-topological", "relaxation"],
)
def strategy(request: pytest.FixtureRequest) -> BackwardStrategy:
    """Each backward pass strategy in turn."""
    return request.param  # type: ignore[return-value]
