"""Protocol definitions for the scheduling passes."""

from typing import Protocol

from ..models import Project
from .core import BackwardPassResult


class BackwardPass(Protocol):
    """Protocol for latest-window computation."""

    def run(self, project: Project, order: list[int], deadline: int) -> BackwardPassResult:
        """Assign ``latest`` to every task in ``project``.

        Args:
            project: Project whose forward pass has completed
            order: Topological order of arena indices
            deadline: Latest finish for terminal tasks

        Returns:
            BackwardPassResult describing the work done
        """
        ...
